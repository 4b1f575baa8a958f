"""
Debt service: the registry of debts and their running totals.

The payment service only reads titles from here. Totals and
status are recalculated after payments change, by whoever
committed the payment write.
"""

import logging
from datetime import date
from decimal import Decimal

from sqlalchemy import select, func
from sqlalchemy.orm import Session

from debt_ledger.exceptions import NotFoundError
from debt_ledger.models.debt import Debt
from debt_ledger.models.debt_payment import DebtPayment
from debt_ledger.models.enums import DebtStatus
from debt_ledger.schemas.debt import DebtCreate
from debt_ledger.services import reference_time

logger = logging.getLogger(__name__)


def evaluate_status(
    amount: Decimal,
    paid_total: Decimal,
    due_date: date | None,
    today: date,
) -> DebtStatus:
    """Derive a debt's status from what has been paid so far."""
    if paid_total >= amount:
        return DebtStatus.PAID
    if due_date is not None and due_date < today:
        return DebtStatus.OVERDUE
    return DebtStatus.ONGOING


class DebtService:

    def __init__(self, db: Session):
        self.db = db

    def create_debt(self, request: DebtCreate, actor: str) -> Debt:
        """Create a new debt with nothing paid yet."""
        debt = Debt(
            user_id=actor,
            type=request.type,
            party_name=request.party_name.strip(),
            title=request.title.strip() if request.title else None,
            amount=request.amount,
            due_date=request.due_date,
            paid_total=Decimal("0"),
            notes=request.notes,
        )
        debt.status = evaluate_status(
            debt.amount, debt.paid_total, debt.due_date, reference_time.today()
        )
        self.db.add(debt)
        self.db.flush()
        return debt

    def get_debt(self, debt_id: int, actor: str) -> Debt:
        debt = self.db.get(Debt, debt_id)
        if debt is None or debt.user_id != actor:
            raise NotFoundError("Debt", debt_id)
        return debt

    def get_title(self, debt_id: int, user_id: str | None = None) -> str | None:
        """Return the debt's title, or None if the debt is unknown or untitled."""
        query = select(Debt.title).where(Debt.id == debt_id)
        if user_id is not None:
            query = query.where(Debt.user_id == user_id)
        title = self.db.execute(query).scalar_one_or_none()
        if title is None or not title.strip():
            return None
        return title.strip()

    def recalculate_aggregates(self, debt_id: int, actor: str) -> Debt | None:
        """
        Recompute paid_total and status from the live payments.

        Returns None when the debt no longer exists.
        """
        debt = self.db.get(Debt, debt_id)
        if debt is None or debt.user_id != actor:
            return None

        paid_total = self.db.execute(
            select(func.coalesce(func.sum(DebtPayment.amount), 0)).where(
                DebtPayment.debt_id == debt_id,
                DebtPayment.user_id == actor,
                DebtPayment.revoked_at.is_(None),
            )
        ).scalar()

        debt.paid_total = Decimal(str(paid_total))
        debt.status = evaluate_status(
            debt.amount, debt.paid_total, debt.due_date, reference_time.today()
        )
        self.db.flush()
        logger.debug(
            "Debt %s paid_total=%s status=%s",
            debt.id, debt.paid_total, debt.status.value,
        )
        return debt

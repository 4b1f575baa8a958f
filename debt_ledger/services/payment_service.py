"""
Payment service: debt payments and their mirrored ledger entries.

Every payment owns exactly one expense entry in the ledger. This
service is the only writer of those entries:

1. record_payment inserts the entry and the payment together
2. amend_payment rewrites the entry in place (bumping revision,
   clearing any tombstone) when a mirrored field changed
3. revoke_payment tombstones the entry; it is never hard-deleted

The paired writes of each operation run inside a SAVEPOINT, so
either both sides change or neither does. The caller still owns
the outer transaction and decides when to commit.

record_payment is not idempotent. Retrying it after an ambiguous
failure records a second payment with a second entry.
"""

import logging
from decimal import Decimal, InvalidOperation

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from debt_ledger.config import get_settings
from debt_ledger.exceptions import (
    InvariantViolationError,
    NotFoundError,
    StorageError,
    ValidationError,
)
from debt_ledger.models.base import utcnow
from debt_ledger.models.debt_payment import DebtPayment
from debt_ledger.models.ledger_entry import LedgerEntry
from debt_ledger.schemas.ledger import LedgerEntryFields
from debt_ledger.schemas.payment import PaymentCreate, PaymentAmend
from debt_ledger.services import reference_time
from debt_ledger.services.debt_service import DebtService
from debt_ledger.services.description import build_description, normalize_note
from debt_ledger.services.ledger_service import LedgerService

logger = logging.getLogger(__name__)

AMOUNT_QUANTUM = Decimal("0.0001")


class PaymentService:
    """
    Records, amends and revokes debt payments.

    Takes a database session as a constructor argument; the
    caller controls the transaction boundary.
    """

    def __init__(self, db: Session):
        self.db = db
        self.ledger = LedgerService(db)
        self.debts = DebtService(db)

    def _resolve_title(self, debt_id: int, user_id: str) -> str:
        """Title for the description. A missing title never fails a payment."""
        title = self.debts.get_title(debt_id, user_id=user_id)
        if title is None:
            logger.warning(
                "Debt %s not found or untitled, using default title", debt_id
            )
            return get_settings().DEFAULT_DEBT_TITLE
        return title

    def _entry_fields(self, payment: DebtPayment) -> LedgerEntryFields:
        description = build_description(
            self._resolve_title(payment.debt_id, payment.user_id), payment.note
        )
        return LedgerEntryFields(
            amount=payment.amount,
            account_id=payment.account_id,
            date=payment.paid_at,
            description=description,
        )

    @staticmethod
    def _require_valid_amount(amount) -> None:
        """Amounts are stored with four decimal places and must stay positive."""
        if amount is None or amount <= 0:
            raise ValidationError(
                "amount must be positive",
                details={"amount": str(amount)},
            )
        try:
            exact = amount.quantize(AMOUNT_QUANTUM) == amount
        except InvalidOperation:
            exact = False
        if not exact:
            raise ValidationError(
                "amount must have at most 4 decimal places",
                details={"amount": str(amount)},
            )

    def record_payment(
        self, debt_id: int, request: PaymentCreate, actor: str
    ) -> DebtPayment:
        """
        Record a payment and create its mirrored ledger entry.

        Validation happens before any write. The entry insert and
        the payment insert share a savepoint.
        """
        if request.account_id is None:
            raise ValidationError("account_id is required for a debt payment")
        self._require_valid_amount(request.amount)

        paid_at = request.paid_at or reference_time.today()
        payment = DebtPayment(
            debt_id=debt_id,
            user_id=actor,
            account_id=request.account_id,
            amount=request.amount,
            paid_at=paid_at,
            date=reference_time.start_of_day_utc(paid_at),
            note=normalize_note(request.note),
        )
        fields = self._entry_fields(payment)

        try:
            with self.db.begin_nested():
                payment.related_entry_id = self.ledger.insert_entry(
                    fields, user_id=actor
                )
                self.db.add(payment)
                self.db.flush()
        except IntegrityError as e:
            raise StorageError(
                f"Payment could not be stored: {e.orig}", original=e
            ) from e

        logger.info(
            "Recorded payment %s for debt %s (entry %s, amount %s)",
            payment.id, debt_id, payment.related_entry_id, payment.amount,
        )
        return payment

    def amend_payment(
        self, payment_id: int, changes: PaymentAmend, actor: str
    ) -> DebtPayment:
        """
        Apply changes to a payment and keep its entry in step.

        Only fields present in the request are applied. When none
        of amount, account, date or note actually changes, the
        entry is left alone and its revision does not move. A
        revoked payment is always rewritten, which brings its
        entry back.
        """
        payment = self.get_payment(payment_id, actor)
        if payment.related_entry_id is None:
            logger.error(
                "Payment %s has no mirrored ledger entry", payment.id
            )
            raise InvariantViolationError(
                f"Payment {payment.id} has no mirrored ledger entry"
            )

        provided = changes.model_fields_set

        amount = payment.amount
        if "amount" in provided:
            self._require_valid_amount(changes.amount)
            amount = changes.amount

        account_id = payment.account_id
        if "account_id" in provided:
            if changes.account_id is None:
                raise ValidationError(
                    "account_id cannot be removed from a debt payment"
                )
            account_id = changes.account_id

        paid_at = payment.paid_at
        if "paid_at" in provided:
            paid_at = changes.paid_at or reference_time.today()

        note = payment.note
        if "note" in provided:
            note = normalize_note(changes.note)

        changed = (
            amount != payment.amount
            or account_id != payment.account_id
            or paid_at != payment.paid_at
            or (note or "") != (payment.note or "")
        )
        resurrect = payment.is_revoked

        try:
            with self.db.begin_nested():
                payment.amount = amount
                payment.account_id = account_id
                payment.paid_at = paid_at
                payment.note = note
                payment.date = reference_time.start_of_day_utc(paid_at)
                if changed or resurrect:
                    self.ledger.update_entry(
                        payment.related_entry_id,
                        self._entry_fields(payment),
                        restore=True,
                    )
                    payment.revoked_at = None
                self.db.flush()
        except NotFoundError as e:
            logger.error(
                "Payment %s points at missing ledger entry %s",
                payment_id, e.details.get("id"),
            )
            raise InvariantViolationError(
                f"Payment {payment_id} points at a missing ledger entry"
            ) from e
        except IntegrityError as e:
            raise StorageError(
                f"Payment could not be stored: {e.orig}", original=e
            ) from e

        if changed or resurrect:
            logger.info(
                "Amended payment %s (entry %s%s)",
                payment.id, payment.related_entry_id,
                ", restored" if resurrect else "",
            )
        else:
            logger.debug("Payment %s unchanged, entry not touched", payment.id)
        return payment

    def revoke_payment(self, payment_id: int, actor: str) -> None:
        """
        Revoke a payment and tombstone its entry.

        A payment whose entry is missing can still be revoked.
        Revoking twice does nothing the second time.
        """
        payment = self.get_payment(payment_id, actor)
        if payment.is_revoked:
            logger.debug("Payment %s already revoked", payment.id)
            return

        with self.db.begin_nested():
            if payment.related_entry_id is None:
                logger.warning(
                    "Revoking payment %s without a mirrored entry", payment.id
                )
            else:
                try:
                    self.ledger.soft_delete_entry(payment.related_entry_id)
                except NotFoundError:
                    logger.warning(
                        "Mirrored entry %s of payment %s is missing",
                        payment.related_entry_id, payment.id,
                    )
            payment.revoked_at = utcnow()
            self.db.flush()

        logger.info(
            "Revoked payment %s (entry %s)",
            payment.id, payment.related_entry_id,
        )

    def get_payment(self, payment_id: int, actor: str) -> DebtPayment:
        """Get a payment by ID, revoked or not."""
        payment = self.db.get(DebtPayment, payment_id)
        if payment is None or payment.user_id != actor:
            raise NotFoundError("Payment", payment_id)
        return payment

    def list_payments(
        self, debt_id: int, actor: str, include_revoked: bool = False
    ) -> list[DebtPayment]:
        """Return a debt's payments, newest first."""
        query = select(DebtPayment).where(
            DebtPayment.debt_id == debt_id,
            DebtPayment.user_id == actor,
        )
        if not include_revoked:
            query = query.where(DebtPayment.revoked_at.is_(None))
        payments = self.db.execute(
            query.order_by(DebtPayment.paid_at.desc(), DebtPayment.id.desc())
        ).scalars().all()
        return list(payments)

    def check_mirror(self, payment: DebtPayment) -> list[str]:
        """
        Compare a payment with its entry.

        Returns a description of every mismatch; an empty list
        means the pair is consistent.
        """
        if payment.related_entry_id is None:
            return ["payment has no related entry"]

        problems = []
        owners = self.db.execute(
            select(DebtPayment.id).where(
                DebtPayment.related_entry_id == payment.related_entry_id
            )
        ).scalars().all()
        if list(owners) != [payment.id]:
            problems.append(
                f"entry {payment.related_entry_id} is shared by payments {list(owners)}"
            )

        entry = self.db.get(LedgerEntry, payment.related_entry_id)
        if entry is None:
            return problems + [f"entry {payment.related_entry_id} does not exist"]

        if entry.amount != payment.amount:
            problems.append(f"amount {entry.amount} != {payment.amount}")
        if entry.account_id != payment.account_id:
            problems.append(
                f"account_id {entry.account_id} != {payment.account_id}"
            )
        if entry.date != payment.paid_at:
            problems.append(f"date {entry.date} != {payment.paid_at}")
        if not payment.is_revoked and entry.deleted_at is not None:
            problems.append("entry is tombstoned but payment is live")
        if payment.is_revoked and entry.deleted_at is None:
            problems.append("payment is revoked but entry is live")
        return problems

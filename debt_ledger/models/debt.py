"""
Debt model.

An outstanding obligation (or a receivable owed to the user).
Payments reference a debt by id; the title is what ends up in
the description of the mirrored ledger entry.
"""

from datetime import date, datetime
from decimal import Decimal

from sqlalchemy import (
    String, Date, DateTime, Numeric, Text,
    Enum as SAEnum,
)
from sqlalchemy.orm import Mapped, mapped_column

from debt_ledger.models.base import Base, utcnow
from debt_ledger.models.enums import DebtType, DebtStatus


class Debt(Base):
    __tablename__ = "debts"

    id: Mapped[int] = mapped_column(primary_key=True)
    user_id: Mapped[str] = mapped_column(
        String(64), nullable=False, index=True
    )
    type: Mapped[DebtType] = mapped_column(
        SAEnum(
            DebtType,
            name="debt_type_enum",
            values_callable=lambda e: [m.value for m in e],
            create_constraint=True,
        ),
        nullable=False,
        default=DebtType.DEBT,
    )
    party_name: Mapped[str] = mapped_column(
        String(100), nullable=False, default=""
    )
    title: Mapped[str | None] = mapped_column(String(150), nullable=True)
    amount: Mapped[Decimal] = mapped_column(
        Numeric(19, 4), nullable=False
    )
    due_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    paid_total: Mapped[Decimal] = mapped_column(
        Numeric(19, 4), nullable=False, default=Decimal("0")
    )
    status: Mapped[DebtStatus] = mapped_column(
        SAEnum(
            DebtStatus,
            name="debt_status_enum",
            values_callable=lambda e: [m.value for m in e],
            create_constraint=True,
        ),
        nullable=False,
        default=DebtStatus.ONGOING,
    )
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, default=utcnow
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, default=utcnow, onupdate=utcnow
    )

    @property
    def remaining(self) -> Decimal:
        return max(self.amount - self.paid_total, Decimal("0"))

    def __repr__(self) -> str:
        return f"<Debt {self.id} {self.title!r} ({self.status.value})>"

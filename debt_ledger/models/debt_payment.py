"""
Debt payment model.

Money applied against a debt. Every payment is mirrored by exactly
one expense ledger entry, referenced through related_entry_id.
The unique constraint on that column is what stops two payments
from ever claiming the same entry.
"""

import datetime as dt
from decimal import Decimal

from sqlalchemy import (
    String, Date, DateTime, Numeric, Text, ForeignKey,
)
from sqlalchemy.orm import Mapped, mapped_column

from debt_ledger.models.base import Base, utcnow


class DebtPayment(Base):
    __tablename__ = "debt_payments"

    id: Mapped[int] = mapped_column(primary_key=True)
    # The debt registry is a collaborator; a payment keeps its
    # debt_id even when the debt row is gone.
    debt_id: Mapped[int] = mapped_column(nullable=False, index=True)
    user_id: Mapped[str] = mapped_column(
        String(64), nullable=False, index=True
    )
    account_id: Mapped[int] = mapped_column(
        ForeignKey("accounts.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )
    amount: Mapped[Decimal] = mapped_column(
        Numeric(19, 4), nullable=False
    )
    paid_at: Mapped[dt.date] = mapped_column(Date, nullable=False)
    # paid_at as an instant: midnight in the reference timezone, stored in UTC
    date: Mapped[dt.datetime] = mapped_column(DateTime, nullable=False)
    note: Mapped[str | None] = mapped_column(Text, nullable=True)
    related_entry_id: Mapped[int | None] = mapped_column(
        ForeignKey("ledger_entries.id"),
        unique=True,
        nullable=True,
    )
    revoked_at: Mapped[dt.datetime | None] = mapped_column(
        DateTime, nullable=True, default=None
    )
    created_at: Mapped[dt.datetime] = mapped_column(
        DateTime, nullable=False, default=utcnow
    )
    updated_at: Mapped[dt.datetime] = mapped_column(
        DateTime, nullable=False, default=utcnow, onupdate=utcnow
    )

    @property
    def is_revoked(self) -> bool:
        return self.revoked_at is not None

    def __repr__(self) -> str:
        return (
            f"<DebtPayment {self.id} debt={self.debt_id} "
            f"{self.amount} entry={self.related_entry_id}>"
        )

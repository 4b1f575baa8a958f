"""
Ledger entry model.

A general-purpose income/expense transaction. Entries that mirror
a debt payment are written only by the payment service. They are
never hard-deleted: deleted_at is a tombstone and revision is
bumped on every mutation so readers can spot concurrent changes.
"""

import datetime as dt
from decimal import Decimal

from sqlalchemy import (
    String, Date, DateTime, Integer, Numeric, ForeignKey,
    Enum as SAEnum,
)
from sqlalchemy.orm import Mapped, mapped_column

from debt_ledger.models.base import Base, utcnow
from debt_ledger.models.enums import EntryType


class LedgerEntry(Base):
    """
    A single income or expense record.

    note, notes and title are separate display fields in the
    ledger. Mirrored entries keep all three identical.
    """

    __tablename__ = "ledger_entries"

    id: Mapped[int] = mapped_column(primary_key=True)
    user_id: Mapped[str] = mapped_column(
        String(64), nullable=False, index=True
    )
    entry_type: Mapped[EntryType] = mapped_column(
        SAEnum(
            EntryType,
            name="entry_type_enum",
            values_callable=lambda e: [m.value for m in e],
        ),
        nullable=False,
        default=EntryType.EXPENSE,
    )
    amount: Mapped[Decimal] = mapped_column(
        Numeric(19, 4), nullable=False
    )
    account_id: Mapped[int] = mapped_column(
        ForeignKey("accounts.id"), nullable=False, index=True
    )
    date: Mapped[dt.date] = mapped_column(Date, nullable=False)
    note: Mapped[str | None] = mapped_column(String(255), nullable=True)
    notes: Mapped[str | None] = mapped_column(String(255), nullable=True)
    title: Mapped[str | None] = mapped_column(String(255), nullable=True)
    deleted_at: Mapped[dt.datetime | None] = mapped_column(
        DateTime, nullable=True, default=None
    )
    revision: Mapped[int] = mapped_column(
        Integer, nullable=False, default=1
    )
    created_at: Mapped[dt.datetime] = mapped_column(
        DateTime, nullable=False, default=utcnow
    )
    updated_at: Mapped[dt.datetime] = mapped_column(
        DateTime, nullable=False, default=utcnow
    )

    def __repr__(self) -> str:
        return (
            f"<LedgerEntry {self.id} {self.entry_type.value} "
            f"{self.amount} rev={self.revision}>"
        )

"""
Ledger service: the store for income and expense entries.

Entries are never hard-deleted. Removing an entry sets its
deleted_at tombstone, and every mutation bumps revision so that
readers can tell an entry changed underneath them.

The service only flushes. The caller owns the transaction
boundary and decides when to commit or roll back.
"""

import logging
from decimal import Decimal

from sqlalchemy import select, func
from sqlalchemy.orm import Session

from debt_ledger.exceptions import NotFoundError
from debt_ledger.models.base import utcnow
from debt_ledger.models.enums import EntryType
from debt_ledger.models.ledger_entry import LedgerEntry
from debt_ledger.schemas.ledger import LedgerEntryFields

logger = logging.getLogger(__name__)


class LedgerService:

    def __init__(self, db: Session):
        self.db = db

    def _load(self, entry_id: int) -> LedgerEntry:
        entry = self.db.get(LedgerEntry, entry_id)
        if entry is None:
            raise NotFoundError("Ledger entry", entry_id)
        return entry

    def insert_entry(self, fields: LedgerEntryFields, user_id: str) -> int:
        """Insert a new entry at revision 1 and return its id."""
        now = utcnow()
        entry = LedgerEntry(
            user_id=user_id,
            entry_type=fields.entry_type,
            amount=fields.amount,
            account_id=fields.account_id,
            date=fields.date,
            note=fields.description,
            notes=fields.description,
            title=fields.description,
            revision=1,
            created_at=now,
            updated_at=now,
        )
        self.db.add(entry)
        self.db.flush()
        logger.debug("Inserted ledger entry %s", entry.id)
        return entry.id

    def update_entry(
        self,
        entry_id: int,
        fields: LedgerEntryFields,
        restore: bool = False,
    ) -> None:
        """
        Overwrite an entry's derived fields and bump its revision.

        restore=True also clears the deleted_at tombstone.
        """
        entry = self._load(entry_id)
        entry.entry_type = fields.entry_type
        entry.amount = fields.amount
        entry.account_id = fields.account_id
        entry.date = fields.date
        entry.note = fields.description
        entry.notes = fields.description
        entry.title = fields.description
        if restore:
            entry.deleted_at = None
        entry.updated_at = utcnow()
        entry.revision = (entry.revision or 0) + 1
        self.db.flush()

    def soft_delete_entry(self, entry_id: int) -> None:
        """Tombstone an entry. The row stays for audit history."""
        entry = self._load(entry_id)
        now = utcnow()
        entry.deleted_at = now
        entry.updated_at = now
        entry.revision = (entry.revision or 0) + 1
        self.db.flush()

    def get_entry(self, entry_id: int, user_id: str | None = None) -> LedgerEntry:
        """Get an entry by ID, tombstoned or not."""
        entry = self._load(entry_id)
        if user_id is not None and entry.user_id != user_id:
            raise NotFoundError("Ledger entry", entry_id)
        return entry

    def list_entries(
        self, user_id: str, include_deleted: bool = False
    ) -> list[LedgerEntry]:
        """Return an actor's entries, newest first."""
        query = select(LedgerEntry).where(LedgerEntry.user_id == user_id)
        if not include_deleted:
            query = query.where(LedgerEntry.deleted_at.is_(None))
        entries = self.db.execute(
            query.order_by(LedgerEntry.date.desc(), LedgerEntry.id.desc())
        ).scalars().all()
        return list(entries)

    def get_account_spending(self, account_id: int) -> Decimal:
        """
        Sum the live expense entries posted against an account.

        Tombstoned entries are excluded, which is how a revoked
        payment drops out of the account's totals.
        """
        total = self.db.execute(
            select(func.coalesce(func.sum(LedgerEntry.amount), 0)).where(
                LedgerEntry.account_id == account_id,
                LedgerEntry.entry_type == EntryType.EXPENSE,
                LedgerEntry.deleted_at.is_(None),
            )
        ).scalar()
        return Decimal(str(total))

"""
Pydantic schemas for ledger entries.

LedgerEntryFields is the field set the payment service hands to
the ledger store. It is not an API request body: clients never
write mirrored entries themselves.
"""

from datetime import date, datetime
from decimal import Decimal

from pydantic import BaseModel

from debt_ledger.models.enums import EntryType


class LedgerEntryFields(BaseModel):
    """Values derived from a payment for its mirrored entry."""
    amount: Decimal
    account_id: int
    date: date
    description: str
    entry_type: EntryType = EntryType.EXPENSE


class LedgerEntryResponse(BaseModel):
    id: int
    user_id: str
    entry_type: EntryType
    amount: Decimal
    account_id: int
    date: date
    note: str | None
    notes: str | None
    title: str | None
    deleted_at: datetime | None
    revision: int
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class AccountSpendingResponse(BaseModel):
    """Total of live expense entries posted against an account."""
    account_id: int
    total_expense: Decimal

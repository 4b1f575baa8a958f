"""
Database models package.

All models must be imported here so that Alembic can discover
them through Base.metadata when generating migrations.
"""

from debt_ledger.models.base import Base
from debt_ledger.models.enums import (
    DebtType,
    DebtStatus,
    EntryType,
)
from debt_ledger.models.account import Account
from debt_ledger.models.debt import Debt
from debt_ledger.models.ledger_entry import LedgerEntry
from debt_ledger.models.debt_payment import DebtPayment

__all__ = [
    "Base",
    "DebtType",
    "DebtStatus",
    "EntryType",
    "Account",
    "Debt",
    "LedgerEntry",
    "DebtPayment",
]

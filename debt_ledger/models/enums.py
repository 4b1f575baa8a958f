"""
Shared enumerations for database models.

Using Python enums mapped to database enums ensures that
only valid values can be stored.
"""

import enum


class DebtType(str, enum.Enum):
    """Which side of the obligation the user is on."""
    DEBT = "debt"
    RECEIVABLE = "receivable"


class DebtStatus(str, enum.Enum):
    ONGOING = "ongoing"
    PAID = "paid"
    OVERDUE = "overdue"


class EntryType(str, enum.Enum):
    """
    Direction of a ledger entry.

    Payment mirrors are always expenses. Income entries are written
    by other parts of the ledger and only read here.
    """
    INCOME = "income"
    EXPENSE = "expense"

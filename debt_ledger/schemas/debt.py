"""
Pydantic schemas for debt operations.
"""

from datetime import date, datetime
from decimal import Decimal

from pydantic import BaseModel, Field

from debt_ledger.models.enums import DebtType, DebtStatus


class DebtCreate(BaseModel):
    type: DebtType = DebtType.DEBT
    party_name: str = Field(default="", max_length=100)
    title: str | None = Field(default=None, max_length=150)
    amount: Decimal = Field(gt=0, decimal_places=4)
    due_date: date | None = None
    notes: str | None = None


class DebtResponse(BaseModel):
    id: int
    user_id: str
    type: DebtType
    party_name: str
    title: str | None
    amount: Decimal
    due_date: date | None
    paid_total: Decimal
    remaining: Decimal
    status: DebtStatus
    notes: str | None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}

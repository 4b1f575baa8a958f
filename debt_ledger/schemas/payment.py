"""
Pydantic schemas for debt payments.

account_id and amount are deliberately loose here. Whether a
payment is acceptable is decided by PaymentService, which raises
a ValidationError before touching the database.
"""

from datetime import date, datetime
from decimal import Decimal

from pydantic import BaseModel, Field


class PaymentCreate(BaseModel):
    account_id: int | None = None
    amount: Decimal
    paid_at: date | None = None
    note: str | None = Field(default=None, max_length=500)


class PaymentAmend(BaseModel):
    """
    Partial update of a payment.

    Only the fields the client actually sent are applied, so an
    explicit null can be told apart from an omitted field.
    """
    amount: Decimal | None = None
    account_id: int | None = None
    paid_at: date | None = None
    note: str | None = Field(default=None, max_length=500)


class PaymentResponse(BaseModel):
    id: int
    debt_id: int
    user_id: str
    account_id: int
    amount: Decimal
    paid_at: date
    note: str | None
    related_entry_id: int | None
    revoked_at: datetime | None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}

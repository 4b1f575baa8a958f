"""
Pydantic schemas for account operations.
"""

from datetime import datetime

from pydantic import BaseModel, Field


class AccountCreate(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    type: str | None = Field(default=None, max_length=30)


class AccountResponse(BaseModel):
    id: int
    user_id: str
    name: str
    type: str | None
    created_at: datetime

    model_config = {"from_attributes": True}

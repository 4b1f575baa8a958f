"""
Account API endpoints.
"""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from debt_ledger.api.dependencies import get_actor
from debt_ledger.exceptions import DebtLedgerError
from debt_ledger.models.base import get_db
from debt_ledger.services.account_service import AccountService
from debt_ledger.schemas.account import AccountCreate, AccountResponse

router = APIRouter(prefix="/accounts", tags=["Accounts"])


@router.post("", response_model=AccountResponse, status_code=201)
def create_account(
    request: AccountCreate,
    actor: str = Depends(get_actor),
    db: Session = Depends(get_db),
):
    """Create an account payments can be drawn from."""
    service = AccountService(db)
    account = service.create_account(request, actor)
    db.commit()
    return account


@router.get("/{account_id}", response_model=AccountResponse)
def get_account(
    account_id: int,
    actor: str = Depends(get_actor),
    db: Session = Depends(get_db),
):
    """Get account details."""
    service = AccountService(db)
    try:
        return service.get_account(account_id, actor)
    except DebtLedgerError as e:
        raise HTTPException(status_code=e.status_code, detail=e.public_message)

"""
Ledger API endpoints.

Read-only. Entries mirroring debt payments are written by the
payment service and must not be edited through any other path.
"""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from debt_ledger.api.dependencies import get_actor
from debt_ledger.exceptions import DebtLedgerError
from debt_ledger.models.base import get_db
from debt_ledger.services.account_service import AccountService
from debt_ledger.services.ledger_service import LedgerService
from debt_ledger.schemas.ledger import (
    LedgerEntryResponse,
    AccountSpendingResponse,
)

router = APIRouter(prefix="/ledger", tags=["Ledger"])


@router.get("/entries", response_model=list[LedgerEntryResponse])
def list_entries(
    include_deleted: bool = False,
    actor: str = Depends(get_actor),
    db: Session = Depends(get_db),
):
    """List the actor's entries, newest first."""
    service = LedgerService(db)
    return service.list_entries(actor, include_deleted=include_deleted)


@router.get("/entries/{entry_id}", response_model=LedgerEntryResponse)
def get_entry(
    entry_id: int,
    actor: str = Depends(get_actor),
    db: Session = Depends(get_db),
):
    """Get a single entry, including tombstoned ones."""
    service = LedgerService(db)
    try:
        return service.get_entry(entry_id, user_id=actor)
    except DebtLedgerError as e:
        raise HTTPException(status_code=e.status_code, detail=e.public_message)


@router.get(
    "/accounts/{account_id}/spending",
    response_model=AccountSpendingResponse,
)
def get_account_spending(
    account_id: int,
    actor: str = Depends(get_actor),
    db: Session = Depends(get_db),
):
    """
    Total of live expenses posted against an account.

    Tombstoned entries are not counted.
    """
    try:
        AccountService(db).get_account(account_id, actor)
    except DebtLedgerError as e:
        raise HTTPException(status_code=e.status_code, detail=e.public_message)

    total = LedgerService(db).get_account_spending(account_id)
    return AccountSpendingResponse(account_id=account_id, total_expense=total)

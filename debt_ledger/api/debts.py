"""
Debt API endpoints.

Payments against a debt live in payments.py.
"""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from debt_ledger.api.dependencies import get_actor
from debt_ledger.exceptions import DebtLedgerError
from debt_ledger.models.base import get_db
from debt_ledger.services.debt_service import DebtService
from debt_ledger.schemas.debt import DebtCreate, DebtResponse

router = APIRouter(prefix="/debts", tags=["Debts"])


@router.post("", response_model=DebtResponse, status_code=201)
def create_debt(
    request: DebtCreate,
    actor: str = Depends(get_actor),
    db: Session = Depends(get_db),
):
    """Create a new debt."""
    service = DebtService(db)
    debt = service.create_debt(request, actor)
    db.commit()
    return debt


@router.get("/{debt_id}", response_model=DebtResponse)
def get_debt(
    debt_id: int,
    actor: str = Depends(get_actor),
    db: Session = Depends(get_db),
):
    """Get a debt with its running totals."""
    service = DebtService(db)
    try:
        return service.get_debt(debt_id, actor)
    except DebtLedgerError as e:
        raise HTTPException(status_code=e.status_code, detail=e.public_message)

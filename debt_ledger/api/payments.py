"""
Debt payment API endpoints.

The API layer is thin: it owns the commit and maps service errors
to status codes. Mirrored ledger entries are handled entirely by
PaymentService; there is no endpoint that writes them directly.
"""

from fastapi import APIRouter, Depends, HTTPException, Response
from sqlalchemy.orm import Session

from debt_ledger.api.dependencies import get_actor
from debt_ledger.exceptions import DebtLedgerError
from debt_ledger.models.base import get_db
from debt_ledger.services.debt_service import DebtService
from debt_ledger.services.payment_service import PaymentService
from debt_ledger.schemas.payment import (
    PaymentCreate,
    PaymentAmend,
    PaymentResponse,
)

router = APIRouter(tags=["Payments"])


@router.post(
    "/debts/{debt_id}/payments",
    response_model=PaymentResponse,
    status_code=201,
)
def record_payment(
    debt_id: int,
    request: PaymentCreate,
    actor: str = Depends(get_actor),
    db: Session = Depends(get_db),
):
    """
    Record a payment against a debt.

    Creates the payment and its expense entry in one commit.
    Not safe to retry blindly: a retry records a second payment.
    """
    service = PaymentService(db)
    try:
        payment = service.record_payment(debt_id, request, actor)
        DebtService(db).recalculate_aggregates(debt_id, actor)
        db.commit()
        return payment
    except DebtLedgerError as e:
        db.rollback()
        raise HTTPException(status_code=e.status_code, detail=e.public_message)


@router.get(
    "/debts/{debt_id}/payments",
    response_model=list[PaymentResponse],
)
def list_payments(
    debt_id: int,
    include_revoked: bool = False,
    actor: str = Depends(get_actor),
    db: Session = Depends(get_db),
):
    """List a debt's payments, newest first."""
    service = PaymentService(db)
    return service.list_payments(debt_id, actor, include_revoked=include_revoked)


@router.get("/payments/{payment_id}", response_model=PaymentResponse)
def get_payment(
    payment_id: int,
    actor: str = Depends(get_actor),
    db: Session = Depends(get_db),
):
    """Get payment details."""
    service = PaymentService(db)
    try:
        return service.get_payment(payment_id, actor)
    except DebtLedgerError as e:
        raise HTTPException(status_code=e.status_code, detail=e.public_message)


@router.patch("/payments/{payment_id}", response_model=PaymentResponse)
def amend_payment(
    payment_id: int,
    changes: PaymentAmend,
    actor: str = Depends(get_actor),
    db: Session = Depends(get_db),
):
    """Change a payment's amount, account, date or note."""
    service = PaymentService(db)
    try:
        payment = service.amend_payment(payment_id, changes, actor)
        DebtService(db).recalculate_aggregates(payment.debt_id, actor)
        db.commit()
        return payment
    except DebtLedgerError as e:
        db.rollback()
        raise HTTPException(status_code=e.status_code, detail=e.public_message)


@router.delete("/payments/{payment_id}", status_code=204)
def revoke_payment(
    payment_id: int,
    actor: str = Depends(get_actor),
    db: Session = Depends(get_db),
):
    """Revoke a payment. Its ledger entry is tombstoned, not deleted."""
    service = PaymentService(db)
    try:
        debt_id = service.get_payment(payment_id, actor).debt_id
        service.revoke_payment(payment_id, actor)
        DebtService(db).recalculate_aggregates(debt_id, actor)
        db.commit()
    except DebtLedgerError as e:
        db.rollback()
        raise HTTPException(status_code=e.status_code, detail=e.public_message)
    return Response(status_code=204)

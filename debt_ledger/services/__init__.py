"""Business logic services."""

from debt_ledger.services.ledger_service import LedgerService
from debt_ledger.services.account_service import AccountService
from debt_ledger.services.debt_service import DebtService
from debt_ledger.services.payment_service import PaymentService

__all__ = ["LedgerService", "AccountService", "DebtService", "PaymentService"]

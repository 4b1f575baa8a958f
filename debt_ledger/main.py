"""
Debt Ledger: FastAPI application.

This is the entry point for the application.
All routers are registered here.
"""

from fastapi import FastAPI

from debt_ledger.config import get_settings
from debt_ledger.logging_config import configure_logging
from debt_ledger.api.health import router as health_router
from debt_ledger.api.accounts import router as accounts_router
from debt_ledger.api.debts import router as debts_router
from debt_ledger.api.payments import router as payments_router
from debt_ledger.api.ledger import router as ledger_router

settings = get_settings()
configure_logging(settings.LOG_LEVEL)

app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Debt payments mirrored into the expense ledger",
)

# Register routers
app.include_router(health_router)
app.include_router(accounts_router)
app.include_router(debts_router)
app.include_router(payments_router)
app.include_router(ledger_router)

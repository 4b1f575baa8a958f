"""
Typed errors raised by the payment services.

Each error carries the HTTP status the API layer answers with
and a message that is safe to show to clients.
"""

from typing import Any


class DebtLedgerError(Exception):
    """Base class for every error the services raise on purpose."""

    status_code: int = 500

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)

    @property
    def public_message(self) -> str:
        return self.message


class ValidationError(DebtLedgerError):
    """The request is missing a required value or carries an invalid one."""

    status_code = 422


class NotFoundError(DebtLedgerError):
    """The referenced record does not exist for this actor."""

    status_code = 404

    def __init__(self, resource: str, resource_id: Any = None):
        message = f"{resource} not found"
        if resource_id is not None:
            message = f"{resource} {resource_id} not found"
        super().__init__(
            message, details={"resource": resource, "id": resource_id}
        )


class InvariantViolationError(DebtLedgerError):
    """
    Stored state that the write path should never produce.

    The detail is logged, never returned to the client.
    """

    status_code = 500

    @property
    def public_message(self) -> str:
        return "Internal server error"


class StorageError(DebtLedgerError):
    """The database rejected a write (constraint violation)."""

    status_code = 409

    def __init__(self, message: str, original: Exception | None = None):
        self.original = original
        super().__init__(message)

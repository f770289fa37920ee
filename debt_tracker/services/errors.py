"""Ledger error types and the uniform mutation result."""

from dataclasses import dataclass
from typing import Any, Optional


class AppError(Exception):
    """Base application error."""

    def __init__(self, message: str, code: str):
        """Initialize error."""
        self.message = message
        self.code = code
        super().__init__(message)


class UnauthorizedError(AppError):
    """No caller identity could be resolved."""

    def __init__(self, message: str = "Unauthorized"):
        super().__init__(message, "unauthorized")


class NotFoundError(AppError):
    """User record, debt or payment is missing or not owned by the caller."""

    def __init__(self, message: str = "Not found"):
        super().__init__(message, "not_found")


class ValidationError(AppError):
    """Missing required field, malformed number or date, out of range value."""

    def __init__(self, message: str = "Invalid input"):
        super().__init__(message, "validation_error")


class StoreError(AppError):
    """Underlying persistence failure."""

    def __init__(self, message: str = "Database error"):
        super().__init__(message, "store_error")


@dataclass
class MutationResult:
    """Outcome of a write operation.

    Write operations never raise ledger errors to their caller; callers
    check ``success`` and read ``error`` on failure.
    """

    success: bool
    debt: Optional[Any] = None
    payment: Optional[Any] = None
    error: Optional[str] = None
    code: Optional[str] = None

    @classmethod
    def failed(cls, error: AppError) -> "MutationResult":
        return cls(success=False, error=error.message, code=error.code)


__all__ = [
    "AppError",
    "UnauthorizedError",
    "NotFoundError",
    "ValidationError",
    "StoreError",
    "MutationResult",
]

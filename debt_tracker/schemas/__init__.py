"""Pydantic schemas for debt tracker responses."""

from debt_tracker.schemas.debt import (
    DebtPaymentResponse,
    DebtResponse,
    MutationResponse,
    ReceiptResponse,
)

__all__ = ["DebtResponse", "DebtPaymentResponse", "ReceiptResponse", "MutationResponse"]

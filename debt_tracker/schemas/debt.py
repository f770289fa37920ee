"""Pydantic schemas for debts, debt payments and mutation results."""

from datetime import date, datetime
from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from debt_tracker.services.errors import MutationResult


class DebtPaymentResponse(BaseModel):
    """Response schema for one payment."""

    id: int
    debt_id: int
    user_id: int
    amount: Decimal
    payment_date: date
    description: str | None = None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class ReceiptResponse(BaseModel):
    """Response schema for a receipt linked to a debt."""

    id: int
    debt_id: int | None = None
    file_url: str
    merchant: str | None = None
    amount: Decimal | None = None
    receipt_date: date | None = None

    model_config = ConfigDict(from_attributes=True)


class DebtResponse(BaseModel):
    """Response schema for a debt with its payments and receipts."""

    id: int
    user_id: int
    name: str
    debt_type: str = Field(..., serialization_alias="type")
    total_amount: Decimal
    current_balance: Decimal
    interest_rate: Decimal | None = None
    min_payment: Decimal | None = None
    due_date: date | None = None
    description: str | None = None
    status: str
    created_at: datetime
    updated_at: datetime
    payments: list[DebtPaymentResponse] = []
    receipts: list[ReceiptResponse] = []

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)


class MutationResponse(BaseModel):
    """Uniform write result: success flag plus entity or error message."""

    success: bool
    error: str | None = None
    code: str | None = None
    debt: DebtResponse | None = None
    payment: DebtPaymentResponse | None = None

    @classmethod
    def from_result(cls, result: MutationResult) -> "MutationResponse":
        return cls(
            success=result.success,
            error=result.error,
            code=result.code,
            debt=DebtResponse.model_validate(result.debt) if result.debt is not None else None,
            payment=(
                DebtPaymentResponse.model_validate(result.payment)
                if result.payment is not None
                else None
            ),
        )


def dump_debt(debt: Any) -> dict[str, Any]:
    """Serialize a Debt ORM object to a JSON-ready dict."""
    return DebtResponse.model_validate(debt).model_dump(mode="json", by_alias=True)


__all__ = [
    "DebtPaymentResponse",
    "ReceiptResponse",
    "DebtResponse",
    "MutationResponse",
    "dump_debt",
]

"""Derived values for the tracker, recomputed from state on every render."""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any, Iterable, Optional

from babel.numbers import format_currency as babel_format_currency

from debt_tracker.models.debt import DebtStatus, DebtType
from debt_tracker.view.state import Debt, DebtTrackerState

DEBT_TYPE_LABELS = {
    DebtType.CREDIT_CARD.value: "Credit Card",
    DebtType.PERSONAL_LOAN.value: "Personal Loan",
    DebtType.HOME_LOAN.value: "Home Loan",
    DebtType.CAR_LOAN.value: "Car Loan",
    DebtType.EDUCATION_LOAN.value: "Education Loan",
    DebtType.EMI.value: "EMI",
    DebtType.OTHER.value: "Other",
}

DEBT_STATUS_LABELS = {
    DebtStatus.ACTIVE.value: "Active",
    DebtStatus.PAID_OFF.value: "Paid Off",
    DebtStatus.OVERDUE.value: "Overdue",
    DebtStatus.PAUSED.value: "Paused",
}

HUNDRED = Decimal("100")


def to_decimal(value: Any) -> Decimal:
    """Money value from a serialized debt (string, number or Decimal); 0 if unusable."""
    if value is None:
        return Decimal("0")
    try:
        result = Decimal(str(value))
    except InvalidOperation:
        return Decimal("0")
    return result if result.is_finite() else Decimal("0")


def total_debt(debts: Iterable[Debt]) -> Decimal:
    """Sum of current balances."""
    return sum((to_decimal(d.get("current_balance")) for d in debts), Decimal("0"))


def total_original(debts: Iterable[Debt]) -> Decimal:
    """Sum of original principals."""
    return sum((to_decimal(d.get("total_amount")) for d in debts), Decimal("0"))


def total_paid(debts: Iterable[Debt]) -> Decimal:
    """Sum of original totals minus sum of current balances."""
    debts = list(debts)
    return total_original(debts) - total_debt(debts)


def active_count(debts: Iterable[Debt]) -> int:
    return sum(1 for d in debts if d.get("status") == DebtStatus.ACTIVE.value)


def progress_percent(debt: Debt) -> Decimal:
    """Paid share of the principal: (total - current) / total * 100.

    A zero total has no meaningful progress and yields 0.
    """
    total = to_decimal(debt.get("total_amount"))
    if total == 0:
        return Decimal("0")
    paid = total - to_decimal(debt.get("current_balance"))
    return paid / total * HUNDRED


def format_currency(amount: Any, currency: str = "INR", locale: str = "en_IN") -> str:
    """Format a money amount for display, e.g. ``₹10,000.00``."""
    return babel_format_currency(to_decimal(amount), currency, locale=locale)


def type_label(debt_type: Optional[str]) -> str:
    return DEBT_TYPE_LABELS.get(debt_type or "", debt_type or "")


def status_label(status: Optional[str]) -> str:
    return DEBT_STATUS_LABELS.get(status or "", status or "")


@dataclass(frozen=True)
class DebtSummary:
    """Summary cards shown above the debt list."""

    total_debt: Decimal
    total_paid: Decimal
    active_debts: int


def summarize(state: DebtTrackerState) -> DebtSummary:
    return DebtSummary(
        total_debt=total_debt(state.debts),
        total_paid=total_paid(state.debts),
        active_debts=active_count(state.debts),
    )


__all__ = [
    "DEBT_TYPE_LABELS",
    "DEBT_STATUS_LABELS",
    "to_decimal",
    "total_debt",
    "total_original",
    "total_paid",
    "active_count",
    "progress_percent",
    "format_currency",
    "type_label",
    "status_label",
    "DebtSummary",
    "summarize",
]

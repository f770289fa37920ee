"""Local state of the debt tracker view."""

from dataclasses import dataclass, field
from typing import Any, Iterable, Optional

Debt = dict[str, Any]

# Form keys used for the pending (in-flight) guard
ADD_FORM = "add"
EDIT_FORM = "edit"
PAYMENT_FORM = "payment"


def delete_form(debt_id: Any) -> str:
    return f"delete:{debt_id}"


@dataclass(frozen=True)
class DebtTrackerState:
    """Immutable snapshot of everything the tracker renders.

    Attributes:
        debts: Debts in display order (newest first)
        show_add_form: Add-debt form is open
        editing_debt_id: Debt whose edit form is open
        payment_form_debt_id: Debt whose payment form is open
        pending: Form keys with a command in flight
        error: Last user-visible error message
    """

    debts: tuple[Debt, ...] = ()
    show_add_form: bool = False
    editing_debt_id: Optional[Any] = None
    payment_form_debt_id: Optional[Any] = None
    pending: frozenset[str] = field(default_factory=frozenset)
    error: Optional[str] = None

    def find(self, debt_id: Any) -> Optional[Debt]:
        for debt in self.debts:
            if debt.get("id") == debt_id:
                return debt
        return None

    def is_pending(self, form_key: str) -> bool:
        return form_key in self.pending


def initial_state(initial_debts: Iterable[Debt] = ()) -> DebtTrackerState:
    """Seed state from the page-load snapshot."""
    return DebtTrackerState(debts=tuple(initial_debts))


__all__ = [
    "Debt",
    "DebtTrackerState",
    "initial_state",
    "ADD_FORM",
    "EDIT_FORM",
    "PAYMENT_FORM",
    "delete_form",
]

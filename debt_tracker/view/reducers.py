"""Pure reducers: (state, event or command result) -> new state.

Command results are the ledger's mutation payloads:
``{"success": bool, "error": str | None, "debt": dict | None, "payment": dict | None}``.
"""

from dataclasses import replace
from typing import Any, Mapping, Optional

from debt_tracker.view.state import (
    ADD_FORM,
    EDIT_FORM,
    PAYMENT_FORM,
    Debt,
    DebtTrackerState,
    delete_form,
)

Result = Mapping[str, Any]


def _failure(state: DebtTrackerState, form_key: str, action: str, result: Result) -> DebtTrackerState:
    message = result.get("error") or "Unknown error"
    return replace(state, pending=state.pending - {form_key}, error=f"Error {action}: {message}")


def _replace_debt(debts: tuple[Debt, ...], debt_id: Any, debt: Debt) -> tuple[Debt, ...]:
    return tuple(debt if existing.get("id") == debt_id else existing for existing in debts)


def open_add_form(state: DebtTrackerState) -> DebtTrackerState:
    return replace(state, show_add_form=True, error=None)


def close_add_form(state: DebtTrackerState) -> DebtTrackerState:
    return replace(state, show_add_form=False)


def start_edit(state: DebtTrackerState, debt_id: Any) -> DebtTrackerState:
    return replace(state, editing_debt_id=debt_id, error=None)


def cancel_edit(state: DebtTrackerState) -> DebtTrackerState:
    return replace(state, editing_debt_id=None)


def open_payment_form(state: DebtTrackerState, debt_id: Any) -> DebtTrackerState:
    return replace(state, payment_form_debt_id=debt_id, error=None)


def close_payment_form(state: DebtTrackerState) -> DebtTrackerState:
    return replace(state, payment_form_debt_id=None)


def dismiss_error(state: DebtTrackerState) -> DebtTrackerState:
    return replace(state, error=None)


def begin(state: DebtTrackerState, form_key: str) -> DebtTrackerState:
    """Mark a form as having a command in flight."""
    return replace(state, pending=state.pending | {form_key})


def end(state: DebtTrackerState, form_key: str) -> DebtTrackerState:
    """Clear the in-flight mark without touching anything else."""
    return replace(state, pending=state.pending - {form_key})


def debt_created(state: DebtTrackerState, result: Result) -> DebtTrackerState:
    """Prepend the created debt and close the add form."""
    if not result.get("success"):
        return _failure(state, ADD_FORM, "creating debt", result)
    return replace(
        state,
        debts=(result["debt"],) + state.debts,
        show_add_form=False,
        pending=state.pending - {ADD_FORM},
        error=None,
    )


def debt_updated(state: DebtTrackerState, debt_id: Any, result: Result) -> DebtTrackerState:
    """Replace the edited debt by id and close the edit form."""
    if not result.get("success"):
        return _failure(state, EDIT_FORM, "updating debt", result)
    return replace(
        state,
        debts=_replace_debt(state.debts, debt_id, result["debt"]),
        editing_debt_id=None,
        pending=state.pending - {EDIT_FORM},
        error=None,
    )


def debt_deleted(state: DebtTrackerState, debt_id: Any, result: Result) -> DebtTrackerState:
    """Remove the deleted debt by id."""
    key = delete_form(debt_id)
    if not result.get("success"):
        return _failure(state, key, "deleting debt", result)
    return replace(
        state,
        debts=tuple(debt for debt in state.debts if debt.get("id") != debt_id),
        editing_debt_id=None if state.editing_debt_id == debt_id else state.editing_debt_id,
        payment_form_debt_id=(
            None if state.payment_form_debt_id == debt_id else state.payment_form_debt_id
        ),
        pending=state.pending - {key},
        error=None,
    )


def payment_recorded(state: DebtTrackerState, result: Result) -> DebtTrackerState:
    """Reconcile the debt returned with a recorded payment and close the form.

    The returned debt carries the decremented balance and any status change;
    the new payment is put first in its payments list when the returned debt
    does not already include it.
    """
    if not result.get("success"):
        return _failure(state, PAYMENT_FORM, "adding payment", result)

    debt: Optional[Debt] = result.get("debt")
    debts = state.debts
    if debt is not None:
        payment = result.get("payment")
        payments = list(debt.get("payments") or [])
        if payment is not None and all(p.get("id") != payment.get("id") for p in payments):
            payments.insert(0, payment)
        debts = _replace_debt(debts, debt.get("id"), dict(debt, payments=payments))

    return replace(
        state,
        debts=debts,
        payment_form_debt_id=None,
        pending=state.pending - {PAYMENT_FORM},
        error=None,
    )


def debts_loaded(state: DebtTrackerState, debts: list[Debt]) -> DebtTrackerState:
    """Replace the whole collection with a fresh snapshot."""
    return replace(state, debts=tuple(debts))


def edit_form_values(debt: Debt) -> dict[str, str]:
    """Field values that pre-populate the edit form for ``debt``."""

    def text(key: str) -> str:
        value = debt.get(key)
        return "" if value is None else str(value)

    return {
        "name": text("name"),
        "type": text("type"),
        "totalAmount": text("total_amount"),
        "currentBalance": text("current_balance"),
        "interestRate": text("interest_rate"),
        "minPayment": text("min_payment"),
        "dueDate": text("due_date"),
        "description": text("description"),
        "status": text("status"),
    }

"""Debt tracker controller.

Holds the current DebtTrackerState, dispatches each user command to the
ledger client as one awaited unit and folds the result back in with a
reducer. A form with a command in flight ignores further submissions.
"""

import inspect
import logging
from typing import Any, Awaitable, Callable, Iterable, Mapping, Optional, Union

from debt_tracker.view import reducers
from debt_tracker.view.client import LedgerClient
from debt_tracker.view.state import (
    ADD_FORM,
    EDIT_FORM,
    PAYMENT_FORM,
    Debt,
    DebtTrackerState,
    delete_form,
    initial_state,
)
from debt_tracker.view.summary import DebtSummary, summarize

logger = logging.getLogger(__name__)

Confirm = Callable[[str], Union[bool, Awaitable[bool]]]
Alert = Callable[[str], Any]

DELETE_CONFIRMATION = "Are you sure you want to delete this debt?"


async def _maybe_await(value: Any) -> Any:
    if inspect.isawaitable(value):
        return await value
    return value


class DebtTracker:
    """Client-side state holder mirroring the caller's debts."""

    def __init__(
        self,
        client: LedgerClient,
        confirm: Confirm,
        initial_debts: Iterable[Debt] = (),
        alert: Optional[Alert] = None,
    ):
        """Initialize the tracker.

        Args:
            client: Ledger client issuing the commands
            confirm: Asks the user to confirm a destructive action
            initial_debts: Snapshot from the page loader
            alert: Shows a blocking error message to the user
        """
        self.client = client
        self.confirm = confirm
        self.alert = alert
        self.state: DebtTrackerState = initial_state(initial_debts)

    @property
    def debts(self) -> tuple[Debt, ...]:
        return self.state.debts

    @property
    def summary(self) -> DebtSummary:
        return summarize(self.state)

    async def _dispatch(
        self,
        form_key: str,
        command: Callable[[], Awaitable[Mapping[str, Any]]],
        reduce: Callable[[DebtTrackerState, Mapping[str, Any]], DebtTrackerState],
    ) -> Optional[Mapping[str, Any]]:
        if self.state.is_pending(form_key):
            logger.warning("Ignoring duplicate submission of %s form", form_key)
            return None

        self.state = reducers.begin(self.state, form_key)
        try:
            result = await command()
        except BaseException:
            self.state = reducers.end(self.state, form_key)
            raise

        self.state = reduce(self.state, result)
        if not result.get("success") and self.state.error:
            if self.alert is not None:
                await _maybe_await(self.alert(self.state.error))
        return result

    # Form toggles

    def open_add_form(self) -> None:
        self.state = reducers.open_add_form(self.state)

    def close_add_form(self) -> None:
        self.state = reducers.close_add_form(self.state)

    def start_edit(self, debt_id: Any) -> dict[str, str]:
        """Open the edit form and return its pre-populated values."""
        debt = self.state.find(debt_id)
        if debt is None:
            raise KeyError(debt_id)
        self.state = reducers.start_edit(self.state, debt_id)
        return reducers.edit_form_values(debt)

    def cancel_edit(self) -> None:
        self.state = reducers.cancel_edit(self.state)

    def open_payment_form(self, debt_id: Any) -> None:
        self.state = reducers.open_payment_form(self.state, debt_id)

    def close_payment_form(self) -> None:
        self.state = reducers.close_payment_form(self.state)

    # Commands

    async def add_debt(self, form: Mapping[str, Any]) -> Optional[Mapping[str, Any]]:
        """Create a debt; on success it is prepended and the add form closes."""
        return await self._dispatch(
            ADD_FORM,
            lambda: self.client.create_debt(form),
            reducers.debt_created,
        )

    async def update_debt(self, form: Mapping[str, Any]) -> Optional[Mapping[str, Any]]:
        """Submit the edit form for the debt being edited."""
        debt_id = self.state.editing_debt_id
        if debt_id is None:
            raise RuntimeError("No debt is being edited")
        return await self._dispatch(
            EDIT_FORM,
            lambda: self.client.update_debt(debt_id, form),
            lambda state, result: reducers.debt_updated(state, debt_id, result),
        )

    async def delete_debt(self, debt_id: Any) -> Optional[Mapping[str, Any]]:
        """Delete a debt after explicit confirmation; declined returns None."""
        if not await _maybe_await(self.confirm(DELETE_CONFIRMATION)):
            return None
        return await self._dispatch(
            delete_form(debt_id),
            lambda: self.client.delete_debt(debt_id),
            lambda state, result: reducers.debt_deleted(state, debt_id, result),
        )

    async def add_payment(self, form: Mapping[str, Any]) -> Optional[Mapping[str, Any]]:
        """Record a payment against the debt whose payment form is open."""
        debt_id = self.state.payment_form_debt_id
        if debt_id is None:
            raise RuntimeError("No payment form is open")
        payload = dict(form, debtId=debt_id)
        return await self._dispatch(
            PAYMENT_FORM,
            lambda: self.client.create_debt_payment(payload),
            reducers.payment_recorded,
        )

    async def reload(self) -> None:
        """Replace local debts with a fresh list from the ledger."""
        debts = await self.client.get_debts()
        self.state = reducers.debts_loaded(self.state, debts)


__all__ = ["DebtTracker", "DELETE_CONFIRMATION"]

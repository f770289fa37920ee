"""Debt tracker view model: state, reducers, derived values and controller."""

from debt_tracker.view.client import HttpLedgerClient, LedgerClient
from debt_tracker.view.state import DebtTrackerState, initial_state
from debt_tracker.view.summary import DebtSummary, summarize
from debt_tracker.view.tracker import DebtTracker

__all__ = [
    "DebtTracker",
    "DebtTrackerState",
    "DebtSummary",
    "HttpLedgerClient",
    "LedgerClient",
    "initial_state",
    "summarize",
]

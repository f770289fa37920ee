"""Debt tracker: personal debt ledger service and tracker view model."""

__version__ = "0.1.0"

"""Services for the debt ledger."""

from debt_tracker.services.db import get_db, get_engine, get_session_factory

__all__ = ["get_db", "get_engine", "get_session_factory"]

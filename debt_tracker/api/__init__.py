"""HTTP API for the debt ledger."""

"""Unit tests for derived tracker values."""

from decimal import Decimal

from debt_tracker.view.state import initial_state
from debt_tracker.view.summary import (
    active_count,
    format_currency,
    progress_percent,
    status_label,
    summarize,
    to_decimal,
    total_debt,
    total_paid,
    type_label,
)

DEBTS = [
    {"id": 1, "total_amount": "10000.00", "current_balance": "2500.00", "status": "ACTIVE"},
    {"id": 2, "total_amount": "5000.00", "current_balance": "0.00", "status": "PAID_OFF"},
    {"id": 3, "total_amount": "1200.50", "current_balance": "1200.50", "status": "ACTIVE"},
    {"id": 4, "total_amount": "3000", "current_balance": "1000", "status": "OVERDUE"},
]


class TestTotals:
    """Summary card values."""

    def test_total_debt(self):
        assert total_debt(DEBTS) == Decimal("4700.50")

    def test_total_paid(self):
        # (10000 + 5000 + 1200.50 + 3000) - 4700.50
        assert total_paid(DEBTS) == Decimal("14500.00")

    def test_active_count(self):
        assert active_count(DEBTS) == 2

    def test_empty(self):
        assert total_debt([]) == Decimal("0")
        assert total_paid([]) == Decimal("0")
        assert active_count([]) == 0

    def test_summarize_state(self):
        summary = summarize(initial_state(DEBTS))

        assert summary.total_debt == Decimal("4700.50")
        assert summary.total_paid == Decimal("14500.00")
        assert summary.active_debts == 2

    def test_no_float_drift(self):
        debts = [{"total_amount": "0.30", "current_balance": "0.10"} for _ in range(10)]

        assert total_paid(debts) == Decimal("2.00")


class TestProgress:
    """Per-debt paid percentage."""

    def test_partial(self):
        assert progress_percent(DEBTS[0]) == Decimal("75")

    def test_paid_off(self):
        assert progress_percent(DEBTS[1]) == Decimal("100")

    def test_untouched(self):
        assert progress_percent(DEBTS[2]) == Decimal("0")

    def test_zero_total(self):
        assert progress_percent({"total_amount": "0", "current_balance": "0"}) == Decimal("0")


class TestFormatting:
    """Labels and currency formatting."""

    def test_format_inr(self):
        formatted = format_currency("10000")

        assert "₹" in formatted
        assert "10,000.00" in formatted

    def test_format_indian_grouping(self):
        assert "12,34,567.00" in format_currency(Decimal("1234567"))

    def test_labels(self):
        assert type_label("EDUCATION_LOAN") == "Education Loan"
        assert type_label("EMI") == "EMI"
        assert status_label("PAID_OFF") == "Paid Off"
        assert status_label("UNKNOWN") == "UNKNOWN"

    def test_to_decimal_tolerates_bad_values(self):
        assert to_decimal(None) == Decimal("0")
        assert to_decimal("n/a") == Decimal("0")
        assert to_decimal(12.5) == Decimal("12.5")

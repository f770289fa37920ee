"""Unit tests for form field parsers."""

from datetime import date
from decimal import Decimal

import pytest

from debt_tracker.models import DebtStatus, DebtType
from debt_tracker.services.errors import ValidationError
from debt_tracker.services.parsers import (
    get_field,
    parse_date_field,
    parse_decimal_field,
    parse_enum_field,
    parse_id,
    parse_id_field,
    parse_text_field,
)


class TestGetField:
    """Field lookup by camelCase or snake_case name."""

    def test_camel_case(self):
        assert get_field({"totalAmount": " 100 "}, "totalAmount") == "100"

    def test_snake_case_fallback(self):
        assert get_field({"total_amount": "100"}, "totalAmount") == "100"

    def test_blank_is_none(self):
        assert get_field({"description": "   "}, "description") is None

    def test_numbers_are_stringified(self):
        assert get_field({"amount": 250}, "amount") == "250"


class TestParseDecimalField:
    """Money parsing."""

    def test_plain_number(self):
        assert parse_decimal_field({"amount": "1500"}, "amount") == Decimal("1500.00")

    def test_thousands_separators(self):
        assert parse_decimal_field({"amount": "1,00,000.5"}, "amount") == Decimal("100000.50")

    def test_rounds_to_cents(self):
        assert parse_decimal_field({"amount": "10.005"}, "amount") == Decimal("10.01")

    def test_optional_missing(self):
        assert parse_decimal_field({}, "minPayment", required=False) is None

    def test_required_missing(self):
        with pytest.raises(ValidationError, match="amount is required"):
            parse_decimal_field({}, "amount")

    @pytest.mark.parametrize("raw", ["abc", "12a", "1.2.3", "NaN", "Infinity", "-inf"])
    def test_malformed(self, raw):
        with pytest.raises(ValidationError, match="amount must be a number"):
            parse_decimal_field({"amount": raw}, "amount")

    @pytest.mark.parametrize("raw", ["1e30", "99999999999999999999999999999", "10000000000", "-1e10"])
    def test_out_of_range(self, raw):
        with pytest.raises(ValidationError, match="amount is out of range"):
            parse_decimal_field({"amount": raw}, "amount")

    def test_largest_amount_fitting_the_column(self):
        assert parse_decimal_field({"amount": "9999999999.99"}, "amount") == Decimal(
            "9999999999.99"
        )

    def test_rounding_up_to_the_limit_is_out_of_range(self):
        with pytest.raises(ValidationError, match="out of range"):
            parse_decimal_field({"amount": "9999999999.995"}, "amount")

    def test_custom_limit(self):
        assert parse_decimal_field({"rate": "99.5"}, "rate", limit=Decimal("100")) == Decimal(
            "99.50"
        )
        with pytest.raises(ValidationError, match="rate is out of range"):
            parse_decimal_field({"rate": "100"}, "rate", limit=Decimal("100"))

    def test_negative_rejected(self):
        with pytest.raises(ValidationError, match="must not be negative"):
            parse_decimal_field({"currentBalance": "-1"}, "currentBalance")

    def test_zero_allowed_unless_strictly_positive(self):
        assert parse_decimal_field({"currentBalance": "0"}, "currentBalance") == Decimal("0")
        with pytest.raises(ValidationError, match="greater than zero"):
            parse_decimal_field({"amount": "0"}, "amount", strictly_positive=True)

    def test_error_code(self):
        with pytest.raises(ValidationError) as exc_info:
            parse_decimal_field({"amount": "x"}, "amount")
        assert exc_info.value.code == "validation_error"


class TestParseDateField:
    """Date parsing."""

    def test_iso_date(self):
        assert parse_date_field({"dueDate": "2025-11-30"}, "dueDate") == date(2025, 11, 30)

    def test_iso_timestamp(self):
        value = parse_date_field({"paymentDate": "2025-11-30T10:15:00Z"}, "paymentDate")
        assert value == date(2025, 11, 30)

    def test_optional_missing(self):
        assert parse_date_field({"dueDate": ""}, "dueDate", required=False) is None

    def test_invalid(self):
        with pytest.raises(ValidationError, match="YYYY-MM-DD"):
            parse_date_field({"dueDate": "30.11.2025"}, "dueDate")


class TestParseEnumField:
    """Enum parsing."""

    def test_case_insensitive(self):
        assert parse_enum_field({"type": "credit_card"}, "type", DebtType) is DebtType.CREDIT_CARD

    def test_default(self):
        assert parse_enum_field({}, "status", DebtStatus, default=DebtStatus.ACTIVE) is DebtStatus.ACTIVE

    def test_missing_without_default(self):
        with pytest.raises(ValidationError, match="type is required"):
            parse_enum_field({}, "type", DebtType)

    def test_unknown_lists_allowed_values(self):
        with pytest.raises(ValidationError, match="ACTIVE, PAID_OFF, OVERDUE, PAUSED"):
            parse_enum_field({"status": "closed"}, "status", DebtStatus)


class TestParseIds:
    """Identifier parsing."""

    def test_form_id(self):
        assert parse_id_field({"debtId": "42"}, "debtId") == 42

    def test_form_id_missing(self):
        with pytest.raises(ValidationError, match="debtId is required"):
            parse_id_field({}, "debtId")

    @pytest.mark.parametrize("raw", ["abc", "0", "-3", "1.5"])
    def test_invalid_ids(self, raw):
        with pytest.raises(ValidationError, match="must be an integer"):
            parse_id(raw, "debtId")

    def test_text_required(self):
        with pytest.raises(ValidationError, match="name is required"):
            parse_text_field({"name": " "}, "name", required=True)

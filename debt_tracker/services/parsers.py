"""Form field parsing for ledger operations.

Form submissions arrive as loosely typed key/value text. These helpers turn
them into typed values and raise ValidationError instead of coercing bad
input into a placeholder.

Example:
    >>> parse_decimal_field({"totalAmount": "10,000.50"}, "totalAmount")
    Decimal('10000.50')

    >>> parse_date_field({"dueDate": "2025-11-30"}, "dueDate", required=False)
    datetime.date(2025, 11, 30)

    >>> parse_decimal_field({"amount": "abc"}, "amount")
    Traceback (most recent call last):
    ...
    debt_tracker.services.errors.ValidationError: amount must be a number
"""

import re
from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from enum import Enum
from typing import Any, Mapping, Optional, Type, TypeVar

from debt_tracker.services.errors import ValidationError

E = TypeVar("E", bound=Enum)

CENTS = Decimal("0.01")

# Numeric(12, 2) holds at most ten integer digits
MAX_AMOUNT = Decimal("1e10")


def _snake_case(name: str) -> str:
    return re.sub(r"(?<!^)(?=[A-Z])", "_", name).lower()


def get_field(form: Mapping[str, Any], name: str) -> Optional[str]:
    """Read a form field by its camelCase name, falling back to snake_case.

    Args:
        form: Submitted fields
        name: Field name as sent by the tracker forms (e.g. "totalAmount")

    Returns:
        Stripped string value, or None when absent or blank
    """
    value = form.get(name)
    if value is None:
        value = form.get(_snake_case(name))
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def parse_text_field(
    form: Mapping[str, Any], name: str, required: bool = False
) -> Optional[str]:
    """Parse a free text field."""
    value = get_field(form, name)
    if value is None and required:
        raise ValidationError(f"{name} is required")
    return value


def parse_decimal_field(
    form: Mapping[str, Any],
    name: str,
    required: bool = True,
    minimum: Decimal = Decimal("0"),
    strictly_positive: bool = False,
    limit: Decimal = MAX_AMOUNT,
) -> Optional[Decimal]:
    """Parse a money or percentage field into a Decimal rounded to cents.

    Thousands separators (commas, spaces) are ignored.

    Args:
        form: Submitted fields
        name: Field name
        required: Raise when the field is absent
        minimum: Smallest accepted value (inclusive)
        strictly_positive: Reject values equal to zero
        limit: Values whose magnitude reaches this are out of range

    Returns:
        Decimal value, or None for an absent optional field

    Raises:
        ValidationError: If the value is missing, not a finite number or out of range
    """
    raw = get_field(form, name)
    if raw is None:
        if required:
            raise ValidationError(f"{name} is required")
        return None

    normalized = raw.replace(",", "").replace(" ", "").replace("\xa0", "")
    try:
        value = Decimal(normalized)
    except InvalidOperation as e:
        raise ValidationError(f"{name} must be a number") from e

    if not value.is_finite():
        raise ValidationError(f"{name} must be a number")
    try:
        value = value.quantize(CENTS, rounding=ROUND_HALF_UP)
    except InvalidOperation as e:
        raise ValidationError(f"{name} is out of range") from e
    if value.copy_abs() >= limit:
        raise ValidationError(f"{name} is out of range")
    if strictly_positive and value <= 0:
        raise ValidationError(f"{name} must be greater than zero")
    if value < minimum:
        raise ValidationError(f"{name} must not be negative")
    return value


def parse_date_field(
    form: Mapping[str, Any], name: str, required: bool = True
) -> Optional[date]:
    """Parse an ISO date (YYYY-MM-DD); a full ISO timestamp is truncated to its date."""
    raw = get_field(form, name)
    if raw is None:
        if required:
            raise ValidationError(f"{name} is required")
        return None

    try:
        return date.fromisoformat(raw)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(raw.replace("Z", "+00:00")).date()
    except ValueError as e:
        raise ValidationError(f"{name} must be a date in YYYY-MM-DD format") from e


def parse_enum_field(
    form: Mapping[str, Any],
    name: str,
    enum_cls: Type[E],
    default: Optional[E] = None,
) -> E:
    """Parse an enum member by value (case-insensitive).

    Raises:
        ValidationError: If the field is missing without a default, or unknown
    """
    raw = get_field(form, name)
    if raw is None:
        if default is None:
            raise ValidationError(f"{name} is required")
        return default

    try:
        return enum_cls(raw.upper())
    except ValueError as e:
        allowed = ", ".join(member.value for member in enum_cls)
        raise ValidationError(f"{name} must be one of: {allowed}") from e


def parse_id_field(form: Mapping[str, Any], name: str) -> int:
    """Parse a required integer identifier."""
    raw = get_field(form, name)
    if raw is None:
        raise ValidationError(f"{name} is required")
    return parse_id(raw, name)


def parse_id(value: Any, name: str = "id") -> int:
    """Coerce a path or form identifier to a positive int."""
    try:
        parsed = int(str(value).strip())
    except ValueError as e:
        raise ValidationError(f"{name} must be an integer") from e
    if parsed <= 0:
        raise ValidationError(f"{name} must be an integer")
    return parsed


__all__ = [
    "get_field",
    "parse_text_field",
    "parse_decimal_field",
    "parse_date_field",
    "parse_enum_field",
    "parse_id_field",
    "parse_id",
]

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Any, Optional

from ..core.enums import Month
from ..core.exceptions import ValidationError

MIN_YEAR = 1900
MAX_YEAR = 9999


def require_non_negative(value: Any, field_name: str, *, default: Optional[Decimal] = Decimal("0")) -> Decimal:
    """Coerce an amount to Decimal and reject negatives.

    Floats go through str() so 0.1 stays 0.1 instead of its binary expansion.
    """

    if value is None or (isinstance(value, str) and not value.strip()):
        if default is None:
            raise ValidationError(f"{field_name} is required")
        return default
    if isinstance(value, bool):
        raise ValidationError(f"{field_name} must be a number")
    try:
        amount = value if isinstance(value, Decimal) else Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        raise ValidationError(f"{field_name} must be a number")
    if not amount.is_finite():
        raise ValidationError(f"{field_name} must be a number")
    if amount < 0:
        raise ValidationError(f"{field_name} cannot be negative")
    return amount


def require_month(value: Any) -> Month:
    try:
        return Month.parse(value)
    except ValueError:
        raise ValidationError(f"Invalid month: {value!r}")


def _whole_number(value: Any) -> int:
    """int() without truncation: bools and fractional numbers are refused."""

    if isinstance(value, bool):
        raise ValueError(f"not a whole number: {value!r}")
    if isinstance(value, (float, Decimal)) and value != int(value):
        raise ValueError(f"not a whole number: {value!r}")
    return int(value)


def require_year(value: Any) -> int:
    try:
        year = _whole_number(value)
    except (TypeError, ValueError, OverflowError, InvalidOperation):
        raise ValidationError(f"Invalid year: {value!r}")
    if not MIN_YEAR <= year <= MAX_YEAR:
        raise ValidationError(f"Invalid year: {value!r}")
    return year


def require_positive_int(value: Any, field_name: str) -> int:
    try:
        number = _whole_number(value)
    except (TypeError, ValueError, OverflowError, InvalidOperation):
        raise ValidationError(f"{field_name} is invalid")
    if number <= 0:
        raise ValidationError(f"{field_name} is invalid")
    return number

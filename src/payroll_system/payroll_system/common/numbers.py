from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Union


def as_number(value: Any) -> Union[int, float, Any]:
    """JSON-friendly amount: whole Decimals become int, the rest float."""

    if isinstance(value, Decimal):
        if value == value.to_integral_value():
            return int(value)
        return float(value)
    return value


def numbers_in(payload: dict) -> dict:
    """Apply as_number to every Decimal in a (nested) dict."""

    out = {}
    for key, value in payload.items():
        if isinstance(value, dict):
            out[key] = numbers_in(value)
        else:
            out[key] = as_number(value)
    return out


def to_scale(value: Decimal, scale: Decimal) -> Decimal:
    return Decimal(value).quantize(scale, rounding=ROUND_HALF_UP)

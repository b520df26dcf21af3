"""
Common validation utilities for tool inputs.
"""

import math
from decimal import Decimal
from numbers import Real
from typing import Any, Union

from loan_mcp.errors import ValidationError

Number = Union[int, float]


def _require_number(field: str, value: Any) -> Number:
    """
    Coerce a numeric input to int (when integral) or float.
    """
    if value is None:
        raise ValidationError(field, "required", value, message=f"{field} is required")
    # bool is an int subclass but never a valid amount
    if isinstance(value, bool) or not isinstance(value, (Real, Decimal)):
        raise ValidationError(field, "a number", value)
    if isinstance(value, int):
        return value
    # signaling NaN refuses float conversion, so check Decimals natively
    if isinstance(value, Decimal) and not value.is_finite():
        raise ValidationError(field, "a finite number", value)
    if not math.isfinite(value):
        raise ValidationError(field, "a finite number", value)
    if value == int(value):
        return int(value)
    return float(value)


def _check_range(field: str, value: Number, minimum: Number, maximum: Number) -> None:
    if value < minimum:
        raise ValidationError(field, f">= {minimum}", value)
    if value > maximum:
        raise ValidationError(field, f"<= {maximum}", value)


def validate_amount(field: str, value: Any, minimum: Number, maximum: Number) -> Number:
    """
    Validate a numeric field inside a closed range.
    """
    number = _require_number(field, value)
    _check_range(field, number, minimum, maximum)
    return number


def validate_whole_number(field: str, value: Any, minimum: int, maximum: int) -> int:
    """
    Validate an integral field inside a closed range. Fractional values are rejected,
    never truncated.
    """
    number = _require_number(field, value)
    if not isinstance(number, int):
        raise ValidationError(field, "an integer", value)
    _check_range(field, number, minimum, maximum)
    return number

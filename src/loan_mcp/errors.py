"""
Errors raised by the EMI engine and the loan reference store.
"""

import math
from typing import Any, Dict, Iterable, Optional


def _jsonable(value: Any) -> Any:
    if value is None or isinstance(value, (bool, int, str)):
        return value
    if isinstance(value, float) and math.isfinite(value):
        return value
    return repr(value)


class LoanToolError(Exception):
    """Base class for recoverable tool errors surfaced to the caller."""

    kind = "tool_error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> Dict[str, Any]:
        return {"status": "error", "error": self.kind, "message": self.message}


class ValidationError(LoanToolError):
    """An input field is missing, malformed or outside its bound."""

    kind = "validation_error"

    def __init__(self, field: str, bound: str, value: Any = None, message: Optional[str] = None):
        self.field = field
        self.bound = bound
        self.value = value
        super().__init__(message or f"{field} must be {bound} (got {value!r})")

    def to_dict(self) -> Dict[str, Any]:
        payload = super().to_dict()
        payload.update({"field": self.field, "bound": self.bound, "value": _jsonable(self.value)})
        return payload


class NotFoundError(LoanToolError):
    """Requested loan info category does not exist."""

    kind = "not_found"

    def __init__(self, category: Any, valid: Iterable[str] = ()):
        self.category = category
        self.valid = list(valid)
        message = f"unknown loan info category: {category!r}"
        if self.valid:
            message += f" (expected one of: {', '.join(self.valid)})"
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        payload = super().to_dict()
        payload.update({"category": _jsonable(self.category), "valid_categories": self.valid})
        return payload

from __future__ import annotations

import re

from ..core.exceptions import ValidationError

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")


def require_non_empty(value: object, field_name: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field_name} is missing")
    return value.strip()


def require_int(value: object, field_name: str) -> int:
    """Parse an ASCII decimal integer token; never falls back to zero."""
    text = require_non_empty(value, field_name)
    if not _INT_PATTERN.fullmatch(text):
        raise ValidationError(f"{field_name} is not an integer: {text!r}")
    return int(text)


def require_in_range(value: int, field_name: str, low: int, high: int) -> int:
    if value < low or value > high:
        raise ValidationError(f"{field_name} must be between {low} and {high}, got {value}")
    return value

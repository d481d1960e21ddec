from __future__ import annotations

from ..core.exceptions import ValidationError


def require_non_empty(value, field_name: str) -> str:
    if value is None or not str(value).strip():
        raise ValidationError(f"{field_name} is required")
    return str(value).strip()


def require_non_negative(value, field_name: str) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be a number")
    if number < 0:
        raise ValidationError(f"{field_name} must not be negative")
    return number


def require_positive(value, field_name: str) -> float:
    number = require_non_negative(value, field_name)
    if number == 0:
        raise ValidationError(f"{field_name} must be greater than 0")
    return number


def optional_number(value, field_name: str):
    if value is None or value == "":
        return None
    return require_non_negative(value, field_name)

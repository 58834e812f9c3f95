from __future__ import annotations

from ..core.constants import PIN_LENGTH
from ..core.exceptions import ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required.")
    return value.strip()


def is_valid_pin(pin: str) -> bool:
    return isinstance(pin, str) and len(pin) == PIN_LENGTH and pin.isascii() and pin.isdigit()


def require_pin(pin: str) -> str:
    if not is_valid_pin(pin):
        raise ValidationError(f"PIN must be exactly {PIN_LENGTH} digits.")
    return pin


def require_non_negative(value, field_name: str) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be a number.")
    if number < 0:
        raise ValidationError(f"{field_name} cannot be negative.")
    return number


def optional_email(value: str | None) -> str | None:
    v = (value or "").strip()
    if not v:
        return None
    if "@" not in v or v.startswith("@") or v.endswith("@"):
        raise ValidationError("Email address is not valid.")
    return v.lower()

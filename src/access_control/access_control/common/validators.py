from __future__ import annotations

from ..core.exceptions import ValidationError


def require_non_empty(value, field_name: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"Invalid {field_name}")
    return value.strip()


def require_bool(value, field_name: str) -> bool:
    # bool is checked by type: 0/1 or "true" are rejected like any other non-boolean
    if not isinstance(value, bool):
        raise ValidationError(f"Invalid {field_name}")
    return value

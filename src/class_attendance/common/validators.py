from __future__ import annotations

from typing import Any, Optional

from ..core.exceptions import ValidationError


def require_non_empty(value: Any, field_name: str) -> str:
    if value is None or not str(value).strip():
        raise ValidationError(f"Missing required field: {field_name}")
    return str(value).strip()


def require_int(value: Any, field_name: str) -> int:
    if value is None or isinstance(value, bool):
        raise ValidationError(f"Missing required field: {field_name}")
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be an integer")


def require_list(value: Any, field_name: str) -> list:
    if not isinstance(value, list):
        raise ValidationError(f"Missing required field: {field_name}")
    return value


def optional_str(value: Any) -> Optional[str]:
    if value is None:
        return None
    return str(value)


def require_json_object(value: Any) -> dict:
    """A missing body counts as empty; arrays and scalars are rejected."""
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ValidationError("Request body must be a JSON object")
    return value

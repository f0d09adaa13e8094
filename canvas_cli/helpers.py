"Helper functions"

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Mapping


def parse_datetime(dt_str: str) -> datetime:
    "Transforms a Canvas timestamp (`2018-01-01T12:00:00Z`) to a UTC datetime"
    if not isinstance(dt_str, str):
        raise TypeError(f"expected a timestamp string, got {dt_str!r}")
    value = datetime.fromisoformat(dt_str.strip().replace("Z", "+00:00"))
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def format_datetime(value: datetime) -> str:
    "UTC timestamp with a `Z` suffix, the way Canvas writes them"
    return value.astimezone(timezone.utc).isoformat().replace("+00:00", "Z")


def required_int(data: Mapping[str, Any], key: str) -> int:
    "Non negative integer field"
    value = data[key]
    # bool is a subclass of int
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"`{key}` should be an integer, got {value!r}")
    if value < 0:
        raise ValueError(f"`{key}` should not be negative, got {value}")
    return value


def required_str(data: Mapping[str, Any], key: str) -> str:
    "String field"
    value = data[key]
    if not isinstance(value, str):
        raise TypeError(f"`{key}` should be a string, got {value!r}")
    return value


def optional_str(data: Mapping[str, Any], key: str) -> str | None:
    "String field that may be null or absent"
    if data.get(key) is None:
        return None
    return required_str(data, key)


def optional_bool(data: Mapping[str, Any], key: str) -> bool | None:
    "Boolean field that may be null or absent"
    value = data.get(key)
    if value is not None and not isinstance(value, bool):
        raise TypeError(f"`{key}` should be a boolean, got {value!r}")
    return value


def optional_datetime(data: Mapping[str, Any], key: str) -> datetime | None:
    "Timestamp field that may be null or absent"
    value = data.get(key)
    if value is None:
        return None
    return parse_datetime(value)

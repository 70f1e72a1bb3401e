"""Normalization helpers.

Centralizes defensive parsing and placeholder handling.
"""

from __future__ import annotations

import math
from datetime import UTC, datetime, tzinfo
from typing import Any

# Threshold to distinguish seconds from milliseconds.
_MS_THRESHOLD = 1e11

# Strings upstream integrations use for "not available".
_SENTINELS = frozenset({"", "--", "NaN", "nan"})


def safe_str(value: Any) -> str | None:
    if value is None:
        return None
    if isinstance(value, (dict, list)):
        return None
    text = str(value).strip()
    return text if text else None


def is_meaningful(value: Any) -> bool:
    """Return True if the value carries information.

    Placeholder strings, empty containers and NaN are treated as absent.
    """

    if value is None:
        return False
    if isinstance(value, str) and value.strip() in _SENTINELS:
        return False
    if isinstance(value, float) and math.isnan(value):
        return False
    if value == {}:
        return False
    return bool(value != [])


def parse_timestamp(value: Any) -> datetime | None:
    """Best-effort conversion of an upstream date value to a datetime.

    - ``datetime`` instances pass through unchanged (naive stays naive)
    - ISO-8601 strings are parsed; a trailing ``Z`` means UTC
    - Epoch seconds or milliseconds become UTC datetimes
    - Anything else, including placeholders, yields ``None``
    """

    if not is_meaningful(value):
        return None
    if isinstance(value, datetime):
        return value
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        ts = float(value)
        if ts <= 0:
            return None
        if ts > _MS_THRESHOLD:
            ts /= 1000.0
        try:
            return datetime.fromtimestamp(ts, tz=UTC)
        except (OverflowError, OSError, ValueError):
            return None
    if isinstance(value, str):
        text = value.strip()
        if text.endswith("Z"):
            text = f"{text[:-1]}+00:00"
        try:
            return datetime.fromisoformat(text)
        except ValueError:
            return None
    return None


def localize(value: datetime, zone: tzinfo) -> datetime:
    """Return *value* expressed in *zone*.

    Naive datetimes are interpreted as wall-clock time in *zone*.
    """

    if value.tzinfo is None:
        return value.replace(tzinfo=zone)
    return value.astimezone(zone)


def ensure_aware(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value

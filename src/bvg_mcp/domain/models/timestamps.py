"""Timestamp decoding shared by the domain models."""

from datetime import datetime
from typing import Any


def parse_timestamp(value: Any) -> datetime | None:
    """Parse an ISO 8601 timestamp; missing or malformed values mean "not yet known"."""
    if not isinstance(value, str) or not value:
        return None
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None


def non_negative(value: Any) -> int | None:
    """Return a non-negative integer, or None for absent/negative/non-numeric input."""
    if isinstance(value, bool) or not isinstance(value, int | float):
        return None
    if value < 0:
        return None
    return int(value)

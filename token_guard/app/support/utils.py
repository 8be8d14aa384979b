"""
Time helpers for claim validation.

All values are normalised to timezone-aware UTC datetimes so that claims
carrying epoch seconds, numeric strings or datetimes compare consistently.
"""

import math
from datetime import datetime, timezone
from typing import Any


def now() -> datetime:
    """Current time in UTC."""
    return datetime.now(timezone.utc)


def timestamp(value: Any) -> datetime:
    """Convert an epoch-like claim value to an aware UTC datetime.

    Raises:
        ValueError: if the value is not a number, a numeric string or a datetime.
    """
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)

    # bool is an int subclass but never a valid timestamp
    if isinstance(value, bool):
        raise ValueError(f"Not a timestamp: {value!r}")

    if isinstance(value, str):
        value = value.strip()
    try:
        seconds = float(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Not a timestamp: {value!r}") from exc

    if not math.isfinite(seconds):
        raise ValueError(f"Not a timestamp: {value!r}")

    try:
        return datetime.fromtimestamp(seconds, tz=timezone.utc)
    except (OverflowError, OSError) as exc:
        raise ValueError(f"Timestamp out of range: {value!r}") from exc


def is_future(moment: datetime, current: datetime) -> bool:
    return moment > current


def is_past(moment: datetime, current: datetime) -> bool:
    return moment < current


def diff_in_minutes(start: datetime, end: datetime) -> int:
    """Whole minutes between two moments, regardless of order."""
    return int(abs((end - start).total_seconds()) // 60)

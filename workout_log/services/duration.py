from __future__ import annotations

from datetime import timedelta
from typing import Any, Sequence

from workout_log.services.parsing import parse_number

# Largest interval every backend can store (SQLite keeps intervals as epoch offsets).
MAX_DURATION_SECONDS = 999_999 * 3600


def _component(value: Any) -> int:
    return int(parse_number(value))


def to_seconds(hours: Any = None, minutes: Any = None, seconds: Any = None) -> int:
    """Total seconds for an hours/minutes/seconds triplet; bad parts count as 0."""
    return _component(hours) * 3600 + _component(minutes) * 60 + _component(seconds)


def duration_to_seconds(value: timedelta | Sequence[Any] | None) -> int:
    if value is None:
        return 0
    if isinstance(value, timedelta):
        return int(value.total_seconds())
    parts = list(value)[:3]
    parts += [None] * (3 - len(parts))
    return to_seconds(*parts)


def format_duration(total_seconds: int | float | None) -> str:
    """Render seconds as ``HH:MM:SS``; hours keep growing past 99."""
    total = max(0, int(total_seconds or 0))
    hours, remainder = divmod(total, 3600)
    minutes, seconds = divmod(remainder, 60)
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}"


def parse_duration(hours: Any = None, minutes: Any = None, seconds: Any = None) -> timedelta | None:
    """Interval to store for a submitted triplet; None when blank or out of range."""
    if all(part in (None, "") for part in (hours, minutes, seconds)):
        return None
    total = to_seconds(hours, minutes, seconds)
    if abs(total) > MAX_DURATION_SECONDS:
        return None
    return timedelta(seconds=total)

# src/daytasks/dates.py

"""
Calendar-date helpers.

A DateKey is the `YYYY-MM-DD` string of a LOCAL calendar date. It is the only
partition key of the task store: a task is never addressable without its date.
"""

from __future__ import annotations

import re
from datetime import date, datetime, timedelta

DayLike = date | datetime | str

_KEY_RE = re.compile(r"^(\d{4})-(\d{2})-(\d{2})$")


def _local_date(value: date | datetime) -> date:
    if isinstance(value, datetime):
        # Naive datetimes are already local; aware ones are converted.
        if value.tzinfo is not None:
            value = value.astimezone()
        return value.date()
    return value


def today() -> date:
    return datetime.now().date()


def to_key(value: date | datetime) -> str:
    d = _local_date(value)
    return f"{d.year:04d}-{d.month:02d}-{d.day:02d}"


def from_key(key: str) -> date:
    m = _KEY_RE.match((key or "").strip())
    if not m:
        raise ValueError(f"Not a date key: {key!r}")
    year, month, day = (int(g) for g in m.groups())
    return date(year, month, day)


def to_display(value: date | datetime) -> str:
    """Long, human-readable date, e.g. "April 14, 2025"."""
    d = _local_date(value)
    return f"{d:%B} {d.day}, {d.year}"


def shift_days(value: date | datetime, days: int) -> date:
    return _local_date(value) + timedelta(days=int(days))


def resolve_key(day: DayLike) -> str:
    """Accept a date, a datetime or an existing DateKey and return the DateKey."""
    if isinstance(day, str):
        return to_key(from_key(day))
    return to_key(day)

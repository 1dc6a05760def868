# tests/test_dates.py

from __future__ import annotations

from datetime import UTC, date, datetime, timedelta, timezone

import pytest

from daytasks.dates import from_key, resolve_key, shift_days, to_display, to_key


@pytest.mark.parametrize(
    "d",
    [
        date(2025, 1, 31),
        date(2025, 2, 1),
        date(2024, 2, 29),
        date(2024, 12, 31),
        date(2025, 1, 1),
        date(999, 3, 4),
    ],
)
def test_to_key_round_trips_calendar_date(d: date) -> None:
    key = to_key(d)
    assert len(key) == 10
    assert from_key(key) == d


def test_to_key_zero_pads_month_and_day() -> None:
    assert to_key(date(2025, 4, 7)) == "2025-04-07"


def test_naive_datetime_is_taken_as_local() -> None:
    assert to_key(datetime(2025, 1, 31, 23, 59)) == "2025-01-31"


def test_aware_datetime_uses_local_calendar_date() -> None:
    moment = datetime(2025, 6, 1, 0, 30, tzinfo=UTC)
    assert to_key(moment) == moment.astimezone().strftime("%Y-%m-%d")

    far_east = datetime(2025, 6, 1, 0, 30, tzinfo=timezone(timedelta(hours=14)))
    assert to_key(far_east) == far_east.astimezone().strftime("%Y-%m-%d")


def test_to_display_long_form() -> None:
    assert to_display(date(2025, 4, 14)) == f"{date(2025, 4, 14):%B} 14, 2025"


def test_shift_days_crosses_month_and_leap_day() -> None:
    assert shift_days(date(2024, 2, 28), 1) == date(2024, 2, 29)
    assert shift_days(date(2024, 3, 1), -1) == date(2024, 2, 29)
    assert shift_days(date(2025, 1, 31), 1) == date(2025, 2, 1)


@pytest.mark.parametrize("bad", ["", "2025-4-14", "2025/04/14", "20250414", "2025-13-01", "2025-02-30"])
def test_from_key_rejects_malformed(bad: str) -> None:
    with pytest.raises(ValueError):
        from_key(bad)


def test_resolve_key_accepts_key_date_and_datetime() -> None:
    assert resolve_key("2025-04-14") == "2025-04-14"
    assert resolve_key(date(2025, 4, 14)) == "2025-04-14"
    assert resolve_key(datetime(2025, 4, 14, 8, 0)) == "2025-04-14"

import time
from datetime import date, datetime, timedelta, timezone

import pytest

from utils.datetime_utils import (
    days_between,
    format_date,
    format_relative_time,
    parse_due_date,
    sortable,
    start_of_day,
)


NOW = datetime(2024, 2, 25, 18, 45)


def test_format_date_is_locale_independent():
    assert format_date(datetime(2024, 3, 1, 23, 59)) == "Fri, Mar 1, 2024"
    assert format_date(date(2023, 12, 25)) == "Mon, Dec 25, 2023"


@pytest.mark.parametrize(
    "due, expected",
    [
        (datetime(2024, 2, 25, 0, 0), "today"),
        (datetime(2024, 2, 25, 23, 59), "today"),
        (datetime(2024, 2, 26, 0, 1), "in 1 day"),
        (datetime(2024, 2, 28), "in 3 days"),
        (datetime(2024, 2, 24, 23, 0), "1 day ago"),
        (datetime(2024, 2, 23), "2 days ago"),
    ],
)
def test_format_relative_time(due, expected):
    assert format_relative_time(due, NOW) == expected


def test_days_between_crosses_month_boundary():
    assert days_between(datetime(2024, 3, 1), NOW) == 5
    assert days_between(date(2024, 2, 20), NOW) == -5


def test_start_of_day_keeps_tzinfo():
    aware = datetime(2024, 2, 25, 18, 45, tzinfo=timezone.utc)
    assert start_of_day(aware) == datetime(2024, 2, 25, tzinfo=timezone.utc)
    assert start_of_day(date(2024, 2, 25)) == datetime(2024, 2, 25)


def test_parse_due_date_formats():
    assert parse_due_date("2024-03-01") == datetime(2024, 3, 1)
    assert parse_due_date("2024-03-01T14:30") == datetime(2024, 3, 1, 14, 30)
    assert parse_due_date("01.03.2024") == datetime(2024, 3, 1)
    assert parse_due_date(" 2024-03-01T10:00:00Z ").tzinfo is not None


@pytest.mark.parametrize("raw", [None, "", "   ", "tomorrow", "2024-13-45"])
def test_parse_due_date_rejects_garbage(raw):
    assert parse_due_date(raw) is None


def test_relative_time_uses_now_zone_for_both_sides(monkeypatch):
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset is not available on this platform")
    monkeypatch.setenv("TZ", "UTC")
    time.tzset()
    try:
        now = datetime(2024, 2, 25, 23, 0, tzinfo=timezone(timedelta(hours=-5)))
        assert format_relative_time(now, now) == "today"
        assert days_between(now + timedelta(hours=1, minutes=30), now) == 1
    finally:
        monkeypatch.undo()
        time.tzset()


def test_sort_key_reads_aware_values_like_status(monkeypatch):
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset is not available on this platform")
    monkeypatch.setenv("TZ", "UTC")
    time.tzset()
    try:
        aware = datetime(2024, 2, 25, 12, 0, tzinfo=timezone(timedelta(hours=2)))
        assert sortable(aware) == datetime(2024, 2, 25, 10, 0)
        assert sortable(datetime(2024, 2, 25, 11, 0)) > sortable(aware)
        assert sortable(date(2024, 2, 25)) == datetime(2024, 2, 25)
    finally:
        monkeypatch.undo()
        time.tzset()

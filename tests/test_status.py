import time
from datetime import date, datetime, timedelta, timezone

import pytest

from core.status import TaskStatus, get_task_status


NOW = datetime(2024, 2, 25, 15, 30)


@pytest.mark.parametrize("offset", [-30, -1, 0, 1, 30])
def test_completed_wins_over_any_date(offset):
    due = NOW + timedelta(days=offset)
    assert get_task_status(True, due, NOW) is TaskStatus.COMPLETED


def test_day_granularity_boundaries():
    assert get_task_status(False, NOW - timedelta(days=1), NOW) is TaskStatus.OVERDUE
    assert get_task_status(False, NOW, NOW) is TaskStatus.DUE_TODAY
    assert get_task_status(False, NOW + timedelta(days=1), NOW) is TaskStatus.UPCOMING


def test_earlier_same_day_is_still_due_today():
    morning = NOW.replace(hour=0, minute=1)
    late = NOW.replace(hour=23, minute=59)
    assert get_task_status(False, morning, NOW) is TaskStatus.DUE_TODAY
    assert get_task_status(False, late, NOW) is TaskStatus.DUE_TODAY


def test_plain_dates_are_accepted():
    assert get_task_status(False, date(2024, 2, 24), NOW) is TaskStatus.OVERDUE
    assert get_task_status(False, date(2024, 3, 1), date(2024, 2, 25)) is TaskStatus.UPCOMING


def test_aware_due_date_is_read_in_now_zone():
    tz = timezone(timedelta(hours=-5))
    now = datetime(2024, 2, 25, 20, 0, tzinfo=tz)
    # 2024-02-26 00:30 UTC is still the evening of the 25th at UTC-5.
    due = datetime(2024, 2, 26, 0, 30, tzinfo=timezone.utc)
    assert get_task_status(False, due, now) is TaskStatus.DUE_TODAY


@pytest.fixture()
def utc_host(monkeypatch):
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset is not available on this platform")
    monkeypatch.setenv("TZ", "UTC")
    time.tzset()
    yield
    monkeypatch.undo()
    time.tzset()


def test_aware_now_late_evening_is_same_day_on_any_host(utc_host):
    now = datetime(2024, 2, 25, 23, 0, tzinfo=timezone(timedelta(hours=-5)))
    assert get_task_status(False, now, now) is TaskStatus.DUE_TODAY
    assert get_task_status(False, now - timedelta(hours=22), now) is TaskStatus.DUE_TODAY
    assert get_task_status(False, now + timedelta(hours=2), now) is TaskStatus.UPCOMING
    assert get_task_status(False, now - timedelta(days=1), now) is TaskStatus.OVERDUE


def test_status_accepts_camel_case_value():
    assert TaskStatus("dueToday") is TaskStatus.DUE_TODAY
    assert TaskStatus("due_today") is TaskStatus.DUE_TODAY
    with pytest.raises(ValueError):
        TaskStatus("someday")

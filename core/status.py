"""Task status classification."""
from __future__ import annotations

from enum import Enum
from typing import Optional

from utils.datetime_utils import DateLike, days_between


class TaskStatus(str, Enum):
    COMPLETED = "completed"
    OVERDUE = "overdue"
    DUE_TODAY = "due_today"
    UPCOMING = "upcoming"

    @classmethod
    def _missing_(cls, value: object) -> Optional["TaskStatus"]:
        # Dashboard forms send camelCase ("dueToday").
        if not isinstance(value, str):
            return None
        key = value.strip().replace("-", "").replace("_", "").lower()
        for member in cls:
            if member.value.replace("_", "") == key:
                return member
        return None


def get_task_status(completed: bool, due_date: DateLike, now: DateLike) -> TaskStatus:
    """Classify a task at day granularity relative to ``now``.

    A completed task is ``COMPLETED`` whatever its due date.
    """

    if completed:
        return TaskStatus.COMPLETED
    diff = days_between(due_date, now)
    if diff < 0:
        return TaskStatus.OVERDUE
    if diff == 0:
        return TaskStatus.DUE_TODAY
    return TaskStatus.UPCOMING


__all__ = ["TaskStatus", "get_task_status"]

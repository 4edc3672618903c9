"""Summary counters for a set of tasks."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from core.status import TaskStatus, get_task_status
from models.task import Task
from utils.datetime_utils import DateLike


@dataclass(frozen=True)
class TaskStatistics:
    total: int = 0
    completed: int = 0
    pending: int = 0
    overdue: int = 0


def calculate_statistics(tasks: Iterable[Task], now: DateLike) -> TaskStatistics:
    """Count tasks; ``pending`` includes overdue ones (``pending == total - completed``)."""

    total = completed = overdue = 0
    for task in tasks:
        total += 1
        if task.completed:
            completed += 1
        elif get_task_status(task.completed, task.due_date, now) is TaskStatus.OVERDUE:
            overdue += 1
    return TaskStatistics(
        total=total,
        completed=completed,
        pending=total - completed,
        overdue=overdue,
    )


__all__ = ["TaskStatistics", "calculate_statistics"]

"""Filtering and ordering of task lists for the deadlines view."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional

from core.priorities import Priority, parse_priority
from core.status import TaskStatus, get_task_status
from models.task import Task
from utils.datetime_utils import DateLike, sortable


ALL = "all"


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


@dataclass(frozen=True)
class TaskFilter:
    """Conjunctive query; ``None`` (or an empty search) leaves a field unconstrained."""

    search: str = ""
    priority: Optional[Priority] = None
    course_id: Optional[str] = None
    status: Optional[TaskStatus] = None

    @classmethod
    def from_form(
        cls,
        *,
        search: str | None = None,
        priority: str | None = None,
        course: str | None = None,
        status: str | None = None,
    ) -> "TaskFilter":
        """Build a filter from raw form values where ``"all"`` means no constraint."""
        return cls(
            search=search or "",
            priority=None if _is_all(priority) else parse_priority(priority),
            course_id=None if _is_all(course) else course,
            status=_choice(TaskStatus, status),
        )

    def matches(self, task: Task, now: DateLike) -> bool:
        needle = self.search.strip().casefold()
        if needle:
            haystacks = [task.title, task.description or ""]
            if not any(needle in text.casefold() for text in haystacks):
                return False
        if self.priority is not None and task.priority != self.priority:
            return False
        if self.course_id is not None and task.course_id != self.course_id:
            return False
        if self.status is not None:
            if get_task_status(task.completed, task.due_date, now) is not self.status:
                return False
        return True


def _is_all(value: str | None) -> bool:
    return value is None or not value.strip() or value.strip().lower() == ALL


def _choice(enum_cls, value: str | None):
    if _is_all(value):
        return None
    try:
        return enum_cls(value.strip())
    except ValueError:
        raise ValueError(f"Unsupported {enum_cls.__name__} filter: {value!r}") from None


def filter_tasks(tasks: Iterable[Task], spec: Optional[TaskFilter], now: DateLike) -> List[Task]:
    if spec is None:
        return list(tasks)
    return [task for task in tasks if spec.matches(task, now)]


def sort_tasks_by_date(
    tasks: Iterable[Task],
    direction: SortDirection | str = SortDirection.ASC,
) -> List[Task]:
    """Order by due date; equal due dates keep their input order."""
    reverse = SortDirection(direction) is SortDirection.DESC
    return sorted(tasks, key=lambda task: sortable(task.due_date), reverse=reverse)


__all__ = [
    "ALL",
    "SortDirection",
    "TaskFilter",
    "filter_tasks",
    "sort_tasks_by_date",
]

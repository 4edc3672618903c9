"""Application controller: mutations and derived views over the storage manager."""
from __future__ import annotations

import warnings
from dataclasses import dataclass
from datetime import date, datetime, time
from typing import Callable, List, Optional, Tuple, Union

from pydantic import ValidationError

from core.courses import (
    CourseSummary,
    course_label,
    course_name_for,
    course_summaries,
)
from core.filters import SortDirection, TaskFilter, filter_tasks, sort_tasks_by_date
from core.logs import get_logger
from core.priorities import (
    DEFAULT_PRIORITY,
    Priority,
    parse_priority,
    priority_color,
    priority_label,
)
from core.stats import TaskStatistics, calculate_statistics
from core.status import TaskStatus, get_task_status
from models.course import Course
from models.settings import AppSettings, Theme
from models.task import Task
from storage.store import StorageManager, StorageWriteWarning
from utils.datetime_utils import format_date, format_relative_time, parse_due_date


logger = get_logger("planner")

DueInput = Union[datetime, date, str]


@dataclass(frozen=True)
class DeadlineCard:
    """Everything a deadline row shows, derived once so views never recompute it."""

    task: Task
    course_name: str
    status: TaskStatus
    due_label: str
    relative_label: str
    priority_label: str
    priority_color: str


def _coerce_due(value: DueInput) -> datetime:
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, time.min)
    parsed = parse_due_date(value)
    if parsed is None:
        raise ValueError(f"Unrecognised due date: {value!r}")
    return parsed


class PlannerService:
    """Mutations and read models on top of :class:`StorageManager`.

    Every mutation reads the whole collection, changes it in memory and writes
    it back. ``clock`` supplies "now" for anything status related.
    """

    def __init__(
        self,
        store: StorageManager,
        *,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self.store = store
        self.clock = clock

    # ----- courses -----
    def list_courses(self) -> List[Course]:
        return self.store.get_courses()

    def add_course(
        self,
        name: str,
        code: Optional[str] = None,
        instructor: Optional[str] = None,
        color: Optional[str] = None,
    ) -> Course:
        fields = {"name": name or "", "code": code, "instructor": instructor}
        if color:
            fields["color"] = color
        try:
            course = Course(**fields)
        except ValidationError as exc:
            raise ValueError(f"Invalid course: {exc.errors()[0]['msg']}") from exc
        courses = self.store.get_courses()
        courses.append(course)
        self._save(self.store.save_courses(courses), "courses")
        logger.info("Course added: %s", course.id)
        return course

    def delete_course(self, course_id: str) -> bool:
        courses = self.store.get_courses()
        remaining = [c for c in courses if c.id != course_id]
        if len(remaining) == len(courses):
            return False
        # Tasks keep their course_id and fall back to "Unknown Course".
        self._save(self.store.save_courses(remaining), "courses")
        logger.info("Course deleted: %s", course_id)
        return True

    def course_options(self) -> List[Tuple[str, str]]:
        return [(c.id, course_label(c)) for c in self.store.get_courses()]

    def course_overview(self) -> List[CourseSummary]:
        return course_summaries(self.store.get_courses(), self.store.get_tasks(), self.clock())

    # ----- tasks -----
    def list_tasks(self) -> List[Task]:
        return self.store.get_tasks()

    def add_task(
        self,
        title: str,
        due_date: DueInput,
        course_id: Optional[str] = None,
        priority: Union[Priority, str] = DEFAULT_PRIORITY,
        description: Optional[str] = None,
    ) -> Task:
        due = _coerce_due(due_date)
        level = parse_priority(priority)
        try:
            task = Task(
                title=title or "",
                description=description,
                course_id=course_id,
                due_date=due,
                priority=level,
            )
        except ValidationError as exc:
            raise ValueError(f"Invalid task: {exc.errors()[0]['msg']}") from exc
        tasks = self.store.get_tasks()
        tasks.append(task)
        self._save(self.store.save_tasks(tasks), "tasks")
        logger.info("Task added: %s due=%s", task.id, task.due_date.isoformat())
        return task

    def toggle_task(self, task_id: str) -> Optional[Task]:
        tasks = self.store.get_tasks()
        for index, task in enumerate(tasks):
            if task.id == task_id:
                updated = task.model_copy(update={"completed": not task.completed})
                tasks[index] = updated
                self._save(self.store.save_tasks(tasks), "tasks")
                logger.info("Task %s completed=%s", task_id, updated.completed)
                return updated
        return None

    def delete_task(self, task_id: str) -> bool:
        tasks = self.store.get_tasks()
        remaining = [t for t in tasks if t.id != task_id]
        if len(remaining) == len(tasks):
            return False
        self._save(self.store.save_tasks(remaining), "tasks")
        logger.info("Task deleted: %s", task_id)
        return True

    # ----- derived views -----
    def statistics(self) -> TaskStatistics:
        return calculate_statistics(self.store.get_tasks(), self.clock())

    def deadline_cards(
        self,
        spec: Optional[TaskFilter] = None,
        direction: SortDirection = SortDirection.ASC,
    ) -> List[DeadlineCard]:
        now = self.clock()
        courses = self.store.get_courses()
        tasks = sort_tasks_by_date(filter_tasks(self.store.get_tasks(), spec, now), direction)
        return [
            DeadlineCard(
                task=task,
                course_name=course_name_for(task, courses),
                status=get_task_status(task.completed, task.due_date, now),
                due_label=format_date(task.due_date),
                relative_label=format_relative_time(task.due_date, now),
                priority_label=priority_label(task.priority),
                priority_color=priority_color(task.priority),
            )
            for task in tasks
        ]

    # ----- settings -----
    def get_settings(self) -> AppSettings:
        return self.store.get_settings()

    def set_theme(self, theme: Union[Theme, str]) -> AppSettings:
        settings = self.store.get_settings().model_copy(update={"theme": Theme(theme)})
        self._save(self.store.save_settings(settings), "settings")
        return settings

    def toggle_theme(self) -> Theme:
        current = self.store.get_settings().theme
        return self.set_theme(current.toggled()).theme

    # ------------------------------------------------------------------
    def _save(self, ok: bool, what: str) -> None:
        if ok:
            return
        warnings.warn(
            f"Could not persist {what}; changes are kept for this session only",
            StorageWriteWarning,
            stacklevel=3,
        )


__all__ = ["DeadlineCard", "PlannerService"]

"""Course lookups used wherever a task shows its course."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional

from core.stats import TaskStatistics, calculate_statistics
from models.course import Course
from models.task import Task
from utils.datetime_utils import DateLike


UNKNOWN_COURSE = "Unknown Course"


@dataclass(frozen=True)
class CourseSummary:
    course: Course
    label: str
    stats: TaskStatistics


def find_course(courses: Iterable[Course], course_id: Optional[str]) -> Optional[Course]:
    if not course_id:
        return None
    return next((course for course in courses if course.id == course_id), None)


def course_name_for(task: Task, courses: Iterable[Course]) -> str:
    course = find_course(courses, task.course_id)
    return course.name if course else UNKNOWN_COURSE


def course_label(course: Course) -> str:
    if course.code:
        return f"{course.name} ({course.code})"
    return course.name


def tasks_for_course(tasks: Iterable[Task], course_id: str) -> List[Task]:
    return [task for task in tasks if task.course_id == course_id]


def course_summaries(
    courses: Iterable[Course],
    tasks: Iterable[Task],
    now: DateLike,
) -> List[CourseSummary]:
    task_list = list(tasks)
    return [
        CourseSummary(
            course=course,
            label=course_label(course),
            stats=calculate_statistics(tasks_for_course(task_list, course.id), now),
        )
        for course in courses
    ]


__all__ = [
    "UNKNOWN_COURSE",
    "CourseSummary",
    "course_label",
    "course_name_for",
    "course_summaries",
    "find_course",
    "tasks_for_course",
]

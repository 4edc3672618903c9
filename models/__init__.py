"""Entities exposed by the Academic Planner."""
from .course import Course
from .settings import AppSettings, Theme
from .stored_record import StoredRecord
from .task import Task

__all__ = ["AppSettings", "Course", "StoredRecord", "Task", "Theme"]

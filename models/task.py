"""Task (deadline) entity, stored inside the ``tasks`` record."""
from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import field_validator
from sqlmodel import Field, SQLModel

from core.priorities import DEFAULT_PRIORITY, Priority
from models.course import new_id
from utils.datetime_utils import utc_now


class Task(SQLModel):
    """A deadline. ``course_id`` is a weak reference; the course may be gone."""

    id: str = Field(default_factory=new_id)
    title: str = Field(min_length=1)
    description: Optional[str] = None
    course_id: Optional[str] = None
    due_date: datetime
    priority: Priority = DEFAULT_PRIORITY
    completed: bool = False
    created_at: datetime = Field(default_factory=utc_now)

    @field_validator("title")
    @classmethod
    def _strip_title(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Task title is required")
        return value

    @field_validator("description", "course_id")
    @classmethod
    def _blank_to_none(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        return value.strip() or None

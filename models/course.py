"""Course entity, stored inside the ``courses`` record."""
from __future__ import annotations

import re
import uuid
from typing import Optional

from pydantic import field_validator
from sqlmodel import Field, SQLModel

from core.settings import STORAGE


COLOR_RE = re.compile(r"^#[0-9A-Fa-f]{6}$")


def new_id() -> str:
    return uuid.uuid4().hex


class Course(SQLModel):
    """A subject tasks can be filed under. Stored inside the ``courses`` record."""

    id: str = Field(default_factory=new_id)
    name: str = Field(min_length=1)
    code: Optional[str] = None
    instructor: Optional[str] = None
    color: str = Field(default=STORAGE.default_course_color)

    @field_validator("name")
    @classmethod
    def _strip_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Course name is required")
        return value

    @field_validator("code", "instructor")
    @classmethod
    def _blank_to_none(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        return value.strip() or None

    @field_validator("color")
    @classmethod
    def _check_color(cls, value: str) -> str:
        if not COLOR_RE.match(value):
            raise ValueError("Color must be in #RRGGBB format")
        return value.upper()


__all__ = ["COLOR_RE", "Course", "new_id"]

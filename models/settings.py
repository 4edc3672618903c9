"""Singleton user preferences record."""
from __future__ import annotations

from enum import Enum

from sqlmodel import SQLModel


class Theme(str, Enum):
    LIGHT = "light"
    DARK = "dark"

    def toggled(self) -> "Theme":
        return Theme.DARK if self is Theme.LIGHT else Theme.LIGHT


class AppSettings(SQLModel):
    theme: Theme = Theme.LIGHT


__all__ = ["AppSettings", "Theme"]

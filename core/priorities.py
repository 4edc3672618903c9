"""Utility helpers for task priorities."""
from __future__ import annotations

from enum import Enum
from typing import Dict


class Priority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


# Colours follow the dashboard palette: success / warning / danger.
PRIORITY_META: Dict[Priority, Dict[str, str]] = {
    Priority.LOW: {
        "label": "LOW",
        "color": "#10B981",    # emerald-500
    },
    Priority.MEDIUM: {
        "label": "MEDIUM",
        "color": "#F59E0B",    # amber-500
    },
    Priority.HIGH: {
        "label": "HIGH",
        "color": "#EF4444",    # red-500
    },
}

DEFAULT_PRIORITY = Priority.MEDIUM


def parse_priority(value: Priority | str | None) -> Priority:
    """Coerce form input to a ``Priority``; ``None`` or blank gives the default."""
    if value is None:
        return DEFAULT_PRIORITY
    if isinstance(value, Priority):
        return value
    text = str(value).strip().lower()
    if not text:
        return DEFAULT_PRIORITY
    try:
        return Priority(text)
    except ValueError:
        raise ValueError(f"Unsupported priority: {value!r}") from None


def priority_label(value: Priority) -> str:
    return PRIORITY_META[value]["label"]


def priority_color(value: Priority) -> str:
    return PRIORITY_META[value]["color"]


__all__ = [
    "DEFAULT_PRIORITY",
    "PRIORITY_META",
    "Priority",
    "parse_priority",
    "priority_color",
    "priority_label",
]

"""Date helpers for due dates: day arithmetic, parsing and display strings."""

from __future__ import annotations

from datetime import date, datetime, time, timezone
from typing import Optional, Union

UTC = timezone.utc

DateLike = Union[date, datetime]

_WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
_MONTHS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


def utc_now() -> datetime:
    return datetime.now(UTC)


def _wall_clock(value: DateLike, reference: Optional[DateLike] = None) -> datetime:
    """Naive wall-clock time of ``value`` as seen from ``reference``'s zone.

    Naive values are already wall-clock time in the user's zone and are left
    alone. Aware values are shifted into the zone of an aware ``reference``;
    without one they are read in the host's local zone.
    """

    if not isinstance(value, datetime):
        return datetime.combine(value, time.min)
    if value.tzinfo is None:
        return value
    ref_tz = reference.tzinfo if isinstance(reference, datetime) else None
    shifted = value.astimezone(ref_tz) if ref_tz is not None else value.astimezone()
    return shifted.replace(tzinfo=None)


def start_of_day(value: DateLike) -> datetime:
    """Midnight of ``value``'s day, keeping its tzinfo when it has one."""

    if isinstance(value, datetime):
        return value.replace(hour=0, minute=0, second=0, microsecond=0)
    return datetime.combine(value, time.min)


def days_between(value: DateLike, now: DateLike) -> int:
    """Whole calendar days from ``now`` to ``value`` (negative for the past).

    Both sides are read in ``now``'s zone and cut to start of day first.
    """

    due_day = start_of_day(_wall_clock(value, now))
    today = start_of_day(_wall_clock(now, now))
    return (due_day - today).days


def sortable(value: DateLike) -> datetime:
    """Sort key for mixed naive and aware values.

    Same convention as :func:`days_between` with a naive ``now``: naive values
    are local wall-clock time, aware ones are shifted into the local zone.
    """

    return _wall_clock(value)



def format_date(value: DateLike) -> str:
    """Render ``Fri, Mar 1, 2024`` independent of the process locale."""

    day = _wall_clock(value).date()
    return f"{_WEEKDAYS[day.weekday()]}, {_MONTHS[day.month - 1]} {day.day}, {day.year}"


def format_relative_time(value: DateLike, now: DateLike) -> str:
    diff = days_between(value, now)
    if diff == 0:
        return "today"
    count = abs(diff)
    unit = "day" if count == 1 else "days"
    if diff > 0:
        return f"in {count} {unit}"
    return f"{count} {unit} ago"


def parse_due_date(value: str | None) -> Optional[datetime]:
    """Parse ISO ``YYYY-MM-DD[THH:MM[:SS]]`` or ``DD.MM.YYYY`` into a datetime."""

    if not value:
        return None
    text = value.strip()
    if not text:
        return None

    try:
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        return datetime.fromisoformat(text)
    except ValueError:
        pass
    for fmt in ("%d.%m.%Y", "%d.%m.%Y %H:%M"):
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue
    return None


__all__ = [
    "UTC",
    "days_between",
    "format_date",
    "format_relative_time",
    "parse_due_date",
    "sortable",
    "start_of_day",
    "utc_now",
]

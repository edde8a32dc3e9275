"""
Datetime utilities for the booking grid.

Bookings are stored as separate wall-clock ``date`` ("YYYY-MM-DD") and
``time`` ("HH:MM") strings in the restaurant's local time. These helpers
convert between those strings and datetime objects.
"""

import re
from datetime import date, datetime, time, tzinfo
from typing import Optional

_DATE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}")
_TIME_PATTERN = re.compile(r"(\d{1,2}):(\d{2})")


def local_now() -> datetime:
    """Current local wall-clock time (naive)."""
    return datetime.now()


def parse_hhmm(value: str) -> int:
    """
    Parse an "HH:MM" string into minutes after midnight.

    Raises:
        ValueError: If the string is not a valid time of day
    """
    match = _TIME_PATTERN.fullmatch(value or "")
    if not match:
        raise ValueError(f"Invalid time string: {value!r}")
    hours, minutes = int(match.group(1)), int(match.group(2))
    if hours > 23 or minutes > 59:
        raise ValueError(f"Invalid time string: {value!r}")
    return hours * 60 + minutes


def format_hhmm(minutes: int) -> str:
    """Format minutes after midnight as "HH:MM"."""
    hours, mins = divmod(minutes, 60)
    return f"{hours:02d}:{mins:02d}"


def parse_iso_date(value: str) -> date:
    """
    Parse a strict "YYYY-MM-DD" calendar date.

    Raises:
        ValueError: If the string is not a real calendar date
    """
    if not isinstance(value, str) or not _DATE_PATTERN.fullmatch(value):
        raise ValueError(f"Invalid date string: {value!r}")
    return date.fromisoformat(value)


def slot_datetime(
    date_str: str, time_str: str, tz: Optional[tzinfo] = None
) -> datetime:
    """
    Combine a booking's date and time strings into a datetime.

    Args:
        date_str: "YYYY-MM-DD"
        time_str: "HH:MM"
        tz: Optional tzinfo to attach, so the result compares with aware
            datetimes

    Raises:
        ValueError: If either part cannot be parsed
    """
    day = parse_iso_date(date_str)
    hours, minutes = divmod(parse_hhmm(time_str), 60)
    return datetime.combine(day, time(hours, minutes), tzinfo=tz)

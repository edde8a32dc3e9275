"""Timeslot generation for the daily booking grid."""

from functools import lru_cache
from typing import List, Tuple

from config import settings
from utils.datetime_utils import format_hhmm, parse_hhmm


def generate_time_slots(
    open_time: str = "11:00", close_time: str = "22:00", step_minutes: int = 30
) -> List[str]:
    """
    Build the ordered list of bookable "HH:MM" slots.

    Starts at ``open_time`` and adds a slot every ``step_minutes`` until the
    running time passes ``close_time``. ``close_time`` itself is included when
    it lands on the grid. A closing time before the opening time gives an
    empty list; equal times give a single slot.

    Args:
        open_time: First slot, "HH:MM"
        close_time: Last possible slot, "HH:MM"
        step_minutes: Grid step in minutes

    Returns:
        Strictly increasing list of "HH:MM" strings

    Raises:
        ValueError: If a bound is malformed or the step is not positive
    """
    if step_minutes <= 0:
        raise ValueError(f"step_minutes must be positive, got {step_minutes}")

    start = parse_hhmm(open_time)
    end = parse_hhmm(close_time)

    return [format_hhmm(m) for m in range(start, end + 1, step_minutes)]


@lru_cache(maxsize=None)
def _cached_slots(open_time: str, close_time: str, step_minutes: int) -> Tuple[str, ...]:
    return tuple(generate_time_slots(open_time, close_time, step_minutes))


def get_time_slots() -> Tuple[str, ...]:
    """The restaurant's configured timeslots, computed once per process."""
    return _cached_slots(
        settings.opening_time, settings.closing_time, settings.slot_step_minutes
    )

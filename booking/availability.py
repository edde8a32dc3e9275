"""
Availability engine.

Capacity is a fixed number of tables per (date, timeslot). Matching is plain
string equality on the stored ``date`` and ``time`` fields.
"""

from typing import Dict, Iterable, Optional

from config import settings
from models.store import BookingStore


def count_bookings(store: BookingStore, date: str, time: str) -> int:
    """Number of bookings held for exactly this date and time."""
    return sum(1 for b in store.bookings if b.date == date and b.time == time)


def available_tables(
    store: BookingStore, date: str, time: str, capacity: Optional[int] = None
) -> int:
    """
    Tables still free for a slot.

    Never negative, even if more bookings exist than the current capacity
    allows (e.g. after lowering it).
    """
    if capacity is None:
        capacity = settings.max_tables_per_slot
    return max(0, capacity - count_bookings(store, date, time))


def availability_for_date(
    store: BookingStore,
    date: str,
    slots: Iterable[str],
    capacity: Optional[int] = None,
) -> Dict[str, int]:
    """Free tables for every slot of a day, in slot order."""
    return {slot: available_tables(store, date, slot, capacity) for slot in slots}

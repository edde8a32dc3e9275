"""Read-only projections of the booking store for display."""

from datetime import datetime
from typing import List, Optional

from config import settings
from models.booking import Booking
from models.store import BookingStore
from utils.datetime_utils import slot_datetime


def _is_upcoming(booking: Booking, now: datetime) -> bool:
    try:
        return slot_datetime(booking.date, booking.time, tz=now.tzinfo) >= now
    except ValueError:
        # Well-formed but impossible dates such as 2025-02-30
        return False


def upcoming(
    store: BookingStore, now: datetime, limit: Optional[int] = None
) -> List[Booking]:
    """
    Bookings whose slot is at or after ``now``.

    Keeps store order (newest created first) and returns at most ``limit``
    entries; a negative limit counts as zero.
    """
    if limit is None:
        limit = settings.upcoming_limit
    limit = max(0, limit)
    return [b for b in store.bookings if _is_upcoming(b, now)][:limit]


def booking_summary(booking: Booking) -> str:
    """One-line description of a booking, suitable for the clipboard."""
    return (
        f"Booking {booking.name} on {booking.date} at {booking.time} "
        f"for {booking.party_size}"
    )

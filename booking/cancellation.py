"""Booking cancellation."""

from models.store import BookingStore


def cancel(store: BookingStore, booking_id: str) -> BookingStore:
    """
    Remove a booking from the store.

    Removal is immediate and final; there is no cancelled state to undo.
    Cancelling an unknown ID returns the store unchanged.
    """
    return store.without(booking_id)

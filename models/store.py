"""Booking store model: the ordered collection of all bookings."""

from typing import Optional, Tuple

from pydantic import BaseModel

from .booking import Booking


class BookingStore(BaseModel):
    """
    Ordered, immutable sequence of bookings, newest first.

    Mutations return a new store; the original is left untouched.
    """

    bookings: Tuple[Booking, ...] = ()

    class Config:
        frozen = True

    def __len__(self) -> int:
        return len(self.bookings)

    def get(self, booking_id: str) -> Optional[Booking]:
        """Find a booking by ID."""
        for booking in self.bookings:
            if booking.id == booking_id:
                return booking
        return None

    def prepend(self, booking: Booking) -> "BookingStore":
        """Return a new store with ``booking`` in front."""
        return BookingStore(bookings=(booking,) + self.bookings)

    def without(self, booking_id: str) -> "BookingStore":
        """Return a store without the booking; ``self`` if it is absent."""
        remaining = tuple(b for b in self.bookings if b.id != booking_id)
        if len(remaining) == len(self.bookings):
            return self
        return BookingStore(bookings=remaining)

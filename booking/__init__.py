"""Core booking logic: timeslots, availability, admission and cancellation."""

from .admission import generate_booking_id, submit, validate_request
from .availability import availability_for_date, available_tables, count_bookings
from .cancellation import cancel
from .service import ReservationService, get_reservation_service
from .timeslots import generate_time_slots, get_time_slots
from .views import booking_summary, upcoming

__all__ = [
    "ReservationService",
    "availability_for_date",
    "available_tables",
    "booking_summary",
    "cancel",
    "count_bookings",
    "generate_booking_id",
    "generate_time_slots",
    "get_reservation_service",
    "get_time_slots",
    "submit",
    "upcoming",
    "validate_request",
]

"""
Booking admission: validate a request, then insert it into the store.

Everything here is pure. The current time is passed in and the store is
never modified in place; persistence is handled by ReservationService.
"""

import secrets
import string
from datetime import datetime, timedelta
from typing import Dict, Optional, Sequence

from config import settings
from models.booking import Booking, BookingRequest
from models.result import AdmissionResult, FieldError, ValidationErrorKind
from models.store import BookingStore
from utils.constants import BOOKING_ID_RANDOM_LENGTH, MAX_NOTES_LENGTH
from utils.datetime_utils import parse_iso_date, slot_datetime
from utils.validation import (
    normalize_phone,
    parse_party_size,
    sanitize_text,
    validate_email,
    validate_phone,
)

from .availability import available_tables
from .timeslots import get_time_slots

_BASE36 = string.digits + string.ascii_lowercase


def _to_base36(number: int) -> str:
    if number == 0:
        return "0"
    digits = []
    while number:
        number, rem = divmod(number, 36)
        digits.append(_BASE36[rem])
    return "".join(reversed(digits))


def generate_booking_id(now: datetime) -> str:
    """Millisecond timestamp in base 36 followed by a random suffix."""
    millis = int(now.timestamp() * 1000)
    suffix = "".join(secrets.choice(_BASE36) for _ in range(BOOKING_ID_RANDOM_LENGTH))
    return _to_base36(millis) + suffix


def _error(kind: ValidationErrorKind, message: str) -> FieldError:
    return FieldError(kind=kind, message=message)


def validate_request(
    store: BookingStore,
    request: BookingRequest,
    now: datetime,
    *,
    slots: Optional[Sequence[str]] = None,
    capacity: Optional[int] = None,
    grace_minutes: Optional[int] = None,
    min_party_size: Optional[int] = None,
    max_party_size: Optional[int] = None,
) -> Dict[str, FieldError]:
    """
    Check a booking request against every rule.

    All rules run, so the returned mapping lists every problem at once. An
    empty mapping means the request can be admitted.

    Returns:
        Field name -> FieldError for each violated rule
    """
    slots = get_time_slots() if slots is None else slots
    grace_minutes = settings.past_grace_minutes if grace_minutes is None else grace_minutes
    min_party_size = settings.min_party_size if min_party_size is None else min_party_size
    max_party_size = settings.max_party_size if max_party_size is None else max_party_size

    errors: Dict[str, FieldError] = {}

    if not sanitize_text(request.name):
        errors["name"] = _error(ValidationErrorKind.EMPTY_FIELD, "Name is required.")

    if not validate_phone(request.phone):
        errors["phone"] = _error(
            ValidationErrorKind.INVALID_PHONE,
            "Enter a valid phone number (7-15 digits).",
        )

    if not validate_email(request.email):
        errors["email"] = _error(ValidationErrorKind.INVALID_EMAIL, "Enter a valid email.")

    date_ok = True
    try:
        parse_iso_date(request.date)
    except ValueError:
        date_ok = False
        errors["date"] = _error(
            ValidationErrorKind.INVALID_DATE_TIME, "Enter a valid date (YYYY-MM-DD)."
        )

    time_ok = request.time in slots
    if not time_ok:
        errors["time"] = _error(
            ValidationErrorKind.INVALID_DATE_TIME, "Choose one of the available times."
        )

    if date_ok and time_ok:
        selected = slot_datetime(request.date, request.time, tz=now.tzinfo)
        if selected < now - timedelta(minutes=grace_minutes):
            errors["date"] = _error(
                ValidationErrorKind.PAST_DATE_TIME, "Please choose a future date/time."
            )

    party_size = parse_party_size(request.party_size)
    if party_size is None or not min_party_size <= party_size <= max_party_size:
        errors["partySize"] = _error(
            ValidationErrorKind.INVALID_PARTY_SIZE,
            f"Party size must be between {min_party_size} and {max_party_size}.",
        )

    if time_ok and available_tables(store, request.date, request.time, capacity) <= 0:
        errors["time"] = _error(
            ValidationErrorKind.SLOT_FULL, "No tables available for the chosen slot."
        )

    return errors


def build_booking(request: BookingRequest, now: datetime) -> Booking:
    """Create the booking record for an already validated request."""
    return Booking(
        id=generate_booking_id(now),
        name=sanitize_text(request.name),
        phone=normalize_phone(request.phone),
        email=request.email.strip(),
        date=request.date,
        time=request.time,
        party_size=parse_party_size(request.party_size),
        notes=sanitize_text(request.notes, MAX_NOTES_LENGTH),
        created_at=now,
    )


def submit(
    store: BookingStore,
    request: BookingRequest,
    now: datetime,
    **rules,
) -> AdmissionResult:
    """
    Admit a booking request.

    On success the new booking is placed in front of the existing ones in
    the returned store. On failure the input store is returned as-is along
    with the errors.

    Args:
        store: Current bookings
        request: Raw form input
        now: Current time, used for the past-time rule and ``createdAt``
        **rules: Optional overrides passed to validate_request (slots,
            capacity, grace_minutes, min_party_size, max_party_size)
    """
    errors = validate_request(store, request, now, **rules)
    if errors:
        return AdmissionResult(store=store, errors=errors)

    booking = build_booking(request, now)
    return AdmissionResult(
        store=store.prepend(booking),
        booking=booking,
        message=f"Booking confirmed for {booking.date} at {booking.time}",
    )

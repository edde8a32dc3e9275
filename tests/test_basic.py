"""
Basic unit tests for models and configuration.
"""

from datetime import datetime

import pytest
from pydantic import ValidationError

from config import Settings
from models import Booking, BookingRequest, BookingStore, ValidationErrorKind


def test_validation_error_kinds():
    """Test error kind values."""
    assert ValidationErrorKind.EMPTY_FIELD.value == "EmptyField"
    assert ValidationErrorKind.INVALID_PHONE.value == "InvalidPhone"
    assert ValidationErrorKind.INVALID_EMAIL.value == "InvalidEmail"
    assert ValidationErrorKind.PAST_DATE_TIME.value == "PastDateTime"
    assert ValidationErrorKind.INVALID_PARTY_SIZE.value == "InvalidPartySize"
    assert ValidationErrorKind.SLOT_FULL.value == "SlotFull"


def test_settings_defaults():
    """Test configuration defaults."""
    config = Settings(_env_file=None)
    assert config.storage_key == "littleLemonBookings"
    assert config.max_tables_per_slot == 6
    assert config.opening_time == "11:00"
    assert config.closing_time == "22:00"
    assert config.slot_step_minutes == 30
    assert config.upcoming_limit == 50
    config.validate_all_required()


def test_settings_validation_lists_every_problem():
    """Test that invalid settings are all reported together."""
    config = Settings(
        _env_file=None, opening_time="25:00", slot_step_minutes=0, upcoming_limit=0
    )
    with pytest.raises(ValueError) as exc_info:
        config.validate_all_required()

    message = str(exc_info.value)
    assert "opening_time" in message
    assert "slot_step_minutes" in message
    assert "upcoming_limit" in message
    assert "closing_time" not in message


def test_booking_is_immutable(make_booking):
    """Test that bookings cannot be edited after creation."""
    booking = make_booking()
    with pytest.raises(ValidationError):
        booking.name = "Someone else"


def test_booking_accepts_camel_case_keys():
    """Test that persisted camelCase keys populate the model."""
    booking = Booking.model_validate(
        {
            "id": "abc",
            "name": "Ana",
            "phone": "+1 (234) 567-890",
            "email": "ana@x.com",
            "date": "2025-01-01",
            "time": "18:00",
            "partySize": 4,
            "notes": None,
            "createdAt": "2024-12-20T09:15:00.000Z",
        }
    )
    assert booking.party_size == 4
    assert booking.phone == "1234567890"
    assert booking.notes == ""
    assert booking.created_at.year == 2024


def test_booking_request_defaults():
    """Test the blank form state."""
    request = BookingRequest()
    assert request.name == ""
    assert request.party_size == 2
    assert BookingRequest(partySize="5").party_size == "5"


def test_store_prepend_and_without(make_booking):
    """Test store operations return new stores."""
    first = make_booking()
    second = make_booking()
    store = BookingStore().prepend(first).prepend(second)

    assert [b.id for b in store.bookings] == [second.id, first.id]
    assert store.get(first.id) == first
    assert store.get("missing") is None

    trimmed = store.without(second.id)
    assert len(trimmed) == 1
    assert len(store) == 2
    assert store.without("missing") is store


def test_store_created_at_round_trips(make_booking):
    """Test that created_at survives JSON serialization."""
    booking = make_booking(created_at=datetime(2024, 12, 31, 8, 30, 15))
    restored = Booking.model_validate_json(booking.model_dump_json(by_alias=True))
    assert restored == booking

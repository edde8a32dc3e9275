"""
Pytest configuration and shared fixtures.
"""

from datetime import datetime

import pytest

from config import settings
from models.booking import Booking, BookingRequest
from models.store import BookingStore
from storage import LocalStorage


@pytest.fixture(autouse=True)
def default_settings(monkeypatch, tmp_path):
    """Pin settings to their defaults so the environment cannot leak in."""
    monkeypatch.setattr(settings, "storage_path", str(tmp_path / "default_storage.json"))
    monkeypatch.setattr(settings, "storage_key", "littleLemonBookings")
    monkeypatch.setattr(settings, "max_tables_per_slot", 6)
    monkeypatch.setattr(settings, "opening_time", "11:00")
    monkeypatch.setattr(settings, "closing_time", "22:00")
    monkeypatch.setattr(settings, "slot_step_minutes", 30)
    monkeypatch.setattr(settings, "past_grace_minutes", 5)
    monkeypatch.setattr(settings, "min_party_size", 1)
    monkeypatch.setattr(settings, "max_party_size", 12)
    monkeypatch.setattr(settings, "upcoming_limit", 50)
    monkeypatch.setattr(settings, "log_file", None)
    yield settings


@pytest.fixture
def now():
    """Fixed 'current time': noon on 2024-12-31."""
    return datetime(2024, 12, 31, 12, 0)


@pytest.fixture
def storage(tmp_path):
    """Local storage backed by a temporary file."""
    return LocalStorage(tmp_path / "storage.json")


@pytest.fixture
def valid_request():
    """A request that passes every rule against an empty store at `now`."""
    return BookingRequest(
        name="Ana",
        phone="123-456-7890",
        email="ana@x.com",
        date="2024-12-31",
        time="18:00",
        party_size=3,
    )


@pytest.fixture
def make_booking():
    """Factory for stored bookings."""
    counter = {"n": 0}

    def _make(date="2025-01-01", time="18:00", **overrides):
        counter["n"] += 1
        data = {
            "id": f"booking_{counter['n']}",
            "name": "Guest",
            "phone": "1234567",
            "email": "guest@example.com",
            "date": date,
            "time": time,
            "party_size": 2,
            "notes": "",
            "created_at": datetime(2024, 12, 1, 9, 0),
        }
        data.update(overrides)
        return Booking(**data)

    return _make


@pytest.fixture
def full_slot_store(make_booking):
    """Store where 2025-01-01 18:00 already holds six bookings."""
    return BookingStore(
        bookings=tuple(make_booking("2025-01-01", "18:00") for _ in range(6))
    )

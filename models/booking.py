"""Booking models for table reservations."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field, field_validator

from utils.validation import normalize_phone


class Booking(BaseModel):
    """
    A confirmed table reservation.

    Immutable once created: bookings are only ever created or cancelled.
    Serialized with camelCase keys (``partySize``, ``createdAt``).
    """

    id: str = Field(..., min_length=1, description="Opaque unique booking ID")
    name: str = Field(..., min_length=1)
    phone: str = Field(..., pattern=r"^\d{7,15}$", description="Digits only")
    email: str
    date: str = Field(..., pattern=r"^\d{4}-\d{2}-\d{2}$", description="YYYY-MM-DD")
    time: str = Field(..., pattern=r"^\d{2}:\d{2}$", description="HH:MM timeslot")
    party_size: int = Field(..., ge=1, alias="partySize")
    notes: str = ""
    created_at: datetime = Field(..., alias="createdAt")

    class Config:
        frozen = True
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "id": "m5x2k9qa3f7b1c",
                "name": "Ana",
                "phone": "1234567890",
                "email": "ana@example.com",
                "date": "2025-01-01",
                "time": "18:00",
                "partySize": 3,
                "notes": "Window seat, please",
                "createdAt": "2024-12-20T09:15:00",
            }
        }

    @field_validator("phone", mode="before")
    @classmethod
    def _digits_only(cls, value: Any) -> Any:
        # Older records may still carry formatting characters
        if isinstance(value, str):
            return normalize_phone(value)
        return value

    @field_validator("notes", mode="before")
    @classmethod
    def _notes_default(cls, value: Any) -> Any:
        return "" if value is None else value


class BookingRequest(BaseModel):
    """
    Raw booking form input, as typed by the guest.

    Fields are deliberately loose; all checking happens during admission so
    that every problem can be reported at once.
    """

    name: str = ""
    phone: str = ""
    email: str = ""
    date: str = ""
    time: str = ""
    party_size: Any = Field(default=2, alias="partySize")
    notes: str = ""

    class Config:
        populate_by_name = True

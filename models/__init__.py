"""Pydantic models for data validation and serialization."""

from .booking import Booking, BookingRequest
from .result import AdmissionResult, FieldError, ValidationErrorKind
from .store import BookingStore

__all__ = [
    "AdmissionResult",
    "Booking",
    "BookingRequest",
    "BookingStore",
    "FieldError",
    "ValidationErrorKind",
]

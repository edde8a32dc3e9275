"""Admission result models: field errors and the outcome of a submission."""

from enum import Enum
from typing import Dict, Optional

from pydantic import BaseModel, Field

from utils.exceptions import BookingValidationError

from .booking import Booking
from .store import BookingStore


class ValidationErrorKind(str, Enum):
    """Why a booking field was rejected."""

    EMPTY_FIELD = "EmptyField"
    INVALID_PHONE = "InvalidPhone"
    INVALID_EMAIL = "InvalidEmail"
    INVALID_DATE_TIME = "InvalidDateTime"
    PAST_DATE_TIME = "PastDateTime"
    INVALID_PARTY_SIZE = "InvalidPartySize"
    SLOT_FULL = "SlotFull"


class FieldError(BaseModel):
    """A single field-scoped validation error."""

    kind: ValidationErrorKind
    message: str

    class Config:
        frozen = True


class AdmissionResult(BaseModel):
    """
    Outcome of submitting a booking request.

    On success ``booking`` is set and ``store`` holds the new booking; on
    failure ``errors`` maps form input names (``name``, ``phone``, ``email``,
    ``date``, ``time``, ``partySize``) to problems and ``store`` is the
    unchanged input store.
    """

    store: BookingStore
    booking: Optional[Booking] = None
    errors: Dict[str, FieldError] = Field(default_factory=dict)
    message: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.booking is not None and not self.errors

    def error_messages(self) -> Dict[str, str]:
        """Human-readable message per field, for inline display."""
        return {field: error.message for field, error in self.errors.items()}

    def error_kinds(self) -> Dict[str, ValidationErrorKind]:
        return {field: error.kind for field, error in self.errors.items()}

    def unwrap(self) -> Booking:
        """
        Return the created booking.

        Raises:
            BookingValidationError: If the submission was rejected
        """
        if not self.ok:
            raise BookingValidationError(self.error_messages())
        return self.booking

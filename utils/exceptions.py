"""
Custom exception classes for the reservation widget.

Field-level validation problems are normally returned, not raised (see
models.result.AdmissionResult); these exceptions cover the remaining cases.
"""

from typing import Dict


class ReservationError(Exception):
    """Base exception for reservation operations."""

    pass


class StorageError(ReservationError):
    """Raised when the local key-value store cannot be written."""

    pass


class BookingValidationError(ReservationError):
    """Raised when a rejected admission result is unwrapped."""

    def __init__(self, errors: Dict[str, object]):
        self.errors = errors
        fields = ", ".join(sorted(errors)) or "unknown"
        super().__init__(f"Booking rejected: invalid {fields}")

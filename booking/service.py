"""
Reservation service: the widget's single owner of booking state.

Loads the store from local storage once, routes every submission and
cancellation through the pure booking functions, and writes the full store
back after each change.

Capacity is checked and then inserted without any locking. This is only
safe with one writer; a second process sharing the storage file could
overbook a slot.
"""

from datetime import datetime
from typing import Callable, Dict, List, Optional, Tuple

from config import settings
from models.booking import Booking, BookingRequest
from models.result import AdmissionResult
from models.store import BookingStore
from storage import LocalStorage, load_store, save_store
from utils.datetime_utils import local_now
from utils.logging_config import setup_logging

from . import admission, availability, cancellation, views
from .timeslots import get_time_slots

logger = setup_logging(__name__)


class ReservationService:
    """
    Booking store plus persistence.

    Args:
        storage: Local key-value storage; defaults to ``settings.storage_path``
        now_provider: Clock used when callers do not pass ``now``
        storage_key: Key holding the booking array
    """

    def __init__(
        self,
        storage: Optional[LocalStorage] = None,
        now_provider: Callable[[], datetime] = local_now,
        storage_key: Optional[str] = None,
    ):
        self.storage = storage or LocalStorage(settings.storage_path)
        self.storage_key = storage_key or settings.storage_key
        self._now = now_provider
        self._store = load_store(self.storage, self.storage_key)

    @property
    def store(self) -> BookingStore:
        return self._store

    @property
    def bookings(self) -> Tuple[Booking, ...]:
        return self._store.bookings

    def time_slots(self) -> Tuple[str, ...]:
        return get_time_slots()

    def get(self, booking_id: str) -> Optional[Booking]:
        return self._store.get(booking_id)

    def _commit(self, store: BookingStore) -> None:
        save_store(self.storage, store, self.storage_key)
        self._store = store

    # ========== Mutations ==========

    def submit(
        self, request: BookingRequest, now: Optional[datetime] = None
    ) -> AdmissionResult:
        """
        Validate and admit a booking, persisting it on success.

        Raises:
            StorageError: If the accepted booking cannot be written
        """
        now = now or self._now()
        result = admission.submit(self._store, request, now)

        if not result.ok:
            logger.info(
                f"Booking rejected for {request.date} {request.time}: "
                f"{', '.join(f'{k}={v.kind.value}' for k, v in result.errors.items())}"
            )
            return result

        self._commit(result.store)
        logger.info(
            f"Booking {result.booking.id} confirmed for {result.booking.date} "
            f"{result.booking.time} (party of {result.booking.party_size})"
        )
        return result

    def cancel(self, booking_id: str, confirmed: bool = True) -> bool:
        """
        Cancel a booking once the guest has confirmed.

        Returns:
            True if a booking was removed, False otherwise

        Raises:
            StorageError: If the updated store cannot be written
        """
        if not confirmed:
            logger.debug(f"Cancellation of {booking_id} not confirmed, ignoring")
            return False

        updated = cancellation.cancel(self._store, booking_id)
        if updated is self._store:
            logger.debug(f"Cancel requested for unknown booking {booking_id}")
            return False

        self._commit(updated)
        logger.info(f"Booking {booking_id} cancelled")
        return True

    # ========== Queries ==========

    def available_tables(self, date: str, time: str) -> int:
        return availability.available_tables(self._store, date, time)

    def availability_for_date(self, date: str) -> Dict[str, int]:
        """Free tables for each timeslot on ``date``."""
        return availability.availability_for_date(self._store, date, self.time_slots())

    def upcoming(
        self, now: Optional[datetime] = None, limit: Optional[int] = None
    ) -> List[Booking]:
        return views.upcoming(self._store, now or self._now(), limit)


_service: Optional[ReservationService] = None


def get_reservation_service() -> ReservationService:
    """
    Get or create the process-wide reservation service.

    Settings are validated on first use.

    Raises:
        ValueError: If the configuration is invalid
    """
    global _service
    if _service is None:
        settings.validate_all_required()
        _service = ReservationService()
    return _service

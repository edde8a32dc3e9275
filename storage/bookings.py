"""
Booking persistence on top of LocalStorage.

The whole booking sequence is stored as one JSON array under a single key.
Loading never fails: a missing key or malformed content yields an empty
store. Saving always rewrites the full array.
"""

import json
from typing import List, Optional

from pydantic import ValidationError

from config import settings
from models.booking import Booking
from models.store import BookingStore
from utils.logging_config import setup_logging

from .local_storage import LocalStorage

logger = setup_logging(__name__)


def dump_bookings(store: BookingStore) -> str:
    """Serialize the store to its persisted JSON array form."""
    records = [
        booking.model_dump(mode="json", by_alias=True) for booking in store.bookings
    ]
    return json.dumps(records, ensure_ascii=False)


def parse_bookings(raw: Optional[str]) -> BookingStore:
    """
    Parse a persisted JSON array back into a store.

    Entries that do not validate are dropped; everything else is kept in
    its original order.
    """
    if not raw:
        return BookingStore()

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        logger.warning(f"Stored bookings are not valid JSON, starting empty: {e}")
        return BookingStore()

    if not isinstance(data, list):
        logger.warning("Stored bookings are not a JSON array, starting empty")
        return BookingStore()

    bookings: List[Booking] = []
    for index, record in enumerate(data):
        try:
            bookings.append(Booking.model_validate(record))
        except ValidationError as e:
            logger.warning(
                f"Skipping malformed booking record at index {index}: "
                f"{e.error_count()} error(s)"
            )

    return BookingStore(bookings=tuple(bookings))


def load_store(storage: LocalStorage, key: Optional[str] = None) -> BookingStore:
    """Load the booking store from local storage."""
    key = key or settings.storage_key
    store = parse_bookings(storage.get_item(key))
    logger.info(f"Loaded {len(store)} booking(s) from '{key}'")
    return store


def save_store(
    storage: LocalStorage, store: BookingStore, key: Optional[str] = None
) -> None:
    """
    Persist the full booking sequence.

    Raises:
        StorageError: If the storage file cannot be written
    """
    key = key or settings.storage_key
    storage.set_item(key, dump_bookings(store))
    logger.debug(f"Persisted {len(store)} booking(s) to '{key}'")

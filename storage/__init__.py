"""Local storage and booking persistence."""

from .bookings import dump_bookings, load_store, parse_bookings, save_store
from .local_storage import LocalStorage

__all__ = [
    "LocalStorage",
    "dump_bookings",
    "load_store",
    "parse_bookings",
    "save_store",
]

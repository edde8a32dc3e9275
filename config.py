"""
Configuration module for the Little Lemon reservation widget.
Loads environment variables and provides typed configuration.
"""

import re
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load .env file
env_path = Path(__file__).parent / ".env"
load_dotenv(dotenv_path=env_path)

_HHMM_PATTERN = re.compile(r"^([01]\d|2[0-3]):[0-5]\d$")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Storage
    storage_path: str = "little_lemon_storage.json"
    storage_key: str = "littleLemonBookings"

    # Capacity (mock: limited tables per timeslot)
    max_tables_per_slot: int = 6

    # Opening hours and booking grid
    opening_time: str = "11:00"
    closing_time: str = "22:00"
    slot_step_minutes: int = 30

    # Booking rules
    past_grace_minutes: int = 5
    min_party_size: int = 1
    max_party_size: int = 12
    upcoming_limit: int = 50

    # Logging
    log_level: str = "INFO"
    log_file: Optional[str] = None  # e.g. "reservations.log", relative to log_dir
    log_dir: str = "logs"

    model_config = SettingsConfigDict(
        env_prefix="LITTLE_LEMON_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    def validate_all_required(self) -> None:
        """
        Validate that all settings hold usable values.

        Raises:
            ValueError: If one or more settings are invalid
        """
        invalid = []

        for field in ("opening_time", "closing_time"):
            if not _HHMM_PATTERN.match(getattr(self, field) or ""):
                invalid.append(field)

        if self.slot_step_minutes <= 0:
            invalid.append("slot_step_minutes")
        if self.max_tables_per_slot < 0:
            invalid.append("max_tables_per_slot")
        if self.past_grace_minutes < 0:
            invalid.append("past_grace_minutes")
        if self.min_party_size < 1 or self.min_party_size > self.max_party_size:
            invalid.append("min_party_size")
        if self.upcoming_limit <= 0:
            invalid.append("upcoming_limit")
        if not self.storage_key:
            invalid.append("storage_key")

        if invalid:
            raise ValueError(
                f"Missing or invalid configuration: "
                f"{', '.join(invalid)}. "
                f"Please check your .env file or LITTLE_LEMON_* environment "
                f"variables."
            )


# Global settings instance
settings = Settings()

"""
File-backed local key-value storage.

Behaves like a browser's local storage: string keys mapped to string values,
read and written synchronously by a single process. The whole mapping lives
in one JSON object file.
"""

import json
import os
import tempfile
from pathlib import Path
from typing import Dict, Optional, Union

from utils.exceptions import StorageError
from utils.logging_config import setup_logging

logger = setup_logging(__name__)


class LocalStorage:
    """JSON-file key-value store with get/set/remove semantics."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    @property
    def backup_path(self) -> Path:
        """Where an unusable storage file is moved before it is overwritten."""
        return self.path.with_name(self.path.name + ".corrupt")

    def _read_all(self, for_update: bool = False) -> Dict[str, str]:
        """
        Read the whole mapping; anything unreadable counts as empty.

        With ``for_update`` the caller is about to rewrite the file, so a file
        that cannot be parsed is moved to ``backup_path`` first and a file
        that cannot be read raises instead of being replaced.

        Raises:
            StorageError: If ``for_update`` and the file cannot be read or
                moved aside
        """
        try:
            raw = self.path.read_text(encoding="utf-8")
        except (FileNotFoundError, NotADirectoryError):
            return {}
        except OSError as e:
            if for_update:
                raise StorageError(f"Failed to read storage file {self.path}: {e}") from e
            logger.warning(f"Could not read storage file {self.path}: {e}")
            return {}

        try:
            data = json.loads(raw) if raw.strip() else {}
        except json.JSONDecodeError as e:
            logger.warning(f"Storage file {self.path} is corrupt, ignoring it: {e}")
            data = None

        if data is not None and not isinstance(data, dict):
            logger.warning(f"Storage file {self.path} does not hold an object, ignoring it")
            data = None

        if data is None:
            if for_update:
                self._move_aside()
            return {}

        dropped = sorted(str(k) for k, v in data.items() if not isinstance(v, str))
        if dropped:
            logger.warning(
                f"Ignoring non-string values in {self.path} for key(s): "
                f"{', '.join(dropped)}"
                + (" (they will not be written back)" if for_update else "")
            )

        return {str(k): v for k, v in data.items() if isinstance(v, str)}

    def _move_aside(self) -> None:
        try:
            os.replace(self.path, self.backup_path)
        except OSError as e:
            raise StorageError(
                f"Failed to back up unusable storage file {self.path}: {e}"
            ) from e
        logger.warning(f"Moved unusable storage file to {self.backup_path}")

    def _write_all(self, data: Dict[str, str]) -> None:
        """
        Replace the file contents atomically.

        Raises:
            StorageError: If the file cannot be written
        """
        directory = self.path.parent
        try:
            directory.mkdir(parents=True, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(
                dir=directory, prefix=f".{self.path.name}.", suffix=".tmp"
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    json.dump(data, f, ensure_ascii=False)
                os.replace(tmp_path, self.path)
            except BaseException:
                if os.path.exists(tmp_path):
                    os.unlink(tmp_path)
                raise
        except OSError as e:
            raise StorageError(f"Failed to write storage file {self.path}: {e}") from e

    def get_item(self, key: str) -> Optional[str]:
        """Return the value stored under ``key``, or None."""
        return self._read_all().get(key)

    def set_item(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``, replacing any previous value."""
        data = self._read_all(for_update=True)
        data[key] = value
        self._write_all(data)

    def remove_item(self, key: str) -> None:
        """Delete ``key``; missing keys are ignored."""
        data = self._read_all(for_update=True)
        if key in data:
            del data[key]
            self._write_all(data)

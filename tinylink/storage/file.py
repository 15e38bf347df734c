"""File-backed storage slot."""

import asyncio
import logging
import os
import re
import tempfile
from typing import Optional

from .base import StorageSlotBase
from ..errors import StorageError


_SAFE_KEY = re.compile(r"^[A-Za-z0-9_.-]+$")


class FileSlot(StorageSlotBase):
    """Stores each key as ``<directory>/<key>.json``.

    Writes go to a temporary file in the same directory and are renamed into
    place, so a reader never sees a half-written value.
    """

    def __init__(self, directory: str, logger: Optional[logging.Logger] = None):
        """Initialize file slot.

        Args:
            directory: Directory holding the slot files (created if missing)
            logger: Optional logger instance
        """
        self.directory = directory
        self.logger = logger or logging.getLogger(__name__)

    def _path_for(self, key: str) -> str:
        if not _SAFE_KEY.match(key):
            raise StorageError(f"Invalid storage key: {key!r}")
        return os.path.join(self.directory, f"{key}.json")

    def _read_sync(self, key: str) -> Optional[str]:
        path = self._path_for(key)
        try:
            with open(path, "r", encoding="utf-8") as f:
                return f.read()
        except FileNotFoundError:
            return None
        except OSError as e:
            raise StorageError(f"Failed to read {path}: {e}") from e

    def _write_sync(self, key: str, value: str) -> None:
        path = self._path_for(key)
        try:
            os.makedirs(self.directory, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(prefix=f".{key}.", suffix=".tmp", dir=self.directory)
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    f.write(value)
                os.replace(tmp_path, path)
            except BaseException:
                if os.path.exists(tmp_path):
                    os.unlink(tmp_path)
                raise
        except OSError as e:
            raise StorageError(f"Failed to write {path}: {e}") from e
        self.logger.debug(f"Wrote {len(value)} bytes to {path}")

    def _remove_sync(self, key: str) -> None:
        path = self._path_for(key)
        try:
            os.unlink(path)
        except FileNotFoundError:
            pass
        except OSError as e:
            raise StorageError(f"Failed to remove {path}: {e}") from e

    async def get_item(self, key: str) -> Optional[str]:
        return await asyncio.to_thread(self._read_sync, key)

    async def set_item(self, key: str, value: str) -> None:
        await asyncio.to_thread(self._write_sync, key, value)

    async def remove_item(self, key: str) -> None:
        await asyncio.to_thread(self._remove_sync, key)

    async def health_check(self) -> bool:
        """Healthy when the directory exists (or can be created) and is writable."""
        try:
            os.makedirs(self.directory, exist_ok=True)
        except OSError as e:
            self.logger.error(f"Storage directory unavailable: {e}")
            return False
        return os.access(self.directory, os.W_OK)

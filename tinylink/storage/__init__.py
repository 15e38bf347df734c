"""Storage layer for TinyLink."""

from .base import StorageSlotBase
from .memory import MemorySlot
from .file import FileSlot
from .redis_slot import RedisSlot
from .repository import LinkRepository, DEFAULT_STORAGE_KEY

__all__ = [
    "StorageSlotBase",
    "MemorySlot",
    "FileSlot",
    "RedisSlot",
    "LinkRepository",
    "DEFAULT_STORAGE_KEY",
]

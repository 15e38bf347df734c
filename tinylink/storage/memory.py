"""In-process storage slot."""

from typing import Dict, Optional

from .base import StorageSlotBase


class MemorySlot(StorageSlotBase):
    """Dictionary-backed slot. Contents live as long as the instance."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._items: Dict[str, str] = dict(initial or {})

    async def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    async def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    async def remove_item(self, key: str) -> None:
        self._items.pop(key, None)

    async def health_check(self) -> bool:
        return True

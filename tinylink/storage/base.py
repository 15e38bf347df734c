"""Abstract base class for storage slot implementations."""

from abc import ABC, abstractmethod
from typing import Optional


class StorageSlotBase(ABC):
    """String key-value store holding serialized link collections.

    Implementations raise ``StorageError`` when the backend fails.
    """

    @abstractmethod
    async def get_item(self, key: str) -> Optional[str]:
        """Get the value stored under a key.

        Args:
            key: Slot key

        Returns:
            Stored string, or None if the key has never been written
        """
        pass

    @abstractmethod
    async def set_item(self, key: str, value: str) -> None:
        """Store a value under a key, replacing any previous value.

        Args:
            key: Slot key
            value: String to store
        """
        pass

    @abstractmethod
    async def remove_item(self, key: str) -> None:
        """Remove a key. Removing a missing key is not an error.

        Args:
            key: Slot key
        """
        pass

    @abstractmethod
    async def health_check(self) -> bool:
        """Check if the backend is usable.

        Returns:
            True if healthy, False otherwise
        """
        pass

    async def close(self) -> None:
        """Release backend resources."""
        pass

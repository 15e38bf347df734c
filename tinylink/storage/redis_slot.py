"""Redis storage slot for TinyLink."""

import logging
from typing import Optional

import redis.asyncio as redis

from .base import StorageSlotBase
from ..errors import StorageError


class RedisSlot(StorageSlotBase):
    """Redis-backed slot. Each key maps to one Redis string."""

    def __init__(
        self,
        redis_url: Optional[str] = None,
        prefix: str = "tinylink:",
        logger: Optional[logging.Logger] = None,
        client: Optional[redis.Redis] = None,
    ):
        """Initialize Redis slot.

        Args:
            redis_url: Redis connection URL (e.g., redis://localhost:6379/0)
            prefix: Namespace prepended to every key
            logger: Optional logger instance
            client: Pre-built client (takes precedence over redis_url)
        """
        if client is None and not redis_url:
            raise ValueError("RedisSlot needs a redis_url or a client")

        self.redis_url = redis_url
        self.prefix = prefix
        self.logger = logger or logging.getLogger(__name__)
        self.client = client

    async def connect(self) -> None:
        """Connect to Redis and verify with a ping."""
        if self.client is None:
            self.client = redis.from_url(
                self.redis_url,
                encoding="utf-8",
                decode_responses=True,
            )
        try:
            await self.client.ping()
        except redis.RedisError as e:
            raise StorageError(f"Failed to connect to Redis: {e}") from e
        self.logger.info("Connected to Redis")

    def _require_client(self) -> redis.Redis:
        if self.client is None:
            raise StorageError("Redis slot is not connected")
        return self.client

    def get_redis_key(self, key: str) -> str:
        """Namespaced Redis key for a slot key."""
        return f"{self.prefix}{key}"

    async def get_item(self, key: str) -> Optional[str]:
        client = self._require_client()
        try:
            value = await client.get(self.get_redis_key(key))
        except redis.RedisError as e:
            raise StorageError(f"Redis get error: {e}") from e
        if isinstance(value, bytes):
            value = value.decode("utf-8")
        return value

    async def set_item(self, key: str, value: str) -> None:
        client = self._require_client()
        try:
            await client.set(self.get_redis_key(key), value)
        except redis.RedisError as e:
            raise StorageError(f"Redis set error: {e}") from e

    async def remove_item(self, key: str) -> None:
        client = self._require_client()
        try:
            await client.delete(self.get_redis_key(key))
        except redis.RedisError as e:
            raise StorageError(f"Redis delete error: {e}") from e

    async def health_check(self) -> bool:
        if self.client is None:
            return False
        try:
            return bool(await self.client.ping())
        except redis.RedisError as e:
            self.logger.error(f"Redis health check failed: {e}")
            return False

    async def close(self) -> None:
        """Close Redis connection."""
        if self.client is not None:
            await self.client.aclose()
            self.client = None
            self.logger.info("Redis connection closed")

"""Build storage and service instances from configuration."""

import logging
from typing import Optional

from .service import LinkService
from .shortcode import ShortCodeGenerator
from .storage import FileSlot, LinkRepository, MemorySlot, RedisSlot, StorageSlotBase


async def create_slot(config, logger: Optional[logging.Logger] = None) -> StorageSlotBase:
    """Create (and connect) the storage slot selected by ``config.storage_backend``.

    Raises:
        ValueError: If the backend is unknown or misconfigured
        StorageError: If Redis cannot be reached
    """
    logger = logger or logging.getLogger(__name__)
    backend = config.storage_backend

    if backend == "memory":
        logger.info("Using in-memory storage (links are lost on exit)")
        return MemorySlot()

    if backend == "file":
        logger.info(f"Using file storage in {config.storage_path}")
        return FileSlot(config.storage_path, logger=logger)

    if backend == "redis":
        if not config.redis_url:
            raise ValueError("storage_backend=redis requires REDIS_URL")
        logger.info(f"Connecting to Redis at {config.redis_url}")
        slot = RedisSlot(redis_url=config.redis_url, prefix=config.redis_prefix, logger=logger)
        await slot.connect()
        return slot

    raise ValueError(f"Unknown storage backend: {backend}")


def create_service(config, slot: StorageSlotBase, logger: Optional[logging.Logger] = None) -> LinkService:
    """Wire a repository and service around an existing slot."""
    repository = LinkRepository(
        slot=slot,
        generator=ShortCodeGenerator(default_length=config.short_code_length),
        key=config.storage_key,
        max_collision_retries=config.max_collision_retries,
        logger=logger,
    )
    return LinkService(
        repository=repository,
        logger=logger,
        enable_custom_codes=config.enable_custom_codes,
        latency_seconds=config.simulated_latency_ms / 1000.0,
        history_days=config.history_days,
        version=config.app_version,
    )

"""Link repository: the link collection kept as one JSON array in a storage slot."""

import asyncio
import json
import logging
from typing import List, Optional

from .base import StorageSlotBase
from ..errors import StorageError
from ..models import ApiResponse, CreateLinkRequest, Link, utc_now
from ..shortcode import ShortCodeGenerator


DEFAULT_STORAGE_KEY = "tinylink_db"

LINK_NOT_FOUND = "Link not found"
CODE_IN_USE = "Short code already in use."


class LinkRepository:
    """CRUD over the stored link collection.

    Every public operation returns an ``ApiResponse``; not-found and conflict
    are reported through its status. Storage failures and corrupt stored data
    raise ``StorageError``.
    """

    def __init__(
        self,
        slot: StorageSlotBase,
        generator: Optional[ShortCodeGenerator] = None,
        key: str = DEFAULT_STORAGE_KEY,
        max_collision_retries: int = 5,
        logger: Optional[logging.Logger] = None,
    ):
        """Initialize repository.

        Args:
            slot: Storage slot holding the serialized collection
            generator: Short code generator for links without a custom code
            key: Slot key of the collection
            max_collision_retries: Collisions tolerated per code length
            logger: Optional logger
        """
        self.slot = slot
        self.generator = generator or ShortCodeGenerator()
        self.key = key
        self.max_collision_retries = max_collision_retries
        self.logger = logger or logging.getLogger(__name__)
        self._lock = asyncio.Lock()

    async def _load(self) -> List[Link]:
        stored = await self.slot.get_item(self.key)
        if not stored:
            return []
        try:
            records = json.loads(stored)
        except json.JSONDecodeError as e:
            raise StorageError(f"Stored link collection is not valid JSON: {e}") from e
        if not isinstance(records, list):
            raise StorageError("Stored link collection is not a JSON array")
        try:
            return [Link.from_dict(record) for record in records]
        except (KeyError, TypeError, ValueError) as e:
            raise StorageError(f"Stored link record is malformed: {e}") from e

    async def _save(self, links: List[Link]) -> None:
        await self.slot.set_item(self.key, json.dumps([link.to_dict() for link in links]))

    @staticmethod
    def _find(links: List[Link], code: str) -> Optional[int]:
        for index, link in enumerate(links):
            if link.code == code:
                return index
        return None

    async def get_links(self) -> ApiResponse:
        """All links, newest first."""
        links = await self._load()
        # sorted() is stable, so equal timestamps keep stored order
        links = sorted(links, key=lambda link: link.created_at, reverse=True)
        return ApiResponse(status=200, data=links)

    async def get_link_by_code(self, code: str) -> ApiResponse:
        links = await self._load()
        index = self._find(links, code)
        if index is None:
            return ApiResponse(status=404, error=LINK_NOT_FOUND)
        return ApiResponse(status=200, data=links[index])

    async def create_link(self, request: CreateLinkRequest) -> ApiResponse:
        """Create a link, with the requested code or a generated one.

        Args:
            request: URL and optional custom code

        Returns:
            201 with the new link, or 409 if the custom code is taken
        """
        async with self._lock:
            links = await self._load()
            taken = {link.code for link in links}

            code = request.code
            if code:
                if code in taken:
                    return ApiResponse(status=409, error=CODE_IN_USE)
            else:
                code = self.generator.generate_unique(
                    lambda candidate: candidate in taken,
                    max_attempts=self.max_collision_retries,
                )

            link = Link(
                code=code,
                original_url=request.url,
                created_at=utc_now(),
                clicks=0,
                last_clicked_at=None,
            )
            links.append(link)
            await self._save(links)

        self.logger.debug(f"Stored link {code} ({len(links)} total)")
        return ApiResponse(status=201, data=link)

    async def delete_link(self, code: str) -> ApiResponse:
        async with self._lock:
            links = await self._load()
            remaining = [link for link in links if link.code != code]
            if len(remaining) == len(links):
                return ApiResponse(status=404, error=LINK_NOT_FOUND)
            await self._save(remaining)
        return ApiResponse(status=200)

    async def record_click(self, code: str) -> ApiResponse:
        """Count one click and return the destination URL.

        Returns:
            200 with the original URL, or 404
        """
        async with self._lock:
            links = await self._load()
            index = self._find(links, code)
            if index is None:
                return ApiResponse(status=404, error=LINK_NOT_FOUND)
            link = links[index]
            link.clicks += 1
            link.last_clicked_at = utc_now()
            await self._save(links)
        return ApiResponse(status=200, data=link.original_url)

    async def health_check(self) -> bool:
        return await self.slot.health_check()

    async def close(self) -> None:
        await self.slot.close()

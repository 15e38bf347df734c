"""Business logic service for TinyLink."""

import asyncio
import functools
import logging
import time
from typing import Optional

from .common.validators import normalize_url, is_valid_url, is_valid_short_code
from .errors import TinyLinkError, ValidationError
from .history import synthesize_click_history
from .models import ApiResponse, CreateLinkRequest, HealthStatus
from .storage.repository import LinkRepository


UNEXPECTED_ERROR = "An unexpected error occurred."


def _status_coded(operation: str):
    """Turn exceptions raised by a service coroutine into an ``ApiResponse``.

    ``TinyLinkError`` keeps its status and message; anything else is logged
    with a traceback and reported as a generic 500.
    """
    def decorator(func):
        @functools.wraps(func)
        async def wrapper(self, *args, **kwargs) -> ApiResponse:
            try:
                return await func(self, *args, **kwargs)
            except TinyLinkError as e:
                log = self.logger.warning if e.status_code < 500 else self.logger.error
                log(f"{operation} failed: {e.message}")
                message = e.message if e.status_code < 500 else UNEXPECTED_ERROR
                return ApiResponse(status=e.status_code, error=message)
            except Exception:
                self.logger.exception(f"Unexpected error during {operation}")
                return ApiResponse(status=500, error=UNEXPECTED_ERROR)
        return wrapper
    return decorator


class LinkService:
    """Service layer for link management."""

    def __init__(
        self,
        repository: LinkRepository,
        logger: Optional[logging.Logger] = None,
        enable_custom_codes: bool = True,
        latency_seconds: float = 0.0,
        history_days: int = 7,
        version: str = "1.0.0",
        custom_code_min_length: int = 6,
        custom_code_max_length: int = 8,
    ):
        """Initialize link service.

        Args:
            repository: Link repository
            logger: Optional logger
            enable_custom_codes: Whether to allow custom short codes
            latency_seconds: Artificial delay before management operations
            history_days: Days covered by the synthesized click history
            version: Version reported by health()
            custom_code_min_length: Minimum custom code length
            custom_code_max_length: Maximum custom code length
        """
        self.repository = repository
        self.logger = logger or logging.getLogger(__name__)
        self.enable_custom_codes = enable_custom_codes
        self.latency_seconds = latency_seconds
        self.history_days = history_days
        self.version = version
        self.custom_code_min_length = custom_code_min_length
        self.custom_code_max_length = custom_code_max_length
        self._started = time.monotonic()

    async def _simulate_latency(self) -> None:
        if self.latency_seconds > 0:
            await asyncio.sleep(self.latency_seconds)

    def _validate_create(self, url: str, code: Optional[str]) -> CreateLinkRequest:
        if not url or not url.strip():
            raise ValidationError("URL is required.")

        final_url = normalize_url(url)
        is_valid, error = is_valid_url(final_url)
        if not is_valid:
            raise ValidationError(error)

        code = code.strip() if code else None
        if code:
            if not self.enable_custom_codes:
                raise ValidationError("Custom short codes are not enabled")
            is_valid, error = is_valid_short_code(
                code,
                min_length=self.custom_code_min_length,
                max_length=self.custom_code_max_length,
            )
            if not is_valid:
                raise ValidationError(error)

        return CreateLinkRequest(url=final_url, code=code or None)

    @_status_coded("create link")
    async def create_link(self, url: str, code: Optional[str] = None) -> ApiResponse:
        """Create a new short link.

        Args:
            url: Destination URL; ``https://`` is prepended when no scheme is given
            code: Optional custom short code

        Returns:
            201 with the link, 400 on invalid input, 409 if the code is taken
        """
        await self._simulate_latency()
        request = self._validate_create(url, code)
        response = await self.repository.create_link(request)
        if response.ok:
            self.logger.info(f"Created link: {response.data.code} -> {request.url}")
        else:
            self.logger.info(f"Rejected custom code {request.code!r}: {response.error}")
        return response

    @_status_coded("list links")
    async def list_links(self, query: Optional[str] = None) -> ApiResponse:
        """List links newest first, optionally filtered.

        Args:
            query: Case-insensitive substring matched against code or URL

        Returns:
            200 with the list of links
        """
        await self._simulate_latency()
        response = await self.repository.get_links()
        needle = (query or "").strip().lower()
        if needle:
            response.data = [
                link for link in response.data
                if needle in link.code.lower() or needle in link.original_url.lower()
            ]
        return response

    @_status_coded("get link")
    async def get_link(self, code: str) -> ApiResponse:
        await self._simulate_latency()
        return await self.repository.get_link_by_code(code)

    @_status_coded("get link stats")
    async def get_link_stats(self, code: str) -> ApiResponse:
        """Link details plus a synthesized per-day click history.

        Returns:
            200 with ``{"link": Link, "history": [ClickHistoryPoint]}``, or 404
        """
        await self._simulate_latency()
        response = await self.repository.get_link_by_code(code)
        if not response.ok:
            return response
        link = response.data
        history = synthesize_click_history(link.clicks, days=self.history_days)
        return ApiResponse(status=200, data={"link": link, "history": history})

    @_status_coded("delete link")
    async def delete_link(self, code: str) -> ApiResponse:
        await self._simulate_latency()
        response = await self.repository.delete_link(code)
        if response.ok:
            self.logger.info(f"Deleted link: {code}")
        return response

    @_status_coded("record click")
    async def record_click(self, code: str) -> ApiResponse:
        """Count a click and resolve the destination. Not delayed.

        Returns:
            200 with the original URL, or 404
        """
        response = await self.repository.record_click(code)
        if response.ok:
            self.logger.debug(f"Click on {code} -> {response.data}")
        else:
            self.logger.warning(f"Short code not found: {code}")
        return response

    async def health(self) -> HealthStatus:
        try:
            ok = await self.repository.health_check()
        except Exception:
            self.logger.exception("Storage health check raised")
            ok = False
        return HealthStatus(
            ok=ok,
            version=self.version,
            uptime=round(time.monotonic() - self._started, 3),
        )

    async def close(self) -> None:
        """Close storage connections."""
        await self.repository.close()

"""Core business logic for TinyLink."""

from .models import Link, CreateLinkRequest, ApiResponse, HealthStatus, ClickHistoryPoint
from .shortcode import ShortCodeGenerator
from .service import LinkService

__all__ = [
    "Link",
    "CreateLinkRequest",
    "ApiResponse",
    "HealthStatus",
    "ClickHistoryPoint",
    "ShortCodeGenerator",
    "LinkService",
]

__version__ = "1.0.0"

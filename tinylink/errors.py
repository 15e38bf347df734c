"""
Error classes for TinyLink.

Each error carries the status code it is reported with, so the service layer
can turn any of them into an ``ApiResponse`` without a lookup table.
"""

from typing import Optional, Dict, Any


class TinyLinkError(Exception):
    """
    Base TinyLink error.

    Attributes:
        status_code: Status code reported to callers (default: 500)
        message: User-facing error message
        details: Optional additional error details
    """
    status_code: int = 500
    message: str = "An unexpected error occurred."

    def __init__(self, message: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        """
        Initialize error.

        Args:
            message: Error message (overrides default)
            details: Optional additional error details
        """
        self.message = message or self.message
        self.details = details or {}
        super().__init__(self.message)


class ValidationError(TinyLinkError):
    """400 Validation error."""
    status_code = 400
    message = "Invalid request"


class NotFoundError(TinyLinkError):
    """404 Not Found error."""
    status_code = 404
    message = "Link not found"


class ConflictError(TinyLinkError):
    """409 Conflict error."""
    status_code = 409
    message = "Short code already in use."


class StorageError(TinyLinkError):
    """500 Storage backend or stored data error."""
    status_code = 500
    message = "Storage error"

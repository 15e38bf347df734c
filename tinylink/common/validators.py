"""Validation utilities for TinyLink."""

import re
from urllib.parse import urlparse
from typing import Tuple


URL_REQUIRED = "URL is required."
URL_INVALID = "Please enter a valid URL."
CODE_INVALID = "Custom code must be {min}-{max} alphanumeric characters."

MAX_URL_LENGTH = 2048

# Codes that would shadow top-level routes
RESERVED_CODES = {"healthz"}

_SCHEME_RE = re.compile(r"^https?://", re.IGNORECASE)
_HOST_LABEL_RE = re.compile(r"^[\da-z-]+$", re.IGNORECASE)
_TLD_RE = re.compile(r"^[a-z]{2,}$", re.IGNORECASE)


def normalize_url(url: str) -> str:
    """Strip whitespace and prepend ``https://`` when no http(s) scheme is given."""
    url = (url or "").strip()
    if url and not _SCHEME_RE.match(url):
        url = "https://" + url
    return url


def is_valid_url(url: str) -> Tuple[bool, str]:
    """Validate a (normalized) URL.

    Args:
        url: The URL to validate

    Returns:
        Tuple of (is_valid, error_message)
    """
    if not url or not isinstance(url, str):
        return False, URL_REQUIRED

    if len(url) > MAX_URL_LENGTH:
        return False, URL_INVALID

    if any(c.isspace() for c in url):
        return False, URL_INVALID

    try:
        result = urlparse(url)
        hostname = result.hostname
        # Accessing .port raises ValueError on a malformed port
        result.port
    except ValueError:
        return False, URL_INVALID

    if result.scheme.lower() not in ("http", "https") or not hostname:
        return False, URL_INVALID

    labels = hostname.split(".")
    if len(labels) < 2 or not all(labels):
        return False, URL_INVALID
    if not all(_HOST_LABEL_RE.match(label) for label in labels[:-1]):
        return False, URL_INVALID
    if not _TLD_RE.match(labels[-1]):
        return False, URL_INVALID

    return True, ""


def is_valid_short_code(short_code: str, min_length: int = 6, max_length: int = 8) -> Tuple[bool, str]:
    """Validate a custom short code.

    Args:
        short_code: The short code to validate
        min_length: Minimum length for short code
        max_length: Maximum length for short code

    Returns:
        Tuple of (is_valid, error_message)
    """
    message = CODE_INVALID.format(min=min_length, max=max_length)

    if not short_code or not isinstance(short_code, str):
        return False, message

    if not re.fullmatch(rf"[A-Za-z0-9]{{{min_length},{max_length}}}", short_code):
        return False, message

    if short_code in RESERVED_CODES:
        return False, f"'{short_code}' is a reserved word and cannot be used"

    return True, ""

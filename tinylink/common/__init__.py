"""Common utilities for TinyLink."""

from .validators import normalize_url, is_valid_url, is_valid_short_code
from .urls import build_base_url, build_short_url, get_path_prefix
from .logging_config import setup_logging, get_logger

__all__ = [
    "normalize_url",
    "is_valid_url",
    "is_valid_short_code",
    "build_base_url",
    "build_short_url",
    "get_path_prefix",
    "setup_logging",
    "get_logger",
]

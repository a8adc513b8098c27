"""Common utilities for URL shortener."""

from .validators import is_valid_url, parse_status
from .url_builder import build_short_url
from .logging_config import setup_logging

__all__ = [
    "is_valid_url",
    "parse_status",
    "build_short_url",
    "setup_logging",
]

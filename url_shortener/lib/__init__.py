"""Core business logic for URL shortener."""

from .shortcode import ShortCodeGenerator
from .service import URLShortenerService
from .exceptions import URLShortenerError, InvalidInputError, GeneratorExhaustedError

__all__ = [
    "ShortCodeGenerator",
    "URLShortenerService",
    "URLShortenerError",
    "InvalidInputError",
    "GeneratorExhaustedError",
]

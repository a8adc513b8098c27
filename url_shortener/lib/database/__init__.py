"""Storage layer for URL shortener."""

from .base import URLStoreBase
from .memory import InMemoryURLStore
from .models import URLRecord, URLStatus

__all__ = ["URLStoreBase", "InMemoryURLStore", "URLRecord", "URLStatus"]

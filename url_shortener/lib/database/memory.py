"""In-memory URL record store."""

import asyncio
import logging
from typing import Callable, Dict, List, Optional

from .base import URLStoreBase
from .models import URLRecord, URLStatus


class InMemoryURLStore(URLStoreBase):
    """Process-local record store keyed by short code.

    Every read-modify-write on a record runs under that short code's lock, so
    concurrent counter increments on the same code are never lost while
    operations on different codes do not contend.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """Initialize the store.

        Args:
            logger: Optional logger
        """
        self.logger = logger or logging.getLogger(__name__)
        self._records: Dict[str, URLRecord] = {}
        self._locks: Dict[str, asyncio.Lock] = {}

    def _lock_for(self, short_code: str) -> asyncio.Lock:
        # Locks are only created for codes being written; lookups never add one
        return self._locks.setdefault(short_code, asyncio.Lock())

    async def _update(
        self,
        short_code: str,
        mutate: Callable[[URLRecord], None],
        active_only: bool = False,
    ) -> Optional[URLRecord]:
        lock = self._locks.get(short_code)
        if lock is None:
            return None

        async with lock:
            record = self._records.get(short_code)
            if record is None or (active_only and not record.is_active):
                return None
            updated = record.copy()
            mutate(updated)
            self._records[short_code] = updated
            return updated.copy()

    async def get(self, short_code: str) -> Optional[URLRecord]:
        record = self._records.get(short_code)
        return record.copy() if record else None

    async def set(self, short_code: str, record: URLRecord) -> None:
        async with self._lock_for(short_code):
            self._records[short_code] = record.copy()

    async def has(self, short_code: str) -> bool:
        return short_code in self._records

    async def values(self) -> List[URLRecord]:
        return [record.copy() for record in list(self._records.values())]

    async def clear(self) -> None:
        # Locks are kept so a coroutine holding one still excludes later writers
        self._records.clear()
        self.logger.debug("Store cleared")

    async def insert(self, record: URLRecord) -> bool:
        async with self._lock_for(record.short_code):
            if record.short_code in self._records:
                self.logger.warning(f"Short code already exists: {record.short_code}")
                return False
            self._records[record.short_code] = record.copy()
            return True

    async def increment_visit_count(self, short_code: str) -> Optional[URLRecord]:
        def bump(record: URLRecord) -> None:
            record.visit_count += 1

        return await self._update(short_code, bump)

    async def record_visit_if_active(self, short_code: str) -> Optional[URLRecord]:
        def bump(record: URLRecord) -> None:
            record.visit_count += 1

        return await self._update(short_code, bump, active_only=True)

    async def increment_search_count(self, short_code: str) -> Optional[URLRecord]:
        def bump(record: URLRecord) -> None:
            record.search_count += 1

        return await self._update(short_code, bump)

    async def set_status(self, short_code: str, status: URLStatus) -> Optional[URLRecord]:
        def assign(record: URLRecord) -> None:
            record.status = status

        return await self._update(short_code, assign)

    async def count(self) -> int:
        return len(self._records)

    async def health_check(self) -> bool:
        return True

    async def close(self) -> None:
        self.logger.debug(f"Closing in-memory store holding {len(self._records)} records")

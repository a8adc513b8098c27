"""Abstract base class for URL record store implementations."""

from abc import ABC, abstractmethod
from typing import Optional, List

from .models import URLRecord, URLStatus


class URLStoreBase(ABC):
    """Abstract base class for URL record store operations.

    Records handed out by a store are copies; mutating them has no effect on
    the stored state. Counter and status changes must go through the atomic
    operations below rather than a get/modify/set sequence.
    """

    @abstractmethod
    async def get(self, short_code: str) -> Optional[URLRecord]:
        """Get the record for a short code.

        Args:
            short_code: The short code to lookup

        Returns:
            A copy of the record if found, None otherwise
        """
        pass

    @abstractmethod
    async def set(self, short_code: str, record: URLRecord) -> None:
        """Insert or fully replace the record stored under a short code.

        Args:
            short_code: The key to store under
            record: The record to store
        """
        pass

    @abstractmethod
    async def has(self, short_code: str) -> bool:
        """Check if a short code already exists.

        Args:
            short_code: The short code to check

        Returns:
            True if exists, False otherwise
        """
        pass

    @abstractmethod
    async def values(self) -> List[URLRecord]:
        """Snapshot of all records, order unspecified.

        Returns:
            List of record copies
        """
        pass

    @abstractmethod
    async def clear(self) -> None:
        """Remove every record. For tests and resets only."""
        pass

    @abstractmethod
    async def insert(self, record: URLRecord) -> bool:
        """Insert a record keyed by its short code if the code is free.

        Args:
            record: The record to insert

        Returns:
            True if inserted, False if the short code is already taken
        """
        pass

    @abstractmethod
    async def increment_visit_count(self, short_code: str) -> Optional[URLRecord]:
        """Atomically add one to the visit counter.

        Args:
            short_code: The short code to update

        Returns:
            The updated record, or None if not found
        """
        pass

    @abstractmethod
    async def record_visit_if_active(self, short_code: str) -> Optional[URLRecord]:
        """Atomically add one to the visit counter of an active record.

        The status check and the increment happen under the same lock, so a
        record deactivated concurrently is never counted.

        Args:
            short_code: The short code to update

        Returns:
            The updated record, or None if not found or inactive
        """
        pass

    @abstractmethod
    async def increment_search_count(self, short_code: str) -> Optional[URLRecord]:
        """Atomically add one to the search counter.

        Args:
            short_code: The short code to update

        Returns:
            The updated record, or None if not found
        """
        pass

    @abstractmethod
    async def set_status(self, short_code: str, status: URLStatus) -> Optional[URLRecord]:
        """Atomically set the status of a record.

        Args:
            short_code: The short code to update
            status: The new status

        Returns:
            The updated record, or None if not found
        """
        pass

    @abstractmethod
    async def count(self) -> int:
        """Number of records in the store."""
        pass

    @abstractmethod
    async def health_check(self) -> bool:
        """Check if the store is healthy.

        Returns:
            True if healthy, False otherwise
        """
        pass

    @abstractmethod
    async def close(self) -> None:
        """Release store resources."""
        pass

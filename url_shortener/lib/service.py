"""Business logic service for URL shortener."""

import logging
import math
import uuid
from typing import Optional, Dict, Any
from datetime import datetime, timezone

from .shortcode import ShortCodeGenerator
from .database.base import URLStoreBase
from .database.models import URLRecord, URLStatus
from .exceptions import GeneratorExhaustedError, InvalidInputError
from .common.url_builder import build_short_url


class URLShortenerService:
    """Service layer for URL shortening business logic.

    Records are never held across operations: every call re-reads the store
    so that counter updates made by concurrent calls are observed.
    """

    def __init__(
        self,
        store: URLStoreBase,
        base_url: str,
        short_code_generator: Optional[ShortCodeGenerator] = None,
        logger: Optional[logging.Logger] = None,
        path_prefix: str = "",
        max_collision_retries: int = 10,
    ):
        """Initialize URL shortener service.

        Args:
            store: Record store
            base_url: Base URL short links are built on
            short_code_generator: Optional short code generator
            logger: Optional logger
            path_prefix: Optional path segment between base URL and code
            max_collision_retries: Maximum inserts attempted when a freshly
                generated code is taken by a concurrent encode
        """
        self.store = store
        self.base_url = base_url
        self.generator = short_code_generator or ShortCodeGenerator(store)
        self.logger = logger or logging.getLogger(__name__)
        self.path_prefix = path_prefix
        self.max_collision_retries = max_collision_retries

    async def encode_long_url(self, original_url: str) -> Dict[str, str]:
        """Create a new short URL.

        The URL is expected to be validated by the caller.

        Args:
            original_url: The original long URL

        Returns:
            Dictionary with short_url and code

        Raises:
            GeneratorExhaustedError: If no free code could be claimed
        """
        for _ in range(self.max_collision_retries):
            code = await self.generator.generate()
            record = URLRecord(
                id=str(uuid.uuid4()),
                short_code=code,
                original_url=original_url,
                created_at=datetime.now(timezone.utc),
            )

            # The generator only probes; a concurrent encode may claim the code first
            if await self.store.insert(record):
                self.logger.info(f"Created short URL: {code} -> {original_url}")
                return {
                    "short_url": build_short_url(code, self.base_url, self.path_prefix),
                    "code": code,
                }

        raise GeneratorExhaustedError(
            f"Unable to claim a unique short code after {self.max_collision_retries} attempts"
        )

    async def decode_short_url(self, short_code: str) -> Optional[Dict[str, str]]:
        """Get the original URL for an active short code.

        Unknown and inactive codes both yield None so that disabled links
        are indistinguishable from missing ones.

        Args:
            short_code: The short code to lookup

        Returns:
            Dictionary with original_url, or None
        """
        record = await self.store.get(short_code)

        if record and record.is_active:
            return {"original_url": record.original_url}

        self.logger.debug(f"Short code not resolvable: {short_code}")
        return None

    async def resolve_redirect(self, short_code: str) -> Optional[str]:
        """Resolve a short code for redirection and count the visit.

        Args:
            short_code: The short code to resolve

        Returns:
            Redirect target, or None if unknown or inactive
        """
        record = await self.store.record_visit_if_active(short_code)
        if not record:
            self.logger.warning(f"Redirect miss for short code: {short_code}")
            return None

        return record.original_url

    async def list_all_shortened_urls(
        self,
        search: Optional[str] = None,
        page: int = 1,
        limit: int = 10,
    ) -> Dict[str, Any]:
        """List shortened URLs, newest first, with optional search.

        Every record matching a non-empty search has its search counter
        incremented once.

        Args:
            search: Case-insensitive substring of the original URL
            page: Requested page, clamped into the valid range
            limit: Page size

        Returns:
            Dictionary with urls (list of URLRecord) and pagination metadata

        Raises:
            InvalidInputError: If limit is less than 1
        """
        if limit < 1:
            raise InvalidInputError("limit must be at least 1")

        # Reverse insertion order first so records sharing a timestamp list newest first
        records = list(reversed(await self.store.values()))
        records.sort(key=lambda r: r.created_at, reverse=True)

        if search:
            query = search.lower()
            matches = []
            for record in records:
                if query not in record.original_url.lower():
                    continue
                updated = await self.store.increment_search_count(record.short_code)
                matches.append(updated or record)
            records = matches
            self.logger.debug(f"Search '{search}' matched {len(records)} URLs")

        total_count = len(records)
        total_pages = math.ceil(total_count / limit)
        current_page = max(1, min(page, total_pages or 1))

        start = (current_page - 1) * limit
        end = start + limit

        return {
            "urls": records[start:end],
            "pagination": {
                "total_count": total_count,
                "total_pages": total_pages,
                "current_page": current_page,
                "has_next_page": current_page < total_pages,
                "has_previous_page": current_page > 1,
            },
        }

    async def get_url_statistics(self, short_code: str) -> Optional[URLRecord]:
        """Get the full record for a short code, counting the lookup as a visit.

        Args:
            short_code: The short code to lookup

        Returns:
            The updated record, or None if not found
        """
        record = await self._record_visit(short_code)
        if record:
            self.logger.debug(f"Retrieved statistics for {short_code}")
        return record

    async def update(self, short_code: str, status: URLStatus) -> Optional[URLRecord]:
        """Set the status of a short URL.

        Any status may be set from any status.

        Args:
            short_code: The short code to update
            status: The new status

        Returns:
            The updated record, or None if not found
        """
        record = await self.store.set_status(short_code, URLStatus(status))
        if record:
            self.logger.info(f"Set status of {short_code} to {record.status.value}")
        return record

    async def health_check(self) -> Dict[str, Any]:
        """Perform health check.

        Returns:
            Dictionary with health status
        """
        store_healthy = await self.store.health_check()

        return {
            "store": store_healthy,
            "total_urls": await self.store.count(),
            "overall": store_healthy,
        }

    async def _record_visit(self, short_code: str) -> Optional[URLRecord]:
        """Count a statistics lookup as a visit.

        Redirects count through the store's active-only increment instead.
        """
        return await self.store.increment_visit_count(short_code)

    async def close(self) -> None:
        """Close service connections."""
        await self.store.close()

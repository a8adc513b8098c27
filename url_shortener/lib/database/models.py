"""Data models for URL shortener."""

from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from enum import Enum


class URLStatus(str, Enum):
    """Whether a mapping currently resolves on decode/redirect."""

    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"


@dataclass
class URLRecord:
    """Represents a URL mapping in the store."""

    id: str
    short_code: str
    original_url: str
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    visit_count: int = 0
    search_count: int = 0
    status: URLStatus = URLStatus.ACTIVE

    @property
    def is_active(self) -> bool:
        return self.status == URLStatus.ACTIVE

    def copy(self) -> "URLRecord":
        """Return a detached copy of this record."""
        return replace(self)

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "id": self.id,
            "short_code": self.short_code,
            "original_url": self.original_url,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "visit_count": self.visit_count,
            "search_count": self.search_count,
            "status": self.status.value,
        }

"""Pydantic schemas for API requests and responses."""

from datetime import datetime
from typing import Any, List

from pydantic import BaseModel, Field, field_validator

from url_shortener.lib.common.validators import is_valid_url, parse_status
from url_shortener.lib.database.models import URLStatus
from url_shortener.web_app.responses import CamelModel


class EncodeRequest(BaseModel):
    """Request to shorten a URL."""

    url: str = Field(..., description="The original long URL to shorten", max_length=2048)

    @field_validator('url')
    @classmethod
    def validate_url(cls, v: str) -> str:
        """Validate URL format."""
        is_valid, error = is_valid_url(v)
        if not is_valid:
            raise ValueError(error or 'Invalid URL format')
        return v

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"url": "https://indicina.co/"},
            ]
        }
    }


class UpdateStatusRequest(BaseModel):
    """Request to change the status of a short URL."""

    status: URLStatus = Field(..., description="The new status")

    @field_validator('status', mode='before')
    @classmethod
    def validate_status(cls, v: Any) -> URLStatus:
        """Accept status names case-insensitively."""
        return parse_status(v)

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"status": "INACTIVE"},
            ]
        }
    }


class EncodeData(CamelModel):
    """Result of shortening a URL."""

    short_url: str = Field(..., description="The complete short URL")
    code: str = Field(..., description="The generated short code")


class DecodeData(CamelModel):
    """Result of decoding a short code."""

    original_url: str


class URLRecordData(CamelModel):
    """Full record of a shortened URL."""

    id: str
    short_code: str
    original_url: str
    created_at: datetime
    visit_count: int
    search_count: int
    status: URLStatus


class PaginationData(CamelModel):
    """Pagination metadata for listings."""

    total_count: int
    total_pages: int
    current_page: int
    has_next_page: bool
    has_previous_page: bool


class ListData(CamelModel):
    """A page of shortened URLs."""

    urls: List[URLRecordData]
    pagination: PaginationData


class HealthResponse(CamelModel):
    """Health check response."""

    status: str = Field(..., description="Overall status")
    store: str = Field(..., description="Store status")
    total_urls: int = Field(..., description="Number of stored URLs")
    timestamp: datetime = Field(..., description="Check timestamp")

"""Configuration management for URL shortener."""

from typing import Optional
from pydantic_settings import BaseSettings
from pydantic import AliasChoices, Field


class Config(BaseSettings):
    """Application configuration."""

    # Server settings
    host: str = Field(
        default="0.0.0.0",
        description="Host to bind to"
    )

    port: int = Field(
        default=3000,
        description="Port to listen on"
    )

    # URL shortener settings
    base_url: str = Field(
        default="http://localhost:3000",
        validation_alias=AliasChoices("base_url", "domain"),
        description="Base domain short URLs are built on (BASE_URL or DOMAIN)"
    )

    path_prefix: str = Field(
        default="",
        description="Path prefix for short URLs (e.g., '/s' for /s/abc123)"
    )

    api_prefix: str = Field(
        default="/api",
        description="Prefix for the JSON API routes"
    )

    short_code_length: int = Field(
        default=6,
        ge=1,
        description="Length of generated short codes"
    )

    max_collision_retries: int = Field(
        default=10,
        ge=1,
        description="Maximum attempts when generating a free short code"
    )

    default_page_size: int = Field(
        default=10,
        ge=1,
        description="Page size used by the list endpoint when none is given"
    )

    max_page_size: int = Field(
        default=100,
        ge=1,
        description="Largest page size accepted by the list endpoint"
    )

    # Logging settings
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )

    log_file: Optional[str] = Field(
        default=None,
        description="Log file path (logs to stdout if not specified)"
    )

    log_json: bool = Field(
        default=False,
        description="Use JSON format for logs"
    )

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",  # Ignore extra environment variables
        "populate_by_name": True,
    }


def load_config() -> Config:
    """Load configuration from environment."""
    return Config()

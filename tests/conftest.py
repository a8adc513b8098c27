"""Pytest configuration and fixtures."""

import logging
import uuid

import pytest
from datetime import datetime, timedelta, timezone
from typing import AsyncGenerator

from httpx import ASGITransport, AsyncClient

from url_shortener.config import Config
from url_shortener.lib.database.memory import InMemoryURLStore
from url_shortener.lib.database.models import URLRecord, URLStatus
from url_shortener.lib.service import URLShortenerService
from url_shortener.lib.shortcode import ShortCodeGenerator
from url_shortener.lib.common.logging_config import setup_logging
from url_shortener.web_app import create_app

BASE_URL = "https://sho.rt"


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers added by setup_logging so they do not outlive the test."""
    yield
    package_logger = logging.getLogger("url_shortener")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()


@pytest.fixture
def logger():
    """Create test logger."""
    return setup_logging(level="DEBUG")


@pytest.fixture
def store(logger) -> InMemoryURLStore:
    """Create an empty in-memory store."""
    return InMemoryURLStore(logger=logger)


@pytest.fixture
def short_code_generator(store, logger):
    """Create short code generator."""
    return ShortCodeGenerator(store, length=6, logger=logger)


@pytest.fixture
def service(store, short_code_generator, logger) -> URLShortenerService:
    """Create service instance."""
    return URLShortenerService(
        store=store,
        base_url=BASE_URL,
        short_code_generator=short_code_generator,
        logger=logger,
    )


@pytest.fixture
def config() -> Config:
    """Create test configuration."""
    return Config(base_url=BASE_URL)


@pytest.fixture
def app(service, config, logger):
    """Create test FastAPI app."""
    return create_app(service_instance=service, config=config, logger=logger)


@pytest.fixture
async def client(app) -> AsyncGenerator[AsyncClient, None]:
    """Create test client."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as ac:
        yield ac


@pytest.fixture
def make_record():
    """Build records with explicit timestamps for ordering tests."""
    base_time = datetime(2024, 1, 1, tzinfo=timezone.utc)

    def _make(
        short_code: str,
        original_url: str = "https://example.com",
        minutes: int = 0,
        status: URLStatus = URLStatus.ACTIVE,
    ) -> URLRecord:
        return URLRecord(
            id=str(uuid.uuid4()),
            short_code=short_code,
            original_url=original_url,
            created_at=base_time + timedelta(minutes=minutes),
            status=status,
        )

    return _make


@pytest.fixture
def sample_urls():
    """Sample URLs for testing."""
    return [
        "https://indicina.co",
        "https://google.com",
        "https://github.com/user/repo",
    ]

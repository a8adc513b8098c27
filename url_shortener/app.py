#!/usr/bin/env python3
"""
Main entry point for URL shortener service.

Concurrency: requests are served by a single uvicorn worker with async I/O.
Records live in process memory, so running more than one worker process
would give each worker its own, diverging, store.

Usage:
    url-shortener
    python -m url_shortener.app

Environment variables:
    BASE_URL (or DOMAIN) - Base URL for short links
    PATH_PREFIX - Optional path segment in short links
    API_PREFIX - Prefix of the JSON API (default /api)
    HOST - Host to bind to
    PORT - Port to listen on
    SHORT_CODE_LENGTH - Length of generated codes
    MAX_COLLISION_RETRIES - Attempts before giving up on a free code
    LOG_LEVEL - Logging level
    LOG_FILE - Optional log file
    LOG_JSON - Set to true for JSON logs
"""

import logging
import signal
import sys
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI

from url_shortener.config import Config, load_config
from url_shortener.lib.database.memory import InMemoryURLStore
from url_shortener.lib.service import URLShortenerService
from url_shortener.lib.shortcode import ShortCodeGenerator
from url_shortener.lib.common.logging_config import setup_logging
from url_shortener.web_app import create_app


def build_service(config: Config, logger: Optional[logging.Logger] = None) -> URLShortenerService:
    """Wire the store, generator and service from configuration."""
    store = InMemoryURLStore(logger=logger)
    generator = ShortCodeGenerator(
        store,
        length=config.short_code_length,
        max_attempts=config.max_collision_retries,
        logger=logger,
    )
    return URLShortenerService(
        store=store,
        base_url=config.base_url,
        short_code_generator=generator,
        logger=logger,
        path_prefix=config.path_prefix,
        max_collision_retries=config.max_collision_retries,
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup and shutdown."""
    logger = app.state.logger

    logger.info(f"URL shortener ready, short links on {app.state.config.base_url}")

    yield

    logger.info("Shutting down URL shortener service...")
    await app.state.service.close()
    logger.info("Service stopped")


def main():
    """Main entry point."""
    config = load_config()

    logger = setup_logging(
        level=config.log_level,
        log_file=config.log_file,
        json_format=config.log_json,
    )

    logger.info("URL Shortener Service")
    logger.info(f"Configuration: {config.model_dump()}")

    service = build_service(config, logger)
    app = create_app(service_instance=service, config=config, logger=logger)
    app.state.logger = logger

    # Override lifespan
    app.router.lifespan_context = lifespan

    uvicorn_config = uvicorn.Config(
        app,
        host=config.host,
        port=config.port,
        log_level=config.log_level.lower(),
        access_log=False,
    )

    server = uvicorn.Server(uvicorn_config)

    # Setup signal handlers for graceful shutdown
    def handle_signal(signum, frame):
        logger.info(f"Received signal {signum}, initiating graceful shutdown...")
        server.should_exit = True

    signal.signal(signal.SIGINT, handle_signal)
    signal.signal(signal.SIGTERM, handle_signal)

    try:
        logger.info(f"Starting server on {config.host}:{config.port}")
        server.run()
    except Exception as e:
        logger.error(f"Server error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()

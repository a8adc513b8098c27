"""FastAPI application factory."""

import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api import api_router
from .web import web_router
from .errors import register_exception_handlers
from .middleware.logging import LoggingMiddleware


def create_app(
    service_instance,
    config,
    logger: Optional[logging.Logger] = None,
) -> FastAPI:
    """Create and configure FastAPI application.

    Args:
        service_instance: Service instance
        config: Configuration instance
        logger: Optional logger for request logging

    Returns:
        Configured FastAPI app
    """
    api_prefix = "/" + config.api_prefix.strip("/") if config.api_prefix.strip("/") else ""

    app = FastAPI(
        title="URL Shortener",
        description="Shorten, resolve, search and manage short links",
        version="1.0.0",
        docs_url=f"{api_prefix}/docs",
        redoc_url=f"{api_prefix}/redoc",
        openapi_url=f"{api_prefix}/openapi.json",
    )

    # Store instances in app state for access in routes
    app.state.service = service_instance
    app.state.config = config

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(LoggingMiddleware, logger=logger)

    register_exception_handlers(app)

    # API first: the redirect catch-all must not shadow it
    app.include_router(api_router, prefix=api_prefix, tags=["URL"])
    app.include_router(web_router, tags=["Redirect"])

    return app

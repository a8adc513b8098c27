"""Exception handlers rendering the failure envelope."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from url_shortener.lib.exceptions import GeneratorExhaustedError, InvalidInputError
from .responses import error_response

INTERNAL_ERROR_MESSAGE = "Internal server error, please try again"

logger = logging.getLogger("url_shortener.web")


def _validation_message(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"

    first = errors[0]
    message = str(first.get("msg", "Invalid request"))
    if message.startswith("Value error, "):
        message = message[len("Value error, "):]

    field = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    return f"{field}: {message}" if field else message


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    logger.warning(f"HTTP {exc.status_code} - {request.method} {request.url.path}: {exc.detail}")
    return error_response(exc.status_code, str(exc.detail))


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    message = _validation_message(exc)
    logger.warning(f"HTTP 400 - {request.method} {request.url.path}: {message}")
    return error_response(status.HTTP_400_BAD_REQUEST, message)


async def invalid_input_handler(request: Request, exc: InvalidInputError):
    logger.warning(f"HTTP 400 - {request.method} {request.url.path}: {exc}")
    return error_response(status.HTTP_400_BAD_REQUEST, str(exc))


async def generator_exhausted_handler(request: Request, exc: GeneratorExhaustedError):
    logger.error(f"HTTP 503 - {request.method} {request.url.path}: {exc}")
    return error_response(
        status.HTTP_503_SERVICE_UNAVAILABLE,
        "Could not allocate a short code, please retry",
    )


async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception(f"HTTP 500 - {request.method} {request.url.path}")
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE)


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the envelope-rendering handlers to an app."""
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(InvalidInputError, invalid_input_handler)
    app.add_exception_handler(GeneratorExhaustedError, generator_exhausted_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

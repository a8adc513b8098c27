"""API routes implementation."""

from datetime import datetime, timezone
from typing import Optional

from fastapi import APIRouter, Request, HTTPException, Query, status

from .schemas import (
    EncodeRequest,
    UpdateStatusRequest,
    EncodeData,
    DecodeData,
    URLRecordData,
    PaginationData,
    ListData,
    HealthResponse,
)
from url_shortener.lib.database.models import URLRecord
from url_shortener.lib.exceptions import InvalidInputError
from url_shortener.web_app.responses import ErrorEnvelope, SuccessEnvelope, success_response

router = APIRouter()

NOT_FOUND_MESSAGE = "Short URL not found"


def _record_data(record: URLRecord) -> URLRecordData:
    return URLRecordData(**record.to_dict())


@router.post(
    "/url/encode",
    status_code=status.HTTP_201_CREATED,
    response_model=SuccessEnvelope[EncodeData],
    responses={
        400: {"model": ErrorEnvelope, "description": "Invalid URL"},
        503: {"model": ErrorEnvelope, "description": "No free short code"},
    },
    summary="Shorten a long URL",
    description="Returns a shortened URL and its short code.",
)
async def encode(request: Request, body: EncodeRequest):
    """Create a shortened URL."""
    service = request.app.state.service

    result = await service.encode_long_url(body.url)

    return success_response(
        EncodeData(short_url=result["short_url"], code=result["code"]),
        status_code=status.HTTP_201_CREATED,
    )


@router.get(
    "/url/decode/{code}",
    response_model=SuccessEnvelope[DecodeData],
    responses={
        404: {"model": ErrorEnvelope, "description": "Unknown or inactive short code"},
    },
    summary="Decode a shortened URL",
    description="Returns the original URL for an active short code.",
)
async def decode(request: Request, code: str):
    """Decode a short code without counting a visit."""
    service = request.app.state.service

    result = await service.decode_short_url(code)

    if not result:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=NOT_FOUND_MESSAGE,
        )

    return success_response(DecodeData(original_url=result["original_url"]))


@router.get(
    "/url/list",
    response_model=SuccessEnvelope[ListData],
    responses={
        400: {"model": ErrorEnvelope, "description": "Invalid pagination"},
    },
    summary="List shortened URLs",
    description="Lists shortened URLs, newest first, with optional substring search and pagination.",
)
async def list_urls(
    request: Request,
    search: Optional[str] = Query(None, description="Case-insensitive substring of the original URL"),
    page: int = Query(1, description="Page number, clamped into the valid range"),
    limit: Optional[int] = Query(None, ge=1, description="Items per page"),
):
    """List shortened URLs."""
    service = request.app.state.service
    config = request.app.state.config

    limit = limit or config.default_page_size
    if limit > config.max_page_size:
        raise InvalidInputError(f"limit must be at most {config.max_page_size}")

    result = await service.list_all_shortened_urls(search=search, page=page, limit=limit)

    return success_response(
        ListData(
            urls=[_record_data(record) for record in result["urls"]],
            pagination=PaginationData(**result["pagination"]),
        )
    )


@router.get(
    "/url/statistic/{code}",
    response_model=SuccessEnvelope[URLRecordData],
    responses={
        404: {"model": ErrorEnvelope, "description": "Unknown short code"},
    },
    summary="Get URL statistics",
    description="Returns the full record for a short code. Each lookup counts as a visit.",
)
async def statistic(request: Request, code: str):
    """Get statistics for a shortened URL."""
    service = request.app.state.service

    record = await service.get_url_statistics(code)

    if not record:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=NOT_FOUND_MESSAGE,
        )

    return success_response(_record_data(record))


@router.patch(
    "/url/{code}",
    response_model=SuccessEnvelope[URLRecordData],
    responses={
        400: {"model": ErrorEnvelope, "description": "Invalid status"},
        404: {"model": ErrorEnvelope, "description": "Unknown short code"},
    },
    summary="Update URL status",
    description="Activates or deactivates a shortened URL.",
)
async def update_status(request: Request, code: str, body: UpdateStatusRequest):
    """Set the status of a shortened URL."""
    service = request.app.state.service

    record = await service.update(code, body.status)

    if not record:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=NOT_FOUND_MESSAGE,
        )

    return success_response(_record_data(record), message="URL status updated")


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Check if the service is healthy.",
)
async def health_check(request: Request):
    """Health check endpoint for load balancers and monitoring."""
    service = request.app.state.service

    health = await service.health_check()

    return HealthResponse(
        status="healthy" if health["overall"] else "unhealthy",
        store="healthy" if health["store"] else "unhealthy",
        total_urls=health["total_urls"],
        timestamp=datetime.now(timezone.utc),
    )

"""Response envelopes shared by every JSON endpoint."""

from typing import Any, Generic, Optional, TypeVar

from fastapi import status
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class CamelModel(BaseModel):
    """Base model serialized with camelCase keys."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class SuccessEnvelope(CamelModel, Generic[T]):
    """Envelope wrapping every successful API response."""

    success: bool = True
    status_code: int = 200
    message: str = "Success"
    data: Optional[T] = None


class ErrorEnvelope(CamelModel):
    """Envelope wrapping every failed API response."""

    success: bool = False
    status_code: int
    message: str


def success_response(
    data: Optional[Any] = None,
    status_code: int = status.HTTP_200_OK,
    message: str = "Success",
) -> JSONResponse:
    """Wrap data in the success envelope.

    Args:
        data: Payload, a pydantic model or plain JSON-compatible value
        status_code: HTTP status code
        message: Human-readable message

    Returns:
        JSON response
    """
    if isinstance(data, BaseModel):
        data = data.model_dump(mode="json", by_alias=True)

    envelope = SuccessEnvelope[Any](status_code=status_code, message=message, data=data)
    return JSONResponse(
        status_code=status_code,
        content=envelope.model_dump(mode="json", by_alias=True),
    )


def error_response(status_code: int, message: str) -> JSONResponse:
    """Wrap an error message in the failure envelope."""
    envelope = ErrorEnvelope(status_code=status_code, message=message)
    return JSONResponse(
        status_code=status_code,
        content=envelope.model_dump(mode="json", by_alias=True),
    )

"""Redirect route for short links."""

from fastapi import APIRouter, Request, status
from fastapi.responses import PlainTextResponse, RedirectResponse

router = APIRouter()

NOT_FOUND_TEXT = "Short URL not found"


@router.get("/{short_code}", include_in_schema=False)
async def redirect_to_url(request: Request, short_code: str):
    """Redirect to the original URL."""
    service = request.app.state.service

    # Resolving counts a visit; unknown and inactive codes get the same response
    original_url = await service.resolve_redirect(short_code)

    if not original_url:
        return PlainTextResponse(NOT_FOUND_TEXT, status_code=status.HTTP_404_NOT_FOUND)

    # Perform 302 redirect (temporary redirect for tracking)
    return RedirectResponse(url=original_url, status_code=status.HTTP_302_FOUND)

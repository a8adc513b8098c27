"""Validation utilities for URL shortener."""

from urllib.parse import urlparse
from typing import Tuple, Union

from ..database.models import URLStatus
from ..exceptions import InvalidInputError


def is_valid_url(url: str) -> Tuple[bool, str]:
    """Validate a URL.

    Args:
        url: The URL to validate

    Returns:
        Tuple of (is_valid, error_message)
    """
    if not url or not isinstance(url, str):
        return False, "URL is required"

    if len(url) > 2048:
        return False, "URL is too long (max 2048 characters)"

    if any(c.isspace() for c in url):
        return False, "Invalid URL format"

    try:
        result = urlparse(url)

        # Check if scheme is http or https
        if result.scheme not in ["http", "https"]:
            return False, "URL must use http or https protocol"

        # Check if netloc (domain) exists
        if not result.hostname:
            return False, "URL must have a valid domain"

        # .port raises ValueError for non-numeric or out-of-range ports
        if result.port == 0:
            return False, "URL must have a valid port"

        return True, ""

    except ValueError as e:
        return False, f"Invalid URL format: {str(e)}"


def parse_status(value: Union[str, URLStatus]) -> URLStatus:
    """Parse a status value, case-insensitively.

    Accepts "ACTIVE"/"INACTIVE" in any case, with "In Active" and "in_active"
    spellings treated as INACTIVE.

    Args:
        value: Raw status value

    Returns:
        The parsed status

    Raises:
        InvalidInputError: If the value is not a known status
    """
    if isinstance(value, URLStatus):
        return value
    if not isinstance(value, str):
        raise InvalidInputError("Invalid URL status")

    normalized = value.strip().upper().replace(" ", "").replace("_", "")
    try:
        return URLStatus(normalized)
    except ValueError:
        raise InvalidInputError(
            f"Invalid URL status '{value}', expected one of: "
            + ", ".join(s.value for s in URLStatus)
        ) from None

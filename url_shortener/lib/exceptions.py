"""Exceptions raised by the URL shortener core.

Classes:
    URLShortenerError:
        Generic base class for URL shortener exceptions.

    InvalidInputError:
        Raised when a URL, status or pagination argument is malformed.

    GeneratorExhaustedError:
        Raised when no free short code is found within the attempt budget.

Unknown or inactive short codes are not exceptions: lookups return None and
the HTTP layer renders a 404.
"""


class URLShortenerError(Exception):
    """Generic base class for URL shortener exceptions."""

    pass


class InvalidInputError(URLShortenerError, ValueError):
    """Exception raised when caller input is malformed."""

    pass


class GeneratorExhaustedError(URLShortenerError):
    """Exception raised when a unique short code could not be generated.

    Only the current encode call fails; the caller may retry.
    """

    pass

"""Exceptions raised by the Dark Sky client.

Transport failures are not wrapped: ``requests`` exceptions (``HTTPError``,
``ConnectionError``, ``Timeout``) reach the caller unchanged.
"""

from __future__ import annotations

from typing import Any


class DarkSkyError(Exception):
    """Base class for errors raised by this package."""


class HTTPException(DarkSkyError):
    """An error carrying an HTTP-style status code.

    ``str(exc)`` is the message, followed by ``data`` on a new line when given.
    """

    def __init__(self, code: int, message: str, data: Any = None) -> None:
        self.code = code
        self.message = message
        self.data = data
        super().__init__(message if data is None else f"{message}\n{data}")


class InvalidDate(HTTPException, ValueError):  # noqa: N818
    """A time value could not be read as a timestamp."""

    def __init__(self, data: Any = None) -> None:
        super().__init__(400, "Bad Request", data)


class NotFound(HTTPException):  # noqa: N818
    """The response lacks the data block the caller asked for."""

    def __init__(self, data: Any = None) -> None:
        super().__init__(404, "Not Found", data)


class MissingCoordinates(DarkSkyError, ValueError):  # noqa: N818
    """Latitude or longitude was never set."""


class MissingTime(DarkSkyError, ValueError):  # noqa: N818
    """A time-machine request was made without a time."""


def bad_request(data: Any = None) -> InvalidDate:
    """Build a 400 error for an unreadable date."""
    return InvalidDate(data)


def not_found(data: Any = None) -> NotFound:
    """Build a 404 error for a missing data block."""
    return NotFound(data)

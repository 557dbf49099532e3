"""Render results and their HTTP dispositions."""

from dataclasses import dataclass
from enum import IntEnum
from typing import Any


class Disposition(IntEnum):
    """Outcome of a render call, valued by the HTTP status it maps to."""

    OK = 200
    REDIRECT = 303
    BAD_REQUEST = 400
    UNAUTHORIZED = 401
    NOT_FOUND = 404
    INTERNAL_ERROR = 500


@dataclass(frozen=True)
class Result:
    """Result of rendering a page.

    Only the field matching the disposition is meaningful: ``data`` for OK,
    ``next`` for REDIRECT. ``error`` is logged when set and is never shown
    to the user.
    """

    disposition: Disposition
    data: Any = None
    error: BaseException | None = None
    next: str | None = None

    @property
    def status_code(self) -> int:
        return int(self.disposition)


STATUS_BAD_REQUEST = Result(Disposition.BAD_REQUEST)
STATUS_UNAUTHORIZED = Result(Disposition.UNAUTHORIZED)
STATUS_NOT_FOUND = Result(Disposition.NOT_FOUND)
STATUS_INTERNAL_ERROR = Result(Disposition.INTERNAL_ERROR)


def status_ok(data: Any) -> Result:
    """Return an OK result with data passed to the base template."""
    return Result(Disposition.OK, data=data)


def bad_request_with(err: BaseException) -> Result:
    """Return a result indicating a bad request."""
    return Result(Disposition.BAD_REQUEST, error=err)


def unauthorized_with(err: BaseException) -> Result:
    """Return a result indicating an unauthorized request."""
    return Result(Disposition.UNAUTHORIZED, error=err)


def internal_error_with(err: BaseException) -> Result:
    """Return a result indicating an internal error."""
    return Result(Disposition.INTERNAL_ERROR, error=err)


def redirect_with(uri: str) -> Result:
    """Return a result redirecting to another URI (303 See Other)."""
    return Result(Disposition.REDIRECT, next=uri)

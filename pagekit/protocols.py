"""Protocol definitions for the capabilities a page is built from."""

from collections.abc import Awaitable
from typing import Any, Protocol

from starlette.requests import Request

from pagekit.result import Result


class Renderer(Protocol):
    """Render function of a page.

    Any callable taking the request and returning a Result (or an awaitable
    of one) qualifies; no base class is involved.
    """

    def __call__(self, request: Request) -> Result | Awaitable[Result]: ...


class RequestLogger(Protocol):
    """Leveled, %-formatted logger as returned by a logger factory."""

    def debug(self, msg: Any, *args: Any, **kwargs: Any) -> None: ...

    def info(self, msg: Any, *args: Any, **kwargs: Any) -> None: ...

    def warning(self, msg: Any, *args: Any, **kwargs: Any) -> None: ...

    def error(self, msg: Any, *args: Any, **kwargs: Any) -> None: ...

    def critical(self, msg: Any, *args: Any, **kwargs: Any) -> None: ...


class LoggerFactory(Protocol):
    """Maps a request to the logger used while serving it."""

    def __call__(self, request: Request) -> RequestLogger: ...

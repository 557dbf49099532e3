"""A templated page: URI, render function and template set."""

import inspect
from collections.abc import Mapping
from typing import Any

from jinja2 import Environment
from starlette.concurrency import run_in_threadpool
from starlette.requests import Request
from starlette.responses import Response
from starlette.templating import Jinja2Templates
from starlette.types import Receive, Scope, Send

from pagekit.config import Settings
from pagekit.logging_config import log_with_context, redact_sensitive_data
from pagekit.protocols import LoggerFactory, Renderer, RequestLogger
from pagekit.result import Disposition, Result
from pagekit.views.responses import error_response, internal_error_response


class Page:
    """A page to be rendered.

    Pages are ASGI applications, so they can be handed to any router:

        app.add_route(page.uri, page)

    Pages are normally built through ``Pages.add``, which loads the
    templates and supplies the settings and logger factory.
    """

    def __init__(
        self,
        uri: str,
        render: Renderer,
        environment: Environment,
        settings: Settings,
        logger_factory: LoggerFactory,
    ):
        self.uri = uri
        self.render = render
        self.settings = settings
        self._logger_factory = logger_factory
        self._templates = Jinja2Templates(env=environment)

    def __repr__(self) -> str:
        return f"Page(uri={self.uri!r}, render={getattr(self.render, '__name__', self.render)!r})"

    @property
    def environment(self) -> Environment:
        return self._templates.env

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        request = Request(scope, receive)
        response = await self.handle(request)
        await response(scope, receive, send)

    async def handle(self, request: Request) -> Response:
        """Serve a request for this page.

        Calls the render function and answers according to the disposition
        of its result. Failures are logged here and answered with generic
        bodies; nothing is raised to the caller.

        Args:
            request: Incoming request

        Returns:
            Rendered template (200) or the fixed response for the disposition
        """
        logger = self._logger_factory(request)
        url = redact_sensitive_data(str(request.url))
        log_with_context(logger, "info", f"Page {self!r} will serve URL {url}", page=self.uri, event_type="page_serve")

        try:
            result = await self._call_render(request)
        except Exception as e:
            logger.error(
                f"Render function failed for {url}: {e}",
                exc_info=True,
                extra={"page": self.uri, "error_type": type(e).__name__, "event_type": "page_render_exception"},
            )
            return internal_error_response()

        if not isinstance(result, Result):
            log_with_context(
                logger,
                "error",
                f"Render function for {url} returned {type(result).__name__}, not a Result",
                page=self.uri,
                event_type="page_render_invalid",
            )
            return internal_error_response()

        if result.error is not None:
            log_with_context(
                logger,
                "error",
                f"Error while rendering {url}: {result.error}",
                page=self.uri,
                status_code=result.status_code,
                error_type=type(result.error).__name__,
                event_type="page_render_error",
            )

        if result.disposition != Disposition.OK:
            return error_response(result)

        try:
            return self._templates.TemplateResponse(
                request,
                self.settings.base_template,
                self._template_context(request, result.data),
            )
        except Exception as e:
            # A failure here is a template/data mismatch, i.e. a programming bug.
            log_with_context(
                logger,
                "error",
                f"Failed to render template: {e}",
                page=self.uri,
                template=self.settings.base_template,
                error_type=type(e).__name__,
                event_type="template_error",
            )
            return internal_error_response()

    async def _call_render(self, request: Request) -> Any:
        if inspect.iscoroutinefunction(self.render) or inspect.iscoroutinefunction(
            getattr(self.render, "__call__", None)
        ):
            return await self.render(request)
        result = await run_in_threadpool(self.render, request)
        if inspect.isawaitable(result):
            result = await result
        return result

    @staticmethod
    def _template_context(request: Request, data: Any) -> dict[str, Any]:
        """Template context: mapping data is spread into top-level names."""
        context: dict[str, Any] = dict(data) if isinstance(data, Mapping) else {}
        context["data"] = data
        context["request"] = request
        return context

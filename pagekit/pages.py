"""Registry of pages sharing settings and a logger factory.

Example usage:

    def render_home(request):
        return status_ok({"title": "Home"})

    pages = Pages(logger_factory=request_logger)
    home = pages.add("/", render_home, "tmpl/base.html", "tmpl/home.html")
    pages.register(app)
"""

from pathlib import Path

from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import RedirectResponse

from pagekit.config import Settings, get_settings
from pagekit.exceptions import ConfigurationError, ErrorCode
from pagekit.logging_config import get_logger, log_with_context
from pagekit.page import Page
from pagekit.protocols import LoggerFactory, Renderer
from pagekit.values import Values
from pagekit.views.template_loader import load_templates

logger = get_logger(__name__)


class Pages:
    """Builds pages and serves the helpers that need the shared configuration.

    The logger factory is required: pages cannot be built, and therefore
    nothing can be served, until one is supplied.
    """

    def __init__(self, logger_factory: LoggerFactory, settings: Settings | None = None):
        """Initialize the page registry.

        Args:
            logger_factory: Maps each request to the logger used while serving it
            settings: Page settings; the process-wide settings when omitted

        Raises:
            ConfigurationError: If logger_factory is missing or not callable
        """
        if logger_factory is None or not callable(logger_factory):
            raise ConfigurationError(
                "A logger factory is required to serve pages",
                code=ErrorCode.CONFIG_MISSING,
                details={"logger_factory": repr(logger_factory)},
            )
        self.logger_factory = logger_factory
        self.settings = settings if settings is not None else get_settings()
        self._pages: list[Page] = []

    @property
    def pages(self) -> tuple[Page, ...]:
        return tuple(self._pages)

    def add(self, uri: str, render: Renderer, *templates: str | Path) -> Page:
        """Create a new page.

        All templates are read and compiled here, so this is expected to run
        at startup.

        Args:
            uri: Path the page answers to
            render: Render function returning a Result
            *templates: Template files; one must provide the base template

        Returns:
            The new page

        Raises:
            TemplateLoadError: If a template cannot be read or parsed
        """
        environment = load_templates(templates, self.settings.template_dir)
        page = Page(uri, render, environment, self.settings, self.logger_factory)
        self._pages.append(page)
        log_with_context(
            logger,
            "info",
            "Page added",
            page=uri,
            templates=[str(t) for t in templates],
            event_type="page_added",
        )
        return page

    def register(self, app: Starlette) -> None:
        """Add every page to the app's routes and expose this registry on app.state."""
        for page in self._pages:
            app.add_route(page.uri, page)
        app.state.pages = self
        log_with_context(
            logger,
            "info",
            "Pages registered",
            uris=[page.uri for page in self._pages],
            event_type="pages_registered",
        )

    def show_error(self, request: Request, err: BaseException) -> RedirectResponse:
        """Redirect to the index page with the error param set to a static message.

        The provided error is logged, but not displayed to the user.
        """
        request_log = self.logger_factory(request)
        values = Values({self.settings.error_param: self.settings.bad_request_msg})
        next_url = values.add_to("/")
        log_with_context(
            request_log,
            "error",
            f"Returning bad request and redirecting to {next_url!r}: {err}",
            next_url=next_url,
            error_type=type(err).__name__,
            event_type="show_error",
        )
        return values.redirect("/")

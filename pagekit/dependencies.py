"""FastAPI dependencies for dependency injection."""

from fastapi import Request

from pagekit.pages import Pages


async def get_pages(request: Request) -> Pages:
    """
    Get the page registry from app state.

    Args:
        request: The FastAPI request object.

    Returns:
        The Pages instance registered on the app.

    Raises:
        RuntimeError: If no pages were registered on the app.
    """
    pages: Pages | None = getattr(request.app.state, "pages", None)

    if pages is None:
        raise RuntimeError("Pages not registered. Call Pages.register(app) at startup.")

    return pages

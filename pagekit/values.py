"""Simple URL parameters for building redirect targets."""

from urllib.parse import urlencode

from starlette.responses import RedirectResponse


class Values(dict[str, str]):
    """Single-valued URL parameters.

    Example:
        Values({"a": "1", "b": "2"}).add_to("/x")  # "/x?a=1&b=2"
    """

    def url_values(self) -> dict[str, list[str]]:
        """Return the values in multi-value form."""
        return {k: [v] for k, v in self.items()}

    def encode(self) -> str:
        """Encode the values as a query string, sorted by key."""
        return urlencode(sorted(self.url_values().items()), doseq=True)

    def add_to(self, uri: str) -> str:
        """Add the values to the specified URI."""
        return f"{uri}?{self.encode()}"

    def redirect(self, uri: str = "/") -> RedirectResponse:
        """Redirect (303 See Other) to ``uri`` with the values attached."""
        return RedirectResponse(self.add_to(uri), status_code=303)

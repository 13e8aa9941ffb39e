"""Combo exception hierarchy.

Shared across the pipeline, the middleware, and the hosting app so every
module raises and catches the same types.
"""

from dataclasses import dataclass


class ComboError(Exception):
    """Base for all combo-specific errors."""


class ConfigurationError(ComboError):
    """Raised when minify configuration is invalid."""


class NotConfigured(ConfigurationError):  # noqa: N818
    """Raised by every public operation when the roots are not configured.

    ``www_root``, ``js_root`` and ``css_root`` must all be set (and truthy)
    before handlers or ``combine()`` can run. This is raised directly to the
    caller, never turned into a response.
    """

    def __init__(self, detail: str = "") -> None:
        super().__init__(
            detail
            or (
                "combo is not setup properly.  Please call the setup function and "
                "provide the www_root, js_root, and css_root options."
            )
        )


@dataclass(frozen=True, slots=True)
class HTTPError(ComboError):
    """An error that maps directly to an HTTP status code.

    Raised by the app or middleware. The ASGI handler catches these and
    dispatches to the matching ``@app.error()`` handler.
    """

    status: int
    detail: str = ""
    headers: tuple[tuple[str, str], ...] = ()

    def __str__(self) -> str:
        if self.detail:
            return f"{self.status}: {self.detail}"
        return str(self.status)


class NotFound(HTTPError):  # noqa: N818 — conventional name in web frameworks
    """404 — nothing in the chain handled the request."""

    def __init__(self, detail: str = "Not Found") -> None:
        super().__init__(status=404, detail=detail)

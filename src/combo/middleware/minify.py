"""Minify middleware.

Mounts a ``Minify`` handle on the app: GET and HEAD requests whose path
is the configured ``css_root`` or ``js_root`` (with or without the
trailing slash) go through the matching pipeline. Everything else, and
every request the pipeline passes on, falls through to the next handler.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from combo.http.request import Request
from combo.http.response import Response
from combo.middleware.protocol import Next

if TYPE_CHECKING:
    from combo.minify import Minify


def _mount_path(path: str) -> str:
    """Normalize a mount path: leading slash, no trailing slash (``"/"`` stays)."""
    return "/" + path.strip("/")


class MinifyMiddleware:
    """Middleware that serves combined, minified assets.

    Usage::

        minify = Minify(MinifyConfig(www_root="./public"))
        app.add_middleware(MinifyMiddleware(minify))

        # Explicit mount points instead of css_root / js_root
        app.add_middleware(MinifyMiddleware(minify, css_path="/assets/css", js_path="/assets/js"))

    Mount paths default to the handle's ``css_root`` and ``js_root`` and
    are looked up per request, so ``minify.setup()`` takes effect
    immediately. Those defaults can't be known without a configuration,
    so an unconfigured handle raises ``NotConfigured`` on every request.
    With both paths given explicitly, only requests to them raise and
    every other route keeps working.
    """

    __slots__ = ("_css_path", "_js_path", "minify")

    def __init__(
        self,
        minify: Minify,
        *,
        css_path: str | None = None,
        js_path: str | None = None,
    ) -> None:
        self.minify = minify
        self._css_path = _mount_path(css_path) if css_path is not None else None
        self._js_path = _mount_path(js_path) if js_path is not None else None

    async def __call__(self, request: Request, next: Next) -> Response:
        """Serve minified CSS or JS, or fall through."""
        if request.method not in ("GET", "HEAD"):
            return await next(request)

        css_path, js_path = self._css_path, self._js_path
        if css_path is None or js_path is None:
            config = self.minify.require_config()
            css_path = css_path or _mount_path(config.css_root)
            js_path = js_path or _mount_path(config.js_root)

        path = _mount_path(request.path)
        if path == css_path:
            return await self.minify.css_handler(request, next)
        if path == js_path:
            return await self.minify.js_handler(request, next)
        return await next(request)

"""Middleware — Protocol-based, no inheritance required.

A middleware is any callable matching:
    async def mw(request: Request, next: Next) -> Response

Built-in middleware:
    MinifyMiddleware -- Serve combined, minified CSS and JS at the configured roots
"""

from combo.middleware.minify import MinifyMiddleware
from combo.middleware.protocol import Middleware, Next

__all__ = [
    "Middleware",
    "MinifyMiddleware",
    "Next",
]

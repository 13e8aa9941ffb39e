"""Exception -> Response mapping for the hosting app.

``HTTPError`` keeps its status; anything else is a 500 whose body is the
exception message, so a failing read or minifier explains itself. A
handler registered with ``@app.error()`` takes precedence in both cases.
"""

import logging
from collections.abc import Callable
from typing import Any

from combo._internal.invoke import invoke
from combo.errors import HTTPError
from combo.http.request import Request
from combo.http.response import Response

logger = logging.getLogger("combo.server")


async def call_error_handler(
    handler: Callable[..., Any],
    request: Request,
    exc: Exception,
    status: int,
) -> Response:
    """Run ``handler(request, exc)``; a 200 result is given *status*."""
    result = await invoke(handler, request, exc)
    response = result if isinstance(result, Response) else Response(str(result))
    if response.status == 200:
        response = response.with_status(status)
    return response


def _lookup(error_handlers: dict[int | type, Callable[..., Any]], exc: Exception, status: int):
    return error_handlers.get(type(exc)) or error_handlers.get(status)


async def handle_http_error(
    exc: HTTPError,
    request: Request,
    error_handlers: dict[int | type, Callable[..., Any]],
) -> Response:
    logger.debug("%d %s %s: %s", exc.status, request.method, request.path, exc.detail)

    handler = _lookup(error_handlers, exc, exc.status)
    if handler is not None:
        return await call_error_handler(handler, request, exc, exc.status)

    response = Response(exc.detail or f"Error {exc.status}", status=exc.status)
    for name, value in exc.headers:
        response = response.with_header(name, value)
    return response


async def handle_internal_error(
    exc: Exception,
    request: Request,
    error_handlers: dict[int | type, Callable[..., Any]],
) -> Response:
    logger.exception("500 %s %s", request.method, request.path)

    handler = _lookup(error_handlers, exc, 500)
    if handler is not None:
        return await call_error_handler(handler, request, exc, 500)

    return Response(str(exc) or "Internal Server Error", status=500)

"""ASGI request handling.

Builds a ``Request`` from the HTTP scope, threads it through the
middleware chain down to the route table, maps exceptions to error
responses and sends the result. Minify handlers never read a request
body, so ``receive`` is not needed here.
"""

from collections.abc import Callable, Mapping
from typing import Any

from combo._internal.asgi import Scope, Send
from combo._internal.invoke import invoke
from combo.errors import HTTPError, NotFound
from combo.http.request import Request
from combo.http.response import Response
from combo.middleware.protocol import Middleware, Next
from combo.server.errors import handle_http_error, handle_internal_error
from combo.server.sender import send_response


def build_chain(routes: Mapping[str, Callable[..., Any]], middleware: tuple[Middleware, ...]) -> Next:
    """Compose *middleware* around exact-path route dispatch."""

    async def dispatch(request: Request) -> Response:
        route = routes.get(request.path)
        if route is None or request.method not in ("GET", "HEAD"):
            raise NotFound()
        result = await invoke(route, request)
        if isinstance(result, Response):
            return result
        return Response(str(result), content_type="text/html; charset=utf-8")

    chain: Next = dispatch
    for mw in reversed(middleware):

        async def step(request: Request, _mw: Middleware = mw, _next: Next = chain) -> Response:
            return await _mw(request, _next)

        chain = step
    return chain


async def handle_request(
    scope: Scope,
    send: Send,
    *,
    routes: Mapping[str, Callable[..., Any]],
    middleware: tuple[Middleware, ...],
    error_handlers: dict[int | type, Callable[..., Any]],
) -> None:
    """Answer one HTTP request; other scope types are ignored."""
    if scope["type"] != "http":
        return

    request = Request.from_asgi(scope)
    try:
        response = await build_chain(routes, middleware)(request)
    except HTTPError as exc:
        response = await handle_http_error(exc, request, error_handlers)
    except Exception as exc:
        response = await handle_internal_error(exc, request, error_handlers)

    await send_response(response, send, head=request.method == "HEAD")

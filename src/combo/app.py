"""Combo application class.

The host for minify middleware: an exact-path route table, a middleware
list, error handlers and lifespan contexts. Everything is registered up
front; the first request (or lifespan startup) freezes the app.
"""

import threading
from collections.abc import Callable
from contextlib import AbstractAsyncContextManager, AsyncExitStack
from typing import Any, TypeAlias

from combo._internal.asgi import Receive, Scope, Send
from combo.middleware.protocol import Middleware
from combo.server.handler import handle_request

Handler: TypeAlias = Callable[..., Any]
ErrorHandler: TypeAlias = Callable[..., Any]
LifespanContext: TypeAlias = Callable[[], AbstractAsyncContextManager[Any]]


class App:
    """The combo application.

    Usage::

        minify = Minify(MinifyConfig(www_root="./public"))

        app = App()
        app.add_middleware(MinifyMiddleware(minify))
        app.add_lifespan(minify.running)

        @app.route("/")
        def index(request):
            return minify.combine(["/js/app.js"], "js")

    Serve it with any ASGI server (``uvicorn myapp:app``).

    Thread safety:
        Registration happens at import time on one thread. Freezing takes
        a lock and re-checks, so concurrent first requests build the
        middleware tuple once.
    """

    __slots__ = (
        "_error_handlers",
        "_freeze_lock",
        "_frozen",
        "_lifespan",
        "_middleware",
        "_pending_middleware",
        "_routes",
    )

    def __init__(self) -> None:
        self._routes: dict[str, Handler] = {}
        self._pending_middleware: list[Middleware] = []
        self._error_handlers: dict[int | type, ErrorHandler] = {}
        self._lifespan: list[LifespanContext] = []
        self._middleware: tuple[Middleware, ...] = ()
        self._frozen = False
        self._freeze_lock = threading.Lock()

    # -- Registration --

    def route(self, path: str) -> Callable[[Handler], Handler]:
        """Register *func* for GET and HEAD on exactly *path*.

        The handler gets the request and returns a ``Response`` or a
        string (sent as HTML).
        """

        def register(func: Handler) -> Handler:
            self._check_not_frozen()
            self._routes[path] = func
            return func

        return register

    def error(
        self, code_or_exception: int | type[Exception]
    ) -> Callable[[ErrorHandler], ErrorHandler]:
        """Register ``handler(request, exc)`` for a status code or exception type."""

        def register(func: ErrorHandler) -> ErrorHandler:
            self._check_not_frozen()
            self._error_handlers[code_or_exception] = func
            return func

        return register

    def add_middleware(self, middleware: Middleware) -> None:
        """Append *middleware*; the first added sees the request first."""
        self._check_not_frozen()
        self._pending_middleware.append(middleware)

    def add_lifespan(self, context: LifespanContext) -> None:
        """Enter ``context()`` at lifespan startup and exit it at shutdown."""
        self._check_not_frozen()
        self._lifespan.append(context)

    # -- ASGI interface --

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] == "lifespan":
            await self._run_lifespan(receive, send)
            return

        self._ensure_frozen()
        await handle_request(
            scope,
            send,
            routes=self._routes,
            middleware=self._middleware,
            error_handlers=self._error_handlers,
        )

    async def _run_lifespan(self, receive: Receive, send: Send) -> None:
        self._ensure_frozen()
        async with AsyncExitStack() as stack:
            while True:
                message = await receive()
                if message["type"] == "lifespan.startup":
                    try:
                        for context in self._lifespan:
                            await stack.enter_async_context(context())
                    except Exception as exc:
                        await send({"type": "lifespan.startup.failed", "message": str(exc)})
                        return
                    await send({"type": "lifespan.startup.complete"})
                elif message["type"] == "lifespan.shutdown":
                    break
        await send({"type": "lifespan.shutdown.complete"})

    # -- Internal --

    def _ensure_frozen(self) -> None:
        if self._frozen:
            return
        with self._freeze_lock:
            if not self._frozen:
                self._middleware = tuple(self._pending_middleware)
                self._frozen = True

    def _check_not_frozen(self) -> None:
        if self._frozen:
            msg = "App is already serving; register routes, middleware and handlers before that."
            raise RuntimeError(msg)

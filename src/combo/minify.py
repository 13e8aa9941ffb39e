"""The Minify handle.

Holds the active configuration, the minifier backends, the file reader
and the JS name cache. The hosting application builds one handle at
startup and routes CSS and JS requests to it::

    minify = Minify(MinifyConfig(www_root="./public"))

    app.add_middleware(MinifyMiddleware(minify))

    # In a template context
    minify.combine(["/js/app.js", "/js/nav.js"], "js")

``setup()`` swaps the whole configuration; nothing is merged. Every public
operation checks the configuration first and raises ``NotConfigured``
when a root is missing.

For applications that prefer a single process-wide instance, the module
exposes ``default`` along with ``setup``, ``css_handler``, ``js_handler``
and ``combine`` bound to it.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator, Mapping
from contextlib import asynccontextmanager
from typing import Any

import anyio
from anyio.abc import TaskGroup

from combo.assemble import FileReader, read_text
from combo.config import MinifyConfig
from combo.errors import NotConfigured
from combo.http.request import Request
from combo.http.response import Response
from combo.middleware.protocol import Next
from combo.minifiers import CSSMinifier, JSMinifier, NameCache, RCSSMinifier, RJSMinifier
from combo.pipeline import AssetKind, Failed, Handled, Outcome, run
from combo.tags import combine as render_tags

logger = logging.getLogger("combo.minify")


class Minify:
    """Combines and minifies requested CSS and JS files.

    Thread safety:
        The configuration is replaced by reference on ``setup()``; a
        request in flight keeps the snapshot it started with. The name
        cache is shared by every JS request on this handle.
    """

    __slots__ = ("_config", "_task_group", "css_minifier", "js_minifier", "name_cache", "reader")

    def __init__(
        self,
        config: MinifyConfig | Mapping[str, Any] | None = None,
        *,
        css_minifier: CSSMinifier | None = None,
        js_minifier: JSMinifier | None = None,
        name_cache: NameCache | None = None,
        reader: FileReader | None = None,
    ) -> None:
        self._config: MinifyConfig | None = None
        self._task_group: TaskGroup | None = None
        self.css_minifier: CSSMinifier = css_minifier or RCSSMinifier()
        self.js_minifier: JSMinifier = js_minifier or RJSMinifier()
        self.name_cache: NameCache = name_cache if name_cache is not None else {}
        self.reader: FileReader = reader or read_text
        self.setup(config)

    # -- Configuration --

    def setup(self, config: MinifyConfig | Mapping[str, Any] | None) -> None:
        """Replace the configuration. ``None`` clears it."""
        if config is not None and not isinstance(config, MinifyConfig):
            config = MinifyConfig.from_mapping(config)
        self._config = config

    @property
    def config(self) -> MinifyConfig | None:
        return self._config

    def require_config(self) -> MinifyConfig:
        """Return the configuration, or raise ``NotConfigured``."""
        config = self._config
        if config is None or not config.is_complete:
            raise NotConfigured()
        return config

    # -- Background stores --

    @asynccontextmanager
    async def running(self) -> AsyncIterator[Minify]:
        """Run cache stores in the background while the block is open.

        Outside this block stores are awaited before the response is
        returned. On exit, stores still in flight are waited for::

            async with minify.running():
                await serve(app)

        ``App.add_lifespan(minify.running)`` ties it to the ASGI lifespan.
        """
        async with anyio.create_task_group() as tg:
            self._task_group = tg
            try:
                yield self
            finally:
                self._task_group = None

    # -- Pipeline --

    async def css(self, request: Request) -> Outcome:
        """Run the CSS pipeline for *request*."""
        return await self._run(AssetKind.CSS, request)

    async def js(self, request: Request) -> Outcome:
        """Run the JS pipeline for *request*."""
        return await self._run(AssetKind.JS, request)

    async def _run(self, kind: AssetKind, request: Request) -> Outcome:
        config = self.require_config()
        outcome = await run(
            kind,
            request.query.get_single("files"),
            config=config,
            css_minifier=self.css_minifier,
            js_minifier=self.js_minifier,
            name_cache=self.name_cache,
            reader=self.reader,
            task_group=self._task_group,
        )
        if isinstance(outcome, Failed):
            logger.debug("%s %s failed: %s", kind.value, request.url, outcome.error)
        elif not isinstance(outcome, Handled):
            logger.debug("%s %s passed through: %s", kind.value, request.url, outcome.reason)
        return outcome

    # -- Middleware-shaped handlers --

    async def css_handler(self, request: Request, next: Next) -> Response:
        """Serve minified CSS, or hand the request to *next*."""
        return await _finish(await self.css(request), request, next)

    async def js_handler(self, request: Request, next: Next) -> Response:
        """Serve minified JS, or hand the request to *next*."""
        return await _finish(await self.js(request), request, next)

    # -- Tags --

    def combine(self, files: list[str], type: str) -> str:  # noqa: A002
        """HTML tags loading *files*; see ``combo.tags.combine``."""
        return render_tags(files, type, self.require_config())


async def _finish(outcome: Outcome, request: Request, next: Next) -> Response:
    if isinstance(outcome, Handled):
        return outcome.response
    if isinstance(outcome, Failed):
        raise outcome.error
    return await next(request)


default = Minify()

setup = default.setup
css_handler = default.css_handler
js_handler = default.js_handler
combine = default.combine

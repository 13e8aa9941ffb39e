"""The minify request pipeline.

Turns a raw ``files`` query value into one of three outcomes:

- ``Handled`` — a 200 response carrying the minified text,
- ``NotApplicable`` — the request isn't ours; pass it to the next handler,
- ``Failed`` — reading or minifying raised; the original exception is kept.

Flow: cache lookup (serve on hit) -> resolve and read each file in order
-> minify -> cache store -> response. Hosting code decides how each
outcome maps onto its own chaining and error conventions.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import TypeAlias

from anyio.abc import TaskGroup

from combo.assemble import FileReader, Unavailable, assemble_css, assemble_js, read_text
from combo.cache import CacheGate
from combo.config import MinifyConfig
from combo.http.response import Response
from combo.minifiers import CSSMinifier, JSMinifier, NameCache

logger = logging.getLogger("combo.minify")


class AssetKind(Enum):
    """The two asset types the pipeline serves."""

    CSS = "css"
    JS = "js"

    @property
    def content_type(self) -> str:
        if self is AssetKind.CSS:
            return "text/css; charset=utf-8"
        return "application/javascript; charset=utf-8"


@dataclass(frozen=True, slots=True)
class Handled:
    response: Response


@dataclass(frozen=True, slots=True)
class NotApplicable:
    reason: str = ""


@dataclass(frozen=True, slots=True)
class Failed:
    error: Exception


Outcome: TypeAlias = Handled | NotApplicable | Failed


def _respond(body: str, kind: AssetKind) -> Handled:
    return Handled(Response(body=body, status=200, content_type=kind.content_type))


async def run(
    kind: AssetKind,
    files: str | None,
    *,
    config: MinifyConfig,
    css_minifier: CSSMinifier,
    js_minifier: JSMinifier,
    name_cache: NameCache,
    reader: FileReader = read_text,
    task_group: TaskGroup | None = None,
) -> Outcome:
    """Run the full pipeline for one request.

    *files* is the raw, unsplit ``files`` query value; ``None`` or an
    empty string means the request isn't for us. With *task_group* the
    cache store runs in the background.
    """
    if not files or not isinstance(files, str):
        return NotApplicable("no files requested")

    gate = CacheGate(config.caching, task_group)
    key = gate.key_for(files)

    cached = await gate.lookup(key)
    if cached is not None:
        logger.debug("Cache hit for %s", key)
        return _respond(cached, kind)

    requested = files.split(",")

    try:
        if kind is AssetKind.CSS:
            source = await assemble_css(requested, config, reader)
            output = css_minifier.minify(source)
        else:
            code = await assemble_js(requested, config, reader)
            output = js_minifier.minify(code, name_cache)
    except Unavailable as exc:
        return NotApplicable(exc.reason)
    except Exception as exc:
        return Failed(exc)

    await gate.store(key, output)
    return _respond(output, kind)

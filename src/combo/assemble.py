"""Content assembly — read, rewrite and aggregate requested files.

Files are resolved and read one at a time in request order; each read
and rewrite finishes before the next file starts. CSS is concatenated
into one string, JS is collected per logical path for the minifier.

A missing file, or a path that does not resolve, makes the whole request
unavailable. Any other read failure propagates unchanged.
"""

from collections.abc import Awaitable, Callable, Mapping
from typing import TypeAlias

import anyio

from combo.config import MinifyConfig
from combo.resolve import ResolvedFile, resolve

# Async callable returning a file's text; raises FileNotFoundError when absent
FileReader: TypeAlias = Callable[[str], Awaitable[str]]


class Unavailable(Exception):  # noqa: N818
    """The request does not address anything this pipeline can serve."""

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


async def read_text(path: str) -> str:
    """Default reader: UTF-8 text through a worker thread.

    Bytes that aren't valid UTF-8 (a Latin-1 legacy stylesheet) become
    U+FFFD instead of failing the request.
    """
    return await anyio.Path(path).read_text(encoding="utf-8", errors="replace")


def apply_replacements(text: str, replace: Mapping[str, str]) -> str:
    """Apply each literal ``find -> replacement`` pair to every occurrence."""
    for find, replacement in replace.items():
        text = text.replace(find, replacement)
    return text


async def read_resolved(resolved: ResolvedFile, reader: FileReader = read_text) -> str:
    """Read one resolved file and apply its redirect rewrites."""
    try:
        text = await reader(resolved.path)
    except FileNotFoundError:
        raise Unavailable(f"missing file {resolved.logical}") from None
    if resolved.replace:
        text = apply_replacements(text, resolved.replace)
    return text


async def _read_each(
    files: list[str],
    config: MinifyConfig,
    reader: FileReader,
) -> list[tuple[str, str]]:
    contents: list[tuple[str, str]] = []
    for logical in files:
        resolved = resolve(logical, config)
        if resolved is None:
            raise Unavailable(f"unresolvable path {logical!r}")
        contents.append((logical, await read_resolved(resolved, reader)))
    return contents


async def assemble_css(
    files: list[str],
    config: MinifyConfig,
    reader: FileReader = read_text,
) -> str:
    """Concatenate the requested stylesheets, in order, with no separator."""
    return "".join(text for _, text in await _read_each(files, config, reader))


async def assemble_js(
    files: list[str],
    config: MinifyConfig,
    reader: FileReader = read_text,
) -> dict[str, str]:
    """Collect the requested scripts keyed by their logical path."""
    code: dict[str, str] = {}
    for logical, text in await _read_each(files, config, reader):
        code[logical] = text
    return code

"""Minifier backends.

The pipeline only needs two shapes: a CSS minifier taking one string and a
JS minifier taking scripts keyed by filename plus a name cache. Defaults
wrap ``rcssmin`` and ``rjsmin``; anything matching the protocols can be
passed to ``Minify`` instead.
"""

from collections.abc import Mapping
from typing import Any, Protocol, TypeAlias

import rcssmin
import rjsmin

# Identifier bookkeeping shared across JS minify calls. Owned by the
# Minify handle; append and reuse only.
NameCache: TypeAlias = dict[str, Any]


class CSSMinifier(Protocol):
    def minify(self, source: str) -> str: ...


class JSMinifier(Protocol):
    """Minifies a set of scripts into one program.

    *sources* maps filename to source text, in output order. *name_cache*
    is the same object on every call for a given handle, so a renaming
    minifier can keep short names stable across requests.
    """

    def minify(self, sources: Mapping[str, str], name_cache: NameCache) -> str: ...


class RCSSMinifier:
    """CSS minification through ``rcssmin``."""

    __slots__ = ("keep_bang_comments",)

    def __init__(self, *, keep_bang_comments: bool = False) -> None:
        self.keep_bang_comments = keep_bang_comments

    def minify(self, source: str) -> str:
        return rcssmin.cssmin(source, keep_bang_comments=self.keep_bang_comments)


class RJSMinifier:
    """JS minification through ``rjsmin``.

    Each script is minified on its own and the results are joined with
    newlines, so one file's trailing expression can't run into the next.
    rjsmin strips whitespace and comments but never renames identifiers,
    so *name_cache* is left as it was.
    """

    __slots__ = ("keep_bang_comments",)

    def __init__(self, *, keep_bang_comments: bool = False) -> None:
        self.keep_bang_comments = keep_bang_comments

    def minify(self, sources: Mapping[str, str], name_cache: NameCache) -> str:  # noqa: ARG002
        return "\n".join(
            rjsmin.jsmin(code, keep_bang_comments=self.keep_bang_comments)
            for code in sources.values()
        )

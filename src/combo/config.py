"""Minify configuration.

MinifyConfig and RedirectRule are frozen dataclasses — immutable after
creation. A ``Minify`` handle swaps the whole config on ``setup()``; fields
are never patched in place.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

from combo.errors import ConfigurationError

if TYPE_CHECKING:
    from combo.cache import CacheAdapter


@dataclass(frozen=True, slots=True)
class RedirectRule:
    """Serve a logical path from another file, optionally rewriting it.

    ``replace`` pairs are applied in insertion order, each a literal
    substitution of every occurrence::

        RedirectRule(
            path="/srv/vendor/theme.css",
            content_type="text/css",
            replace={"red": "blue"},
        )
    """

    path: str | Path
    content_type: str = ""
    replace: Mapping[str, str] = field(default_factory=dict)

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any]) -> RedirectRule:
        """Build a rule from ``{"path", "contentType", "replace"}`` style dicts."""
        if "path" not in options:
            msg = "Redirect rules need a 'path'."
            raise ConfigurationError(msg)
        content_type = options.get("content_type", options.get("contentType", ""))
        return cls(
            path=options["path"],
            content_type=content_type or "",
            replace=dict(options.get("replace") or {}),
        )


@dataclass(frozen=True, slots=True)
class MinifyConfig:
    """Configuration for combined, minified asset serving.

    ``www_root`` is the directory requested files are resolved against;
    ``js_root`` and ``css_root`` are the URLs the JS and CSS handlers are
    mounted at (used by ``combine()`` to build tags)::

        config = MinifyConfig(www_root="./public", caching=MemoryCache(prefix="app"))
    """

    www_root: str | Path = ""
    js_root: str = "/js/"
    css_root: str = "/css/"

    # Optional cache adapter (get/set/prefix)
    caching: CacheAdapter | None = None

    # Logical path -> RedirectRule
    redirects: Mapping[str, RedirectRule] = field(default_factory=dict)

    # Emit one tag per file instead of a single combined URL
    disable_tag_combining: bool = False

    @property
    def is_complete(self) -> bool:
        """True when every root needed by the handlers is set."""
        return bool(self.www_root and self.js_root and self.css_root)

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any]) -> MinifyConfig:
        """Build a config from a plain dict.

        Accepts snake_case keys as well as the camelCase option names
        (``wwwRoot``, ``jsRoot``, ``cssRoot``, ``disableTagCombining``).
        Missing roots are left empty so validation can report them.
        """

        def pick(snake: str, camel: str, default: Any) -> Any:
            if snake in options:
                return options[snake]
            return options.get(camel, default)

        redirects: dict[str, RedirectRule] = {}
        for logical, rule in (options.get("redirects") or {}).items():
            redirects[logical] = (
                rule if isinstance(rule, RedirectRule) else RedirectRule.from_mapping(rule)
            )

        return cls(
            www_root=pick("www_root", "wwwRoot", "") or "",
            js_root=pick("js_root", "jsRoot", "") or "",
            css_root=pick("css_root", "cssRoot", "") or "",
            caching=options.get("caching"),
            redirects=redirects,
            disable_tag_combining=bool(
                pick("disable_tag_combining", "disableTagCombining", False)
            ),
        )

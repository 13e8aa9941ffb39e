"""Path resolution for requested files.

Maps a logical path from the ``files`` query value to a file on disk,
either through a redirect rule or by joining it onto ``www_root``.

Security: the root and the joined path are both made absolute and
normalized, then the path is checked to still sit inside the root.
Relative roots (``"."``, ``"public/.."``) are anchored to the working
directory first, so a bare ``..`` can never look like a child of them.
``..`` segments that climb out of the root make the path unresolvable
rather than an error, so the request falls through to the next handler.
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass, field

from combo.config import MinifyConfig


@dataclass(frozen=True, slots=True)
class ResolvedFile:
    """A logical path paired with the file that backs it."""

    logical: str
    path: str
    replace: Mapping[str, str] = field(default_factory=dict)


def root_path(www_root: str | os.PathLike[str]) -> str:
    """Absolute, normalized form of ``www_root``."""
    return os.path.abspath(os.fspath(www_root))


def resolve(logical: str, config: MinifyConfig) -> ResolvedFile | None:
    """Resolve *logical* against *config*, or ``None`` if it does not apply.

    Redirect targets come from configuration and are not re-checked
    against ``www_root``.
    """
    if not logical.startswith("/"):
        return None

    rule = config.redirects.get(logical)
    if rule is not None:
        return ResolvedFile(logical=logical, path=os.fspath(rule.path), replace=rule.replace)

    root = root_path(config.www_root)
    # Leading slashes stripped so os.path.join keeps the root.
    candidate = os.path.abspath(os.path.join(root, logical.lstrip("/")))
    if os.path.commonpath([root, candidate]) != root:
        return None

    return ResolvedFile(logical=logical, path=candidate)

"""HTML tags for combined assets.

``combine()`` produces the ``<script>`` or ``<link>`` markup a template
drops into a page. With tag combining on (the default) a single tag
points at the handler URL with every file in its ``files`` query value,
exactly the string the handlers later parse. With it off, each file gets
its own tag pointing straight at the file.
"""

from collections.abc import Sequence

from combo.config import MinifyConfig


def script_tag(src: str) -> str:
    return f'<script src="{src}"></script>'


def stylesheet_tag(href: str) -> str:
    return f'<link rel="stylesheet" href="{href}" />'


def combine(files: Sequence[str], type: str, config: MinifyConfig) -> str:  # noqa: A002
    """Return the markup for *files* of the given *type* (``"js"`` or ``"css"``).

    Unknown types produce an empty string.
    """
    if type == "js":
        tag, root = script_tag, config.js_root
    elif type == "css":
        tag, root = stylesheet_tag, config.css_root
    else:
        return ""

    if config.disable_tag_combining:
        return "".join(tag(f) for f in files)
    return tag(f"{root}?files={','.join(files)}")

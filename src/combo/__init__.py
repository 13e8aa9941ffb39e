"""Combo — combined, minified CSS and JavaScript on demand.

Serves ``/css/?files=/a.css,/b.css`` as one minified stylesheet, with
optional caching and per-file redirects.

Basic usage::

    from combo import App, Minify, MinifyConfig, MinifyMiddleware

    minify = Minify(MinifyConfig(www_root="./public"))

    app = App()
    app.add_middleware(MinifyMiddleware(minify))

    # In templates
    minify.combine(["/css/site.css", "/css/nav.css"], "css")
"""

__version__ = "0.1.0"
__all__ = [
    "App",
    "CacheAdapter",
    "ComboError",
    "ConfigurationError",
    "Failed",
    "HTTPError",
    "Handled",
    "MemoryCache",
    "Middleware",
    "Minify",
    "MinifyConfig",
    "MinifyMiddleware",
    "Next",
    "NotApplicable",
    "NotConfigured",
    "NotFound",
    "RedirectRule",
    "Request",
    "Response",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import combo`` fast while providing a clean top-level API.
    """
    if name == "App":
        from combo.app import App

        return App

    if name == "Minify":
        from combo.minify import Minify

        return Minify

    if name in ("MinifyConfig", "RedirectRule"):
        from combo import config as _config

        return getattr(_config, name)

    if name in ("CacheAdapter", "MemoryCache"):
        from combo import cache as _cache

        return getattr(_cache, name)

    if name in ("Handled", "NotApplicable", "Failed"):
        from combo import pipeline as _pipeline

        return getattr(_pipeline, name)

    if name == "Request":
        from combo.http.request import Request

        return Request

    if name == "Response":
        from combo.http.response import Response

        return Response

    if name in ("Middleware", "MinifyMiddleware", "Next"):
        from combo import middleware as _mw

        return getattr(_mw, name)

    if name in ("ComboError", "ConfigurationError", "HTTPError", "NotConfigured", "NotFound"):
        from combo import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)

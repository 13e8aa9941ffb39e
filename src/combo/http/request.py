"""Immutable HTTP request.

Method, path and query: all the minify pipeline reads. Combo handlers
never consume a request body.
"""

from __future__ import annotations

from dataclasses import dataclass

from combo._internal.asgi import Scope
from combo.http.query import QueryParams


@dataclass(frozen=True, slots=True)
class Request:
    method: str
    path: str
    query: QueryParams

    @property
    def url(self) -> str:
        """Path plus query string, for log lines."""
        if self.query.raw:
            return f"{self.path}?{self.query.raw.decode('latin-1')}"
        return self.path

    @classmethod
    def from_asgi(cls, scope: Scope) -> Request:
        return cls(scope["method"], scope["path"], QueryParams(scope.get("query_string", b"")))

    @classmethod
    def build(cls, path: str, query_string: str = "", method: str = "GET") -> Request:
        """A request without a server, for scripts and tests."""
        return cls(method.upper(), path, QueryParams(query_string.encode("latin-1")))

"""Immutable HTTP request.

Frozen metadata read from the ASGI scope. Adding parameters yields a new
request; nothing downstream can observe a mutation.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, replace
from typing import Any

from switchyard._internal.asgi import Scope
from switchyard.http.headers import Headers
from switchyard.http.query import QueryParams


@dataclass(frozen=True, slots=True)
class Request:
    """An immutable HTTP request.

    The router only ever looks at ``path``; the rest is carried so the
    request can be turned back into a scope for the entry point.
    """

    method: str
    path: str
    headers: Headers
    query: QueryParams
    http_version: str
    server: tuple[str, int] | None
    client: tuple[str, int] | None

    @property
    def content_length(self) -> int | None:
        """The Content-Length header as int, or None if absent or garbled."""
        value = self.headers.get("content-length")
        if value is None:
            return None
        try:
            return int(value)
        except ValueError:
            return None

    @property
    def url(self) -> str:
        """Request target (path + query string)."""
        qs = self.query.raw
        if qs:
            return f"{self.path}?{qs.decode('latin-1')}"
        return self.path

    def with_params(self, params: Mapping[str, str]) -> Request:
        """Return a new request whose query string also carries *params*."""
        return replace(self, query=self.query.with_params(params))

    def to_scope(self, base: Scope, **extra: Any) -> dict[str, Any]:
        """Build a fresh ASGI scope for this request on top of *base*.

        *base* is copied, not modified. Keyword arguments become extra
        scope keys (e.g. ``**{"switchyard.config": config}``).
        """
        return {**base, "query_string": self.query.raw, **extra}

    @classmethod
    def from_asgi(cls, scope: Scope) -> Request:
        """Create a Request from an ASGI HTTP scope."""
        server = scope.get("server")
        client = scope.get("client")
        return cls(
            method=scope.get("method", "GET"),
            path=scope.get("path", ""),
            headers=Headers(tuple(scope.get("headers", ()))),
            query=QueryParams(scope.get("query_string", b"")),
            http_version=scope.get("http_version", "1.1"),
            server=tuple(server) if server else None,
            client=tuple(client) if client else None,
        )

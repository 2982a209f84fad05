"""
Request context port.

The engine only reads the current request; it never reaches for ambient
global state. Callers pass one of these in when an engine is built.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol
from urllib.parse import urlsplit


class RequestPort(Protocol):
    """Read-only view of the current request."""

    @property
    def url(self) -> str:
        """Full URL without the query string."""
        ...

    @property
    def scheme(self) -> str:
        """Request scheme (http or https)."""
        ...

    @property
    def http_host(self) -> str:
        """Host header value, port included when non-default."""
        ...

    @property
    def path(self) -> str:
        """Request path."""
        ...

    @property
    def query(self) -> str:
        """Raw query string, without the leading '?'."""
        ...


@dataclass(frozen=True)
class RequestContext:
    """Plain RequestPort implementation."""

    url: str
    scheme: str
    http_host: str
    path: str = "/"
    query: str = ""

    @classmethod
    def from_url(cls, url: str) -> RequestContext:
        """Build a context from an absolute URL."""
        parts = urlsplit(url)
        base = f"{parts.scheme}://{parts.netloc}{parts.path}"
        return cls(
            url=base.rstrip("/") if parts.path in ("", "/") else base,
            scheme=parts.scheme,
            http_host=parts.netloc,
            path=parts.path or "/",
            query=parts.query,
        )

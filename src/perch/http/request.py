"""Immutable HTTP request.

Perch never reads a request body, so a request is just frozen metadata
taken from the ASGI scope.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from perch.http.headers import Headers


@dataclass(frozen=True, slots=True)
class Request:
    """An immutable HTTP request.

    ``path`` is the percent-decoded path from the ASGI scope, without
    the query string. It is the key the resolver looks up.
    """

    method: str
    path: str
    headers: Headers

    @property
    def origin(self) -> str | None:
        """The ``Origin`` header, set by browsers on cross-origin requests."""
        return self.headers.get("origin")

    @classmethod
    def from_asgi(cls, scope: dict[str, Any]) -> Request:
        """Create a Request from an ASGI HTTP scope."""
        return cls(
            method=scope["method"],
            path=scope["path"],
            headers=Headers(tuple(scope.get("headers", ()))),
        )

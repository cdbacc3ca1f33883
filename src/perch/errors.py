"""Perch exception hierarchy.

Two channels: startup errors (``IndexingError``, ``ConfigurationError``)
abort the process before the listener starts; ``HTTPError`` and its
subclasses are request-scoped and always become a response.
"""

from dataclasses import dataclass


class PerchError(Exception):
    """Base for all perch-specific errors."""


class ConfigurationError(PerchError):
    """Raised when server configuration is invalid.

    Raised by ``ServerConfig.validate()`` before indexing starts.
    """


class IndexingError(PerchError):
    """The asset directory could not be walked or a file could not be read.

    Fatal: the CLI exits instead of serving a partial index.
    """


@dataclass(frozen=True, slots=True)
class HTTPError(PerchError):
    """An error that maps directly to an HTTP status code.

    ``detail`` becomes the plain-text response body.
    """

    status: int
    detail: str = ""
    headers: tuple[tuple[str, str], ...] = ()

    def __str__(self) -> str:
        if self.detail:
            return f"{self.status}: {self.detail}"
        return str(self.status)


class NotFound(HTTPError):  # noqa: N818 — conventional name in web frameworks
    """404 — no asset resolved for the request path."""

    def __init__(self, detail: str = "not found") -> None:
        super().__init__(status=404, detail=detail)


class MethodNotAllowed(HTTPError):  # noqa: N818 — conventional name in web frameworks
    """405 — only GET is served."""

    def __init__(self, detail: str = "method not allowed") -> None:
        super().__init__(status=405, detail=detail)


class CompressionError(HTTPError):
    """500 — gzip compression of an asset body failed. Empty body."""

    def __init__(self) -> None:
        super().__init__(status=500)

"""Content-type inference for indexed files.

Two independent strategies, tried in order by the indexer:

1. ``content_type_for_extension``: a fixed table keyed by the text after
   the last ``.`` in the file name.
2. ``sniff_content_type``: magic-byte detection over the file contents.

Anything neither recognizes is served as ``text/plain``.
"""

import filetype

DEFAULT_CONTENT_TYPE = "text/plain"

EXTENSION_TYPES: dict[str, str] = {
    "html": "text/html",
    "css": "text/css",
    "txt": "text/plain",
    "js": "text/javascript",
    "md": "text/markdown",
    "svg": "image/svg+xml",
}


def content_type_for_extension(name: str) -> str | None:
    """Look up *name*'s extension in ``EXTENSION_TYPES``.

    Matching is exact and case-sensitive: ``page.HTML`` is not HTML.
    Returns ``None`` for unknown or missing extensions.
    """
    _, dot, extension = name.rpartition(".")
    if not dot:
        return None
    return EXTENSION_TYPES.get(extension)


def sniff_content_type(data: bytes) -> str | None:
    """Guess a MIME type from the leading bytes of *data*, or ``None``."""
    if not data:
        return None
    return filetype.guess_mime(data)


def infer_content_type(name: str, data: bytes) -> str:
    """Resolve the content type for a file named *name* holding *data*."""
    return content_type_for_extension(name) or sniff_content_type(data) or DEFAULT_CONTENT_TYPE

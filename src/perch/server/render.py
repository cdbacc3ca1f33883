"""Asset → Response rendering: cache policy and gzip encoding."""

import gzip
import zlib

from perch.assets.table import Asset
from perch.errors import CompressionError
from perch.http.response import Response

# One year: hashed/versioned assets never change under the same path.
CACHE_MAX_AGE = 31536000

# Documents that change without their path changing must be revalidated.
UNCACHED_TYPES = frozenset({"text/html", "text/plain", "text/markdown"})


def is_cacheable(asset: Asset, request_path: str) -> bool:
    """Whether a response for *asset* gets ``ETag`` and ``Cache-Control``."""
    return asset.content_type not in UNCACHED_TYPES and not request_path.endswith("favicon.ico")


def compress(content: bytes) -> bytes:
    """Gzip *content* in one shot.

    ``mtime=0`` keeps the output a pure function of the input.

    Raises:
        CompressionError: the compressor failed.
    """
    try:
        return gzip.compress(content, mtime=0)
    except (OSError, zlib.error) as exc:
        raise CompressionError() from exc


def render_asset(asset: Asset, request_path: str, *, no_cache: bool = False) -> Response:
    """Build the 200 response for *asset* requested as *request_path*.

    The ETag is the raw request path, so ``/docs`` and ``/docs/index.html``
    carry different tags for the same bytes.
    """
    response = Response(body=compress(asset.content), content_type=asset.content_type)

    if not no_cache and is_cacheable(asset, request_path):
        response = response.with_header("ETag", request_path).with_header(
            "Cache-Control", f"max-age={CACHE_MAX_AGE}"
        )

    return response.with_header("Content-Encoding", "gzip")

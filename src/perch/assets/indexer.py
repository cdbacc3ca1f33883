"""Directory indexing.

Walks the served root once at startup and loads every regular file into
an ``AssetTable``. Any failure is an ``IndexingError``: a server with a
partial index is worse than no server.
"""

import logging
import os
from pathlib import Path

from perch.assets.content_types import infer_content_type
from perch.assets.table import Asset, AssetTable
from perch.errors import IndexingError

logger = logging.getLogger("perch.assets")

INDEX_SUFFIX = "/index.html"


def request_path_for(file_path: Path, root: Path) -> str:
    """URL path for *file_path*: its location under *root*, ``/``-joined.

    ``root/docs/index.html`` becomes ``/docs/index.html`` on every
    platform.
    """
    return "/" + file_path.relative_to(root).as_posix()


def build_asset_table(root: str | Path) -> AssetTable:
    """Index every file under *root* into an immutable ``AssetTable``.

    For each ``.../index.html`` an alias entry without the file name is
    added as well, so ``/docs`` serves ``/docs/index.html`` and the root
    ``index.html`` is reachable from ``/``.

    Raises:
        IndexingError: *root* is not a directory, a directory cannot be
            listed, or a file cannot be read.
    """
    root_dir = Path(root)
    if not root_dir.is_dir():
        msg = f"Asset directory not found: {root_dir}"
        raise IndexingError(msg)

    def _raise(exc: OSError) -> None:
        msg = f"Cannot walk {exc.filename}: {exc.strerror or exc}"
        raise IndexingError(msg) from exc

    entries: dict[str, Asset] = {}
    for dirpath, dirnames, filenames in os.walk(root_dir, onerror=_raise):
        dirnames.sort()
        for name in sorted(filenames):
            file_path = Path(dirpath) / name
            try:
                content = file_path.read_bytes()
            except OSError as exc:
                msg = f"Cannot read {file_path}: {exc.strerror or exc}"
                raise IndexingError(msg) from exc

            path = request_path_for(file_path, root_dir)
            asset = Asset(path=path, content=content, content_type=infer_content_type(name, content))
            entries[path] = asset
            if path.endswith(INDEX_SUFFIX):
                entries[path.removesuffix(INDEX_SUFFIX)] = asset

    table = AssetTable(entries)
    logger.info("Found routes:")
    for route in table.routes():
        logger.info("%s", route)
    return table

"""Asset and AssetTable.

The table is built once by the indexer and then only ever read. It has
no mutation methods, so request handlers can share it across workers
without locking.
"""

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType


@dataclass(frozen=True, slots=True)
class Asset:
    """One servable file: its URL path, bytes, and resolved MIME type."""

    path: str
    content: bytes
    content_type: str

    def __repr__(self) -> str:
        return f"Asset(path={self.path!r}, content_type={self.content_type!r}, size={len(self.content)})"


class AssetTable(Mapping[str, Asset]):
    """Read-only mapping from request path to ``Asset``.

    Alias entries (``/docs`` for ``/docs/index.html``) map to the same
    ``Asset`` object as the file they stand for.
    """

    __slots__ = ("_entries",)

    def __init__(self, entries: Mapping[str, Asset] | None = None) -> None:
        self._entries = MappingProxyType(dict(entries or {}))

    def __getitem__(self, path: str) -> Asset:
        return self._entries[path]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"AssetTable({len(self)} routes)"

    def routes(self) -> list[str]:
        """All lookup keys, sorted."""
        return sorted(self._entries)

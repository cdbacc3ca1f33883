"""Tests for perch.assets.table — Asset and the read-only AssetTable."""

from collections.abc import Mapping

import pytest

from perch.assets.table import Asset, AssetTable


def _table() -> AssetTable:
    css = Asset(path="/style.css", content=b"body {}", content_type="text/css")
    index = Asset(path="/index.html", content=b"<h1>Home</h1>", content_type="text/html")
    return AssetTable({"/style.css": css, "/index.html": index, "": index})


class TestAsset:
    def test_frozen(self) -> None:
        asset = Asset(path="/a.txt", content=b"a", content_type="text/plain")
        with pytest.raises(AttributeError):
            asset.content = b"b"  # type: ignore[misc]

    def test_repr_shows_size_not_content(self) -> None:
        asset = Asset(path="/a.txt", content=b"abc", content_type="text/plain")
        assert repr(asset) == "Asset(path='/a.txt', content_type='text/plain', size=3)"


class TestAssetTable:
    def test_is_mapping(self) -> None:
        table = _table()
        assert isinstance(table, Mapping)
        assert len(table) == 3
        assert "/style.css" in table

    def test_lookup(self) -> None:
        table = _table()
        assert table["/style.css"].content == b"body {}"
        assert table.get("/missing") is None

    def test_missing_key_raises(self) -> None:
        with pytest.raises(KeyError):
            _table()["/missing"]

    def test_no_item_assignment(self) -> None:
        table = _table()
        with pytest.raises(TypeError):
            table["/new"] = table["/style.css"]  # type: ignore[index]

    def test_no_item_deletion(self) -> None:
        table = _table()
        with pytest.raises(TypeError):
            del table["/style.css"]  # type: ignore[attr-defined]

    def test_source_dict_changes_do_not_leak(self) -> None:
        entries = {"/a.txt": Asset(path="/a.txt", content=b"a", content_type="text/plain")}
        table = AssetTable(entries)
        entries["/b.txt"] = entries["/a.txt"]
        assert "/b.txt" not in table

    def test_routes_sorted(self) -> None:
        assert _table().routes() == ["", "/index.html", "/style.css"]

    def test_alias_shares_asset(self) -> None:
        table = _table()
        assert table[""] is table["/index.html"]

    def test_empty(self) -> None:
        table = AssetTable()
        assert len(table) == 0
        assert repr(table) == "AssetTable(0 routes)"

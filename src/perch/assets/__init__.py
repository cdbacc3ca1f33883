"""In-memory asset index: one immutable table built at startup."""

from perch.assets.indexer import build_asset_table
from perch.assets.table import Asset, AssetTable

__all__ = ["Asset", "AssetTable", "build_asset_table"]

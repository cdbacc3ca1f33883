"""Perch — a minimal static-asset server.

Indexes a directory into memory once at startup, then answers GET
requests from that index with gzip-encoded bodies and long-lived cache
headers for versioned assets.

Basic usage::

    from perch import App, ServerConfig

    app = App.from_config(ServerConfig(directory="./public"))
    app.run()

Or from the command line::

    perch ./public --port 8888
"""

__version__ = "0.0.1"
__all__ = [
    "App",
    "Asset",
    "AssetTable",
    "ConfigurationError",
    "HTTPError",
    "IndexingError",
    "PerchError",
    "Request",
    "Response",
    "ServerConfig",
    "build_asset_table",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import perch`` (and ``perch --version``) fast.
    """
    if name == "App":
        from perch.app import App

        return App

    if name == "ServerConfig":
        from perch.config import ServerConfig

        return ServerConfig

    if name in ("Asset", "AssetTable", "build_asset_table"):
        from perch import assets as _assets

        return getattr(_assets, name)

    if name == "Request":
        from perch.http.request import Request

        return Request

    if name == "Response":
        from perch.http.response import Response

        return Response

    if name in ("ConfigurationError", "HTTPError", "IndexingError", "PerchError"):
        from perch import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)

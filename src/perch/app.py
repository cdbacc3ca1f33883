"""Perch application class.

An App owns the frozen ServerConfig, the asset table and the middleware
tuple. All three are fixed in ``__init__``; the ASGI entry point only
reads them, so any number of workers can call the same App at once.
"""

from __future__ import annotations

from collections.abc import Sequence

from perch._internal.asgi import Receive, Scope, Send
from perch.assets.indexer import build_asset_table
from perch.assets.table import AssetTable
from perch.config import ServerConfig
from perch.middleware.cors import CORSMiddleware
from perch.middleware.protocol import Middleware
from perch.server.handler import handle_request


class App:
    """The perch application: an ASGI 3.0 callable over one asset table.

    Build from a directory (indexes it immediately)::

        app = App.from_config(ServerConfig(directory="./public"))
        app.run()

    or from a prepared table::

        app = App(AssetTable({...}), ServerConfig(no_cache=True))

    CORS always runs first; *middleware* runs inside it, in order.
    """

    __slots__ = ("_assets", "_middleware", "config")

    def __init__(
        self,
        assets: AssetTable,
        config: ServerConfig | None = None,
        *,
        middleware: Sequence[Middleware] = (),
    ) -> None:
        self.config: ServerConfig = config or ServerConfig()
        self._assets = assets
        self._middleware: tuple[Middleware, ...] = (CORSMiddleware(self.config.cors), *middleware)

    @classmethod
    def from_config(cls, config: ServerConfig, *, middleware: Sequence[Middleware] = ()) -> App:
        """Validate *config*, index ``config.directory`` and build the App.

        Raises:
            ConfigurationError: *config* is out of range.
            IndexingError: the directory could not be fully indexed.
        """
        config.validate()
        return cls(build_asset_table(config.directory), config, middleware=middleware)

    @property
    def assets(self) -> AssetTable:
        """The read-only asset table."""
        return self._assets

    def run(self) -> None:
        """Start the ASGI server with this app (blocks)."""
        from perch.server.launch import run_server

        run_server(self, self.config)

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """ASGI 3.0 entry point."""
        if scope["type"] == "lifespan":
            await self._handle_lifespan(receive, send)
            return

        await handle_request(
            scope,
            receive,
            send,
            assets=self._assets,
            middleware=self._middleware,
            no_cache=self.config.no_cache,
        )

    async def _handle_lifespan(self, receive: Receive, send: Send) -> None:
        """Acknowledge startup and shutdown.

        Indexing already happened before the server was started, so there
        is nothing left to do at either end.
        """
        while True:
            message = await receive()
            if message["type"] == "lifespan.startup":
                await send({"type": "lifespan.startup.complete"})
            elif message["type"] == "lifespan.shutdown":
                await send({"type": "lifespan.shutdown.complete"})
                return

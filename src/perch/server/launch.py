"""Server startup.

Starts a pounce ASGI server with the live perch App object. Pounce's
``run()`` takes an import string, but the app already holds an indexed
asset table, so ``pounce.Server`` is driven directly.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from perch.app import App
    from perch.config import ServerConfig

logger = logging.getLogger("perch.server")


def run_server(app: App, config: ServerConfig) -> None:
    """Serve *app* until interrupted.

    Args:
        app: ASGI callable (perch App instance) with its table built.
        config: Bind address, worker count, log level and timeouts.
            ``request_timeout`` bounds each request; perch itself has
            no deadlines.
    """
    from pounce.config import ServerConfig as PounceConfig
    from pounce.server import Server

    pounce_config = PounceConfig(
        host=config.host,
        port=config.port,
        workers=config.workers,
        log_level=config.log_level,
        request_timeout=config.request_timeout,
        keep_alive_timeout=config.keep_alive_timeout,
    )
    logger.info("Listening on %s:%d", config.host, config.port)
    Server(pounce_config, app).run()

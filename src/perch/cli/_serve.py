"""``perch DIRECTORY`` — build the config, index, and start the server.

Startup errors (bad config, unreadable directory) end the process with
exit status 1 before anything listens.
"""

import argparse
import logging
import sys

from perch.app import App
from perch.config import ServerConfig
from perch.errors import ConfigurationError, IndexingError

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def config_from_args(args: argparse.Namespace) -> ServerConfig:
    """Translate parsed CLI arguments into a ServerConfig."""
    return ServerConfig(
        directory=args.directory,
        host=args.host,
        port=args.port,
        workers=args.workers,
        no_cache=args.no_cache,
        log_level=args.log_level,
        request_timeout=args.request_timeout,
    )


def configure_logging(level: str) -> None:
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)


def serve(args: argparse.Namespace) -> None:
    """Index ``args.directory`` and serve it until interrupted."""
    config = config_from_args(args)
    configure_logging(config.log_level)

    try:
        app = App.from_config(config)
    except (ConfigurationError, IndexingError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    app.run()

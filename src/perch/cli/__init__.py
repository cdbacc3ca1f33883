"""Perch CLI — index a directory and serve it.

Entry point registered as ``perch`` in ``pyproject.toml``::

    [project.scripts]
    perch = "perch.cli:main"
"""

import argparse

from perch import __version__
from perch.config import LOG_LEVELS


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="perch",
        description="Perch — serve a directory of static assets from memory.",
    )
    parser.add_argument("--version", action="version", version=__version__)
    parser.add_argument("directory", help="Directory to serve")
    parser.add_argument(
        "--no-cache",
        action="store_true",
        help="Remove cache control (never send ETag or Cache-Control)",
    )
    parser.add_argument("--host", default="0.0.0.0", help="Bind host address")
    parser.add_argument("--port", type=int, default=8888, help="Bind port number")
    parser.add_argument(
        "--workers",
        type=int,
        default=1,
        help="Worker count (0=auto-detect from CPU count)",
    )
    parser.add_argument(
        "--log-level",
        default="info",
        type=str.lower,
        choices=LOG_LEVELS,
        help="Logging verbosity",
    )
    parser.add_argument(
        "--request-timeout",
        type=float,
        default=30.0,
        help="Per-request timeout in seconds",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``perch`` command."""
    args = build_parser().parse_args(argv)

    from perch.cli._serve import serve

    serve(args)

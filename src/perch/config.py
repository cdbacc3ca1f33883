"""Server configuration.

ServerConfig is a frozen dataclass, immutable after creation. Built once
by the CLI (or by hand in tests) and shared by every request.
"""

from dataclasses import dataclass, field
from pathlib import Path

from perch.errors import ConfigurationError
from perch.middleware.cors import CORSConfig

LOG_LEVELS = ("critical", "error", "warning", "info", "debug")


@dataclass(frozen=True, slots=True)
class ServerConfig:
    """Server configuration. Immutable after creation.

    Everything except ``directory`` has a default::

        config = ServerConfig(directory="./public", no_cache=True)
    """

    # Assets
    directory: str | Path = "."

    # Server
    host: str = "0.0.0.0"
    port: int = 8888
    workers: int = 1

    # Response policy: skip ETag / Cache-Control entirely
    no_cache: bool = False

    # Cross-origin: all origins, GET, all headers
    cors: CORSConfig = field(default_factory=CORSConfig)

    # Logging
    log_level: str = "info"

    # Timeouts (seconds), enforced by the ASGI server
    request_timeout: float = 30.0
    keep_alive_timeout: float = 5.0

    def validate(self) -> None:
        """Raise ``ConfigurationError`` if any field is out of range."""
        if not 0 < self.port < 65536:
            msg = f"Port must be between 1 and 65535, got {self.port}"
            raise ConfigurationError(msg)
        if self.workers < 0:
            msg = f"Worker count cannot be negative, got {self.workers}"
            raise ConfigurationError(msg)
        if self.request_timeout <= 0:
            msg = f"Request timeout must be positive, got {self.request_timeout}"
            raise ConfigurationError(msg)
        if self.log_level.lower() not in LOG_LEVELS:
            msg = f"Unknown log level {self.log_level!r} (choose from {', '.join(LOG_LEVELS)})"
            raise ConfigurationError(msg)

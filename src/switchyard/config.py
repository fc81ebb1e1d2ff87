"""Server configuration.

ServerConfig is a frozen dataclass — immutable after creation, passed to the
router and server at startup, never mutated while serving requests.
"""

from dataclasses import dataclass
from pathlib import Path

from switchyard.errors import ConfigurationError

LOG_LEVELS = ("debug", "info", "warning", "error", "critical")


@dataclass(frozen=True, slots=True)
class ServerConfig:
    """Development server configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = ServerConfig(root_dir="~/claimit", port=3000, log_level="debug")

    Invalid values raise ``ConfigurationError`` on construction.
    """

    # Server
    host: str = "127.0.0.1"
    port: int = 8000
    reload: bool = False

    # Filesystem layout
    root_dir: str | Path = "."
    public_dir: str = "public"  # Fallback directory for static assets, relative to root_dir

    # Limits (None disables)
    max_request_body: int | None = 6 * 1024 * 1024  # 6 MB, slightly above max_upload_size
    max_upload_size: int | None = 5 * 1024 * 1024  # 5 MB, enforced by the entry point

    # Logging
    log_level: str = "info"

    # Library modules whose Python warnings are logged instead of surfaced
    quiet_warning_modules: tuple[str, ...] = ("boto3", "botocore", "s3transfer")

    def __post_init__(self) -> None:
        if not 0 < self.port < 65536:
            msg = f"port must be between 1 and 65535, got {self.port}"
            raise ConfigurationError(msg)
        for name in ("max_request_body", "max_upload_size"):
            value = getattr(self, name)
            if value is not None and value <= 0:
                msg = f"{name} must be positive or None, got {value}"
                raise ConfigurationError(msg)
        if self.log_level.lower() not in LOG_LEVELS:
            msg = f"log_level must be one of {', '.join(LOG_LEVELS)}, got {self.log_level!r}"
            raise ConfigurationError(msg)
        if not self.public_dir or Path(self.public_dir).is_absolute():
            msg = f"public_dir must be a relative directory name, got {self.public_dir!r}"
            raise ConfigurationError(msg)

    @property
    def root_path(self) -> Path:
        """Absolute, resolved server root."""
        return Path(self.root_dir).expanduser().resolve()

    @property
    def public_path(self) -> Path:
        """Absolute, resolved static fallback directory."""
        return (self.root_path / self.public_dir).resolve()

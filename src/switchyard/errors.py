"""Switchyard exception hierarchy.

Shared across the router, handler, migrations, and CLI so every module
raises and catches the same types.
"""

from dataclasses import dataclass


class SwitchyardError(Exception):
    """Base for all switchyard-specific errors."""


class ConfigurationError(SwitchyardError):
    """Raised when server or migration configuration is invalid.

    Raised at construction time, never while serving a request.
    """


class MigrationError(SwitchyardError):
    """Raised when the migrations directory or a migration file name is invalid."""


@dataclass(frozen=True, slots=True)
class HTTPError(SwitchyardError):
    """An error that maps directly to an HTTP status code.

    Raised inside the request handler and turned into a plain-text
    response before anything reaches the entry point.
    """

    status: int
    detail: str = ""
    headers: tuple[tuple[str, str], ...] = ()

    def __str__(self) -> str:
        if self.detail:
            return f"{self.status}: {self.detail}"
        return str(self.status)


class PayloadTooLarge(HTTPError):  # noqa: N818 — conventional name in web frameworks
    """413 — declared request body exceeds ``ServerConfig.max_request_body``."""

    def __init__(self, limit: int, detail: str = "") -> None:
        super().__init__(
            status=413,
            detail=detail or f"Request body too large (limit {limit} bytes)",
        )

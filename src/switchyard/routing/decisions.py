"""Route decisions — the four outcomes of classifying a request path.

Plain frozen values: constructed by ``classify``, acted on by the handler,
then discarded.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import TypeAlias


@dataclass(frozen=True, slots=True)
class AuthAction:
    """Forward to the entry point with ``page``/``action`` injected."""

    page: str
    action: str

    @property
    def params(self) -> dict[str, str]:
        return {"page": self.page, "action": self.action}


@dataclass(frozen=True, slots=True)
class StaticFile:
    """Stream the file at ``path`` back verbatim."""

    path: Path
    content_type: str


@dataclass(frozen=True, slots=True)
class NotFound:
    """Static asset requested, but no file at either candidate location."""

    path: str


@dataclass(frozen=True, slots=True)
class Passthrough:
    """Forward the request unchanged to the entry point."""


RouteDecision: TypeAlias = AuthAction | StaticFile | NotFound | Passthrough

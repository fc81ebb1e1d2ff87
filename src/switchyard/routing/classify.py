"""Request classification — the dispatch table in front of the entry point.

``classify`` maps a request target (``classify_path`` a decoded path) to
Rules are evaluated top to bottom and the first match wins:

1. ``/auth/google/callback...`` -> ``AuthAction("auth", "callback")``
2. ``/auth/google...``          -> ``AuthAction("auth", "google")``
3. ``/auth/logout...``          -> ``AuthAction("auth", "logout")``
4. ``*.css``, ``*.png``, ...    -> ``StaticFile`` or ``NotFound``
5. anything else                -> ``Passthrough``

Static assets are looked up under the server root first and under the
public directory second. The root wins when both exist.

Extension matching is case-sensitive: ``/logo.PNG`` is a passthrough.
"""

import re
from pathlib import Path
from urllib.parse import urlsplit

from switchyard.routing.decisions import (
    AuthAction,
    NotFound,
    Passthrough,
    RouteDecision,
    StaticFile,
)

# Order matters: the callback route is a longer prefix of the google route.
AUTH_ROUTES: tuple[tuple[re.Pattern[str], AuthAction], ...] = (
    (re.compile(r"^/auth/google/callback"), AuthAction("auth", "callback")),
    (re.compile(r"^/auth/google"), AuthAction("auth", "google")),
    (re.compile(r"^/auth/logout"), AuthAction("auth", "logout")),
)

MIME_TYPES: dict[str, str] = {
    "css": "text/css",
    "js": "application/javascript",
    "png": "image/png",
    "jpg": "image/jpeg",
    "jpeg": "image/jpeg",
    "gif": "image/gif",
    "ico": "image/x-icon",
    "svg": "image/svg+xml",
    "woff": "font/woff",
    "woff2": "font/woff2",
    "ttf": "font/ttf",
    "eot": "application/vnd.ms-fontobject",
}

STATIC_EXTENSIONS: frozenset[str] = frozenset(MIME_TYPES)

DEFAULT_CONTENT_TYPE = "application/octet-stream"

_STATIC_RE = re.compile(r"\.(" + "|".join(sorted(STATIC_EXTENSIONS)) + r")\Z")


def content_type_for(extension: str) -> str:
    """MIME type for a file extension (no leading dot)."""
    return MIME_TYPES.get(extension, DEFAULT_CONTENT_TYPE)


def is_request_path(path: str) -> bool:
    """True if *path* is rooted at ``/`` and free of NUL bytes."""
    return path.startswith("/") and "\x00" not in path


def request_path(target: str) -> str | None:
    """Extract the path component of a raw request target.

    Returns ``None`` when the target cannot be treated as a URL path:
    unparseable, not rooted at ``/``, or carrying a NUL byte.
    """
    try:
        path = urlsplit(target).path
    except ValueError:
        return None
    return path if is_request_path(path) else None


def find_static_file(path: str, root: Path, public: Path) -> Path | None:
    """Locate *path* under *root*, falling back to *public*.

    A candidate counts only if it is a regular file inside its base
    directory after symlinks are resolved.
    """
    relative = path.lstrip("/")
    for base in (root, public):
        try:
            base = base.resolve()
            candidate = (base / relative).resolve()
        except (OSError, ValueError):
            continue
        if candidate.is_relative_to(base) and candidate.is_file():
            return candidate
    return None


def classify(target: str, root: Path, public: Path | None = None) -> RouteDecision:
    """Decide how to handle a request for *target*.

    Args:
        target: Raw request target, optionally with a query string.
        root: Absolute server root directory.
        public: Absolute static fallback directory (default ``root/public``).

    Malformed targets are never rejected here; they pass through so the
    entry point can apply its own validation.
    """
    path = request_path(target)
    if path is None:
        return Passthrough()
    return classify_path(path, root, public)


def classify_path(path: str, root: Path, public: Path | None = None) -> RouteDecision:
    """Decide how to handle an already-decoded request *path*.

    The path is taken as-is: a decoded ``?`` or ``#`` is part of the
    file name, not a query or fragment delimiter.
    """
    if not is_request_path(path):
        return Passthrough()

    for pattern, action in AUTH_ROUTES:
        if pattern.match(path):
            return action

    match = _STATIC_RE.search(path)
    if match is None:
        return Passthrough()

    file_path = find_static_file(path, root, public if public is not None else root / "public")
    if file_path is None:
        return NotFound(path)
    return StaticFile(file_path, content_type_for(match.group(1)))

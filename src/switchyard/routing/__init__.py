"""Routing — classify a request path into a route decision.

No route table to compile: the rules are fixed, so classification is a
single pure function over the path and the filesystem.
"""

from switchyard.routing.classify import (
    AUTH_ROUTES,
    MIME_TYPES,
    STATIC_EXTENSIONS,
    classify,
    classify_path,
    content_type_for,
)
from switchyard.routing.decisions import (
    AuthAction,
    NotFound,
    Passthrough,
    RouteDecision,
    StaticFile,
)

__all__ = [
    "AUTH_ROUTES",
    "MIME_TYPES",
    "STATIC_EXTENSIONS",
    "AuthAction",
    "NotFound",
    "Passthrough",
    "RouteDecision",
    "StaticFile",
    "classify",
    "classify_path",
    "content_type_for",
]

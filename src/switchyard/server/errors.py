"""Error responses produced by the router itself.

All bodies are plain text. The entry point owns every other error page.
"""

import logging

from switchyard.errors import HTTPError
from switchyard.http.request import Request
from switchyard.http.response import Response

logger = logging.getLogger("switchyard.server")


def not_found_response() -> Response:
    """404 for a static asset missing from both candidate locations."""
    return Response(body="File not found").with_status(404)


def handle_http_error(exc: HTTPError, request: Request) -> Response:
    """Map an HTTPError to a plain-text Response."""
    logger.debug("%d %s %s — %s", exc.status, request.method, request.path, exc.detail)
    resp = Response(body=exc.detail or f"Error {exc.status}").with_status(exc.status)
    for name, value in exc.headers:
        resp = resp.with_header(name, value)
    return resp


def handle_internal_error(exc: Exception, request: Request) -> Response:
    """Log *exc* with traceback and return a generic 500."""
    logger.exception("500 %s %s", request.method, request.path, exc_info=exc)
    return Response(body="Internal Server Error").with_status(500)

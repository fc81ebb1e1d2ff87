"""ASGI handler — classifies one HTTP request and carries out the decision.

Static files, 404s and router-level errors are answered here. Auth
actions and passthroughs are handed to the entry point with a copied
scope; the entry point writes the response itself.
"""

import logging

import anyio
import anyio.to_thread

from switchyard._internal.asgi import ASGIApp, Receive, Scope, Send
from switchyard._internal.diagnostics import capture_library_warnings
from switchyard.config import ServerConfig
from switchyard.errors import HTTPError, PayloadTooLarge
from switchyard.http.request import Request
from switchyard.http.response import Response
from switchyard.routing.classify import classify_path
from switchyard.routing.decisions import AuthAction, NotFound, Passthrough, StaticFile
from switchyard.server.errors import handle_http_error, handle_internal_error, not_found_response
from switchyard.server.sender import send_response

logger = logging.getLogger("switchyard.server")

CONFIG_SCOPE_KEY = "switchyard.config"


async def handle_request(
    scope: Scope,
    receive: Receive,
    send: Send,
    *,
    entry_point: ASGIApp,
    config: ServerConfig,
    delegate_lock: anyio.Lock,
) -> None:
    """Process a single HTTP request.

    *delegate_lock* is shared by every request the same router serves;
    see ``_delegate``.
    """
    request = Request.from_asgi(scope)
    decision = classify_path(request.path, config.root_path, config.public_path)
    logger.debug("%s %s -> %s", request.method, request.url, decision)

    match decision:
        case StaticFile():
            await send_response(await serve_static_file(decision, request), send)
        case NotFound():
            await send_response(not_found_response(), send)
        case AuthAction():
            forwarded = request.with_params(decision.params)
            await _delegate(
                forwarded, scope, receive, send,
                entry_point=entry_point, config=config, lock=delegate_lock,
            )
        case Passthrough():
            await _delegate(
                request, scope, receive, send,
                entry_point=entry_point, config=config, lock=delegate_lock,
            )


async def serve_static_file(decision: StaticFile, request: Request) -> Response:
    """Read the whole file and build a fresh response for it.

    The file may vanish or become unreadable after ``classify_path`` saw
    it; that surfaces as a 404 or 500 rather than an unhandled error.
    """
    try:
        body = await anyio.to_thread.run_sync(decision.path.read_bytes)
    except FileNotFoundError:
        logger.warning("static file disappeared before read: %s", decision.path)
        return not_found_response()
    except OSError as exc:
        return handle_internal_error(exc, request)
    return Response(body=body, content_type=decision.content_type)


async def _delegate(
    request: Request,
    scope: Scope,
    receive: Receive,
    send: Send,
    *,
    entry_point: ASGIApp,
    config: ServerConfig,
    lock: anyio.Lock,
) -> None:
    """Hand *request* to the entry point on a fresh scope.

    Warning capture swaps process-wide state in the ``warnings`` module,
    so while it is enabled only one delegated call runs at a time.
    """
    try:
        _check_body_limit(request, config.max_request_body)
    except HTTPError as exc:
        await send_response(handle_http_error(exc, request), send)
        return

    forwarded_scope = request.to_scope(scope, **{CONFIG_SCOPE_KEY: config})
    if not config.quiet_warning_modules:
        await entry_point(forwarded_scope, receive, send)
        return

    async with lock:
        with capture_library_warnings(config.quiet_warning_modules):
            await entry_point(forwarded_scope, receive, send)


def _check_body_limit(request: Request, limit: int | None) -> None:
    if limit is None:
        return
    length = request.content_length
    if length is not None and length > limit:
        raise PayloadTooLarge(limit)

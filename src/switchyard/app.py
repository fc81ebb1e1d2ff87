"""DevRouter — the ASGI application a development server runs.

Wraps the application entry point. Every HTTP request is classified and
either answered directly (static files, 404) or delegated to the entry
point, with ``page``/``action`` injected for the auth routes.
"""

import anyio

from switchyard._internal.asgi import ASGIApp, Receive, Scope, Send
from switchyard.config import ServerConfig
from switchyard.server.handler import handle_request


class DevRouter:
    """ASGI front for an application entry point.

    Holds no per-request state; the same instance serves every request.
    Delegated calls are serialized while library warnings are captured.

    Usage::

        from myapp import app

        router = DevRouter(app, ServerConfig(root_dir="."))
        router.run()
    """

    __slots__ = ("_delegate_lock", "config", "entry_point")

    def __init__(self, entry_point: ASGIApp, config: ServerConfig | None = None) -> None:
        self.entry_point = entry_point
        self.config = config or ServerConfig()
        self._delegate_lock: anyio.Lock | None = None  # Created lazily on first request

    def __repr__(self) -> str:
        return f"DevRouter({self.entry_point!r}, root={str(self.config.root_path)!r})"

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """ASGI 3.0 entry point.

        Lifespan and websocket scopes go straight to the entry point.
        """
        if scope["type"] != "http":
            await self.entry_point(scope, receive, send)
            return

        if self._delegate_lock is None:
            self._delegate_lock = anyio.Lock()
        await handle_request(
            scope,
            receive,
            send,
            entry_point=self.entry_point,
            config=self.config,
            delegate_lock=self._delegate_lock,
        )

    def run(self, host: str | None = None, port: int | None = None) -> None:
        """Start the development server (requires ``switchyard[server]``)."""
        from switchyard.server.dev import configure_logging, run_dev_server

        configure_logging(self.config.log_level)
        run_dev_server(
            self,
            host or self.config.host,
            port or self.config.port,
            reload=self.config.reload,
        )

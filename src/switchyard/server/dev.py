"""Development server.

Starts a pounce ASGI server with a live DevRouter object, single worker.
"""

import logging

_configured = False


def configure_logging(level: str = "info") -> None:
    """Attach a stream handler to the ``switchyard`` logger at *level*.

    Safe to call more than once; the handler is only added the first time.
    """
    global _configured
    root = logging.getLogger("switchyard")
    root.setLevel(level.upper())
    if _configured:
        return
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)-8s %(name)s: %(message)s"))
    root.addHandler(handler)
    _configured = True


def run_dev_server(
    app: object,
    host: str,
    port: int,
    *,
    reload: bool = False,
) -> None:
    """Start a pounce dev server with the given ASGI app.

    Pounce's ``run()`` takes an import string, but the router is a live
    object wrapping an already-resolved entry point, so ``pounce.Server``
    is used directly with the ASGI callable.

    Args:
        app: ASGI callable (a DevRouter instance).
        host: Bind host address.
        port: Bind port number.
        reload: Enable auto-reload on file changes.
    """
    from pounce.config import ServerConfig
    from pounce.server import Server

    config = ServerConfig(
        host=host,
        port=port,
        workers=1,
        reload=reload,
    )
    server = Server(config, app)
    server.run()

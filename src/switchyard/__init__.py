"""Switchyard — development request router for a PHP-style front controller app.

Sits in front of an ASGI entry point and decides, per request, whether to
rewrite an auth route, serve a static asset, or pass the request through.

Basic usage::

    from switchyard import DevRouter, ServerConfig

    from myapp import app

    router = DevRouter(app, ServerConfig(root_dir="."))
    router.run()

Migration tool configuration::

    from switchyard.migrations import DatabaseSettings, build_migration_config
    config = build_migration_config(".", DatabaseSettings(host="localhost", user="app"))
"""

__version__ = "0.1.0"
__all__ = [
    "ConfigurationError",
    "DevRouter",
    "HTTPError",
    "MigrationError",
    "Request",
    "Response",
    "ServerConfig",
    "SwitchyardError",
    "classify",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import switchyard`` fast while providing a clean top-level API.
    """
    if name == "DevRouter":
        from switchyard.app import DevRouter

        return DevRouter

    if name == "ServerConfig":
        from switchyard.config import ServerConfig

        return ServerConfig

    if name == "Request":
        from switchyard.http.request import Request

        return Request

    if name == "Response":
        from switchyard.http.response import Response

        return Response

    if name == "classify":
        from switchyard.routing.classify import classify

        return classify

    if name in ("ConfigurationError", "HTTPError", "MigrationError", "SwitchyardError"):
        from switchyard import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)

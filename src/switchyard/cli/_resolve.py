"""Entry point resolution — resolves ``"module:attribute"`` strings to ASGI apps."""

import importlib
import inspect

from switchyard._internal.asgi import ASGIApp


def _is_asgi_app(obj: object) -> bool:
    call = obj if inspect.isfunction(obj) else getattr(obj, "__call__", None)
    if call is None:
        return False
    return inspect.iscoroutinefunction(call) and len(inspect.signature(call).parameters) == 3


def resolve_entry_point(import_string: str) -> ASGIApp:
    """Resolve an import string to an ASGI application.

    Accepts ``"module:attribute"`` format.  When the attribute portion
    is omitted, defaults to ``"app"`` (e.g. ``"myapp"`` resolves to
    ``myapp.app``).

    Zero-argument factories are called and their result is used.

    Raises:
        ModuleNotFoundError: If the module cannot be imported.
        AttributeError: If the attribute does not exist on the module.
        TypeError: If the resolved object is not an ASGI application.
    """
    module_path, _, attr_name = import_string.partition(":")
    if not attr_name:
        attr_name = "app"

    module = importlib.import_module(module_path)
    obj = getattr(module, attr_name)

    if not _is_asgi_app(obj) and callable(obj):
        try:
            obj = obj()
        except Exception as exc:
            msg = f"Factory function {import_string!r} raised an error: {exc}"
            raise TypeError(msg) from exc

    if not _is_asgi_app(obj):
        msg = f"{import_string!r} resolved to {type(obj).__name__}, not an ASGI application"
        raise TypeError(msg)

    return obj

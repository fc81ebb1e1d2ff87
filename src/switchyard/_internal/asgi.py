"""ASGI type aliases.

Raw dict-shaped scope and message types, as ASGI 3 defines them.
Users never see these; they interact with ``Request`` and ``Response``.
"""

from collections.abc import Awaitable, Callable, MutableMapping
from typing import Any, TypeAlias

Scope: TypeAlias = MutableMapping[str, Any]
Receive: TypeAlias = Callable[[], Awaitable[MutableMapping[str, Any]]]
Send: TypeAlias = Callable[[MutableMapping[str, Any]], Awaitable[None]]

# Any ASGI 3 application: the entry point the router delegates to
ASGIApp: TypeAlias = Callable[[Scope, Receive, Send], Awaitable[None]]

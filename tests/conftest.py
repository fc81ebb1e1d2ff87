"""Shared fixtures: an on-disk site root and a recording entry point."""

from pathlib import Path
from typing import Any

import pytest

from switchyard.app import DevRouter
from switchyard.config import ServerConfig


class RecordingApp:
    """ASGI entry point that remembers every scope it was handed."""

    def __init__(self, body: bytes = b"from entry point") -> None:
        self.body = body
        self.scopes: list[dict[str, Any]] = []

    async def __call__(self, scope: Any, receive: Any, send: Any) -> None:
        self.scopes.append(scope)
        if scope["type"] != "http":
            return
        await send(
            {
                "type": "http.response.start",
                "status": 200,
                "headers": [(b"content-type", b"text/html; charset=utf-8")],
            }
        )
        await send({"type": "http.response.body", "body": self.body})

    @property
    def last_scope(self) -> dict[str, Any]:
        assert self.scopes, "entry point was never called"
        return self.scopes[-1]


@pytest.fixture
def site_root(tmp_path: Path) -> Path:
    """A server root with a few assets at the root and under public/."""
    root = tmp_path / "site"
    (root / "assets" / "css").mkdir(parents=True)
    (root / "assets" / "css" / "style.css").write_text("body { color: red; }")
    (root / "favicon.ico").write_bytes(b"\x00\x00\x01\x00")

    public = root / "public"
    (public / "assets" / "js").mkdir(parents=True)
    (public / "assets" / "js" / "app.js").write_text("console.log('public');")
    (public / "assets" / "app.css").write_text(".card { margin: 0; }")
    (public / "images").mkdir()
    (public / "images" / "logo.png").write_bytes(b"\x89PNG\r\n\x1a\n\x00\x00")
    return root.resolve()


@pytest.fixture
def entry_point() -> RecordingApp:
    return RecordingApp()


@pytest.fixture
def router(site_root: Path, entry_point: RecordingApp) -> DevRouter:
    return DevRouter(entry_point, ServerConfig(root_dir=site_root))

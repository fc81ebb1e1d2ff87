"""Tests for switchyard.routing.classify — the request dispatch table."""

from pathlib import Path

import pytest

from switchyard.routing import (
    MIME_TYPES,
    STATIC_EXTENSIONS,
    AuthAction,
    NotFound,
    Passthrough,
    StaticFile,
    classify,
    classify_path,
    content_type_for,
)


class TestAuthRoutes:
    @pytest.mark.parametrize(
        "path",
        [
            "/auth/google/callback",
            "/auth/google/callback/",
            "/auth/google/callback?code=abc&state=xyz",
            "/auth/google/callbackish",
        ],
    )
    def test_callback(self, path: str, site_root: Path) -> None:
        assert classify(path, site_root) == AuthAction("auth", "callback")

    @pytest.mark.parametrize("path", ["/auth/google", "/auth/google/", "/auth/google?next=/items"])
    def test_google(self, path: str, site_root: Path) -> None:
        assert classify(path, site_root) == AuthAction("auth", "google")

    @pytest.mark.parametrize("path", ["/auth/logout", "/auth/logout?next=/", "/auth/logout/now"])
    def test_logout(self, path: str, site_root: Path) -> None:
        assert classify(path, site_root) == AuthAction("auth", "logout")

    def test_auth_rules_win_over_static_extension(self, site_root: Path) -> None:
        assert classify("/auth/logout.js", site_root) == AuthAction("auth", "logout")

    def test_prefix_must_be_at_start(self, site_root: Path) -> None:
        assert classify("/api/auth/google", site_root) == Passthrough()

    def test_other_auth_paths_pass_through(self, site_root: Path) -> None:
        assert classify("/auth/github", site_root) == Passthrough()

    def test_params(self) -> None:
        assert AuthAction("auth", "google").params == {"page": "auth", "action": "google"}


class TestStaticFiles:
    def test_root_candidate(self, site_root: Path) -> None:
        decision = classify("/assets/css/style.css", site_root)
        assert decision == StaticFile(site_root / "assets" / "css" / "style.css", "text/css")

    def test_public_fallback(self, site_root: Path) -> None:
        decision = classify("/assets/js/app.js", site_root)
        assert isinstance(decision, StaticFile)
        assert decision.path == site_root / "public" / "assets" / "js" / "app.js"
        assert decision.content_type == "application/javascript"

    def test_root_wins_when_both_exist(self, site_root: Path) -> None:
        (site_root / "assets" / "app.css").write_text("root copy")
        decision = classify("/assets/app.css", site_root)
        assert isinstance(decision, StaticFile)
        assert decision.path == site_root / "assets" / "app.css"

    def test_neither_candidate(self, site_root: Path) -> None:
        assert classify("/missing.png", site_root) == NotFound("/missing.png")

    def test_explicit_public_dir(self, site_root: Path) -> None:
        other = site_root / "static"
        other.mkdir()
        (other / "x.gif").write_bytes(b"GIF89a")
        decision = classify("/x.gif", site_root, other)
        assert decision == StaticFile(other / "x.gif", "image/gif")
        assert classify("/images/logo.png", site_root, other) == NotFound("/images/logo.png")

    def test_query_string_ignored(self, site_root: Path) -> None:
        decision = classify("/favicon.ico?v=3", site_root)
        assert decision == StaticFile(site_root / "favicon.ico", "image/x-icon")

    def test_directory_is_not_a_file(self, site_root: Path) -> None:
        (site_root / "bundle.js").mkdir()
        assert classify("/bundle.js", site_root) == NotFound("/bundle.js")

    def test_traversal_outside_root_is_not_found(self, site_root: Path) -> None:
        (site_root.parent / "secret.css").write_text("secret")
        assert classify("/../secret.css", site_root) == NotFound("/../secret.css")

    def test_uppercase_extension_passes_through(self, site_root: Path) -> None:
        (site_root / "LOGO.PNG").write_bytes(b"\x89PNG")
        assert classify("/LOGO.PNG", site_root) == Passthrough()

    def test_extension_must_end_the_path(self, site_root: Path) -> None:
        assert classify("/assets/app.css.map", site_root) == Passthrough()
        assert classify("/download.cssx", site_root) == Passthrough()

    @pytest.mark.parametrize("extension", sorted(STATIC_EXTENSIONS))
    def test_every_extension_is_recognized(self, extension: str, site_root: Path) -> None:
        (site_root / f"file.{extension}").write_bytes(b"x")
        decision = classify(f"/file.{extension}", site_root)
        assert decision == StaticFile(site_root / f"file.{extension}", MIME_TYPES[extension])


class TestContentTypes:
    @pytest.mark.parametrize(
        ("extension", "expected"),
        [
            ("css", "text/css"),
            ("js", "application/javascript"),
            ("jpg", "image/jpeg"),
            ("jpeg", "image/jpeg"),
            ("svg", "image/svg+xml"),
            ("woff2", "font/woff2"),
            ("eot", "application/vnd.ms-fontobject"),
        ],
    )
    def test_table(self, extension: str, expected: str) -> None:
        assert content_type_for(extension) == expected

    def test_unknown_extension_defaults(self) -> None:
        assert content_type_for("webp") == "application/octet-stream"


class TestPassthrough:
    @pytest.mark.parametrize("path", ["/", "/dashboard", "/api/items", "/index.php", "/items/42"])
    def test_everything_else(self, path: str, site_root: Path) -> None:
        assert classify(path, site_root) == Passthrough()

    @pytest.mark.parametrize("target", ["", "dashboard", "http://[::1", "/a\x00b.css"])
    def test_malformed_input_passes_through(self, target: str, site_root: Path) -> None:
        assert classify(target, site_root) == Passthrough()


class TestDecodedPaths:
    @pytest.mark.parametrize("name", ["a?b.css", "c#.css"])
    def test_delimiter_characters_are_part_of_the_file_name(self, name: str, site_root: Path) -> None:
        (site_root / name).write_text("decoded")
        assert classify_path(f"/{name}", site_root) == StaticFile(site_root / name, "text/css")

    def test_missing_decoded_name_is_not_truncated(self, site_root: Path) -> None:
        assert classify_path("/missing?x.png", site_root) == NotFound("/missing?x.png")

    def test_query_like_suffix_is_not_stripped(self, site_root: Path) -> None:
        assert classify_path("/favicon.ico?v=3", site_root) == Passthrough()

    def test_auth_routes(self, site_root: Path) -> None:
        assert classify_path("/auth/google/callback", site_root) == AuthAction("auth", "callback")

    @pytest.mark.parametrize("path", ["", "dashboard", "/a\x00b.css"])
    def test_malformed_path_passes_through(self, path: str, site_root: Path) -> None:
        assert classify_path(path, site_root) == Passthrough()

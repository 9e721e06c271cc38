"""
Unit tests for PlantUML include locator resolution.
"""

import os
from pathlib import Path

import pytest

from plantuml_include.locator import LocatorKind, ResolvedLocator, is_url, resolve_locator


@pytest.mark.plantuml
class TestResolveLocator:
    """Test resolve_locator."""

    def test_stdlib(self) -> None:
        """Test <...> references are classified as standard library."""
        resolved = resolve_locator("<C4/C4_Container>", "/project/main.puml")

        assert resolved == ResolvedLocator(LocatorKind.STDLIB, "<C4/C4_Container>")

    def test_url(self) -> None:
        """Test URLs are remote whatever the includer."""
        resolved = resolve_locator("https://example.com/style.iuml", "/project/main.puml")

        assert resolved == ResolvedLocator(LocatorKind.REMOTE, "https://example.com/style.iuml")

    def test_relative_to_remote_includer(self) -> None:
        """Test relative locators of a remote file are URL-joined."""
        resolved = resolve_locator("../common/note.iuml", "https://example.com/a/b/style.iuml")

        assert resolved == ResolvedLocator(LocatorKind.REMOTE, "https://example.com/a/common/note.iuml")

    def test_absolute_path(self, tmp_path: Path) -> None:
        """Test absolute paths ignore the includer."""
        target = f"{tmp_path}/styles/../styles/style.iuml"

        resolved = resolve_locator(target, "/project/main.puml")

        assert resolved == ResolvedLocator(LocatorKind.LOCAL, str(tmp_path / "styles" / "style.iuml"))

    def test_relative_to_includer_directory(self, tmp_path: Path) -> None:
        """Test relative paths resolve against the directory of the includer."""
        includer = str(tmp_path / "dir" / "subdir" / "handwritten.iuml")

        resolved = resolve_locator("../base.iuml", includer)

        assert resolved.kind is LocatorKind.LOCAL
        assert resolved.location == str(tmp_path / "dir" / "base.iuml")

    def test_relative_without_includer(self) -> None:
        """Test relative paths of an anonymous document stay relative, normalized."""
        resolved = resolve_locator("./fixtures/../fixtures/style.iuml", None)

        assert resolved == ResolvedLocator(LocatorKind.LOCAL, os.path.join("fixtures", "style.iuml"))

    def test_key_is_absolute(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test relative and absolute forms of the same file share a key."""
        monkeypatch.chdir(tmp_path)

        relative = resolve_locator("style.iuml", None)
        absolute = resolve_locator(str(tmp_path / "style.iuml"), None)

        assert relative.location != absolute.location
        assert relative.key == absolute.key


@pytest.mark.plantuml
class TestIsUrl:
    """Test is_url."""

    @pytest.mark.parametrize("locator", ["http://example.com/a.iuml", "https://example.com/a.iuml", "HTTPS://EXAMPLE.COM"])
    def test_urls(self, locator: str) -> None:
        assert is_url(locator)

    @pytest.mark.parametrize("locator", ["style.iuml", "/abs/style.iuml", "ftp.iuml", "<std/lib>"])
    def test_not_urls(self, locator: str) -> None:
        assert not is_url(locator)

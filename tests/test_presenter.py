"""Tests for the rich presenter."""

from __future__ import annotations

import io
from pathlib import Path

import pytest
from rich.console import Console

from pathfinder.session.state import SessionState
from pathfinder.ui.presenter import (
    MATCH_STYLE,
    NO_SELECTION,
    PLAIN_STYLE,
    highlight_path,
    icon_for,
    render,
    render_loading,
)


def _plain(renderable) -> str:
    buffer = io.StringIO()
    Console(file=buffer, width=200, color_system=None).print(renderable)
    return buffer.getvalue()


class TestIconFor:
    """Test icon_for function."""

    def test_directory(self, tmp_path: Path) -> None:
        assert icon_for(str(tmp_path)) == "📁 "

    @pytest.mark.parametrize(
        ("name", "icon"),
        [
            ("main.py", "📜 "),
            ("data.json", "📜 "),
            ("README.md", "📝 "),
            ("api.hpp", "🧩 "),
            ("CMakeLists.txt", "🧱 "),
            ("a.out", "💾 "),
            ("Makefile", "💾 "),
            ("photo.png", "📄 "),
        ],
    )
    def test_files(self, tmp_path: Path, name: str, icon: str) -> None:
        target = tmp_path / name
        target.write_text("x")
        assert icon_for(str(target)) == icon

    def test_empty_name(self) -> None:
        """Should use the lock icon for paths without a file name."""
        assert icon_for("/definitely/not/here/") == "🔒 "

    def test_missing_file_without_known_extension(self, tmp_path: Path) -> None:
        """Should return no icon for unknown paths that do not exist."""
        assert icon_for(str(tmp_path / "ghost.png")) == ""


class TestHighlightPath:
    """Test highlight_path function."""

    def test_styles_every_occurrence(self) -> None:
        """Should style all characters in the set, case-insensitively."""
        text = highlight_path("/FoO/bar", frozenset({"o"}))
        styles = [str(span.style) for span in text.spans]
        assert text.plain == "/FoO/bar"
        assert styles.count(MATCH_STYLE) == 2
        assert styles.count(PLAIN_STYLE) == 6


class TestRender:
    """Test render function."""

    def test_marks_selected_row(self) -> None:
        state = SessionState(query="ab", selection=1, visible_count=5, results=("/x/a", "/x/b"))
        output = _plain(render(state))
        lines = output.splitlines()
        assert lines[0].startswith(" ") and "[*]" not in lines[0]
        assert "[*] " in lines[1]
        assert "Choice Index: 1" in output
        assert "Selected Choice: /x/b" in output
        assert "Search 🔍: ab" in output

    def test_respects_visible_count(self) -> None:
        state = SessionState(visible_count=1, results=("/x/a", "/x/b"))
        output = _plain(render(state))
        assert "/x/a" in output
        assert "/x/b" not in output

    def test_no_selection(self) -> None:
        state = SessionState(visible_count=0, results=("/x/a",))
        assert f"Selected Choice: {NO_SELECTION}" in _plain(render(state))

    def test_loading(self) -> None:
        assert "Loading ..." in _plain(render_loading())

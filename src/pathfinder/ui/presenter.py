"""Rendering of session state as rich text."""

from __future__ import annotations

from pathlib import Path

from rich.console import Group, RenderableType
from rich.text import Text

from pathfinder.session.state import SessionState, current_selection

NO_SELECTION = "No Directory Chosen"
LOADING = "Loading ..."

MATCH_STYLE = "magenta"
PLAIN_STYLE = "white"

SOURCE_EXTENSIONS = {".cpp", ".ts", ".tsx", ".js", ".jsx", ".py"}
DATA_EXTENSIONS = {".csv", ".json"}
HEADER_EXTENSIONS = {".h", ".hpp"}
BINARY_EXTENSIONS = {"", ".out", ".bin", ".exe", ".bat", ".app"}


def icon_for(path: str) -> str:
    """Pick a decorative icon for ``path``; touches the filesystem."""
    candidate = Path(path)
    name = "" if path.endswith("/") else candidate.name
    suffix = candidate.suffix if name else ""

    if candidate.is_dir():
        return "📁 "
    if suffix in SOURCE_EXTENSIONS or suffix in DATA_EXTENSIONS:
        return "📜 "
    if suffix == ".md":
        return "📝 "
    if suffix in HEADER_EXTENSIONS:
        return "🧩 "
    if not name:
        return "🔒 "
    if name == "CMakeLists.txt":
        return "🧱 "
    if suffix in BINARY_EXTENSIONS:
        return "💾 "
    if candidate.is_file():
        return "📄 "
    return ""


def highlight_path(path: str, highlight: frozenset[str]) -> Text:
    """Style every character of ``path`` that appears in ``highlight``."""
    text = Text()
    for char in path:
        text.append(char, style=MATCH_STYLE if char.lower() in highlight else PLAIN_STYLE)
    return text


def render_loading() -> RenderableType:
    return Text(LOADING)


def render(state: SessionState) -> RenderableType:
    """Build the full screen for ``state``."""
    lines: list[Text] = []
    for index in range(state.visible):
        path = state.results[index]
        line = Text(" ")
        if index == state.selection:
            line.append("[*] ")
        line.append(icon_for(path))
        line.append_text(highlight_path(path, state.highlight))
        lines.append(line)

    selected = current_selection(state)
    lines.append(Text(f"\n Choice Index: {state.selection}"))
    lines.append(Text(f" Selected Choice: {selected if selected is not None else NO_SELECTION}"))
    lines.append(Text(f"\n Search 🔍: {state.query}"))
    return Group(*lines)

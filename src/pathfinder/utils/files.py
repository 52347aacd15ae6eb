"""Utility helpers for working with files."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterator

LOGGER = logging.getLogger(__name__)


def _sorted_entries(directory: str) -> list[os.DirEntry[str]]:
    with os.scandir(directory) as entries:
        return sorted(entries, key=lambda entry: entry.name)


def iter_paths(root: str) -> Iterator[str]:
    """Yield every path below ``root`` in pre-order, skipping unreadable entries.

    Symlinked directories are yielded but not descended into.
    """
    try:
        top = _sorted_entries(root)
    except OSError as exc:
        LOGGER.debug("Skipping %s: %s", root, exc)
        return

    stack: list[Iterator[os.DirEntry[str]]] = [iter(top)]
    while stack:
        entry = next(stack[-1], None)
        if entry is None:
            stack.pop()
            continue

        path = entry.path
        yield path

        try:
            is_dir = entry.is_dir(follow_symlinks=False)
        except OSError:
            is_dir = False
        if not is_dir:
            continue
        try:
            stack.append(iter(_sorted_entries(path)))
        except OSError as exc:
            LOGGER.debug("Skipping %s: %s", path, exc)


def build_corpus(root: Path | str) -> tuple[str, ...]:
    """Collect the root and everything below it into an immutable corpus."""
    root_str = str(root)
    corpus = (root_str, *iter_paths(root_str))
    LOGGER.info("Collected %d paths under %s", len(corpus), root_str)
    return corpus


def resolve_selection(selected: str) -> Path:
    """Absolute directory for a selected path, using the parent of non-directories."""
    path = Path(selected)
    if not path.is_dir():
        path = path.parent
    return path.absolute()

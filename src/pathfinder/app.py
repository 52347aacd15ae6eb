"""Interactive loop tying the walker, ranker, session and terminal together."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Callable, ContextManager, Protocol

from rich.console import RenderableType

from pathfinder.config import AppConfig
from pathfinder.index.ranker import Ranker
from pathfinder.session.keys import EventKind, KeyEvent
from pathfinder.session.state import Session, current_selection
from pathfinder.ui.presenter import render, render_loading
from pathfinder.ui.terminal import TerminalSession
from pathfinder.utils.files import build_corpus, resolve_selection

LOGGER = logging.getLogger(__name__)


class Screen(Protocol):
    def read_event(self) -> KeyEvent | None: ...

    def draw(self, renderable: RenderableType) -> None: ...


def run_session(
    config: AppConfig,
    *,
    terminal_factory: Callable[[], ContextManager[Screen]] = TerminalSession,
) -> Path | None:
    """Run one interactive session and return the chosen directory.

    Returns ``None`` when nothing was visible at confirm time.
    """
    root = config.resolve_root()
    ranker = Ranker(config.resolve_workers(), exact_merge=config.exact_merge)

    with terminal_factory() as screen:
        with ThreadPoolExecutor(max_workers=1) as pool:
            pending = pool.submit(build_corpus, root)
            screen.draw(render_loading())
            corpus = pending.result()

        session = Session(corpus, ranker.rank)
        state = session.start(config.visible_count)
        screen.draw(render(state))

        while True:
            event = screen.read_event()
            if event is None:
                continue
            if event.kind is EventKind.CONFIRM:
                break
            state = session.apply(state, event)
            screen.draw(render(state))

    selected = current_selection(state)
    if selected is None:
        LOGGER.info("Session ended without a selection")
        return None
    return resolve_selection(selected)

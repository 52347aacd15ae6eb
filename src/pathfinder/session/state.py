"""Interactive selection state machine.

The session is a single immutable :class:`SessionState` advanced by pure
transition functions. Ranking is injected as a callable so the state machine
never touches the terminal or the thread pool itself.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Callable, Sequence

from pathfinder.config import DEFAULT_VISIBLE_COUNT
from pathfinder.session.keys import EventKind, KeyEvent

RankFn = Callable[[Sequence[str], str], Sequence[str]]


def highlight_set(query: str) -> frozenset[str]:
    """Distinct lowercase characters of ``query``."""
    return frozenset(char.lower() for char in query)


@dataclass(slots=True, frozen=True)
class SessionState:
    query: str = ""
    selection: int = 0
    visible_count: int = DEFAULT_VISIBLE_COUNT
    results: Sequence[str] = ()
    highlight: frozenset[str] = field(default_factory=frozenset)

    @property
    def visible(self) -> int:
        """Number of entries actually shown."""
        return min(len(self.results), self.visible_count)


def wrap_selection(state: SessionState) -> SessionState:
    """Bring ``selection`` back into ``[0, visible)``."""
    visible = state.visible
    if state.selection < 0:
        return replace(state, selection=visible - 1)
    if state.selection >= visible:
        return replace(state, selection=0)
    return state


def current_selection(state: SessionState) -> str | None:
    """Selected path, or ``None`` when nothing is visible."""
    if state.visible == 0:
        return None
    return state.results[state.selection]


class Session:
    """Binds the corpus and a ranking function to the transition rules."""

    def __init__(self, corpus: Sequence[str], rank: RankFn) -> None:
        self.corpus = corpus
        self._rank = rank

    def start(self, visible_count: int = DEFAULT_VISIBLE_COUNT) -> SessionState:
        state = SessionState(
            visible_count=max(0, visible_count),
            results=self._rank(self.corpus, ""),
        )
        return wrap_selection(state)

    def apply(self, state: SessionState, event: KeyEvent) -> SessionState:
        """Advance ``state`` by one event.

        ``CONFIRM`` leaves the state untouched; the caller ends the loop.
        """
        kind = event.kind
        if kind is EventKind.CONFIRM:
            return state

        if kind is EventKind.ERASE:
            state = self._requery(state, state.query[:-1])
        elif kind is EventKind.MOVE_PREVIOUS:
            state = replace(state, selection=state.selection - 1)
        elif kind is EventKind.MOVE_NEXT:
            state = replace(state, selection=state.selection + 1)
        elif kind is EventKind.SHRINK:
            state = replace(state, visible_count=max(0, state.visible_count - 1))
        elif kind is EventKind.GROW:
            state = replace(state, visible_count=state.visible_count + 1)
        elif kind is EventKind.CHARACTER:
            state = replace(self._requery(state, state.query + event.char), selection=0)
        return wrap_selection(state)

    def _requery(self, state: SessionState, query: str) -> SessionState:
        return replace(
            state,
            query=query,
            results=self._rank(self.corpus, query),
            highlight=highlight_set(query),
        )

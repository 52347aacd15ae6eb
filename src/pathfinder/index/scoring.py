"""Fuzzy relevance scoring for a single path."""

from __future__ import annotations

EXACT_MATCH_SCORE = 10000
EXACT_MATCH_MIN_QUERY = 3

POSITION_BASE = 100
CONSECUTIVE_BONUS = 50
SEGMENT_BONUS = 90
START_BONUS = 20
LENGTH_PENALTY_DIVISOR = 6

SEGMENT_SEPARATORS = frozenset("/_-")


def match_positions(candidate: str, query: str) -> list[int] | None:
    """Return candidate indices matching ``query`` as an ordered subsequence.

    Matching is case-insensitive and spaces in the query are skipped without
    consuming a candidate character. Returns ``None`` when the query is not a
    subsequence of the candidate.
    """
    positions: list[int] = []
    cursor = 0
    size = len(query)

    for index, char in enumerate(candidate):
        while cursor < size and query[cursor] == " ":
            cursor += 1
        if cursor == size:
            break
        if char.lower() == query[cursor].lower():
            positions.append(index)
            cursor += 1

    while cursor < size and query[cursor] == " ":
        cursor += 1
    if cursor < size:
        return None
    return positions


def score(candidate: str, query: str) -> int:
    """Score ``candidate`` against ``query``.

    Values <= 0 mean "no match". Literal case-sensitive occurrences of a query
    of at least three characters short-circuit to ``10000 - len(candidate)``,
    which outranks every subsequence score.
    """
    if len(query) >= EXACT_MATCH_MIN_QUERY and query in candidate:
        return EXACT_MATCH_SCORE - len(candidate)

    positions = match_positions(candidate, query)
    if positions is None:
        return 0

    total = 0
    previous = -2
    for idx in positions:
        total += POSITION_BASE - idx
        if idx == previous + 1:
            total += CONSECUTIVE_BONUS
        if idx == 0 or candidate[idx - 1] in SEGMENT_SEPARATORS:
            total += SEGMENT_BONUS
        if idx == 0:
            total += START_BONUS
        previous = idx

    total -= len(candidate) // LENGTH_PENALTY_DIVISOR
    return total

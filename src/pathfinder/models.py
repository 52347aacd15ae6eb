"""Core PathFinder data models."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class ScoredCandidate:
    """Path paired with its score for a single query."""

    score: int
    path: str

"""Parallel ranking of the whole corpus for one query."""

from __future__ import annotations

import logging
import time
from concurrent.futures import ThreadPoolExecutor
from typing import Iterator, List, Sequence

from pathfinder.config import _get_default_workers
from pathfinder.index.scoring import score
from pathfinder.models import ScoredCandidate

LOGGER = logging.getLogger(__name__)


def iter_chunks(items: Sequence[str], parts: int) -> Iterator[Sequence[str]]:
    """Split ``items`` into ``parts`` contiguous slices of near-equal size.

    Every slice holds ``ceil(len(items) / parts)`` items except the trailing
    ones, which may be shorter or empty. Exactly ``parts`` slices are yielded.
    """
    total = len(items)
    size = (total + parts - 1) // parts
    for index in range(parts):
        start = min(index * size, total)
        end = min(start + size, total)
        yield items[start:end]


def _by_score(candidate: ScoredCandidate) -> int:
    return candidate.score


class Ranker:
    """Score a corpus in parallel chunks and merge the results."""

    def __init__(self, workers: int | None = None, *, exact_merge: bool = False) -> None:
        self.workers = max(1, workers if workers is not None else _get_default_workers())
        self.exact_merge = exact_merge

    def rank(self, corpus: Sequence[str], query: str) -> Sequence[str]:
        """Return paths of ``corpus`` matching ``query``, best first.

        The empty query returns ``corpus`` itself in discovery order.
        """
        if not query:
            return corpus

        started = time.perf_counter()
        chunks = list(iter_chunks(corpus, self.workers))
        with ThreadPoolExecutor(max_workers=self.workers) as pool:
            batches = list(pool.map(lambda chunk: self._score_chunk(chunk, query), chunks))

        merged: List[ScoredCandidate] = []
        for batch in batches:
            merged.extend(batch)
        merged.sort(key=_by_score, reverse=True)

        LOGGER.debug(
            "Ranked %d paths for %r: %d kept in %.1f ms",
            len(corpus),
            query,
            len(merged),
            (time.perf_counter() - started) * 1000,
        )
        return [candidate.path for candidate in merged]

    def _score_chunk(self, chunk: Sequence[str], query: str) -> List[ScoredCandidate]:
        local: List[ScoredCandidate] = []
        for path in chunk:
            value = score(path, query)
            if value > 0:
                local.append(ScoredCandidate(score=value, path=path))
        local.sort(key=_by_score, reverse=True)

        if self.exact_merge:
            return local
        # Each chunk keeps only its top len/T entries before the global merge.
        limit = len(local) // self.workers
        if limit == 0:
            return local
        return local[:limit]

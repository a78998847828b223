"""Read-only derivations over a snapshot of rank-ordered entries.

The module-level functions are pure. `ScoreSelectors` binds them to a store
and memoizes results per store revision.
"""
from __future__ import annotations

import math
from typing import Any, Callable, Sequence

from score_ranking.entities.score_entry import PerformanceStatus, ScoreEntry
from score_ranking.entities.stats import ScoreStats
from score_ranking.services.store import RankedScoreStore

TOP_THREE = 3


def round_half_up(value: float, digits: int = 2) -> float:
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor


def select_all(entries: Sequence[ScoreEntry]) -> tuple[ScoreEntry, ...]:
    return tuple(entries)


def select_top_n(entries: Sequence[ScoreEntry], n: int) -> tuple[ScoreEntry, ...]:
    if n <= 0:
        return ()
    return tuple(entries[:n])


def select_top_three(entries: Sequence[ScoreEntry]) -> tuple[ScoreEntry, ...]:
    return select_top_n(entries, TOP_THREE)


def select_stats(entries: Sequence[ScoreEntry]) -> ScoreStats:
    total = len(entries)
    if total == 0:
        return ScoreStats()

    counts = {status: 0 for status in PerformanceStatus}
    for entry in entries:
        counts[entry.status] += 1

    return ScoreStats(
        total=total,
        average_score=round_half_up(sum(e.score for e in entries) / total),
        average_time=round_half_up(sum(e.time for e in entries) / total),
        excellent_count=counts[PerformanceStatus.EXCELLENT],
        good_count=counts[PerformanceStatus.GOOD],
        needs_improvement_count=counts[PerformanceStatus.NEEDS_IMPROVEMENT],
    )


class ScoreSelectors:
    """Store-bound selectors cached on the store revision.

    Any command bumps the revision, which drops every cached result. Each
    value is stored with the revision it was computed from, and is only
    served while the store is still at that revision.
    """

    def __init__(self, store: RankedScoreStore):
        self._store = store
        self._revision = 0
        self._cache: dict[tuple[Any, ...], tuple[int, Any]] = {}

    def _memo(self, key: tuple[Any, ...], compute: Callable[[Sequence[ScoreEntry]], Any]) -> Any:
        revision, entries = self._store.state
        if revision > self._revision:
            self._revision = revision
            self._cache = {}
        cached = self._cache.get(key)
        if cached is not None and cached[0] == revision:
            return cached[1]

        value = compute(entries)
        if cached is None or cached[0] < revision:
            self._cache[key] = (revision, value)
        return value

    def select_all(self) -> tuple[ScoreEntry, ...]:
        return self._memo(("all",), select_all)

    def select_top_n(self, n: int) -> tuple[ScoreEntry, ...]:
        return self._memo(("top", n), lambda entries: select_top_n(entries, n))

    def select_top_three(self) -> tuple[ScoreEntry, ...]:
        return self._memo(("top", TOP_THREE), select_top_three)

    def select_stats(self) -> ScoreStats:
        return self._memo(("stats",), select_stats)

"""Rank-order comparator: score descending, then time ascending."""
from __future__ import annotations

from typing import Iterable

from score_ranking.entities.score_entry import ScoreEntry


def rank_key(entry: ScoreEntry) -> tuple[float, float]:
    return (-entry.score, entry.time)


def sort_entries(entries: Iterable[ScoreEntry]) -> tuple[ScoreEntry, ...]:
    """Return entries in rank order.

    `sorted` is stable, so entries with equal score and time keep the order
    they were given in.
    """
    return tuple(sorted(entries, key=rank_key))


def is_rank_ordered(entries: Iterable[ScoreEntry]) -> bool:
    previous = None
    for entry in entries:
        key = rank_key(entry)
        if previous is not None and key < previous:
            return False
        previous = key
    return True

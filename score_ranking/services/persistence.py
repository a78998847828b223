"""Glue between the in-memory store and a durable entry repository."""
from __future__ import annotations

import logging

from score_ranking.errors import CorruptStateError
from score_ranking.services.interfaces.score_entry_repository import ScoreEntryRepository
from score_ranking.services.store import RankedScoreStore, Snapshot

logger = logging.getLogger(__name__)


def hydrate_store(store: RankedScoreStore, repository: ScoreEntryRepository) -> int:
    """Replace the store contents with the persisted entries.

    A corrupt payload is logged, recorded on `store.error` and replaced by an
    empty collection. Returns the number of entries loaded.
    """
    store.set_loading(True)
    try:
        entries = repository.fetch_all()
    except CorruptStateError as exc:
        logger.warning("Discarding persisted scores: %s", exc)
        store.set_error(str(exc))
        entries = []
    finally:
        store.set_loading(False)

    store.replace_all(entries)
    logger.info("Hydrated store with %d entries", len(store))
    return len(store)


class StoreMirror:
    """Writes every settled store snapshot through to a repository."""

    def __init__(self, store: RankedScoreStore, repository: ScoreEntryRepository):
        self._repository = repository
        self._unsubscribe = store.subscribe(self._on_change)

    def _on_change(self, entries: Snapshot) -> None:
        self._repository.save_all(entries)
        logger.debug("Mirrored %d entries", len(entries))

    def close(self) -> None:
        self._unsubscribe()

from __future__ import annotations

import logging
import threading
from typing import Callable, Iterable

from score_ranking.entities.score_entry import ScoreEntry
from score_ranking.services.ranking import sort_entries

logger = logging.getLogger(__name__)

Snapshot = tuple[ScoreEntry, ...]
Listener = Callable[[Snapshot], None]


class RankedScoreStore:
    """Authoritative, always rank-ordered collection of score entries.

    Commands are serialized on a lock and publish a new immutable snapshot
    before listeners run, so readers only ever see fully sorted state.

    Usage:
        store = RankedScoreStore()
        unsubscribe = store.subscribe(lambda entries: print(len(entries)))
        entry_id = store.add_score(95, 120)
        store.remove_score(entry_id)
    """

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._state: tuple[int, Snapshot] = (0, ())
        self._listeners: list[Listener] = []
        self.loading = False
        self.error: str | None = None

    @property
    def entries(self) -> Snapshot:
        return self._state[1]

    @property
    def revision(self) -> int:
        return self._state[0]

    @property
    def state(self) -> tuple[int, Snapshot]:
        """The current revision and its snapshot, read together."""
        return self._state

    def __len__(self) -> int:
        return len(self.entries)

    # ── commands ──

    def add_score(self, score: float, time: float) -> str:
        entry = ScoreEntry.create(score, time)
        with self._lock:
            # appended before sorting so equal keys keep insertion order
            self._publish(sort_entries(self.entries + (entry,)))
        logger.debug("added entry %s score=%s time=%s status=%s", entry.id, score, time, entry.status)
        return entry.id

    def remove_score(self, entry_id: str) -> None:
        with self._lock:
            remaining = tuple(e for e in self.entries if e.id != entry_id)
            if len(remaining) == len(self.entries):
                logger.debug("remove_score: no entry with id %s", entry_id)
            self._publish(remaining)

    def clear_all_scores(self) -> None:
        with self._lock:
            self._publish(())
        logger.debug("cleared all entries")

    def replace_all(self, entries: Iterable[ScoreEntry]) -> None:
        """Swap in an externally loaded collection, re-sorting it.

        Duplicate ids keep their first occurrence.
        """
        seen: set[str] = set()
        unique: list[ScoreEntry] = []
        for entry in entries:
            if entry.id in seen:
                logger.warning("dropping duplicate entry id %s", entry.id)
                continue
            seen.add(entry.id)
            unique.append(entry)

        with self._lock:
            self._publish(sort_entries(unique))

    def set_loading(self, loading: bool) -> None:
        self.loading = loading

    def set_error(self, error: str | None) -> None:
        self.error = error

    # ── notification ──

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener called with each settled snapshot.

        Listeners run under the command lock, so a listener may issue a
        command of its own; the listeners after it then receive the newer
        snapshot. Returns a callable that removes the listener.
        """
        with self._lock:
            self._listeners.append(listener)

        def unsubscribe() -> None:
            with self._lock:
                if listener in self._listeners:
                    self._listeners.remove(listener)

        return unsubscribe

    def _publish(self, entries: Snapshot) -> None:
        self._state = (self._state[0] + 1, entries)
        for listener in list(self._listeners):
            try:
                # a listener above may have published a newer snapshot
                listener(self.entries)
            except Exception:
                logger.exception("store listener %r failed", listener)

from typing import Iterable, List

from score_ranking.entities.score_entry import ScoreEntry
from score_ranking.services.interfaces.score_entry_repository import ScoreEntryRepository


class InMemoryScoreEntryRepository(ScoreEntryRepository):
    def __init__(self):
        # In-memory storage
        self._storage: List[ScoreEntry] = []

    def fetch_all(self) -> List[ScoreEntry]:
        """Return a copy of the stored entries."""
        return list(self._storage)

    def save_all(self, entries: Iterable[ScoreEntry]):
        """Replace stored entries."""
        self._storage = list(entries)

    def clear(self):
        """Drop every stored entry."""
        self._storage.clear()

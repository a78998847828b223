from abc import ABC, abstractmethod
from typing import Iterable

from score_ranking.entities.score_entry import ScoreEntry


class ScoreEntryRepository(ABC):

    @abstractmethod
    def fetch_all(self) -> list[ScoreEntry]:
        pass

    @abstractmethod
    def save_all(self, entries: Iterable[ScoreEntry]):
        """Replace the persisted collection with `entries`."""
        pass

    @abstractmethod
    def clear(self):
        pass

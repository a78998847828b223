from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path
from typing import Iterable

import pydantic
from pydantic import TypeAdapter

from score_ranking.entities.score_entry import ScoreEntry
from score_ranking.errors import CorruptStateError
from score_ranking.services.interfaces.score_entry_repository import ScoreEntryRepository

logger = logging.getLogger(__name__)

_ENTRIES_ADAPTER = TypeAdapter(list[ScoreEntry])


class JsonFileScoreEntryRepository(ScoreEntryRepository):
    """
    Mirrors the entry collection into a single JSON array document.
    """

    def __init__(self, path: str | os.PathLike[str]):
        self.path = Path(path).expanduser()

    def fetch_all(self) -> list[ScoreEntry]:
        if not self.path.exists():
            return []

        raw = self.path.read_bytes()
        if not raw.strip():
            return []

        try:
            return _ENTRIES_ADAPTER.validate_json(raw)
        except pydantic.ValidationError as exc:
            raise CorruptStateError(f"Unreadable score entries in {self.path}: {exc}") from exc

    def save_all(self, entries: Iterable[ScoreEntry]) -> None:
        payload = _ENTRIES_ADAPTER.dump_json(list(entries), indent=2)
        self.path.parent.mkdir(parents=True, exist_ok=True)

        # write-then-rename so readers never see a half-written document
        fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, prefix=f".{self.path.name}.")
        try:
            with os.fdopen(fd, "wb") as handle:
                handle.write(payload)
            os.replace(tmp_name, self.path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
        logger.debug("Wrote %d bytes to %s", len(payload), self.path)

    def clear(self) -> None:
        self.path.unlink(missing_ok=True)

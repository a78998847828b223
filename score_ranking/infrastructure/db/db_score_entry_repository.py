from __future__ import annotations

from datetime import timezone
from typing import Iterable

from sqlmodel import Session, delete, select

from score_ranking.entities.score_entry import PerformanceStatus, ScoreEntry
from score_ranking.errors import CorruptStateError
from score_ranking.infrastructure.db.tables import ScoreEntryRow
from score_ranking.services.interfaces.score_entry_repository import ScoreEntryRepository


class DBScoreEntryRepository(ScoreEntryRepository):
    """
    Table-backed mirror of the entry collection. `save_all` rewrites the table.
    """

    def __init__(self, session: Session):
        self._session = session

    def rollback(self) -> None:
        self._session.rollback()

    def fetch_all(self) -> list[ScoreEntry]:
        rows = self._session.exec(select(ScoreEntryRow)).all()
        return [self._row_to_domain(row) for row in rows]

    def save_all(self, entries: Iterable[ScoreEntry]) -> None:
        try:
            self._session.exec(delete(ScoreEntryRow))
            # re-saved ids must not collide with instances still in the identity map
            self._session.expunge_all()
            for entry in entries:
                self._session.add(self._domain_to_row(entry))
            self._session.commit()
        except Exception:
            self.rollback()
            raise

    def clear(self) -> None:
        try:
            self._session.exec(delete(ScoreEntryRow))
            self._session.commit()
        except Exception:
            self.rollback()
            raise

    @staticmethod
    def _row_to_domain(row: ScoreEntryRow) -> ScoreEntry:
        try:
            status = PerformanceStatus(row.status)
        except ValueError as exc:
            raise CorruptStateError(f"Entry {row.id} has unknown status {row.status!r}") from exc

        timestamp = row.timestamp
        if timestamp.tzinfo is None:
            # SQLite drops the offset; everything is written as UTC
            timestamp = timestamp.replace(tzinfo=timezone.utc)

        return ScoreEntry(
            id=row.id,
            score=row.score,
            time=row.time,
            status=status,
            timestamp=timestamp,
        )

    @staticmethod
    def _domain_to_row(entry: ScoreEntry) -> ScoreEntryRow:
        return ScoreEntryRow(
            id=entry.id,
            score=entry.score,
            time=entry.time,
            status=entry.status.value,
            timestamp=entry.timestamp,
        )

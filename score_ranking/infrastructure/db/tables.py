"""Score entry table."""
from __future__ import annotations

from datetime import datetime, timezone

from sqlmodel import Field, SQLModel


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class ScoreEntryRow(SQLModel, table=True):
    __tablename__ = "score_entries"

    id: str = Field(primary_key=True)
    score: float = Field(index=True)
    time: float
    status: str
    timestamp: datetime = Field(default_factory=utc_now, index=True)

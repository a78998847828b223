from score_ranking.infrastructure.db.db_score_entry_repository import DBScoreEntryRepository
from score_ranking.infrastructure.db.session import build_engine, create_session, database_url, init_db
from score_ranking.infrastructure.db.tables import ScoreEntryRow

__all__ = [
    "DBScoreEntryRepository",
    "ScoreEntryRow",
    "build_engine",
    "create_session",
    "database_url",
    "init_db",
]

"""In-memory ranked score store with tier classification and derived stats."""
from score_ranking.entities.score_entry import PerformanceStatus, ScoreEntry, classify_score, generate_id
from score_ranking.entities.stats import ScoreStats
from score_ranking.errors import CorruptStateError, ScoreRankingError, ValidationError
from score_ranking.services.selectors import ScoreSelectors
from score_ranking.services.store import RankedScoreStore

__version__ = "0.1.0"

__all__ = [
    "CorruptStateError",
    "PerformanceStatus",
    "RankedScoreStore",
    "ScoreEntry",
    "ScoreRankingError",
    "ScoreSelectors",
    "ScoreStats",
    "ValidationError",
    "classify_score",
    "generate_id",
]

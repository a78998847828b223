from score_ranking.services.selectors import (
    ScoreSelectors,
    select_all,
    select_stats,
    select_top_n,
    select_top_three,
)
from score_ranking.services.store import RankedScoreStore

__all__ = [
    "RankedScoreStore",
    "ScoreSelectors",
    "select_all",
    "select_stats",
    "select_top_n",
    "select_top_three",
]

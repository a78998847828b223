from __future__ import annotations

import logging

from score_ranking.services.store import RankedScoreStore

logger = logging.getLogger(__name__)

# (score, time in seconds)
DEMO_SCORES: tuple[tuple[float, float], ...] = (
    (95, 120),
    (88, 180),
    (92, 150),
    (75, 240),
    (65, 300),
    (98, 90),
)


def populate_demo_data(store: RankedScoreStore) -> list[str]:
    """Insert the demo pairs through the normal add command."""
    ids = [store.add_score(score, time) for score, time in DEMO_SCORES]
    logger.info("Loaded %d demo entries", len(ids))
    return ids

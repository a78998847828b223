from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ScoreStats:
    """Aggregate view over a snapshot of entries."""
    total: int = 0
    average_score: float = 0
    average_time: float = 0
    excellent_count: int = 0
    good_count: int = 0
    needs_improvement_count: int = 0

    def to_payload(self) -> dict[str, Any]:
        return {
            "total": self.total,
            "averageScore": self.average_score,
            "averageTime": self.average_time,
            "excellentCount": self.excellent_count,
            "goodCount": self.good_count,
            "needsImprovementCount": self.needs_improvement_count,
        }

from __future__ import annotations

import secrets
import time as _time
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import StrEnum
from typing import NamedTuple


class PerformanceStatus(StrEnum):
    EXCELLENT = "excellent"
    GOOD = "good"
    NEEDS_IMPROVEMENT = "needs-improvement"


# Strictly above EXCELLENT is excellent; GOOD and above (inclusive) is good.
EXCELLENT_THRESHOLD = 90
GOOD_THRESHOLD = 70


class StatusBadge(NamedTuple):
    label: str
    icon: str


STATUS_BADGES: dict[PerformanceStatus, StatusBadge] = {
    PerformanceStatus.EXCELLENT: StatusBadge("Excellent", "🏆"),
    PerformanceStatus.GOOD: StatusBadge("Well done", "🎉"),
    PerformanceStatus.NEEDS_IMPROVEMENT: StatusBadge("Keep trying", "💪"),
}


def classify_score(score: float) -> PerformanceStatus:
    """Map a raw score to its performance tier.

    Defined for every real number; range checks belong to the submission
    validator, not here.
    """
    if score > EXCELLENT_THRESHOLD:
        return PerformanceStatus.EXCELLENT
    if score >= GOOD_THRESHOLD:
        return PerformanceStatus.GOOD
    return PerformanceStatus.NEEDS_IMPROVEMENT


_BASE36 = "0123456789abcdefghijklmnopqrstuvwxyz"


def _to_base36(value: int) -> str:
    if value == 0:
        return "0"
    digits = []
    while value:
        value, rem = divmod(value, 36)
        digits.append(_BASE36[rem])
    return "".join(reversed(digits))


def generate_id() -> str:
    """Millisecond clock in base 36 followed by a random base-36 suffix.

    Uniqueness is probabilistic: there is no registry of issued ids.
    """
    millis = _time.time_ns() // 1_000_000
    suffix = _to_base36(secrets.randbits(52))
    return f"{_to_base36(millis)}{suffix}"


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class ScoreEntry:
    """A single recorded performance, `time` in seconds. Never mutated after creation."""
    id: str
    score: float
    time: float
    status: PerformanceStatus
    timestamp: datetime = field(default_factory=utc_now)

    @classmethod
    def create(cls, score: float, time: float) -> "ScoreEntry":
        return cls(
            id=generate_id(),
            score=score,
            time=time,
            status=classify_score(score),
        )

    @property
    def badge(self) -> StatusBadge:
        return STATUS_BADGES[self.status]

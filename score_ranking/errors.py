"""Error types raised at the edges of the ranking store.

The store itself never raises during normal operation. Validation errors come
from the submission boundary and corrupt-state errors from persistence.
"""
from __future__ import annotations


class ScoreRankingError(Exception):
    """Base class for all score_ranking errors."""


class ValidationError(ScoreRankingError):
    """A submitted score/time pair failed boundary validation.

    `field` and `message` describe the first failing field; `errors` holds
    every field error found.
    """

    def __init__(self, field: str, message: str, errors: dict[str, str] | None = None):
        super().__init__(f"{field}: {message}")
        self.field = field
        self.message = message
        self.errors = dict(errors) if errors else {field: message}


class CorruptStateError(ScoreRankingError):
    """A persisted entry collection could not be parsed."""

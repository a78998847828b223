"""Boundary validation for score submissions.

Everything that reaches `RankedScoreStore.add_score` from outside is expected to
pass through `parse_score_submission` first; the store does not re-check ranges.
"""
from __future__ import annotations

from typing import Any, Mapping

import pydantic
from pydantic import BaseModel, ConfigDict, Field

from score_ranking.errors import ValidationError

SCORE_MIN = 0
SCORE_MAX = 100
TIME_MIN = 0

_MESSAGES: dict[str, dict[str, str]] = {
    "score": {
        "required": "Score is required",
        "min": f"Score must be {SCORE_MIN} or greater",
        "max": f"Score must not exceed {SCORE_MAX}",
        "number": "Score must be a number",
    },
    "time": {
        "required": "Time is required",
        "min": f"Time must be {TIME_MIN} or greater",
        "number": "Time must be a number",
    },
}

_ERROR_KIND = {
    "greater_than_equal": "min",
    "less_than_equal": "max",
}


class ScoreSubmission(BaseModel):
    score: float = Field(ge=SCORE_MIN, le=SCORE_MAX, allow_inf_nan=False)
    time: float = Field(ge=TIME_MIN, allow_inf_nan=False)

    model_config = ConfigDict(frozen=True)


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def validate_score_form(data: Mapping[str, Any]) -> dict[str, str]:
    """Return field → message for every invalid field (empty when valid)."""
    errors: dict[str, str] = {}
    for field_name in _MESSAGES:
        value = data.get(field_name)
        if _is_blank(value):
            errors[field_name] = _MESSAGES[field_name]["required"]
        elif isinstance(value, bool):
            errors[field_name] = _MESSAGES[field_name]["number"]

    candidate = {k: data.get(k) for k in _MESSAGES if k not in errors}
    try:
        ScoreSubmission.model_validate({"score": 0, "time": 0, **candidate})
    except pydantic.ValidationError as exc:
        for error in exc.errors():
            field_name = str(error["loc"][0])
            if field_name in errors:
                continue
            kind = _ERROR_KIND.get(error["type"], "number")
            errors[field_name] = _MESSAGES[field_name][kind]

    return {k: errors[k] for k in _MESSAGES if k in errors}


def parse_score_submission(data: Mapping[str, Any]) -> ScoreSubmission:
    """Validate and coerce a raw submission, raising ValidationError."""
    errors = validate_score_form(data)
    if errors:
        field_name, message = next(iter(errors.items()))
        raise ValidationError(field_name, message, errors)
    return ScoreSubmission.model_validate({"score": data["score"], "time": data["time"]})

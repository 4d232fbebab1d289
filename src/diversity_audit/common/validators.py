from __future__ import annotations

from ..core.constants import MAX_INCLUSION_SCORE, MIN_INCLUSION_SCORE
from ..core.exceptions import ValidationError

_YES = {"yes", "y"}
_NO = {"no", "n"}


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} must not be empty")
    return value.strip()


def require_score(value: int) -> int:
    score = int(value)
    if score < MIN_INCLUSION_SCORE or score > MAX_INCLUSION_SCORE:
        raise ValidationError(
            f"Inclusion score must be between {MIN_INCLUSION_SCORE} and {MAX_INCLUSION_SCORE}"
        )
    return score


def parse_yes_no(value: str) -> bool | None:
    """Return True/False for yes/no answers, None when the answer is not recognised."""
    answer = (value or "").strip().lower()
    if answer in _YES:
        return True
    if answer in _NO:
        return False
    return None


def require_int(value, field_name: str) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be a whole number")

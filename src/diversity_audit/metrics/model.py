from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class CountShare:
    """A count together with its share of the roster, in percent."""

    label: str
    count: int
    percent: float


@dataclass(frozen=True)
class DiversityMetrics:
    """Read-model for the D&I report."""

    total_employees: int
    genders: list[CountShare]
    disability: CountShare
    average_score: Optional[float]
    score_count: int
    ethnicities: list[CountShare] = field(default_factory=list)

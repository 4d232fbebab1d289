from __future__ import annotations

from collections import Counter
from typing import Iterable, Optional, Sequence

from ..core.constants import UNSPECIFIED_ETHNICITY
from ..core.enums import GenderCategory
from ..employees.model import Employee
from .model import CountShare, DiversityMetrics


def percent(part: int, total: int) -> float:
    if total == 0:
        return 0.0
    return (100.0 * part) / total


def average(values: Iterable[int]) -> tuple[Optional[float], int]:
    total = 0
    count = 0
    for v in values:
        total += v
        count += 1
    if count == 0:
        return None, 0
    return total / count, count


def ethnicity_key(ethnicity: Optional[str]) -> str:
    value = (ethnicity or "").strip()
    return value or UNSPECIFIED_ETHNICITY


def compute_metrics(employees: Sequence[Employee], scores: Iterable[int]) -> DiversityMetrics:
    total = 0
    disabled = 0
    gender_counts = {category: 0 for category in GenderCategory}
    for e in employees:
        total += 1
        gender_counts[GenderCategory.classify(e.gender)] += 1
        if e.has_disability:
            disabled += 1

    avg, score_count = average(scores)

    eth_counts = Counter(ethnicity_key(e.ethnicity) for e in employees)
    ethnicities = [
        CountShare(label=name, count=count, percent=percent(count, total))
        for name, count in sorted(eth_counts.items(), key=lambda kv: (-kv[1], kv[0]))
    ]

    return DiversityMetrics(
        total_employees=total,
        genders=[
            CountShare(label=category.value, count=count, percent=percent(count, total))
            for category, count in gender_counts.items()
        ],
        disability=CountShare(label="Employees with disability", count=disabled, percent=percent(disabled, total)),
        average_score=avg,
        score_count=score_count,
        ethnicities=ethnicities,
    )

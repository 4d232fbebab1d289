from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass(frozen=True)
class AuditRecord:
    """Domain entity: a dated inclusion audit of one employee.

    The employee_* fields are a snapshot taken when the audit was recorded.
    """

    audit_id: Optional[int]
    employee_id: str
    auditor: str
    audit_date: date
    inclusion_score: int
    notes: str
    employee_gender: str = ""
    employee_ethnicity: str = ""
    employee_has_disability: bool = False

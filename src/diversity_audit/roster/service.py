from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date
from typing import Optional, Sequence

from ..audits.model import AuditRecord
from ..audits.repository import AuditRepository
from ..common.datetime_utils import today_local
from ..common.validators import require_int, require_non_empty, require_score
from ..core.exceptions import DuplicateKeyError, NotFoundError
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from ..metrics.calculator import compute_metrics
from ..metrics.model import DiversityMetrics

logger = logging.getLogger(__name__)


def _keep_if_blank(new, old):
    if new is None:
        return old
    if isinstance(new, str):
        new = new.strip()
        if not new:
            return old
    return new


class RecordManager:
    """Use case: keep the roster in memory and in sync with the store.

    The roster is a plain list in load order (identifier order), with new
    employees appended at the end. Every mutation is written to the store
    first and applied to the list only once the store accepted it.
    """

    def __init__(self, employees: EmployeeRepository, audits: AuditRepository):
        self._employees = employees
        self._audits = audits
        self._roster: list[Employee] = []

    def load(self) -> int:
        self._roster = list(self._employees.list_all())
        logger.info("loaded %d employees", len(self._roster))
        return len(self._roster)

    def list_employees(self) -> Sequence[Employee]:
        return tuple(self._roster)

    def find(self, employee_id: str) -> Optional[Employee]:
        for e in self._roster:
            if e.employee_id == employee_id:
                return e
        return None

    def _require(self, employee_id: str) -> Employee:
        employee = self.find(employee_id)
        if employee is None:
            raise NotFoundError("Employee not found.")
        return employee

    def add(self, employee: Employee) -> Employee:
        employee_id = require_non_empty(employee.employee_id, "Employee ID")
        if self.find(employee_id) is not None:
            raise DuplicateKeyError("Employee with this ID already exists.")

        employee = replace(employee, employee_id=employee_id, age=require_int(employee.age, "Age"))
        self._employees.create(employee)
        self._roster.append(employee)
        logger.info("added employee %s", employee_id)
        return employee

    def update(
        self,
        employee_id: str,
        *,
        name: Optional[str] = None,
        age: Optional[int] = None,
        gender: Optional[str] = None,
        ethnicity: Optional[str] = None,
        has_disability: Optional[bool] = None,
    ) -> Employee:
        """Update an employee; ``None`` or blank fields keep their current value."""

        current = self._require(employee_id)
        updated = replace(
            current,
            name=_keep_if_blank(name, current.name),
            age=require_int(_keep_if_blank(age, current.age), "Age"),
            gender=_keep_if_blank(gender, current.gender),
            ethnicity=_keep_if_blank(ethnicity, current.ethnicity),
            has_disability=bool(_keep_if_blank(has_disability, current.has_disability)),
        )
        if not self._employees.update(updated):
            # Row is gone from the store; the roster must not keep it.
            self._roster.remove(current)
            raise NotFoundError("Employee not found.")

        current.name = updated.name
        current.age = updated.age
        current.gender = updated.gender
        current.ethnicity = updated.ethnicity
        current.has_disability = updated.has_disability
        logger.info("updated employee %s", employee_id)
        return current

    def delete(self, employee_id: str) -> int:
        """Delete an employee and its audit records; returns the number of audits removed."""

        employee = self._require(employee_id)
        self._employees.delete_by_id(employee_id)
        self._roster.remove(employee)
        removed = self._audits.delete_for_employee(employee_id)
        logger.info("deleted employee %s and %d audit records", employee_id, removed)
        return removed

    def add_audit(
        self,
        employee_id: str,
        *,
        auditor: str,
        audit_date: Optional[date] = None,
        score: int,
        notes: str = "",
    ) -> AuditRecord:
        employee = self.find(employee_id)
        if employee is None:
            raise NotFoundError("Employee not found. Cannot add audit.")
        score = require_score(score)

        record = AuditRecord(
            audit_id=None,
            employee_id=employee.employee_id,
            auditor=(auditor or "").strip(),
            audit_date=audit_date or today_local(),
            inclusion_score=score,
            notes=(notes or "").strip(),
            employee_gender=employee.gender,
            employee_ethnicity=employee.ethnicity,
            employee_has_disability=employee.has_disability,
        )
        audit_id = self._audits.create(record)
        logger.info("saved audit %s for employee %s", audit_id, employee_id)
        return replace(record, audit_id=audit_id)

    def list_audits(self, employee_id: str) -> Sequence[AuditRecord]:
        return self._audits.list_for_employee(employee_id)

    def compute_metrics(self) -> DiversityMetrics:
        return compute_metrics(self._roster, self._audits.list_scores())

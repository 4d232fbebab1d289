from __future__ import annotations

from dataclasses import replace
from datetime import date

import pytest

from diversity_audit.audits.model import AuditRecord
from diversity_audit.employees.model import Employee
from diversity_audit.roster.service import RecordManager


class InMemoryEmployees:
    def __init__(self, employees=()):
        self._rows: dict[str, Employee] = {e.employee_id: replace(e) for e in employees}

    def list_all(self):
        return [replace(self._rows[k]) for k in sorted(self._rows)]

    def create(self, employee: Employee) -> None:
        self._rows[employee.employee_id] = replace(employee)

    def update(self, employee: Employee) -> bool:
        if employee.employee_id not in self._rows:
            return False
        self._rows[employee.employee_id] = replace(employee)
        return True

    def delete_by_id(self, employee_id: str) -> bool:
        return self._rows.pop(employee_id, None) is not None

    def get(self, employee_id: str):
        return self._rows.get(employee_id)


class InMemoryAudits:
    def __init__(self):
        self._next_id = 1
        self.records: list[AuditRecord] = []

    def create(self, record: AuditRecord) -> int:
        audit_id = self._next_id
        self._next_id += 1
        self.records.append(replace(record, audit_id=audit_id))
        return audit_id

    def list_for_employee(self, employee_id: str):
        items = [r for r in self.records if r.employee_id == employee_id]
        items.sort(key=lambda r: (r.audit_date, r.audit_id))
        return items

    def list_scores(self):
        return [r.inclusion_score for r in self.records]

    def delete_for_employee(self, employee_id: str) -> int:
        before = len(self.records)
        self.records = [r for r in self.records if r.employee_id != employee_id]
        return before - len(self.records)


@pytest.fixture
def sample_employees():
    return [
        Employee("E002", "Ben", 41, "Male", "Black", True),
        Employee("E001", "Alice", 34, "Female", "Hispanic", False),
        Employee("E003", "Sam", 29, "Non-binary", "Asian", False),
        Employee("E004", "Priya", 37, "female", "  ", False),
    ]


@pytest.fixture
def employees_repo(sample_employees):
    return InMemoryEmployees(sample_employees)


@pytest.fixture
def audits_repo():
    return InMemoryAudits()


@pytest.fixture
def manager(employees_repo, audits_repo):
    m = RecordManager(employees_repo, audits_repo)
    m.load()
    return m


@pytest.fixture
def fixed_today(monkeypatch):
    today = date(2026, 2, 1)
    monkeypatch.setattr("diversity_audit.roster.service.today_local", lambda: today)
    return today

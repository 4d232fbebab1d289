from __future__ import annotations

from typing import Protocol, Sequence

from .model import AuditRecord


class AuditRepository(Protocol):
    def create(self, record: AuditRecord) -> int:
        raise NotImplementedError

    def list_for_employee(self, employee_id: str) -> Sequence[AuditRecord]:
        """Audits of one employee, oldest first."""

        raise NotImplementedError

    def list_scores(self) -> Sequence[int]:
        """Inclusion scores of every stored audit."""

        raise NotImplementedError

    def delete_for_employee(self, employee_id: str) -> int:
        raise NotImplementedError

from __future__ import annotations

from typing import Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import coerce_bool, coerce_int, db_cursor, fetchall
from .model import AuditRecord
from .repository import AuditRepository


class MySQLAuditRepository(AuditRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create(self, record: AuditRecord) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO audits(
                    employee_id, auditor, audit_date, inclusion_score, notes,
                    employee_gender, employee_ethnicity, employee_has_disability
                )
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                (
                    record.employee_id,
                    record.auditor,
                    record.audit_date,
                    int(record.inclusion_score),
                    record.notes,
                    record.employee_gender,
                    record.employee_ethnicity,
                    1 if record.employee_has_disability else 0,
                ),
            )
            return int(cur.lastrowid)

    def list_for_employee(self, employee_id: str) -> Sequence[AuditRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT audit_id, employee_id, auditor, audit_date, inclusion_score, notes,
                       employee_gender, employee_ethnicity, employee_has_disability
                FROM audits
                WHERE employee_id=%s
                ORDER BY audit_date, audit_id
                """,
                (employee_id,),
            )
            rows = fetchall(cur)
            return [
                AuditRecord(
                    audit_id=int(r["audit_id"]),
                    employee_id=str(r["employee_id"]),
                    auditor=r.get("auditor") or "",
                    audit_date=r["audit_date"],
                    inclusion_score=coerce_int(r.get("inclusion_score")),
                    notes=r.get("notes") or "",
                    employee_gender=r.get("employee_gender") or "",
                    employee_ethnicity=r.get("employee_ethnicity") or "",
                    employee_has_disability=coerce_bool(r.get("employee_has_disability")),
                )
                for r in rows
            ]

    def list_scores(self) -> Sequence[int]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT inclusion_score FROM audits WHERE inclusion_score IS NOT NULL")
            return [coerce_int(r["inclusion_score"]) for r in fetchall(cur)]

    def delete_for_employee(self, employee_id: str) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM audits WHERE employee_id=%s", (employee_id,))
            return int(cur.rowcount)

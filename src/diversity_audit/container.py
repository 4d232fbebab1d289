from __future__ import annotations

from dataclasses import dataclass

from .audits.mysql_audit_repository import MySQLAuditRepository
from .database.connection import DBConfig, DatabaseConnection
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .roster.service import RecordManager


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection

    employees_repo: MySQLEmployeeRepository
    audits_repo: MySQLAuditRepository

    record_manager: RecordManager


def build_container(*, db_config: dict) -> Container:
    conn = DatabaseConnection(DBConfig.from_dict(db_config))

    employees_repo = MySQLEmployeeRepository(conn)
    audits_repo = MySQLAuditRepository(conn)

    record_manager = RecordManager(employees_repo, audits_repo)

    return Container(
        conn=conn,
        employees_repo=employees_repo,
        audits_repo=audits_repo,
        record_manager=record_manager,
    )

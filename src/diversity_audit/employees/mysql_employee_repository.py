from __future__ import annotations

from typing import Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import coerce_bool, coerce_int, db_cursor, fetchall
from .model import Employee
from .repository import EmployeeRepository


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT employee_id, name, age, gender, ethnicity, has_disability
                FROM employees
                ORDER BY employee_id
                """
            )
            rows = fetchall(cur)
            return [
                Employee(
                    employee_id=str(r["employee_id"]),
                    name=r.get("name") or "",
                    age=coerce_int(r.get("age")),
                    gender=r.get("gender") or "",
                    ethnicity=r.get("ethnicity") or "",
                    has_disability=coerce_bool(r.get("has_disability")),
                )
                for r in rows
            ]

    def create(self, employee: Employee) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO employees(employee_id, name, age, gender, ethnicity, has_disability)
                VALUES(%s,%s,%s,%s,%s,%s)
                """,
                (
                    employee.employee_id,
                    employee.name,
                    int(employee.age),
                    employee.gender,
                    employee.ethnicity,
                    1 if employee.has_disability else 0,
                ),
            )

    def update(self, employee: Employee) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE employees
                SET name=%s, age=%s, gender=%s, ethnicity=%s, has_disability=%s
                WHERE employee_id=%s
                """,
                (
                    employee.name,
                    int(employee.age),
                    employee.gender,
                    employee.ethnicity,
                    1 if employee.has_disability else 0,
                    employee.employee_id,
                ),
            )
            return cur.rowcount > 0

    def delete_by_id(self, employee_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM employees WHERE employee_id=%s", (employee_id,))
            return cur.rowcount > 0

from __future__ import annotations

from datetime import date

import pytest

from diversity_audit.audits.mysql_audit_repository import MySQLAuditRepository
from diversity_audit.database.bootstrap import iter_sql_statements, packaged_sql
from diversity_audit.database.mysql_base import coerce_bool, coerce_int, db_cursor
from diversity_audit.employees.model import Employee
from diversity_audit.employees.mysql_employee_repository import MySQLEmployeeRepository


class FakeCursor:
    def __init__(self, rows=None, rowcount=1, lastrowid=7):
        self.rows = rows or []
        self.rowcount = rowcount
        self.lastrowid = lastrowid
        self.executed: list[tuple[str, tuple]] = []
        self.closed = False

    def execute(self, sql, params=()):
        self.executed.append((" ".join(sql.split()), params))

    def fetchall(self):
        return self.rows

    def fetchone(self):
        return self.rows[0] if self.rows else None

    def close(self):
        self.closed = True


class FakeConnection:
    def __init__(self, cursor):
        self._cursor = cursor
        self.committed = False
        self.rolled_back = False
        self.closed = False

    def cursor(self, dictionary=False):
        return self._cursor

    def commit(self):
        self.committed = True

    def rollback(self):
        self.rolled_back = True

    def close(self):
        self.closed = True


class FakeConnFactory:
    def __init__(self, cursor):
        self.cursor = cursor
        self.conn = FakeConnection(cursor)

    def connect(self):
        return self.conn


def test_db_cursor_commits_on_success():
    factory = FakeConnFactory(FakeCursor())

    with db_cursor(factory) as (_, cur):
        cur.execute("SELECT 1")

    assert factory.conn.committed and factory.conn.closed
    assert not factory.conn.rolled_back


def test_db_cursor_rolls_back_and_reraises():
    factory = FakeConnFactory(FakeCursor())

    with pytest.raises(RuntimeError):
        with db_cursor(factory):
            raise RuntimeError("boom")

    assert factory.conn.rolled_back and factory.conn.closed
    assert not factory.conn.committed


@pytest.mark.parametrize("value,expected", [(None, 0), (41, 41), ("37", 37), (" 5 ", 5), ("n/a", 0), (True, 1)])
def test_coerce_int(value, expected):
    assert coerce_int(value) == expected


@pytest.mark.parametrize("value,expected", [(None, False), (1, True), (0, False), ("yes", True), (b"1", True), ("0", False)])
def test_coerce_bool(value, expected):
    assert coerce_bool(value) is expected


def test_employee_list_all_coerces_rows():
    cur = FakeCursor(
        rows=[
            {"employee_id": "E1", "name": "A", "age": "not a number", "gender": None, "ethnicity": "X", "has_disability": 1},
        ]
    )
    repo = MySQLEmployeeRepository(FakeConnFactory(cur))

    (e,) = repo.list_all()

    assert e == Employee("E1", "A", 0, "", "X", True)
    assert "ORDER BY employee_id" in cur.executed[0][0]


def test_employee_update_reports_rowcount():
    cur = FakeCursor(rowcount=0)
    repo = MySQLEmployeeRepository(FakeConnFactory(cur))

    assert repo.update(Employee("E1", "A", 30, "Male", "", False)) is False
    assert cur.executed[0][1] == ("A", 30, "Male", "", 0, "E1")


def test_audit_queries_filter_and_sort():
    cur = FakeCursor(
        rows=[
            {
                "audit_id": 3,
                "employee_id": "E1",
                "auditor": "Ann",
                "audit_date": date(2025, 1, 2),
                "inclusion_score": 80,
                "notes": None,
                "employee_gender": "Female",
                "employee_ethnicity": "",
                "employee_has_disability": 0,
            }
        ],
        rowcount=1,
    )
    repo = MySQLAuditRepository(FakeConnFactory(cur))

    (a,) = repo.list_for_employee("E1")
    assert repo.delete_for_employee("E1") == 1

    assert a.notes == "" and a.employee_has_disability is False
    sql, params = cur.executed[0]
    assert "WHERE employee_id=%s" in sql and "ORDER BY audit_date" in sql
    assert params == ("E1",)
    assert cur.executed[1] == ("DELETE FROM audits WHERE employee_id=%s", ("E1",))


def test_sql_splitter_respects_quotes():
    sql = "INSERT INTO t VALUES ('a;b'); SELECT \"x;y\";\n\n"

    assert list(iter_sql_statements(sql)) == ["INSERT INTO t VALUES ('a;b')", 'SELECT "x;y"']


def test_schema_and_seed_ship_with_the_package():
    schema = packaged_sql("schema.sql")
    seed = packaged_sql("seed.sql")

    assert schema.is_file() and seed.is_file()
    statements = list(iter_sql_statements(schema.read_text(encoding="utf-8")))
    assert any("CREATE TABLE IF NOT EXISTS employees" in s for s in statements)
    assert any("CREATE TABLE IF NOT EXISTS audits" in s for s in statements)

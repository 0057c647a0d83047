from __future__ import annotations

import re
from datetime import date, datetime
from decimal import Decimal
from pathlib import Path
from typing import TYPE_CHECKING, Iterable

from ..common.datetime_utils import now_local
from .connection import DBConfig, DatabaseConnection

if TYPE_CHECKING:
    from ..container import Container


SCHEMA_PATH = Path(__file__).resolve().parents[4] / "database" / "schema.sql"

# Children first so foreign keys never block the drop.
_DROP_ORDER = (
    "DROP VIEW IF EXISTS v_EmployeeAttendance",
    "DROP VIEW IF EXISTS v_LeaveRequests",
    "DROP VIEW IF EXISTS v_PayrollReport",
    "DROP TABLE IF EXISTS Payroll",
    "DROP TABLE IF EXISTS LeaveRequest",
    "DROP TABLE IF EXISTS Attendance",
    "DROP TABLE IF EXISTS Employee",
)

REFERENCE_EMPLOYEES = (
    {
        "employee_id": 1,
        "full_name": "John Doe",
        "department": "Engineering",
        "role": "Software Engineer",
        "joining_date": date(2020, 5, 1),
        "contact_number": "1234567890",
        "email": "john.doe@example.com",
    },
    {
        "employee_id": 2,
        "full_name": "Jane Smith",
        "department": "HR",
        "role": "HR Manager",
        "joining_date": date(2019, 2, 15),
        "contact_number": "0987654321",
        "email": "jane.smith@example.com",
    },
)


def _strip_create_db_and_use(sql: str) -> str:
    # Keep schema.sql compatible regardless of DB name.
    sql = re.sub(r"(?im)^\s*CREATE\s+DATABASE\b.*?;\s*$", "", sql)
    sql = re.sub(r"(?im)^\s*USE\b.*?;\s*$", "", sql)
    return sql


def iter_sql_statements(sql: str) -> Iterable[str]:
    # Minimal SQL splitter for schema files (handles ';' inside quotes and '--' comments).
    buf: list[str] = []
    in_single = False
    in_double = False
    in_comment = False
    escape = False
    prev = ""

    for ch in sql:
        if in_comment:
            if ch == "\n":
                in_comment = False
                buf.append(ch)
            prev = ch
            continue

        if escape:
            buf.append(ch)
            escape = False
            prev = ch
            continue

        if ch == "\\":
            buf.append(ch)
            escape = True
            prev = ch
            continue

        if ch == "-" and prev == "-" and not in_single and not in_double:
            buf.pop()
            in_comment = True
            prev = ""
            continue

        if ch == "'" and not in_double:
            in_single = not in_single
        elif ch == '"' and not in_single:
            in_double = not in_double
        elif ch == ";" and not in_single and not in_double:
            stmt = "".join(buf).strip()
            buf.clear()
            prev = ch
            if stmt:
                yield stmt
            continue

        buf.append(ch)
        prev = ch

    tail = "".join(buf).strip()
    if tail:
        yield tail


def _exec_sql(cur, statements: Iterable[str]) -> None:
    for stmt in statements:
        cur.execute(stmt)


def ensure_database_exists(db_config: dict) -> None:
    target = DBConfig.from_dict(db_config)
    conn = DatabaseConnection(target).connect(with_database=False)
    try:
        cur = conn.cursor()
        cur.execute(
            f"CREATE DATABASE IF NOT EXISTS `{target.database}` CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci;"
        )
        conn.commit()
    finally:
        conn.close()


def apply_schema(db_config: dict, *, schema_path: str | Path = SCHEMA_PATH) -> None:
    """Create missing tables and (re)create the report views. Safe to run repeatedly."""

    ensure_database_exists(db_config)
    sql = _strip_create_db_and_use(Path(schema_path).read_text(encoding="utf-8"))

    conn = DatabaseConnection(DBConfig.from_dict(db_config)).connect()
    try:
        cur = conn.cursor()
        _exec_sql(cur, iter_sql_statements(sql))
        conn.commit()
    finally:
        conn.close()


def reset_schema(db_config: dict, *, schema_path: str | Path = SCHEMA_PATH) -> None:
    """Drop every table and view, then apply schema.sql from scratch."""

    ensure_database_exists(db_config)
    conn = DatabaseConnection(DBConfig.from_dict(db_config)).connect()
    try:
        cur = conn.cursor()
        _exec_sql(cur, _DROP_ORDER)
        conn.commit()
    finally:
        conn.close()

    apply_schema(db_config, schema_path=schema_path)


def list_tables(db_config: dict) -> list[str]:
    conn = DatabaseConnection(DBConfig.from_dict(db_config)).connect()
    try:
        cur = conn.cursor()
        cur.execute("SHOW TABLES")
        return [row[0] for row in cur.fetchall()]
    finally:
        conn.close()


def seed_reference_data(container: "Container", *, today: date | None = None) -> dict:
    """Insert the reference dataset through the services.

    Employees are matched by id, so re-running only fills what is missing:
    John Doe gets one payroll run (5000 + 500 - 100) and one clock-in on ``today``
    (the current date when omitted).
    """

    created = {"employees": 0, "payroll": 0, "attendance": 0}

    for data in REFERENCE_EMPLOYEES:
        if container.employees_repo.get_by_id(data["employee_id"]):
            continue
        container.employee_service.create_employee(**data)
        created["employees"] += 1

    if not container.payroll_service.list_payroll(1):
        container.payroll_service.process_payroll(
            1,
            salary=Decimal("5000"),
            bonus=Decimal("500"),
            deductions=Decimal("100"),
        )
        created["payroll"] += 1

    now = now_local()
    if today is not None:
        now = datetime.combine(today, now.time())
    if not container.attendance_service.has_attendance_on(1, now.date()):
        container.attendance_service.clock_in(1, now=now)
        created["attendance"] += 1

    return created

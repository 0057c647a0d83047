from __future__ import annotations

from datetime import date
from typing import Any, Dict, Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Employee
from .repository import EmployeeRepository

_COLUMNS = "EmployeeID, FullName, Department, Role, JoiningDate, ContactNumber, Email"


def _to_employee(r: Dict[str, Any]) -> Employee:
    return Employee(
        employee_id=int(r["EmployeeID"]),
        full_name=r["FullName"],
        department=r.get("Department"),
        role=r.get("Role"),
        joining_date=r.get("JoiningDate"),
        contact_number=r.get("ContactNumber"),
        email=r.get("Email"),
    )


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM Employee WHERE EmployeeID=%s", (int(employee_id),))
            row = fetchone(cur)
            return _to_employee(row) if row else None

    def get_by_email(self, email: str) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM Employee WHERE Email=%s", (email,))
            row = fetchone(cur)
            return _to_employee(row) if row else None

    def create(
        self,
        *,
        employee_id: Optional[int],
        full_name: str,
        department: Optional[str],
        role: Optional[str],
        joining_date: Optional[date],
        contact_number: Optional[str],
        email: Optional[str],
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO Employee(EmployeeID, FullName, Department, Role, JoiningDate, ContactNumber, Email)
                VALUES(%s,%s,%s,%s,%s,%s,%s)
                """,
                (employee_id, full_name, department, role, joining_date, contact_number, email),
            )
            return int(employee_id) if employee_id is not None else int(cur.lastrowid)

    def list_all(self, *, limit: int = 200) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM Employee ORDER BY EmployeeID ASC LIMIT %s", (int(limit),))
            return [_to_employee(r) for r in fetchall(cur)]

    def delete_by_id(self, employee_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM Employee WHERE EmployeeID=%s", (int(employee_id),))
            return cur.rowcount > 0

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Any, Dict, Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_decimal, db_cursor, fetchall, fetchone
from .model import PayrollRecord
from .repository import PayrollRepository

_COLUMNS = "PayrollID, EmployeeID, Salary, Bonus, Deductions, TotalPay, PayrollDate"


def _to_record(r: Dict[str, Any]) -> PayrollRecord:
    return PayrollRecord(
        payroll_id=int(r["PayrollID"]),
        employee_id=int(r["EmployeeID"]),
        salary=as_decimal(r.get("Salary")) or Decimal("0"),
        bonus=as_decimal(r.get("Bonus")) or Decimal("0"),
        deductions=as_decimal(r.get("Deductions")) or Decimal("0"),
        total_pay=as_decimal(r.get("TotalPay")) or Decimal("0"),
        payroll_date=r.get("PayrollDate"),
    )


class MySQLPayrollRepository(PayrollRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create(
        self,
        *,
        employee_id: int,
        salary: Decimal,
        bonus: Decimal,
        deductions: Decimal,
        total_pay: Decimal,
        payroll_date: date,
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO Payroll(EmployeeID, Salary, Bonus, Deductions, TotalPay, PayrollDate)
                VALUES(%s,%s,%s,%s,%s,%s)
                """,
                (int(employee_id), salary, bonus, deductions, total_pay, payroll_date),
            )
            return int(cur.lastrowid)

    def get_by_id(self, payroll_id: int) -> Optional[PayrollRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM Payroll WHERE PayrollID=%s", (int(payroll_id),))
            r = fetchone(cur)
            return _to_record(r) if r else None

    def list_for_employee(self, *, employee_id: Optional[int] = None, limit: int = 200) -> Sequence[PayrollRecord]:
        where = ""
        params: list[object] = []
        if employee_id is not None:
            where = "WHERE EmployeeID=%s"
            params.append(int(employee_id))
        params.append(int(limit))

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM Payroll
                {where}
                ORDER BY PayrollDate DESC, PayrollID DESC
                LIMIT %s
                """,
                tuple(params),
            )
            return [_to_record(r) for r in fetchall(cur)]

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_decimal, as_float, db_cursor, fetchall
from .model import EmployeeAttendanceRow, LeaveRequestRow, PayrollReportRow
from .repository import ReportRepository


class MySQLReportRepository(ReportRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def employee_attendance(
        self,
        *,
        employee_id: Optional[int] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> Sequence[EmployeeAttendanceRow]:
        clauses: list[str] = []
        params: list[object] = []

        if employee_id is not None:
            clauses.append("EmployeeID=%s")
            params.append(int(employee_id))
        if start_date is not None:
            clauses.append("AttendanceDate >= %s")
            params.append(start_date)
        if end_date is not None:
            clauses.append("AttendanceDate <= %s")
            params.append(end_date)

        where = f"WHERE {' AND '.join(clauses)}" if clauses else ""

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT EmployeeID, FullName, AttendanceDate, ClockInTime, ClockOutTime, TotalHoursWorked
                FROM v_EmployeeAttendance
                {where}
                ORDER BY AttendanceDate DESC, EmployeeID ASC, ClockInTime ASC
                """,
                tuple(params),
            )
            return [
                EmployeeAttendanceRow(
                    employee_id=int(r["EmployeeID"]),
                    full_name=r["FullName"],
                    attendance_date=r["AttendanceDate"],
                    clock_in_time=r["ClockInTime"],
                    clock_out_time=r.get("ClockOutTime"),
                    total_hours_worked=as_float(r.get("TotalHoursWorked")),
                )
                for r in fetchall(cur)
            ]

    def leave_requests(self) -> Sequence[LeaveRequestRow]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT FullName, LeaveStartDate, LeaveEndDate, LeaveType, Status
                FROM v_LeaveRequests
                ORDER BY LeaveStartDate DESC, FullName ASC
                """
            )
            return [
                LeaveRequestRow(
                    full_name=r["FullName"],
                    leave_start_date=r.get("LeaveStartDate"),
                    leave_end_date=r.get("LeaveEndDate"),
                    leave_type=r["LeaveType"],
                    status=r["Status"],
                )
                for r in fetchall(cur)
            ]

    def payroll_report(self) -> Sequence[PayrollReportRow]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT FullName, Salary, Bonus, Deductions, TotalPay
                FROM v_PayrollReport
                ORDER BY FullName ASC
                """
            )
            return [
                PayrollReportRow(
                    full_name=r["FullName"],
                    salary=as_decimal(r.get("Salary")),
                    bonus=as_decimal(r.get("Bonus")) or Decimal("0"),
                    deductions=as_decimal(r.get("Deductions")) or Decimal("0"),
                    total_pay=as_decimal(r.get("TotalPay")),
                )
                for r in fetchall(cur)
            ]

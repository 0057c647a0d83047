from __future__ import annotations

from datetime import date, datetime
from typing import Any, Dict, Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_float, db_cursor, fetchall, fetchone
from .model import AttendanceRecord
from .repository import AttendanceRepository

_COLUMNS = "AttendanceID, EmployeeID, AttendanceDate, ClockInTime, ClockOutTime, TotalHoursWorked"


def _to_record(r: Dict[str, Any]) -> AttendanceRecord:
    return AttendanceRecord(
        attendance_id=int(r["AttendanceID"]),
        employee_id=int(r["EmployeeID"]),
        attendance_date=r["AttendanceDate"],
        clock_in_time=r["ClockInTime"],
        clock_out_time=r.get("ClockOutTime"),
        total_hours_worked=as_float(r.get("TotalHoursWorked")),
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, attendance_id: int) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM Attendance WHERE AttendanceID=%s", (int(attendance_id),))
            r = fetchone(cur)
            return _to_record(r) if r else None

    def list_for_employee_and_date(self, employee_id: int, attendance_date: date) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM Attendance
                WHERE EmployeeID=%s AND AttendanceDate=%s
                ORDER BY ClockInTime ASC
                """,
                (int(employee_id), attendance_date),
            )
            return [_to_record(r) for r in fetchall(cur)]

    def list_open_for_employee_and_date(self, employee_id: int, attendance_date: date) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM Attendance
                WHERE EmployeeID=%s AND AttendanceDate=%s AND ClockOutTime IS NULL
                ORDER BY ClockInTime DESC
                """,
                (int(employee_id), attendance_date),
            )
            return [_to_record(r) for r in fetchall(cur)]

    def create_clock_in(self, *, employee_id: int, attendance_date: date, clock_in_time: datetime) -> int:
        # uq_attendance_open rejects a second open row for the same day (mapped to ConflictError).
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO Attendance(EmployeeID, ClockInTime, AttendanceDate)
                VALUES(%s,%s,%s)
                """,
                (int(employee_id), clock_in_time, attendance_date),
            )
            return int(cur.lastrowid)

    def set_clock_out(self, *, attendance_id: int, clock_out_time: datetime, total_hours_worked: float) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE Attendance
                SET ClockOutTime=%s, TotalHoursWorked=%s
                WHERE AttendanceID=%s AND ClockOutTime IS NULL
                """,
                (clock_out_time, total_hours_worked, int(attendance_id)),
            )
            return cur.rowcount > 0

    def list_for_employee(self, employee_id: int, *, limit: int) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM Attendance
                WHERE EmployeeID=%s
                ORDER BY AttendanceDate DESC, ClockInTime DESC
                LIMIT %s
                """,
                (int(employee_id), int(limit)),
            )
            return [_to_record(r) for r in fetchall(cur)]

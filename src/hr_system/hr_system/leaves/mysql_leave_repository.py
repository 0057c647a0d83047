from __future__ import annotations

from datetime import date
from typing import Any, Dict, Optional, Sequence

from ..core.enums import LeaveStatus, LeaveType
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import LeaveRequest
from .repository import LeaveRequestRepository

_COLUMNS = "LeaveRequestID, EmployeeID, LeaveStartDate, LeaveEndDate, LeaveType, Status"


def _to_request(r: Dict[str, Any]) -> LeaveRequest:
    return LeaveRequest(
        leave_request_id=int(r["LeaveRequestID"]),
        employee_id=int(r["EmployeeID"]),
        leave_start_date=r.get("LeaveStartDate"),
        leave_end_date=r.get("LeaveEndDate"),
        leave_type=LeaveType(r["LeaveType"]),
        status=LeaveStatus(r["Status"]),
    )


class MySQLLeaveRequestRepository(LeaveRequestRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create(
        self,
        *,
        employee_id: int,
        leave_start_date: date,
        leave_end_date: date,
        leave_type: LeaveType,
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO LeaveRequest(EmployeeID, LeaveStartDate, LeaveEndDate, LeaveType, Status)
                VALUES(%s,%s,%s,%s,%s)
                """,
                (
                    int(employee_id),
                    leave_start_date,
                    leave_end_date,
                    leave_type.value,
                    LeaveStatus.PENDING.value,
                ),
            )
            return int(cur.lastrowid)

    def get_by_id(self, leave_request_id: int) -> Optional[LeaveRequest]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM LeaveRequest WHERE LeaveRequestID=%s", (int(leave_request_id),))
            r = fetchone(cur)
            return _to_request(r) if r else None

    def list_for_employee(self, *, employee_id: Optional[int] = None, limit: int = 200) -> Sequence[LeaveRequest]:
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
                FROM LeaveRequest
                {where}
                ORDER BY LeaveRequestID DESC
                LIMIT %s
                """,
                tuple(params),
            )
            return [_to_request(r) for r in fetchall(cur)]

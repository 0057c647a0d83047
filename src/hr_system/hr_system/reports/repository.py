from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import EmployeeAttendanceRow, LeaveRequestRow, PayrollReportRow


class ReportRepository(Protocol):
    """Reads the three report views; every call hits the live tables."""

    def employee_attendance(
        self,
        *,
        employee_id: Optional[int] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> Sequence[EmployeeAttendanceRow]:
        raise NotImplementedError

    def leave_requests(self) -> Sequence[LeaveRequestRow]:
        raise NotImplementedError

    def payroll_report(self) -> Sequence[PayrollReportRow]:
        raise NotImplementedError

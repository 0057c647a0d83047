from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Optional


@dataclass(frozen=True)
class EmployeeAttendanceRow:
    """Read-model của view v_EmployeeAttendance."""

    employee_id: int
    full_name: str
    attendance_date: date
    clock_in_time: datetime
    clock_out_time: Optional[datetime]
    total_hours_worked: Optional[float]


@dataclass(frozen=True)
class LeaveRequestRow:
    """Read-model của view v_LeaveRequests."""

    full_name: str
    leave_start_date: Optional[date]
    leave_end_date: Optional[date]
    leave_type: str
    status: str


@dataclass(frozen=True)
class PayrollReportRow:
    """Read-model của view v_PayrollReport."""

    full_name: str
    salary: Optional[Decimal]
    bonus: Decimal
    deductions: Decimal
    total_pay: Optional[Decimal]

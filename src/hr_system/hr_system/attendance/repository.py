from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Protocol, Sequence

from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def get_by_id(self, attendance_id: int) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def list_for_employee_and_date(self, employee_id: int, attendance_date: date) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def list_open_for_employee_and_date(self, employee_id: int, attendance_date: date) -> Sequence[AttendanceRecord]:
        """Records of that day with no clock-out yet (normally zero or one)."""

        raise NotImplementedError

    def create_clock_in(self, *, employee_id: int, attendance_date: date, clock_in_time: datetime) -> int:
        """Insert an open record.

        Raises ConflictError if the employee already has an open record for that date.
        """

        raise NotImplementedError

    def set_clock_out(self, *, attendance_id: int, clock_out_time: datetime, total_hours_worked: float) -> bool:
        """Close an open record; returns False if it was already closed or does not exist."""

        raise NotImplementedError

    def list_for_employee(self, employee_id: int, *, limit: int) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

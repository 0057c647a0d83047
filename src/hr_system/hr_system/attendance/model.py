from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional


@dataclass(frozen=True)
class AttendanceRecord:
    """Thực thể miền (domain): Bản ghi chấm công."""

    attendance_id: int
    employee_id: int
    attendance_date: date
    clock_in_time: datetime
    clock_out_time: Optional[datetime] = None
    total_hours_worked: Optional[float] = None

    @property
    def is_open(self) -> bool:
        return self.clock_out_time is None

    def to_dict(self) -> dict:
        return {
            "attendance_id": self.attendance_id,
            "employee_id": self.employee_id,
            "attendance_date": self.attendance_date.isoformat(),
            "clock_in_time": self.clock_in_time.isoformat(sep=" "),
            "clock_out_time": self.clock_out_time.isoformat(sep=" ") if self.clock_out_time else None,
            "total_hours_worked": self.total_hours_worked,
        }

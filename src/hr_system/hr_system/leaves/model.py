from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..core.enums import LeaveStatus, LeaveType


@dataclass(frozen=True)
class LeaveRequest:
    """Thực thể miền (domain): Đơn xin nghỉ phép."""

    leave_request_id: int
    employee_id: int
    leave_start_date: Optional[date]
    leave_end_date: Optional[date]
    leave_type: LeaveType
    status: LeaveStatus = LeaveStatus.PENDING

    def to_dict(self) -> dict:
        return {
            "leave_request_id": self.leave_request_id,
            "employee_id": self.employee_id,
            "leave_start_date": self.leave_start_date.isoformat() if self.leave_start_date else None,
            "leave_end_date": self.leave_end_date.isoformat() if self.leave_end_date else None,
            "leave_type": self.leave_type.value,
            "status": self.status.value,
        }

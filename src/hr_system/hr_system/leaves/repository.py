from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from ..core.enums import LeaveType
from .model import LeaveRequest


class LeaveRequestRepository(Protocol):
    def create(
        self,
        *,
        employee_id: int,
        leave_start_date: date,
        leave_end_date: date,
        leave_type: LeaveType,
    ) -> int:
        """Insert a request; the stored status is always Pending."""

        raise NotImplementedError

    def get_by_id(self, leave_request_id: int) -> Optional[LeaveRequest]:
        raise NotImplementedError

    def list_for_employee(self, *, employee_id: Optional[int] = None, limit: int = 200) -> Sequence[LeaveRequest]:
        raise NotImplementedError

from __future__ import annotations

from datetime import date
from typing import Optional, Sequence, Union

from ..common.validators import require_positive_int
from ..core.constants import DEFAULT_LIST_LIMIT
from ..core.enums import LeaveType
from ..core.exceptions import NotFoundError, ValidationError
from ..employees.repository import EmployeeRepository
from .model import LeaveRequest
from .repository import LeaveRequestRepository


def parse_leave_type(value: Union[str, LeaveType, None]) -> LeaveType:
    """Exact match against Sick / Casual / Paid (the values stored in LeaveRequest.LeaveType)."""

    if isinstance(value, LeaveType):
        return value
    try:
        return LeaveType(str(value or "").strip())
    except ValueError:
        allowed = ", ".join(t.value for t in LeaveType)
        raise ValidationError(f"Loại nghỉ phép không hợp lệ (chỉ chấp nhận: {allowed})")


class LeaveService:
    def __init__(self, leaves: LeaveRequestRepository, employees: EmployeeRepository):
        self._leaves = leaves
        self._employees = employees

    def register_leave_request(
        self,
        employee_id: int,
        start_date: date,
        end_date: date,
        leave_type: Union[str, LeaveType],
    ) -> LeaveRequest:
        leave_type = parse_leave_type(leave_type)
        if start_date is None or end_date is None:
            raise ValidationError("Ngày bắt đầu và ngày kết thúc là bắt buộc")
        if end_date < start_date:
            raise ValidationError("Ngày kết thúc phải >= ngày bắt đầu")

        employee_id = require_positive_int(employee_id, "Mã nhân viên")
        if not self._employees.get_by_id(employee_id):
            raise NotFoundError("Nhân viên không tồn tại")

        request_id = self._leaves.create(
            employee_id=employee_id,
            leave_start_date=start_date,
            leave_end_date=end_date,
            leave_type=leave_type,
        )
        created = self._leaves.get_by_id(request_id)
        if not created:
            raise NotFoundError("Không tìm thấy đơn nghỉ phép vừa tạo")
        return created

    def list_leave_requests(
        self,
        employee_id: Optional[int] = None,
        *,
        limit: int = DEFAULT_LIST_LIMIT,
    ) -> Sequence[LeaveRequest]:
        if employee_id is not None:
            employee_id = require_positive_int(employee_id, "Mã nhân viên")
        return self._leaves.list_for_employee(employee_id=employee_id, limit=int(limit))

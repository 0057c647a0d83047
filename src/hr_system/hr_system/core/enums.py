from __future__ import annotations

from enum import Enum


class LeaveType(str, Enum):
    """Loại nghỉ phép, giá trị khớp ràng buộc CHECK trong CSDL."""

    SICK = "Sick"
    CASUAL = "Casual"
    PAID = "Paid"


class LeaveStatus(str, Enum):
    """Trạng thái đơn nghỉ phép."""

    PENDING = "Pending"
    APPROVED = "Approved"

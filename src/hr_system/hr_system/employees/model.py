from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass(frozen=True)
class Employee:
    """Thực thể miền (domain): Nhân viên.

    Lưu ý: Đây là đối tượng dữ liệu thuần (không chứa code truy cập DB).
    """

    employee_id: int
    full_name: str
    department: Optional[str] = None
    role: Optional[str] = None
    joining_date: Optional[date] = None
    contact_number: Optional[str] = None
    email: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "employee_id": self.employee_id,
            "full_name": self.full_name,
            "department": self.department,
            "role": self.role,
            "joining_date": self.joining_date.isoformat() if self.joining_date else None,
            "contact_number": self.contact_number,
            "email": self.email,
        }

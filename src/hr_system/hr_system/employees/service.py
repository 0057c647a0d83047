from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..common.validators import optional_text, require_non_empty, require_positive_int
from ..core.constants import DEFAULT_LIST_LIMIT
from ..core.exceptions import ConflictError, NotFoundError, ValidationError
from .model import Employee
from .repository import EmployeeRepository


class EmployeeService:
    """Use cases: quản lý hồ sơ nhân viên."""

    def __init__(self, employees: EmployeeRepository):
        self._employees = employees

    def require_employee(self, employee_id: int) -> Employee:
        employee = self._employees.get_by_id(require_positive_int(employee_id, "Mã nhân viên"))
        if not employee:
            raise NotFoundError("Nhân viên không tồn tại")
        return employee

    def get_employee(self, employee_id: int) -> Employee:
        return self.require_employee(employee_id)

    def list_employees(self, *, limit: int = DEFAULT_LIST_LIMIT) -> Sequence[Employee]:
        return self._employees.list_all(limit=limit)

    def create_employee(
        self,
        *,
        full_name: str,
        employee_id: Optional[int] = None,
        department: Optional[str] = None,
        role: Optional[str] = None,
        joining_date: Optional[date] = None,
        contact_number: Optional[str] = None,
        email: Optional[str] = None,
    ) -> Employee:
        full_name = require_non_empty(full_name, "Họ tên")
        if len(full_name) > 100:
            raise ValidationError("Họ tên tối đa 100 ký tự")

        if employee_id is not None:
            employee_id = require_positive_int(employee_id, "Mã nhân viên")
            if self._employees.get_by_id(employee_id):
                raise ConflictError("Mã nhân viên đã tồn tại")

        email = optional_text(email, "Email", 100)
        if email:
            email = email.lower()
            if "@" not in email:
                raise ValidationError("Email không hợp lệ")
            if self._employees.get_by_email(email):
                raise ConflictError("Email đã được sử dụng")

        new_id = self._employees.create(
            employee_id=employee_id,
            full_name=full_name,
            department=optional_text(department, "Phòng ban", 50),
            role=optional_text(role, "Chức vụ", 50),
            joining_date=joining_date,
            contact_number=optional_text(contact_number, "Số điện thoại", 15),
            email=email,
        )
        return self.require_employee(new_id)

    def delete_employee(self, employee_id: int) -> None:
        employee = self.require_employee(employee_id)
        if not self._employees.delete_by_id(employee.employee_id):
            raise NotFoundError("Nhân viên không tồn tại")

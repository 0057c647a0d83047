from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import Employee


class EmployeeRepository(Protocol):
    """Giao diện repository cho Employee.

    Lưu ý (DIP): tầng service phụ thuộc vào interface này, không phụ thuộc trực tiếp DB cụ thể.
    """

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        raise NotImplementedError

    def get_by_email(self, email: str) -> Optional[Employee]:
        raise NotImplementedError

    def create(
        self,
        *,
        employee_id: Optional[int],
        full_name: str,
        department: Optional[str],
        role: Optional[str],
        joining_date: Optional[date],
        contact_number: Optional[str],
        email: Optional[str],
    ) -> int:
        """Insert an employee; an explicit employee_id is kept, otherwise the store assigns one."""

        raise NotImplementedError

    def list_all(self, *, limit: int = 200) -> Sequence[Employee]:
        raise NotImplementedError

    def delete_by_id(self, employee_id: int) -> bool:
        """Delete an employee.

        Raises ReferentialIntegrityError while attendance, leave or payroll rows reference it.
        """

        raise NotImplementedError

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Optional, Protocol, Sequence

from .model import PayrollRecord


class PayrollRepository(Protocol):
    def create(
        self,
        *,
        employee_id: int,
        salary: Decimal,
        bonus: Decimal,
        deductions: Decimal,
        total_pay: Decimal,
        payroll_date: date,
    ) -> int:
        raise NotImplementedError

    def get_by_id(self, payroll_id: int) -> Optional[PayrollRecord]:
        raise NotImplementedError

    def list_for_employee(self, *, employee_id: Optional[int] = None, limit: int = 200) -> Sequence[PayrollRecord]:
        raise NotImplementedError

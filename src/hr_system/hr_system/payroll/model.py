from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional


@dataclass(frozen=True)
class PayrollRecord:
    """Thực thể miền (domain): Bảng lương một kỳ."""

    payroll_id: int
    employee_id: int
    salary: Decimal
    bonus: Decimal
    deductions: Decimal
    total_pay: Decimal
    payroll_date: Optional[date] = None

    def to_dict(self) -> dict:
        return {
            "payroll_id": self.payroll_id,
            "employee_id": self.employee_id,
            "salary": str(self.salary),
            "bonus": str(self.bonus),
            "deductions": str(self.deductions),
            "total_pay": str(self.total_pay),
            "payroll_date": self.payroll_date.isoformat() if self.payroll_date else None,
        }

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Any, Optional, Sequence

from ..common.datetime_utils import now_local
from ..common.validators import check_money_range, parse_money, require_positive_int
from ..core.constants import DEFAULT_LIST_LIMIT
from ..core.exceptions import NotFoundError
from ..employees.repository import EmployeeRepository
from .calculator.base import PayrollCalculator
from .calculator.standard_calculator import StandardPayrollCalculator
from .model import PayrollRecord
from .repository import PayrollRepository


class PayrollService:
    def __init__(
        self,
        payroll: PayrollRepository,
        employees: EmployeeRepository,
        *,
        calculator: Optional[PayrollCalculator] = None,
    ):
        self._payroll = payroll
        self._employees = employees
        self._calculator = calculator or StandardPayrollCalculator()

    def process_payroll(
        self,
        employee_id: int,
        salary: Any,
        bonus: Any = None,
        deductions: Any = None,
        *,
        payroll_date: Optional[date] = None,
    ) -> PayrollRecord:
        """Insert one payroll row with TotalPay computed now.

        Every call adds a row; several runs for the same employee and period are
        allowed and left to the caller.
        """

        salary_d = parse_money(salary, "Lương cơ bản")
        bonus_d = parse_money(bonus, "Thưởng", default=Decimal("0"))
        deductions_d = parse_money(deductions, "Khấu trừ", default=Decimal("0"))

        employee_id = require_positive_int(employee_id, "Mã nhân viên")
        if not self._employees.get_by_id(employee_id):
            raise NotFoundError("Nhân viên không tồn tại")

        total = check_money_range(
            self._calculator.total_pay(salary=salary_d, bonus=bonus_d, deductions=deductions_d),
            "Tổng lương",
        )
        payroll_id = self._payroll.create(
            employee_id=employee_id,
            salary=salary_d,
            bonus=bonus_d,
            deductions=deductions_d,
            total_pay=total,
            payroll_date=payroll_date or now_local().date(),
        )
        created = self._payroll.get_by_id(payroll_id)
        if not created:
            raise NotFoundError("Không tìm thấy bảng lương vừa tạo")
        return created

    def list_payroll(
        self,
        employee_id: Optional[int] = None,
        *,
        limit: int = DEFAULT_LIST_LIMIT,
    ) -> Sequence[PayrollRecord]:
        if employee_id is not None:
            employee_id = require_positive_int(employee_id, "Mã nhân viên")
        return self._payroll.list_for_employee(employee_id=employee_id, limit=int(limit))

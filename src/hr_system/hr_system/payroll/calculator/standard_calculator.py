from __future__ import annotations

from decimal import Decimal

from ...common.validators import quantize_money
from .base import PayrollCalculator


class StandardPayrollCalculator(PayrollCalculator):
    """Standard rule: salary + bonus - deductions, no floor (negative pay is kept)."""

    def total_pay(self, *, salary: Decimal, bonus: Decimal, deductions: Decimal) -> Decimal:
        return quantize_money(salary + bonus - deductions)

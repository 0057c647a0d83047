from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import Decimal


class PayrollCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
    def total_pay(self, *, salary: Decimal, bonus: Decimal, deductions: Decimal) -> Decimal:
        raise NotImplementedError

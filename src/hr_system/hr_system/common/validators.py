from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any, Optional

from ..core.constants import MONEY_MAX, MONEY_QUANTUM
from ..core.exceptions import ValidationError


def require_non_empty(value: Optional[str], field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} không hợp lệ")
    return value.strip()


def optional_text(value: Optional[str], field_name: str, max_len: int) -> Optional[str]:
    if value is None:
        return None
    value = str(value).strip()
    if not value:
        return None
    if len(value) > max_len:
        raise ValidationError(f"{field_name} tối đa {max_len} ký tự")
    return value


def require_positive_int(value: Any, field_name: str) -> int:
    # JSON true/1.9 must not silently become employee 1.
    if isinstance(value, bool) or (isinstance(value, float) and not value.is_integer()):
        raise ValidationError(f"{field_name} không hợp lệ")
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} không hợp lệ")
    if number <= 0:
        raise ValidationError(f"{field_name} không hợp lệ")
    return number


def quantize_money(amount: Decimal) -> Decimal:
    """Round half-up to cents, the way a DECIMAL(12, 2) column stores the value."""

    return amount.quantize(Decimal(MONEY_QUANTUM), rounding=ROUND_HALF_UP)


def check_money_range(amount: Decimal, field_name: str) -> Decimal:
    if abs(amount) > Decimal(MONEY_MAX):
        raise ValidationError(f"{field_name} vượt quá giới hạn {MONEY_MAX}")
    return amount


def parse_money(value: Any, field_name: str, *, default: Optional[Decimal] = None) -> Decimal:
    """Parse a money amount into Decimal rounded to cents.

    Floats go through str() first so 0.1 stays 0.1 instead of its binary expansion.
    The result is exactly what the store will hold, so totals computed from it match.
    """

    if value is None or value == "":
        if default is None:
            raise ValidationError(f"{field_name} là bắt buộc")
        return quantize_money(default)
    if isinstance(value, bool):
        raise ValidationError(f"{field_name} không hợp lệ")
    try:
        amount = Decimal(str(value).strip())
    except InvalidOperation:
        raise ValidationError(f"{field_name} không hợp lệ")
    if not amount.is_finite():
        raise ValidationError(f"{field_name} không hợp lệ")
    return check_money_range(quantize_money(amount), field_name)

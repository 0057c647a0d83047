from __future__ import annotations

from contextlib import contextmanager
from decimal import Decimal
from typing import Any, Dict, List, Optional

import mysql.connector
from mysql.connector import errorcode

from ..core.exceptions import (
    ConflictError,
    DomainError,
    ReferentialIntegrityError,
    ValidationError,
)
from .connection import DatabaseConnection

# Rejections by the store that arrive as DatabaseError/DataError rather than IntegrityError.
_VALUE_REJECTIONS = {
    errorcode.ER_CHECK_CONSTRAINT_VIOLATED: "Vi phạm ràng buộc dữ liệu",
    errorcode.ER_WARN_DATA_OUT_OF_RANGE: "Giá trị vượt quá phạm vi cho phép",
    errorcode.ER_DATA_TOO_LONG: "Dữ liệu quá dài",
}


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    conn = conn_factory.connect()
    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except mysql.connector.Error as exc:
        conn.rollback()
        translated = translate_db_error(exc)
        if translated is None:
            raise
        raise translated from exc
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def translate_db_error(exc: mysql.connector.Error) -> Optional[DomainError]:
    """Map a constraint or value rejection onto the domain exception hierarchy.

    Returns None for anything else (lost connection, syntax error) so it propagates as is.
    """

    msg = getattr(exc, "msg", None) or str(exc)
    if exc.errno == errorcode.ER_DUP_ENTRY:
        if "uq_attendance_open" in msg:
            return ConflictError("Nhân viên đã có bản ghi chấm công đang mở trong ngày")
        if "uq_employee_email" in msg or "Email" in msg:
            return ConflictError("Email đã được sử dụng")
        return ConflictError("Dữ liệu bị trùng")
    if exc.errno in (errorcode.ER_ROW_IS_REFERENCED, errorcode.ER_ROW_IS_REFERENCED_2):
        return ReferentialIntegrityError("Nhân viên vẫn còn dữ liệu chấm công/nghỉ phép/lương liên quan")
    if exc.errno in (errorcode.ER_NO_REFERENCED_ROW, errorcode.ER_NO_REFERENCED_ROW_2):
        return ReferentialIntegrityError("Nhân viên không tồn tại")
    if exc.errno in _VALUE_REJECTIONS:
        return ValidationError(f"{_VALUE_REJECTIONS[exc.errno]}: {msg}")
    if isinstance(exc, mysql.connector.IntegrityError):
        return ConflictError(f"Vi phạm ràng buộc dữ liệu: {msg}")
    return None


def fetchone(cur) -> Optional[Dict[str, Any]]:
    row = cur.fetchone()
    return row if row else None


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return list(rows or [])


def as_decimal(value: Any) -> Optional[Decimal]:
    """DECIMAL columns come back as Decimal, but tolerate int/float/str from other drivers."""

    if value is None:
        return None
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def as_float(value: Any) -> Optional[float]:
    if value is None:
        return None
    return float(value)

from __future__ import annotations

from functools import wraps
from typing import Any, Optional

from flask import current_app, jsonify, request

from ..core.exceptions import (
    ConflictError,
    DataIntegrityError,
    DomainError,
    NotFoundError,
    ReferentialIntegrityError,
    ValidationError,
)

_STATUS_BY_ERROR = (
    (ValidationError, 400),
    (NotFoundError, 404),
    (ConflictError, 409),
    (ReferentialIntegrityError, 409),
    (DataIntegrityError, 500),
)


def status_for(exc: DomainError) -> int:
    for error_type, status in _STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return status
    return 400


def ok(data: Any = None, status: int = 200):
    return jsonify({"success": True, "data": data}), status


def fail(message: str, status: int):
    return jsonify({"success": False, "message": message}), status


def json_body() -> dict:
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValidationError("Dữ liệu gửi lên phải là JSON object")
    return data


def query_int(name: str) -> Optional[int]:
    raw = (request.args.get(name) or "").strip()
    if not raw:
        return None
    if not raw.isdigit():
        raise ValidationError(f"Tham số {name} không hợp lệ")
    return int(raw)


def json_endpoint(view):
    """Turn domain errors into JSON error responses; log anything unexpected."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        try:
            return view(*args, **kwargs)
        except DomainError as e:
            if isinstance(e, DataIntegrityError):
                current_app.logger.error("Data integrity problem: %s", e)
            return fail(str(e), status_for(e))
        except Exception:
            current_app.logger.exception("Unhandled error in %s", request.path)
            return fail("Lỗi hệ thống", 500)

    return wrapper

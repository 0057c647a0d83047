from __future__ import annotations

from flask import Flask

from ..common.datetime_utils import parse_optional_datetime
from ..common.http import json_body, json_endpoint, ok, query_int
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/attendance/clock-in", methods=["POST"], endpoint="attendance_clock_in")
    @json_endpoint
    def attendance_clock_in():
        data = json_body()
        record = container.attendance_service.clock_in(data.get("employee_id"))
        return ok(record.to_dict(), 201)

    @app.route("/api/attendance/clock-out", methods=["POST"], endpoint="attendance_clock_out")
    @json_endpoint
    def attendance_clock_out():
        data = json_body()
        clock_out_time = parse_optional_datetime(data.get("clock_out_time"), "Giờ tan ca")
        record = container.attendance_service.clock_out(data.get("employee_id"), clock_out_time)
        return ok(record.to_dict())

    @app.route("/api/attendance/register", methods=["POST"], endpoint="attendance_register")
    @json_endpoint
    def attendance_register():
        """Clock in when no clock_out_time is sent, clock out otherwise."""
        data = json_body()
        clock_out_time = parse_optional_datetime(data.get("clock_out_time"), "Giờ tan ca")
        record = container.attendance_service.register_attendance(data.get("employee_id"), clock_out_time)
        return ok(record.to_dict(), 201 if record.is_open else 200)

    @app.route("/api/attendance/<int:employee_id>", methods=["GET"], endpoint="attendance_history")
    @json_endpoint
    def attendance_history(employee_id: int):
        limit = query_int("limit") or 30
        records = container.attendance_service.list_history(employee_id, limit=limit)
        return ok([r.to_dict() for r in records])

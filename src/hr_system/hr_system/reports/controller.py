from __future__ import annotations

from flask import Flask, request

from ..common.datetime_utils import parse_optional_date
from ..common.http import json_endpoint, ok, query_int
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/reports/attendance", methods=["GET"], endpoint="reports_attendance")
    @json_endpoint
    def reports_attendance():
        report = container.report_service.attendance_report(
            employee_id=query_int("employee_id"),
            start=parse_optional_date(request.args.get("start"), "Ngày bắt đầu"),
            end=parse_optional_date(request.args.get("end"), "Ngày kết thúc"),
        )
        return ok({"rows": report.rows, "summary": report.summary})

    @app.route("/api/reports/leave-requests", methods=["GET"], endpoint="reports_leave_requests")
    @json_endpoint
    def reports_leave_requests():
        return ok(container.report_service.leave_report())

    @app.route("/api/reports/payroll", methods=["GET"], endpoint="reports_payroll")
    @json_endpoint
    def reports_payroll():
        return ok(container.report_service.payroll_report())

from __future__ import annotations

from flask import Flask

from ..common.datetime_utils import parse_optional_date
from ..common.http import json_body, json_endpoint, ok, query_int
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/payroll", methods=["GET"], endpoint="payroll_list")
    @json_endpoint
    def payroll_list():
        records = container.payroll_service.list_payroll(query_int("employee_id"))
        return ok([r.to_dict() for r in records])

    @app.route("/api/payroll", methods=["POST"], endpoint="payroll_process")
    @json_endpoint
    def payroll_process():
        data = json_body()
        record = container.payroll_service.process_payroll(
            data.get("employee_id"),
            data.get("salary"),
            data.get("bonus"),
            data.get("deductions"),
            payroll_date=parse_optional_date(data.get("payroll_date"), "Ngày trả lương"),
        )
        return ok(record.to_dict(), 201)

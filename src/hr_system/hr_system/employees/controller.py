from __future__ import annotations

from flask import Flask

from ..common.datetime_utils import parse_optional_date
from ..common.http import json_body, json_endpoint, ok, query_int
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/employees", methods=["GET"], endpoint="employees_list")
    @json_endpoint
    def employees_list():
        limit = query_int("limit") or 200
        employees = container.employee_service.list_employees(limit=limit)
        return ok([e.to_dict() for e in employees])

    @app.route("/api/employees", methods=["POST"], endpoint="employees_create")
    @json_endpoint
    def employees_create():
        data = json_body()
        employee = container.employee_service.create_employee(
            employee_id=data.get("employee_id"),
            full_name=data.get("full_name") or "",
            department=data.get("department"),
            role=data.get("role"),
            joining_date=parse_optional_date(data.get("joining_date"), "Ngày vào làm"),
            contact_number=data.get("contact_number"),
            email=data.get("email"),
        )
        return ok(employee.to_dict(), 201)

    @app.route("/api/employees/<int:employee_id>", methods=["GET"], endpoint="employees_get")
    @json_endpoint
    def employees_get(employee_id: int):
        return ok(container.employee_service.get_employee(employee_id).to_dict())

    @app.route("/api/employees/<int:employee_id>", methods=["DELETE"], endpoint="employees_delete")
    @json_endpoint
    def employees_delete(employee_id: int):
        container.employee_service.delete_employee(employee_id)
        return ok({"employee_id": employee_id})

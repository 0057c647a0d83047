from __future__ import annotations

from flask import Flask

from ..common.datetime_utils import parse_optional_date
from ..common.http import json_body, json_endpoint, ok, query_int
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/leave-requests", methods=["GET"], endpoint="leave_requests_list")
    @json_endpoint
    def leave_requests_list():
        requests = container.leave_service.list_leave_requests(query_int("employee_id"))
        return ok([r.to_dict() for r in requests])

    @app.route("/api/leave-requests", methods=["POST"], endpoint="leave_requests_create")
    @json_endpoint
    def leave_requests_create():
        data = json_body()
        # Any "status" in the payload is ignored: new requests are always Pending.
        created = container.leave_service.register_leave_request(
            data.get("employee_id"),
            parse_optional_date(data.get("start_date"), "Ngày bắt đầu"),
            parse_optional_date(data.get("end_date"), "Ngày kết thúc"),
            data.get("leave_type"),
        )
        return ok(created.to_dict(), 201)

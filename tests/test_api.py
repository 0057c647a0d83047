from __future__ import annotations


def test_health(client):
    resp = client.get("/api/health")
    assert resp.status_code == 200
    assert resp.get_json()["data"] == {"status": "ok"}


def test_create_and_list_employees(client):
    resp = client.post(
        "/api/employees",
        json={"full_name": "Alice Nguyen", "email": "alice@example.com", "joining_date": "2024-03-01"},
    )
    assert resp.status_code == 201
    assert resp.get_json()["data"]["joining_date"] == "2024-03-01"

    names = [e["full_name"] for e in client.get("/api/employees").get_json()["data"]]
    assert names == ["John Doe", "Jane Smith", "Alice Nguyen"]


def test_duplicate_email_is_409(client):
    resp = client.post("/api/employees", json={"full_name": "Copy", "email": "jane.smith@example.com"})
    assert resp.status_code == 409
    assert resp.get_json()["success"] is False


def test_missing_employee_is_404(client):
    assert client.get("/api/employees/404").status_code == 404


def test_clock_in_then_out(client):
    resp = client.post("/api/attendance/clock-in", json={"employee_id": 1})
    assert resp.status_code == 201
    clock_in = resp.get_json()["data"]["clock_in_time"]

    again = client.post("/api/attendance/clock-in", json={"employee_id": 1})
    assert again.status_code == 409

    resp = client.post("/api/attendance/clock-out", json={"employee_id": 1})
    assert resp.status_code == 200
    data = resp.get_json()["data"]
    assert data["clock_in_time"] == clock_in
    assert data["total_hours_worked"] is not None

    history = client.get("/api/attendance/1").get_json()["data"]
    assert len(history) == 1


def test_register_dispatches_on_clock_out_time(client):
    opened = client.post("/api/attendance/register", json={"employee_id": 2})
    assert opened.status_code == 201
    assert opened.get_json()["data"]["clock_out_time"] is None

    closed = client.post("/api/attendance/register", json={"employee_id": 2, "clock_out_time": "2999-01-01 00:00:00"})
    assert closed.status_code == 200
    assert closed.get_json()["data"]["clock_out_time"] == "2999-01-01 00:00:00"


def test_clock_out_without_clock_in_is_400(client):
    resp = client.post("/api/attendance/clock-out", json={"employee_id": 1})
    assert resp.status_code == 400


def test_bad_datetime_is_400(client):
    resp = client.post("/api/attendance/clock-out", json={"employee_id": 1, "clock_out_time": "tomorrow"})
    assert resp.status_code == 400


def test_leave_request_ignores_status_in_payload(client):
    resp = client.post(
        "/api/leave-requests",
        json={
            "employee_id": 1,
            "start_date": "2026-04-01",
            "end_date": "2026-04-03",
            "leave_type": "Paid",
            "status": "Approved",
        },
    )
    assert resp.status_code == 201
    assert resp.get_json()["data"]["status"] == "Pending"


def test_invalid_leave_type_is_400(client):
    resp = client.post(
        "/api/leave-requests",
        json={"employee_id": 1, "start_date": "2026-04-01", "end_date": "2026-04-03", "leave_type": "Holiday"},
    )
    assert resp.status_code == 400


def test_process_payroll_and_report(client):
    resp = client.post("/api/payroll", json={"employee_id": 1, "salary": 5000, "bonus": 500, "deductions": 100})
    assert resp.status_code == 201
    assert resp.get_json()["data"]["total_pay"] == "5400.00"

    rows = client.get("/api/reports/payroll").get_json()["data"]
    assert rows[0]["full_name"] == "John Doe"
    assert rows[0]["total_pay"] == "5400.00"


def test_delete_referenced_employee_is_409(client):
    client.post("/api/payroll", json={"employee_id": 2, "salary": 4000})
    assert client.delete("/api/employees/2").status_code == 409


def test_attendance_report_filters_by_employee(client):
    client.post("/api/attendance/clock-in", json={"employee_id": 1})
    client.post("/api/attendance/clock-in", json={"employee_id": 2})

    body = client.get("/api/reports/attendance?employee_id=2").get_json()["data"]
    assert [r["full_name"] for r in body["rows"]] == ["Jane Smith"]
    assert body["summary"][0]["open_records"] == 1


def test_non_object_body_is_400(client):
    resp = client.post("/api/payroll", json=[1, 2, 3])
    assert resp.status_code == 400


def test_boolean_employee_id_is_400(client, store):
    resp = client.post("/api/attendance/clock-in", json={"employee_id": True})
    assert resp.status_code == 400
    assert store.attendance == {}


def test_payroll_beyond_column_range_is_400(client, store):
    resp = client.post("/api/payroll", json={"employee_id": 1, "salary": "1e12"})
    assert resp.status_code == 400
    assert store.payroll == {}

"""In-memory repositories sharing one store.

They enforce the same constraints as schema.sql: unique Email, foreign keys to
Employee (both directions) and at most one open Attendance row per employee and day.
"""

from __future__ import annotations

import time as _time
from dataclasses import replace
from datetime import date, datetime
from threading import Lock
from typing import Optional

from src.hr_system.hr_system.attendance.model import AttendanceRecord
from src.hr_system.hr_system.container import Container, assemble
from src.hr_system.hr_system.core.enums import LeaveStatus, LeaveType
from src.hr_system.hr_system.core.exceptions import ConflictError, ReferentialIntegrityError
from src.hr_system.hr_system.employees.model import Employee
from src.hr_system.hr_system.leaves.model import LeaveRequest
from src.hr_system.hr_system.payroll.model import PayrollRecord
from src.hr_system.hr_system.reports.model import EmployeeAttendanceRow, LeaveRequestRow, PayrollReportRow


class InMemoryStore:
    def __init__(self, *, enforce_open_unique: bool = True, lookup_delay: float = 0.0):
        self.lock = Lock()
        self.employees: dict[int, Employee] = {}
        self.attendance: dict[int, AttendanceRecord] = {}
        self.leaves: dict[int, LeaveRequest] = {}
        self.payroll: dict[int, PayrollRecord] = {}
        self.enforce_open_unique = enforce_open_unique
        # Sleep inside open-record lookups to widen check-then-act races in tests.
        self.lookup_delay = lookup_delay
        self._ids = {"employee": 0, "attendance": 0, "leave": 0, "payroll": 0}

    def next_id(self, kind: str) -> int:
        self._ids[kind] += 1
        return self._ids[kind]

    def require_parent(self, employee_id: int) -> None:
        if employee_id not in self.employees:
            raise ReferentialIntegrityError("Nhân viên không tồn tại")

    def is_referenced(self, employee_id: int) -> bool:
        return (
            any(r.employee_id == employee_id for r in self.attendance.values())
            or any(r.employee_id == employee_id for r in self.leaves.values())
            or any(r.employee_id == employee_id for r in self.payroll.values())
        )


class InMemoryEmployees:
    def __init__(self, store: InMemoryStore):
        self._s = store

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        return self._s.employees.get(int(employee_id))

    def get_by_email(self, email: str) -> Optional[Employee]:
        return next((e for e in self._s.employees.values() if e.email == email), None)

    def create(self, *, employee_id, full_name, department, role, joining_date, contact_number, email) -> int:
        with self._s.lock:
            if email and self.get_by_email(email):
                raise ConflictError("Email đã được sử dụng")
            if employee_id is None:
                employee_id = max(self._s.employees, default=0) + 1
            if employee_id in self._s.employees:
                raise ConflictError("Dữ liệu bị trùng")
            self._s.employees[employee_id] = Employee(
                employee_id=employee_id,
                full_name=full_name,
                department=department,
                role=role,
                joining_date=joining_date,
                contact_number=contact_number,
                email=email,
            )
            return employee_id

    def list_all(self, *, limit: int = 200):
        return [self._s.employees[k] for k in sorted(self._s.employees)][:limit]

    def delete_by_id(self, employee_id: int) -> bool:
        with self._s.lock:
            if employee_id not in self._s.employees:
                return False
            if self._s.is_referenced(employee_id):
                raise ReferentialIntegrityError("Nhân viên vẫn còn dữ liệu chấm công/nghỉ phép/lương liên quan")
            del self._s.employees[employee_id]
            return True


class InMemoryAttendance:
    def __init__(self, store: InMemoryStore):
        self._s = store
        self.inserts = 0

    def get_by_id(self, attendance_id: int) -> Optional[AttendanceRecord]:
        return self._s.attendance.get(int(attendance_id))

    def list_for_employee_and_date(self, employee_id: int, attendance_date: date):
        return [
            r for r in self._s.attendance.values()
            if r.employee_id == employee_id and r.attendance_date == attendance_date
        ]

    def list_open_for_employee_and_date(self, employee_id: int, attendance_date: date):
        found = [r for r in self.list_for_employee_and_date(employee_id, attendance_date) if r.is_open]
        if self._s.lookup_delay:
            _time.sleep(self._s.lookup_delay)
        return found

    def create_clock_in(self, *, employee_id: int, attendance_date: date, clock_in_time: datetime) -> int:
        with self._s.lock:
            self._s.require_parent(employee_id)
            if self._s.enforce_open_unique and any(
                r.is_open for r in self.list_for_employee_and_date(employee_id, attendance_date)
            ):
                raise ConflictError("Nhân viên đã có bản ghi chấm công đang mở trong ngày")
            attendance_id = self._s.next_id("attendance")
            self._s.attendance[attendance_id] = AttendanceRecord(
                attendance_id=attendance_id,
                employee_id=employee_id,
                attendance_date=attendance_date,
                clock_in_time=clock_in_time,
            )
            self.inserts += 1
            return attendance_id

    def set_clock_out(self, *, attendance_id: int, clock_out_time: datetime, total_hours_worked: float) -> bool:
        with self._s.lock:
            record = self._s.attendance.get(attendance_id)
            if not record or not record.is_open:
                return False
            self._s.attendance[attendance_id] = replace(
                record, clock_out_time=clock_out_time, total_hours_worked=total_hours_worked
            )
            return True

    def list_for_employee(self, employee_id: int, *, limit: int):
        items = [r for r in self._s.attendance.values() if r.employee_id == employee_id]
        items.sort(key=lambda r: r.clock_in_time, reverse=True)
        return items[:limit]


class InMemoryLeaves:
    def __init__(self, store: InMemoryStore):
        self._s = store

    def create(self, *, employee_id: int, leave_start_date: date, leave_end_date: date, leave_type: LeaveType) -> int:
        with self._s.lock:
            self._s.require_parent(employee_id)
            rid = self._s.next_id("leave")
            self._s.leaves[rid] = LeaveRequest(
                leave_request_id=rid,
                employee_id=employee_id,
                leave_start_date=leave_start_date,
                leave_end_date=leave_end_date,
                leave_type=leave_type,
                status=LeaveStatus.PENDING,
            )
            return rid

    def get_by_id(self, leave_request_id: int) -> Optional[LeaveRequest]:
        return self._s.leaves.get(int(leave_request_id))

    def list_for_employee(self, *, employee_id: Optional[int] = None, limit: int = 200):
        items = [r for r in self._s.leaves.values() if employee_id is None or r.employee_id == employee_id]
        items.sort(key=lambda r: r.leave_request_id, reverse=True)
        return items[:limit]


class InMemoryPayroll:
    def __init__(self, store: InMemoryStore):
        self._s = store

    def create(self, *, employee_id, salary, bonus, deductions, total_pay, payroll_date) -> int:
        with self._s.lock:
            self._s.require_parent(employee_id)
            pid = self._s.next_id("payroll")
            self._s.payroll[pid] = PayrollRecord(
                payroll_id=pid,
                employee_id=employee_id,
                salary=salary,
                bonus=bonus,
                deductions=deductions,
                total_pay=total_pay,
                payroll_date=payroll_date,
            )
            return pid

    def get_by_id(self, payroll_id: int) -> Optional[PayrollRecord]:
        return self._s.payroll.get(int(payroll_id))

    def list_for_employee(self, *, employee_id: Optional[int] = None, limit: int = 200):
        items = [r for r in self._s.payroll.values() if employee_id is None or r.employee_id == employee_id]
        items.sort(key=lambda r: r.payroll_id, reverse=True)
        return items[:limit]


class InMemoryReports:
    """Joins the store the way the three SQL views do."""

    def __init__(self, store: InMemoryStore):
        self._s = store

    def employee_attendance(self, *, employee_id=None, start_date=None, end_date=None):
        rows = []
        for a in self._s.attendance.values():
            e = self._s.employees.get(a.employee_id)
            if not e:
                continue
            if employee_id is not None and a.employee_id != employee_id:
                continue
            if start_date is not None and a.attendance_date < start_date:
                continue
            if end_date is not None and a.attendance_date > end_date:
                continue
            rows.append(
                EmployeeAttendanceRow(
                    employee_id=e.employee_id,
                    full_name=e.full_name,
                    attendance_date=a.attendance_date,
                    clock_in_time=a.clock_in_time,
                    clock_out_time=a.clock_out_time,
                    total_hours_worked=a.total_hours_worked,
                )
            )
        return rows

    def leave_requests(self):
        return [
            LeaveRequestRow(
                full_name=self._s.employees[r.employee_id].full_name,
                leave_start_date=r.leave_start_date,
                leave_end_date=r.leave_end_date,
                leave_type=r.leave_type.value,
                status=r.status.value,
            )
            for r in self._s.leaves.values()
        ]

    def payroll_report(self):
        return [
            PayrollReportRow(
                full_name=self._s.employees[p.employee_id].full_name,
                salary=p.salary,
                bonus=p.bonus,
                deductions=p.deductions,
                total_pay=p.total_pay,
            )
            for p in self._s.payroll.values()
        ]


def build_in_memory_container(store: InMemoryStore) -> Container:
    return assemble(
        employees_repo=InMemoryEmployees(store),
        attendance_repo=InMemoryAttendance(store),
        leaves_repo=InMemoryLeaves(store),
        payroll_repo=InMemoryPayroll(store),
        reports_repo=InMemoryReports(store),
    )


def add_employee(store: InMemoryStore, employee_id: int, full_name: str, email: Optional[str] = None) -> Employee:
    employee = Employee(employee_id=employee_id, full_name=full_name, email=email)
    store.employees[employee_id] = employee
    return employee

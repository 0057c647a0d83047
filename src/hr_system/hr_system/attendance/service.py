from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Sequence

from ..common.datetime_utils import now_local
from ..common.locks import KeyedLock
from ..common.validators import require_positive_int
from ..core.constants import DEFAULT_HISTORY_LIMIT
from ..core.exceptions import ConflictError, DataIntegrityError, NotFoundError, ValidationError
from ..employees.repository import EmployeeRepository
from .hours import hours_between
from .model import AttendanceRecord
from .repository import AttendanceRepository


class AttendanceService:
    """Clock-in / clock-out use cases.

    The open-record lookup and the write that follows run under a per-employee
    lock, so two requests from the same process cannot both see "no open record".
    Across processes the uq_attendance_open key in the store does the same job and
    surfaces as ConflictError.
    """

    def __init__(
        self,
        attendance: AttendanceRepository,
        employees: EmployeeRepository,
        *,
        locks: KeyedLock | None = None,
    ):
        self._attendance = attendance
        self._employees = employees
        self._locks = locks or KeyedLock()

    def _require_employee(self, employee_id: int) -> int:
        employee_id = require_positive_int(employee_id, "Mã nhân viên")
        if not self._employees.get_by_id(employee_id):
            raise NotFoundError("Nhân viên không tồn tại")
        return employee_id

    def _single_open_record(self, employee_id: int, today: date) -> Optional[AttendanceRecord]:
        records = list(self._attendance.list_open_for_employee_and_date(employee_id, today))
        if len(records) > 1:
            raise DataIntegrityError(
                f"Nhân viên {employee_id} có {len(records)} bản ghi chấm công đang mở ngày {today.isoformat()}"
            )
        return records[0] if records else None

    def clock_in(self, employee_id: int, *, now: datetime | None = None) -> AttendanceRecord:
        now = now or now_local()
        today = now.date()
        employee_id = self._require_employee(employee_id)

        with self._locks.hold(employee_id):
            if self._single_open_record(employee_id, today):
                raise ConflictError("Nhân viên đã chấm công vào ca hôm nay và chưa tan ca")
            attendance_id = self._attendance.create_clock_in(
                employee_id=employee_id,
                attendance_date=today,
                clock_in_time=now,
            )

        record = self._attendance.get_by_id(attendance_id)
        if not record:
            raise DataIntegrityError("Không đọc lại được bản ghi chấm công vừa tạo")
        return record

    def clock_out(
        self,
        employee_id: int,
        clock_out_time: datetime | None = None,
        *,
        now: datetime | None = None,
    ) -> AttendanceRecord:
        now = now or now_local()
        clock_out_time = clock_out_time or now
        employee_id = self._require_employee(employee_id)

        with self._locks.hold(employee_id):
            record = self._single_open_record(employee_id, now.date())
            if not record:
                raise ValidationError("Nhân viên chưa chấm công vào ca hôm nay")
            if clock_out_time < record.clock_in_time:
                raise ValidationError("Giờ ra không thể nhỏ hơn giờ vào")

            ok = self._attendance.set_clock_out(
                attendance_id=record.attendance_id,
                clock_out_time=clock_out_time,
                total_hours_worked=hours_between(record.clock_in_time, clock_out_time),
            )
            if not ok:
                raise ConflictError("Bản ghi chấm công đã được tan ca")

        updated = self._attendance.get_by_id(record.attendance_id)
        if not updated:
            raise DataIntegrityError("Không đọc lại được bản ghi chấm công vừa cập nhật")
        return updated

    def register_attendance(
        self,
        employee_id: int,
        clock_out_time: datetime | None = None,
        *,
        now: datetime | None = None,
    ) -> AttendanceRecord:
        """Single entry point kept for callers of the old RegisterAttendance procedure.

        The caller's intent decides the branch: no clock-out time means clock-in,
        a clock-out time means clock-out. Each branch checks its own precondition,
        so a stray clock-in never overwrites an open record's clock-out.
        """

        if clock_out_time is None:
            return self.clock_in(employee_id, now=now)
        return self.clock_out(employee_id, clock_out_time, now=now)

    def list_history(self, employee_id: int, *, limit: int = DEFAULT_HISTORY_LIMIT) -> Sequence[AttendanceRecord]:
        employee_id = self._require_employee(employee_id)
        return self._attendance.list_for_employee(employee_id, limit=int(limit))

    def has_attendance_on(self, employee_id: int, day: date | None = None) -> bool:
        day = day or now_local().date()
        return bool(self._attendance.list_for_employee_and_date(int(employee_id), day))

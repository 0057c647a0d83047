from __future__ import annotations

from datetime import date, datetime, timedelta

import pytest

from src.hr_system.hr_system.attendance.model import AttendanceRecord
from src.hr_system.hr_system.core.exceptions import (
    ConflictError,
    DataIntegrityError,
    NotFoundError,
    ValidationError,
)


def test_clock_in_creates_one_open_record_dated_today(container, store, fixed_now):
    record = container.attendance_service.clock_in(1, now=fixed_now)

    assert len(store.attendance) == 1
    assert record.is_open
    assert record.attendance_date == fixed_now.date()
    assert record.clock_in_time == fixed_now
    assert record.total_hours_worked is None


def test_clock_out_sets_time_and_hours_without_new_record(container, store, fixed_now):
    container.attendance_service.clock_in(1, now=fixed_now)
    out_at = fixed_now + timedelta(hours=8, minutes=45)

    record = container.attendance_service.clock_out(1, out_at, now=out_at)

    assert len(store.attendance) == 1
    assert record.clock_out_time == out_at
    assert record.total_hours_worked == pytest.approx(8.75)


def test_hours_match_clock_difference_for_every_closed_record(container, store, fixed_now):
    svc = container.attendance_service
    for employee_id, minutes in ((1, 481), (2, 17)):
        svc.clock_in(employee_id, now=fixed_now)
        out_at = fixed_now + timedelta(minutes=minutes)
        svc.clock_out(employee_id, out_at, now=out_at)

    for r in store.attendance.values():
        expected = (r.clock_out_time - r.clock_in_time).total_seconds() / 3600
        assert r.total_hours_worked == pytest.approx(expected, abs=1e-4)


def test_clock_in_twice_is_rejected(container, store, fixed_now):
    container.attendance_service.clock_in(1, now=fixed_now)

    with pytest.raises(ConflictError):
        container.attendance_service.clock_in(1, now=fixed_now + timedelta(minutes=5))

    assert len(store.attendance) == 1


def test_clock_in_again_after_clock_out_same_day(container, store, fixed_now):
    svc = container.attendance_service
    svc.clock_in(1, now=fixed_now)
    svc.clock_out(1, now=fixed_now + timedelta(hours=4))

    second = svc.clock_in(1, now=fixed_now + timedelta(hours=5))

    assert second.is_open
    assert len(store.attendance) == 2


def test_clock_out_without_open_record_fails(container, fixed_now):
    with pytest.raises(ValidationError):
        container.attendance_service.clock_out(1, now=fixed_now)


def test_open_record_from_yesterday_does_not_count_today(container, fixed_now):
    svc = container.attendance_service
    svc.clock_in(1, now=fixed_now - timedelta(days=1))

    with pytest.raises(ValidationError):
        svc.clock_out(1, now=fixed_now)

    assert svc.clock_in(1, now=fixed_now).attendance_date == fixed_now.date()


def test_clock_out_before_clock_in_is_rejected(container, store, fixed_now):
    container.attendance_service.clock_in(1, now=fixed_now)

    with pytest.raises(ValidationError):
        container.attendance_service.clock_out(1, fixed_now - timedelta(minutes=1), now=fixed_now)

    assert next(iter(store.attendance.values())).is_open


def test_unknown_employee_is_rejected(container, store, fixed_now):
    with pytest.raises(NotFoundError):
        container.attendance_service.clock_in(99, now=fixed_now)
    assert store.attendance == {}


def test_two_open_records_is_a_data_integrity_error(container, store, fixed_now):
    for attendance_id in (1, 2):
        store.attendance[attendance_id] = AttendanceRecord(
            attendance_id=attendance_id,
            employee_id=1,
            attendance_date=fixed_now.date(),
            clock_in_time=fixed_now,
        )

    with pytest.raises(DataIntegrityError):
        container.attendance_service.clock_out(1, now=fixed_now + timedelta(hours=1))


def test_register_without_clock_out_time_clocks_in(container, fixed_now):
    record = container.attendance_service.register_attendance(1, None, now=fixed_now)
    assert record.is_open


def test_register_with_clock_out_time_clocks_out(container, fixed_now):
    svc = container.attendance_service
    svc.register_attendance(1, now=fixed_now)

    out_at = datetime(2026, 2, 2, 17, 30)
    record = svc.register_attendance(1, out_at, now=out_at)

    assert record.clock_out_time == out_at
    assert record.total_hours_worked == pytest.approx(9.0)


def test_register_clock_in_never_touches_an_open_record(container, store, fixed_now):
    svc = container.attendance_service
    svc.register_attendance(1, now=fixed_now)

    with pytest.raises(ConflictError):
        svc.register_attendance(1, None, now=fixed_now + timedelta(hours=2))

    only = next(iter(store.attendance.values()))
    assert only.is_open
    assert only.clock_in_time == fixed_now


def test_history_is_newest_first(container, fixed_now):
    svc = container.attendance_service
    for days_ago in (2, 1, 0):
        day = fixed_now - timedelta(days=days_ago)
        svc.clock_in(1, now=day)
        svc.clock_out(1, now=day + timedelta(hours=1))

    history = svc.list_history(1, limit=2)

    assert [r.attendance_date for r in history] == [date(2026, 2, 2), date(2026, 2, 1)]

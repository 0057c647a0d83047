from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..core.exceptions import ValidationError
from .repository import ReportRepository


def _money(value) -> Optional[str]:
    return str(value) if value is not None else None


@dataclass(frozen=True)
class ReportData:
    rows: list[dict]
    summary: list[dict]


class ReportService:
    def __init__(self, reports: ReportRepository):
        self._reports = reports

    def attendance_report(
        self,
        *,
        employee_id: Optional[int] = None,
        start: Optional[date] = None,
        end: Optional[date] = None,
    ) -> ReportData:
        if start and end and end < start:
            raise ValidationError("Ngày kết thúc phải >= ngày bắt đầu")

        query_rows = self._reports.employee_attendance(employee_id=employee_id, start_date=start, end_date=end)

        summary_map: dict[int, dict] = {}
        out_rows: list[dict] = []

        for r in query_rows:
            out_rows.append(
                {
                    "employee_id": r.employee_id,
                    "full_name": r.full_name,
                    "attendance_date": r.attendance_date.strftime("%Y-%m-%d"),
                    "clock_in_time": r.clock_in_time.strftime("%Y-%m-%d %H:%M:%S"),
                    "clock_out_time": r.clock_out_time.strftime("%Y-%m-%d %H:%M:%S") if r.clock_out_time else None,
                    "total_hours_worked": r.total_hours_worked,
                }
            )

            s = summary_map.get(r.employee_id)
            if not s:
                s = {
                    "employee_id": r.employee_id,
                    "full_name": r.full_name,
                    "days": set(),
                    "total_hours": 0.0,
                    "open_records": 0,
                }
                summary_map[r.employee_id] = s
            s["days"].add(r.attendance_date)
            if r.total_hours_worked is None:
                s["open_records"] += 1
            else:
                s["total_hours"] += r.total_hours_worked

        summary = [
            {
                "employee_id": s["employee_id"],
                "full_name": s["full_name"],
                "days_present": len(s["days"]),
                "total_hours": round(s["total_hours"], 2),
                "open_records": s["open_records"],
            }
            for s in summary_map.values()
        ]
        summary.sort(key=lambda x: x["total_hours"], reverse=True)
        return ReportData(rows=out_rows, summary=summary)

    def leave_report(self) -> list[dict]:
        return [
            {
                "full_name": r.full_name,
                "leave_start_date": r.leave_start_date.strftime("%Y-%m-%d") if r.leave_start_date else None,
                "leave_end_date": r.leave_end_date.strftime("%Y-%m-%d") if r.leave_end_date else None,
                "leave_type": r.leave_type,
                "status": r.status,
            }
            for r in self._reports.leave_requests()
        ]

    def payroll_report(self) -> list[dict]:
        return [
            {
                "full_name": r.full_name,
                "salary": _money(r.salary),
                "bonus": _money(r.bonus),
                "deductions": _money(r.deductions),
                "total_pay": _money(r.total_pay),
            }
            for r in self._reports.payroll_report()
        ]

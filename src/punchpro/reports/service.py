from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

from ..attendance.model import AttendanceSummary
from ..attendance.service import AttendanceService
from ..common.datetime_utils import month_bounds
from ..users.repository import EmployeeRepository


def hours_text(total_hours: float) -> str:
    # "8.50" -> "8.5", "8.00" -> "8"
    number = f"{total_hours:.2f}".rstrip("0").rstrip(".")
    return f"{number} {'hr' if total_hours == 1 else 'hrs'}"


def attendance_rate(summary: Optional[AttendanceSummary]) -> str:
    if not summary or summary.total_days == 0:
        return "0%"
    rate = Decimal(summary.present / summary.total_days * 100)
    # halves round up: 12.5 -> 13
    return f"{int(rate.quantize(Decimal(1), rounding=ROUND_HALF_UP))}%"


@dataclass(frozen=True)
class MonthlyReport:
    employee_id: int
    month: str
    start: date
    end: date
    summary: Optional[AttendanceSummary]
    rows: list[dict]

    def to_dict(self) -> dict:
        total_hours = self.summary.total_hours if self.summary else 0
        return {
            "employee_id": self.employee_id,
            "month": self.month,
            "start": self.start.isoformat(),
            "end": self.end.isoformat(),
            "summary": self.summary.to_dict() if self.summary else None,
            "attendance_rate": attendance_rate(self.summary),
            "hours": hours_text(total_hours),
            "rows": self.rows,
        }


class ReportService:
    def __init__(self, attendance: AttendanceService, employees: EmployeeRepository):
        self._attendance = attendance
        self._employees = employees

    def monthly_attendance(self, employee_id: int, month: date) -> MonthlyReport:
        start, end = month_bounds(month)
        summaries = self._attendance.get_attendance_summary(start, end, employee_id)

        rows = []
        for r in reversed(self._attendance.get_employee_attendance(employee_id)):
            if not start <= r.work_date <= end:
                continue
            rows.append(
                {
                    "date": r.work_date.isoformat(),
                    "clock_in": r.clock_in_time.strftime("%H:%M") if r.clock_in_time else "-",
                    "clock_out": r.clock_out_time.strftime("%H:%M") if r.clock_out_time else "-",
                    "total_hours": r.total_hours if r.total_hours is not None else 0,
                    "status": r.status.value,
                }
            )

        return MonthlyReport(
            employee_id=employee_id,
            month=start.strftime("%B %Y"),
            start=start,
            end=end,
            summary=summaries[0] if summaries else None,
            rows=rows,
        )

    def team_attendance(self, start: date, end: date, *, department: Optional[str] = None) -> list[dict]:
        """Per-employee summary rows for the admin report, most hours first."""

        employees = {e.user_id: e for e in self._employees.list_employees()}
        out = []
        for s in self._attendance.get_attendance_summary(start, end):
            emp = employees.get(s.employee_id)
            if not emp:
                continue
            if department and emp.department != department:
                continue
            row = s.to_dict()
            row.update(
                {
                    "name": emp.name,
                    "department": emp.department or "-",
                    "attendance_rate": attendance_rate(s),
                }
            )
            out.append(row)

        out.sort(key=lambda x: x["total_hours"], reverse=True)
        return out

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..core.enums import PayrollStatus


@dataclass(frozen=True)
class PayBreakdown:
    """Calculator output. Money fields are rounded to cents."""

    base_salary: float
    daily_rate: float
    overtime_hours: float
    overtime_pay: float
    bonuses: float
    deductions: float
    taxes: float
    net_salary: float


@dataclass(frozen=True)
class PayrollAttendance:
    """Attendance figures a payroll item was computed from."""

    working_days: int
    present_days: int
    absent_days: int
    late_days: int
    half_days: int
    total_hours: float

    def to_dict(self) -> dict:
        return {
            "working_days": self.working_days,
            "present_days": self.present_days,
            "absent_days": self.absent_days,
            "late_days": self.late_days,
            "half_days": self.half_days,
            "total_hours": self.total_hours,
        }


@dataclass(frozen=True)
class PayrollItem:
    payroll_id: str
    employee_id: int
    employee_name: str
    period: str
    base_salary: float
    overtime_pay: float
    bonuses: float
    deductions: float
    taxes: float
    net_salary: float
    status: PayrollStatus
    created_at: date
    attendance: PayrollAttendance
    paid_at: Optional[date] = None

    @property
    def gross_salary(self) -> float:
        return self.base_salary + self.overtime_pay + self.bonuses

    def to_dict(self) -> dict:
        return {
            "id": self.payroll_id,
            "employee_id": self.employee_id,
            "employee_name": self.employee_name,
            "period": self.period,
            "base_salary": self.base_salary,
            "overtime_pay": self.overtime_pay,
            "bonuses": self.bonuses,
            "deductions": self.deductions,
            "taxes": self.taxes,
            "net_salary": self.net_salary,
            "status": self.status.value,
            "created_at": self.created_at.isoformat(),
            "paid_at": self.paid_at.isoformat() if self.paid_at else None,
            "attendance_summary": self.attendance.to_dict(),
        }


@dataclass(frozen=True)
class PayrollPeriodSummary:
    """Totals shown above a period's payroll list."""

    period: str
    employee_count: int
    total_base_salary: float
    total_overtime_pay: float
    total_bonuses: float
    total_deductions: float
    total_taxes: float
    total_net_salary: float
    status_counts: dict

    def to_dict(self) -> dict:
        return {
            "period": self.period,
            "employee_count": self.employee_count,
            "total_base_salary": self.total_base_salary,
            "total_overtime_pay": self.total_overtime_pay,
            "total_bonuses": self.total_bonuses,
            "total_deductions": self.total_deductions,
            "total_taxes": self.total_taxes,
            "total_net_salary": self.total_net_salary,
            "status_counts": dict(self.status_counts),
        }

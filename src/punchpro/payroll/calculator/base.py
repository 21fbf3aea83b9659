from __future__ import annotations

from abc import ABC, abstractmethod

from ...attendance.model import AttendanceSummary
from ...core.constants import HOURS_PER_DAY
from ..model import PayBreakdown


class PayrollCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    working_days: int

    @abstractmethod
    def calculate(self, *, annual_salary: float, summary: AttendanceSummary, bonus: float = 0.0) -> PayBreakdown:
        raise NotImplementedError

    def full_attendance(self, employee_id: int) -> AttendanceSummary:
        """Assumed summary for a month without attendance data."""
        return AttendanceSummary(
            employee_id=employee_id,
            total_days=self.working_days,
            present=self.working_days,
            absent=0,
            late=0,
            half_day=0,
            total_hours=float(self.working_days * HOURS_PER_DAY),
        )

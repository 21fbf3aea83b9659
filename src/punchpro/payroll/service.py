from __future__ import annotations

import logging
from datetime import date
from typing import Callable, Optional, Sequence

from ..attendance.service import AttendanceService
from ..common.datetime_utils import format_period, now_local, parse_period
from ..common.money import round2
from ..core.enums import PayrollStatus
from ..core.exceptions import NotFoundError, ValidationError
from ..users.model import Employee
from ..users.repository import EmployeeRepository
from .calculator.base import PayrollCalculator
from .calculator.standard_calculator import StandardPayrollCalculator
from .model import PayrollAttendance, PayrollItem, PayrollPeriodSummary
from .repository import PayrollRepository

logger = logging.getLogger(__name__)


def normalize_period(period: str) -> str:
    """Validate "MM-YYYY" and zero-pad the month."""
    start, _ = parse_period(period)
    return format_period(start)


class PayrollService:
    def __init__(
        self,
        payroll: PayrollRepository,
        employees: EmployeeRepository,
        attendance: AttendanceService,
        *,
        calculator: Optional[PayrollCalculator] = None,
        today: Callable[[], date] = lambda: now_local().date(),
    ):
        self._payroll = payroll
        self._employees = employees
        self._attendance = attendance
        self._calculator = calculator or StandardPayrollCalculator()
        self._today = today

    def get_all(self) -> Sequence[PayrollItem]:
        return self._payroll.list_all()

    def get_employee_payroll(self, employee_id: int) -> Sequence[PayrollItem]:
        return self._payroll.list_for_employee(employee_id)

    def get_by_period(self, period: str) -> Sequence[PayrollItem]:
        return self._payroll.list_for_period(normalize_period(period))

    def get_item(self, payroll_id: str) -> PayrollItem:
        item = self._payroll.get_by_id(payroll_id)
        if not item:
            raise NotFoundError("Payroll item not found")
        return item

    def _build_item(self, employee: Employee, period: str, start: date, end: date) -> PayrollItem:
        summaries = self._attendance.get_attendance_summary(start, end, employee.user_id)
        summary = summaries[0] if summaries else self._calculator.full_attendance(employee.user_id)

        # newly generated payroll carries no bonus
        pay = self._calculator.calculate(annual_salary=employee.salary, summary=summary, bonus=0.0)

        return PayrollItem(
            payroll_id=f"{period}-{employee.user_id}",
            employee_id=employee.user_id,
            employee_name=employee.name,
            period=period,
            base_salary=pay.base_salary,
            overtime_pay=pay.overtime_pay,
            bonuses=pay.bonuses,
            deductions=pay.deductions,
            taxes=pay.taxes,
            net_salary=pay.net_salary,
            status=PayrollStatus.PENDING,
            created_at=self._today(),
            paid_at=None,
            attendance=PayrollAttendance(
                working_days=self._calculator.working_days,
                present_days=summary.present,
                absent_days=summary.absent,
                late_days=summary.late,
                half_days=summary.half_day,
                total_hours=summary.total_hours,
            ),
        )

    def generate_payroll(self, period: str, employee_ids: Optional[Sequence[int]] = None) -> list[PayrollItem]:
        """Create pending items for ``period``; employees that already have one are skipped."""

        period = normalize_period(period)
        start, end = parse_period(period)

        employees = self._employees.list_employees()
        if employee_ids is not None:
            wanted = {int(e) for e in employee_ids}
            missing = wanted - {e.user_id for e in employees}
            if missing:
                raise NotFoundError(f"Employee not found: {', '.join(str(m) for m in sorted(missing))}")
            employees = [e for e in employees if e.user_id in wanted]

        created: list[PayrollItem] = []
        for employee in employees:
            if self._payroll.find(employee_id=employee.user_id, period=period):
                continue

            item = self._build_item(employee, period, start, end)
            self._payroll.add(item)
            created.append(item)

        logger.info("Generated %d payroll item(s) for %s", len(created), period)
        return created

    def update_status(self, payroll_id: str, status: PayrollStatus | str) -> PayrollItem:
        try:
            status = PayrollStatus(status)
        except ValueError:
            raise ValidationError(f"Invalid payroll status: {status!r}") from None

        item = self.get_item(payroll_id)
        if status == item.status:
            return item
        if status.rank < item.status.rank:
            raise ValidationError(f"Cannot move payroll from {item.status.value} back to {status.value}")

        paid_at = self._today() if status == PayrollStatus.PAID else item.paid_at
        if not self._payroll.update_status(payroll_id, status=status, paid_at=paid_at):
            raise NotFoundError("Payroll item not found")

        logger.info("Payroll %s: %s -> %s", payroll_id, item.status.value, status.value)
        return self.get_item(payroll_id)

    def summarize_period(self, period: str) -> PayrollPeriodSummary:
        period = normalize_period(period)
        items = self._payroll.list_for_period(period)

        counts = {s.value: 0 for s in PayrollStatus}
        for i in items:
            counts[i.status.value] += 1

        return PayrollPeriodSummary(
            period=period,
            employee_count=len(items),
            total_base_salary=round2(sum(i.base_salary for i in items)),
            total_overtime_pay=round2(sum(i.overtime_pay for i in items)),
            total_bonuses=round2(sum(i.bonuses for i in items)),
            total_deductions=round2(sum(i.deductions for i in items)),
            total_taxes=round2(sum(i.taxes for i in items)),
            total_net_salary=round2(sum(i.net_salary for i in items)),
            status_counts=counts,
        )

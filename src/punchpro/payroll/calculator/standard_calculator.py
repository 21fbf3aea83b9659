from __future__ import annotations

from ...attendance.model import AttendanceSummary
from ...common.money import round2
from ...core.constants import (
    HOURS_PER_DAY,
    LATE_PENALTY_RATE,
    OVERTIME_MULTIPLIER,
    TAX_RATE,
    WORKING_DAYS_PER_MONTH,
)
from ..model import PayBreakdown
from .base import PayrollCalculator


class StandardPayrollCalculator(PayrollCalculator):
    """Standard monthly rule.

    monthly = annual / 12, daily = monthly / working_days
    deductions = absent * daily + half_day * daily / 2 + late * daily * 10%
    overtime = max(0, hours - working_days * 8) * daily / 8 * 1.5
    taxes = (monthly + overtime + bonus) * 20%
    net = monthly + overtime + bonus - deductions - taxes

    Net is computed from the unrounded terms and rounded last; each reported
    term is rounded on its own, so the rounded terms may not sum to net by a cent.
    """

    def __init__(
        self,
        *,
        working_days: int = WORKING_DAYS_PER_MONTH,
        hours_per_day: int = HOURS_PER_DAY,
        late_penalty_rate: float = LATE_PENALTY_RATE,
        overtime_multiplier: float = OVERTIME_MULTIPLIER,
        tax_rate: float = TAX_RATE,
    ):
        self.working_days = int(working_days)
        self.hours_per_day = hours_per_day
        self.late_penalty_rate = late_penalty_rate
        self.overtime_multiplier = overtime_multiplier
        self.tax_rate = tax_rate

    def calculate(self, *, annual_salary: float, summary: AttendanceSummary, bonus: float = 0.0) -> PayBreakdown:
        monthly_salary = annual_salary / 12
        daily_rate = monthly_salary / self.working_days

        absent_deduction = summary.absent * daily_rate
        half_day_deduction = summary.half_day * (daily_rate / 2)
        late_deduction = summary.late * (daily_rate * self.late_penalty_rate)

        regular_hours = self.working_days * self.hours_per_day
        overtime_hours = max(0.0, summary.total_hours - regular_hours)
        overtime_rate = daily_rate / self.hours_per_day * self.overtime_multiplier
        overtime_pay = overtime_hours * overtime_rate

        taxable_income = monthly_salary + overtime_pay + bonus
        taxes = taxable_income * self.tax_rate

        total_deductions = absent_deduction + half_day_deduction + late_deduction
        net_salary = monthly_salary + overtime_pay + bonus - total_deductions - taxes

        return PayBreakdown(
            base_salary=round2(monthly_salary),
            daily_rate=round2(daily_rate),
            overtime_hours=round2(overtime_hours),
            overtime_pay=round2(overtime_pay),
            bonuses=round2(bonus),
            deductions=round2(total_deductions),
            taxes=round2(taxes),
            net_salary=round2(net_salary),
        )

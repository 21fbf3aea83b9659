import pytest

from punchpro.attendance.model import AttendanceSummary
from punchpro.common.money import round2
from punchpro.payroll.calculator.standard_calculator import StandardPayrollCalculator


def _summary(*, present=20, absent=0, late=0, half_day=0, total_hours=160.0) -> AttendanceSummary:
    return AttendanceSummary(
        employee_id=1,
        total_days=present + absent + late + half_day,
        present=present,
        absent=absent,
        late=late,
        half_day=half_day,
        total_hours=total_hours,
    )


def test_absences_are_deducted_at_daily_rate():
    pay = StandardPayrollCalculator().calculate(annual_salary=75000, summary=_summary(absent=2))

    assert pay.base_salary == 6250.00
    assert pay.daily_rate == 284.09
    assert pay.deductions == 568.18
    assert pay.overtime_pay == 0.0
    # taxed on gross, before attendance deductions
    assert pay.taxes == 1250.00
    assert pay.net_salary == 4431.82


def test_overtime_late_and_half_days():
    summary = _summary(present=17, late=1, half_day=2, total_hours=180.0)
    pay = StandardPayrollCalculator().calculate(annual_salary=66000, summary=summary)

    # daily 250, hourly 31.25, overtime 4h at 1.5x
    assert pay.overtime_hours == 4.0
    assert pay.overtime_pay == 187.50
    assert pay.deductions == 275.00
    assert pay.taxes == 1137.50
    assert pay.net_salary == pytest.approx(4275.00)


def test_bonus_is_taxed():
    pay = StandardPayrollCalculator().calculate(annual_salary=60000, summary=_summary(total_hours=176.0), bonus=500)

    assert pay.bonuses == 500.0
    assert pay.taxes == 1100.00
    assert pay.net_salary == 4400.00


def test_net_is_rounded_from_unrounded_terms():
    pay = StandardPayrollCalculator().calculate(annual_salary=75000, summary=_summary(absent=1, late=1, half_day=1))

    raw_daily = 75000 / 12 / 22
    raw_net = 6250 - (raw_daily + raw_daily / 2 + raw_daily * 0.1) - 1250
    assert pay.net_salary == round2(raw_net)
    assert pay.net_salary == pytest.approx(
        pay.base_salary + pay.overtime_pay + pay.bonuses - pay.deductions - pay.taxes, abs=0.011
    )


def test_full_attendance_defaults():
    calc = StandardPayrollCalculator()
    summary = calc.full_attendance(7)

    assert summary.present == 22
    assert summary.total_hours == 176.0
    pay = calc.calculate(annual_salary=75000, summary=summary)
    assert pay.deductions == 0.0
    assert pay.net_salary == 5000.00


def test_round2_matches_fixed_point_formatting():
    # 2.675 is stored as 2.67499999...
    assert round2(2.675) == 2.67
    assert round2(1.125) == 1.13
    assert round2(0) == 0.0

from __future__ import annotations

from datetime import date

import pytest

from punchpro.attendance.model import AttendanceSummary
from punchpro.core.enums import PayrollStatus
from punchpro.core.exceptions import NotFoundError, ValidationError
from punchpro.payroll.memory_payroll_repository import InMemoryPayrollRepository
from punchpro.payroll.service import PayrollService
from punchpro.users.memory_user_repository import InMemoryUserRepository


class FakeAttendance:
    def __init__(self, summaries: dict[int, AttendanceSummary]):
        self._summaries = summaries
        self.calls = []

    def get_attendance_summary(self, start, end, employee_id=None):
        self.calls.append((start, end, employee_id))
        s = self._summaries.get(employee_id)
        return [s] if s else []


def _employees() -> InMemoryUserRepository:
    repo = InMemoryUserRepository()
    for name, email, salary in [("John Doe", "john@example.com", 75000), ("Jane Smith", "jane@example.com", 66000)]:
        repo.create_employee(
            name=name,
            email=email,
            employee_code="",
            department="Engineering",
            position="Developer",
            salary=salary,
            joining_date=None,
            phone_number="",
        )
    return repo


@pytest.fixture
def attendance():
    return FakeAttendance(
        {
            1: AttendanceSummary(
                employee_id=1, total_days=22, present=20, absent=2, late=0, half_day=0, total_hours=160.0
            ),
        }
    )


@pytest.fixture
def service(attendance):
    return PayrollService(
        InMemoryPayrollRepository(),
        _employees(),
        attendance,
        today=lambda: date(2026, 2, 1),
    )


def test_generate_payroll_uses_calendar_month(service, attendance):
    items = service.generate_payroll("01-2026")

    assert [i.payroll_id for i in items] == ["01-2026-1", "01-2026-2"]
    assert attendance.calls[0] == (date(2026, 1, 1), date(2026, 1, 31), 1)

    john = items[0]
    assert john.status == PayrollStatus.PENDING
    assert john.created_at == date(2026, 2, 1)
    assert john.paid_at is None
    assert john.net_salary == 4431.82
    assert john.attendance.absent_days == 2
    assert john.attendance.working_days == 22


def test_missing_attendance_assumes_full_month(service):
    jane = service.generate_payroll("01-2026", [2])[0]

    assert jane.attendance.present_days == 22
    assert jane.attendance.total_hours == 176.0
    assert jane.deductions == 0.0
    assert jane.net_salary == 4400.00


def test_generate_is_idempotent_per_employee_and_period(service):
    service.generate_payroll("01-2026", [1])
    second = service.generate_payroll("01-2026")

    assert [i.employee_id for i in second] == [2]
    assert service.generate_payroll("01-2026") == []
    assert len(service.get_by_period("01-2026")) == 2
    assert len(service.get_all()) == 2


def test_period_is_normalized_and_validated(service):
    items = service.generate_payroll("3-2026")
    assert items[0].period == "03-2026"

    with pytest.raises(ValidationError):
        service.generate_payroll("2026-03")
    with pytest.raises(ValidationError):
        service.generate_payroll("13-2026")


def test_generate_for_unknown_employee(service):
    with pytest.raises(NotFoundError):
        service.generate_payroll("01-2026", [42])


def test_status_moves_forward_and_stamps_paid_at(service):
    service.generate_payroll("01-2026")

    processed = service.update_status("01-2026-1", PayrollStatus.PROCESSED)
    assert processed.status == PayrollStatus.PROCESSED
    assert processed.paid_at is None

    paid = service.update_status("01-2026-1", "paid")
    assert paid.status == PayrollStatus.PAID
    assert paid.paid_at == date(2026, 2, 1)

    with pytest.raises(ValidationError):
        service.update_status("01-2026-1", PayrollStatus.PENDING)


def test_status_can_skip_to_paid_and_repeat_is_noop(service):
    service.generate_payroll("01-2026")

    paid = service.update_status("01-2026-2", PayrollStatus.PAID)
    assert service.update_status("01-2026-2", PayrollStatus.PAID) == paid


def test_status_errors(service):
    with pytest.raises(NotFoundError, match="Payroll item not found"):
        service.update_status("01-2026-9", PayrollStatus.PAID)

    service.generate_payroll("01-2026")
    with pytest.raises(ValidationError):
        service.update_status("01-2026-1", "archived")


def test_queries_by_employee_are_newest_first(service):
    service.generate_payroll("12-2025")
    service.generate_payroll("01-2026")

    assert [i.period for i in service.get_employee_payroll(1)] == ["01-2026", "12-2025"]


def test_summarize_period(service):
    service.generate_payroll("01-2026")
    service.update_status("01-2026-1", PayrollStatus.PAID)

    summary = service.summarize_period("01-2026")

    assert summary.employee_count == 2
    assert summary.total_net_salary == pytest.approx(4431.82 + 4400.00)
    assert summary.total_taxes == pytest.approx(1250.00 + 1100.00)
    assert summary.status_counts == {"pending": 1, "processed": 0, "paid": 1}

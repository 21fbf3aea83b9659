from datetime import date, datetime, time

import pytest

from punchpro.attendance.model import AttendanceSummary
from punchpro.reports.service import ReportService, attendance_rate, hours_text

JOHN = 1


@pytest.fixture
def jane_id(users_repo):
    return users_repo.create_employee(
        name="Jane Smith",
        email="jane@example.com",
        employee_code="EMP002",
        department="Design",
        position="UI/UX Designer",
        salary=65000,
        joining_date=None,
        phone_number="",
    )


@pytest.fixture
def reports(attendance_service, users_repo):
    return ReportService(attendance_service, users_repo)


def _work(service, employee_id, location, day, start, end):
    service.clock_in(employee_id, location, now=datetime.combine(day, start))
    service.clock_out(employee_id, location, now=datetime.combine(day, end))


def test_hours_text():
    assert hours_text(1) == "1 hr"
    assert hours_text(0) == "0 hrs"
    assert hours_text(16.5) == "16.5 hrs"


def test_attendance_rate_without_days():
    assert attendance_rate(None) == "0%"


def test_monthly_report(reports, attendance_service, at_hq):
    _work(attendance_service, JOHN, at_hq, date(2026, 1, 5), time(8, 55), time(17, 25))
    _work(attendance_service, JOHN, at_hq, date(2026, 1, 6), time(9, 30), time(17, 30))
    attendance_service.mark_absent(JOHN, date(2026, 1, 7))
    _work(attendance_service, JOHN, at_hq, date(2026, 2, 2), time(9, 0), time(17, 0))

    report = reports.monthly_attendance(JOHN, date(2026, 1, 20))
    data = report.to_dict()

    assert data["month"] == "January 2026"
    assert data["start"] == "2026-01-01"
    assert data["end"] == "2026-01-31"
    assert data["summary"]["total_days"] == 3
    assert data["summary"]["late"] == 1
    assert data["attendance_rate"] == "33%"
    assert data["hours"] == "16.5 hrs"
    assert [r["date"] for r in data["rows"]] == ["2026-01-05", "2026-01-06", "2026-01-07"]
    assert data["rows"][0]["clock_in"] == "08:55"
    assert data["rows"][2]["clock_in"] == "-"
    assert data["rows"][2]["status"] == "absent"


def test_monthly_report_for_empty_month(reports):
    data = reports.monthly_attendance(JOHN, date(2025, 12, 1)).to_dict()

    assert data["summary"] is None
    assert data["attendance_rate"] == "0%"
    assert data["hours"] == "0 hrs"
    assert data["rows"] == []


def test_team_report_sorted_by_hours(reports, attendance_service, at_hq, jane_id):
    _work(attendance_service, JOHN, at_hq, date(2026, 1, 5), time(9, 0), time(13, 0))
    _work(attendance_service, jane_id, at_hq, date(2026, 1, 5), time(9, 0), time(18, 0))

    rows = reports.team_attendance(date(2026, 1, 1), date(2026, 1, 31))

    assert [r["name"] for r in rows] == ["Jane Smith", "John Doe"]
    assert rows[0]["total_hours"] == 9.0
    assert rows[0]["attendance_rate"] == "100%"
    assert rows[1]["attendance_rate"] == "100%"

    design = reports.team_attendance(date(2026, 1, 1), date(2026, 1, 31), department="Design")
    assert [r["employee_id"] for r in design] == [jane_id]


def _summary(present, total_days):
    return AttendanceSummary(
        employee_id=JOHN,
        total_days=total_days,
        present=present,
        absent=total_days - present,
        late=0,
        half_day=0,
        total_hours=present * 8.0,
    )


@pytest.mark.parametrize("present,expected", [(1, "13%"), (5, "63%"), (3, "38%"), (8, "100%")])
def test_attendance_rate_rounds_halves_up(present, expected):
    assert attendance_rate(_summary(present, 8)) == expected


def test_hours_text_keeps_two_decimals():
    assert hours_text(12345.67) == "12345.67 hrs"
    assert hours_text(8.5) == "8.5 hrs"
    assert hours_text(7.25) == "7.25 hrs"

from __future__ import annotations

from datetime import date, datetime

import pytest

from punchpro.core.enums import AttendanceStatus, ClockState
from punchpro.core.exceptions import NotFoundError, ValidationError
from punchpro.geo.model import Coordinate

EMPLOYEE_ID = 1


def test_clock_in_before_start_is_present(attendance_service, at_hq, fixed_now):
    record = attendance_service.clock_in(EMPLOYEE_ID, at_hq, now=fixed_now)

    assert record.status == AttendanceStatus.PRESENT
    assert record.work_date == fixed_now.date()
    assert record.clock_in_time == fixed_now
    assert record.clock_in_location == at_hq
    assert record.clock_out_time is None


def test_clock_in_after_grace_is_late(attendance_service, at_hq):
    record = attendance_service.clock_in(EMPLOYEE_ID, at_hq, now=datetime(2026, 1, 15, 9, 30))

    assert record.status == AttendanceStatus.LATE


def test_second_clock_in_same_day_rejected(attendance_service, at_hq, fixed_now):
    attendance_service.clock_in(EMPLOYEE_ID, at_hq, now=fixed_now)

    with pytest.raises(ValidationError, match="Already clocked in today"):
        attendance_service.clock_in(EMPLOYEE_ID, at_hq, now=fixed_now.replace(hour=13))


def test_clock_out_without_clock_in_rejected(attendance_service, at_hq, fixed_now):
    with pytest.raises(ValidationError, match="No clock-in record found for today"):
        attendance_service.clock_out(EMPLOYEE_ID, at_hq, now=fixed_now)


def test_clock_out_records_hours_and_location(attendance_service, at_hq, fixed_now):
    attendance_service.clock_in(EMPLOYEE_ID, at_hq, now=fixed_now)
    leave_at = Coordinate(at_hq.latitude, at_hq.longitude, timestamp=1)
    record = attendance_service.clock_out(EMPLOYEE_ID, leave_at, now=datetime(2026, 1, 15, 17, 30))

    assert record.clock_out_time == datetime(2026, 1, 15, 17, 30)
    assert record.clock_out_location == leave_at
    assert record.total_hours == pytest.approx(8.58)
    assert record.status == AttendanceStatus.PRESENT


def test_short_day_becomes_half_day(attendance_service, at_hq):
    attendance_service.clock_in(EMPLOYEE_ID, at_hq, now=datetime(2026, 1, 15, 9, 0))
    record = attendance_service.clock_out(EMPLOYEE_ID, at_hq, now=datetime(2026, 1, 15, 12, 0))

    assert record.total_hours == pytest.approx(3.0)
    assert record.status == AttendanceStatus.HALF_DAY


def test_second_clock_out_rejected(attendance_service, at_hq, fixed_now):
    attendance_service.clock_in(EMPLOYEE_ID, at_hq, now=fixed_now)
    attendance_service.clock_out(EMPLOYEE_ID, at_hq, now=fixed_now.replace(hour=17))

    with pytest.raises(ValidationError, match="Already clocked out today"):
        attendance_service.clock_out(EMPLOYEE_ID, at_hq, now=fixed_now.replace(hour=18))


def test_clock_in_outside_office_rejected(attendance_service, far_away, fixed_now, attendance_repo):
    with pytest.raises(ValidationError, match="outside office premises"):
        attendance_service.clock_in(EMPLOYEE_ID, far_away, now=fixed_now)

    assert attendance_repo.get_for_employee_and_date(EMPLOYEE_ID, fixed_now.date()) is None


def test_clock_in_unknown_employee_rejected(attendance_service, at_hq, fixed_now):
    with pytest.raises(NotFoundError):
        attendance_service.clock_in(999, at_hq, now=fixed_now)


def test_repository_rejects_duplicate_day(attendance_repo, at_hq, fixed_now):
    attendance_repo.create_clock_in(
        employee_id=EMPLOYEE_ID,
        work_date=fixed_now.date(),
        clock_in_time=fixed_now,
        clock_in_location=at_hq,
        status=AttendanceStatus.PRESENT,
    )
    with pytest.raises(ValidationError):
        attendance_repo.create_clock_in(
            employee_id=EMPLOYEE_ID,
            work_date=fixed_now.date(),
            clock_in_time=fixed_now,
            clock_in_location=at_hq,
            status=AttendanceStatus.PRESENT,
        )


def test_marked_absent_day_blocks_clock_in(attendance_service, at_hq, fixed_now):
    record = attendance_service.mark_absent(EMPLOYEE_ID, fixed_now.date())
    assert record.status == AttendanceStatus.ABSENT
    assert record.clock_in_time is None

    with pytest.raises(ValidationError):
        attendance_service.clock_in(EMPLOYEE_ID, at_hq, now=fixed_now)
    with pytest.raises(ValidationError, match="No clock-in record found for today"):
        attendance_service.clock_out(EMPLOYEE_ID, at_hq, now=fixed_now)


def test_today_status_transitions(attendance_service, at_hq, fixed_now):
    today = fixed_now.date()
    assert attendance_service.get_today_status(EMPLOYEE_ID, today) == ClockState.NOT_CHECKED_IN

    attendance_service.clock_in(EMPLOYEE_ID, at_hq, now=fixed_now)
    assert attendance_service.get_today_status(EMPLOYEE_ID, today) == ClockState.CHECKED_IN

    attendance_service.clock_out(EMPLOYEE_ID, at_hq, now=fixed_now.replace(hour=17))
    assert attendance_service.get_today_status(EMPLOYEE_ID, today) == ClockState.CHECKED_OUT


def test_summary_counts_statuses_and_hours(attendance_service, at_hq):
    # Mon: on time, 8h
    attendance_service.clock_in(EMPLOYEE_ID, at_hq, now=datetime(2026, 1, 12, 9, 0))
    attendance_service.clock_out(EMPLOYEE_ID, at_hq, now=datetime(2026, 1, 12, 17, 0))
    # Tue: late, 7.5h
    attendance_service.clock_in(EMPLOYEE_ID, at_hq, now=datetime(2026, 1, 13, 9, 30))
    attendance_service.clock_out(EMPLOYEE_ID, at_hq, now=datetime(2026, 1, 13, 17, 0))
    # Wed: half day, 3h
    attendance_service.clock_in(EMPLOYEE_ID, at_hq, now=datetime(2026, 1, 14, 9, 0))
    attendance_service.clock_out(EMPLOYEE_ID, at_hq, now=datetime(2026, 1, 14, 12, 0))
    # Thu: absent
    attendance_service.mark_absent(EMPLOYEE_ID, date(2026, 1, 15))
    # outside the range
    attendance_service.clock_in(EMPLOYEE_ID, at_hq, now=datetime(2026, 2, 2, 9, 0))

    summaries = attendance_service.get_attendance_summary(date(2026, 1, 1), date(2026, 1, 31))

    assert len(summaries) == 1
    s = summaries[0]
    assert s.employee_id == EMPLOYEE_ID
    assert (s.total_days, s.present, s.late, s.half_day, s.absent) == (4, 1, 1, 1, 1)
    assert s.total_hours == pytest.approx(18.5)


def test_summary_empty_range(attendance_service):
    assert attendance_service.get_attendance_summary(date(2026, 1, 1), date(2026, 1, 31), EMPLOYEE_ID) == []


def test_summary_rejects_reversed_range(attendance_service):
    with pytest.raises(ValidationError):
        attendance_service.get_attendance_summary(date(2026, 2, 1), date(2026, 1, 1))


def test_history_is_newest_first(attendance_service, at_hq):
    attendance_service.clock_in(EMPLOYEE_ID, at_hq, now=datetime(2026, 1, 12, 9, 0))
    attendance_service.clock_in(EMPLOYEE_ID, at_hq, now=datetime(2026, 1, 13, 9, 0))

    history = attendance_service.get_employee_attendance(EMPLOYEE_ID)
    assert [r.work_date for r in history] == [date(2026, 1, 13), date(2026, 1, 12)]
    assert len(attendance_service.get_employee_attendance(EMPLOYEE_ID, limit=1)) == 1

from __future__ import annotations

import logging
from collections import defaultdict
from datetime import date, datetime
from typing import Optional, Sequence

from ..common.datetime_utils import now_local
from ..common.money import round2
from ..core.enums import AttendanceStatus, ClockState
from ..core.exceptions import NotFoundError, ValidationError
from ..geo.model import Coordinate, GeofenceResult
from ..geo.service import GeofenceService
from ..users.repository import UserRepository
from .factory import AttendanceStrategyFactory
from .model import AttendanceRecord, AttendanceSummary
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class AttendanceService:
    def __init__(
        self,
        attendance: AttendanceRepository,
        users: UserRepository,
        geofence: GeofenceService | None = None,
        *,
        strategy_factory: AttendanceStrategyFactory | None = None,
        enforce_geofence: bool = True,
    ):
        self._attendance = attendance
        self._users = users
        self._geofence = geofence
        self._factory = strategy_factory or AttendanceStrategyFactory()
        self._enforce_geofence = bool(enforce_geofence)

    def _require_employee(self, employee_id: int) -> None:
        if not self._users.get_by_id(employee_id):
            raise NotFoundError("Employee not found")

    def _check_location(self, location: Coordinate) -> Optional[GeofenceResult]:
        if not self._geofence:
            return None
        result = self._geofence.check(location)
        if self._enforce_geofence and not result.is_within:
            raise ValidationError("You are outside office premises")
        return result

    def _reload(self, employee_id: int, work_date: date) -> AttendanceRecord:
        record = self._attendance.get_for_employee_and_date(employee_id, work_date)
        if not record:
            raise NotFoundError("Attendance record not found")
        return record

    def clock_in(self, employee_id: int, location: Coordinate, *, now: datetime | None = None) -> AttendanceRecord:
        now = now or now_local()
        today = now.date()

        self._require_employee(employee_id)
        site = self._check_location(location)

        existing = self._attendance.get_for_employee_and_date(employee_id, today)
        if existing:
            if existing.clock_in_time is not None:
                raise ValidationError("Already clocked in today")
            raise ValidationError("Marked absent today")

        strategy = self._factory.for_clock_in(now=now)
        decision = strategy.decide_clock_in(
            now=now, work_start=self._factory.work_start, grace_minutes=self._factory.grace_minutes
        )

        self._attendance.create_clock_in(
            employee_id=employee_id,
            work_date=today,
            clock_in_time=now,
            clock_in_location=location,
            status=decision.status,
        )
        logger.info(
            "Employee %s clocked in at %s (%s, office=%s)",
            employee_id,
            now.isoformat(timespec="seconds"),
            decision.status.value,
            site.office.name if site and site.office else "-",
        )
        return self._reload(employee_id, today)

    def clock_out(self, employee_id: int, location: Coordinate, *, now: datetime | None = None) -> AttendanceRecord:
        now = now or now_local()
        today = now.date()

        record = self._attendance.get_for_employee_and_date(employee_id, today)
        if not record or record.clock_in_time is None:
            raise ValidationError("No clock-in record found for today")
        if record.clock_out_time is not None:
            raise ValidationError("Already clocked out today")

        self._check_location(location)

        total_hours = round2((now - record.clock_in_time).total_seconds() / 3600)
        strategy = self._factory.for_clock_out(total_hours=total_hours, current_status=record.status)
        decision = strategy.decide_clock_out(total_hours=total_hours, current=record.status)

        updated = self._attendance.update_clock_out(
            attendance_id=record.attendance_id,
            clock_out_time=now,
            clock_out_location=location,
            total_hours=total_hours,
            status=decision.status,
        )
        if not updated:
            raise ValidationError("Already clocked out today")

        logger.info("Employee %s clocked out after %.2f h (%s)", employee_id, total_hours, decision.status.value)
        return self._reload(employee_id, today)

    def mark_absent(self, employee_id: int, work_date: date) -> AttendanceRecord:
        self._require_employee(employee_id)
        if self._attendance.get_for_employee_and_date(employee_id, work_date):
            raise ValidationError("Attendance already recorded for this day")

        self._attendance.create_absence(employee_id=employee_id, work_date=work_date)
        return self._reload(employee_id, work_date)

    def get_employee_attendance(self, employee_id: int, *, limit: Optional[int] = None) -> Sequence[AttendanceRecord]:
        return self._attendance.list_for_employee(employee_id, limit=limit)

    def get_today_record(self, employee_id: int, today: date) -> Optional[AttendanceRecord]:
        """Get today's attendance record for an employee"""
        return self._attendance.get_for_employee_and_date(employee_id, today)

    def get_today_status(self, employee_id: int, today: date) -> ClockState:
        record = self.get_today_record(employee_id, today)
        if not record or record.clock_in_time is None:
            return ClockState.NOT_CHECKED_IN
        if record.clock_out_time is None:
            return ClockState.CHECKED_IN
        return ClockState.CHECKED_OUT

    def get_attendance_summary(
        self,
        start: date,
        end: date,
        employee_id: Optional[int] = None,
    ) -> list[AttendanceSummary]:
        """One summary per employee with records in ``[start, end]``, ordered by employee id."""

        if end < start:
            raise ValidationError("End date must not be before start date")

        records = self._attendance.list_between(start_date=start, end_date=end, employee_id=employee_id)

        grouped: dict[int, list[AttendanceRecord]] = defaultdict(list)
        for r in records:
            grouped[r.employee_id].append(r)

        summaries = []
        for emp_id in sorted(grouped):
            rows = grouped[emp_id]
            counts = {status: 0 for status in AttendanceStatus}
            for r in rows:
                counts[r.status] += 1
            summaries.append(
                AttendanceSummary(
                    employee_id=emp_id,
                    total_days=len(rows),
                    present=counts[AttendanceStatus.PRESENT],
                    absent=counts[AttendanceStatus.ABSENT],
                    late=counts[AttendanceStatus.LATE],
                    half_day=counts[AttendanceStatus.HALF_DAY],
                    total_hours=round2(sum(r.total_hours or 0.0 for r in rows)),
                )
            )
        return summaries

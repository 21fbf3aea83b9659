from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Protocol, Sequence

from ..core.enums import AttendanceStatus
from ..geo.model import Coordinate
from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def get_for_employee_and_date(self, employee_id: int, work_date: date) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def list_for_employee(self, employee_id: int, *, limit: Optional[int] = None) -> Sequence[AttendanceRecord]:
        """Newest first."""

        raise NotImplementedError

    def list_between(
        self,
        *,
        start_date: date,
        end_date: date,
        employee_id: Optional[int] = None,
    ) -> Sequence[AttendanceRecord]:
        """Records with ``start_date <= work_date <= end_date``, oldest first."""

        raise NotImplementedError

    def create_clock_in(
        self,
        *,
        employee_id: int,
        work_date: date,
        clock_in_time: datetime,
        clock_in_location: Coordinate,
        status: AttendanceStatus,
    ) -> int:
        """Insert today's record. Raises ValidationError if one already exists."""

        raise NotImplementedError

    def create_absence(self, *, employee_id: int, work_date: date) -> int:
        raise NotImplementedError

    def update_clock_out(
        self,
        *,
        attendance_id: int,
        clock_out_time: datetime,
        clock_out_location: Coordinate,
        total_hours: float,
        status: AttendanceStatus,
    ) -> bool:
        """Complete an open record. Returns False if it was already closed."""

        raise NotImplementedError

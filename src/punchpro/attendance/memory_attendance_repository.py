from __future__ import annotations

import threading
from dataclasses import replace
from datetime import date, datetime
from typing import Optional, Sequence

from ..core.enums import AttendanceStatus
from ..core.exceptions import ValidationError
from ..geo.model import Coordinate
from .model import AttendanceRecord
from .repository import AttendanceRepository


class InMemoryAttendanceRepository(AttendanceRepository):
    def __init__(self):
        self._by_employee_date: dict[tuple[int, date], AttendanceRecord] = {}
        self._id = 0
        self._lock = threading.Lock()

    def get_for_employee_and_date(self, employee_id: int, work_date: date) -> Optional[AttendanceRecord]:
        return self._by_employee_date.get((int(employee_id), work_date))

    def list_for_employee(self, employee_id: int, *, limit: Optional[int] = None) -> Sequence[AttendanceRecord]:
        items = [r for r in self._by_employee_date.values() if r.employee_id == int(employee_id)]
        items.sort(key=lambda r: (r.work_date, r.attendance_id), reverse=True)
        return items[:limit] if limit is not None else items

    def list_between(self, *, start_date: date, end_date: date, employee_id: Optional[int] = None) -> Sequence[AttendanceRecord]:
        items = [
            r
            for r in self._by_employee_date.values()
            if start_date <= r.work_date <= end_date and (employee_id is None or r.employee_id == int(employee_id))
        ]
        items.sort(key=lambda r: (r.work_date, r.employee_id))
        return items

    def _insert(self, record_factory, *, employee_id: int, work_date: date) -> int:
        key = (int(employee_id), work_date)
        with self._lock:
            if key in self._by_employee_date:
                raise ValidationError("Attendance already recorded for this day")
            self._id += 1
            self._by_employee_date[key] = record_factory(self._id)
            return self._id

    def create_clock_in(
        self,
        *,
        employee_id: int,
        work_date: date,
        clock_in_time: datetime,
        clock_in_location: Coordinate,
        status: AttendanceStatus,
    ) -> int:
        return self._insert(
            lambda attendance_id: AttendanceRecord(
                attendance_id=attendance_id,
                employee_id=int(employee_id),
                work_date=work_date,
                clock_in_time=clock_in_time,
                clock_in_location=clock_in_location,
                status=status,
            ),
            employee_id=employee_id,
            work_date=work_date,
        )

    def create_absence(self, *, employee_id: int, work_date: date) -> int:
        return self._insert(
            lambda attendance_id: AttendanceRecord(
                attendance_id=attendance_id,
                employee_id=int(employee_id),
                work_date=work_date,
                clock_in_time=None,
                status=AttendanceStatus.ABSENT,
                total_hours=0.0,
            ),
            employee_id=employee_id,
            work_date=work_date,
        )

    def update_clock_out(
        self,
        *,
        attendance_id: int,
        clock_out_time: datetime,
        clock_out_location: Coordinate,
        total_hours: float,
        status: AttendanceStatus,
    ) -> bool:
        with self._lock:
            for key, rec in self._by_employee_date.items():
                if rec.attendance_id != attendance_id:
                    continue
                if rec.clock_out_time is not None or rec.clock_in_time is None:
                    return False
                self._by_employee_date[key] = replace(
                    rec,
                    clock_out_time=clock_out_time,
                    clock_out_location=clock_out_location,
                    total_hours=total_hours,
                    status=status,
                )
                return True
        return False

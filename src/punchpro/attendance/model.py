from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.enums import AttendanceStatus
from ..geo.model import Coordinate


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one employee's attendance for one calendar day.

    Created on clock-in (or when marked absent), completed once on clock-out.
    """

    attendance_id: int
    employee_id: int
    work_date: date
    clock_in_time: Optional[datetime]
    status: AttendanceStatus
    clock_in_location: Optional[Coordinate] = None
    clock_out_time: Optional[datetime] = None
    clock_out_location: Optional[Coordinate] = None
    total_hours: Optional[float] = None

    def to_dict(self) -> dict:
        return {
            "id": self.attendance_id,
            "employee_id": self.employee_id,
            "date": self.work_date.isoformat(),
            "clock_in_time": self.clock_in_time.isoformat() if self.clock_in_time else None,
            "clock_out_time": self.clock_out_time.isoformat() if self.clock_out_time else None,
            "clock_in_location": self.clock_in_location.to_dict() if self.clock_in_location else None,
            "clock_out_location": self.clock_out_location.to_dict() if self.clock_out_location else None,
            "total_hours": self.total_hours,
            "status": self.status.value,
        }


@dataclass(frozen=True)
class AttendanceSummary:
    """Read-model: attendance counts for one employee over a date range."""

    employee_id: int
    total_days: int
    present: int
    absent: int
    late: int
    half_day: int
    total_hours: float

    def to_dict(self) -> dict:
        return {
            "employee_id": self.employee_id,
            "total_days": self.total_days,
            "present": self.present,
            "absent": self.absent,
            "late": self.late,
            "half_day": self.half_day,
            "total_hours": self.total_hours,
        }

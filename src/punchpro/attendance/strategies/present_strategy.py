from __future__ import annotations

from datetime import datetime, time

from ...core.enums import AttendanceStatus
from .base import AttendanceStrategy, StatusDecision


class PresentStrategy(AttendanceStrategy):
    """Default: present on clock-in, keep status on clock-out."""

    def decide_clock_in(self, *, now: datetime, work_start: time, grace_minutes: int) -> StatusDecision:
        return StatusDecision(status=AttendanceStatus.PRESENT)

    def decide_clock_out(self, *, total_hours: float, current: AttendanceStatus) -> StatusDecision:
        return StatusDecision(status=current)

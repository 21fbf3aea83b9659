from __future__ import annotations

from datetime import datetime, time

from ...core.enums import AttendanceStatus
from .base import AttendanceStrategy, StatusDecision


class LateStrategy(AttendanceStrategy):
    """Late clock-in."""

    def decide_clock_in(self, *, now: datetime, work_start: time, grace_minutes: int) -> StatusDecision:
        return StatusDecision(status=AttendanceStatus.LATE)

    def decide_clock_out(self, *, total_hours: float, current: AttendanceStatus) -> StatusDecision:
        return StatusDecision(status=current)

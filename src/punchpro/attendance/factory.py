from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, time, timedelta

from ..core.constants import DEFAULT_HALF_DAY_HOURS, DEFAULT_LATE_GRACE_MINUTES
from ..core.enums import AttendanceStatus
from .strategies.base import AttendanceStrategy
from .strategies.half_day_strategy import HalfDayStrategy
from .strategies.late_strategy import LateStrategy
from .strategies.present_strategy import PresentStrategy


@dataclass
class AttendanceStrategyFactory:
    """Factory Pattern: choose appropriate strategy based on rules."""

    work_start: time = field(default_factory=lambda: time(9, 0))
    grace_minutes: int = DEFAULT_LATE_GRACE_MINUTES
    half_day_hours: float = DEFAULT_HALF_DAY_HOURS

    def for_clock_in(self, *, now: datetime) -> AttendanceStrategy:
        start = datetime.combine(now.date(), self.work_start)
        if now <= start + timedelta(minutes=self.grace_minutes):
            return PresentStrategy()
        return LateStrategy()

    def for_clock_out(self, *, total_hours: float, current_status: AttendanceStatus) -> AttendanceStrategy:
        if total_hours < self.half_day_hours:
            return HalfDayStrategy()
        return PresentStrategy()

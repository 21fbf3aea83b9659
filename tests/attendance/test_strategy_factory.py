from datetime import datetime, time

from punchpro.attendance.factory import AttendanceStrategyFactory
from punchpro.attendance.strategies.half_day_strategy import HalfDayStrategy
from punchpro.attendance.strategies.late_strategy import LateStrategy
from punchpro.attendance.strategies.present_strategy import PresentStrategy
from punchpro.core.enums import AttendanceStatus


def test_factory_clock_in_present_within_grace():
    factory = AttendanceStrategyFactory(work_start=time(9, 0), grace_minutes=5)
    strategy = factory.for_clock_in(now=datetime(2026, 1, 15, 9, 4, 59))

    assert isinstance(strategy, PresentStrategy)


def test_factory_clock_in_late_after_grace():
    factory = AttendanceStrategyFactory(work_start=time(9, 0), grace_minutes=5)
    strategy = factory.for_clock_in(now=datetime(2026, 1, 15, 9, 6, 0))

    assert isinstance(strategy, LateStrategy)


def test_factory_clock_out_half_day_below_threshold():
    factory = AttendanceStrategyFactory(half_day_hours=4)

    assert isinstance(factory.for_clock_out(total_hours=3.99, current_status=AttendanceStatus.LATE), HalfDayStrategy)
    assert isinstance(factory.for_clock_out(total_hours=4.0, current_status=AttendanceStatus.LATE), PresentStrategy)


def test_clock_out_keeps_late_status_for_full_day():
    strategy = PresentStrategy()
    decision = strategy.decide_clock_out(total_hours=8.0, current=AttendanceStatus.LATE)

    assert decision.status == AttendanceStatus.LATE

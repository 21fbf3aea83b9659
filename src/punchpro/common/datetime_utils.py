from __future__ import annotations

import calendar
from datetime import date, datetime, time

from ..core.exceptions import ValidationError


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid date: {value!r}") from None


def parse_hhmm(value: str) -> time:
    return datetime.strptime(value, "%H:%M").time()


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def month_bounds(day: date) -> tuple[date, date]:
    """First and last calendar day of the month containing ``day``."""
    last = calendar.monthrange(day.year, day.month)[1]
    return day.replace(day=1), day.replace(day=last)


def parse_period(period: str) -> tuple[date, date]:
    """Parse a payroll period "MM-YYYY" into its calendar month bounds."""
    try:
        month_s, year_s = period.split("-")
        first = date(int(year_s), int(month_s), 1)
    except (AttributeError, ValueError):
        raise ValidationError(f"Invalid payroll period: {period!r} (expected MM-YYYY)") from None
    return month_bounds(first)


def format_period(day: date) -> str:
    return day.strftime("%m-%Y")

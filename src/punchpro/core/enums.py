from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """User role used for authorization."""

    ADMIN = "admin"
    EMPLOYEE = "employee"


class AttendanceStatus(str, Enum):
    """Attendance status stored with each record."""

    PRESENT = "present"
    LATE = "late"
    HALF_DAY = "half-day"
    ABSENT = "absent"


class ClockState(str, Enum):
    NOT_CHECKED_IN = "not-checked-in"
    CHECKED_IN = "checked-in"
    CHECKED_OUT = "checked-out"


class PayrollStatus(str, Enum):
    """Payroll lifecycle. Only moves forward: pending -> processed -> paid."""

    PENDING = "pending"
    PROCESSED = "processed"
    PAID = "paid"

    @property
    def rank(self) -> int:
        return _PAYROLL_ORDER.index(self)


_PAYROLL_ORDER = [PayrollStatus.PENDING, PayrollStatus.PROCESSED, PayrollStatus.PAID]

from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from ..core.enums import PayrollStatus
from .model import PayrollItem


def period_sort_key(item: PayrollItem) -> tuple[int, int, int]:
    """Newest period first, then by employee."""
    month, year = item.period.split("-")
    return (-int(year), -int(month), item.employee_id)


class PayrollRepository(Protocol):
    def get_by_id(self, payroll_id: str) -> Optional[PayrollItem]:
        raise NotImplementedError

    def find(self, *, employee_id: int, period: str) -> Optional[PayrollItem]:
        raise NotImplementedError

    def list_all(self) -> Sequence[PayrollItem]:
        raise NotImplementedError

    def list_for_employee(self, employee_id: int) -> Sequence[PayrollItem]:
        raise NotImplementedError

    def list_for_period(self, period: str) -> Sequence[PayrollItem]:
        raise NotImplementedError

    def add(self, item: PayrollItem) -> None:
        """Raises ValidationError when (employee, period) already has an item."""

        raise NotImplementedError

    def update_status(self, payroll_id: str, *, status: PayrollStatus, paid_at: Optional[date]) -> bool:
        raise NotImplementedError

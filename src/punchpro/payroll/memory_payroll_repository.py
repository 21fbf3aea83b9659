from __future__ import annotations

import threading
from dataclasses import replace
from datetime import date
from typing import Optional, Sequence

from ..core.enums import PayrollStatus
from ..core.exceptions import ValidationError
from .model import PayrollItem
from .repository import PayrollRepository, period_sort_key


class InMemoryPayrollRepository(PayrollRepository):
    def __init__(self):
        self._items: dict[str, PayrollItem] = {}
        self._lock = threading.Lock()

    def get_by_id(self, payroll_id: str) -> Optional[PayrollItem]:
        return self._items.get(payroll_id)

    def find(self, *, employee_id: int, period: str) -> Optional[PayrollItem]:
        return next(
            (i for i in self._items.values() if i.employee_id == int(employee_id) and i.period == period),
            None,
        )

    def list_all(self) -> Sequence[PayrollItem]:
        return sorted(self._items.values(), key=period_sort_key)

    def list_for_employee(self, employee_id: int) -> Sequence[PayrollItem]:
        return [i for i in self.list_all() if i.employee_id == int(employee_id)]

    def list_for_period(self, period: str) -> Sequence[PayrollItem]:
        return [i for i in self.list_all() if i.period == period]

    def add(self, item: PayrollItem) -> None:
        with self._lock:
            if item.payroll_id in self._items or self.find(employee_id=item.employee_id, period=item.period):
                raise ValidationError("Payroll already generated for this employee and period")
            self._items[item.payroll_id] = item

    def update_status(self, payroll_id: str, *, status: PayrollStatus, paid_at: Optional[date]) -> bool:
        with self._lock:
            item = self._items.get(payroll_id)
            if not item:
                return False
            self._items[payroll_id] = replace(item, status=status, paid_at=paid_at)
            return True

from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

import mysql.connector

from ..core.enums import PayrollStatus
from ..core.exceptions import ValidationError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import PayrollAttendance, PayrollItem
from .repository import PayrollRepository

_COLUMNS = """
    payroll_id, employee_id, employee_name, period, base_salary, overtime_pay, bonuses,
    deductions, taxes, net_salary, status, created_at, paid_at,
    working_days, present_days, absent_days, late_days, half_days, total_hours
"""

_ORDER = "ORDER BY SUBSTRING(period, 4, 4) DESC, SUBSTRING(period, 1, 2) DESC, employee_id ASC"


def _to_item(r: dict) -> PayrollItem:
    return PayrollItem(
        payroll_id=r["payroll_id"],
        employee_id=int(r["employee_id"]),
        employee_name=r["employee_name"],
        period=r["period"],
        base_salary=float(r["base_salary"]),
        overtime_pay=float(r["overtime_pay"]),
        bonuses=float(r["bonuses"]),
        deductions=float(r["deductions"]),
        taxes=float(r["taxes"]),
        net_salary=float(r["net_salary"]),
        status=PayrollStatus(r["status"]),
        created_at=r["created_at"],
        paid_at=r.get("paid_at"),
        attendance=PayrollAttendance(
            working_days=int(r["working_days"]),
            present_days=int(r["present_days"]),
            absent_days=int(r["absent_days"]),
            late_days=int(r["late_days"]),
            half_days=int(r["half_days"]),
            total_hours=float(r["total_hours"]),
        ),
    )


class MySQLPayrollRepository(PayrollRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def _select(self, where: str = "", params: tuple = ()) -> list[PayrollItem]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM payroll_items {where} {_ORDER}", params)
            return [_to_item(r) for r in fetchall(cur)]

    def get_by_id(self, payroll_id: str) -> Optional[PayrollItem]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM payroll_items WHERE payroll_id=%s", (payroll_id,))
            r = fetchone(cur)
            return _to_item(r) if r else None

    def find(self, *, employee_id: int, period: str) -> Optional[PayrollItem]:
        items = self._select("WHERE employee_id=%s AND period=%s", (int(employee_id), period))
        return items[0] if items else None

    def list_all(self) -> Sequence[PayrollItem]:
        return self._select()

    def list_for_employee(self, employee_id: int) -> Sequence[PayrollItem]:
        return self._select("WHERE employee_id=%s", (int(employee_id),))

    def list_for_period(self, period: str) -> Sequence[PayrollItem]:
        return self._select("WHERE period=%s", (period,))

    def add(self, item: PayrollItem) -> None:
        a = item.attendance
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    """
                    INSERT INTO payroll_items(
                        payroll_id, employee_id, employee_name, period, base_salary, overtime_pay, bonuses,
                        deductions, taxes, net_salary, status, created_at, paid_at,
                        working_days, present_days, absent_days, late_days, half_days, total_hours
                    )
                    VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s)
                    """,
                    (
                        item.payroll_id,
                        item.employee_id,
                        item.employee_name,
                        item.period,
                        item.base_salary,
                        item.overtime_pay,
                        item.bonuses,
                        item.deductions,
                        item.taxes,
                        item.net_salary,
                        item.status.value,
                        item.created_at,
                        item.paid_at,
                        a.working_days,
                        a.present_days,
                        a.absent_days,
                        a.late_days,
                        a.half_days,
                        a.total_hours,
                    ),
                )
        except mysql.connector.IntegrityError:
            raise ValidationError("Payroll already generated for this employee and period") from None

    def update_status(self, payroll_id: str, *, status: PayrollStatus, paid_at: Optional[date]) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE payroll_items SET status=%s, paid_at=%s WHERE payroll_id=%s",
                (status.value, paid_at, payroll_id),
            )
            return cur.rowcount > 0

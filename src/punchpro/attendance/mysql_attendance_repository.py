from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Sequence

import mysql.connector

from ..core.enums import AttendanceStatus
from ..core.exceptions import ValidationError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, dump_json, fetchall, fetchone, load_json
from ..geo.model import Coordinate
from .model import AttendanceRecord
from .repository import AttendanceRepository

_COLUMNS = """
    attendance_id, employee_id, work_date, clock_in_time, clock_out_time,
    clock_in_location, clock_out_location, total_hours, status
"""


def _to_coordinate(value) -> Optional[Coordinate]:
    data = load_json(value)
    return Coordinate.from_dict(data) if data else None


def _to_record(r: dict) -> AttendanceRecord:
    total_hours = r.get("total_hours")
    return AttendanceRecord(
        attendance_id=int(r["attendance_id"]),
        employee_id=int(r["employee_id"]),
        work_date=r["work_date"],
        clock_in_time=r.get("clock_in_time"),
        clock_out_time=r.get("clock_out_time"),
        clock_in_location=_to_coordinate(r.get("clock_in_location")),
        clock_out_location=_to_coordinate(r.get("clock_out_location")),
        total_hours=float(total_hours) if total_hours is not None else None,
        status=AttendanceStatus(r["status"]),
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_for_employee_and_date(self, employee_id: int, work_date: date) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM attendance_records WHERE employee_id=%s AND work_date=%s",
                (int(employee_id), work_date),
            )
            r = fetchone(cur)
            return _to_record(r) if r else None

    def list_for_employee(self, employee_id: int, *, limit: Optional[int] = None) -> Sequence[AttendanceRecord]:
        sql = f"""
            SELECT {_COLUMNS}
            FROM attendance_records
            WHERE employee_id=%s
            ORDER BY work_date DESC, attendance_id DESC
        """
        params: list[object] = [int(employee_id)]
        if limit is not None:
            sql += " LIMIT %s"
            params.append(int(limit))

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(sql, tuple(params))
            return [_to_record(r) for r in fetchall(cur)]

    def list_between(self, *, start_date: date, end_date: date, employee_id: Optional[int] = None) -> Sequence[AttendanceRecord]:
        clauses = ["work_date BETWEEN %s AND %s"]
        params: list[object] = [start_date, end_date]
        if employee_id is not None:
            clauses.append("employee_id=%s")
            params.append(int(employee_id))

        where = " AND ".join(clauses)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM attendance_records
                WHERE {where}
                ORDER BY work_date ASC, employee_id ASC
                """,
                tuple(params),
            )
            return [_to_record(r) for r in fetchall(cur)]

    def _insert(self, sql: str, params: tuple) -> int:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(sql, params)
                return int(cur.lastrowid)
        except mysql.connector.IntegrityError:
            # uq_attendance_employee_day
            raise ValidationError("Attendance already recorded for this day") from None

    def create_clock_in(
        self,
        *,
        employee_id: int,
        work_date: date,
        clock_in_time: datetime,
        clock_in_location: Coordinate,
        status: AttendanceStatus,
    ) -> int:
        return self._insert(
            """
            INSERT INTO attendance_records(employee_id, work_date, clock_in_time, clock_in_location, status)
            VALUES(%s,%s,%s,%s,%s)
            """,
            (int(employee_id), work_date, clock_in_time, dump_json(clock_in_location.to_dict()), status.value),
        )

    def create_absence(self, *, employee_id: int, work_date: date) -> int:
        return self._insert(
            """
            INSERT INTO attendance_records(employee_id, work_date, total_hours, status)
            VALUES(%s,%s,0,%s)
            """,
            (int(employee_id), work_date, AttendanceStatus.ABSENT.value),
        )

    def update_clock_out(
        self,
        *,
        attendance_id: int,
        clock_out_time: datetime,
        clock_out_location: Coordinate,
        total_hours: float,
        status: AttendanceStatus,
    ) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE attendance_records
                SET clock_out_time=%s, clock_out_location=%s, total_hours=%s, status=%s
                WHERE attendance_id=%s AND clock_out_time IS NULL AND clock_in_time IS NOT NULL
                """,
                (clock_out_time, dump_json(clock_out_location.to_dict()), total_hours, status.value, int(attendance_id)),
            )
            return cur.rowcount > 0

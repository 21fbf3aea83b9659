from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from .attendance.factory import AttendanceStrategyFactory
from .attendance.memory_attendance_repository import InMemoryAttendanceRepository
from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .common.datetime_utils import parse_hhmm
from .core.constants import DEFAULT_HALF_DAY_HOURS, DEFAULT_LATE_GRACE_MINUTES, DEFAULT_WORK_START
from .database.connection import DBConfig, DatabaseConnection
from .geo.memory_office_repository import InMemoryOfficeRepository
from .geo.mysql_office_repository import MySQLOfficeRepository
from .geo.repository import OfficeRepository
from .geo.service import GeofenceService
from .payroll.memory_payroll_repository import InMemoryPayrollRepository
from .payroll.mysql_payroll_repository import MySQLPayrollRepository
from .payroll.repository import PayrollRepository
from .payroll.service import PayrollService
from .reports.service import ReportService
from .users.memory_user_repository import InMemoryUserRepository
from .users.mysql_user_repository import MySQLUserRepository
from .users.service import AuthService, EmployeeService


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    users_repo: Any
    offices_repo: OfficeRepository
    attendance_repo: AttendanceRepository
    payroll_repo: PayrollRepository

    auth_service: AuthService
    employee_service: EmployeeService
    geofence_service: GeofenceService
    attendance_service: AttendanceService
    payroll_service: PayrollService
    report_service: ReportService


def build_container(*, settings: Any) -> Container:
    """Wire repositories and services from a settings module (or any object with the same attributes)."""

    backend = str(getattr(settings, "STORAGE_BACKEND", "memory")).lower()

    conn: Optional[DatabaseConnection] = None
    if backend == "mysql":
        conn = DatabaseConnection.get_instance(DBConfig.from_dict(getattr(settings, "DB_CONFIG")))
        users_repo = MySQLUserRepository(conn)
        offices_repo = MySQLOfficeRepository(conn)
        attendance_repo = MySQLAttendanceRepository(conn)
        payroll_repo = MySQLPayrollRepository(conn)
    elif backend == "memory":
        users_repo = InMemoryUserRepository()
        offices_repo = InMemoryOfficeRepository()
        attendance_repo = InMemoryAttendanceRepository()
        payroll_repo = InMemoryPayrollRepository()
    else:
        raise ValueError(f"Unknown STORAGE_BACKEND: {backend!r}")

    strategy_factory = AttendanceStrategyFactory(
        work_start=parse_hhmm(str(getattr(settings, "WORK_START", DEFAULT_WORK_START))),
        grace_minutes=int(getattr(settings, "LATE_GRACE_MINUTES", DEFAULT_LATE_GRACE_MINUTES)),
        half_day_hours=float(getattr(settings, "HALF_DAY_HOURS", DEFAULT_HALF_DAY_HOURS)),
    )

    auth_service = AuthService(users_repo)
    employee_service = EmployeeService(users_repo, users_repo)
    geofence_service = GeofenceService(
        offices_repo,
        reject_mocked=bool(getattr(settings, "REJECT_MOCKED_LOCATIONS", False)),
    )
    attendance_service = AttendanceService(
        attendance_repo,
        users_repo,
        geofence_service,
        strategy_factory=strategy_factory,
        enforce_geofence=bool(getattr(settings, "ENFORCE_GEOFENCE", True)),
    )
    payroll_service = PayrollService(payroll_repo, users_repo, attendance_service)
    report_service = ReportService(attendance_service, users_repo)

    return Container(
        conn=conn,
        users_repo=users_repo,
        offices_repo=offices_repo,
        attendance_repo=attendance_repo,
        payroll_repo=payroll_repo,
        auth_service=auth_service,
        employee_service=employee_service,
        geofence_service=geofence_service,
        attendance_service=attendance_service,
        payroll_service=payroll_service,
        report_service=report_service,
    )

from __future__ import annotations

from datetime import datetime

import pytest

from punchpro.attendance.factory import AttendanceStrategyFactory
from punchpro.attendance.memory_attendance_repository import InMemoryAttendanceRepository
from punchpro.attendance.service import AttendanceService
from punchpro.geo.geofence import DEFAULT_OFFICE
from punchpro.geo.memory_office_repository import InMemoryOfficeRepository
from punchpro.geo.model import Coordinate, OfficeSite
from punchpro.geo.service import GeofenceService
from punchpro.main import create_app
from punchpro.users.memory_user_repository import InMemoryUserRepository

BRANCH_OFFICE = OfficeSite(
    office_id=2,
    name="Branch Office",
    address="456 Market St, San Francisco, CA 94103",
    latitude=37.7749,
    longitude=-122.4194,
    radius_meters=150,
)


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2026, 1, 15, 8, 55, 0)


@pytest.fixture
def at_hq() -> Coordinate:
    return Coordinate(latitude=DEFAULT_OFFICE.latitude, longitude=DEFAULT_OFFICE.longitude, timestamp=0)


@pytest.fixture
def far_away() -> Coordinate:
    # roughly 1.9 km north of headquarters
    return Coordinate(latitude=40.73, longitude=-74.0060, timestamp=0)


@pytest.fixture
def users_repo() -> InMemoryUserRepository:
    repo = InMemoryUserRepository()
    repo.create_employee(
        name="John Doe",
        email="john@example.com",
        employee_code="EMP001",
        department="Engineering",
        position="Software Developer",
        salary=75000,
        joining_date=None,
        phone_number="",
    )
    return repo


@pytest.fixture
def attendance_repo() -> InMemoryAttendanceRepository:
    return InMemoryAttendanceRepository()


@pytest.fixture
def attendance_service(users_repo, attendance_repo) -> AttendanceService:
    geofence = GeofenceService(InMemoryOfficeRepository([DEFAULT_OFFICE, BRANCH_OFFICE]), reject_mocked=True)
    return AttendanceService(
        attendance_repo,
        users_repo,
        geofence,
        strategy_factory=AttendanceStrategyFactory(),
        enforce_geofence=True,
    )


@pytest.fixture
def app():
    return create_app("punchpro.config.testing")


@pytest.fixture
def client(app):
    return app.test_client()

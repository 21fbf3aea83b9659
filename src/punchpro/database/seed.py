from __future__ import annotations

import logging
from datetime import date
from typing import TYPE_CHECKING

from ..core.enums import Role

if TYPE_CHECKING:
    from ..container import Container

logger = logging.getLogger(__name__)

DEMO_ADMIN = {"name": "Admin User", "email": "admin@example.com", "password": "admin123"}
DEMO_EMPLOYEE_PASSWORD = "employee123"

DEMO_EMPLOYEES = [
    {
        "name": "John Doe",
        "email": "john@example.com",
        "employee_code": "EMP001",
        "department": "Engineering",
        "position": "Software Developer",
        "salary": 75000,
        "joining_date": date(2022, 3, 15),
        "phone_number": "+1 (555) 123-4567",
        "address": "123 Main St, Anytown, USA",
    },
    {
        "name": "Jane Smith",
        "email": "jane@example.com",
        "employee_code": "EMP002",
        "department": "Marketing",
        "position": "Marketing Specialist",
        "salary": 65000,
        "joining_date": date(2021, 8, 10),
        "phone_number": "+1 (555) 987-6543",
    },
    {
        "name": "Michael Johnson",
        "email": "michael@example.com",
        "employee_code": "EMP003",
        "department": "Finance",
        "position": "Financial Analyst",
        "salary": 70000,
        "joining_date": date(2023, 1, 5),
        "phone_number": "+1 (555) 456-7890",
        "address": "789 Oak Ave, Somewhere, USA",
    },
    {
        "name": "Emily Davis",
        "email": "emily@example.com",
        "employee_code": "EMP004",
        "department": "HR",
        "position": "HR Manager",
        "salary": 80000,
        "joining_date": date(2020, 11, 20),
        "phone_number": "+1 (555) 234-5678",
    },
]

DEMO_OFFICES = [
    {
        "name": "Headquarters",
        "address": "123 Main St, New York, NY 10001",
        "latitude": 40.7128,
        "longitude": -74.0060,
        "radius_meters": 200,
    },
    {
        "name": "Branch Office",
        "address": "456 Market St, San Francisco, CA 94103",
        "latitude": 37.7749,
        "longitude": -122.4194,
        "radius_meters": 150,
    },
]


def seed_demo_data(container: "Container") -> None:
    """Insert demo admin, employees and offices. Safe to run repeatedly."""

    users = container.users_repo

    if not users.get_by_email(DEMO_ADMIN["email"]):
        container.auth_service.register(
            name=DEMO_ADMIN["name"],
            email=DEMO_ADMIN["email"],
            password=DEMO_ADMIN["password"],
            role=Role.ADMIN,
        )

    for data in DEMO_EMPLOYEES:
        if users.get_by_email(data["email"]):
            continue
        container.employee_service.add_employee(**data, password=DEMO_EMPLOYEE_PASSWORD)

    if not container.offices_repo.list_all():
        for office in DEMO_OFFICES:
            container.geofence_service.add_office(**office)

    logger.info("Demo data ready")

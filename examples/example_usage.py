"""Example: drive the service layer directly, without Flask.

Controllers are thin; the business rules live in the services wired by the container.
"""

import importlib
from datetime import datetime

from punchpro.container import build_container
from punchpro.database.seed import seed_demo_data
from punchpro.geo.model import Coordinate


def main():
    settings = importlib.import_module("punchpro.config.testing")
    container = build_container(settings=settings)
    seed_demo_data(container)

    john = container.users_repo.get_by_email("john@example.com")
    at_hq = Coordinate(latitude=40.7128, longitude=-74.0060)

    container.attendance_service.clock_in(john.user_id, at_hq, now=datetime(2026, 1, 15, 8, 58))
    record = container.attendance_service.clock_out(john.user_id, at_hq, now=datetime(2026, 1, 15, 17, 30))
    print(record.to_dict())

    for item in container.payroll_service.generate_payroll("01-2026"):
        print(item.employee_name, item.net_salary, item.status.value)


if __name__ == "__main__":
    main()

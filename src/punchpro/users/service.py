from __future__ import annotations

import logging
import re
from dataclasses import replace
from datetime import date
from typing import Any, Optional, Sequence

from werkzeug.security import check_password_hash, generate_password_hash

from ..common.datetime_utils import parse_iso_date
from ..common.validators import require_email, require_min_length, require_non_empty, require_non_negative
from ..core.constants import MIN_PASSWORD_LENGTH
from ..core.enums import Role
from ..core.exceptions import AuthenticationError, AuthorizationError, NotFoundError, ValidationError
from .model import Employee, User
from .repository import EmployeeRepository, UserRepository

logger = logging.getLogger(__name__)

_EMPLOYEE_CODE_RE = re.compile(r"EMP(\d+)")


class AuthService:
    """Use case: sign in, self-registration and editing your own profile."""

    def __init__(self, users: UserRepository):
        self._users = users

    def login(self, email: str, password: str) -> User:
        user = self._users.get_by_email(email or "")
        if not user:
            raise AuthenticationError("Invalid email or password")

        if not self._password_matches(user.user_id, password):
            logger.info("Failed login for %s", email)
            raise AuthenticationError("Invalid email or password")

        return user

    def _require_user(self, user_id: int) -> User:
        user = self._users.get_by_id(user_id)
        if not user:
            raise NotFoundError("User not found")
        return user

    def _password_matches(self, user_id: int, password: str) -> bool:
        password_hash = self._users.get_password_hash(user_id)
        try:
            return bool(password_hash) and check_password_hash(password_hash, password or "")
        except ValueError:
            # unknown hash method in a corrupted row
            return False

    def register(self, *, name: str, email: str, password: str, role: Role = Role.EMPLOYEE) -> User:
        name = require_non_empty(name, "Name")
        email = require_email(email)
        require_min_length(password, "Password", MIN_PASSWORD_LENGTH)

        if self._users.get_by_email(email):
            raise ValidationError("User with this email already exists")

        user_id = self._users.create_user(name=name, email=email, role=Role(role))
        self._users.set_password_hash(user_id, generate_password_hash(password))
        logger.info("Registered %s user %s", Role(role).value, user_id)

        return self._require_user(user_id)

    def update_profile(self, user_id: int, *, name: str) -> User:
        """Change the signed-in user's display name."""
        name = require_non_empty(name, "Name")
        self._require_user(user_id)
        self._users.update_name(user_id, name)
        return self._require_user(user_id)

    def change_password(
        self,
        user_id: int,
        *,
        current_password: str,
        new_password: str,
        confirm_password: Optional[str] = None,
    ) -> None:
        self._require_user(user_id)
        if not self._password_matches(user_id, current_password):
            raise AuthenticationError("Current password is incorrect")
        require_min_length(new_password, "New password", MIN_PASSWORD_LENGTH)
        if confirm_password is not None and confirm_password != new_password:
            raise ValidationError("Passwords do not match")

        self._users.set_password_hash(user_id, generate_password_hash(new_password))
        logger.info("Password changed for user %s", user_id)


class EmployeeService:
    """Use case: manage employees (admin)."""

    def __init__(self, employees: EmployeeRepository, users: UserRepository):
        self._employees = employees
        self._users = users

    def list_employees(self) -> Sequence[Employee]:
        return self._employees.list_employees()

    def get_employee(self, employee_id: int) -> Optional[Employee]:
        return self._employees.get_employee(employee_id)

    def require_employee(self, employee_id: int) -> Employee:
        employee = self._employees.get_employee(employee_id)
        if not employee:
            raise NotFoundError("Employee not found")
        return employee

    def list_departments(self) -> Sequence[str]:
        return self._employees.list_departments()

    def _next_employee_code(self) -> str:
        """One past the highest EMPnnn code in use, so deleted codes are not reissued."""
        highest = 0
        for e in self._employees.list_employees():
            match = _EMPLOYEE_CODE_RE.fullmatch(e.employee_code or "")
            if match:
                highest = max(highest, int(match.group(1)))
        return f"EMP{highest + 1:03d}"

    def add_employee(
        self,
        *,
        name: str,
        email: str,
        department: str,
        position: str,
        salary: float,
        phone_number: str = "",
        joining_date: date | str | None = None,
        employee_code: str = "",
        address: Optional[str] = None,
        emergency_contact: Optional[str] = None,
        avatar: Optional[str] = None,
        password: Optional[str] = None,
    ) -> Employee:
        name = require_non_empty(name, "Name")
        email = require_email(email)
        department = require_non_empty(department, "Department")
        position = require_non_empty(position, "Position")
        salary = require_non_negative(salary, "Salary")
        if password is not None:
            require_min_length(password, "Password", MIN_PASSWORD_LENGTH)

        if self._users.get_by_email(email):
            raise ValidationError("User with this email already exists")

        if isinstance(joining_date, str):
            joining_date = parse_iso_date(joining_date)
        if not employee_code:
            employee_code = self._next_employee_code()

        employee_id = self._employees.create_employee(
            name=name,
            email=email,
            employee_code=employee_code,
            department=department,
            position=position,
            salary=salary,
            joining_date=joining_date or date.today(),
            phone_number=str(phone_number or "").strip(),
            address=address,
            emergency_contact=emergency_contact,
            avatar=avatar,
        )
        if password:
            self._users.set_password_hash(employee_id, generate_password_hash(password))

        logger.info("Added employee %s (%s)", employee_id, employee_code)
        return self.require_employee(employee_id)

    def update_employee(self, employee_id: int, **changes: Any) -> Employee:
        current = self.require_employee(employee_id)

        allowed = {
            "name",
            "email",
            "department",
            "position",
            "salary",
            "phone_number",
            "joining_date",
            "employee_code",
            "address",
            "emergency_contact",
            "avatar",
        }
        unknown = set(changes) - allowed
        if unknown:
            raise ValidationError(f"Unknown employee fields: {', '.join(sorted(unknown))}")

        if "name" in changes:
            changes["name"] = require_non_empty(changes["name"], "Name")
        for key, label in (("department", "Department"), ("position", "Position")):
            if key in changes:
                changes[key] = require_non_empty(changes[key], label)
        for key in ("phone_number", "employee_code"):
            if key in changes:
                changes[key] = str(changes[key] or "").strip()
        if "email" in changes:
            changes["email"] = require_email(changes["email"])
            other = self._users.get_by_email(changes["email"])
            if other and other.user_id != current.user_id:
                raise ValidationError("User with this email already exists")
        if "salary" in changes:
            changes["salary"] = require_non_negative(changes["salary"], "Salary")
        if "joining_date" in changes and not isinstance(changes["joining_date"], date):
            changes["joining_date"] = parse_iso_date(str(changes["joining_date"]))

        updated = replace(current, **changes)
        if not self._employees.update_employee(updated):
            raise NotFoundError("Employee not found")
        return updated

    def delete_employee(self, employee_id: int, *, current_role: Role) -> bool:
        if current_role != Role.ADMIN:
            raise AuthorizationError("You do not have permission to delete employees")

        deleted = self._employees.delete_employee(employee_id)
        if deleted:
            logger.info("Deleted employee %s", employee_id)
        return deleted

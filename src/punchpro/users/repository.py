from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from ..core.enums import Role
from .model import Employee, User


class UserRepository(Protocol):
    """Repository interface for sign-in profiles.

    Note (DIP): services depend on this interface, never on a concrete store.
    """

    def get_by_id(self, user_id: int) -> Optional[User]:
        raise NotImplementedError

    def get_by_email(self, email: str) -> Optional[User]:
        """Case-insensitive lookup."""

        raise NotImplementedError

    def get_password_hash(self, user_id: int) -> Optional[str]:
        raise NotImplementedError

    def set_password_hash(self, user_id: int, password_hash: str) -> None:
        raise NotImplementedError

    def update_name(self, user_id: int, name: str) -> bool:
        raise NotImplementedError

    def create_user(
        self,
        *,
        name: str,
        email: str,
        role: Role,
        avatar: Optional[str] = None,
    ) -> int:
        raise NotImplementedError


class EmployeeRepository(Protocol):
    def list_employees(self) -> Sequence[Employee]:
        raise NotImplementedError

    def get_employee(self, employee_id: int) -> Optional[Employee]:
        raise NotImplementedError

    def create_employee(
        self,
        *,
        name: str,
        email: str,
        employee_code: str,
        department: str,
        position: str,
        salary: float,
        joining_date: Optional[date],
        phone_number: str,
        address: Optional[str] = None,
        emergency_contact: Optional[str] = None,
        avatar: Optional[str] = None,
    ) -> int:
        raise NotImplementedError

    def update_employee(self, employee: Employee) -> bool:
        raise NotImplementedError

    def delete_employee(self, employee_id: int) -> bool:
        raise NotImplementedError

    def list_departments(self) -> Sequence[str]:
        raise NotImplementedError

from __future__ import annotations

from dataclasses import replace
from datetime import date
from typing import Optional, Sequence

from ..core.enums import Role
from .model import Employee, User
from .repository import EmployeeRepository, UserRepository


class InMemoryUserRepository(UserRepository, EmployeeRepository):
    """Profiles and credentials kept in process memory.

    Every profile is stored as an ``Employee``; admins simply have no
    employment details.
    """

    def __init__(self):
        self._profiles: dict[int, Employee] = {}
        self._password_hashes: dict[int, str] = {}
        self._next_id = 1

    def _allocate_id(self) -> int:
        user_id = self._next_id
        self._next_id += 1
        return user_id

    def get_by_id(self, user_id: int) -> Optional[User]:
        return self._profiles.get(int(user_id))

    def get_by_email(self, email: str) -> Optional[User]:
        needle = (email or "").strip().lower()
        return next((p for p in self._profiles.values() if p.email.lower() == needle), None)

    def get_password_hash(self, user_id: int) -> Optional[str]:
        return self._password_hashes.get(int(user_id))

    def set_password_hash(self, user_id: int, password_hash: str) -> None:
        self._password_hashes[int(user_id)] = password_hash

    def update_name(self, user_id: int, name: str) -> bool:
        profile = self._profiles.get(int(user_id))
        if profile is None:
            return False
        self._profiles[profile.user_id] = replace(profile, name=name)
        return True

    def create_user(self, *, name: str, email: str, role: Role, avatar: Optional[str] = None) -> int:
        user_id = self._allocate_id()
        self._profiles[user_id] = Employee(user_id=user_id, name=name, email=email, role=role, avatar=avatar)
        return user_id

    def list_employees(self) -> Sequence[Employee]:
        return [p for p in self._profiles.values() if p.role == Role.EMPLOYEE]

    def get_employee(self, employee_id: int) -> Optional[Employee]:
        profile = self._profiles.get(int(employee_id))
        if profile and profile.role == Role.EMPLOYEE:
            return profile
        return None

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
        user_id = self._allocate_id()
        self._profiles[user_id] = Employee(
            user_id=user_id,
            name=name,
            email=email,
            role=Role.EMPLOYEE,
            department=department,
            position=position,
            avatar=avatar,
            employee_code=employee_code,
            salary=float(salary),
            joining_date=joining_date,
            phone_number=phone_number,
            address=address,
            emergency_contact=emergency_contact,
        )
        return user_id

    def update_employee(self, employee: Employee) -> bool:
        if self.get_employee(employee.user_id) is None:
            return False
        self._profiles[employee.user_id] = replace(employee, role=Role.EMPLOYEE)
        return True

    def delete_employee(self, employee_id: int) -> bool:
        if self.get_employee(employee_id) is None:
            return False
        del self._profiles[int(employee_id)]
        self._password_hashes.pop(int(employee_id), None)
        return True

    def list_departments(self) -> Sequence[str]:
        seen: dict[str, None] = {}
        for p in self.list_employees():
            if p.department:
                seen.setdefault(p.department, None)
        return list(seen)

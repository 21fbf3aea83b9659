from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..core.enums import Role


@dataclass(frozen=True)
class User:
    """Domain entity: a profile that can sign in.

    Plain data object; password hashes live in the credentials store, not here.
    """

    user_id: int
    name: str
    email: str
    role: Role
    department: Optional[str] = None
    position: Optional[str] = None
    avatar: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "id": self.user_id,
            "name": self.name,
            "email": self.email,
            "role": self.role.value,
            "department": self.department,
            "position": self.position,
            "avatar": self.avatar,
        }


@dataclass(frozen=True)
class Employee(User):
    employee_code: str = ""
    salary: float = 0.0
    joining_date: Optional[date] = None
    phone_number: str = ""
    address: Optional[str] = None
    emergency_contact: Optional[str] = None

    def to_dict(self) -> dict:
        data = super().to_dict()
        data.update(
            {
                "employee_id": self.employee_code,
                "salary": self.salary,
                "joining_date": self.joining_date.isoformat() if self.joining_date else None,
                "phone_number": self.phone_number,
                "address": self.address,
                "emergency_contact": self.emergency_contact,
            }
        )
        return data

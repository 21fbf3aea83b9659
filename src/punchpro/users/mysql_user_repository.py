from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..core.enums import Role
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Employee, User
from .repository import EmployeeRepository, UserRepository

_COLUMNS = """
    user_id, name, email, role, employee_code, department, position, salary,
    joining_date, phone_number, address, emergency_contact, avatar
"""


def _to_employee(row: dict) -> Employee:
    return Employee(
        user_id=int(row["user_id"]),
        name=row["name"],
        email=row["email"],
        role=Role(row["role"]),
        department=row.get("department"),
        position=row.get("position"),
        avatar=row.get("avatar"),
        employee_code=row.get("employee_code") or "",
        salary=float(row.get("salary") or 0),
        joining_date=row.get("joining_date"),
        phone_number=row.get("phone_number") or "",
        address=row.get("address"),
        emergency_contact=row.get("emergency_contact"),
    )


class MySQLUserRepository(UserRepository, EmployeeRepository):
    """Backed by the ``profiles`` and ``employee_credentials`` tables."""

    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, user_id: int) -> Optional[User]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM profiles WHERE user_id=%s", (int(user_id),))
            row = fetchone(cur)
            return _to_employee(row) if row else None

    def get_by_email(self, email: str) -> Optional[User]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM profiles WHERE LOWER(email)=LOWER(%s)", (email.strip(),))
            row = fetchone(cur)
            return _to_employee(row) if row else None

    def get_password_hash(self, user_id: int) -> Optional[str]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT password_hash FROM employee_credentials WHERE user_id=%s", (int(user_id),))
            row = fetchone(cur)
            return row["password_hash"] if row else None

    def set_password_hash(self, user_id: int, password_hash: str) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO employee_credentials(user_id, password_hash) VALUES(%s,%s)
                ON DUPLICATE KEY UPDATE password_hash=VALUES(password_hash)
                """,
                (int(user_id), password_hash),
            )

    def update_name(self, user_id: int, name: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("UPDATE profiles SET name=%s WHERE user_id=%s", (name, int(user_id)))
            return cur.rowcount > 0

    def create_user(self, *, name: str, email: str, role: Role, avatar: Optional[str] = None) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT INTO profiles(name, email, role, avatar) VALUES(%s,%s,%s,%s)",
                (name, email, role.value, avatar),
            )
            return int(cur.lastrowid)

    def list_employees(self) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM profiles WHERE role='employee' ORDER BY user_id ASC")
            return [_to_employee(r) for r in fetchall(cur)]

    def get_employee(self, employee_id: int) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM profiles WHERE user_id=%s AND role='employee'",
                (int(employee_id),),
            )
            row = fetchone(cur)
            return _to_employee(row) if row else None

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
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO profiles(
                    name, email, role, employee_code, department, position, salary,
                    joining_date, phone_number, address, emergency_contact, avatar
                )
                VALUES(%s,%s,'employee',%s,%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                (
                    name,
                    email,
                    employee_code,
                    department,
                    position,
                    float(salary),
                    joining_date,
                    phone_number,
                    address,
                    emergency_contact,
                    avatar,
                ),
            )
            return int(cur.lastrowid)

    def update_employee(self, employee: Employee) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE profiles
                SET name=%s, email=%s, employee_code=%s, department=%s, position=%s, salary=%s,
                    joining_date=%s, phone_number=%s, address=%s, emergency_contact=%s, avatar=%s
                WHERE user_id=%s AND role='employee'
                """,
                (
                    employee.name,
                    employee.email,
                    employee.employee_code,
                    employee.department,
                    employee.position,
                    float(employee.salary),
                    employee.joining_date,
                    employee.phone_number,
                    employee.address,
                    employee.emergency_contact,
                    employee.avatar,
                    int(employee.user_id),
                ),
            )
            # rowcount is 0 when nothing changed, so confirm existence separately
            if cur.rowcount > 0:
                return True
            cur.execute("SELECT 1 AS found FROM profiles WHERE user_id=%s AND role='employee'", (int(employee.user_id),))
            return fetchone(cur) is not None

    def delete_employee(self, employee_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM profiles WHERE user_id=%s AND role='employee'", (int(employee_id),))
            return cur.rowcount > 0

    def list_departments(self) -> Sequence[str]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT department, MIN(user_id) AS first_id
                FROM profiles
                WHERE role='employee' AND department IS NOT NULL AND department <> ''
                GROUP BY department
                ORDER BY first_id ASC
                """
            )
            return [r["department"] for r in fetchall(cur)]

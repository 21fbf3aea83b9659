from __future__ import annotations

import logging
from datetime import timedelta

from flask import Flask, request, session

from ..core.constants import DEFAULT_SESSION_DAYS
from ..core.enums import Role
from ..core.exceptions import AuthorizationError, NotFoundError, ValidationError
from ..container import Container
from ..web.http import admin_required, api, current_role, current_user_id, fail, is_admin, json_body, login_required, ok

logger = logging.getLogger(__name__)

_EMPLOYEE_FIELDS = (
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
)


def register(app: Flask, container: Container) -> None:
    app.permanent_session_lifetime = timedelta(days=DEFAULT_SESSION_DAYS)

    def _start_session(user, *, remember: bool) -> None:
        session.clear()
        session.permanent = remember
        session["user_id"] = user.user_id
        session["name"] = user.name
        session["role"] = user.role.value

    @app.route("/api/auth/login", methods=["POST"], endpoint="login")
    @api
    def login():
        data = json_body()
        user = container.auth_service.login(str(data.get("email", "")), str(data.get("password", "")))
        _start_session(user, remember=bool(data.get("remember_me")))
        return ok(user=user.to_dict())

    @app.route("/api/auth/register", methods=["POST"], endpoint="register")
    @api
    def register_user():
        data = json_body()
        try:
            role = Role(data.get("role", Role.EMPLOYEE.value))
        except ValueError:
            raise ValidationError("Invalid role") from None

        user = container.auth_service.register(
            name=str(data.get("name", "")),
            email=str(data.get("email", "")),
            password=str(data.get("password", "")),
            role=role,
        )
        _start_session(user, remember=False)
        return ok(201, user=user.to_dict())

    @app.route("/api/auth/logout", methods=["POST"], endpoint="logout")
    def logout():
        session.clear()
        return ok(message="Signed out")

    @app.route("/api/me", methods=["GET"], endpoint="me")
    @api
    @login_required
    def me():
        user = container.users_repo.get_by_id(current_user_id())
        if not user:
            session.clear()
            return fail("Please sign in to continue", 401)
        return ok(user=user.to_dict())

    @app.route("/api/me", methods=["PATCH"], endpoint="update_me")
    @api
    @login_required
    def update_me():
        data = json_body()
        user = container.auth_service.update_profile(current_user_id(), name=data.get("name"))
        session["name"] = user.name
        return ok(user=user.to_dict())

    @app.route("/api/me/password", methods=["POST"], endpoint="change_password")
    @api
    @login_required
    def change_password():
        data = json_body()
        confirm = data.get("confirm_password")
        container.auth_service.change_password(
            current_user_id(),
            current_password=str(data.get("current_password", "")),
            new_password=str(data.get("new_password", "")),
            confirm_password=str(confirm) if confirm is not None else None,
        )
        return ok(message="Password updated")

    @app.route("/api/employees", methods=["GET"], endpoint="list_employees")
    @api
    @admin_required
    def list_employees():
        department = request.args.get("department")
        employees = container.employee_service.list_employees()
        if department:
            employees = [e for e in employees if e.department == department]
        return ok(employees=[e.to_dict() for e in employees])

    @app.route("/api/employees", methods=["POST"], endpoint="add_employee")
    @api
    @admin_required
    def add_employee():
        data = json_body()
        fields = {k: data[k] for k in _EMPLOYEE_FIELDS if k in data}
        if "password" in data:
            fields["password"] = str(data["password"])
        for required in ("name", "email", "department", "position", "salary"):
            fields.setdefault(required, "")
        employee = container.employee_service.add_employee(**fields)
        return ok(201, employee=employee.to_dict())

    @app.route("/api/employees/<int:employee_id>", methods=["GET"], endpoint="get_employee")
    @api
    @login_required
    def get_employee(employee_id: int):
        if not is_admin() and employee_id != current_user_id():
            raise AuthorizationError("You do not have permission")
        employee = container.employee_service.require_employee(employee_id)
        return ok(employee=employee.to_dict())

    @app.route("/api/employees/<int:employee_id>", methods=["PUT", "PATCH"], endpoint="update_employee")
    @api
    @admin_required
    def update_employee(employee_id: int):
        data = json_body()
        changes = {k: data[k] for k in _EMPLOYEE_FIELDS if k in data}
        employee = container.employee_service.update_employee(employee_id, **changes)
        return ok(employee=employee.to_dict())

    @app.route("/api/employees/<int:employee_id>", methods=["DELETE"], endpoint="delete_employee")
    @api
    @admin_required
    def delete_employee(employee_id: int):
        if not container.employee_service.delete_employee(employee_id, current_role=current_role()):
            raise NotFoundError("Employee not found")
        return ok(message="Employee deleted")

    @app.route("/api/departments", methods=["GET"], endpoint="list_departments")
    @api
    @login_required
    def list_departments():
        return ok(departments=list(container.employee_service.list_departments()))

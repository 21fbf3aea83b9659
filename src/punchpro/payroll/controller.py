from __future__ import annotations

from flask import Flask, request

from ..common.validators import require_int
from ..container import Container
from ..core.exceptions import AuthorizationError, ValidationError
from ..web.http import admin_required, api, current_user_id, is_admin, json_body, login_required, ok
from .service import normalize_period


def register(app: Flask, container: Container) -> None:
    @app.route("/api/payroll", methods=["GET"], endpoint="list_payroll")
    @api
    @login_required
    def list_payroll():
        period = request.args.get("period")
        if not is_admin():
            items = container.payroll_service.get_employee_payroll(current_user_id())
            if period:
                period = normalize_period(period)
                items = [i for i in items if i.period == period]
        elif period:
            items = container.payroll_service.get_by_period(period)
        elif request.args.get("employee_id"):
            items = container.payroll_service.get_employee_payroll(
                require_int(request.args["employee_id"], "employee_id")
            )
        else:
            items = container.payroll_service.get_all()
        return ok(items=[i.to_dict() for i in items])

    @app.route("/api/payroll/summary", methods=["GET"], endpoint="payroll_summary")
    @api
    @admin_required
    def payroll_summary():
        period = request.args.get("period", "")
        return ok(summary=container.payroll_service.summarize_period(period).to_dict())

    @app.route("/api/payroll/generate", methods=["POST"], endpoint="generate_payroll")
    @api
    @admin_required
    def generate_payroll():
        data = json_body()
        employee_ids = data.get("employee_ids")
        if employee_ids is not None:
            if not isinstance(employee_ids, list):
                raise ValidationError("employee_ids must be a list")
            employee_ids = [require_int(e, "employee_ids") for e in employee_ids]

        created = container.payroll_service.generate_payroll(str(data.get("period", "")), employee_ids)
        return ok(201, created=len(created), items=[i.to_dict() for i in created])

    @app.route("/api/payroll/<payroll_id>", methods=["GET"], endpoint="get_payroll")
    @api
    @login_required
    def get_payroll(payroll_id: str):
        item = container.payroll_service.get_item(payroll_id)
        if not is_admin() and item.employee_id != current_user_id():
            raise AuthorizationError("You do not have permission")
        return ok(item=item.to_dict())

    @app.route("/api/payroll/<payroll_id>/status", methods=["PATCH", "POST"], endpoint="update_payroll_status")
    @api
    @admin_required
    def update_payroll_status(payroll_id: str):
        data = json_body()
        item = container.payroll_service.update_status(payroll_id, str(data.get("status", "")))
        return ok(item=item.to_dict())

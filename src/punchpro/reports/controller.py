from __future__ import annotations

from datetime import datetime

from flask import Flask, request

from ..common.datetime_utils import month_bounds, now_local, parse_iso_date
from ..container import Container
from ..core.exceptions import AuthorizationError, ValidationError
from ..web.http import admin_required, api, current_user_id, int_arg, is_admin, login_required, ok


def register(app: Flask, container: Container) -> None:
    @app.route("/api/reports/monthly", methods=["GET"], endpoint="monthly_report")
    @api
    @login_required
    def monthly_report():
        today = now_local().date()
        month_s = request.args.get("month")
        if month_s:
            try:
                month = datetime.strptime(month_s, "%Y-%m").date()
            except ValueError:
                raise ValidationError("month must be YYYY-MM") from None
        else:
            month = today

        if month.replace(day=1) > today:
            raise ValidationError("Cannot report on a future month")

        employee_id = int_arg("employee_id", current_user_id())
        if employee_id != current_user_id() and not is_admin():
            raise AuthorizationError("You do not have permission")

        report = container.report_service.monthly_attendance(employee_id, month)
        return ok(report=report.to_dict())

    @app.route("/api/reports/team", methods=["GET"], endpoint="team_report")
    @api
    @admin_required
    def team_report():
        default_start, default_end = month_bounds(now_local().date())
        start = parse_iso_date(request.args["start"]) if request.args.get("start") else default_start
        end = parse_iso_date(request.args["end"]) if request.args.get("end") else default_end

        rows = container.report_service.team_attendance(start, end, department=request.args.get("department"))
        return ok(start=start.isoformat(), end=end.isoformat(), rows=rows)

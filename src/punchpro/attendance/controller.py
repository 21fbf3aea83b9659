from __future__ import annotations

from datetime import date

from flask import Flask, request

from ..common.datetime_utils import month_bounds, now_local, parse_iso_date
from ..common.validators import require_int
from ..container import Container
from ..core.constants import DEFAULT_HISTORY_LIMIT
from ..core.exceptions import AuthorizationError
from ..geo.model import Coordinate
from ..web.http import admin_required, api, current_user_id, int_arg, is_admin, json_body, login_required, ok


def _location_from_body() -> Coordinate:
    data = json_body()
    return Coordinate.from_dict(data.get("location", data))


def _target_employee_id() -> int:
    """Admins may ask about anyone; employees only about themselves."""
    requested = int_arg("employee_id")
    if requested is None or requested == current_user_id():
        return current_user_id()
    if not is_admin():
        raise AuthorizationError("You do not have permission")
    return requested


def register(app: Flask, container: Container) -> None:
    @app.route("/api/attendance/clock-in", methods=["POST"], endpoint="clock_in")
    @api
    @login_required
    def clock_in():
        record = container.attendance_service.clock_in(current_user_id(), _location_from_body())
        return ok(201, message="Clocked in successfully", record=record.to_dict())

    @app.route("/api/attendance/clock-out", methods=["POST"], endpoint="clock_out")
    @api
    @login_required
    def clock_out():
        record = container.attendance_service.clock_out(current_user_id(), _location_from_body())
        return ok(message="Clocked out successfully", record=record.to_dict())

    @app.route("/api/attendance/status", methods=["GET"], endpoint="attendance_status")
    @api
    @login_required
    def attendance_status():
        today = now_local().date()
        employee_id = current_user_id()
        record = container.attendance_service.get_today_record(employee_id, today)
        state = container.attendance_service.get_today_status(employee_id, today)
        return ok(status=state.value, record=record.to_dict() if record else None)

    @app.route("/api/attendance/history", methods=["GET"], endpoint="attendance_history")
    @api
    @login_required
    def attendance_history():
        limit = int_arg("limit", DEFAULT_HISTORY_LIMIT)
        records = container.attendance_service.get_employee_attendance(_target_employee_id(), limit=limit)
        return ok(records=[r.to_dict() for r in records])

    @app.route("/api/attendance/summary", methods=["GET"], endpoint="attendance_summary")
    @api
    @login_required
    def attendance_summary():
        default_start, default_end = month_bounds(now_local().date())
        start = parse_iso_date(request.args["start"]) if request.args.get("start") else default_start
        end = parse_iso_date(request.args["end"]) if request.args.get("end") else default_end

        if is_admin() and request.args.get("employee_id") in (None, ""):
            employee_id = None
        else:
            employee_id = _target_employee_id()

        summaries = container.attendance_service.get_attendance_summary(start, end, employee_id)
        return ok(start=start.isoformat(), end=end.isoformat(), summaries=[s.to_dict() for s in summaries])

    @app.route("/api/attendance/absent", methods=["POST"], endpoint="mark_absent")
    @api
    @admin_required
    def mark_absent():
        data = json_body()
        work_date: date = parse_iso_date(str(data.get("date", ""))) if data.get("date") else now_local().date()
        record = container.attendance_service.mark_absent(require_int(data.get("employee_id"), "employee_id"), work_date)
        return ok(201, record=record.to_dict())

from __future__ import annotations

from flask import Flask

from ..container import Container
from ..core.exceptions import ValidationError
from ..geo.model import Coordinate
from ..web.http import admin_required, api, json_body, login_required, ok


def register(app: Flask, container: Container) -> None:
    @app.route("/api/offices", methods=["GET"], endpoint="list_offices")
    @api
    @login_required
    def list_offices():
        return ok(offices=[o.to_dict() for o in container.geofence_service.list_offices()])

    @app.route("/api/offices", methods=["POST"], endpoint="add_office")
    @api
    @admin_required
    def add_office():
        data = json_body()
        try:
            latitude = float(data["latitude"])
            longitude = float(data["longitude"])
        except (KeyError, TypeError, ValueError):
            raise ValidationError("Office must include numeric latitude and longitude") from None

        office_id = container.geofence_service.add_office(
            name=str(data.get("name", "")),
            address=str(data.get("address", "")),
            latitude=latitude,
            longitude=longitude,
            radius_meters=data.get("radius", data.get("radius_meters", 0)),
        )
        office = container.offices_repo.get_by_id(office_id)
        return ok(201, office=office.to_dict() if office else {"id": office_id})

    @app.route("/api/geofence/check", methods=["POST"], endpoint="geofence_check")
    @api
    @login_required
    def geofence_check():
        point = Coordinate.from_dict(json_body())
        return ok(**container.geofence_service.check(point).to_dict())

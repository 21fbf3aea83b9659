from __future__ import annotations

import logging
from typing import Sequence

from ..common.validators import require_non_empty, require_non_negative
from ..core.exceptions import ValidationError
from .geofence import distance_to_office, find_office
from .model import Coordinate, GeofenceResult, OfficeSite
from .repository import OfficeRepository

logger = logging.getLogger(__name__)


class GeofenceService:
    """Use case: decide whether a reported position is on office premises."""

    def __init__(self, offices: OfficeRepository, *, reject_mocked: bool = False):
        self._offices = offices
        self._reject_mocked = bool(reject_mocked)

    def list_offices(self) -> Sequence[OfficeSite]:
        return self._offices.list_all()

    def add_office(self, *, name: str, address: str, latitude: float, longitude: float, radius_meters: float) -> int:
        name = require_non_empty(name, "Office name")
        radius_meters = require_non_negative(radius_meters, "Radius")
        return self._offices.create_office(
            name=name,
            address=(address or "").strip(),
            latitude=float(latitude),
            longitude=float(longitude),
            radius_meters=radius_meters,
        )

    def check(self, point: Coordinate) -> GeofenceResult:
        if point.mocked and self._reject_mocked:
            logger.warning("Rejected mocked location %.5f,%.5f", point.latitude, point.longitude)
            raise ValidationError("Mock locations are not allowed")

        offices = self._offices.list_all()
        office = find_office(point, offices)
        if office:
            return GeofenceResult(is_within=True, office=office, distance_meters=distance_to_office(point, office))

        nearest = min((distance_to_office(point, o) for o in offices), default=None)
        return GeofenceResult(is_within=False, office=None, distance_meters=nearest)

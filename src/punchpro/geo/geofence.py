"""Geofence evaluation.

Distances are great-circle distances from the Haversine formula. Coordinates
are not range-checked; callers pass what the location sensor reported.
"""
from __future__ import annotations

from math import atan2, cos, radians, sin, sqrt
from typing import Iterable, Optional, Protocol

from ..core.constants import EARTH_RADIUS_METERS
from .model import OfficeSite


class HasPosition(Protocol):
    latitude: float
    longitude: float


DEFAULT_OFFICE = OfficeSite(
    office_id=1,
    name="Headquarters",
    address="123 Main St, New York, NY 10001",
    latitude=40.7128,
    longitude=-74.0060,
    radius_meters=200,
)


def haversine_distance(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    """Distance in meters between two points given in degrees."""
    phi1, phi2 = radians(lat1), radians(lat2)
    d_phi = radians(lat2 - lat1)
    d_lambda = radians(lng2 - lng1)

    a = sin(d_phi / 2) ** 2 + cos(phi1) * cos(phi2) * sin(d_lambda / 2) ** 2
    c = 2 * atan2(sqrt(a), sqrt(1 - a))
    return EARTH_RADIUS_METERS * c


def distance_to_office(point: HasPosition, office: OfficeSite) -> float:
    return haversine_distance(point.latitude, point.longitude, office.latitude, office.longitude)


def is_within_office(point: HasPosition, office: OfficeSite = DEFAULT_OFFICE) -> bool:
    return distance_to_office(point, office) <= office.radius_meters


def find_office(point: HasPosition, offices: Iterable[OfficeSite]) -> Optional[OfficeSite]:
    """First office, in iteration order, whose radius contains ``point``."""
    for office in offices:
        if is_within_office(point, office):
            return office
    return None

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Any, Optional

from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class Coordinate:
    """A position read from the device location sensor."""

    latitude: float
    longitude: float
    accuracy: Optional[float] = None
    timestamp: int = field(default_factory=lambda: int(time.time() * 1000))
    mocked: bool = False

    @classmethod
    def from_dict(cls, data: Any) -> "Coordinate":
        if not isinstance(data, dict):
            raise ValidationError("Location is required")
        try:
            latitude = float(data["latitude"])
            longitude = float(data["longitude"])
        except (KeyError, TypeError, ValueError):
            raise ValidationError("Location must include numeric latitude and longitude") from None

        accuracy = data.get("accuracy")
        timestamp = data.get("timestamp")
        try:
            accuracy = float(accuracy) if accuracy is not None else None
            timestamp = int(timestamp) if timestamp is not None else int(time.time() * 1000)
        except (TypeError, ValueError):
            raise ValidationError("Location accuracy and timestamp must be numeric") from None

        return cls(
            latitude=latitude,
            longitude=longitude,
            accuracy=accuracy,
            timestamp=timestamp,
            mocked=bool(data.get("mocked", False)),
        )

    def to_dict(self) -> dict:
        data: dict = {"latitude": self.latitude, "longitude": self.longitude, "timestamp": self.timestamp}
        if self.accuracy is not None:
            data["accuracy"] = self.accuracy
        if self.mocked:
            data["mocked"] = True
        return data


@dataclass(frozen=True)
class OfficeSite:
    office_id: int
    name: str
    address: str
    latitude: float
    longitude: float
    radius_meters: float

    def to_dict(self) -> dict:
        return {
            "id": self.office_id,
            "name": self.name,
            "address": self.address,
            "latitude": self.latitude,
            "longitude": self.longitude,
            "radius": self.radius_meters,
        }


@dataclass(frozen=True)
class GeofenceResult:
    is_within: bool
    office: Optional[OfficeSite]
    distance_meters: Optional[float] = None

    def to_dict(self) -> dict:
        return {
            "is_within": self.is_within,
            "office": self.office.to_dict() if self.office else None,
            "distance_meters": round(self.distance_meters, 1) if self.distance_meters is not None else None,
        }

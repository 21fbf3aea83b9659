from __future__ import annotations

from typing import Optional, Sequence

from .model import OfficeSite
from .repository import OfficeRepository


class InMemoryOfficeRepository(OfficeRepository):
    def __init__(self, offices: Sequence[OfficeSite] = ()):
        self._offices: list[OfficeSite] = list(offices)

    def list_all(self) -> Sequence[OfficeSite]:
        return list(self._offices)

    def get_by_id(self, office_id: int) -> Optional[OfficeSite]:
        return next((o for o in self._offices if o.office_id == office_id), None)

    def create_office(self, *, name: str, address: str, latitude: float, longitude: float, radius_meters: float) -> int:
        office_id = max((o.office_id for o in self._offices), default=0) + 1
        self._offices.append(
            OfficeSite(
                office_id=office_id,
                name=name,
                address=address,
                latitude=float(latitude),
                longitude=float(longitude),
                radius_meters=float(radius_meters),
            )
        )
        return office_id

from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import OfficeSite


class OfficeRepository(Protocol):
    def list_all(self) -> Sequence[OfficeSite]:
        """Offices in evaluation order."""

        raise NotImplementedError

    def get_by_id(self, office_id: int) -> Optional[OfficeSite]:
        raise NotImplementedError

    def create_office(
        self,
        *,
        name: str,
        address: str,
        latitude: float,
        longitude: float,
        radius_meters: float,
    ) -> int:
        raise NotImplementedError

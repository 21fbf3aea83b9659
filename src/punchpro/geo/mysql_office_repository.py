from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import OfficeSite
from .repository import OfficeRepository

_COLUMNS = "office_id, name, address, latitude, longitude, radius_meters"


def _to_office(r: dict) -> OfficeSite:
    return OfficeSite(
        office_id=int(r["office_id"]),
        name=r["name"],
        address=r.get("address") or "",
        latitude=float(r["latitude"]),
        longitude=float(r["longitude"]),
        radius_meters=float(r["radius_meters"]),
    )


class MySQLOfficeRepository(OfficeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[OfficeSite]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM office_sites ORDER BY sort_order ASC, office_id ASC")
            return [_to_office(r) for r in fetchall(cur)]

    def get_by_id(self, office_id: int) -> Optional[OfficeSite]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM office_sites WHERE office_id=%s", (int(office_id),))
            r = fetchone(cur)
            return _to_office(r) if r else None

    def create_office(self, *, name: str, address: str, latitude: float, longitude: float, radius_meters: float) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO office_sites(name, address, latitude, longitude, radius_meters, sort_order)
                SELECT %s, %s, %s, %s, %s, COALESCE(MAX(sort_order), 0) + 1 FROM office_sites
                """,
                (name, address, float(latitude), float(longitude), float(radius_meters)),
            )
            return int(cur.lastrowid)

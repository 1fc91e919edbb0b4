from __future__ import annotations

import math
from dataclasses import dataclass

from ..core.constants import EARTH_RADIUS_METERS
from .validators import require_float, require_in_range


@dataclass(frozen=True)
class GeoPoint:
    """Latitude/longitude pair in decimal degrees."""

    latitude: float
    longitude: float

    def __post_init__(self):
        require_in_range(self.latitude, "latitude", -90, 90)
        require_in_range(self.longitude, "longitude", -180, 180)

    @classmethod
    def from_payload(cls, payload: dict) -> "GeoPoint":
        """Build from a JSON body with ``latitude``/``longitude`` keys."""
        return cls(
            latitude=require_float(payload.get("latitude"), "latitude"),
            longitude=require_float(payload.get("longitude"), "longitude"),
        )

    def as_dict(self) -> dict:
        return {"latitude": self.latitude, "longitude": self.longitude}


@dataclass(frozen=True)
class OfficeLocation:
    """Fixed reference point of the geofence."""

    point: GeoPoint
    allowed_radius: int


def distance_meters(a: GeoPoint, b: GeoPoint) -> int:
    """Great-circle distance (haversine), rounded to whole meters."""
    lat1, lon1 = math.radians(a.latitude), math.radians(a.longitude)
    lat2, lon2 = math.radians(b.latitude), math.radians(b.longitude)

    dlat = lat2 - lat1
    dlon = lon2 - lon1

    h = math.sin(dlat / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(dlon / 2) ** 2
    c = 2 * math.atan2(math.sqrt(h), math.sqrt(1 - h))
    return int(round(EARTH_RADIUS_METERS * c))

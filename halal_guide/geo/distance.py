from __future__ import annotations

import math

from pydantic import BaseModel, ConfigDict

EARTH_RADIUS_KM = 6371.0

# Stand-in for "unknown / incomparable". Never a real measurement.
UNKNOWN_DISTANCE_KM = 99999.0


class Coordinate(BaseModel):
    model_config = ConfigDict(frozen=True)

    latitude: float
    longitude: float


def distance(a: Coordinate | None, b: Coordinate | None) -> float:
    """Haversine distance in km, or ``UNKNOWN_DISTANCE_KM`` if either side is missing."""
    if a is None or b is None:
        return UNKNOWN_DISTANCE_KM

    lat1 = math.radians(a.latitude)
    lat2 = math.radians(b.latitude)
    dlat = lat2 - lat1
    dlon = math.radians(b.longitude - a.longitude)

    h = math.sin(dlat / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(dlon / 2) ** 2
    # Float noise can push h just past 1.0 for antipodal points
    h = min(1.0, max(0.0, h))
    return 2 * EARTH_RADIUS_KM * math.atan2(math.sqrt(h), math.sqrt(1 - h))


def is_known(distance_km: float) -> bool:
    return distance_km < UNKNOWN_DISTANCE_KM


def format_distance(distance_km: float) -> str:
    """Return ``"(2.3km away)"``, or ``""`` when the distance is the sentinel."""
    if not is_known(distance_km):
        return ""
    return f"({distance_km:.1f}km away)"

"""Geographic domain models."""

import math
from dataclasses import dataclass

MAX_LATITUDE = 90.0
MAX_LONGITUDE = 180.0


@dataclass(frozen=True)
class Coordinate:
    """A point on the earth's surface in decimal degrees."""

    latitude: float
    longitude: float

    @classmethod
    def parse(cls, latitude: object, longitude: object) -> "Coordinate | None":
        """Build a coordinate from loose values, or None when unusable."""
        lat = _to_degrees(latitude)
        lon = _to_degrees(longitude)
        if lat is None or lon is None:
            return None
        if abs(lat) > MAX_LATITUDE or abs(lon) > MAX_LONGITUDE:
            return None
        return cls(latitude=lat, longitude=lon)


def _to_degrees(value: object) -> float | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return None
    if not math.isfinite(number):
        return None
    return number

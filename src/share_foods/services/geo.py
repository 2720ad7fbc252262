"""Great-circle distance helpers for location-based search."""

import math
from collections.abc import Callable, Iterable
from typing import TypeVar

from share_foods.domain.geo import Coordinate

EARTH_RADIUS_KM = 6371.0
DEFAULT_RADIUS_KM = 10.0

T = TypeVar("T")


def haversine_km(origin: Coordinate, target: Coordinate) -> float:
    """Return the great-circle distance between two points in kilometers."""
    lat1 = math.radians(origin.latitude)
    lat2 = math.radians(target.latitude)
    d_lat = lat2 - lat1
    d_lon = math.radians(target.longitude - origin.longitude)
    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(lat1) * math.cos(lat2) * math.sin(d_lon / 2) ** 2
    )
    # rounding can push a just outside [0, 1] near antipodal points
    a = min(1.0, max(0.0, a))
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c


def is_within_radius(
    origin: Coordinate | None,
    target: Coordinate | None,
    radius_km: float = DEFAULT_RADIUS_KM,
) -> bool:
    """Return True when the target lies within the radius of the origin."""
    if origin is None or target is None:
        return False
    return haversine_km(origin, target) <= radius_km


def filter_within_radius(
    items: Iterable[T],
    origin: Coordinate | None,
    radius_km: float,
    coordinate_of: Callable[[T], Coordinate | None],
) -> list[tuple[T, float]]:
    """Return items within the radius paired with their distance.

    Items without a usable coordinate are dropped rather than raising, and
    the input order is preserved.
    """
    if origin is None:
        return []
    matches = []
    for item in items:
        target = coordinate_of(item)
        if target is None:
            continue
        distance = haversine_km(origin, target)
        if distance <= radius_km:
            matches.append((item, distance))
    return matches


def sort_by_distance(
    items: Iterable[T],
    origin: Coordinate | None,
    coordinate_of: Callable[[T], Coordinate | None],
) -> list[tuple[T, float]]:
    """Return items paired with their distance, nearest first.

    Items that cannot be located are omitted.
    """
    if origin is None:
        return []
    located = []
    for item in items:
        target = coordinate_of(item)
        if target is None:
            continue
        located.append((item, haversine_km(origin, target)))
    return sorted(located, key=lambda pair: pair[1])

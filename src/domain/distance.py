"""
Distance calculation using the Haversine formula.

Assumption
----------
We use great-circle (Haversine) distance instead of a real routing engine
(OSRM / Google Maps).  Every distance the engine reports is rounded to the
nearest whole kilometre, the granularity used by the marketplace UI.

``distance_km`` is memoised in a bounded LRU cache keyed by the raw
coordinate pair; results are deterministic so the cache is safe to share
between threads.

Complexity: O(1) per call.
"""

from __future__ import annotations

import math
from functools import lru_cache
from typing import Iterable

from src.config import settings

from .entities import Coordinate, round_half_up, validate_lat_lng

EARTH_RADIUS_KM = 6_371.0


def haversine_km(
    lat1: float, lng1: float, lat2: float, lng2: float
) -> float:
    """Return the unrounded great-circle distance in **km** between two points."""
    lat1_r, lat2_r = math.radians(lat1), math.radians(lat2)
    dlat = math.radians(lat2 - lat1)
    dlng = math.radians(lng2 - lng1)

    a = (
        math.sin(dlat / 2) ** 2
        + math.cos(lat1_r) * math.cos(lat2_r) * math.sin(dlng / 2) ** 2
    )
    return 2 * EARTH_RADIUS_KM * math.atan2(math.sqrt(a), math.sqrt(1 - a))


@lru_cache(maxsize=settings.distance_cache_size)
def _cached_distance(lat1: float, lng1: float, lat2: float, lng2: float) -> int:
    return round_half_up(haversine_km(lat1, lng1, lat2, lng2))


def distance_km(a: Coordinate, b: Coordinate) -> int:
    """
    Whole-kilometre distance between *a* and *b*.

    Raises ``InvalidCoordinate`` when either side carries a non-finite or
    out-of-range latitude / longitude.
    """
    validate_lat_lng(a.lat, a.lng)
    validate_lat_lng(b.lat, b.lng)
    # Normalise the key so (a, b) and (b, a) share one cache slot.
    key_a, key_b = (a.lat, a.lng), (b.lat, b.lng)
    if key_b < key_a:
        key_a, key_b = key_b, key_a
    return _cached_distance(*key_a, *key_b)


def path_distance_km(coords: Iterable[Coordinate]) -> int:
    """Sum of the rounded legs between consecutive coordinates."""
    total = 0
    previous = None
    for coord in coords:
        if previous is not None:
            total += distance_km(previous, coord)
        previous = coord
    return total


def clear_distance_cache() -> None:
    _cached_distance.cache_clear()


def distance_cache_info() -> dict[str, int]:
    info = _cached_distance.cache_info()
    return {
        "hits": info.hits,
        "misses": info.misses,
        "size": info.currsize,
        "max_size": info.maxsize,
    }

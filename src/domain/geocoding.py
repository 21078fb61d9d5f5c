"""
City-name lookup for Philippine locations.

Unknown names never raise: they fall back to ``DEFAULT_COORDINATE`` (the
geographic centre of the Philippines) so map rendering keeps working, and
a warning is logged because the fallback quietly degrades match quality.
"""

from __future__ import annotations

import logging
import math
from typing import Optional

from .entities import Coordinate

logger = logging.getLogger(__name__)

DEFAULT_COORDINATE = Coordinate(12.8797, 121.7740)

CITY_COORDINATES: dict[str, Coordinate] = {
    # NCR
    "Manila": Coordinate(14.5995, 120.9842),
    "Quezon City": Coordinate(14.6760, 121.0437),
    "Makati": Coordinate(14.5547, 121.0244),
    "Pasig": Coordinate(14.5764, 121.0851),
    "Taguig": Coordinate(14.5176, 121.0509),
    "Caloocan": Coordinate(14.6488, 120.9839),
    "Valenzuela": Coordinate(14.7011, 120.9830),
    # Luzon
    "Baguio City": Coordinate(16.4023, 120.5960),
    "Dagupan City": Coordinate(16.0433, 120.3333),
    "Tuguegarao City": Coordinate(17.6132, 121.7270),
    "Angeles City": Coordinate(15.1450, 120.5887),
    "Olongapo City": Coordinate(14.8292, 120.2824),
    "Cabanatuan City": Coordinate(15.4866, 120.9669),
    "Tarlac City": Coordinate(15.4755, 120.5963),
    "Calamba City": Coordinate(14.2118, 121.1653),
    "Batangas City": Coordinate(13.7565, 121.0583),
    "Lipa City": Coordinate(13.9411, 121.1625),
    "Lucena City": Coordinate(13.9373, 121.6170),
    "Antipolo City": Coordinate(14.5860, 121.1761),
    "Puerto Princesa City": Coordinate(9.7392, 118.7353),
    "Legazpi City": Coordinate(13.1391, 123.7438),
    "Naga City": Coordinate(13.6192, 123.1814),
    # Visayas
    "Iloilo City": Coordinate(10.7202, 122.5621),
    "Bacolod City": Coordinate(10.6407, 122.9688),
    "Roxas City": Coordinate(11.5851, 122.7511),
    "Cebu City": Coordinate(10.3157, 123.8854),
    "Mandaue City": Coordinate(10.3236, 123.9223),
    "Lapu-Lapu City": Coordinate(10.3103, 123.9494),
    "Toledo City": Coordinate(10.3775, 123.6381),
    "Tagbilaran City": Coordinate(9.6500, 123.8500),
    "Dumaguete City": Coordinate(9.3068, 123.3054),
    "Tacloban City": Coordinate(11.2543, 124.9634),
    "Ormoc City": Coordinate(11.0044, 124.6075),
    "Calbayog City": Coordinate(12.0672, 124.6042),
    # Mindanao
    "Zamboanga City": Coordinate(6.9214, 122.0790),
    "Pagadian City": Coordinate(7.8256, 123.4372),
    "Dipolog City": Coordinate(8.5883, 123.3408),
    "Cagayan de Oro": Coordinate(8.4542, 124.6319),
    "Iligan City": Coordinate(8.2280, 124.2452),
    "Malaybalay City": Coordinate(8.1575, 125.1275),
    "Valencia City": Coordinate(7.9069, 125.0942),
    "Davao City": Coordinate(7.0707, 125.6087),
    "Tagum City": Coordinate(7.4478, 125.8037),
    "Digos City": Coordinate(6.7496, 125.3572),
    "Panabo City": Coordinate(7.3078, 125.6844),
    "Mati City": Coordinate(6.9547, 126.2167),
    "General Santos": Coordinate(6.1164, 125.1716),
    "Koronadal City": Coordinate(6.5025, 124.8461),
    "Cotabato City": Coordinate(7.2236, 124.2464),
    "Kidapawan City": Coordinate(7.0083, 125.0894),
    "Butuan City": Coordinate(8.9475, 125.5406),
    "Surigao City": Coordinate(9.7844, 125.4889),
    "Marawi City": Coordinate(7.9986, 124.2928),
}


def lookup_location(name: Optional[str]) -> Optional[Coordinate]:
    """
    Return the coordinate for *name*, or ``None`` when it is unknown.

    Matching order: exact key, then the first key that contains (or is
    contained in) *name* case-insensitively, or shares its first word.
    """
    if not name or not name.strip():
        return None
    name = name.strip()
    if name in CITY_COORDINATES:
        return CITY_COORDINATES[name]

    needle = name.lower()
    first_word = needle.split()[0]
    for key, coord in CITY_COORDINATES.items():
        key_lower = key.lower()
        if (
            needle in key_lower
            or key_lower in needle
            or key_lower.split()[0] == first_word
        ):
            return coord
    return None


def resolve_location(name: Optional[str]) -> Coordinate:
    """Like ``lookup_location`` but falls back to ``DEFAULT_COORDINATE``."""
    coord = lookup_location(name)
    if coord is None:
        logger.warning(
            "Unresolved location %r; falling back to default coordinate", name
        )
        return DEFAULT_COORDINATE
    return coord


def reference_coordinate(
    name: Optional[str] = None,
    lat: Optional[float] = None,
    lng: Optional[float] = None,
) -> Coordinate:
    """Explicit finite ``lat`` / ``lng`` win; otherwise resolve by *name*."""
    if _is_finite(lat) and _is_finite(lng):
        return Coordinate(float(lat), float(lng))
    return resolve_location(name)


def _is_finite(value) -> bool:
    if value is None or isinstance(value, bool):
        return False
    try:
        return math.isfinite(float(value))
    except (TypeError, ValueError):
        return False

"""
Domain value objects for the backload engine.

Every type here is an immutable snapshot: the engine never mutates a
listing or a waypoint, it only builds new results from them.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Optional

from .enums import ListingStatus, VehicleClass, WaypointKind


class EngineError(Exception):
    """Base class for errors surfaced by the backload engine."""


class InvalidCoordinate(EngineError, ValueError):
    """Raised when a latitude / longitude is non-finite or out of range."""


def round_half_up(value: float) -> int:
    """Nearest integer with exact halves rounded towards +inf (2.5 -> 3, -2.5 -> -2)."""
    return math.floor(value + 0.5)


# ── Value Objects ─────────────────────────────────────────────────────


@dataclass(frozen=True)
class Coordinate:
    lat: float
    lng: float

    def __post_init__(self) -> None:
        validate_lat_lng(self.lat, self.lng)


def validate_lat_lng(lat, lng) -> None:
    """Raise ``InvalidCoordinate`` unless both values are usable degrees."""
    for label, value, bound in (("lat", lat, 90.0), ("lng", lng, 180.0)):
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise InvalidCoordinate(f"{label} must be a number, got {value!r}")
        if not math.isfinite(value):
            raise InvalidCoordinate(f"{label} must be finite, got {value!r}")
        if not -bound <= value <= bound:
            raise InvalidCoordinate(
                f"{label} must be within [-{bound:g}, {bound:g}], got {value!r}"
            )


@dataclass(frozen=True)
class Waypoint:
    name: str
    coordinate: Coordinate
    kind: WaypointKind
    cargo_ref: Optional[str] = None


@dataclass(frozen=True)
class CargoListing:
    id: str
    origin_coord: Coordinate
    dest_coord: Coordinate
    status: ListingStatus = ListingStatus.OPEN
    asking_price: int = 0
    weight: float = 0.0
    cargo_type: str = ""
    route_distance_km: Optional[float] = None
    origin_name: str = ""
    dest_name: str = ""

    @property
    def is_open(self) -> bool:
        return self.status == ListingStatus.OPEN


@dataclass(frozen=True)
class CandidateRoute:
    origin_coord: Coordinate
    dest_coord: Coordinate
    origin_name: str = "Origin"
    dest_name: str = "Destination"


# ── Results ───────────────────────────────────────────────────────────


@dataclass(frozen=True)
class MatchResult:
    listing: CargoListing
    detour_km: int
    match_score: int


@dataclass(frozen=True)
class RouteResult:
    ordered_waypoints: tuple[Waypoint, ...] = ()
    total_distance_km: int = 0
    original_distance_km: int = 0
    savings_km: int = 0
    savings_percent: int = 0


@dataclass(frozen=True)
class FuelEstimate:
    distance_km: float
    liters_used: float
    cost: int
    vehicle: VehicleClass = VehicleClass.UNKNOWN


@dataclass(frozen=True)
class EfficiencyScore:
    score: int
    fuel_cost: int
    net_earnings: float
    earnings_per_km: float


@dataclass(frozen=True)
class BackloadPlan:
    matches: tuple[MatchResult, ...] = ()
    selected: tuple[MatchResult, ...] = ()
    route: RouteResult = field(default_factory=RouteResult)
    fuel: Optional[FuelEstimate] = None
    duration: str = "0 min"
    fuel_savings: int = 0
    efficiency: Optional[EfficiencyScore] = None

"""Pydantic request / response schemas for the REST API."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field, model_validator

from src.domain.entities import (
    BackloadPlan,
    CandidateRoute,
    CargoListing,
    Coordinate,
    EfficiencyScore,
    FuelEstimate,
    MatchResult,
    RouteResult,
    Waypoint,
)
from src.domain.enums import ListingStatus, WaypointKind
from src.domain.geocoding import reference_coordinate
from src.domain.routing import leg_distances_km


# ── Requests ──────────────────────────────────────────────────────────


class LocationIn(BaseModel):
    """A place given by explicit coordinates, a city name, or both."""

    name: Optional[str] = Field(None, max_length=120)
    lat: Optional[float] = Field(None, ge=-90, le=90)
    lng: Optional[float] = Field(None, ge=-180, le=180)

    @model_validator(mode="after")
    def _name_or_coordinates(self) -> "LocationIn":
        if not self.name and (self.lat is None or self.lng is None):
            raise ValueError("either a name or both lat and lng are required")
        return self

    def to_coordinate(self) -> Coordinate:
        return reference_coordinate(self.name, self.lat, self.lng)

    @property
    def label(self) -> str:
        return self.name or f"{self.lat}, {self.lng}"


class ListingIn(BaseModel):
    id: str = Field(..., min_length=1, max_length=64)
    origin: LocationIn
    destination: LocationIn
    status: ListingStatus = ListingStatus.OPEN
    asking_price: int = Field(0, ge=0)
    weight: float = Field(0.0, ge=0)
    cargo_type: str = ""
    route_distance_km: Optional[float] = Field(None, ge=0)

    def to_domain(self) -> CargoListing:
        return CargoListing(
            id=self.id,
            origin_coord=self.origin.to_coordinate(),
            dest_coord=self.destination.to_coordinate(),
            status=self.status,
            asking_price=self.asking_price,
            weight=self.weight,
            cargo_type=self.cargo_type,
            route_distance_km=self.route_distance_km,
            origin_name=self.origin.label,
            dest_name=self.destination.label,
        )


class MatchRequest(BaseModel):
    origin: LocationIn
    destination: LocationIn
    listings: list[ListingIn] = []
    max_detour_km: Optional[float] = Field(
        None,
        description="Detour budget in km; bounded to the configured range.",
    )

    def to_route(self) -> CandidateRoute:
        return CandidateRoute(
            origin_coord=self.origin.to_coordinate(),
            dest_coord=self.destination.to_coordinate(),
            origin_name=self.origin.label,
            dest_name=self.destination.label,
        )


class PlanRequest(MatchRequest):
    vehicle: Optional[str] = Field(
        None, max_length=120, description='Free-text label, e.g. "6W Dropside".'
    )
    limit: Optional[int] = Field(None, ge=0, le=10)


class WaypointIn(BaseModel):
    name: str = ""
    lat: float = Field(..., ge=-90, le=90)
    lng: float = Field(..., ge=-180, le=180)
    kind: WaypointKind
    cargo_ref: Optional[str] = None

    def to_domain(self) -> Waypoint:
        return Waypoint(
            name=self.name,
            coordinate=Coordinate(self.lat, self.lng),
            kind=self.kind,
            cargo_ref=self.cargo_ref,
        )


class OptimizeRequest(BaseModel):
    waypoints: list[WaypointIn] = []


# ── Responses ─────────────────────────────────────────────────────────


class CoordinateOut(BaseModel):
    lat: float
    lng: float


class ListingOut(BaseModel):
    id: str
    origin: str
    destination: str
    origin_coord: CoordinateOut
    dest_coord: CoordinateOut
    status: ListingStatus
    asking_price: int
    weight: float
    cargo_type: str
    route_distance_km: Optional[float] = None

    @classmethod
    def from_domain(cls, listing: CargoListing) -> "ListingOut":
        return cls(
            id=listing.id,
            origin=listing.origin_name,
            destination=listing.dest_name,
            origin_coord=_coord(listing.origin_coord),
            dest_coord=_coord(listing.dest_coord),
            status=listing.status,
            asking_price=listing.asking_price,
            weight=listing.weight,
            cargo_type=listing.cargo_type,
            route_distance_km=listing.route_distance_km,
        )


class MatchOut(BaseModel):
    listing: ListingOut
    detour_km: int
    match_score: int

    @classmethod
    def from_domain(cls, match: MatchResult) -> "MatchOut":
        return cls(
            listing=ListingOut.from_domain(match.listing),
            detour_km=match.detour_km,
            match_score=match.match_score,
        )


class MatchResponse(BaseModel):
    max_detour_km: float
    total: int
    matches: list[MatchOut] = []


class WaypointOut(BaseModel):
    name: str
    lat: float
    lng: float
    kind: WaypointKind
    cargo_ref: Optional[str] = None


class RouteResultOut(BaseModel):
    waypoints: list[WaypointOut] = []
    legs_km: list[int] = []
    total_distance_km: int
    original_distance_km: int
    savings_km: int
    savings_percent: int

    @classmethod
    def from_domain(cls, result: RouteResult) -> "RouteResultOut":
        return cls(
            waypoints=[
                WaypointOut(
                    name=w.name,
                    lat=w.coordinate.lat,
                    lng=w.coordinate.lng,
                    kind=w.kind,
                    cargo_ref=w.cargo_ref,
                )
                for w in result.ordered_waypoints
            ],
            legs_km=leg_distances_km(result.ordered_waypoints),
            total_distance_km=result.total_distance_km,
            original_distance_km=result.original_distance_km,
            savings_km=result.savings_km,
            savings_percent=result.savings_percent,
        )


class FuelEstimateOut(BaseModel):
    distance_km: float
    vehicle: str
    liters_used: float
    cost: int
    duration: Optional[str] = None

    @classmethod
    def from_domain(
        cls, estimate: FuelEstimate, duration: Optional[str] = None
    ) -> "FuelEstimateOut":
        return cls(
            distance_km=estimate.distance_km,
            vehicle=estimate.vehicle.value,
            liters_used=estimate.liters_used,
            cost=estimate.cost,
            duration=duration,
        )


class EfficiencyOut(BaseModel):
    score: int
    fuel_cost: int
    net_earnings: float
    earnings_per_km: float

    @classmethod
    def from_domain(cls, result: EfficiencyScore) -> "EfficiencyOut":
        return cls(
            score=result.score,
            fuel_cost=result.fuel_cost,
            net_earnings=result.net_earnings,
            earnings_per_km=result.earnings_per_km,
        )


class PlanResponse(BaseModel):
    matches: list[MatchOut] = []
    selected: list[MatchOut] = []
    route: RouteResultOut
    fuel: FuelEstimateOut
    fuel_savings: int
    efficiency: EfficiencyOut

    @classmethod
    def from_domain(cls, plan: BackloadPlan) -> "PlanResponse":
        return cls(
            matches=[MatchOut.from_domain(m) for m in plan.matches],
            selected=[MatchOut.from_domain(m) for m in plan.selected],
            route=RouteResultOut.from_domain(plan.route),
            fuel=FuelEstimateOut.from_domain(plan.fuel, plan.duration),
            fuel_savings=plan.fuel_savings,
            efficiency=EfficiencyOut.from_domain(plan.efficiency),
        )


class LocationOut(BaseModel):
    name: str
    resolved: bool
    coordinate: CoordinateOut


class HealthResponse(BaseModel):
    status: str = "ok"


def _coord(coord: Coordinate) -> CoordinateOut:
    return CoordinateOut(lat=coord.lat, lng=coord.lng)

"""
Backload planning facade.

Runs the whole pipeline for one trucker request:

    find_matches -> select_top -> build_waypoints -> optimize_route
                 -> fuel / duration / savings / efficiency annotations
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from src.config import Settings, settings as default_settings

from .entities import BackloadPlan, CandidateRoute, CargoListing
from .fuel import (
    VehicleLike,
    as_vehicle_class,
    estimate_fuel,
    format_duration,
    fuel_savings,
)
from .matching import find_matches, select_top
from .routing import build_waypoints, optimize_route
from .scoring import efficiency

logger = logging.getLogger(__name__)


class BackloadPlanner:
    """High-level API used by the HTTP layer."""

    def __init__(self, config: Optional[Settings] = None):
        self.config = config or default_settings

    def plan(
        self,
        route: CandidateRoute,
        listings: Iterable[CargoListing],
        vehicle: VehicleLike = None,
        limit: Optional[int] = None,
        max_detour_km: Optional[float] = None,
    ) -> BackloadPlan:
        cfg = self.config
        vehicle_class = as_vehicle_class(vehicle)
        limit = cfg.max_backload_stops if limit is None else limit
        detour = cfg.max_detour_km if max_detour_km is None else max_detour_km

        matches = find_matches(route, listings, detour)
        selected = select_top(matches, limit)
        result = optimize_route(build_waypoints(route, selected, limit))

        distance = result.total_distance_km
        earnings = sum(m.listing.asking_price for m in selected)
        plan = BackloadPlan(
            matches=tuple(matches),
            selected=tuple(selected),
            route=result,
            fuel=estimate_fuel(distance, vehicle_class, cfg.fuel_price_per_liter),
            duration=format_duration(distance, cfg.avg_speed_kmh),
            fuel_savings=fuel_savings(
                result.savings_km,
                cfg.fuel_price_per_liter,
                cfg.savings_km_per_liter,
            ),
            efficiency=efficiency(
                earnings,
                distance,
                vehicle_class,
                cfg.target_earnings_per_km,
                cfg.fuel_price_per_liter,
            ),
        )
        logger.info(
            "Backload plan: %d matches, %d selected, %d km (saved %d km)",
            len(matches),
            len(selected),
            distance,
            result.savings_km,
        )
        return plan

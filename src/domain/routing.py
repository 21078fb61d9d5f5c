"""
Route Sequencing (nearest-neighbour heuristic)
==============================================

1. **Pinned start**  -- ``waypoints[0]`` is always visited first.
2. **Pinned end**    -- the DESTINATION waypoint (the last one, if the
   input holds several) is held back wherever it sits and visited last,
   so the greedy search builds a path between fixed endpoints.  Lists
   without a DESTINATION get a free tour.
3. **Greedy step**   -- from the current stop, move to the nearest
   unvisited waypoint (earliest in input order on ties).

Savings are reported against the naive sequential order of the input.

Complexity
----------
O(n^2) distance evaluations for n waypoints.  Typical n <= 8 (origin, up
to three pickup/drop-off pairs, destination).

**Note:** nearest-neighbour does NOT guarantee the shortest path and can
be arbitrarily bad on pathological inputs.  It also does not enforce
pickup-before-drop-off precedence.
"""

from __future__ import annotations

import logging
from typing import Sequence

from .distance import distance_km, path_distance_km
from .entities import (
    CandidateRoute,
    MatchResult,
    RouteResult,
    Waypoint,
    round_half_up,
)
from .enums import WaypointKind

logger = logging.getLogger(__name__)


def optimize_route(waypoints: Sequence[Waypoint]) -> RouteResult:
    """Reorder *waypoints* to reduce total great-circle distance."""
    stops = list(waypoints)
    original = path_distance_km(w.coordinate for w in stops)

    if len(stops) <= 2:
        return RouteResult(
            ordered_waypoints=tuple(stops),
            total_distance_km=original,
            original_distance_km=original,
            savings_km=0,
            savings_percent=0,
        )

    unvisited = stops[1:]
    pinned_end = None
    for idx in range(len(unvisited) - 1, -1, -1):
        if unvisited[idx].kind == WaypointKind.DESTINATION:
            pinned_end = unvisited.pop(idx)
            break

    visited = [stops[0]]
    total = 0
    while unvisited:
        current = visited[-1]
        nearest_idx, nearest_dist = _nearest(current, unvisited)
        total += nearest_dist
        visited.append(unvisited.pop(nearest_idx))

    if pinned_end is not None:
        total += distance_km(visited[-1].coordinate, pinned_end.coordinate)
        visited.append(pinned_end)

    savings = max(0, original - total)
    percent = round_half_up(savings / original * 100) if original > 0 else 0

    logger.debug(
        "Route sequencing: %d stops, %d km -> %d km", len(stops), original, total
    )
    return RouteResult(
        ordered_waypoints=tuple(visited),
        total_distance_km=total,
        original_distance_km=original,
        savings_km=savings,
        savings_percent=percent,
    )


def _nearest(current: Waypoint, candidates: list[Waypoint]) -> tuple[int, int]:
    best_idx, best_dist = 0, None
    for idx, candidate in enumerate(candidates):
        dist = distance_km(current.coordinate, candidate.coordinate)
        if best_dist is None or dist < best_dist:
            best_idx, best_dist = idx, dist
    return best_idx, best_dist


def build_waypoints(
    route: CandidateRoute, matches: Sequence[MatchResult], limit: int = 3
) -> list[Waypoint]:
    """
    Origin, then a pickup / drop-off pair for each of the first *limit*
    matches, then the destination.
    """
    waypoints = [
        Waypoint(route.origin_name, route.origin_coord, WaypointKind.ORIGIN)
    ]
    for match in matches[: max(0, limit)]:
        listing = match.listing
        waypoints.append(
            Waypoint(
                f"Pickup: {listing.origin_name or listing.id}",
                listing.origin_coord,
                WaypointKind.PICKUP,
                cargo_ref=listing.id,
            )
        )
        waypoints.append(
            Waypoint(
                f"Dropoff: {listing.dest_name or listing.id}",
                listing.dest_coord,
                WaypointKind.DROPOFF,
                cargo_ref=listing.id,
            )
        )
    waypoints.append(
        Waypoint(route.dest_name, route.dest_coord, WaypointKind.DESTINATION)
    )
    return waypoints


def leg_distances_km(waypoints: Sequence[Waypoint]) -> list[int]:
    """Per-leg distances for display between consecutive stops."""
    return [
        distance_km(a.coordinate, b.coordinate)
        for a, b in zip(waypoints, waypoints[1:])
    ]

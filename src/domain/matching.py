"""
Backload Matching Algorithm
===========================

A trucker driving ``origin -> destination`` usually returns empty.  A
backload is an open listing whose pickup sits near the trucker's
destination and whose drop-off sits near the trucker's origin.

Detour (per listing)
--------------------
  detour = d(route.dest, listing.origin) + d(listing.dest, route.origin)

A listing is eligible when ``detour <= max_detour_km`` (inclusive) and is
scored ``round(100 - detour / max_detour_km x 100)`` clamped to [0, 100].

Complexity
----------
O(N) distance evaluations for N listings, plus O(N log N) for the sort.
No road topology is consulted, so the ranking can be refreshed on every
listing change.
"""

from __future__ import annotations

import logging
import math
from typing import Iterable, Sequence

from .distance import distance_km
from .entities import CandidateRoute, CargoListing, MatchResult, round_half_up

logger = logging.getLogger(__name__)

DEFAULT_MAX_DETOUR_KM = 50.0


def listing_detour_km(route: CandidateRoute, listing: CargoListing) -> int:
    """Extra driving needed to serve *listing* on the way home."""
    to_pickup = distance_km(route.dest_coord, listing.origin_coord)
    from_delivery = distance_km(listing.dest_coord, route.origin_coord)
    return to_pickup + from_delivery


def match_score(detour_km: float, max_detour_km: float) -> int:
    raw = round_half_up(100 - (detour_km / max_detour_km) * 100)
    return max(0, min(100, raw))


def find_matches(
    route: CandidateRoute,
    listings: Iterable[CargoListing],
    max_detour_km: float = DEFAULT_MAX_DETOUR_KM,
) -> list[MatchResult]:
    """
    Rank the open listings of *listings* as backloads for *route*.

    Returns an empty list when nothing is eligible; an empty pool is not
    an error.
    """
    if max_detour_km <= 0:
        raise ValueError("max_detour_km must be positive")

    matches: list[MatchResult] = []
    considered = 0
    for listing in listings:
        if not listing.is_open:
            continue
        considered += 1
        detour = listing_detour_km(route, listing)
        if detour > max_detour_km:
            continue
        matches.append(
            MatchResult(
                listing=listing,
                detour_km=detour,
                match_score=match_score(detour, max_detour_km),
            )
        )

    matches.sort(key=lambda m: (-m.match_score, m.detour_km))
    logger.debug(
        "Backload matching: %d/%d open listings within %.0f km",
        len(matches),
        considered,
        max_detour_km,
    )
    return matches


def select_top(matches: Sequence[MatchResult], limit: int = 3) -> list[MatchResult]:
    """The caller-side pick of the best *limit* matches."""
    if limit <= 0:
        return []
    return list(matches[:limit])


def clamp_detour_km(
    value,
    fallback: float = DEFAULT_MAX_DETOUR_KM,
    lower: float = 10.0,
    upper: float = 200.0,
) -> float:
    """Bound a user-supplied detour budget; junk input yields *fallback*."""
    try:
        parsed = float(value)
    except (TypeError, ValueError):
        return fallback
    if not math.isfinite(parsed):
        return fallback
    return max(lower, min(upper, parsed))

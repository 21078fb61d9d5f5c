"""
Backload endpoints
==================

POST /api/v1/backload/matches -- rank open listings as backloads for a route
POST /api/v1/backload/plan    -- matches + optimized route + cost annotations
"""

from fastapi import APIRouter, Depends, Request

from src.api.dependencies import get_planner, get_settings
from src.api.middleware import limiter
from src.api.schemas import (
    MatchOut,
    MatchRequest,
    MatchResponse,
    PlanRequest,
    PlanResponse,
)
from src.config import Settings
from src.domain.matching import clamp_detour_km, find_matches
from src.domain.planner import BackloadPlanner

router = APIRouter(prefix="/backload", tags=["backload"])


def _detour_budget(requested, cfg: Settings) -> float:
    if requested is None:
        return cfg.max_detour_km
    return clamp_detour_km(
        requested, cfg.max_detour_km, cfg.min_detour_km, cfg.max_detour_cap_km
    )


@router.post(
    "/matches",
    response_model=MatchResponse,
    summary="Rank backload opportunities for a planned route",
)
@limiter.limit("100/minute")
async def get_matches(
    request: Request,
    body: MatchRequest,
    cfg: Settings = Depends(get_settings),
):
    budget = _detour_budget(body.max_detour_km, cfg)
    matches = find_matches(
        body.to_route(), [listing.to_domain() for listing in body.listings], budget
    )
    return MatchResponse(
        max_detour_km=budget,
        total=len(matches),
        matches=[MatchOut.from_domain(m) for m in matches],
    )


@router.post(
    "/plan",
    response_model=PlanResponse,
    summary="Match backloads and sequence them into one route",
    description=(
        "Selects the best matches (default 3), orders origin, pickups, "
        "drop-offs and destination with a nearest-neighbour heuristic, and "
        "annotates the route with fuel, duration and efficiency estimates."
    ),
)
@limiter.limit("100/minute")
async def plan_backload(
    request: Request,
    body: PlanRequest,
    planner: BackloadPlanner = Depends(get_planner),
    cfg: Settings = Depends(get_settings),
):
    plan = planner.plan(
        body.to_route(),
        [listing.to_domain() for listing in body.listings],
        vehicle=body.vehicle,
        limit=body.limit,
        max_detour_km=_detour_budget(body.max_detour_km, cfg),
    )
    return PlanResponse.from_domain(plan)

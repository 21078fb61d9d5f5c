"""
Route endpoints
===============

POST /api/v1/routes/optimize -- reorder an arbitrary waypoint list
"""

from fastapi import APIRouter, Request

from src.api.middleware import limiter
from src.api.schemas import OptimizeRequest, RouteResultOut
from src.domain.routing import optimize_route

router = APIRouter(prefix="/routes", tags=["routes"])


@router.post(
    "/optimize",
    response_model=RouteResultOut,
    summary="Nearest-neighbour ordering of a waypoint list",
    description=(
        "The first waypoint is kept as the start.  The waypoint of kind "
        "``destination`` is kept as the end, wherever it appears."
    ),
)
@limiter.limit("100/minute")
async def optimize(request: Request, body: OptimizeRequest):
    result = optimize_route([w.to_domain() for w in body.waypoints])
    return RouteResultOut.from_domain(result)

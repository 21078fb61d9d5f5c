"""
Admin / observability endpoints
===============================

GET /api/v1/admin/health            -- simple health check
GET /api/v1/admin/locations/resolve -- debug a city-name lookup
GET /api/v1/admin/distance-cache    -- hit / miss counters of the distance LRU

The health check is left unthrottled; load balancers poll it.
"""

from fastapi import APIRouter, Query, Request

from src.api.middleware import limiter
from src.api.schemas import CoordinateOut, HealthResponse, LocationOut
from src.domain.distance import distance_cache_info
from src.domain.geocoding import lookup_location, resolve_location

router = APIRouter(prefix="/admin", tags=["admin"])


@router.get(
    "/locations/resolve",
    response_model=LocationOut,
    summary="Resolve a city name to coordinates",
)
@limiter.limit("100/minute")
async def resolve(request: Request, name: str = Query(..., max_length=120)):
    resolved = lookup_location(name) is not None
    coord = resolve_location(name)
    return LocationOut(
        name=name,
        resolved=resolved,
        coordinate=CoordinateOut(lat=coord.lat, lng=coord.lng),
    )


@router.get("/distance-cache", summary="Distance cache statistics")
@limiter.limit("100/minute")
async def distance_cache(request: Request):
    return distance_cache_info()


@router.get("/health", response_model=HealthResponse, summary="Health check")
async def health():
    return HealthResponse()

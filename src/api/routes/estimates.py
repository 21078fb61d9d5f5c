"""
Estimate endpoints
==================

GET /api/v1/estimates/fuel       -- fuel use, cost and drive time
GET /api/v1/estimates/efficiency -- 0-100 efficiency score for a job
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, Request

from src.api.dependencies import get_settings
from src.api.middleware import limiter
from src.api.schemas import EfficiencyOut, FuelEstimateOut
from src.config import Settings
from src.domain.fuel import estimate_fuel, format_duration
from src.domain.scoring import efficiency

router = APIRouter(prefix="/estimates", tags=["estimates"])


@router.get("/fuel", response_model=FuelEstimateOut, summary="Fuel cost estimate")
@limiter.limit("100/minute")
async def fuel(
    request: Request,
    distance_km: float = Query(..., ge=0),
    vehicle: Optional[str] = Query(None, max_length=120),
    price_per_liter: Optional[float] = Query(None, gt=0),
    cfg: Settings = Depends(get_settings),
):
    price = price_per_liter or cfg.fuel_price_per_liter
    return FuelEstimateOut.from_domain(
        estimate_fuel(distance_km, vehicle, price),
        format_duration(distance_km, cfg.avg_speed_kmh),
    )


@router.get(
    "/efficiency", response_model=EfficiencyOut, summary="Route efficiency score"
)
@limiter.limit("100/minute")
async def route_efficiency(
    request: Request,
    earnings: float = Query(..., ge=0),
    distance_km: float = Query(..., ge=0),
    vehicle: Optional[str] = Query(None, max_length=120),
    cfg: Settings = Depends(get_settings),
):
    result = efficiency(
        earnings,
        distance_km,
        vehicle,
        cfg.target_earnings_per_km,
        cfg.fuel_price_per_liter,
    )
    return EfficiencyOut.from_domain(result)

"""
Route efficiency scoring.

Score = clamp(round(Net_Earnings_Per_KM / Target x 100), 0, 100)

with ``Target`` = PHP 20 net per km, the rate treated as a perfect run.
"""

from __future__ import annotations

from .entities import EfficiencyScore, round_half_up
from .fuel import DEFAULT_FUEL_PRICE, VehicleLike, fuel_cost

TARGET_EARNINGS_PER_KM = 20.0


def efficiency(
    earnings: float,
    distance_km: float,
    vehicle: VehicleLike,
    target_per_km: float = TARGET_EARNINGS_PER_KM,
    price_per_liter: float = DEFAULT_FUEL_PRICE,
) -> EfficiencyScore:
    fuel = fuel_cost(distance_km, vehicle, price_per_liter)
    net = earnings - fuel

    # Zero-length trips have no meaningful rate; score them 0.
    if distance_km <= 0:
        return EfficiencyScore(
            score=0, fuel_cost=fuel, net_earnings=net, earnings_per_km=0.0
        )

    per_km = net / distance_km
    score = max(0, min(100, round_half_up(per_km / target_per_km * 100)))
    return EfficiencyScore(
        score=score,
        fuel_cost=fuel,
        net_earnings=net,
        earnings_per_km=round(per_km, 2),
    )

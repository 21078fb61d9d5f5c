"""
Fuel & Duration Estimator
=========================

Formula
-------
Cost = round((Distance / Km_Per_Liter) x Price_Per_Liter)

* **Km_Per_Liter** comes from ``VehicleClass`` (see ``enums.py``); labels
  are resolved once via ``VehicleClass.from_label``.
* Duration assumes a constant average speed (default 50 km/h).

Complexity: O(1) per call.
"""

from __future__ import annotations

import math
from typing import Union

from .entities import FuelEstimate, round_half_up
from .enums import VehicleClass

DEFAULT_FUEL_PRICE = 65.0  # PHP / liter
DEFAULT_AVG_SPEED_KMH = 50.0

VehicleLike = Union[VehicleClass, str, None]


def as_vehicle_class(vehicle: VehicleLike) -> VehicleClass:
    if isinstance(vehicle, VehicleClass):
        return vehicle
    return VehicleClass.from_label(vehicle)


def fuel_cost(
    distance_km: float,
    vehicle: VehicleLike,
    price_per_liter: float = DEFAULT_FUEL_PRICE,
) -> int:
    """Peso cost of driving *distance_km* in *vehicle*."""
    kmpl = as_vehicle_class(vehicle).km_per_liter
    return round_half_up((distance_km / kmpl) * price_per_liter)


def estimate_fuel(
    distance_km: float,
    vehicle: VehicleLike,
    price_per_liter: float = DEFAULT_FUEL_PRICE,
) -> FuelEstimate:
    vehicle_class = as_vehicle_class(vehicle)
    liters = distance_km / vehicle_class.km_per_liter
    return FuelEstimate(
        distance_km=distance_km,
        liters_used=round(liters, 2),
        cost=fuel_cost(distance_km, vehicle_class, price_per_liter),
        vehicle=vehicle_class,
    )


def fuel_savings(
    distance_saved_km: float,
    price_per_liter: float = DEFAULT_FUEL_PRICE,
    km_per_liter: float = 4.0,
) -> int:
    """Peso value of *distance_saved_km* at a flat truck consumption."""
    if km_per_liter <= 0:
        raise ValueError("km_per_liter must be positive")
    return round_half_up((distance_saved_km / km_per_liter) * price_per_liter)


def estimate_duration_minutes(
    distance_km: float, avg_speed_kmh: float = DEFAULT_AVG_SPEED_KMH
) -> int:
    if avg_speed_kmh <= 0:
        raise ValueError("avg_speed_kmh must be positive")
    return round_half_up(distance_km / avg_speed_kmh * 60)


def format_duration(
    distance_km: float, avg_speed_kmh: float = DEFAULT_AVG_SPEED_KMH
) -> str:
    """``"Xh Ym"`` for trips of an hour or more, ``"Y min"`` otherwise."""
    if avg_speed_kmh <= 0:
        raise ValueError("avg_speed_kmh must be positive")
    hours = distance_km / avg_speed_kmh
    if hours < 1:
        return f"{round_half_up(hours * 60)} min"
    whole = math.floor(hours)
    minutes = round_half_up((hours - whole) * 60)
    if minutes == 60:
        whole, minutes = whole + 1, 0
    return f"{whole}h {minutes}m"

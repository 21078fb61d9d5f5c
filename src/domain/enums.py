"""Domain enumerations and the vehicle fuel-efficiency table."""

from __future__ import annotations

import enum
from typing import Optional


class ListingStatus(str, enum.Enum):
    OPEN = "open"
    NEGOTIATING = "negotiating"
    CONTRACTED = "contracted"
    IN_TRANSIT = "in_transit"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"


class WaypointKind(str, enum.Enum):
    ORIGIN = "origin"
    DESTINATION = "destination"
    PICKUP = "pickup"
    DROPOFF = "dropoff"


class VehicleClass(str, enum.Enum):
    MULTICAB = "MULTICAB"
    L300 = "L300"
    H100 = "H100"
    FOUR_WHEELER = "4W"
    SIX_WHEELER = "6W"
    TEN_WHEELER = "10W"
    TWELVE_WHEELER = "12W"
    PRIME_MOVER = "PRIME_MOVER"
    UNKNOWN = "UNKNOWN"

    @property
    def km_per_liter(self) -> float:
        return FUEL_EFFICIENCY_KM_PER_LITER[self]

    @classmethod
    def from_label(cls, label: Optional[str]) -> "VehicleClass":
        """
        Resolve a free-text listing label such as ``"10W Wing Van (12-15
        tons)"`` to a vehicle class.

        Every key of ``LABEL_KEYWORDS`` is tried in order and the last one
        contained in *label* wins, so ``"L300 4W"`` resolves to 4W.
        Labels with no known keyword resolve to ``UNKNOWN``.
        """
        resolved = cls.UNKNOWN
        if not label:
            return resolved
        for keyword, vehicle in LABEL_KEYWORDS:
            if keyword in label:
                resolved = vehicle
        return resolved


# Ordered: later entries win when several keywords match one label.
LABEL_KEYWORDS: tuple[tuple[str, VehicleClass], ...] = (
    ("Multicab", VehicleClass.MULTICAB),
    ("L300", VehicleClass.L300),
    ("H100", VehicleClass.H100),
    ("4W", VehicleClass.FOUR_WHEELER),
    ("6W", VehicleClass.SIX_WHEELER),
    ("10W", VehicleClass.TEN_WHEELER),
    ("12W", VehicleClass.TWELVE_WHEELER),
    ("Prime Mover", VehicleClass.PRIME_MOVER),
)

FUEL_EFFICIENCY_KM_PER_LITER: dict[VehicleClass, float] = {
    VehicleClass.MULTICAB: 8.0,
    VehicleClass.L300: 7.0,
    VehicleClass.H100: 7.0,
    VehicleClass.FOUR_WHEELER: 6.0,
    VehicleClass.SIX_WHEELER: 4.0,
    VehicleClass.TEN_WHEELER: 3.0,
    VehicleClass.TWELVE_WHEELER: 2.5,
    VehicleClass.PRIME_MOVER: 2.0,
    VehicleClass.UNKNOWN: 5.0,
}

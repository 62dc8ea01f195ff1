"""Circular hazard zones."""

from dataclasses import dataclass

from routerisk.exceptions import InvalidHazardZone
from routerisk.geo.coordinate import Coordinate


@dataclass(frozen=True)
class HazardZone:
    """A named disk of influence around a center point."""

    center: Coordinate
    radius_km: float
    name: str = ""

    def __post_init__(self) -> None:
        if not self.radius_km > 0:
            raise InvalidHazardZone(f"Radius must be positive (got {self.radius_km})")

    def __str__(self) -> str:
        return f"{self.name}: Center {self.center}, Radius {self.radius_km:.2f} km"

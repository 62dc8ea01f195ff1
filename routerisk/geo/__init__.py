"""Geographic value types: coordinates, hazard zones and routes."""

from routerisk.geo.coordinate import Coordinate
from routerisk.geo.route import Route
from routerisk.geo.zones import HazardZone

__all__ = ["Coordinate", "HazardZone", "Route"]

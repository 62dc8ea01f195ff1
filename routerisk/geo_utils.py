"""Shared geospatial utility functions."""

import math
from typing import TYPE_CHECKING

from pyproj import Geod

if TYPE_CHECKING:
    from routerisk.geo.coordinate import Coordinate

# Mean Earth radius for the spherical model
EARTH_RADIUS_KM = 6371.0


def haversine_km(
    origin: "Coordinate",
    target: "Coordinate",
    earth_radius_km: float = EARTH_RADIUS_KM,
) -> float:
    """Great-circle distance between two coordinates using the haversine formula.

    Args:
        origin: First coordinate.
        target: Second coordinate.
        earth_radius_km: Radius of the sphere in kilometers.

    Returns:
        Distance in kilometers.
    """
    lat1, lon1 = math.radians(origin.latitude), math.radians(origin.longitude)
    lat2, lon2 = math.radians(target.latitude), math.radians(target.longitude)
    dlat = lat2 - lat1
    dlon = lon2 - lon1

    a = math.sin(dlat / 2) * math.sin(dlat / 2) + (
        math.cos(lat1) * math.cos(lat2) * math.sin(dlon / 2) * math.sin(dlon / 2)
    )
    # Rounding can push a just past 1.0 for near-antipodal points
    a = min(1.0, max(0.0, a))
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return earth_radius_km * c


def arithmetic_midpoint(a: "Coordinate", b: "Coordinate") -> tuple[float, float]:
    """Average two coordinates in degree space.

    Only accurate for short segments away from the antimeridian.

    Returns:
        (latitude, longitude) of the midpoint.
    """
    return (a.latitude + b.latitude) / 2.0, (a.longitude + b.longitude) / 2.0


def geodesic_midpoint(
    a: "Coordinate",
    b: "Coordinate",
    earth_radius_km: float = EARTH_RADIUS_KM,
) -> tuple[float, float]:
    """Midpoint along the great circle between two coordinates.

    Args:
        a: Segment start.
        b: Segment end.
        earth_radius_km: Radius of the sphere in kilometers.

    Returns:
        (latitude, longitude) of the midpoint, longitude in [-180, 180].
    """
    geod = get_sphere_geod(earth_radius_km)
    azimuth, _, distance_m = geod.inv(a.longitude, a.latitude, b.longitude, b.latitude)
    lon, lat, _ = geod.fwd(a.longitude, a.latitude, azimuth, distance_m / 2.0)
    # fwd can overshoot the pole/antimeridian bounds by a rounding error
    lat = max(-90.0, min(90.0, lat))
    lon = max(-180.0, min(180.0, lon))
    return lat, lon


def get_sphere_geod(earth_radius_km: float = EARTH_RADIUS_KM) -> Geod:
    """Get a pyproj Geod for a perfect sphere of the given radius."""
    radius_m = earth_radius_km * 1000.0
    return Geod(a=radius_m, b=radius_m)

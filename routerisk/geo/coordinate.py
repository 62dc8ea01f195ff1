"""Validated WGS84 coordinates."""

import math
from dataclasses import dataclass

from routerisk.exceptions import InvalidCoordinate

LATITUDE_RANGE = (-90.0, 90.0)
LONGITUDE_RANGE = (-180.0, 180.0)


@dataclass(frozen=True)
class Coordinate:
    """A geographic point in degrees.

    Latitude runs from -90 (south) to 90 (north), longitude from -180 (west)
    to 180 (east). Out-of-range values raise InvalidCoordinate at
    construction, so every instance is valid.
    """

    latitude: float
    longitude: float

    def __post_init__(self) -> None:
        _check_range("latitude", self.latitude, *LATITUDE_RANGE)
        _check_range("longitude", self.longitude, *LONGITUDE_RANGE)

    def __str__(self) -> str:
        return f"({self.latitude:.6f}, {self.longitude:.6f})"


def _check_range(field: str, value: float, minimum: float, maximum: float) -> None:
    # NaN fails every comparison, so test for membership rather than exclusion
    if not (minimum <= value <= maximum) or math.isnan(value):
        raise InvalidCoordinate(field, value, minimum, maximum)

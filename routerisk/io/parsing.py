"""Parsing of plain-text route and hazard zone input.

Route text holds one ``latitude,longitude`` pair per line. Hazard zone text
holds one ``name,latitude,longitude,radius_km`` record per line. Blank lines
and lines starting with ``#`` are ignored in both.
"""

from typing import Iterator

import structlog

from routerisk.exceptions import InputParseError
from routerisk.geo.coordinate import Coordinate
from routerisk.geo.route import Route
from routerisk.geo.zones import HazardZone

logger = structlog.get_logger()

ROUTE_FORMAT = "latitude,longitude"
ZONE_FORMAT = "name,latitude,longitude,radius_km"


def parse_route(text: str, name: str = "User Route") -> Route:
    """Parse route waypoints from text.

    Args:
        text: One ``latitude,longitude`` pair per line.
        name: Name given to the route.

    Returns:
        Route with the waypoints in input order. It may hold fewer than two
        waypoints; the analyzer rejects those.

    Raises:
        InputParseError: If a line is malformed.
        InvalidCoordinate: If a waypoint is out of range.
    """
    route = Route(name)
    for line_number, line in _content_lines(text):
        parts = [part.strip() for part in line.split(",")]
        if len(parts) != 2:
            raise InputParseError(line_number, line, f"expected format {ROUTE_FORMAT}")
        latitude = _parse_float(parts[0], line_number, line, "latitude")
        longitude = _parse_float(parts[1], line_number, line, "longitude")
        route.add_waypoint(latitude, longitude)

    logger.debug("Parsed route", route=name, waypoints=route.waypoint_count)
    return route


def parse_hazard_zones(text: str) -> list[HazardZone]:
    """Parse hazard zones from text.

    Args:
        text: One ``name,latitude,longitude,radius_km`` record per line.

    Returns:
        Zones in input order; empty if the text has no records.

    Raises:
        InputParseError: If a line is malformed.
        InvalidCoordinate: If a zone center is out of range.
        InvalidHazardZone: If a radius is not positive.
    """
    zones = []
    for line_number, line in _content_lines(text):
        parts = [part.strip() for part in line.split(",")]
        if len(parts) != 4:
            raise InputParseError(line_number, line, f"expected format {ZONE_FORMAT}")
        name = parts[0]
        latitude = _parse_float(parts[1], line_number, line, "latitude")
        longitude = _parse_float(parts[2], line_number, line, "longitude")
        radius_km = _parse_float(parts[3], line_number, line, "radius_km")
        zones.append(HazardZone(Coordinate(latitude, longitude), radius_km, name))

    logger.debug("Parsed hazard zones", zones=len(zones))
    return zones


def _content_lines(text: str) -> Iterator[tuple[int, str]]:
    for line_number, raw in enumerate(text.splitlines(), start=1):
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        yield line_number, line


def _parse_float(value: str, line_number: int, line: str, field: str) -> float:
    try:
        return float(value)
    except ValueError:
        raise InputParseError(line_number, line, f"invalid number for {field}: {value!r}") from None

"""Built-in sample scenario: Los Angeles to San Diego across Southern California faults."""

from routerisk.geo.route import Route
from routerisk.geo.zones import HazardZone
from routerisk.io.parsing import parse_hazard_zones, parse_route

SAMPLE_ROUTE_NAME = "Los Angeles to San Diego"

SAMPLE_ROUTE_TEXT = """\
34.0522,-118.2437
33.8121,-117.9190
33.6846,-117.8265
33.4936,-117.1484
33.1959,-117.3795
32.7157,-117.1611
"""

SAMPLE_ZONES_TEXT = """\
San Andreas Fault Zone,34.00,-118.00,80
Newport-Inglewood Fault,33.85,-118.10,45
Elsinore Fault Zone,33.50,-117.30,60
Rose Canyon Fault,32.85,-117.20,35
"""


def load_sample() -> tuple[Route, list[HazardZone]]:
    """Parse the sample route and hazard zones."""
    return (
        parse_route(SAMPLE_ROUTE_TEXT, name=SAMPLE_ROUTE_NAME),
        parse_hazard_zones(SAMPLE_ZONES_TEXT),
    )

"""Geospatial risk scoring of travel routes against circular hazard zones."""

from routerisk.exceptions import (
    InputParseError,
    InvalidCoordinate,
    InvalidHazardZone,
    InvalidRoute,
    RouteRiskError,
)
from routerisk.geo import Coordinate, HazardZone, Route
from routerisk.risk import RiskAnalysisResult, RiskAnalyzer, RiskLevel, analyze_route

__version__ = "0.1.0"

__all__ = [
    "Coordinate",
    "HazardZone",
    "Route",
    "analyze_route",
    "RiskAnalyzer",
    "RiskAnalysisResult",
    "RiskLevel",
    "RouteRiskError",
    "InvalidCoordinate",
    "InvalidHazardZone",
    "InvalidRoute",
    "InputParseError",
]

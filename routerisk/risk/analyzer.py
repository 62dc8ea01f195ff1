"""Segment-based route risk analysis against circular hazard zones.

The route is split into segments between consecutive waypoints. Each
segment is scored by its length times the proximity of its midpoint to
every hazard zone, where proximity decays linearly from 1.0 at a zone's
center to 0.0 at its edge. The summed segment risk is normalized by the
total route length to a 0-100 score and banded into LOW/MEDIUM/HIGH.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Sequence

import structlog

from routerisk.config import MIDPOINT_METHODS, AnalysisConfig
from routerisk.exceptions import InvalidRoute
from routerisk.geo.coordinate import Coordinate
from routerisk.geo.route import MIN_WAYPOINTS, Route
from routerisk.geo.zones import HazardZone
from routerisk.geo_utils import (
    EARTH_RADIUS_KM,
    arithmetic_midpoint,
    geodesic_midpoint,
    haversine_km,
)

logger = structlog.get_logger()

LOW_RISK_THRESHOLD = 30.0
HIGH_RISK_THRESHOLD = 60.0
MAX_RISK_SCORE = 100.0

NO_HAZARD_MESSAGE = "Route does not pass through any hazard zones"


class RiskLevel(str, Enum):
    """Risk band of a normalized score."""

    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"


@dataclass(frozen=True)
class RiskAnalysisResult:
    """Outcome of analyzing one route against a set of hazard zones."""

    total_distance_km: float
    risk_score: float
    risk_level: RiskLevel
    affected_segments: int
    zones_affecting: int
    risk_factors: tuple[str, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dictionary."""
        return {
            "total_distance_km": self.total_distance_km,
            "risk_score": self.risk_score,
            "risk_level": self.risk_level.value,
            "affected_segments": self.affected_segments,
            "zones_affecting": self.zones_affecting,
            "risk_factors": list(self.risk_factors),
        }


def calculate_distance(
    a: Coordinate,
    b: Coordinate,
    earth_radius_km: float = EARTH_RADIUS_KM,
) -> float:
    """Great-circle distance in kilometers between two coordinates."""
    return haversine_km(a, b, earth_radius_km)


def calculate_route_distance(route: Route, earth_radius_km: float = EARTH_RADIUS_KM) -> float:
    """Sum of the segment lengths of a route in kilometers."""
    waypoints = route.waypoints
    total = 0.0
    for start, end in zip(waypoints, waypoints[1:]):
        total += calculate_distance(start, end, earth_radius_km)
    return total


def calculate_midpoint(a: Coordinate, b: Coordinate) -> Coordinate:
    """Midpoint of a segment by averaging latitude and longitude.

    This is a flat approximation, not the great-circle midpoint. Use
    geodesic_midpoint via AnalysisConfig.midpoint_method for long segments.
    """
    return Coordinate(*arithmetic_midpoint(a, b))


def calculate_proximity(
    point: Coordinate,
    zone: HazardZone,
    earth_radius_km: float = EARTH_RADIUS_KM,
) -> float:
    """Proximity factor of a point to a hazard zone.

    Returns:
        1.0 at the zone center, falling linearly to 0.0 at the edge, and
        0.0 anywhere outside the zone.
    """
    distance = calculate_distance(point, zone.center, earth_radius_km)
    if distance > zone.radius_km:
        return 0.0
    return 1.0 - (distance / zone.radius_km)


def classify_risk_level(
    score: float,
    low_threshold: float = LOW_RISK_THRESHOLD,
    high_threshold: float = HIGH_RISK_THRESHOLD,
) -> RiskLevel:
    """Band a normalized score. Each threshold belongs to the lower band."""
    if score <= low_threshold:
        return RiskLevel.LOW
    if score <= high_threshold:
        return RiskLevel.MEDIUM
    return RiskLevel.HIGH


class RiskAnalyzer:
    """Route risk analysis engine with configurable constants."""

    def __init__(self, config: AnalysisConfig | None = None):
        """Initialize the analyzer.

        Args:
            config: Analysis configuration. Defaults reproduce the reference
                constants (6371 km sphere, 30/60 thresholds, arithmetic
                midpoints).

        Raises:
            ValueError: If the configuration is inconsistent.
        """
        self.config = config or AnalysisConfig()
        self._validate_config()

    def _validate_config(self) -> None:
        config = self.config
        if config.earth_radius_km <= 0:
            raise ValueError(f"earth_radius_km must be positive (got {config.earth_radius_km})")
        if config.low_risk_threshold > config.high_risk_threshold:
            raise ValueError(
                f"low_risk_threshold ({config.low_risk_threshold}) must not exceed "
                f"high_risk_threshold ({config.high_risk_threshold})"
            )
        if config.max_score <= 0:
            raise ValueError(f"max_score must be positive (got {config.max_score})")
        if config.midpoint_method not in MIDPOINT_METHODS:
            raise ValueError(
                f"Unknown midpoint_method {config.midpoint_method!r}, "
                f"expected one of {', '.join(MIDPOINT_METHODS)}"
            )

    def midpoint(self, a: Coordinate, b: Coordinate) -> Coordinate:
        """Segment midpoint using the configured method."""
        if self.config.midpoint_method == "geodesic":
            return Coordinate(*geodesic_midpoint(a, b, self.config.earth_radius_km))
        return calculate_midpoint(a, b)

    def analyze_route(self, route: Route, hazard_zones: Sequence[HazardZone]) -> RiskAnalysisResult:
        """Analyze a route against hazard zones.

        Args:
            route: Route with at least two waypoints.
            hazard_zones: Zones to test each segment against. May be empty.

        Returns:
            RiskAnalysisResult with the normalized score and segment notes.

        Raises:
            InvalidRoute: If the route has fewer than two waypoints.
        """
        if not route.is_valid():
            raise InvalidRoute(
                f"Route must have at least {MIN_WAYPOINTS} waypoints (got {route.waypoint_count})"
            )

        radius = self.config.earth_radius_km
        waypoints = route.waypoints
        total_distance = calculate_route_distance(route, radius)
        total_risk = 0.0
        affected_segments = 0
        risk_factors: list[str] = []
        # Positions in hazard_zones, so identical zones listed twice count twice
        affecting_zones: set[int] = set()

        for index, (start, end) in enumerate(zip(waypoints, waypoints[1:])):
            segment_length = calculate_distance(start, end, radius)
            mid = self.midpoint(start, end)

            segment_risk = 0.0
            segment_hazards = []

            for zone_index, zone in enumerate(hazard_zones):
                proximity = calculate_proximity(mid, zone, radius)
                if proximity > 0:
                    segment_risk += segment_length * proximity
                    affecting_zones.add(zone_index)
                    segment_hazards.append(f"{zone.name} (proximity: {proximity:.2f})")

            if segment_hazards:
                affected_segments += 1
                risk_factors.append(
                    f"Segment {index + 1}→{index + 2} ({segment_length:.2f} km): "
                    f"Affected by {', '.join(segment_hazards)}"
                )
                logger.debug(
                    "Segment affected by hazard zones",
                    segment=index + 1,
                    length_km=round(segment_length, 3),
                    segment_risk=round(segment_risk, 3),
                    zones=len(segment_hazards),
                )

            total_risk += segment_risk

        score = self.normalize_score(total_risk, total_distance)
        level = classify_risk_level(
            score,
            self.config.low_risk_threshold,
            self.config.high_risk_threshold,
        )

        if not risk_factors:
            risk_factors.append(NO_HAZARD_MESSAGE)

        logger.info(
            "Route risk analysis complete",
            route=route.name,
            segments=len(waypoints) - 1,
            total_distance_km=round(total_distance, 3),
            risk_score=round(score, 2),
            risk_level=level.value,
            zones_affecting=len(affecting_zones),
        )

        return RiskAnalysisResult(
            total_distance_km=total_distance,
            risk_score=score,
            risk_level=level,
            affected_segments=affected_segments,
            zones_affecting=len(affecting_zones),
            risk_factors=tuple(risk_factors),
        )

    def normalize_score(self, total_risk: float, total_distance_km: float) -> float:
        """Scale accumulated risk to 0-100 as a share of route length."""
        if total_distance_km <= 0:
            return 0.0
        score = (total_risk / total_distance_km) * 100.0
        return max(0.0, min(score, self.config.max_score))


# Convenience function with default analyzer
def analyze_route(route: Route, hazard_zones: Sequence[HazardZone]) -> RiskAnalysisResult:
    """Analyze a route using the default analyzer."""
    return RiskAnalyzer().analyze_route(route, hazard_zones)

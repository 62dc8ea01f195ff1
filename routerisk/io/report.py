"""Human-readable and JSON rendering of route risk analyses."""

from typing import Any, Sequence

from routerisk.config import AnalysisConfig, ReportConfig
from routerisk.geo.route import Route
from routerisk.geo.zones import HazardZone
from routerisk.risk.analyzer import RiskAnalysisResult, RiskLevel

ASSESSMENTS = {
    RiskLevel.LOW: (
        "✓ This route is SAFE",
        [
            "The route avoids hazard zones or has minimal exposure.",
            "Normal travel precautions are sufficient.",
        ],
    ),
    RiskLevel.MEDIUM: (
        "⚠ This route has MODERATE RISK",
        [
            "The route passes through or near hazard zones.",
            "Consider alternative paths or take safety precautions.",
        ],
    ),
    RiskLevel.HIGH: (
        "⛔ This route is HIGH RISK",
        [
            "The route has significant exposure to hazard zones.",
            "Strongly consider an alternative route or implement",
            "comprehensive safety measures if this route is necessary.",
        ],
    ),
}


def risk_bar(score: float, width: int = 20, max_score: float = 100.0) -> str:
    """Render a score as a fixed-width text bar, e.g. ``[#####---------------]``."""
    if width <= 0:
        return ""
    filled = int(round(width * min(max(score, 0.0), max_score) / max_score))
    return "[" + "#" * filled + "-" * (width - filled) + "]"


def score_band(level: RiskLevel, analysis: AnalysisConfig) -> str:
    """Describe the score range of a risk level, e.g. ``30-60``."""
    low, high, top = analysis.low_risk_threshold, analysis.high_risk_threshold, analysis.max_score
    bands = {
        RiskLevel.LOW: f"0-{low:g}",
        RiskLevel.MEDIUM: f"{low:g}-{high:g}",
        RiskLevel.HIGH: f"{high:g}-{top:g}",
    }
    return bands[level]


def format_report(
    result: RiskAnalysisResult,
    analysis: AnalysisConfig | None = None,
    report: ReportConfig | None = None,
) -> str:
    """Render an analysis result as a plain-text report."""
    analysis = analysis or AnalysisConfig()
    report = report or ReportConfig()

    lines = [
        "=== ROUTE RISK ANALYSIS REPORT ===",
        "",
        f"Total Route Distance: {result.total_distance_km:.2f} km",
        f"Computed Risk Score: {result.risk_score:.2f} / {analysis.max_score:g}",
    ]
    bar = risk_bar(result.risk_score, report.bar_width, analysis.max_score)
    if bar:
        lines.append(f"Risk Meter: {bar}")
    lines += [
        f"Risk Level: {result.risk_level.value}",
        "",
        f"Route Segments Affected: {result.affected_segments}",
        f"Hazard Zones Affecting Route: {result.zones_affecting}",
        "",
        "Affected Segments:",
    ]
    lines += [f"  • {factor}" for factor in result.risk_factors]

    headline, details = ASSESSMENTS[result.risk_level]
    lines += [
        "",
        "Risk Assessment:",
        f"  {headline} (Risk Score: {score_band(result.risk_level, analysis)})",
    ]
    lines += [f"  {detail}" for detail in details]

    lines += [
        "",
        "Calculation Method:",
        "  Risk computed automatically from geospatial proximity.",
        "  Formula: (Σ segment_length × proximity) / total_distance × 100",
        "  Proximity = 1 - (distance_to_zone / zone_radius) when inside zone",
    ]
    return "\n".join(lines)


def format_input_summary(route: Route, hazard_zones: Sequence[HazardZone]) -> str:
    """Summarize the analyzed inputs."""
    lines = [
        "=== INPUT SUMMARY ===",
        "",
        f"Route waypoints: {route.waypoint_count}",
        f"Hazard zones: {len(hazard_zones)}",
    ]
    if hazard_zones:
        lines += ["", "Hazard Zones:"]
        lines += [f"  • {zone}" for zone in hazard_zones]
    return "\n".join(lines)


def build_payload(
    route: Route,
    hazard_zones: Sequence[HazardZone],
    result: RiskAnalysisResult,
) -> dict[str, Any]:
    """Build the JSON document for an analysis, inputs included."""
    return {
        "route": {
            "name": route.name,
            "waypoints": [
                {"latitude": point.latitude, "longitude": point.longitude}
                for point in route.waypoints
            ],
        },
        "hazard_zones": [
            {
                "name": zone.name,
                "latitude": zone.center.latitude,
                "longitude": zone.center.longitude,
                "radius_km": zone.radius_km,
            }
            for zone in hazard_zones
        ],
        "result": result.to_dict(),
    }

"""Route risk analysis against hazard zones."""

from routerisk.risk.analyzer import (
    NO_HAZARD_MESSAGE,
    RiskAnalysisResult,
    RiskAnalyzer,
    RiskLevel,
    analyze_route,
    calculate_distance,
    calculate_midpoint,
    calculate_proximity,
    calculate_route_distance,
    classify_risk_level,
)

__all__ = [
    "analyze_route",
    "RiskAnalyzer",
    "RiskAnalysisResult",
    "RiskLevel",
    "NO_HAZARD_MESSAGE",
    "calculate_distance",
    "calculate_route_distance",
    "calculate_midpoint",
    "calculate_proximity",
    "classify_risk_level",
]

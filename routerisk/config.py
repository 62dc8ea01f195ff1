"""Configuration management for route risk analysis."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

MIDPOINT_METHODS = ("arithmetic", "geodesic")


@dataclass
class AnalysisConfig:
    """Risk analysis configuration."""

    earth_radius_km: float = 6371.0
    low_risk_threshold: float = 30.0  # scores at or below are LOW
    high_risk_threshold: float = 60.0  # scores above are HIGH
    max_score: float = 100.0
    midpoint_method: str = "arithmetic"  # "arithmetic" or "geodesic"


@dataclass
class ReportConfig:
    """Text report configuration."""

    bar_width: int = 20
    show_input_summary: bool = True


@dataclass
class Config:
    """Main configuration container."""

    analysis: AnalysisConfig = field(default_factory=AnalysisConfig)
    report: ReportConfig = field(default_factory=ReportConfig)

    @classmethod
    def load(cls, config_dir: Path | None = None) -> "Config":
        """Load configuration from files and environment variables."""
        # Load .env file if present
        env_file = Path(__file__).parent.parent / ".env"
        if env_file.exists():
            load_dotenv(env_file)

        config = cls()

        if config_dir and config_dir.exists():
            analysis_file = config_dir / "risk_analysis.yaml"
            if analysis_file.exists():
                config._load_yaml(analysis_file)

        # Override with environment variables
        config._load_from_env()

        return config

    def _load_yaml(self, path: Path) -> None:
        """Load configuration from a YAML file."""
        with open(path) as f:
            data = yaml.safe_load(f)
            if data:
                self._apply_yaml_config(data)

    def _apply_yaml_config(self, data: dict[str, Any]) -> None:
        """Apply YAML configuration data."""
        if "analysis" in data:
            analysis = data["analysis"] or {}
            if "earth_radius_km" in analysis:
                self.analysis.earth_radius_km = float(analysis["earth_radius_km"])
            if "max_score" in analysis:
                self.analysis.max_score = float(analysis["max_score"])
            if "midpoint_method" in analysis:
                self.analysis.midpoint_method = str(analysis["midpoint_method"]).lower()

            thresholds = analysis.get("risk_thresholds") or {}
            if "low" in thresholds:
                self.analysis.low_risk_threshold = float(thresholds["low"])
            if "high" in thresholds:
                self.analysis.high_risk_threshold = float(thresholds["high"])

        if "report" in data:
            report = data["report"] or {}
            if "bar_width" in report:
                self.report.bar_width = int(report["bar_width"])
            if "show_input_summary" in report:
                self.report.show_input_summary = bool(report["show_input_summary"])

    def _load_from_env(self) -> None:
        """Override configuration from environment variables."""
        # Analysis
        if radius := os.getenv("ROUTERISK_EARTH_RADIUS_KM"):
            self.analysis.earth_radius_km = float(radius)
        if low := os.getenv("ROUTERISK_LOW_RISK_THRESHOLD"):
            self.analysis.low_risk_threshold = float(low)
        if high := os.getenv("ROUTERISK_HIGH_RISK_THRESHOLD"):
            self.analysis.high_risk_threshold = float(high)
        if method := os.getenv("ROUTERISK_MIDPOINT_METHOD"):
            self.analysis.midpoint_method = method.lower()

        # Report
        if bar_width := os.getenv("ROUTERISK_REPORT_BAR_WIDTH"):
            self.report.bar_width = int(bar_width)
        if summary := os.getenv("ROUTERISK_REPORT_INPUT_SUMMARY"):
            self.report.show_input_summary = summary.lower() in ("true", "1", "yes")


# Global config instance
_config: Config | None = None


def get_config() -> Config:
    """Get or create the global configuration instance."""
    global _config
    if _config is None:
        config_dir = Path(__file__).parent.parent / "config"
        _config = Config.load(config_dir)
    return _config


def reload_config(config_dir: Path | None = None) -> Config:
    """Reload configuration (useful for testing)."""
    global _config
    _config = Config.load(config_dir)
    return _config

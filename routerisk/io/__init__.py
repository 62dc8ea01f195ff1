"""Text input parsing and report rendering."""

from routerisk.io.parsing import parse_hazard_zones, parse_route
from routerisk.io.report import build_payload, format_input_summary, format_report

__all__ = [
    "parse_route",
    "parse_hazard_zones",
    "format_report",
    "format_input_summary",
    "build_payload",
]

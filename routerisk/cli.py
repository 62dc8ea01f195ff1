"""Command-line interface for route risk analysis."""

import json
import logging
import sys
from pathlib import Path
from typing import Sequence

import click
import structlog

from routerisk.config import Config, get_config, reload_config
from routerisk.geo.route import Route
from routerisk.geo.zones import HazardZone
from routerisk.io.parsing import parse_hazard_zones, parse_route
from routerisk.io.report import build_payload, format_input_summary, format_report
from routerisk.io.samples import load_sample
from routerisk.risk.analyzer import RiskAnalysisResult, RiskAnalyzer

logger = structlog.get_logger()


def configure_logging(verbose: bool = False) -> None:
    """Configure structlog for CLI output."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(format="%(message)s", level=level, stream=sys.stderr, force=True)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )


@click.group()
@click.option("--config-dir", type=click.Path(exists=True, file_okay=False, path_type=Path),
              help="Directory containing risk_analysis.yaml")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, config_dir: Path | None, verbose: bool) -> None:
    """Score travel routes by their proximity to hazard zones."""
    configure_logging(verbose)
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose

    if config_dir:
        reload_config(config_dir)


@cli.command()
@click.option("--route", "route_file", required=True,
              type=click.Path(exists=True, dir_okay=False, path_type=Path),
              help="Route file, one 'latitude,longitude' per line")
@click.option("--zones", "zones_file",
              type=click.Path(exists=True, dir_okay=False, path_type=Path),
              help="Hazard zone file, one 'name,latitude,longitude,radius_km' per line")
@click.option("--name", default="User Route", show_default=True, help="Route name")
@click.option("--json", "as_json", is_flag=True, help="Output results as JSON")
@click.option("--output", "-o", type=click.Path(dir_okay=False, path_type=Path),
              help="Also write the output to this file")
def analyze(route_file: Path, zones_file: Path | None, name: str, as_json: bool, output: Path | None) -> None:
    """Analyze a route against hazard zones."""
    try:
        route = parse_route(route_file.read_text(encoding="utf-8"), name=name)
        zones = parse_hazard_zones(zones_file.read_text(encoding="utf-8")) if zones_file else []
        _run(route, zones, as_json, output)
    except (ValueError, OSError) as e:
        # bad input, bad configuration or an unwritable output file
        logger.debug("Analysis rejected input", error=str(e))
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@cli.command()
@click.option("--json", "as_json", is_flag=True, help="Output results as JSON")
def sample(as_json: bool) -> None:
    """Analyze the built-in Los Angeles to San Diego sample."""
    route, zones = load_sample()
    if not as_json:
        click.echo("Sample route from Los Angeles to San Diego across major")
        click.echo("earthquake fault zones in Southern California.\n")
    try:
        _run(route, zones, as_json, None)
    except (ValueError, OSError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


def _run(route: Route, zones: Sequence[HazardZone], as_json: bool, output: Path | None) -> None:
    config = get_config()
    analyzer = RiskAnalyzer(config.analysis)
    result = analyzer.analyze_route(route, zones)

    if as_json:
        text = json.dumps(build_payload(route, zones, result), indent=2, ensure_ascii=False)
    else:
        text = _render_text(config, route, zones, result)

    click.echo(text)
    if output:
        output.write_text(text + "\n", encoding="utf-8")
        click.echo(f"\nResults saved to: {output}", err=True)


def _render_text(
    config: Config,
    route: Route,
    zones: Sequence[HazardZone],
    result: RiskAnalysisResult,
) -> str:
    text = format_report(result, config.analysis, config.report)
    if config.report.show_input_summary:
        text += "\n\n" + format_input_summary(route, zones)
    return text


if __name__ == "__main__":
    cli()

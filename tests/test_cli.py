"""Tests for the routerisk command-line interface.

Commands are invoked through click's CliRunner with route and zone files
written to a temporary directory.
"""

import json

import pytest
from click.testing import CliRunner

from routerisk.cli import cli

LA_ROUTE = "34.00,-118.00\n34.05,-118.05\n34.10,-118.10\n"
LA_ZONES = "Test Fault,34.05,-118.05,10\n"


@pytest.fixture
def runner():
    """Click CliRunner for invoking commands."""
    return CliRunner()


@pytest.fixture
def inputs(tmp_path):
    """Write the LA route and zone files, returning their paths."""
    route_file = tmp_path / "route.txt"
    zones_file = tmp_path / "zones.txt"
    route_file.write_text(LA_ROUTE)
    zones_file.write_text(LA_ZONES)
    return route_file, zones_file


class TestAnalyzeCommand:
    """Tests for `routerisk analyze`."""

    def test_text_report(self, runner, inputs):
        route_file, zones_file = inputs
        result = runner.invoke(cli, ["analyze", "--route", str(route_file), "--zones", str(zones_file)])

        assert result.exit_code == 0, result.output
        assert "Risk Level: HIGH" in result.output
        assert "Segment 1→2 (7.22 km): Affected by Test Fault (proximity: 0.64)" in result.output
        assert "=== INPUT SUMMARY ===" in result.output

    def test_json_output(self, runner, inputs):
        route_file, zones_file = inputs
        result = runner.invoke(
            cli,
            ["analyze", "--route", str(route_file), "--zones", str(zones_file), "--name", "LA", "--json"],
        )

        assert result.exit_code == 0, result.output
        data = json.loads(result.stdout)
        assert set(data) == {"route", "hazard_zones", "result"}
        assert data["route"]["name"] == "LA"
        assert data["result"]["risk_level"] == "HIGH"
        assert data["result"]["zones_affecting"] == 1

    def test_without_zones(self, runner, inputs):
        route_file, _ = inputs
        result = runner.invoke(cli, ["analyze", "--route", str(route_file), "--json"])

        assert result.exit_code == 0, result.output
        data = json.loads(result.stdout)
        assert data["result"]["risk_score"] == 0.0
        assert data["result"]["risk_factors"] == ["Route does not pass through any hazard zones"]

    def test_output_file(self, runner, inputs, tmp_path):
        route_file, zones_file = inputs
        output = tmp_path / "out" / "report.json"
        output.parent.mkdir()
        result = runner.invoke(
            cli,
            ["analyze", "--route", str(route_file), "--zones", str(zones_file), "--json", "-o", str(output)],
        )

        assert result.exit_code == 0, result.output
        saved = json.loads(output.read_text(encoding="utf-8"))
        assert saved["result"]["affected_segments"] == 2

    @pytest.mark.parametrize(
        "route_text, zones_text, message",
        [
            ("34.0,-118.0\n", LA_ZONES, "at least 2 waypoints"),
            ("34.0;-118.0\n34.1,-118.1\n", LA_ZONES, "Line 1"),
            ("95.0,-118.0\n34.1,-118.1\n", LA_ZONES, "Latitude must be between"),
            (LA_ROUTE, "Zone,34.0,-118.0,-5\n", "Radius must be positive"),
        ],
        ids=["single_waypoint", "bad_separator", "latitude_out_of_range", "negative_radius"],
    )
    def test_invalid_input_exits_with_error(self, runner, tmp_path, route_text, zones_text, message):
        route_file = tmp_path / "route.txt"
        zones_file = tmp_path / "zones.txt"
        route_file.write_text(route_text)
        zones_file.write_text(zones_text)

        result = runner.invoke(cli, ["analyze", "--route", str(route_file), "--zones", str(zones_file)])

        assert result.exit_code == 1
        assert "Error:" in result.output
        assert message in result.output

    def test_unwritable_output_exits_with_error(self, runner, inputs, tmp_path):
        route_file, zones_file = inputs
        output = tmp_path / "missing" / "report.json"
        result = runner.invoke(
            cli,
            ["analyze", "--route", str(route_file), "--zones", str(zones_file), "-o", str(output)],
        )

        assert result.exit_code == 1
        assert "Error:" in result.output
        assert not isinstance(result.exception, OSError)
        assert not output.exists()

    def test_missing_route_option(self, runner):
        result = runner.invoke(cli, ["analyze"])
        assert result.exit_code == 2


class TestConfigDir:
    """Tests for the --config-dir group option."""

    def test_thresholds_from_config_dir(self, runner, inputs, tmp_path):
        route_file, zones_file = inputs
        config_dir = tmp_path / "config"
        config_dir.mkdir()
        (config_dir / "risk_analysis.yaml").write_text(
            "analysis:\n  risk_thresholds:\n    low: 70\n    high: 90\n"
            "report:\n  show_input_summary: false\n"
        )

        result = runner.invoke(
            cli,
            ["--config-dir", str(config_dir), "analyze", "--route", str(route_file), "--zones", str(zones_file)],
        )

        assert result.exit_code == 0, result.output
        assert "Risk Level: LOW" in result.output
        assert "INPUT SUMMARY" not in result.output

    def test_invalid_config_reported(self, runner, inputs, tmp_path):
        route_file, zones_file = inputs
        config_dir = tmp_path / "config"
        config_dir.mkdir()
        (config_dir / "risk_analysis.yaml").write_text("analysis:\n  midpoint_method: flat\n")

        result = runner.invoke(
            cli,
            ["--config-dir", str(config_dir), "analyze", "--route", str(route_file), "--zones", str(zones_file)],
        )

        assert result.exit_code == 1
        assert "Unknown midpoint_method" in result.output


class TestSampleCommand:
    """Tests for `routerisk sample`."""

    def test_text(self, runner):
        result = runner.invoke(cli, ["sample"])

        assert result.exit_code == 0, result.output
        assert "Los Angeles to San Diego" in result.output
        assert "=== ROUTE RISK ANALYSIS REPORT ===" in result.output
        assert "San Andreas Fault Zone" in result.output

    def test_json(self, runner):
        result = runner.invoke(cli, ["sample", "--json"])

        assert result.exit_code == 0, result.output
        data = json.loads(result.stdout)
        assert len(data["route"]["waypoints"]) == 6
        assert len(data["hazard_zones"]) == 4
        assert data["result"]["total_distance_km"] == pytest.approx(219.6, abs=0.5)
        assert data["result"]["risk_score"] == pytest.approx(92.79, abs=0.5)
        assert data["result"]["risk_level"] == "HIGH"
        assert data["result"]["affected_segments"] == 5
        assert data["result"]["zones_affecting"] == 4
        assert data["result"]["risk_factors"][0] == (
            "Segment 1→2 (40.13 km): Affected by San Andreas Fault Zone (proximity: 0.87), "
            "Newport-Inglewood Fault (proximity: 0.79)"
        )

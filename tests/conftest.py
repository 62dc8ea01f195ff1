"""Shared test fixtures for routerisk tests."""

import os

import pytest

from routerisk import config as config_module
from routerisk.geo import Coordinate, HazardZone, Route


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch):
    """Drop any cached config and ROUTERISK_* overrides from the environment."""
    for key in list(os.environ):
        if key.startswith("ROUTERISK_"):
            monkeypatch.delenv(key)
    monkeypatch.setattr(config_module, "_config", None)


@pytest.fixture
def la_route():
    """Three-waypoint route heading north-west out of Los Angeles."""
    return Route.from_points(
        "LA Test Route",
        [(34.00, -118.00), (34.05, -118.05), (34.10, -118.10)],
    )


@pytest.fixture
def la_zone():
    """A 10 km zone centered on the middle waypoint of la_route."""
    return HazardZone(Coordinate(34.05, -118.05), 10.0, "Test Fault")


@pytest.fixture
def equator_route():
    """Two points one degree apart on the equator (about 111.19 km)."""
    return Route.from_points("Equator", [(0.0, 0.0), (0.0, 1.0)])

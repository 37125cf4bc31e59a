"""Shared pytest fixtures for the AOI geometry test suite."""

from __future__ import annotations

import pytest

# ---------------------------------------------------------------------------
# Reference rings (GeoJSON [lng, lat] order, closed)
# ---------------------------------------------------------------------------

# 1° x 1° square on the equator / prime meridian
EQUATOR_SQUARE = [[0, 0], [1, 0], [1, 1], [0, 1], [0, 0]]

# San Francisco downtown rectangle from the imagery-request form
SAN_FRANCISCO_RING = [
    [-122.4194, 37.7749],
    [-122.4194, 37.8049],
    [-122.3894, 37.8049],
    [-122.3894, 37.7749],
    [-122.4194, 37.7749],
]


@pytest.fixture()
def equator_square() -> list[list[float]]:
    """A closed 1° x 1° square ring near the equator."""
    return [list(c) for c in EQUATOR_SQUARE]


@pytest.fixture()
def san_francisco_ring() -> list[list[float]]:
    """A closed ~3.3 km x 2.6 km rectangle in San Francisco."""
    return [list(c) for c in SAN_FRANCISCO_RING]


@pytest.fixture()
def polygon_geojson(san_francisco_ring: list[list[float]]) -> dict[str, object]:
    """GeoJSON Polygon wrapping the San Francisco ring."""
    return {"type": "Polygon", "coordinates": [san_francisco_ring]}


@pytest.fixture()
def point_geojson() -> dict[str, object]:
    """GeoJSON Point used as a circle AOI centre."""
    return {"type": "Point", "coordinates": [-122.4044, 37.7899]}

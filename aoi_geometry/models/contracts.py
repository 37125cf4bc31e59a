"""Canonical payload contracts for the AOI intake boundary.

Request bodies and summary dicts are defined here as ``TypedDict`` so
field names live in one place.  Request handlers pass JSON-decoded
dicts straight through; no conversion is needed.
"""

from __future__ import annotations

from typing import NotRequired, TypedDict

# ---------------------------------------------------------------------------
# GeoJSON geometry
# ---------------------------------------------------------------------------


class GeoJSONPolygon(TypedDict):
    """GeoJSON Polygon; only the outer ring (index 0) is used."""

    type: str
    coordinates: list[list[list[float]]]


class GeoJSONPoint(TypedDict):
    """GeoJSON Point; the centre of a circle AOI."""

    type: str
    coordinates: list[float]


class CenterPayload(TypedDict):
    """Map anchor stored on imagery requests and saved AOIs."""

    lat: float
    lng: float


# ---------------------------------------------------------------------------
# Intake request (request body -> prepare_aoi)
# ---------------------------------------------------------------------------


class AOIRequestPayload(TypedDict):
    """AOI fields read from an imagery-request or saved-AOI body."""

    aoi_type: str
    aoi_coordinates: GeoJSONPolygon | GeoJSONPoint
    aoi_area_km2: NotRequired[float | None]
    aoi_center: NotRequired[CenterPayload | None]


# ---------------------------------------------------------------------------
# Intake result (prepare_aoi -> persistence)
# ---------------------------------------------------------------------------


class AOISummaryPayload(TypedDict):
    """Serialised ``AOISummary``."""

    aoi_type: str
    aoi_coordinates: dict[str, object]
    aoi_area_km2: float
    aoi_center: CenterPayload
    provided_area_km2: float | None
    area_mismatch: bool
    area_warning: str

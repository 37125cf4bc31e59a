"""Tests for AOI data models.

Covers:
- Centroid and AOISummary serialisation
- PolygonGeometry / PointGeometry helpers
- AOIRecord pydantic constraints
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError as PydanticValidationError

from aoi_geometry.intake.prepare_aoi import prepare_aoi
from aoi_geometry.models import AOISummary, Centroid, PointGeometry, PolygonGeometry
from aoi_geometry.models.record import AOICenter, AOIRecord


class TestCentroid:
    """Centroid dict shape."""

    def test_to_dict(self) -> None:
        assert Centroid(lat=1.5, lng=-2.5).to_dict() == {"lat": 1.5, "lng": -2.5}

    def test_from_dict(self) -> None:
        assert Centroid.from_dict({"lat": 1, "lng": 2}) == Centroid(lat=1.0, lng=2.0)

    def test_from_dict_rejects_missing(self) -> None:
        with pytest.raises(TypeError, match="lng must be a number"):
            Centroid.from_dict({"lat": 1})

    def test_from_dict_rejects_bool(self) -> None:
        with pytest.raises(TypeError, match="lat must be a number"):
            Centroid.from_dict({"lat": True, "lng": 0})


class TestGeometryTypes:
    """Tagged union helpers."""

    def test_polygon_type_tag(self) -> None:
        assert PolygonGeometry(ring=((0.0, 0.0),)).type == "Polygon"

    def test_point_type_tag(self) -> None:
        assert PointGeometry(lng=1.0, lat=2.0).type == "Point"

    def test_empty_polygon_vertex_count(self) -> None:
        assert PolygonGeometry().vertex_count == 0


class TestAOISummary:
    """Summary serialisation uses the stored AOI field names."""

    def test_to_dict_keys(self, polygon_geojson: dict[str, object]) -> None:
        data = prepare_aoi("polygon", polygon_geojson).to_dict()
        assert set(data) == {
            "aoi_type",
            "aoi_coordinates",
            "aoi_area_km2",
            "aoi_center",
            "provided_area_km2",
            "area_mismatch",
            "area_warning",
        }

    def test_from_dict_restores(self, polygon_geojson: dict[str, object]) -> None:
        summary = prepare_aoi("polygon", polygon_geojson, provided_area_km2=8.0)
        assert AOISummary.from_dict(summary.to_dict()) == summary

    def test_from_dict_rejects_bad_geometry(self) -> None:
        with pytest.raises(TypeError, match="aoi_coordinates must be a dict"):
            AOISummary.from_dict({"aoi_type": "polygon", "aoi_coordinates": []})


class TestAOIRecord:
    """Pydantic constraints on persisted AOI fields."""

    def test_from_polygon_summary(self, polygon_geojson: dict[str, object]) -> None:
        summary = prepare_aoi("polygon", polygon_geojson)
        record = AOIRecord.from_summary(summary)
        assert record.aoi_area_km2 == summary.area_km2
        assert record.aoi_center.lat == summary.center.lat
        assert record.aoi_coordinates["type"] == "Polygon"

    def test_from_circle_summary(self, point_geojson: dict[str, object]) -> None:
        summary = prepare_aoi("circle", point_geojson, provided_area_km2=12.5)
        record = AOIRecord.from_summary(summary)
        assert record.aoi_type == "circle"
        assert record.model_dump()["aoi_center"] == {"lat": 37.7899, "lng": -122.4044}

    def test_negative_area_rejected(self, point_geojson: dict[str, object]) -> None:
        with pytest.raises(PydanticValidationError):
            AOIRecord(
                aoi_type="circle",
                aoi_coordinates=point_geojson,
                aoi_area_km2=-1.0,
                aoi_center=AOICenter(lat=0.0, lng=0.0),
            )

    def test_unknown_type_rejected(self, point_geojson: dict[str, object]) -> None:
        with pytest.raises(PydanticValidationError):
            AOIRecord(
                aoi_type="square",  # type: ignore[arg-type]
                aoi_coordinates=point_geojson,
                aoi_area_km2=1.0,
                aoi_center={"lat": 0.0, "lng": 0.0},  # type: ignore[arg-type]
            )

    def test_invalid_coordinates_rejected(self) -> None:
        with pytest.raises(PydanticValidationError, match="Invalid coordinate format"):
            AOIRecord(
                aoi_type="circle",
                aoi_coordinates={"type": "Point", "coordinates": [200, 10]},
                aoi_area_km2=1.0,
                aoi_center={"lat": 0.0, "lng": 0.0},  # type: ignore[arg-type]
            )

    def test_center_out_of_range_rejected(self) -> None:
        with pytest.raises(PydanticValidationError):
            AOICenter(lat=91.0, lng=0.0)

"""Pydantic model of the AOI fields persisted on request records.

Imagery requests and saved AOIs both store the same four AOI fields.
``AOIRecord`` mirrors those fields with the same range constraints the
record schema enforces, so a summary can be checked before it is handed
to persistence.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator

from aoi_geometry.core.constants import (
    MAX_LATITUDE,
    MAX_LONGITUDE,
    MIN_LATITUDE,
    MIN_LONGITUDE,
)
from aoi_geometry.core.validation import validate_coordinates
from aoi_geometry.models.aoi import AOISummary


class AOICenter(BaseModel):
    """Map anchor point in degrees."""

    lat: float = Field(ge=MIN_LATITUDE, le=MAX_LATITUDE)
    lng: float = Field(ge=MIN_LONGITUDE, le=MAX_LONGITUDE)


class AOIRecord(BaseModel):
    """AOI block of an imagery request or saved AOI.

    Attributes:
        aoi_type: Drawing-tool shape.
        aoi_coordinates: GeoJSON ``Polygon`` or ``Point``.
        aoi_area_km2: Non-negative area in square kilometres.
        aoi_center: Map anchor point.
    """

    aoi_type: Literal["polygon", "rectangle", "circle"]
    aoi_coordinates: dict[str, Any]
    aoi_area_km2: float = Field(ge=0.0)
    aoi_center: AOICenter

    @field_validator("aoi_coordinates")
    @classmethod
    def _check_coordinates(cls, value: dict[str, Any]) -> dict[str, Any]:
        if not validate_coordinates(value):
            msg = "Invalid coordinate format"
            raise ValueError(msg)
        return value

    @classmethod
    def from_summary(cls, summary: AOISummary) -> AOIRecord:
        """Build a record from a prepared ``AOISummary``.

        Raises:
            pydantic.ValidationError: If the summary violates record constraints.
        """
        return cls(
            aoi_type=summary.aoi_type,  # type: ignore[arg-type]
            aoi_coordinates=summary.geometry,
            aoi_area_km2=summary.area_km2,
            aoi_center=AOICenter(**summary.center.to_dict()),
        )

"""Data model for a summarised Area of Interest (AOI).

An AOI summary is what intake handlers embed into imagery requests and
saved AOIs: the geometry as submitted, the area in square kilometres,
and the map-anchor centre. It is the output of ``prepare_aoi``.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from aoi_geometry.models.contracts import AOISummaryPayload
from aoi_geometry.models.geometry import Centroid


@dataclass(frozen=True, slots=True)
class AOISummary:
    """A validated AOI with derived area and centre.

    Attributes:
        aoi_type: Drawing-tool shape (``polygon``, ``rectangle``, ``circle``).
        geometry: GeoJSON geometry dict as submitted (``Polygon`` or ``Point``).
        area_km2: Area in square kilometres.  Calculated for polygons,
            taken from the client for circles.
        center: Map anchor point.
        provided_area_km2: Area the client sent, if any.
        area_mismatch: True when the client area disagreed with the
            calculated area beyond the configured tolerance.
        area_warning: Non-empty string if the area exceeds the
            reasonableness threshold.
    """

    aoi_type: str
    geometry: dict[str, object] = field(default_factory=dict)
    area_km2: float = 0.0
    center: Centroid = field(default_factory=lambda: Centroid(lat=0.0, lng=0.0))
    provided_area_km2: float | None = None
    area_mismatch: bool = False
    area_warning: str = ""

    @property
    def geometry_type(self) -> str:
        """GeoJSON type of the submitted geometry."""
        return str(self.geometry.get("type", ""))

    def to_dict(self) -> AOISummaryPayload:
        """Serialise to a dict using the stored AOI field names."""
        return {
            "aoi_type": self.aoi_type,
            "aoi_coordinates": self.geometry,
            "aoi_area_km2": self.area_km2,
            "aoi_center": self.center.to_dict(),  # type: ignore[typeddict-item]
            "provided_area_km2": self.provided_area_km2,
            "area_mismatch": self.area_mismatch,
            "area_warning": self.area_warning,
        }

    @classmethod
    def from_dict(cls, data: AOISummaryPayload | dict[str, object]) -> AOISummary:
        """Deserialise from a ``to_dict()`` payload.

        Raises:
            TypeError: If field values have unexpected types.
        """
        geometry_raw = data.get("aoi_coordinates", {})
        if not isinstance(geometry_raw, dict):
            msg = f"aoi_coordinates must be a dict, got {type(geometry_raw).__name__}"
            raise TypeError(msg)

        center_raw = data.get("aoi_center", {"lat": 0.0, "lng": 0.0})
        if not isinstance(center_raw, dict):
            msg = f"aoi_center must be a dict, got {type(center_raw).__name__}"
            raise TypeError(msg)

        provided_raw = data.get("provided_area_km2")
        provided = None if provided_raw is None else float(provided_raw)  # type: ignore[arg-type]

        return cls(
            aoi_type=str(data.get("aoi_type", "")),
            geometry=dict(geometry_raw),
            area_km2=float(data.get("aoi_area_km2", 0.0)),  # type: ignore[arg-type]
            center=Centroid.from_dict(center_raw),
            provided_area_km2=provided,
            area_mismatch=bool(data.get("area_mismatch", False)),
            area_warning=str(data.get("area_warning", "")),
        )

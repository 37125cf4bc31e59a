"""Parsed AOI geometry value types.

``PolygonGeometry`` and ``PointGeometry`` form a small tagged union
produced by ``parse_geometry`` at the request boundary. The calculators
work on plain rings, so downstream code never re-checks GeoJSON shape.

All coordinates are WGS 84 degrees in GeoJSON ``(lng, lat)`` order.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from aoi_geometry.core.constants import GEOJSON_POINT, GEOJSON_POLYGON


@dataclass(frozen=True, slots=True)
class PolygonGeometry:
    """Outer ring of a GeoJSON Polygon.

    Attributes:
        ring: Closed ring as a tuple of ``(lng, lat)`` pairs.  The last
            entry repeats the first.
    """

    ring: tuple[tuple[float, float], ...] = field(default_factory=tuple)

    type = GEOJSON_POLYGON

    @property
    def vertex_count(self) -> int:
        """Number of distinct vertices (closing repeat excluded)."""
        return max(len(self.ring) - 1, 0)

    def to_geojson(self) -> dict[str, object]:
        """Serialise back to a GeoJSON geometry dict."""
        return {"type": self.type, "coordinates": [[list(c) for c in self.ring]]}


@dataclass(frozen=True, slots=True)
class PointGeometry:
    """GeoJSON Point used as the centre of a circle AOI."""

    lng: float
    lat: float

    type = GEOJSON_POINT

    def to_geojson(self) -> dict[str, object]:
        """Serialise back to a GeoJSON geometry dict."""
        return {"type": self.type, "coordinates": [self.lng, self.lat]}


AOIGeometry = Union[PolygonGeometry, PointGeometry]


@dataclass(frozen=True, slots=True)
class Centroid:
    """Vertex-mean centre of a ring, used as a map anchor.

    Not the area-weighted centroid of the enclosed region.
    """

    lat: float
    lng: float

    def to_dict(self) -> dict[str, float]:
        """Serialise to the ``{"lat", "lng"}`` shape stored on AOI records."""
        return {"lat": self.lat, "lng": self.lng}

    @classmethod
    def from_dict(cls, data: dict[str, object]) -> Centroid:
        """Deserialise from a ``{"lat", "lng"}`` dict.

        Raises:
            TypeError: If either component is missing or not numeric.
        """
        lat = data.get("lat")
        lng = data.get("lng")
        if isinstance(lat, bool) or not isinstance(lat, (int, float)):
            msg = f"lat must be a number, got {type(lat).__name__}"
            raise TypeError(msg)
        if isinstance(lng, bool) or not isinstance(lng, (int, float)):
            msg = f"lng must be a number, got {type(lng).__name__}"
            raise TypeError(msg)
        return cls(lat=float(lat), lng=float(lng))

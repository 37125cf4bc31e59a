"""Data models and schemas.

Defines the data structures used by the AOI geometry utility:
- PolygonGeometry / PointGeometry: Parsed GeoJSON geometry (tagged union)
- Centroid: Vertex-mean map anchor
- AOISummary: Validated AOI with area and centre
- AOIRecord: Pydantic model of the persisted AOI fields (``models.record``)
"""

from aoi_geometry.models.aoi import AOISummary
from aoi_geometry.models.geometry import (
    AOIGeometry,
    Centroid,
    PointGeometry,
    PolygonGeometry,
)

__all__ = [
    "AOIGeometry",
    "AOISummary",
    "Centroid",
    "PointGeometry",
    "PolygonGeometry",
]

"""Shared geometry constants: single source of truth.

Centralises the Earth model, rounding precision, and coordinate bounds
used by the validator, the calculators, and the intake layer.

Stored ``aoi_area_km2`` and ``aoi_center`` values depend on these
numbers; changing any of them changes previously persisted results.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Earth model
# ---------------------------------------------------------------------------

EARTH_RADIUS_KM: float = 6371.0
"""Mean Earth radius in kilometres used by the area approximation."""

# ---------------------------------------------------------------------------
# Rounding
# ---------------------------------------------------------------------------

AREA_DECIMAL_PLACES: int = 2
"""Decimal places kept on ``calculate_area`` results (km²)."""

CENTROID_DECIMAL_PLACES: int = 6
"""Decimal places kept on each centroid component (degrees)."""

# ---------------------------------------------------------------------------
# Coordinate bounds (WGS 84 degrees)
# ---------------------------------------------------------------------------

MIN_LONGITUDE: float = -180.0
MAX_LONGITUDE: float = 180.0
MIN_LATITUDE: float = -90.0
MAX_LATITUDE: float = 90.0

# ---------------------------------------------------------------------------
# Ring sizes
# ---------------------------------------------------------------------------

MIN_RING_ENTRIES: int = 4
"""A valid GeoJSON ring: 3 distinct vertices plus the closing repeat."""

MIN_CALCULATION_ENTRIES: int = 3
"""Fewest ring entries the calculators accept."""

# ---------------------------------------------------------------------------
# GeoJSON / AOI vocabulary
# ---------------------------------------------------------------------------

GEOJSON_POLYGON: str = "Polygon"
GEOJSON_POINT: str = "Point"

AOI_TYPE_POLYGON: str = "polygon"
AOI_TYPE_RECTANGLE: str = "rectangle"
AOI_TYPE_CIRCLE: str = "circle"

AOI_TYPES: frozenset[str] = frozenset({AOI_TYPE_POLYGON, AOI_TYPE_RECTANGLE, AOI_TYPE_CIRCLE})
"""AOI shapes accepted from the drawing tools on the request forms."""

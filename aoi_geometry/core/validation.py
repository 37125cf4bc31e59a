"""GeoJSON coordinate validation and boundary parsing.

Two entry points:

- ``validate_coordinates`` answers yes/no for a GeoJSON-like mapping and
  never raises.  Handlers branch on the result.
- ``parse_geometry`` turns a mapping into a ``PolygonGeometry`` or
  ``PointGeometry`` and raises ``InvalidGeometryError`` with a message
  naming the first problem found.

Both apply the same rules: ``Polygon`` needs an outer ring of at least
4 ``[lng, lat]`` pairs, ``Point`` needs exactly one pair, longitudes in
[-180, 180], latitudes in [-90, 90].  Ring closure is not checked here.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping, Sequence

from aoi_geometry.core.constants import (
    GEOJSON_POINT,
    GEOJSON_POLYGON,
    MAX_LATITUDE,
    MAX_LONGITUDE,
    MIN_LATITUDE,
    MIN_LONGITUDE,
    MIN_RING_ENTRIES,
)
from aoi_geometry.core.exceptions import InvalidGeometryError
from aoi_geometry.models.geometry import AOIGeometry, PointGeometry, PolygonGeometry

logger = logging.getLogger("aoi_geometry.core.validation")


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def validate_coordinates(geo_json: object) -> bool:
    """Return True if *geo_json* is a well-formed Polygon or Point.

    Args:
        geo_json: Mapping with ``type`` and ``coordinates`` keys.

    Returns:
        ``True`` when valid, ``False`` on any malformity.  Never raises.
    """
    try:
        parse_geometry(geo_json)
    except InvalidGeometryError as exc:
        logger.debug("Coordinate validation failed | reason=%s", exc.message)
        return False
    return True


def parse_geometry(geo_json: object) -> AOIGeometry:
    """Parse a GeoJSON-like mapping into a typed geometry.

    Args:
        geo_json: Mapping with ``type`` and ``coordinates`` keys.

    Returns:
        ``PolygonGeometry`` for ``Polygon`` input, ``PointGeometry`` for
        ``Point`` input.

    Raises:
        InvalidGeometryError: If the structure, nesting, value types, or
            coordinate ranges are invalid, or the type is unsupported.
    """
    if not isinstance(geo_json, Mapping):
        msg = f"Geometry must be an object, got {type(geo_json).__name__}"
        raise InvalidGeometryError(msg, stage="validation")

    geometry_type = geo_json.get("type")
    coordinates = geo_json.get("coordinates")
    if not geometry_type or coordinates is None:
        msg = "Geometry must have 'type' and 'coordinates'"
        raise InvalidGeometryError(msg, stage="validation")

    if geometry_type == GEOJSON_POLYGON:
        return PolygonGeometry(ring=_parse_ring(coordinates))

    if geometry_type == GEOJSON_POINT:
        lng, lat = _parse_position(coordinates, "Point coordinates")
        return PointGeometry(lng=lng, lat=lat)

    msg = f"Unsupported geometry type {geometry_type!r}; expected Polygon or Point"
    raise InvalidGeometryError(msg, stage="validation")


def is_valid_position(lng: float, lat: float) -> bool:
    """Return True if ``(lng, lat)`` lies within WGS 84 bounds."""
    return MIN_LONGITUDE <= lng <= MAX_LONGITUDE and MIN_LATITUDE <= lat <= MAX_LATITUDE


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _is_sequence(value: object) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes))


def _is_number(value: object) -> bool:
    # bool is an int subclass; JSON true/false are not coordinates
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _parse_ring(coordinates: object) -> tuple[tuple[float, float], ...]:
    if not _is_sequence(coordinates) or len(coordinates) == 0:  # type: ignore[arg-type]
        msg = "Polygon coordinates must be a non-empty list of rings"
        raise InvalidGeometryError(msg, stage="validation")

    ring = coordinates[0]  # type: ignore[index]
    if not _is_sequence(ring) or len(ring) < MIN_RING_ENTRIES:
        count = len(ring) if _is_sequence(ring) else 0
        msg = (
            f"Polygon outer ring has {count} position(s), need at least "
            f"{MIN_RING_ENTRIES} (first and last identical)"
        )
        raise InvalidGeometryError(msg, stage="validation")

    return tuple(
        _parse_position(position, f"Polygon position {index}")
        for index, position in enumerate(ring)
    )


def _parse_position(position: object, context: str) -> tuple[float, float]:
    if not _is_sequence(position) or len(position) != 2:  # type: ignore[arg-type]
        msg = f"{context} must be a [lng, lat] pair"
        raise InvalidGeometryError(msg, stage="validation")

    lng, lat = position  # type: ignore[misc]
    if not _is_number(lng) or not _is_number(lat):
        msg = f"{context} must contain numbers, got [{lng!r}, {lat!r}]"
        raise InvalidGeometryError(msg, stage="validation")

    try:
        lng, lat = float(lng), float(lat)
    except OverflowError as exc:
        msg = f"{context} is outside WGS 84 bounds"
        raise InvalidGeometryError(msg, stage="validation") from exc

    # NaN fails every comparison; infinities fall outside the bounds
    if math.isnan(lng) or math.isnan(lat) or not is_valid_position(lng, lat):
        msg = f"{context} [{lng}, {lat}] is outside WGS 84 bounds"
        raise InvalidGeometryError(msg, stage="validation")

    return (lng, lat)

"""Area and centroid calculation for AOI polygon rings.

The area is a first-order spherical-excess approximation on a sphere of
radius 6371 km:

    area = |sum(dlng_i * (2 + sin(lat_i) + sin(lat_i+1)))| * R^2 / 2

walked over consecutive ring entries without wrapping (the ring is
already closed).  It is an estimate, not a geodetically exact area, and
must stay numerically identical so stored ``aoi_area_km2`` values remain
comparable.

The centroid is the plain mean of the ring's vertices, the closing
repeat excluded.  It is a map anchor, not an area-weighted centroid.

Rounding follows half-up decimal rounding of the exact float value.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from decimal import ROUND_HALF_UP, Decimal

from aoi_geometry.core.constants import (
    AREA_DECIMAL_PLACES,
    CENTROID_DECIMAL_PLACES,
    EARTH_RADIUS_KM,
    MIN_CALCULATION_ENTRIES,
)
from aoi_geometry.core.exceptions import InvalidGeometryError
from aoi_geometry.models.geometry import Centroid

logger = logging.getLogger("aoi_geometry.core.geometry")

Ring = Sequence[Sequence[float]]


# ---------------------------------------------------------------------------
# Area
# ---------------------------------------------------------------------------


def calculate_area(ring: Ring | None) -> float:
    """Estimate the area enclosed by a closed ``[lng, lat]`` ring.

    Args:
        ring: Closed ring of ``(lng, lat)`` pairs in degrees.

    Returns:
        Area in square kilometres rounded to 2 decimals, always >= 0.
        Winding order does not matter.

    Raises:
        InvalidGeometryError: If the ring is missing, not a sequence, has
            fewer than 3 entries, or contains a malformed pair.
    """
    positions = _check_ring(ring, "calculate_area")

    accumulator = 0.0
    for (lng1, lat1), (lng2, lat2) in zip(positions, positions[1:]):
        lat1_rad = math.radians(lat1)
        lat2_rad = math.radians(lat2)
        lng_delta_rad = math.radians(lng2 - lng1)
        accumulator += lng_delta_rad * (2 + math.sin(lat1_rad) + math.sin(lat2_rad))

    area_km2 = _round_half_up(
        abs(accumulator * EARTH_RADIUS_KM * EARTH_RADIUS_KM / 2),
        AREA_DECIMAL_PLACES,
    )

    if area_km2 == 0.0:
        logger.warning(
            "Degenerate ring | area=0.00 km2 | entries=%d",
            len(positions),
        )

    return area_km2


def calculate_polygon_area(coordinates: Sequence[Ring] | None) -> float:
    """``calculate_area`` on the outer ring of GeoJSON Polygon coordinates.

    Raises:
        InvalidGeometryError: If *coordinates* is empty or the outer ring
            is unusable.
    """
    return calculate_area(_outer_ring(coordinates, "calculate_area"))


# ---------------------------------------------------------------------------
# Centroid
# ---------------------------------------------------------------------------


def calculate_centroid(ring: Ring | None) -> Centroid:
    """Compute the vertex-mean centre of a closed ring.

    Args:
        ring: Closed ring of ``(lng, lat)`` pairs in degrees.

    Returns:
        ``Centroid`` with ``lat`` and ``lng`` rounded to 6 decimals.

    Raises:
        InvalidGeometryError: Same conditions as ``calculate_area``.
    """
    positions = _check_ring(ring, "calculate_centroid")

    # The last entry closes the ring and repeats the first
    vertices = positions[:-1]
    count = len(vertices)
    sum_lng = sum(lng for lng, _lat in vertices)
    sum_lat = sum(lat for _lng, lat in vertices)

    return Centroid(
        lat=_round_half_up(sum_lat / count, CENTROID_DECIMAL_PLACES),
        lng=_round_half_up(sum_lng / count, CENTROID_DECIMAL_PLACES),
    )


def calculate_polygon_centroid(coordinates: Sequence[Ring] | None) -> Centroid:
    """``calculate_centroid`` on the outer ring of GeoJSON Polygon coordinates."""
    return calculate_centroid(_outer_ring(coordinates, "calculate_centroid"))


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _check_ring(ring: object, stage: str) -> list[tuple[float, float]]:
    """Return *ring* as a list of float pairs.

    Raises:
        InvalidGeometryError: If the ring is unusable for calculation.
    """
    if ring is None:
        msg = "Invalid coordinates format: no ring provided"
        raise InvalidGeometryError(msg, stage=stage)
    if not isinstance(ring, Sequence) or isinstance(ring, (str, bytes)):
        msg = f"Invalid coordinates format: ring must be a list, got {type(ring).__name__}"
        raise InvalidGeometryError(msg, stage=stage)
    if len(ring) < MIN_CALCULATION_ENTRIES:
        msg = (
            f"Polygon must have at least {MIN_CALCULATION_ENTRIES} points, "
            f"got {len(ring)}"
        )
        raise InvalidGeometryError(msg, stage=stage)

    positions: list[tuple[float, float]] = []
    for index, position in enumerate(ring):
        try:
            lng, lat = position
            lng, lat = float(lng), float(lat)
        except OverflowError as exc:
            msg = f"Ring position {index} is not finite: too large for a float"
            raise InvalidGeometryError(msg, stage=stage) from exc
        except (TypeError, ValueError) as exc:
            msg = f"Ring position {index} is not a [lng, lat] pair: {position!r}"
            raise InvalidGeometryError(msg, stage=stage) from exc
        if not (math.isfinite(lng) and math.isfinite(lat)):
            msg = f"Ring position {index} is not finite: [{lng}, {lat}]"
            raise InvalidGeometryError(msg, stage=stage)
        positions.append((lng, lat))
    return positions


def _outer_ring(coordinates: object, stage: str) -> object:
    is_list = isinstance(coordinates, Sequence) and not isinstance(coordinates, (str, bytes))
    if not is_list or not coordinates:
        msg = "Invalid coordinates format: expected a non-empty list of rings"
        raise InvalidGeometryError(msg, stage=stage)
    return coordinates[0]  # type: ignore[index]


def _round_half_up(value: float, places: int) -> float:
    """Round the exact binary value of *value* half away from zero."""
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))

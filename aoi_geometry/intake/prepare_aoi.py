"""AOI intake for imagery requests and saved AOIs.

Turns the AOI fields of a request body into an ``AOISummary`` ready to
be stored: validated geometry, area in square kilometres, and a map
anchor centre.

- Polygon / rectangle AOIs: area and centre are calculated from the
  outer ring.  A client-supplied area is cross-checked and flagged when
  it disagrees beyond the configured tolerance; the calculated value is
  kept.
- Circle AOIs arrive as a GeoJSON ``Point``: the centre is the point and
  the area is the one the client computed from its radius.

Oversized areas get a warning string attached rather than being
rejected.
"""

from __future__ import annotations

import logging
import math

from aoi_geometry.core.config import GeometryConfig
from aoi_geometry.core.constants import AOI_TYPES
from aoi_geometry.core.exceptions import InvalidGeometryError, ValidationError
from aoi_geometry.core.geometry import calculate_area, calculate_centroid
from aoi_geometry.core.validation import parse_geometry
from aoi_geometry.models.aoi import AOISummary
from aoi_geometry.models.geometry import Centroid, PolygonGeometry

logger = logging.getLogger("aoi_geometry.intake.prepare_aoi")


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def prepare_aoi(
    aoi_type: str,
    aoi_coordinates: object,
    *,
    provided_area_km2: float | str | None = None,
    config: GeometryConfig | None = None,
    correlation_id: str = "",
) -> AOISummary:
    """Validate an AOI and derive its area and centre.

    Args:
        aoi_type: Drawing-tool shape (``polygon``, ``rectangle``, ``circle``).
        aoi_coordinates: GeoJSON ``Polygon`` or ``Point`` mapping.
        provided_area_km2: Area the client computed, if any.  Numeric
            strings are accepted.
        config: Intake configuration (defaults used when ``None``).
        correlation_id: Request identifier carried onto raised errors.

    Returns:
        An ``AOISummary`` with area, centre, and any warnings.

    Raises:
        InvalidGeometryError: If the AOI type or geometry is invalid.
        ValidationError: If the provided area is negative or not a
            number, or a circle AOI has no area.
    """
    config = config or GeometryConfig()

    normalized_type = aoi_type.strip() if isinstance(aoi_type, str) else ""
    if normalized_type not in AOI_TYPES:
        msg = f"AOI type must be one of: {', '.join(sorted(AOI_TYPES))}; got {aoi_type!r}"
        raise InvalidGeometryError(msg, stage="prepare_aoi", correlation_id=correlation_id)

    provided = _check_provided_area(provided_area_km2, correlation_id)

    try:
        geometry = parse_geometry(aoi_coordinates)
    except InvalidGeometryError as exc:
        exc.correlation_id = correlation_id
        raise

    area_mismatch = False
    if isinstance(geometry, PolygonGeometry):
        area_km2 = calculate_area(geometry.ring)
        center = calculate_centroid(geometry.ring)
        area_mismatch = _cross_check_area(provided, area_km2, config.area_tolerance_ratio)
    else:
        if provided is None:
            msg = "Circle AOI requires aoi_area_km2"
            raise ValidationError(
                msg,
                stage="prepare_aoi",
                code="MISSING_AREA",
                correlation_id=correlation_id,
            )
        area_km2 = provided
        center = Centroid(lat=geometry.lat, lng=geometry.lng)

    # Area reasonableness check
    area_warning = ""
    if area_km2 > config.max_area_km2:
        area_warning = (
            f"Area {area_km2:.2f} km2 exceeds threshold of "
            f"{config.max_area_km2:.0f} km2"
        )
        logger.warning("%s | correlation_id=%s", area_warning, correlation_id)

    logger.info(
        "AOI prepared | type=%s | geometry=%s | area=%.2f km2 | center=(%.6f, %.6f) | "
        "mismatch=%s | correlation_id=%s",
        normalized_type,
        geometry.type,
        area_km2,
        center.lat,
        center.lng,
        area_mismatch,
        correlation_id,
    )

    return AOISummary(
        aoi_type=normalized_type,
        geometry=geometry.to_geojson(),
        area_km2=area_km2,
        center=center,
        provided_area_km2=provided,
        area_mismatch=area_mismatch,
        area_warning=area_warning,
    )


def ensure_saved_aoi_capacity(
    current_count: int,
    *,
    config: GeometryConfig | None = None,
) -> None:
    """Reject a new saved AOI once a user has reached the limit.

    Raises:
        ValidationError: If *current_count* is at or above the limit.
    """
    config = config or GeometryConfig()
    if current_count >= config.max_saved_aois:
        msg = (
            f"You can only save up to {config.max_saved_aois} AOIs. "
            "Please delete some before adding new ones."
        )
        raise ValidationError(msg, stage="saved_aoi", code="SAVED_AOI_LIMIT")


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _check_provided_area(value: object, correlation_id: str) -> float | None:
    """Return the client area as a float; numeric strings from form posts count."""
    if value is None:
        return None
    area: float | None = None
    if isinstance(value, (int, float, str)) and not isinstance(value, bool):
        try:
            area = float(value)
        except (ValueError, OverflowError):
            area = None
    if area is None or not math.isfinite(area) or area < 0:
        if area is None and not isinstance(value, str):
            shown = type(value).__name__
        else:
            shown = repr(value)
        msg = f"AOI area must be a positive number, got {shown}"
        raise ValidationError(
            msg,
            stage="prepare_aoi",
            code="INVALID_AREA",
            correlation_id=correlation_id,
        )
    return area


def _cross_check_area(provided: float | None, calculated: float, tolerance: float) -> bool:
    """Return True if *provided* differs from *calculated* beyond *tolerance*."""
    # Zero means "not supplied" on the request forms
    if not provided:
        return False
    if calculated == 0.0 or abs(provided - calculated) / calculated > tolerance:
        logger.warning(
            "Provided area differs significantly from calculated area | "
            "provided=%.2f km2 | calculated=%.2f km2",
            provided,
            calculated,
        )
        return True
    return False

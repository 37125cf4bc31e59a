"""Thin ingress boundary helpers for request handlers.

Centralises the transport concerns between an HTTP request body and the
AOI intake so that handlers contain only routing and persistence:

- **deserialize_geometry_input**: normalises a JSON-string-or-dict
  request body to a plain dict.
- **summarize_request**: reads the ``aoi_*`` fields from a body and
  hands them to ``prepare_aoi``.
- **build_aoi_record**: summarises a body and returns the ``AOIRecord``
  fields a handler persists.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

import pydantic

from aoi_geometry.core.exceptions import ContractError
from aoi_geometry.intake.prepare_aoi import prepare_aoi
from aoi_geometry.models.contracts import AOIRequestPayload
from aoi_geometry.models.record import AOIRecord

if TYPE_CHECKING:
    from aoi_geometry.core.config import GeometryConfig
    from aoi_geometry.models.aoi import AOISummary

logger = logging.getLogger("aoi_geometry.core.ingress")

_REQUIRED_FIELDS = ("aoi_type", "aoi_coordinates")


# ---------------------------------------------------------------------------
# Request body deserialisation
# ---------------------------------------------------------------------------


def deserialize_geometry_input(raw: str | bytes | dict[str, Any] | object) -> dict[str, Any]:
    """Normalise a request body to a plain dict.

    Args:
        raw: The body as a JSON string/bytes or an already-parsed dict.

    Returns:
        Parsed dict payload.

    Raises:
        ContractError: If *raw* is not valid JSON, not a JSON object, or
            of an unexpected type.
    """
    if isinstance(raw, (str, bytes)):
        try:
            parsed = json.loads(raw)
        except (json.JSONDecodeError, ValueError) as exc:
            msg = f"Request body is not valid JSON: {exc}"
            raise ContractError(msg, stage="ingress", code="INVALID_JSON") from exc
        if not isinstance(parsed, dict):
            msg = f"Request body JSON must be an object, got {type(parsed).__name__}"
            raise ContractError(msg, stage="ingress", code="INVALID_INPUT_TYPE")
        return parsed
    if isinstance(raw, dict):
        return raw
    msg = f"Unexpected request body type: {type(raw).__name__}"
    raise ContractError(msg, stage="ingress", code="INVALID_INPUT_TYPE")


# ---------------------------------------------------------------------------
# Request -> AOI summary
# ---------------------------------------------------------------------------


def summarize_request(
    raw: str | bytes | dict[str, Any] | object,
    *,
    config: GeometryConfig | None = None,
    correlation_id: str = "",
) -> AOISummary:
    """Build an ``AOISummary`` from an imagery-request or saved-AOI body.

    Raises:
        ContractError: If the body is malformed or lacks AOI fields.
        InvalidGeometryError: If the AOI geometry or type is invalid.
        ValidationError: If the supplied area is unusable.
    """
    body: AOIRequestPayload = deserialize_geometry_input(raw)  # type: ignore[assignment]

    missing = [name for name in _REQUIRED_FIELDS if not body.get(name)]
    if missing:
        msg = f"Request body missing required field(s): {', '.join(missing)}"
        raise ContractError(
            msg,
            stage="ingress",
            code="MISSING_AOI_FIELDS",
            correlation_id=correlation_id,
        )

    logger.debug(
        "Summarising AOI request | type=%s | correlation_id=%s",
        body["aoi_type"],
        correlation_id,
    )

    return prepare_aoi(
        body["aoi_type"],
        body["aoi_coordinates"],
        provided_area_km2=body.get("aoi_area_km2"),
        config=config,
        correlation_id=correlation_id,
    )


def build_aoi_record(
    raw: str | bytes | dict[str, Any] | object,
    *,
    config: GeometryConfig | None = None,
    correlation_id: str = "",
) -> AOIRecord:
    """Summarise a request body into the AOI fields stored on the record.

    Raises:
        ContractError: If the body is malformed, lacks AOI fields, or the
            summary violates the record constraints.
        InvalidGeometryError: If the AOI geometry or type is invalid.
        ValidationError: If the supplied area is unusable.
    """
    summary = summarize_request(raw, config=config, correlation_id=correlation_id)
    try:
        return AOIRecord.from_summary(summary)
    except pydantic.ValidationError as exc:
        msg = f"AOI summary does not satisfy the record schema: {exc.error_count()} error(s)"
        raise ContractError(
            msg,
            stage="ingress",
            code="RECORD_SCHEMA_MISMATCH",
            correlation_id=correlation_id,
        ) from exc

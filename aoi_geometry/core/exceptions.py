"""Geometry exception taxonomy.

Provides a shared base exception for the AOI geometry utility. Every
domain exception inherits from ``GeometryError`` and carries structured
context fields so that request handlers can map failures to consistent
4xx responses and log lines.

Taxonomy categories
-------------------
- ``ValidationError``   : input violations, never retryable.
- ``ContractError``     : request payload drift (bad JSON, wrong types).

``InvalidGeometryError`` is the one error the calculators raise. The
boolean coordinate validator never raises.

Every exception exposes ``to_error_dict()`` for a stable structured
error payload suitable for API responses and logging.
"""

from __future__ import annotations


class GeometryError(Exception):
    """Base exception for all AOI geometry errors.

    Attributes:
        message: Human-readable error description.
        stage: Processing stage where the error occurred
            (e.g. ``"calculate_area"``, ``"ingress"``).
        code: Machine-readable error code (e.g. ``"INVALID_GEOMETRY"``).
        retryable: Whether retrying the same call could succeed.  Always
            ``False`` for geometry errors; kept in the error payload.
        correlation_id: Request correlation identifier.
    """

    #: Default stage for subclasses (override via class attribute or kwarg).
    default_stage: str = ""
    #: Default code for subclasses (override via class attribute or kwarg).
    default_code: str = ""

    def __init__(
        self,
        message: str = "",
        *,
        stage: str = "",
        code: str = "",
        retryable: bool = False,
        correlation_id: str = "",
    ) -> None:
        self.message = message
        self.stage = stage or self.default_stage
        self.code = code or self.default_code
        self.retryable = retryable
        self.correlation_id = correlation_id
        super().__init__(message)

    @property
    def category(self) -> str:
        """Return the error category based on concrete class."""
        if isinstance(self, ContractError):
            return "contract"
        if isinstance(self, ValidationError):
            return "validation"
        return "permanent"

    def to_error_dict(self) -> dict[str, object]:
        """Return a structured error payload with stable keys."""
        return {
            "category": self.category,
            "code": self.code,
            "stage": self.stage,
            "message": self.message,
            "retryable": self.retryable,
            "correlation_id": self.correlation_id,
        }


# ---------------------------------------------------------------------------
# Category base classes
# ---------------------------------------------------------------------------


class ValidationError(GeometryError):
    """Input or domain-model validation failure. Never retryable."""

    def __init__(self, message: str = "", **kwargs: object) -> None:
        kwargs.setdefault("retryable", False)
        super().__init__(message, **kwargs)  # type: ignore[arg-type]


class ContractError(GeometryError):
    """Request payload does not match the expected shape. Never retryable."""

    def __init__(self, message: str = "", **kwargs: object) -> None:
        kwargs.setdefault("retryable", False)
        super().__init__(message, **kwargs)  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# Domain errors
# ---------------------------------------------------------------------------


class InvalidGeometryError(ValidationError):
    """Raised when a ring or GeoJSON geometry cannot be used for calculation.

    Covers a missing ring, a ring that is not a sequence, a ring with too
    few entries, and malformed ``[lng, lat]`` pairs.
    """

    default_stage = "geometry"
    default_code = "INVALID_GEOMETRY"

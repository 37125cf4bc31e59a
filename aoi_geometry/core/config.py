"""AOI intake configuration loaded from environment variables.

All values have defaults matching the behaviour of the imagery-request
and saved-AOI handlers. The Earth radius and rounding precision are
deliberately constants (see ``constants``), not settings.

Fail-fast validation:
    ``from_env()`` raises ``ConfigValidationError`` if any numeric
    value is out of its valid range.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from aoi_geometry.core.exceptions import GeometryError


class ConfigValidationError(GeometryError):
    """Raised when configuration values are out of valid range.

    Attributes:
        key: The configuration key that failed validation.
        value: The invalid value.
        message: Human-readable description of the valid range.
    """

    default_stage = "config"
    default_code = "CONFIG_VALIDATION_FAILED"

    def __init__(self, key: str, value: object, message: str) -> None:
        self.key = key
        self.value = value
        super().__init__(f"Invalid configuration {key}={value!r}: {message}")


@dataclass(frozen=True, slots=True)
class GeometryConfig:
    """Immutable AOI intake configuration.

    Attributes:
        area_tolerance_pct: Relative difference (percent) allowed between a
            client-supplied area and the calculated one before a mismatch
            is flagged.
        max_area_km2: Area threshold (km²) above which a warning is attached
            to the AOI summary.
        max_saved_aois: Per-user limit on saved AOIs.
    """

    area_tolerance_pct: float = 10.0
    max_area_km2: float = 100_000.0
    max_saved_aois: int = 50

    @property
    def area_tolerance_ratio(self) -> float:
        """Tolerance as a ratio (``10`` percent -> ``0.1``)."""
        return self.area_tolerance_pct / 100.0

    @classmethod
    def from_env(cls) -> GeometryConfig:
        """Load and validate configuration from environment variables.

        Raises:
            ConfigValidationError: If a numeric value is out of range.
            ValueError: If a numeric environment variable cannot be
                parsed (e.g. ``AOI_MAX_AREA_KM2=abc``).
        """
        config = cls(
            area_tolerance_pct=float(os.getenv("AOI_AREA_TOLERANCE_PCT", "10")),
            max_area_km2=float(os.getenv("AOI_MAX_AREA_KM2", "100000")),
            max_saved_aois=int(os.getenv("AOI_MAX_SAVED", "50")),
        )
        _validate(config)
        return config


def _validate(config: GeometryConfig) -> None:
    """Validate configuration ranges.  Raises ``ConfigValidationError``."""
    if not 0.0 <= config.area_tolerance_pct <= 100.0:
        raise ConfigValidationError(
            "AOI_AREA_TOLERANCE_PCT",
            config.area_tolerance_pct,
            "must be between 0 and 100 (percentage)",
        )

    if config.max_area_km2 <= 0:
        raise ConfigValidationError(
            "AOI_MAX_AREA_KM2",
            config.max_area_km2,
            "must be > 0 (square kilometres)",
        )

    if config.max_saved_aois < 1:
        raise ConfigValidationError(
            "AOI_MAX_SAVED",
            config.max_saved_aois,
            "must be >= 1",
        )

"""Runtime configuration loaded from environment variables.

All values have defaults matching a standard web map (EPSG:3857, 256 px
tiles, SVG rendering, mean earth radius).

Fail-fast validation:
    ``from_env()`` raises ``ConfigValidationError`` if any value is out of
    its valid range, so a bad setting is caught at startup rather than
    on the first redraw.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import TYPE_CHECKING

from geodonut.core.constants import (
    CRS_EQUIRECTANGULAR,
    CRS_SIMPLE,
    CRS_WEB_MERCATOR,
    DEFAULT_RING_SEGMENTS,
    DEFAULT_TILE_SIZE,
    EARTH_RADIUS_M,
    RENDERER_CANVAS,
    RENDERER_SVG,
)
from geodonut.core.exceptions import ValidationError

if TYPE_CHECKING:
    from geodonut.models.geometry import LatLng
    from geodonut.models.style import PathStyle
    from geodonut.projection.view import ViewTransform
    from geodonut.rendering.base import PathEmitter
    from geodonut.shapes.donut import Donut

KNOWN_RENDERERS = (RENDERER_SVG, RENDERER_CANVAS)
KNOWN_CRS = (CRS_WEB_MERCATOR, CRS_EQUIRECTANGULAR, CRS_SIMPLE)

MIN_RING_SEGMENTS = 8


class ConfigValidationError(ValidationError):
    """Raised when configuration values are out of valid range.

    Attributes:
        key: The configuration key that failed validation.
        value: The invalid value.
        message: Human-readable description of the valid range.
    """

    default_operation = "config"
    default_code = "CONFIG_VALIDATION_FAILED"

    def __init__(self, key: str, value: object, message: str) -> None:
        self.key = key
        self.value = value
        super().__init__(f"Invalid configuration {key}={value!r}: {message}")


@dataclass(frozen=True, slots=True)
class DonutConfig:
    """Immutable rendering configuration.

    Attributes:
        renderer: Active rendering backend (``svg`` or ``canvas``).
        crs: Map view coordinate system (``EPSG:3857``, ``equirectangular``, ``simple``).
        earth_radius_m: Mean planetary radius in metres for geodesic radii.
        tile_size: Pixel size of the world at zoom 0.
        ring_segments: Vertices per ring when exporting GeoJSON.
        click_tolerance_px: Extra pixel padding added to shape bounds.
    """

    renderer: str = RENDERER_SVG
    crs: str = CRS_WEB_MERCATOR
    earth_radius_m: float = EARTH_RADIUS_M
    tile_size: int = DEFAULT_TILE_SIZE
    ring_segments: int = DEFAULT_RING_SEGMENTS
    click_tolerance_px: float = 0.0

    @classmethod
    def from_env(cls) -> DonutConfig:
        """Load and validate configuration from environment variables.

        Raises:
            ConfigValidationError: If a value is out of range or unknown.
            ValueError: If a numeric environment variable cannot be
                parsed (e.g. ``GEODONUT_TILE_SIZE=abc``).
        """
        config = cls(
            renderer=os.getenv("GEODONUT_RENDERER", RENDERER_SVG),
            crs=os.getenv("GEODONUT_CRS", CRS_WEB_MERCATOR),
            earth_radius_m=float(os.getenv("GEODONUT_EARTH_RADIUS_M", str(EARTH_RADIUS_M))),
            tile_size=int(os.getenv("GEODONUT_TILE_SIZE", str(DEFAULT_TILE_SIZE))),
            ring_segments=int(os.getenv("GEODONUT_RING_SEGMENTS", str(DEFAULT_RING_SEGMENTS))),
            click_tolerance_px=float(os.getenv("GEODONUT_CLICK_TOLERANCE_PX", "0")),
        )
        validate(config)
        return config


def validate(config: DonutConfig) -> None:
    """Validate configuration ranges.  Raises ``ConfigValidationError``."""
    if config.renderer not in KNOWN_RENDERERS:
        raise ConfigValidationError(
            "GEODONUT_RENDERER",
            config.renderer,
            f"must be one of {', '.join(KNOWN_RENDERERS)}",
        )

    if config.crs not in KNOWN_CRS:
        raise ConfigValidationError(
            "GEODONUT_CRS",
            config.crs,
            f"must be one of {', '.join(KNOWN_CRS)}",
        )

    if not config.earth_radius_m > 0:
        raise ConfigValidationError(
            "GEODONUT_EARTH_RADIUS_M",
            config.earth_radius_m,
            "must be > 0 (metres)",
        )

    if config.tile_size <= 0:
        raise ConfigValidationError(
            "GEODONUT_TILE_SIZE",
            config.tile_size,
            "must be > 0 (pixels)",
        )

    if config.ring_segments < MIN_RING_SEGMENTS:
        raise ConfigValidationError(
            "GEODONUT_RING_SEGMENTS",
            config.ring_segments,
            f"must be >= {MIN_RING_SEGMENTS}",
        )

    if config.click_tolerance_px < 0:
        raise ConfigValidationError(
            "GEODONUT_CLICK_TOLERANCE_PX",
            config.click_tolerance_px,
            "must be >= 0 (pixels)",
        )


def build_view(
    config: DonutConfig,
    *,
    zoom: float,
    pixel_origin: tuple[float, float] = (0.0, 0.0),
) -> ViewTransform:
    """Create the map view selected by ``config.crs``."""
    from geodonut.projection.view import make_view

    return make_view(
        config.crs,
        zoom=zoom,
        pixel_origin=pixel_origin,
        earth_radius_m=config.earth_radius_m,
        tile_size=config.tile_size,
    )


def build_emitter(config: DonutConfig, style: PathStyle | None = None) -> PathEmitter:
    """Create the path emitter selected by ``config.renderer``."""
    from geodonut.rendering.factory import get_emitter

    return get_emitter(config.renderer, style=style)


def build_donut(
    config: DonutConfig,
    center: LatLng | tuple[float, float],
    radius: float,
    inner_radius: float = 0.0,
    **options: object,
) -> Donut:
    """Create a ``Donut`` carrying the configured tolerance and export settings.

    ``click_tolerance_px``, ``ring_segments`` and ``earth_radius_m`` come
    from *config* unless given in *options*; other options pass through.
    """
    from geodonut.shapes.donut import Donut

    settings: dict[str, object] = {
        "click_tolerance_px": config.click_tolerance_px,
        "ring_segments": config.ring_segments,
        "earth_radius_m": config.earth_radius_m,
    }
    settings.update(options)
    return Donut(center, radius, inner_radius, **settings)  # type: ignore[arg-type]

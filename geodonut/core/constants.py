"""Shared constants used across the package.

Centralises the reference-surface radius, projection limits, and string
markers used by the projector, the views, and the path emitters.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Reference surface
# ---------------------------------------------------------------------------

EARTH_RADIUS_M: float = 6_371_000.0
"""Mean earth radius in metres used for great-circle distances."""

WEB_MERCATOR_RADIUS_M: float = 6_378_137.0
"""Sphere radius of the EPSG:3857 projection in metres."""

MAX_MERCATOR_LATITUDE: float = 85.0511287798
"""Latitude beyond which spherical mercator is clamped (degrees)."""

# ---------------------------------------------------------------------------
# Views
# ---------------------------------------------------------------------------

CRS_WEB_MERCATOR = "EPSG:3857"
CRS_EQUIRECTANGULAR = "equirectangular"
CRS_SIMPLE = "simple"

DEFAULT_TILE_SIZE: int = 256
"""Pixel size of one tile at zoom 0."""

# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------

RENDERER_SVG = "svg"
RENDERER_CANVAS = "canvas"

EMPTY_PATH: str = "M0 0"
"""Path data that renders nothing."""

MIN_PIXEL_RADIUS: int = 1
"""Smallest radius (device pixels) an emitter will draw."""

DEFAULT_RING_SEGMENTS: int = 64
"""Number of vertices per ring in GeoJSON export."""

MIN_POLYGON_SEGMENTS: int = 3
"""Fewest vertices that still form a polygon ring."""

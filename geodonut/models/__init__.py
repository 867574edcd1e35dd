"""Data models.

Defines the data structures used throughout the package:
- LatLng / Point / PixelBounds: geographic and pixel coordinates
- ProjectedCircle / DonutProjection: on-screen footprint of the rings
- PathStyle: stroke and fill options
- DonutFeature: GeoJSON export schema
"""

from geodonut.models.geometry import (
    DonutProjection,
    LatLng,
    PixelBounds,
    Point,
    ProjectedCircle,
)
from geodonut.models.style import PathStyle

__all__ = [
    "DonutProjection",
    "LatLng",
    "PathStyle",
    "PixelBounds",
    "Point",
    "ProjectedCircle",
]

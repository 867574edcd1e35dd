"""Geographic-to-pixel projection.

- view: ``ViewTransform`` interface and concrete map views
- geodesic: ``GeodesicProjector`` for circles with great-circle radii
"""

from geodonut.projection.geodesic import GeodesicProjector, project_circle
from geodonut.projection.view import (
    EquirectangularView,
    FlatView,
    ViewTransform,
    WebMercatorView,
    make_view,
)

__all__ = [
    "EquirectangularView",
    "FlatView",
    "GeodesicProjector",
    "ViewTransform",
    "WebMercatorView",
    "make_view",
    "project_circle",
]

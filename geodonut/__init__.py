"""Geodesic donut (annulus) overlays for 2-D map views.

Projects an outer and inner geodesic circle around a geographic centre
into pixel space and emits drawable paths for SVG and raster
(immediate-mode) rendering backends.
"""

from geodonut.core.exceptions import InvalidGeometry
from geodonut.models.geometry import LatLng
from geodonut.shapes.donut import Donut, donut

__version__ = "0.1.0"

__all__ = ["Donut", "InvalidGeometry", "LatLng", "donut"]

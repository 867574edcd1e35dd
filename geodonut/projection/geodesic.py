"""Geodesic circle to screen-space projection.

Computes the pixel centre and the horizontal / vertical pixel radii of a
circle whose radius is a great-circle distance on a sphere.

The vertical radius comes from projecting the two points ``radius``
north and south of the centre.  The horizontal radius is found with the
spherical law of cosines at the latitude of the projected midpoint, so
longitude convergence towards the poles is accounted for.

Degenerate inputs (centre at or near a pole, zero radius) are expected:
the projector falls back to the small-angle approximation
``lngR = latR / cos(lat)`` and, failing that, to a zero radius.  It never
raises for them and never returns a non-finite radius.

Views that are not geodesic (flat planes) skip all of this: the radius is
measured along the x axis of the plane and assumed isotropic.
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

from geodonut.core.exceptions import InvalidGeometry
from geodonut.models.geometry import LatLng, Point, ProjectedCircle
from geodonut.utils.helpers import is_real, safe_acos

if TYPE_CHECKING:
    from geodonut.projection.view import ViewTransform

logger = logging.getLogger(__name__)

DEG = math.pi / 180


class GeodesicProjector:
    """Projects geodesic circles into a view's pixel space."""

    def project(self, center: LatLng, radius_m: float, view: ViewTransform) -> ProjectedCircle:
        """Project a circle of *radius_m* around *center* into *view*.

        Args:
            center: Geographic centre of the circle.
            radius_m: Radius in metres (plane units for flat views).
            view: The active map view.

        Returns:
            A ``ProjectedCircle`` whose point is relative to
            ``view.pixel_origin``.

        Raises:
            InvalidGeometry: If *radius_m* is negative or not a real number.
        """
        if not is_real(radius_m) or radius_m < 0:
            raise InvalidGeometry("radius_m", radius_m, "must be a finite number >= 0", operation="project")

        if not view.is_geodesic:
            return self._project_flat(center, radius_m, view)
        return self._project_geodesic(center, radius_m, view)

    def _project_geodesic(self, center: LatLng, radius_m: float, view: ViewTransform) -> ProjectedCircle:
        lat, lng = center.lat, center.lng

        lat_r = (radius_m / view.earth_radius_m) / DEG
        top = view.forward(LatLng(lat + lat_r, lng))
        bottom = view.forward(LatLng(lat - lat_r, lng))
        p = top.add(bottom).divide_by(2)
        lat2 = view.inverse(p).lat

        lng_r = _longitude_half_width(lat, lat2, lat_r)
        degenerate = False
        if math.isnan(lng_r) or lng_r == 0:
            degenerate = True
            lng_r = lat_r / math.cos(DEG * lat)
            logger.debug(
                "Degenerate projection | center=(%.6f, %.6f) | radius=%.3f m | fallback lngR=%g",
                lat,
                lng,
                radius_m,
                lng_r,
            )

        radius_x = 0.0
        if math.isfinite(lng_r):
            radius_x = p.x - view.forward(LatLng(lat2, lng - lng_r)).x
        if not math.isfinite(radius_x):
            radius_x = 0.0
            degenerate = True

        radius_y = p.y - top.y
        if not math.isfinite(radius_y):
            radius_y = 0.0
            degenerate = True

        return ProjectedCircle(
            point=p.subtract(view.pixel_origin),
            radius_x=radius_x,
            radius_y=radius_y,
            degenerate=degenerate,
        )

    def _project_flat(self, center: LatLng, radius_m: float, view: ViewTransform) -> ProjectedCircle:
        offset = view.crs_project(center).subtract(Point(radius_m, 0))
        latlng2 = view.crs_unproject(offset)

        point = view.layer_point(center)
        radius = point.x - view.layer_point(latlng2).x
        return ProjectedCircle(point=point, radius_x=radius, radius_y=radius)


def _longitude_half_width(lat: float, lat2: float, lat_r: float) -> float:
    """Angular half-width in longitude (degrees), NaN when undefined."""
    denominator = math.cos(lat * DEG) * math.cos(lat2 * DEG)
    if denominator == 0:
        return math.nan
    numerator = math.cos(lat_r * DEG) - math.sin(lat * DEG) * math.sin(lat2 * DEG)
    return safe_acos(numerator / denominator) / DEG


_DEFAULT_PROJECTOR = GeodesicProjector()


def project_circle(center: LatLng, radius_m: float, view: ViewTransform) -> ProjectedCircle:
    """Project a circle with the shared default projector."""
    return _DEFAULT_PROJECTOR.project(center, radius_m, view)

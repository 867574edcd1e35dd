"""Donut overlay shape.

A ``Donut`` owns a geographic centre and a ``DonutGeometry`` and adds the
capabilities a map layer needs from a shape: projection into the current
view (cached until something changes), pixel and geographic bounds,
emptiness against the visible viewport, rendering through a backend
emitter, and GeoJSON export.

Example::

    ring = donut((50.5, 30.5), radius=200, inner_radius=100)
    view = WebMercatorView(zoom=15)
    d = ring.render(get_emitter("svg"), view)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from geodonut.core.constants import DEFAULT_RING_SEGMENTS, EARTH_RADIUS_M, MIN_POLYGON_SEGMENTS
from geodonut.core.exceptions import InvalidGeometry
from geodonut.models.export import DonutFeature, DonutProperties, PolygonGeometry
from geodonut.models.geometry import LatLng, PixelBounds, Point
from geodonut.models.style import PathStyle
from geodonut.shapes.geometry import DonutGeometry
from geodonut.utils.helpers import is_real

if TYPE_CHECKING:
    from pyproj import Geod

    from geodonut.models.geometry import DonutProjection
    from geodonut.projection.geodesic import GeodesicProjector
    from geodonut.projection.view import ViewTransform
    from geodonut.rendering.base import DrawingContext, PathEmitter

logger = logging.getLogger(__name__)


class Donut:
    """A donut-shaped map overlay.

    Args:
        center: Geographic centre as ``LatLng`` or ``(lat, lng)``.
        radius: Outer radius in metres.
        inner_radius: Inner radius in metres, or a fraction of the outer
            radius when *inner_radius_as_percent* is set.
        inner_radius_as_percent: Interpret *inner_radius* as a fraction.
        style: Stroke / fill options; used for bounds padding.
        click_tolerance_px: Extra pixel padding around the bounds.
        ring_segments: Default vertices per ring for ``to_geojson``.
        earth_radius_m: Default sphere radius for ``to_geojson``.

    Raises:
        InvalidGeometry: If the centre, radii or export defaults are invalid.
    """

    def __init__(
        self,
        center: LatLng | tuple[float, float],
        radius: float,
        inner_radius: float = 0.0,
        *,
        inner_radius_as_percent: bool = False,
        style: PathStyle | None = None,
        click_tolerance_px: float = 0.0,
        ring_segments: int = DEFAULT_RING_SEGMENTS,
        earth_radius_m: float = EARTH_RADIUS_M,
        projector: GeodesicProjector | None = None,
    ) -> None:
        _check_segments(ring_segments, "__init__")
        _check_earth_radius(earth_radius_m, "__init__")
        self._center = LatLng.coerce(center)
        self._geometry = DonutGeometry(
            radius,
            inner_radius,
            inner_radius_as_percent=inner_radius_as_percent,
            projector=projector,
        )
        self.style = style or PathStyle()
        self.click_tolerance_px = click_tolerance_px
        self.ring_segments = ring_segments
        self.earth_radius_m = earth_radius_m
        self._projection: DonutProjection | None = None
        self._projected_for: tuple[object, ...] | None = None

    def __repr__(self) -> str:
        return f"Donut(center={self._center!r}, geometry={self._geometry!r})"

    @property
    def geometry(self) -> DonutGeometry:
        return self._geometry

    # ------------------------------------------------------------------
    # Centre and radii
    # ------------------------------------------------------------------

    def get_center(self) -> LatLng:
        return self._center

    def set_center(self, center: LatLng | tuple[float, float]) -> Donut:
        """Move the donut.  Invalidates the cached projection."""
        self._center = LatLng.coerce(center)
        self.invalidate()
        return self

    def get_radius(self) -> float:
        return self._geometry.get_radius()

    def set_radius(self, radius: float) -> Donut:
        """Set the outer radius in metres (see ``DonutGeometry.set_outer_radius``)."""
        self._geometry.set_outer_radius(radius)
        self.invalidate()
        return self

    def get_inner_radius(self) -> float:
        return self._geometry.get_inner_radius()

    def set_inner_radius(self, radius: float) -> Donut:
        """Set the inner radius (see ``DonutGeometry.set_inner_radius``)."""
        self._geometry.set_inner_radius(radius)
        self.invalidate()
        return self

    @property
    def inner_radius_as_percent(self) -> bool:
        return self._geometry.inner_radius_as_percent

    # ------------------------------------------------------------------
    # Projection and bounds
    # ------------------------------------------------------------------

    def invalidate(self) -> None:
        """Drop the cached projection so the next redraw recomputes it."""
        self._projection = None
        self._projected_for = None

    def project(self, view: ViewTransform) -> DonutProjection:
        """Return both rings projected into *view*, reusing the cache if valid."""
        key = view.state_key()
        if self._projection is None or self._projected_for != key:
            self._projection = self._geometry.project(self._center, view)
            self._projected_for = key
        return self._projection

    def get_pixel_bounds(self, view: ViewTransform) -> PixelBounds:
        """Layer-pixel bounds of the outer ring, padded by the click tolerance."""
        outer = self.project(view).outer
        r = outer.radius_x
        r2 = outer.radius_y or r
        w = self.style.click_tolerance(self.click_tolerance_px)
        half = Point(r + w, r2 + w)
        return PixelBounds(outer.point.subtract(half), outer.point.add(half))

    def get_bounds(self, view: ViewTransform) -> tuple[float, float, float, float]:
        """Geographic bounds ``(min_lng, min_lat, max_lng, max_lat)`` of the outer ring."""
        outer = self.project(view).outer
        half = Point(outer.radius_x, outer.radius_y or outer.radius_x)
        a = view.layer_point_to_latlng(outer.point.subtract(half))
        b = view.layer_point_to_latlng(outer.point.add(half))
        return (
            min(a.lng, b.lng),
            min(a.lat, b.lat),
            max(a.lng, b.lng),
            max(a.lat, b.lat),
        )

    def is_empty(self, view: ViewTransform, viewport: PixelBounds | None = None) -> bool:
        """Whether the donut has no visible extent inside *viewport*.

        Without a viewport the shape is never considered empty.
        """
        if viewport is None:
            return False
        outer = self.project(view).outer
        return bool(outer.radius_x) and not viewport.intersects(self.get_pixel_bounds(view))

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def render(
        self,
        emitter: PathEmitter,
        view: ViewTransform,
        *,
        ctx: DrawingContext | None = None,
        viewport: PixelBounds | None = None,
    ) -> str | None:
        """Draw the donut with the active backend's emitter.

        Returns the SVG path data for vector emitters and ``None`` for
        raster emitters, which draw onto *ctx*.
        """
        projection = self.project(view)
        return emitter.render(projection, is_empty=self.is_empty(view, viewport), ctx=ctx)

    # ------------------------------------------------------------------
    # Export
    # ------------------------------------------------------------------

    def to_geojson(
        self,
        *,
        segments: int | None = None,
        earth_radius_m: float | None = None,
    ) -> DonutFeature:
        """Export the donut as a GeoJSON polygon feature.

        Rings are sampled on a sphere of radius *earth_radius_m* with
        *segments* vertices each; either falls back to the value the donut
        was created with.  A zero inner radius yields no hole.

        Raises:
            InvalidGeometry: If *segments* is not an integer >= 3 or
                *earth_radius_m* is not a positive number.
        """
        segments = self.ring_segments if segments is None else segments
        earth_radius_m = self.earth_radius_m if earth_radius_m is None else earth_radius_m
        _check_segments(segments, "to_geojson")
        _check_earth_radius(earth_radius_m, "to_geojson")

        from pyproj import Geod
        from shapely.geometry import Polygon, mapping
        from shapely.geometry.polygon import orient

        geod = Geod(a=earth_radius_m, b=earth_radius_m)
        outer_m = self._geometry.outer_radius
        inner_m = self._geometry.resolve_inner_radius()

        exterior = _ring(geod, self._center, outer_m, segments)
        holes = [_ring(geod, self._center, inner_m, segments)] if inner_m > 0 else []
        polygon = orient(Polygon(exterior, holes=holes), sign=1.0)

        outer_area, _ = geod.polygon_area_perimeter(*zip(*exterior, strict=True))
        area_m2 = abs(outer_area)
        for hole in holes:
            hole_area, _ = geod.polygon_area_perimeter(*zip(*hole, strict=True))
            area_m2 -= abs(hole_area)

        coordinates = [[list(c) for c in ring] for ring in mapping(polygon)["coordinates"]]
        logger.debug(
            "Exported donut | center=(%.6f, %.6f) | outer=%.1f m | inner=%.1f m | area=%.1f m2",
            self._center.lat,
            self._center.lng,
            outer_m,
            inner_m,
            area_m2,
        )
        return DonutFeature(
            geometry=PolygonGeometry(coordinates=coordinates),
            properties=DonutProperties(
                center=[self._center.lng, self._center.lat],
                radius_m=outer_m,
                inner_radius=self._geometry.inner_radius,
                inner_radius_as_percent=self._geometry.inner_radius_as_percent,
                inner_radius_m=inner_m,
                area_m2=area_m2,
            ),
        )


def _check_segments(segments: object, operation: str) -> None:
    if isinstance(segments, bool) or not isinstance(segments, int):
        valid = False
    else:
        valid = segments >= MIN_POLYGON_SEGMENTS
    if not valid:
        raise InvalidGeometry(
            "segments",
            segments,
            f"must be an integer >= {MIN_POLYGON_SEGMENTS}",
            operation=operation,
        )


def _check_earth_radius(radius: object, operation: str) -> None:
    if not is_real(radius) or radius <= 0:  # type: ignore[operator]
        raise InvalidGeometry("earth_radius_m", radius, "must be > 0 (metres)", operation=operation)


def _ring(geod: Geod, center: LatLng, radius_m: float, segments: int) -> list[tuple[float, float]]:
    """Closed ``(lng, lat)`` ring at *radius_m* around *center*."""
    azimuths = [360.0 * i / segments for i in range(segments)]
    lons, lats, _ = geod.fwd(
        [center.lng] * segments,
        [center.lat] * segments,
        azimuths,
        [radius_m] * segments,
    )
    ring = list(zip(lons, lats, strict=True))
    ring.append(ring[0])
    return ring


def donut(
    center: LatLng | tuple[float, float],
    radius: float,
    inner_radius: float = 0.0,
    **options: object,
) -> Donut:
    """Create a ``Donut``; keyword options are passed through."""
    return Donut(center, radius, inner_radius, **options)  # type: ignore[arg-type]

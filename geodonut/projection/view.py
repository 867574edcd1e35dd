"""Map view transforms between geographic and pixel space.

A view is the host map's coordinate system at a given zoom and pan
position.  The projector only talks to the ``ViewTransform`` interface:

    1. ``crs_project`` / ``crs_unproject``: geographic <-> CRS plane units.
    2. ``forward`` / ``inverse``: geographic <-> absolute pixels.
    3. ``pixel_origin``: top-left pixel of the layer frame.
    4. ``earth_radius_m`` / ``is_geodesic``: reference surface and whether
       radii are great-circle distances.

Concrete views use pyproj for the geographic projections (Web Mercator
and a spherical equidistant cylindrical plane) and an identity plane for
flat maps.
"""

from __future__ import annotations

import abc
import functools
import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

from geodonut.core.constants import (
    CRS_EQUIRECTANGULAR,
    CRS_SIMPLE,
    CRS_WEB_MERCATOR,
    DEFAULT_TILE_SIZE,
    EARTH_RADIUS_M,
    MAX_MERCATOR_LATITUDE,
    WEB_MERCATOR_RADIUS_M,
)
from geodonut.models.geometry import LatLng, Point

if TYPE_CHECKING:
    from pyproj import Transformer

GEOGRAPHIC_CRS = "EPSG:4326"


@dataclass(frozen=True, slots=True)
class Transformation:
    """Affine map from CRS plane units to pixels at scale 1.

    ``pixel = scale * (a * x + b, c * y + d)``
    """

    a: float
    b: float
    c: float
    d: float

    def transform(self, point: Point, scale: float) -> Point:
        return Point(scale * (self.a * point.x + self.b), scale * (self.c * point.y + self.d))

    def untransform(self, point: Point, scale: float) -> Point:
        return Point((point.x / scale - self.b) / self.a, (point.y / scale - self.d) / self.c)


# Both pyproj planes below span +/- pi * a horizontally.
_SPHERE_SCALE = 0.5 / (math.pi * WEB_MERCATOR_RADIUS_M)
SPHERE_TRANSFORMATION = Transformation(_SPHERE_SCALE, 0.5, -_SPHERE_SCALE, 0.5)
SIMPLE_TRANSFORMATION = Transformation(1.0, 0.0, -1.0, 0.0)


@functools.lru_cache(maxsize=8)
def _transformers(proj_crs: str) -> tuple[Transformer, Transformer]:
    """Return cached (to_plane, to_geographic) transformers for *proj_crs*."""
    from pyproj import Transformer

    to_plane = Transformer.from_crs(GEOGRAPHIC_CRS, proj_crs, always_xy=True)
    to_geographic = Transformer.from_crs(proj_crs, GEOGRAPHIC_CRS, always_xy=True)
    return to_plane, to_geographic


class ViewTransform(abc.ABC):
    """Abstract map view at a fixed zoom and pixel origin.

    Concrete views must override ``crs_project`` and ``crs_unproject``;
    the pixel mapping is shared and driven by ``transformation`` and
    ``scale``.
    """

    #: Identifier of the coordinate system (e.g. ``"EPSG:3857"``).
    crs: str = ""
    #: Whether radii are great-circle distances on ``earth_radius_m``.
    is_geodesic: bool = True
    transformation: Transformation = SPHERE_TRANSFORMATION

    def __init__(
        self,
        *,
        zoom: float,
        pixel_origin: tuple[float, float] | Point = (0.0, 0.0),
        earth_radius_m: float = EARTH_RADIUS_M,
        tile_size: int = DEFAULT_TILE_SIZE,
    ) -> None:
        self._zoom = float(zoom)
        if isinstance(pixel_origin, Point):
            self._pixel_origin = pixel_origin
        else:
            self._pixel_origin = Point(float(pixel_origin[0]), float(pixel_origin[1]))
        self._earth_radius_m = float(earth_radius_m)
        self._tile_size = int(tile_size)

    @property
    def zoom(self) -> float:
        return self._zoom

    @property
    def pixel_origin(self) -> Point:
        """Absolute pixel position of the layer frame's top-left corner."""
        return self._pixel_origin

    @property
    def earth_radius_m(self) -> float:
        """Mean planetary radius in metres."""
        return self._earth_radius_m

    @property
    def scale(self) -> float:
        """Pixels per transformed CRS unit at the current zoom."""
        return self._tile_size * 2**self._zoom

    # ------------------------------------------------------------------
    # Abstract methods (every view must implement these)
    # ------------------------------------------------------------------

    @abc.abstractmethod
    def crs_project(self, latlng: LatLng) -> Point:
        """Project a geographic coordinate onto the CRS plane."""

    @abc.abstractmethod
    def crs_unproject(self, point: Point) -> LatLng:
        """Inverse of ``crs_project``."""

    # ------------------------------------------------------------------
    # Pixel mapping
    # ------------------------------------------------------------------

    def forward(self, latlng: LatLng) -> Point:
        """Geographic coordinate to absolute pixel position."""
        return self.transformation.transform(self.crs_project(latlng), self.scale)

    def inverse(self, point: Point) -> LatLng:
        """Absolute pixel position to geographic coordinate."""
        return self.crs_unproject(self.transformation.untransform(point, self.scale))

    def layer_point(self, latlng: LatLng) -> Point:
        """Pixel position relative to ``pixel_origin``."""
        return self.forward(latlng).subtract(self._pixel_origin)

    def layer_point_to_latlng(self, point: Point) -> LatLng:
        return self.inverse(point.add(self._pixel_origin))

    def state_key(self) -> tuple[object, ...]:
        """Hashable identity of everything that affects projection."""
        return (
            self.crs,
            self._zoom,
            self._pixel_origin,
            self._tile_size,
            self._earth_radius_m,
        )


class _PyprojView(ViewTransform):
    """View over a projected CRS reachable from EPSG:4326 with pyproj."""

    #: CRS definition handed to pyproj (EPSG code or PROJ string).
    proj_crs: str = ""
    #: Latitude limit applied before projecting (degrees).
    max_latitude: float = 90.0

    def crs_project(self, latlng: LatLng) -> Point:
        lat = max(min(self.max_latitude, latlng.lat), -self.max_latitude)
        to_plane, _ = _transformers(self.proj_crs)
        x, y = to_plane.transform(latlng.lng, lat)
        return Point(x, y)

    def crs_unproject(self, point: Point) -> LatLng:
        _, to_geographic = _transformers(self.proj_crs)
        lng, lat = to_geographic.transform(point.x, point.y)
        return LatLng(lat, lng)


class WebMercatorView(_PyprojView):
    """Spherical Web Mercator (EPSG:3857): conformal and geodesic."""

    crs = CRS_WEB_MERCATOR
    proj_crs = "EPSG:3857"
    max_latitude = MAX_MERCATOR_LATITUDE


class EquirectangularView(_PyprojView):
    """Spherical equidistant cylindrical (plate carree): geodesic, not conformal.

    Away from the equator a geodesic circle is wider than it is tall on
    this plane, which exercises the elliptical rendering paths.
    """

    crs = CRS_EQUIRECTANGULAR
    proj_crs = f"+proj=eqc +R={WEB_MERCATOR_RADIUS_M} +units=m +no_defs +type=crs"


class FlatView(ViewTransform):
    """Flat plane where ``x = lng`` and ``y = lat`` (no earth curvature).

    Radii are plain plane units, so the projector takes its flat branch.
    """

    crs = CRS_SIMPLE
    is_geodesic = False
    transformation = SIMPLE_TRANSFORMATION

    @property
    def scale(self) -> float:
        return 2**self._zoom

    def crs_project(self, latlng: LatLng) -> Point:
        return Point(latlng.lng, latlng.lat)

    def crs_unproject(self, point: Point) -> LatLng:
        return LatLng(point.y, point.x)


_VIEW_TYPES: dict[str, type[ViewTransform]] = {
    CRS_WEB_MERCATOR: WebMercatorView,
    CRS_EQUIRECTANGULAR: EquirectangularView,
    CRS_SIMPLE: FlatView,
}


def make_view(
    crs: str,
    *,
    zoom: float,
    pixel_origin: tuple[float, float] | Point = (0.0, 0.0),
    earth_radius_m: float = EARTH_RADIUS_M,
    tile_size: int = DEFAULT_TILE_SIZE,
) -> ViewTransform:
    """Create a view by CRS name.

    Raises:
        ConfigValidationError: If *crs* is not a known view.
    """
    view_cls = _VIEW_TYPES.get(crs)
    if view_cls is None:
        from geodonut.core.config import ConfigValidationError

        available = ", ".join(sorted(_VIEW_TYPES))
        raise ConfigValidationError("crs", crs, f"unknown view; available: {available}")
    return view_cls(
        zoom=zoom,
        pixel_origin=pixel_origin,
        earth_radius_m=earth_radius_m,
        tile_size=tile_size,
    )

"""Geographic and pixel-space geometry records.

``LatLng`` is the geographic centre of a shape.  ``Point`` and
``PixelBounds`` live in the pixel space of a map view.  A
``ProjectedCircle`` is the on-screen footprint of one geodesic circle and
``DonutProjection`` pairs the outer and inner footprints of a donut.

Projected records are derived values: they are recomputed whenever the
centre, a radius, or the view changes, and never persisted.
"""

from __future__ import annotations

from dataclasses import dataclass

from geodonut.core.exceptions import InvalidGeometry
from geodonut.utils.helpers import is_real


@dataclass(frozen=True, slots=True)
class LatLng:
    """A geographic coordinate in degrees.

    Attributes:
        lat: Latitude in degrees.
        lng: Longitude in degrees.
    """

    lat: float
    lng: float

    def __post_init__(self) -> None:
        if not is_real(self.lat):
            raise InvalidGeometry("lat", self.lat, "must be a finite real number")
        if not is_real(self.lng):
            raise InvalidGeometry("lng", self.lng, "must be a finite real number")

    @classmethod
    def coerce(cls, value: LatLng | tuple[float, float] | list[float]) -> LatLng:
        """Accept a ``LatLng`` or a ``(lat, lng)`` pair."""
        if isinstance(value, LatLng):
            return value
        if isinstance(value, (tuple, list)) and len(value) == 2:
            return cls(value[0], value[1])
        raise InvalidGeometry("center", value, "expected LatLng or (lat, lng) pair")


@dataclass(frozen=True, slots=True)
class Point:
    """A point in pixel space."""

    x: float
    y: float

    def add(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def subtract(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)

    def divide_by(self, num: float) -> Point:
        return Point(self.x / num, self.y / num)


@dataclass(frozen=True, slots=True)
class PixelBounds:
    """Axis-aligned pixel rectangle (inclusive)."""

    min: Point
    max: Point

    def intersects(self, other: PixelBounds) -> bool:
        """Whether the two rectangles overlap or touch."""
        x_overlap = other.max.x >= self.min.x and other.min.x <= self.max.x
        y_overlap = other.max.y >= self.min.y and other.min.y <= self.max.y
        return x_overlap and y_overlap


@dataclass(frozen=True, slots=True)
class ProjectedCircle:
    """On-screen footprint of a geodesic circle.

    Radii are true, possibly fractional pixel values; emitters apply the
    minimum-pixel floor.  Both radii are always finite.

    Attributes:
        point: Centre relative to the view's pixel origin.
        radius_x: Horizontal pixel radius.
        radius_y: Vertical pixel radius (differs from ``radius_x`` under
            non-conformal projections).
        degenerate: ``True`` when the pole / zero-radius fallback was used.
    """

    point: Point
    radius_x: float
    radius_y: float
    degenerate: bool = False


@dataclass(frozen=True, slots=True)
class DonutProjection:
    """Outer and inner projected circles of a donut."""

    outer: ProjectedCircle
    inner: ProjectedCircle

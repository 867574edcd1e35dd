"""Radius state of a donut.

``DonutGeometry`` holds the outer radius (metres) and the inner radius,
which is either metres or, in percent mode, a fraction of the outer
radius.  The invariant ``outer > inner`` is checked on construction and
before every mutation; a violating call raises ``InvalidGeometry`` and
leaves the state untouched.

Stored values are returned exactly as given.  The percent-mode fraction
is only resolved (and clamped to 1) when a comparison or a projection
needs an absolute distance.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from geodonut.core.exceptions import InvalidGeometry
from geodonut.models.geometry import DonutProjection
from geodonut.projection.geodesic import GeodesicProjector
from geodonut.utils.helpers import is_real

if TYPE_CHECKING:
    from geodonut.models.geometry import LatLng
    from geodonut.projection.view import ViewTransform

logger = logging.getLogger(__name__)


class DonutGeometry:
    """Outer / inner radius pair of a donut.

    Args:
        radius: Outer radius in metres (> 0).
        inner_radius: Inner radius in metres, or a fraction of *radius*
            when *inner_radius_as_percent* is set.
        inner_radius_as_percent: Interpret *inner_radius* as a fraction.

    Raises:
        InvalidGeometry: If a radius is not a finite real number, is out
            of range, or the inner radius is not smaller than the outer.
    """

    def __init__(
        self,
        radius: float,
        inner_radius: float = 0.0,
        *,
        inner_radius_as_percent: bool = False,
        projector: GeodesicProjector | None = None,
    ) -> None:
        _check_radius("radius", radius, "__init__")
        if radius <= 0:
            raise InvalidGeometry("radius", radius, "must be > 0 (metres)", operation="__init__")
        _check_radius("inner_radius", inner_radius, "__init__")

        self._outer_radius = radius
        self._inner_radius = inner_radius
        self._inner_radius_as_percent = bool(inner_radius_as_percent)
        self._projector = projector or GeodesicProjector()

        if self.resolve_inner_radius() >= radius:
            raise InvalidGeometry(
                "inner_radius",
                inner_radius,
                f"must be smaller than the outer radius {radius!r}",
                operation="__init__",
            )

    def __repr__(self) -> str:
        return (
            f"DonutGeometry(radius={self._outer_radius!r}, inner_radius={self._inner_radius!r}, "
            f"inner_radius_as_percent={self._inner_radius_as_percent!r})"
        )

    @property
    def outer_radius(self) -> float:
        """Outer radius in metres."""
        return self._outer_radius

    @property
    def inner_radius(self) -> float:
        """Inner radius as stored (metres, or a fraction in percent mode)."""
        return self._inner_radius

    @property
    def inner_radius_as_percent(self) -> bool:
        return self._inner_radius_as_percent

    # ------------------------------------------------------------------
    # Mutation / query surface
    # ------------------------------------------------------------------

    def set_outer_radius(self, radius: float) -> DonutGeometry:
        """Set the outer radius in metres.

        The inner radius is resolved against the current outer radius
        (before the update) for the comparison.

        Raises:
            InvalidGeometry: If *radius* is not a finite real number or
                is not greater than the resolved inner radius.
        """
        _check_radius("radius", radius, "set_radius")
        inner_m = self.resolve_inner_radius()
        if radius <= inner_m or radius <= 0:
            raise InvalidGeometry(
                "radius",
                radius,
                f"outer radius must be greater than the inner radius {inner_m!r}",
                operation="set_radius",
            )
        logger.debug("Outer radius %r -> %r", self._outer_radius, radius)
        self._outer_radius = radius
        return self

    set_radius = set_outer_radius

    def get_radius(self) -> float:
        return self._outer_radius

    def set_inner_radius(self, radius: float) -> DonutGeometry:
        """Set the inner radius (metres, or a fraction in percent mode).

        Raises:
            InvalidGeometry: If *radius* is not a finite real number, is
                negative, or resolves to a distance not smaller than the
                outer radius.
        """
        _check_radius("inner_radius", radius, "set_inner_radius")
        resolved = self.resolve_inner_radius(inner_radius=radius)
        if resolved >= self._outer_radius:
            raise InvalidGeometry(
                "inner_radius",
                radius,
                f"inner radius must be smaller than the outer radius {self._outer_radius!r}",
                operation="set_inner_radius",
            )
        logger.debug("Inner radius %r -> %r", self._inner_radius, radius)
        self._inner_radius = radius
        return self

    def get_inner_radius(self) -> float:
        """Return the inner radius exactly as stored."""
        return self._inner_radius

    def resolve_inner_radius(
        self,
        *,
        inner_radius: float | None = None,
        outer_radius: float | None = None,
    ) -> float:
        """Inner radius as an absolute distance in metres.

        In percent mode the fraction is clamped to 1 and multiplied by the
        outer radius.  Either value can be overridden to evaluate a
        candidate before committing it.
        """
        inner = self._inner_radius if inner_radius is None else inner_radius
        outer = self._outer_radius if outer_radius is None else outer_radius
        if self._inner_radius_as_percent:
            return outer * min(inner, 1)
        return inner

    # ------------------------------------------------------------------
    # Projection
    # ------------------------------------------------------------------

    def project(self, center: LatLng, view: ViewTransform) -> DonutProjection:
        """Project both rings around *center* into *view*."""
        outer = self._projector.project(center, self._outer_radius, view)
        inner = self._projector.project(center, self.resolve_inner_radius(), view)
        return DonutProjection(outer=outer, inner=inner)


def _check_radius(field_name: str, value: object, operation: str) -> None:
    """Raise ``InvalidGeometry`` unless *value* is a finite number >= 0."""
    if not is_real(value):
        raise InvalidGeometry(field_name, value, "must be a finite real number", operation=operation)
    if value < 0:  # type: ignore[operator]
        raise InvalidGeometry(field_name, value, "must be >= 0", operation=operation)

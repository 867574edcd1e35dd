"""SVG path emitter.

Each ring is drawn as two abutting half-arcs (``+2r,0`` then ``-2r,0``),
which closes a full ellipse with plain relative arc commands.  The inner
ring is traced with the opposite sweep flag, so the centre is left
unfilled under both the ``evenodd`` and the ``nonzero`` fill rule.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from geodonut.core.constants import EMPTY_PATH, RENDERER_SVG
from geodonut.rendering.base import PathEmitter, pixel_radii
from geodonut.utils.helpers import format_number

if TYPE_CHECKING:
    from lxml.etree import _Element

    from geodonut.models.geometry import DonutProjection, ProjectedCircle
    from geodonut.models.style import PathStyle
    from geodonut.rendering.base import DrawingContext

SVG_NAMESPACE = "http://www.w3.org/2000/svg"


class VectorPathEmitter(PathEmitter):
    """Emits the donut as SVG path data."""

    name = RENDERER_SVG

    def emit(
        self,
        outer: ProjectedCircle,
        inner: ProjectedCircle,
        *,
        is_empty: bool = False,
    ) -> str:
        """Return path data for the ring between *outer* and *inner*.

        Returns ``EMPTY_PATH`` when *is_empty* is set, whatever the radii.
        """
        if is_empty:
            return EMPTY_PATH
        return _ring_path(outer, clockwise=False) + _ring_path(inner, clockwise=True)

    def render(
        self,
        projection: DonutProjection,
        *,
        is_empty: bool = False,
        ctx: DrawingContext | None = None,
    ) -> str:
        return self.emit(projection.outer, projection.inner, is_empty=is_empty)

    def element(self, path_data: str) -> _Element:
        """Wrap *path_data* in an SVG ``<path>`` element with this emitter's style."""
        return svg_path_element(path_data, self.style)


def _ring_path(circle: ProjectedCircle, *, clockwise: bool) -> str:
    r, r2 = pixel_radii(circle)
    sweep = "1" if clockwise else "0"
    arc = f"a{r},{r2} 0 1,{sweep} "
    p = circle.point
    return (
        f"M{format_number(p.x - r)},{format_number(p.y)}"
        f"{arc}{r * 2},0 "
        f"{arc}{-r * 2},0 "
    )


def svg_path_element(path_data: str, style: PathStyle) -> _Element:
    """Build an SVG ``<path>`` element carrying *path_data* and *style*."""
    from lxml import etree

    path = etree.Element(f"{{{SVG_NAMESPACE}}}path", nsmap={None: SVG_NAMESPACE})
    path.set("d", path_data)

    if style.stroke:
        path.set("stroke", style.color)
        path.set("stroke-opacity", format_number(style.opacity))
        path.set("stroke-width", format_number(style.weight))
        path.set("stroke-linecap", "round")
        path.set("stroke-linejoin", "round")
    else:
        path.set("stroke", "none")

    if style.fill:
        path.set("fill", style.effective_fill_color)
        path.set("fill-opacity", format_number(style.fill_opacity))
        path.set("fill-rule", style.fill_rule)
    else:
        path.set("fill", "none")

    return path

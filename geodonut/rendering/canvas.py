"""Raster (immediate-mode) path emitter.

The raster primitive only draws circles, so an elliptical ring is drawn
by scaling the context's vertical axis by ``radius_y / radius_x`` for the
duration of the path and dividing the centre's y coordinate by the same
factor.  The outer circle is traced clockwise and the inner one
anticlockwise, which makes the inner disc a hole when the path is filled.

The scale is applied inside a ``save`` / ``restore`` pair that is released
on every exit path, including a failing draw call.
"""

from __future__ import annotations

import contextlib
import math
from typing import TYPE_CHECKING

from geodonut.core.constants import RENDERER_CANVAS
from geodonut.core.exceptions import RenderError
from geodonut.rendering.base import PathEmitter, pixel_radii

if TYPE_CHECKING:
    from collections.abc import Iterator

    import cairo

    from geodonut.models.geometry import DonutProjection, ProjectedCircle
    from geodonut.rendering.base import DrawingContext

FULL_TURN = math.pi * 2


@contextlib.contextmanager
def vertical_scale(ctx: DrawingContext, factor: float) -> Iterator[None]:
    """Scale *ctx* vertically by *factor* for the body of the block."""
    if factor == 1:
        yield
        return
    ctx.save()
    try:
        ctx.scale(1, factor)
        yield
    finally:
        ctx.restore()


class RasterPathEmitter(PathEmitter):
    """Draws the donut onto a ``DrawingContext``."""

    name = RENDERER_CANVAS

    def emit(
        self,
        outer: ProjectedCircle,
        inner: ProjectedCircle,
        ctx: DrawingContext,
        *,
        is_empty: bool = False,
    ) -> None:
        """Trace and paint the ring between *outer* and *inner* on *ctx*.

        Nothing touches *ctx* when *is_empty* is set or the context is not
        inside a drawing batch.
        """
        if is_empty or not ctx.drawing:
            return

        p = outer.point
        r, r2 = pixel_radii(outer)
        s = r2 / r
        inner_p = inner.point
        inner_r, _ = pixel_radii(inner)

        with vertical_scale(ctx, s):
            ctx.begin_path()
            ctx.arc(p.x, p.y / s, r, 0, FULL_TURN, False)
            ctx.move_to(inner_p.x + inner_r, inner_p.y / s)
            ctx.arc(inner_p.x, inner_p.y / s, inner_r, 0, FULL_TURN, True)

        self._fill_stroke(ctx)

    def render(
        self,
        projection: DonutProjection,
        *,
        is_empty: bool = False,
        ctx: DrawingContext | None = None,
    ) -> None:
        if ctx is None:
            raise RenderError("Raster rendering requires a drawing context", operation="emit")
        self.emit(projection.outer, projection.inner, ctx, is_empty=is_empty)

    def _fill_stroke(self, ctx: DrawingContext) -> None:
        style = self.style
        if style.fill:
            ctx.fill(style.effective_fill_color, style.fill_opacity, style.fill_rule)
        if style.stroke and style.weight:
            ctx.stroke(style.color, style.opacity, style.weight)


class CairoCanvas:
    """``DrawingContext`` adapter over a pycairo ``Context``.

    Drawing is only enabled inside ``batch()``::

        surface = cairo.ImageSurface(cairo.FORMAT_ARGB32, 512, 512)
        canvas = CairoCanvas(cairo.Context(surface))
        with canvas.batch():
            ring.render(get_emitter("canvas"), view, ctx=canvas)
    """

    def __init__(self, context: cairo.Context) -> None:
        self._ctx = context
        self.drawing = False

    @contextlib.contextmanager
    def batch(self) -> Iterator[CairoCanvas]:
        self.drawing = True
        try:
            yield self
        finally:
            self.drawing = False

    def save(self) -> None:
        self._ctx.save()

    def restore(self) -> None:
        self._ctx.restore()

    def scale(self, x: float, y: float) -> None:
        self._ctx.scale(x, y)

    def begin_path(self) -> None:
        self._ctx.new_path()

    def move_to(self, x: float, y: float) -> None:
        self._ctx.move_to(x, y)

    def arc(
        self,
        x: float,
        y: float,
        radius: float,
        start_angle: float,
        end_angle: float,
        anticlockwise: bool = False,
    ) -> None:
        if anticlockwise:
            # cairo folds end_angle to <= start_angle, which turns a full turn into nothing
            if end_angle - start_angle >= FULL_TURN:
                end_angle = start_angle - FULL_TURN
            self._ctx.arc_negative(x, y, radius, start_angle, end_angle)
        else:
            self._ctx.arc(x, y, radius, start_angle, end_angle)

    def fill(self, color: str, opacity: float, fill_rule: str = "evenodd") -> None:
        import cairo

        rule = cairo.FILL_RULE_EVEN_ODD if fill_rule == "evenodd" else cairo.FILL_RULE_WINDING
        self._ctx.set_fill_rule(rule)
        self._ctx.set_source_rgba(*parse_hex_color(color), opacity)
        self._ctx.fill_preserve()

    def stroke(self, color: str, opacity: float, width: float) -> None:
        self._ctx.set_line_width(width)
        self._ctx.set_source_rgba(*parse_hex_color(color), opacity)
        self._ctx.stroke_preserve()


def parse_hex_color(color: str) -> tuple[float, float, float]:
    """Convert ``#rgb`` or ``#rrggbb`` to an ``(r, g, b)`` triple in 0-1.

    Raises:
        RenderError: If *color* is not a hex colour.
    """
    digits = color.lstrip("#")
    if len(digits) == 3:
        digits = "".join(c * 2 for c in digits)
    if len(digits) != 6:
        raise RenderError(f"Unsupported colour {color!r}; expected #rgb or #rrggbb", operation="emit")
    try:
        r, g, b = (int(digits[i : i + 2], 16) for i in (0, 2, 4))
    except ValueError as exc:
        raise RenderError(f"Unsupported colour {color!r}; expected #rgb or #rrggbb", operation="emit") from exc
    return r / 255, g / 255, b / 255

"""Unit tests for the raster path emitter and the pycairo adapter helpers."""

from __future__ import annotations

import math

import pytest

from geodonut.core.exceptions import RenderError
from geodonut.models.geometry import DonutProjection, Point, ProjectedCircle
from geodonut.models.style import PathStyle
from geodonut.rendering.canvas import RasterPathEmitter, parse_hex_color

ELLIPSE = ProjectedCircle(Point(100, 50), 20.0, 10.0)
ELLIPSE_HOLE = ProjectedCircle(Point(100, 50), 8.0, 4.0)
CIRCLE = ProjectedCircle(Point(100, 50), 20.0, 20.0)
CIRCLE_HOLE = ProjectedCircle(Point(100, 50), 8.0, 8.0)


@pytest.fixture()
def emitter() -> RasterPathEmitter:
    return RasterPathEmitter()


class TestEmit:
    def test_elliptical_call_sequence(self, emitter: RasterPathEmitter, recording_ctx) -> None:  # type: ignore[no-untyped-def]
        emitter.emit(ELLIPSE, ELLIPSE_HOLE, recording_ctx)
        assert recording_ctx.calls == [
            ("save",),
            ("scale", 1, 0.5),
            ("begin_path",),
            ("arc", 100, 100.0, 20, 0, 2 * math.pi, False),
            ("move_to", 108, 100.0),
            ("arc", 100, 100.0, 8, 0, 2 * math.pi, True),
            ("restore",),
            ("fill", "#3388ff", 0.2, "evenodd"),
            ("stroke", "#3388ff", 1.0, 3.0),
        ]

    def test_circle_skips_scale(self, emitter: RasterPathEmitter, recording_ctx) -> None:  # type: ignore[no-untyped-def]
        emitter.emit(CIRCLE, CIRCLE_HOLE, recording_ctx)
        assert "save" not in recording_ctx.names()
        assert "scale" not in recording_ctx.names()
        assert recording_ctx.calls[1] == ("arc", 100, 50.0, 20, 0, 2 * math.pi, False)

    def test_fill_and_stroke_after_restore(self, emitter: RasterPathEmitter, recording_ctx) -> None:  # type: ignore[no-untyped-def]
        emitter.emit(ELLIPSE, ELLIPSE_HOLE, recording_ctx)
        names = recording_ctx.names()
        assert names.index("restore") < names.index("fill") < names.index("stroke")

    def test_transform_restored_after_draw(self, emitter: RasterPathEmitter, recording_ctx) -> None:  # type: ignore[no-untyped-def]
        emitter.emit(ELLIPSE, ELLIPSE_HOLE, recording_ctx)
        assert recording_ctx.depth == 0
        assert recording_ctx.scale_y == 1.0

    @pytest.mark.parametrize("failing", ["begin_path", "arc", "move_to"])
    def test_transform_restored_on_failure(self, emitter: RasterPathEmitter, make_ctx, failing: str) -> None:  # type: ignore[no-untyped-def]
        ctx = make_ctx(fail_on=failing)
        with pytest.raises(RuntimeError):
            emitter.emit(ELLIPSE, ELLIPSE_HOLE, ctx)
        assert ctx.names()[-1] == "restore"
        assert ctx.depth == 0
        assert ctx.scale_y == 1.0

    def test_not_drawing_is_noop(self, emitter: RasterPathEmitter, make_ctx) -> None:  # type: ignore[no-untyped-def]
        ctx = make_ctx(drawing=False)
        emitter.emit(ELLIPSE, ELLIPSE_HOLE, ctx)
        assert ctx.calls == []

    def test_empty_is_noop(self, emitter: RasterPathEmitter, recording_ctx) -> None:  # type: ignore[no-untyped-def]
        emitter.emit(ELLIPSE, ELLIPSE_HOLE, recording_ctx, is_empty=True)
        assert recording_ctx.calls == []

    def test_minimum_radius(self, emitter: RasterPathEmitter, recording_ctx) -> None:  # type: ignore[no-untyped-def]
        tiny = ProjectedCircle(Point(10, 10), 0.2, 0.2)
        emitter.emit(tiny, tiny, recording_ctx)
        arcs = [c for c in recording_ctx.calls if c[0] == "arc"]
        assert [c[3] for c in arcs] == [1, 1]

    def test_inner_arc_is_anticlockwise(self, emitter: RasterPathEmitter, recording_ctx) -> None:  # type: ignore[no-untyped-def]
        emitter.emit(CIRCLE, CIRCLE_HOLE, recording_ctx)
        arcs = [c for c in recording_ctx.calls if c[0] == "arc"]
        assert [c[-1] for c in arcs] == [False, True]


class TestStyle:
    def test_no_fill(self, recording_ctx) -> None:  # type: ignore[no-untyped-def]
        RasterPathEmitter(PathStyle(fill=False)).emit(CIRCLE, CIRCLE_HOLE, recording_ctx)
        assert "fill" not in recording_ctx.names()
        assert "stroke" in recording_ctx.names()

    def test_no_stroke(self, recording_ctx) -> None:  # type: ignore[no-untyped-def]
        RasterPathEmitter(PathStyle(stroke=False)).emit(CIRCLE, CIRCLE_HOLE, recording_ctx)
        assert "stroke" not in recording_ctx.names()

    def test_zero_weight_skips_stroke(self, recording_ctx) -> None:  # type: ignore[no-untyped-def]
        RasterPathEmitter(PathStyle(weight=0)).emit(CIRCLE, CIRCLE_HOLE, recording_ctx)
        assert "stroke" not in recording_ctx.names()

    def test_custom_fill(self, recording_ctx) -> None:  # type: ignore[no-untyped-def]
        style = PathStyle(fill_color="#ff0000", fill_opacity=0.5, fill_rule="nonzero")
        RasterPathEmitter(style).emit(CIRCLE, CIRCLE_HOLE, recording_ctx)
        assert ("fill", "#ff0000", 0.5, "nonzero") in recording_ctx.calls


class TestRender:
    def test_requires_context(self, emitter: RasterPathEmitter) -> None:
        with pytest.raises(RenderError) as exc_info:
            emitter.render(DonutProjection(outer=CIRCLE, inner=CIRCLE_HOLE))
        assert exc_info.value.category == "render"

    def test_draws_projection(self, emitter: RasterPathEmitter, recording_ctx) -> None:  # type: ignore[no-untyped-def]
        assert emitter.render(DonutProjection(outer=CIRCLE, inner=CIRCLE_HOLE), ctx=recording_ctx) is None
        assert recording_ctx.names().count("arc") == 2

    def test_name(self, emitter: RasterPathEmitter) -> None:
        assert emitter.name == "canvas"


class TestParseHexColor:
    def test_long_form(self) -> None:
        assert parse_hex_color("#3388ff") == pytest.approx((0x33 / 255, 0x88 / 255, 1.0))

    def test_short_form(self) -> None:
        assert parse_hex_color("#f00") == (1.0, 0.0, 0.0)

    @pytest.mark.parametrize("color", ["red", "#12345", "#gggggg", ""])
    def test_rejects_other_formats(self, color: str) -> None:
        with pytest.raises(RenderError):
            parse_hex_color(color)


class TestCairoCanvas:
    """Draws onto a real pycairo surface (optional ``cairo`` extra)."""

    @staticmethod
    def _alpha(surface, x: int, y: int) -> int:  # type: ignore[no-untyped-def]
        surface.flush()
        return surface.get_data()[y * surface.get_stride() + x * 4 + 3]

    def test_ring_leaves_hole(self) -> None:
        cairo = pytest.importorskip("cairo")
        from geodonut.rendering.canvas import CairoCanvas

        surface = cairo.ImageSurface(cairo.FORMAT_ARGB32, 200, 200)
        canvas = CairoCanvas(cairo.Context(surface))
        outer = ProjectedCircle(Point(100, 100), 80.0, 40.0)
        inner = ProjectedCircle(Point(100, 100), 30.0, 15.0)

        with canvas.batch():
            RasterPathEmitter(PathStyle(stroke=False, fill_opacity=1.0)).emit(outer, inner, canvas)

        assert canvas.drawing is False
        assert self._alpha(surface, 100, 100) == 0
        assert self._alpha(surface, 155, 100) == 255
        assert self._alpha(surface, 100, 160) == 0

    def test_outside_batch_draws_nothing(self) -> None:
        cairo = pytest.importorskip("cairo")
        from geodonut.rendering.canvas import CairoCanvas

        surface = cairo.ImageSurface(cairo.FORMAT_ARGB32, 50, 50)
        canvas = CairoCanvas(cairo.Context(surface))
        ring = ProjectedCircle(Point(25, 25), 20.0, 20.0)
        hole = ProjectedCircle(Point(25, 25), 5.0, 5.0)
        RasterPathEmitter().emit(ring, hole, canvas)
        assert self._alpha(surface, 25 + 12, 25) == 0

"""Shared pytest fixtures for the geodonut test suite."""

from __future__ import annotations

import pytest

from geodonut.models.geometry import LatLng, Point
from geodonut.projection.view import EquirectangularView, FlatView, WebMercatorView

# ---------------------------------------------------------------------------
# Reference locations
# ---------------------------------------------------------------------------

KYIV = LatLng(50.5, 30.5)
EQUATOR = LatLng(0.0, 30.0)


# ---------------------------------------------------------------------------
# Recording drawing context
# ---------------------------------------------------------------------------


class RecordingContext:
    """``DrawingContext`` that records every call and tracks the transform stack.

    ``fail_on`` names a method that raises ``RuntimeError`` when called,
    to exercise error paths inside an emitter.
    """

    def __init__(self, *, drawing: bool = True, fail_on: str | None = None) -> None:
        self.drawing = drawing
        self.fail_on = fail_on
        self.calls: list[tuple[object, ...]] = []
        self.scale_y = 1.0
        self._stack: list[float] = []

    @property
    def depth(self) -> int:
        return len(self._stack)

    def _record(self, name: str, *args: object) -> None:
        self.calls.append((name, *args))
        if name == self.fail_on:
            msg = f"{name} failed"
            raise RuntimeError(msg)

    def names(self) -> list[str]:
        return [str(c[0]) for c in self.calls]

    def save(self) -> None:
        self._record("save")
        self._stack.append(self.scale_y)

    def restore(self) -> None:
        self._record("restore")
        self.scale_y = self._stack.pop()

    def scale(self, x: float, y: float) -> None:
        self._record("scale", x, y)
        self.scale_y *= y

    def begin_path(self) -> None:
        self._record("begin_path")

    def move_to(self, x: float, y: float) -> None:
        self._record("move_to", x, y)

    def arc(
        self,
        x: float,
        y: float,
        radius: float,
        start_angle: float,
        end_angle: float,
        anticlockwise: bool = False,
    ) -> None:
        self._record("arc", x, y, radius, start_angle, end_angle, anticlockwise)

    def fill(self, color: str, opacity: float, fill_rule: str = "evenodd") -> None:
        self._record("fill", color, opacity, fill_rule)

    def stroke(self, color: str, opacity: float, width: float) -> None:
        self._record("stroke", color, opacity, width)


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def mercator_view() -> WebMercatorView:
    """Web Mercator view at street-level zoom."""
    return WebMercatorView(zoom=15)


@pytest.fixture()
def centred_view() -> WebMercatorView:
    """Web Mercator view panned so ``KYIV`` sits at layer point (400, 300)."""
    absolute = WebMercatorView(zoom=15).forward(KYIV)
    return WebMercatorView(zoom=15, pixel_origin=absolute.subtract(Point(400, 300)))


@pytest.fixture()
def equirectangular_view() -> EquirectangularView:
    return EquirectangularView(zoom=10)


@pytest.fixture()
def flat_view() -> FlatView:
    return FlatView(zoom=0)


@pytest.fixture()
def recording_ctx() -> RecordingContext:
    return RecordingContext()


@pytest.fixture()
def make_ctx() -> type[RecordingContext]:
    """The ``RecordingContext`` class, for tests that need custom options."""
    return RecordingContext

"""PathEmitter abstract base class and the raster drawing-context contract.

An emitter turns a ``DonutProjection`` into something a rendering backend
can draw.  The shape never knows which backend is active: the host picks
an emitter (see ``rendering.factory``) and the shape hands it the
projected rings on every redraw.

Each concrete emitter (``VectorPathEmitter``, ``RasterPathEmitter``)
implements ``render`` for its backend.
"""

from __future__ import annotations

import abc
from typing import TYPE_CHECKING, Protocol

from geodonut.core.constants import MIN_PIXEL_RADIUS
from geodonut.models.style import PathStyle
from geodonut.utils.helpers import round_half_up

if TYPE_CHECKING:
    from geodonut.models.geometry import DonutProjection, ProjectedCircle


class DrawingContext(Protocol):
    """Immediate-mode 2-D drawing surface (HTML canvas style).

    ``drawing`` is true only while the host is inside a redraw batch;
    emitters draw nothing outside it.
    """

    drawing: bool

    def save(self) -> None: ...

    def restore(self) -> None: ...

    def scale(self, x: float, y: float) -> None: ...

    def begin_path(self) -> None: ...

    def move_to(self, x: float, y: float) -> None: ...

    def arc(
        self,
        x: float,
        y: float,
        radius: float,
        start_angle: float,
        end_angle: float,
        anticlockwise: bool = False,
    ) -> None: ...

    def fill(self, color: str, opacity: float, fill_rule: str = "evenodd") -> None: ...

    def stroke(self, color: str, opacity: float, width: float) -> None: ...


def pixel_radii(circle: ProjectedCircle) -> tuple[int, int]:
    """Whole-pixel ``(horizontal, vertical)`` radii, each at least one pixel."""
    r = max(round_half_up(circle.radius_x), MIN_PIXEL_RADIUS)
    r2 = max(round_half_up(circle.radius_y), MIN_PIXEL_RADIUS)
    return r, r2


class PathEmitter(abc.ABC):
    """Abstract base class for backend path emitters.

    The constructor receives the ``PathStyle`` the backend should apply.
    """

    #: Backend name used by the factory registry.
    name: str = ""

    def __init__(self, style: PathStyle | None = None) -> None:
        self._style = style or PathStyle()

    @property
    def style(self) -> PathStyle:
        """Return the path style (read-only)."""
        return self._style

    @abc.abstractmethod
    def render(
        self,
        projection: DonutProjection,
        *,
        is_empty: bool = False,
        ctx: DrawingContext | None = None,
    ) -> str | None:
        """Emit the donut described by *projection*.

        Args:
            projection: Outer and inner projected circles.
            is_empty: The shape has no visible extent; emit nothing.
            ctx: Drawing context for raster backends.

        Returns:
            Backend-specific output (path data for vector backends,
            ``None`` for backends that draw onto *ctx*).

        Raises:
            RenderError: If the backend cannot draw with the given inputs.
        """

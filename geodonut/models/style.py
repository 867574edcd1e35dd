"""Stroke and fill options shared by the SVG and raster emitters.

Defaults follow the common web-map path look: a 3 px blue outline at full
opacity and a translucent fill of the same colour.
"""

from __future__ import annotations

from dataclasses import dataclass

from geodonut.core.exceptions import InvalidGeometry
from geodonut.utils.helpers import is_real

FILL_RULES = ("evenodd", "nonzero")


@dataclass(frozen=True, slots=True)
class PathStyle:
    """Presentation options for a donut path.

    Attributes:
        stroke: Whether to draw the outline.
        color: Stroke colour.
        weight: Stroke width in pixels.
        opacity: Stroke opacity (0-1).
        fill: Whether to fill the ring.
        fill_color: Fill colour; ``None`` reuses ``color``.
        fill_opacity: Fill opacity (0-1).
        fill_rule: ``"evenodd"`` or ``"nonzero"``.
    """

    stroke: bool = True
    color: str = "#3388ff"
    weight: float = 3.0
    opacity: float = 1.0
    fill: bool = True
    fill_color: str | None = None
    fill_opacity: float = 0.2
    fill_rule: str = "evenodd"

    def __post_init__(self) -> None:
        if not is_real(self.weight) or self.weight < 0:
            raise InvalidGeometry("weight", self.weight, "must be >= 0 (pixels)")
        for name in ("opacity", "fill_opacity"):
            value = getattr(self, name)
            if not is_real(value) or not 0.0 <= value <= 1.0:
                raise InvalidGeometry(name, value, "must be between 0 and 1")
        if self.fill_rule not in FILL_RULES:
            raise InvalidGeometry("fill_rule", self.fill_rule, f"must be one of {FILL_RULES}")

    @property
    def effective_fill_color(self) -> str:
        """Fill colour, falling back to the stroke colour."""
        return self.fill_color or self.color

    def click_tolerance(self, extra_px: float = 0.0) -> float:
        """Half the visible stroke width plus *extra_px* padding."""
        half_stroke = self.weight / 2 if self.stroke else 0.0
        return half_stroke + extra_px

"""Backend path emitters.

- base: ``PathEmitter`` contract and the raster ``DrawingContext`` protocol
- svg: ``VectorPathEmitter`` (SVG path data)
- canvas: ``RasterPathEmitter`` (immediate-mode drawing context)
- factory: backend-name registry
"""

from geodonut.rendering.base import DrawingContext, PathEmitter
from geodonut.rendering.factory import get_emitter, list_emitters, register_emitter

__all__ = [
    "DrawingContext",
    "PathEmitter",
    "get_emitter",
    "list_emitters",
    "register_emitter",
]

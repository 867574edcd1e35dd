"""Emitter factory: selects the path emitter for the active backend.

The factory maintains a registry of known emitters.  New backends are
registered with ``register_emitter``.

Usage::

    from geodonut.rendering.factory import get_emitter

    emitter = get_emitter("svg")
    d = ring.render(emitter, view)

The backend name is read from the ``GEODONUT_RENDERER`` environment
variable via ``DonutConfig.renderer``.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from geodonut.core.constants import RENDERER_CANVAS, RENDERER_SVG
from geodonut.core.exceptions import RenderError
from geodonut.rendering.base import PathEmitter

if TYPE_CHECKING:
    from collections.abc import Callable

    from geodonut.models.style import PathStyle

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Lazy-import emitter registry
# ---------------------------------------------------------------------------

# Each entry maps a backend name to a callable that returns the emitter
# *class*, so a backend module (and its optional dependencies) is only
# imported when that backend is selected.

_EMITTER_REGISTRY: dict[str, Callable[[], type[PathEmitter]]] = {}


def _register_builtin_emitters() -> None:
    """Register the built-in emitters (called once, lazily)."""

    def _svg() -> type[PathEmitter]:
        from geodonut.rendering.svg import VectorPathEmitter

        return VectorPathEmitter

    def _canvas() -> type[PathEmitter]:
        from geodonut.rendering.canvas import RasterPathEmitter

        return RasterPathEmitter

    _EMITTER_REGISTRY[RENDERER_SVG] = _svg
    _EMITTER_REGISTRY[RENDERER_CANVAS] = _canvas


def _ensure_registry() -> None:
    """Initialise the emitter registry once (idempotent)."""
    if not _EMITTER_REGISTRY:
        _register_builtin_emitters()


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def register_emitter(
    name: str,
    loader: Callable[[], type[PathEmitter]],
) -> None:
    """Register a custom path emitter.

    Args:
        name: Backend name (e.g. ``"webgl"``).
        loader: A zero-argument callable that returns the emitter class.

    Raises:
        ValueError: If the name is empty.
    """
    if not name:
        msg = "Emitter name must be non-empty"
        raise ValueError(msg)
    _ensure_registry()
    _EMITTER_REGISTRY[name] = loader
    logger.debug("Registered path emitter: %s", name)


def get_emitter(name: str, style: PathStyle | None = None) -> PathEmitter:
    """Create the path emitter for backend *name*.

    Args:
        name: Backend identifier (``"svg"`` or ``"canvas"``).
        style: Optional ``PathStyle``; defaults are used when ``None``.

    Raises:
        RenderError: If the named backend is not registered.
    """
    _ensure_registry()

    loader = _EMITTER_REGISTRY.get(name)
    if loader is None:
        available = ", ".join(sorted(_EMITTER_REGISTRY))
        msg = f"Unknown rendering backend: {name!r}. Available: {available}"
        raise RenderError(msg, operation="get_emitter", code="UNKNOWN_BACKEND")

    emitter_cls = loader()
    logger.info("Creating path emitter: %s", name)
    return emitter_cls(style)


def list_emitters() -> list[str]:
    """Return the names of all registered emitters."""
    _ensure_registry()
    return sorted(_EMITTER_REGISTRY)

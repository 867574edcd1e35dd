"""Numeric helpers shared by the models, the projector and the emitters."""

from __future__ import annotations

import math
import numbers


def is_real(value: object) -> bool:
    """Return ``True`` for a finite real number (``bool`` excluded)."""
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        return False
    return math.isfinite(value)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves rounding towards +infinity.

    Matches JavaScript ``Math.round`` rather than Python's banker's
    rounding, so ``round_half_up(2.5) == 3`` and ``round_half_up(-2.5) == -2``.
    """
    return math.floor(value + 0.5)


def format_number(value: float) -> str:
    """Format a number for SVG path data.

    Integral values drop the fractional part (``100`` not ``100.0``);
    other values use the shortest round-tripping representation.
    """
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def safe_acos(value: float) -> float:
    """Return ``acos(value)``, or NaN when *value* is outside [-1, 1]."""
    if not -1.0 <= value <= 1.0:
        return math.nan
    return math.acos(value)

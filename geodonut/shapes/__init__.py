"""Donut shapes.

- geometry: ``DonutGeometry`` radius state and validation
- donut: ``Donut`` map overlay (centre, projection cache, bounds, render)
"""

from geodonut.shapes.donut import Donut, donut
from geodonut.shapes.geometry import DonutGeometry

__all__ = ["Donut", "DonutGeometry", "donut"]

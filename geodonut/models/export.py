"""Pydantic GeoJSON model for exporting a donut as a polygon with a hole.

The exterior ring approximates the outer geodesic circle and the single
interior ring approximates the inner one.  Coordinates are ``[lng, lat]``
pairs (RFC 7946 order), exterior counter-clockwise, hole clockwise.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class PolygonGeometry(BaseModel):
    """GeoJSON polygon geometry.

    Attributes:
        type: Always ``"Polygon"``.
        coordinates: ``[exterior_ring, *interior_rings]`` where each ring
            is a closed list of ``[lng, lat]`` pairs.
    """

    type: str = "Polygon"
    coordinates: list[list[list[float]]] = Field(default_factory=list)


class DonutProperties(BaseModel):
    """Properties carried by an exported donut feature.

    Attributes:
        center: Centre as ``[lng, lat]``.
        radius_m: Outer radius in metres.
        inner_radius: Stored inner radius (metres, or fraction in percent mode).
        inner_radius_as_percent: Whether ``inner_radius`` is a fraction.
        inner_radius_m: Resolved inner radius in metres.
        area_m2: Spherical area of the ring in square metres.
    """

    center: list[float] = Field(default_factory=list)
    radius_m: float = 0.0
    inner_radius: float = 0.0
    inner_radius_as_percent: bool = False
    inner_radius_m: float = 0.0
    area_m2: float = 0.0


class DonutFeature(BaseModel):
    """GeoJSON feature for a donut."""

    type: str = "Feature"
    geometry: PolygonGeometry = Field(default_factory=PolygonGeometry)
    properties: DonutProperties = Field(default_factory=DonutProperties)

"""Point queries against a TIN surface: elevation, slope and aspect.

Point location is a linear scan over the triangles. Queries outside the
triangulated area, or landing only on zero-area facets, return None.
"""
from __future__ import annotations

import math
from typing import Optional, Tuple

from tin_surface import config
from tin_surface.model.slope import SlopeResult
from tin_surface.model.surface import TINSurface
from tin_surface.model.triangle import Triangle
from tin_surface.utils.math_helpers import normalize_degrees

Weights = Tuple[float, float, float]


def barycentric_weights(triangle: Triangle, x: float, y: float) -> Optional[Weights]:
    """Barycentric weights of (x, y) in the triangle's XY projection.

    Returns None when the projected triangle is degenerate.
    """
    v0, v1, v2 = triangle.vertices
    denom = (v1.y - v2.y) * (v0.x - v2.x) + (v2.x - v1.x) * (v0.y - v2.y)
    if abs(denom) < config.EPSILON:
        return None

    w1 = ((v1.y - v2.y) * (x - v2.x) + (v2.x - v1.x) * (y - v2.y)) / denom
    w2 = ((v2.y - v0.y) * (x - v2.x) + (v0.x - v2.x) * (y - v2.y)) / denom
    w3 = 1.0 - w1 - w2
    return (w1, w2, w3)


def _contains(weights: Weights) -> bool:
    return min(weights) >= -config.EPSILON


def locate_triangle(
    surface: TINSurface, x: float, y: float,
) -> Optional[Tuple[Triangle, Weights]]:
    """First triangle containing (x, y), with the point's barycentric weights.

    Points on a shared edge may resolve to either neighbour.
    """
    for triangle in surface.triangles:
        weights = barycentric_weights(triangle, x, y)
        if weights is not None and _contains(weights):
            return triangle, weights
    return None


def interpolate_elevation(surface: TINSurface, x: float, y: float) -> Optional[float]:
    """Elevation of the surface at (x, y) by barycentric interpolation.

    Returns None if the point is outside the TIN.
    """
    located = locate_triangle(surface, x, y)
    if located is None:
        return None
    triangle, (w1, w2, w3) = located
    v0, v1, v2 = triangle.vertices
    return w1 * v0.z + w2 * v1.z + w3 * v2.z


def aspect_direction(degrees: float) -> str:
    """Compass octant (N, NE, ... NW) nearest to an aspect in degrees."""
    index = int(math.floor(normalize_degrees(degrees) / 45.0 + 0.5)) % 8
    return config.ASPECT_DIRECTIONS[index]


def slope_of_triangle(triangle: Triangle) -> Optional[SlopeResult]:
    """Slope and aspect of a facet plane, or None for a degenerate facet."""
    normal = triangle.plane_normal()
    if normal is None:
        return None
    nx, ny, nz = normal

    slope_degrees = math.degrees(math.acos(min(1.0, abs(nz))))
    slope_percent = math.tan(math.radians(slope_degrees)) * 100.0

    if abs(nx) < config.EPSILON and abs(ny) < config.EPSILON:
        # Level facet, no facing direction
        aspect_degrees = 0.0
    else:
        # Point the normal into the ground; its negated horizontal part
        # is then the downhill direction
        if nz > 0:
            nx, ny = -nx, -ny
        aspect_degrees = normalize_degrees(math.degrees(math.atan2(-nx, -ny)))

    return SlopeResult(
        slope_degrees=slope_degrees,
        slope_percent=slope_percent,
        aspect_degrees=aspect_degrees,
        aspect_direction=aspect_direction(aspect_degrees),
    )


def slope_at(surface: TINSurface, x: float, y: float) -> Optional[SlopeResult]:
    """Slope and aspect of the facet under (x, y).

    Returns None if the point is outside the TIN or the facet is degenerate.
    """
    located = locate_triangle(surface, x, y)
    if located is None:
        return None
    return slope_of_triangle(located[0])

"""Slope/aspect query result."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SlopeResult:
    """Steepness and facing direction of the facet under a query point."""
    slope_degrees: float        # Angle from horizontal
    slope_percent: float        # Rise over run x 100
    aspect_degrees: float       # Direction of steepest descent, CW from north, [0, 360)
    aspect_direction: str       # Compass octant: N, NE, E, SE, S, SW, W, NW

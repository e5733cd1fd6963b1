"""TIN facet dataclass."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from tin_surface.model.point import SurveyPoint
from tin_surface.utils.math_helpers import Vector3, cross, normalize


@dataclass(frozen=True)
class Triangle:
    """A single facet of a TIN surface.

    Vertices are cached as full survey points so consumers need no index
    lookups; ``indices`` still refer into the owning surface's point list.
    ``id`` is the construction-order index within that surface.
    """
    id: int
    vertices: Tuple[SurveyPoint, SurveyPoint, SurveyPoint]
    indices: Tuple[int, int, int]

    def __post_init__(self):
        if len(self.vertices) != 3 or len(self.indices) != 3:
            raise ValueError("A triangle needs exactly 3 vertices and 3 indices")

    @property
    def v0(self) -> SurveyPoint:
        return self.vertices[0]

    @property
    def v1(self) -> SurveyPoint:
        return self.vertices[1]

    @property
    def v2(self) -> SurveyPoint:
        return self.vertices[2]

    def plane_normal(self) -> Optional[Vector3]:
        """Unit normal of the facet plane, or None for a zero-area facet.

        Orientation follows the vertex winding (upward for counter-clockwise).
        """
        v0, v1, v2 = self.vertices
        e1 = (v1.x - v0.x, v1.y - v0.y, v1.z - v0.z)
        e2 = (v2.x - v0.x, v2.y - v0.y, v2.z - v0.z)
        return normalize(cross(e1, e2))

    def area_2d(self) -> float:
        """Area of the facet projected onto the XY plane."""
        v0, v1, v2 = self.vertices
        return abs((v1.x - v0.x) * (v2.y - v0.y) - (v2.x - v0.x) * (v1.y - v0.y)) / 2.0

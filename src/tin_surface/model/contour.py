"""Contour polyline and contour set dataclasses."""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

from tin_surface.utils.math_helpers import points_coincide


@dataclass(frozen=True)
class ContourPoint:
    x: float
    y: float


@dataclass(frozen=True)
class Contour:
    """An iso-elevation polyline.

    Open chains end on the triangulation boundary; closed loops repeat
    their first point as the last point.
    """
    id: str
    elevation: float
    is_major: bool
    points: Tuple[ContourPoint, ...]

    @property
    def point_count(self) -> int:
        return len(self.points)

    @property
    def is_closed(self) -> bool:
        if len(self.points) < 3:
            return False
        first, last = self.points[0], self.points[-1]
        return points_coincide(first.x, first.y, last.x, last.y)


@dataclass(frozen=True)
class ContourSet:
    """Result of one contour extraction run."""
    interval: float
    major_interval: int
    elevation_range: Tuple[float, float]    # (min, max) requested range
    contours: Tuple[Contour, ...] = ()

    @property
    def contour_count(self) -> int:
        return len(self.contours)

    @property
    def major_contours(self) -> List[Contour]:
        return [c for c in self.contours if c.is_major]

    def elevations(self) -> List[float]:
        """Distinct contour elevations, ascending."""
        return sorted({c.elevation for c in self.contours})

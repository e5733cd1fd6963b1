"""Triangulated Irregular Network surface aggregate."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

import numpy as np

from tin_surface.model.point import SurveyPoint
from tin_surface.model.triangle import Triangle


@dataclass(frozen=True)
class SurfaceBounds:
    """Componentwise extents of the surface points."""
    min_x: float
    max_x: float
    min_y: float
    max_y: float
    min_z: float
    max_z: float


@dataclass(frozen=True)
class SurfaceStatistics:
    """Elevation summary of the surface points."""
    min_elevation: float
    max_elevation: float
    avg_elevation: float
    elevation_range: float


@dataclass(frozen=True)
class TINSurface:
    """Triangulated Irregular Network (TIN) terrain surface.

    Built in one batch by :func:`tin_surface.geometry.builder.build_surface`
    and read-only afterwards. Contour extraction and elevation queries
    read it without modifying it, so one instance can be shared between
    threads.
    """
    points: Tuple[SurveyPoint, ...]
    triangles: Tuple[Triangle, ...]
    bounds: SurfaceBounds
    statistics: SurfaceStatistics
    name: str = ""

    @property
    def num_points(self) -> int:
        return len(self.points)

    @property
    def num_triangles(self) -> int:
        return len(self.triangles)

    @property
    def planar_area(self) -> float:
        """Total area of the facets projected onto the XY plane."""
        return sum(t.area_2d() for t in self.triangles)

    @property
    def vertices(self) -> np.ndarray:
        """(n, 3) array copy of the point coordinates."""
        if not self.points:
            return np.empty((0, 3))
        return np.array([p.as_tuple() for p in self.points], dtype=float)

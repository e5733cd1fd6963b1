"""Adapter around the 2D Delaunay triangulation collaborator.

A triangulator takes interleaved coordinates ``[x0, y0, x1, y1, ...]`` and
returns interleaved vertex indices ``[i0, i1, i2, ...]``, each consecutive
triple being one consistently wound triangle. Elevation never enters the
triangulation; the surface is a 2.5D height field.
"""
from __future__ import annotations

import logging
from typing import List, Protocol, Sequence

import numpy as np
from scipy.spatial import Delaunay, QhullError

from tin_surface.errors import TriangulationError
from tin_surface.model.point import SurveyPoint
from tin_surface.model.triangle import Triangle

logger = logging.getLogger(__name__)


class Triangulator(Protocol):
    """Anything that turns flat 2D coordinates into flat index triples."""

    def triangulate(self, coords: Sequence[float]) -> Sequence[int]:
        ...


class DelaunayTriangulator:
    """Triangulator backed by ``scipy.spatial.Delaunay`` (Qhull).

    Triangles are returned counter-clockwise in scipy's simplex order.
    """

    def triangulate(self, coords: Sequence[float]) -> List[int]:
        xy = np.asarray(coords, dtype=float).reshape(-1, 2)
        try:
            tri = Delaunay(xy)
        except QhullError as exc:
            raise TriangulationError(f"Delaunay triangulation failed: {exc}") from exc

        simplices = np.array(tri.simplices, dtype=int)
        if len(simplices) == 0:
            return []

        # Flip clockwise triangles so every triple winds counter-clockwise
        p0 = xy[simplices[:, 0]]
        p1 = xy[simplices[:, 1]]
        p2 = xy[simplices[:, 2]]
        signed = ((p1[:, 0] - p0[:, 0]) * (p2[:, 1] - p0[:, 1])
                  - (p2[:, 0] - p0[:, 0]) * (p1[:, 1] - p0[:, 1]))
        cw = signed < 0
        simplices[cw] = simplices[cw][:, [0, 2, 1]]

        return [int(i) for i in simplices.ravel()]


def flatten_xy(points: Sequence[SurveyPoint]) -> List[float]:
    """Interleave point projections as [x0, y0, x1, y1, ...]."""
    coords = []
    for p in points:
        coords.append(p.x)
        coords.append(p.y)
    return coords


def triangulate_points(
    points: Sequence[SurveyPoint], triangulator: Triangulator,
) -> List[Triangle]:
    """Triangulate point projections and wrap the result as Triangle records.

    Triangle order follows the triangulator output; ids run 0..n-1.
    """
    flat = list(triangulator.triangulate(flatten_xy(points)))
    if len(flat) % 3 != 0:
        raise TriangulationError(
            f"Triangulator returned {len(flat)} indices, not a multiple of 3"
        )

    n = len(points)
    triangles = []
    for k in range(0, len(flat), 3):
        i0, i1, i2 = int(flat[k]), int(flat[k + 1]), int(flat[k + 2])
        for idx in (i0, i1, i2):
            if idx < 0 or idx >= n:
                raise TriangulationError(
                    f"Triangle index {idx} out of range for {n} points"
                )
        triangles.append(Triangle(
            id=len(triangles),
            vertices=(points[i0], points[i1], points[i2]),
            indices=(i0, i1, i2),
        ))

    logger.debug(f"Triangulated {n} points into {len(triangles)} triangles")
    return triangles

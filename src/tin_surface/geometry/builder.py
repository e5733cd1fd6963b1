"""Assemble validated survey points and their triangulation into a TIN."""
from __future__ import annotations

import logging
from typing import Any, Iterable, Optional, Sequence

import numpy as np

from tin_surface.geometry.triangulation import (
    DelaunayTriangulator, Triangulator, triangulate_points,
)
from tin_surface.geometry.validator import validate_points
from tin_surface.model.point import SurveyPoint
from tin_surface.model.surface import SurfaceBounds, SurfaceStatistics, TINSurface

logger = logging.getLogger(__name__)


def compute_bounds(points: Sequence[SurveyPoint]) -> SurfaceBounds:
    """Componentwise min/max over the points."""
    coords = np.array([p.as_tuple() for p in points], dtype=float)
    mins = coords.min(axis=0)
    maxs = coords.max(axis=0)
    return SurfaceBounds(
        min_x=float(mins[0]), max_x=float(maxs[0]),
        min_y=float(mins[1]), max_y=float(maxs[1]),
        min_z=float(mins[2]), max_z=float(maxs[2]),
    )


def compute_statistics(points: Sequence[SurveyPoint]) -> SurfaceStatistics:
    """Min, max, mean and range of point elevations."""
    z = np.array([p.z for p in points], dtype=float)
    min_z = float(z.min())
    max_z = float(z.max())
    return SurfaceStatistics(
        min_elevation=min_z,
        max_elevation=max_z,
        avg_elevation=float(z.mean()),
        elevation_range=max_z - min_z,
    )


def build_surface(
    points: Iterable[Any],
    triangulator: Optional[Triangulator] = None,
    name: str = "",
) -> TINSurface:
    """Build a TIN surface from raw survey points.

    Invalid points are dropped first. The (x, y) projections of the rest are
    handed to ``triangulator`` (scipy Delaunay by default) and every returned
    index triple becomes a Triangle carrying its three full 3D vertices.

    Raises:
        InsufficientPointsError: fewer than 3 valid points.
        TriangulationError: the triangulator failed or returned bad indices.
    """
    valid = validate_points(points)
    if triangulator is None:
        triangulator = DelaunayTriangulator()

    triangles = triangulate_points(valid, triangulator)
    if not triangles:
        logger.warning(f"Triangulation of {len(valid)} points produced no triangles")

    surface = TINSurface(
        points=tuple(valid),
        triangles=tuple(triangles),
        bounds=compute_bounds(valid),
        statistics=compute_statistics(valid),
        name=name,
    )
    logger.info(
        f"Built TIN surface {name!r}: {surface.num_points} points, "
        f"{surface.num_triangles} triangles"
    )
    return surface

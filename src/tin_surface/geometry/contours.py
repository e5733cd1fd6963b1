"""Contour (iso-line) extraction from a TIN surface.

Each triangle is cut by each contour elevation using linear interpolation
along its edges. The resulting two-point segments are grouped by elevation
and chained end-to-end into polylines.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from tin_surface import config
from tin_surface.model.contour import Contour, ContourPoint, ContourSet
from tin_surface.model.surface import TINSurface
from tin_surface.model.triangle import Triangle
from tin_surface.utils.math_helpers import points_coincide

logger = logging.getLogger(__name__)

Crossing = Tuple[float, float, float]


@dataclass(frozen=True)
class _Segment:
    start: Crossing
    end: Crossing


def auto_interval(elevation_range: float) -> float:
    """Pick a contour interval suited to an elevation range."""
    for max_range, interval in config.AUTO_INTERVAL_STEPS:
        if elevation_range <= max_range:
            return interval
    return config.AUTO_INTERVAL_MAX


def contour_elevations(min_z: float, max_z: float, interval: float) -> List[float]:
    """Multiples of ``interval`` from ceil(min_z / interval) up to max_z inclusive."""
    if not math.isfinite(interval) or interval <= 0:
        raise ValueError(f"Contour interval must be positive, got {interval}")
    if not (math.isfinite(min_z) and math.isfinite(max_z)):
        raise ValueError(f"Contour range must be finite, got {min_z} .. {max_z}")
    elevations = []
    k = math.ceil(min_z / interval)
    elevation = k * interval
    while elevation <= max_z:
        elevations.append(elevation)
        k += 1
        elevation = k * interval
    return elevations


def is_major_elevation(elevation: float, interval: float, major_interval: int) -> bool:
    """True when the elevation falls on every ``major_interval``-th contour."""
    return round(elevation / interval) % major_interval == 0


def _edge_crossing(v1, v2, elevation: float) -> Optional[Crossing]:
    """Point where the edge v1-v2 reaches ``elevation``, if it does so cleanly."""
    if not (v1.z <= elevation <= v2.z or v1.z >= elevation >= v2.z):
        return None

    dz = v2.z - v1.z
    if abs(dz) < config.EPSILON:
        return None

    t = (elevation - v1.z) / dz
    # At a vertex; the neighbouring facet picks it up as an interior crossing
    if t < config.EPSILON or t > 1.0 - config.EPSILON:
        return None

    return (v1.x + t * (v2.x - v1.x), v1.y + t * (v2.y - v1.y), elevation)


def triangle_segment(triangle: Triangle, elevation: float) -> Optional[_Segment]:
    """Cut one facet at one elevation.

    Returns a segment only when exactly two edges are crossed.
    """
    v = triangle.vertices
    crossings = []
    for i in range(3):
        crossing = _edge_crossing(v[i], v[(i + 1) % 3], elevation)
        if crossing is not None:
            crossings.append(crossing)

    if len(crossings) == 2:
        return _Segment(start=crossings[0], end=crossings[1])
    return None


def _find_connected(
    segments: List[_Segment], used: List[bool], point: Crossing,
) -> Optional[Tuple[int, Crossing]]:
    """First unused segment touching ``point``, with its far endpoint."""
    px, py = point[0], point[1]
    for i, seg in enumerate(segments):
        if used[i]:
            continue
        if points_coincide(seg.start[0], seg.start[1], px, py):
            return i, seg.end
        if points_coincide(seg.end[0], seg.end[1], px, py):
            return i, seg.start
    return None


def connect_segments(segments: List[_Segment]) -> List[List[Crossing]]:
    """Chain segments sharing endpoints into polylines.

    Each polyline is grown forward from its trailing point until no segment
    continues it, then backward from its leading point. A loop shows up as a
    polyline whose first and last points coincide.
    """
    used = [False] * len(segments)
    polylines = []

    for seed in range(len(segments)):
        if used[seed]:
            continue
        used[seed] = True
        polyline = [segments[seed].start, segments[seed].end]

        connected = _find_connected(segments, used, polyline[-1])
        while connected is not None:
            index, far = connected
            used[index] = True
            polyline.append(far)
            connected = _find_connected(segments, used, polyline[-1])

        connected = _find_connected(segments, used, polyline[0])
        while connected is not None:
            index, far = connected
            used[index] = True
            polyline.insert(0, far)
            connected = _find_connected(segments, used, polyline[0])

        polylines.append(polyline)

    return polylines


def extract_contours(
    surface: TINSurface,
    interval: Optional[float] = None,
    min_elevation: Optional[float] = None,
    max_elevation: Optional[float] = None,
    major_interval: int = config.DEFAULT_MAJOR_INTERVAL,
) -> ContourSet:
    """Extract contour polylines from a TIN surface.

    Args:
        surface: Source surface.
        interval: Contour spacing. None (or 0) picks one from the elevation range.
        min_elevation: Lowest contour bound (default: surface minimum).
        max_elevation: Highest contour bound (default: surface maximum).
        major_interval: Every Nth contour is flagged major.

    Returns:
        ContourSet with contours ordered by ascending elevation.
    """
    if major_interval < 1:
        raise ValueError(f"major_interval must be at least 1, got {major_interval}")
    if interval is not None and interval < 0:
        raise ValueError(f"Contour interval must be positive, got {interval}")

    stats = surface.statistics
    min_z = min_elevation if min_elevation is not None else stats.min_elevation
    max_z = max_elevation if max_elevation is not None else stats.max_elevation

    if not interval:
        interval = auto_interval(max_z - min_z)
    interval = float(interval)

    elevations = contour_elevations(min_z, max_z, interval)

    buckets: Dict[float, List[_Segment]] = {}
    for elevation in elevations:
        bucket = []
        for triangle in surface.triangles:
            segment = triangle_segment(triangle, elevation)
            if segment is not None:
                bucket.append(segment)
        if bucket:
            buckets[elevation] = bucket

    contours = []
    for elevation, bucket in buckets.items():
        major = is_major_elevation(elevation, interval, major_interval)
        for polyline in connect_segments(bucket):
            contours.append(Contour(
                id=f"contour-{len(contours)}",
                elevation=elevation,
                is_major=major,
                points=tuple(ContourPoint(x, y) for x, y, _ in polyline),
            ))

    logger.info(
        f"Extracted {len(contours)} contours at {len(buckets)} of "
        f"{len(elevations)} elevations (interval {interval})"
    )
    return ContourSet(
        interval=interval,
        major_interval=major_interval,
        elevation_range=(min_z, max_z),
        contours=tuple(contours),
    )

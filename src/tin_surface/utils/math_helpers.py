"""Vector and angle helpers shared by the surface queries and exporters."""
from __future__ import annotations

import math
from typing import Optional, Tuple

from tin_surface import config

Vector3 = Tuple[float, float, float]


def normalize_degrees(angle: float) -> float:
    """Normalize angle in degrees to [0, 360)."""
    angle = angle % 360.0
    if angle < 0:
        angle += 360.0
    # -1e-17 % 360.0 rounds to 360.0
    if angle >= 360.0:
        angle = 0.0
    return angle


def cross(a: Vector3, b: Vector3) -> Vector3:
    """Cross product a x b."""
    return (
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


def normalize(v: Vector3, tol: float = config.EPSILON) -> Optional[Vector3]:
    """Return v scaled to unit length, or None if its length is below tol."""
    length = math.sqrt(v[0] ** 2 + v[1] ** 2 + v[2] ** 2)
    if length < tol:
        return None
    return (v[0] / length, v[1] / length, v[2] / length)


def points_coincide(
    x1: float, y1: float, x2: float, y2: float, tol: float = config.EPSILON,
) -> bool:
    """True when both coordinate differences are below tol."""
    return abs(x1 - x2) < tol and abs(y1 - y2) < tol


def distance_2d(x1: float, y1: float, x2: float, y2: float) -> float:
    """2D Euclidean distance."""
    return math.sqrt((x2 - x1) ** 2 + (y2 - y1) ** 2)

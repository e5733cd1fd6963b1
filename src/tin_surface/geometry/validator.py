"""Survey point validation."""
from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from numbers import Real
from typing import Any, Iterable, List, Optional

from tin_surface.errors import InsufficientPointsError
from tin_surface.model.point import SurveyPoint

logger = logging.getLogger(__name__)

MIN_POINTS = 3


def _as_coordinate(value: Any) -> Optional[float]:
    """Return value as a finite float, or None if it is not a finite real number."""
    if isinstance(value, bool) or not isinstance(value, Real):
        return None
    value = float(value)
    if not math.isfinite(value):
        return None
    return value


def _unpack(candidate: Any):
    """Pull raw (x, y, z) out of a point, mapping or 3-sequence."""
    if isinstance(candidate, SurveyPoint):
        return candidate.x, candidate.y, candidate.z
    if isinstance(candidate, Mapping):
        return candidate.get("x"), candidate.get("y"), candidate.get("z")
    if isinstance(candidate, (str, bytes)):
        return None
    try:
        if len(candidate) != 3:
            return None
        return candidate[0], candidate[1], candidate[2]
    except (TypeError, KeyError, IndexError):
        return None


def coerce_point(candidate: Any) -> Optional[SurveyPoint]:
    """Convert one candidate to a SurveyPoint, or None if it is not valid."""
    raw = _unpack(candidate)
    if raw is None:
        return None
    coords = [_as_coordinate(v) for v in raw]
    if any(c is None for c in coords):
        return None
    return SurveyPoint(*coords)


def validate_points(candidates: Iterable[Any]) -> List[SurveyPoint]:
    """Keep the candidates whose x, y and z are all finite real numbers.

    Order is preserved and duplicates are kept. Collinearity is not
    checked here.

    Raises:
        InsufficientPointsError: fewer than 3 valid points remain.
    """
    valid = []
    total = 0
    for candidate in candidates:
        total += 1
        point = coerce_point(candidate)
        if point is not None:
            valid.append(point)

    if total != len(valid):
        logger.warning(f"Dropped {total - len(valid)} invalid survey points of {total}")

    if len(valid) < MIN_POINTS:
        raise InsufficientPointsError(len(valid), total)
    return valid

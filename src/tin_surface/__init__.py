"""TIN surface modelling and contour extraction from survey points."""
from __future__ import annotations

__version__ = "0.1.0"

from tin_surface.errors import TINError, InsufficientPointsError, TriangulationError
from tin_surface.model.point import SurveyPoint
from tin_surface.model.surface import TINSurface
from tin_surface.model.contour import Contour, ContourSet
from tin_surface.model.slope import SlopeResult
from tin_surface.geometry.builder import build_surface
from tin_surface.geometry.contours import extract_contours
from tin_surface.geometry.query import interpolate_elevation, slope_at

__all__ = [
    "__version__",
    "TINError",
    "InsufficientPointsError",
    "TriangulationError",
    "SurveyPoint",
    "TINSurface",
    "Contour",
    "ContourSet",
    "SlopeResult",
    "build_surface",
    "extract_contours",
    "interpolate_elevation",
    "slope_at",
]

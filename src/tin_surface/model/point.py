"""Survey point dataclass."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SurveyPoint:
    """A surveyed ground point. z is elevation."""
    x: float
    y: float
    z: float

    def as_tuple(self):
        return (self.x, self.y, self.z)

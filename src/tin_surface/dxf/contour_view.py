"""Contour polyline and elevation label DXF generation."""
from __future__ import annotations

import math
from typing import Optional, Tuple

from ezdxf.document import Drawing
from ezdxf.enums import TextEntityAlignment

from tin_surface import config
from tin_surface.model.contour import Contour, ContourSet
from tin_surface.utils.math_helpers import distance_2d


def format_elevation(elevation: float) -> str:
    """Label text: up to two decimals, trailing zeros dropped."""
    text = f"{elevation:.2f}".rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


def draw_contours(
    doc: Drawing, contour_set: ContourSet, label_major: bool = True,
) -> None:
    """Draw contours as LWPOLYLINEs on the major/minor layers.

    Polylines carry the contour elevation; closed loops get the closed
    flag instead of a repeated end vertex.
    """
    msp = doc.modelspace()

    for contour in contour_set.contours:
        points = [(p.x, p.y) for p in contour.points]
        closed = contour.is_closed
        if closed:
            points = points[:-1]

        if contour.is_major:
            layer, weight = "CONTOUR_MAJOR", config.MAJOR_LINE_WEIGHT
        else:
            layer, weight = "CONTOUR_MINOR", config.MINOR_LINE_WEIGHT

        msp.add_lwpolyline(points, close=closed, dxfattribs={
            "layer": layer,
            "elevation": contour.elevation,
            "lineweight": weight,
        })

        if label_major and contour.is_major:
            _label_contour(msp, contour)


def _label_anchor(contour: Contour) -> Optional[Tuple[float, float, float]]:
    """Midpoint and reading angle (degrees) of the contour's longest segment."""
    best = None
    best_length = 0.0
    pts = contour.points
    for a, b in zip(pts, pts[1:]):
        length = distance_2d(a.x, a.y, b.x, b.y)
        if length > best_length:
            best_length = length
            best = (a, b)
    if best is None:
        return None

    a, b = best
    angle = math.degrees(math.atan2(b.y - a.y, b.x - a.x))
    # Keep text upright
    if angle > 90.0:
        angle -= 180.0
    elif angle <= -90.0:
        angle += 180.0
    return ((a.x + b.x) / 2.0, (a.y + b.y) / 2.0, angle)


def _label_contour(msp, contour: Contour) -> None:
    anchor = _label_anchor(contour)
    if anchor is None:
        return
    x, y, angle = anchor
    msp.add_text(
        format_elevation(contour.elevation),
        dxfattribs={
            "layer": "CONTOUR_LABELS",
            "height": config.LABEL_HEIGHT,
            "rotation": angle,
        },
    ).set_placement((x, y, contour.elevation), align=TextEntityAlignment.MIDDLE_CENTER)

"""TIN wireframe and survey point DXF generation."""
from __future__ import annotations

from ezdxf.document import Drawing

from tin_surface import config
from tin_surface.model.surface import TINSurface


def draw_mesh(doc: Drawing, surface: TINSurface) -> None:
    """Draw every facet as a 3D face on the TIN_MESH layer."""
    msp = doc.modelspace()
    for triangle in surface.triangles:
        msp.add_3dface(
            [v.as_tuple() for v in triangle.vertices],
            dxfattribs={"layer": "TIN_MESH"},
        )


def draw_survey_points(doc: Drawing, surface: TINSurface) -> None:
    """Mark each survey point with a small circle at its elevation."""
    msp = doc.modelspace()
    for point in surface.points:
        msp.add_circle(
            center=point.as_tuple(),
            radius=config.POINT_MARKER_RADIUS,
            dxfattribs={"layer": "SURVEY_POINTS"},
        )

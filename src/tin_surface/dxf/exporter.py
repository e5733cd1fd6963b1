"""DXF export orchestrator - combines TIN mesh, survey points and contours."""
from __future__ import annotations

import logging
from typing import Optional

import ezdxf

from tin_surface import config
from tin_surface.dxf.contour_view import draw_contours
from tin_surface.dxf.mesh_view import draw_mesh, draw_survey_points
from tin_surface.model.contour import ContourSet
from tin_surface.model.surface import TINSurface

logger = logging.getLogger(__name__)


def export_dxf(
    surface: TINSurface,
    contour_set: Optional[ContourSet] = None,
    output_path: str = "surface.dxf",
    include_mesh: bool = True,
    include_points: bool = False,
    label_major: bool = True,
) -> None:
    """Export a TIN surface and its contours to a DXF file.

    Args:
        surface: Source TIN surface.
        contour_set: Optional extracted contours.
        output_path: Output DXF file path.
        include_mesh: Draw triangle faces on TIN_MESH.
        include_points: Draw survey point markers on SURVEY_POINTS.
        label_major: Add elevation text to major contours.
    """
    doc = ezdxf.new(config.DXF_VERSION)

    # Set up layers
    for name, color, linetype in config.DXF_LAYERS:
        doc.layers.add(name, color=color,
                       linetype=linetype if linetype in doc.linetypes else "CONTINUOUS")

    if include_mesh:
        draw_mesh(doc, surface)
    if include_points:
        draw_survey_points(doc, surface)
    if contour_set is not None:
        draw_contours(doc, contour_set, label_major=label_major)

    doc.saveas(str(output_path))
    logger.info(f"Wrote DXF {output_path}")

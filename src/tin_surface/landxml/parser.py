"""LandXML survey point ingestion via lxml.

Reads survey points from a LandXML file:
- Surfaces/Surface/Definition/Pnts (TIN source points)
- CgPoints/CgPoint (coordinate geometry points) when no surface exists

Automatically detects imperial (US Survey Feet) vs metric units and
converts all output values to meters. Faces stored in the file are not
used; surfaces are always re-triangulated from their points.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

from lxml import etree

from tin_surface.model.point import SurveyPoint

logger = logging.getLogger(__name__)

# US Survey Foot to meter
US_SURVEY_FT_TO_M = 0.30480060960121924
INTL_FT_TO_M = 0.3048


def _parse_coords(text: Optional[str]) -> Optional[tuple]:
    """Parse 'northing easting elevation' into (easting, northing, elevation).

    Returns None for 2D points or unparseable text.
    """
    if not text:
        return None
    parts = text.strip().split()
    if len(parts) < 3:
        return None
    try:
        northing, easting, elevation = float(parts[0]), float(parts[1]), float(parts[2])
    except ValueError:
        return None
    return easting, northing, elevation


class LandXMLParser:
    """Parser for LandXML survey point data."""

    def __init__(self, filepath: str | Path):
        self.filepath = Path(filepath)
        self.tree = etree.parse(str(self.filepath))
        self.root = self.tree.getroot()
        # Detect namespace
        self.ns = ""
        root_tag = self.root.tag
        if "{" in root_tag:
            self.ns = root_tag.split("}")[0] + "}"

        # Detect linear units
        self._linear_scale = 1.0  # meters by default
        self._unit_name = "meter"
        self._detect_units()

    def _detect_units(self) -> None:
        """Detect whether the file uses imperial or metric linear units."""
        units_elem = self._find_first(self.root, "Units")
        if units_elem is None:
            return

        imperial = self._find_first(units_elem, "Imperial")
        if imperial is not None:
            lu = (imperial.get("linearUnit") or "").lower()
            if "ussurveyfoo" in lu or "usfoot" in lu or "ussurvey" in lu:
                self._linear_scale = US_SURVEY_FT_TO_M
                self._unit_name = "USSurveyFoot"
            elif "foot" in lu or "feet" in lu:
                self._linear_scale = INTL_FT_TO_M
                self._unit_name = "foot"
            return

        metric = self._find_first(units_elem, "Metric")
        if metric is not None:
            lu = (metric.get("linearUnit") or "").lower()
            if "meter" in lu or "metre" in lu:
                self._linear_scale = 1.0
                self._unit_name = "meter"

    def _to_m(self, value: float) -> float:
        """Convert a length value from file units to meters."""
        return value * self._linear_scale

    @property
    def is_imperial(self) -> bool:
        return self._linear_scale != 1.0

    @property
    def unit_name(self) -> str:
        return self._unit_name

    def _tag(self, local_name: str) -> str:
        """Return fully qualified tag name."""
        return f"{self.ns}{local_name}"

    def _local(self, elem: etree._Element) -> Optional[str]:
        """Tag without namespace, or None for comments/PIs."""
        if not isinstance(elem.tag, str):
            return None
        return elem.tag.replace(self.ns, "")

    def _find(self, parent: etree._Element, path: str) -> list:
        """Find elements supporting both namespaced and plain XML."""
        # Handle ".//X/Y" patterns
        if path.startswith(".//"):
            inner = path[3:]
            parts = inner.split("/")
            qualified = ".//" + "/".join(self._tag(p) for p in parts)
        else:
            parts = path.split("/")
            qualified = "/".join(self._tag(p) for p in parts)
        result = parent.findall(qualified)
        if not result:
            result = parent.findall(path)
        return result

    def _find_first(self, parent: etree._Element, path: str) -> Optional[etree._Element]:
        """Find first matching element."""
        results = self._find(parent, path)
        return results[0] if results else None

    def _to_point(self, text: Optional[str]) -> Optional[SurveyPoint]:
        coords = _parse_coords(text)
        if coords is None:
            return None
        e, n, z = coords
        return SurveyPoint(self._to_m(e), self._to_m(n), self._to_m(z))

    def surface_names(self) -> List[str]:
        """Names of all Surface elements, in document order."""
        return [s.get("name", "Surface") for s in self._find(self.root, ".//Surfaces/Surface")]

    def parse_surface_points(self, surface_name: str = "") -> List[SurveyPoint]:
        """Points of a TIN surface definition, ordered by point id.

        Uses the named surface, or the first one. Returns an empty list if
        the file has no surface definition.
        """
        surfaces = self._find(self.root, ".//Surfaces/Surface")
        if not surfaces:
            return []

        surf_elem = surfaces[0]
        if surface_name:
            for s in surfaces:
                if s.get("name") == surface_name:
                    surf_elem = s
                    break
            else:
                raise ValueError(f"No Surface named {surface_name!r} in LandXML")

        defn = self._find_first(surf_elem, "Definition")
        if defn is None:
            return []
        pnts = self._find_first(defn, "Pnts")
        if pnts is None:
            return []

        points = {}
        for p in pnts:
            if self._local(p) != "P":
                continue
            point = self._to_point(p.text)
            if point is None:
                logger.warning(f"Skipping malformed surface point id={p.get('id')}")
                continue
            pid = p.get("id")
            points[int(pid) if pid is not None else len(points)] = point

        return [points[pid] for pid in sorted(points)]

    def parse_cg_points(self) -> List[SurveyPoint]:
        """All 3D CgPoint elements, in document order."""
        points = []
        for cg in self._find(self.root, ".//CgPoints/CgPoint"):
            point = self._to_point(cg.text)
            if point is None:
                logger.debug(f"Skipping CgPoint {cg.get('name', '')!r} without elevation")
                continue
            points.append(point)
        return points

    def parse_points(self, surface_name: str = "") -> List[SurveyPoint]:
        """Survey points for TIN construction, in meters.

        Prefers surface definition points, then falls back to CgPoints.
        """
        points = self.parse_surface_points(surface_name)
        source = "surface"
        if not points:
            points = self.parse_cg_points()
            source = "CgPoints"
        if not points:
            raise ValueError("No surface points or CgPoints found in LandXML")

        logger.info(f"Read {len(points)} {source} points from {self.filepath} ({self._unit_name})")
        return points

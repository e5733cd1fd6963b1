"""Numeric tolerances, contour defaults and drawing constants.

All coordinates are project-local planar units; the engine does not imply a
unit system. LandXML input is converted to meters on read.
"""

# ── Tolerance ────────────────────────────────────────────────────────
# Shared by crossing rejection, barycentric containment, plane degeneracy
# and segment endpoint matching. Behavior at exactly EPSILON is not defined.
EPSILON = 1e-4

# ── Contour Intervals ────────────────────────────────────────────────
# (max elevation range, interval), ascending. First row whose range bound
# is not exceeded wins.
AUTO_INTERVAL_STEPS = (
    (5.0, 0.5),
    (20.0, 1.0),
    (50.0, 2.0),
    (100.0, 5.0),
    (500.0, 10.0),
)
AUTO_INTERVAL_MAX = 20.0        # Ranges above the last step

DEFAULT_MAJOR_INTERVAL = 5      # Every 5th contour is major (index contour)

# ── Aspect ───────────────────────────────────────────────────────────
# Compass octants, clockwise from north, 45 degrees each
ASPECT_DIRECTIONS = ("N", "NE", "E", "SE", "S", "SW", "W", "NW")

# ── DXF Layers ───────────────────────────────────────────────────────
# (name, ACI color, linetype)
DXF_LAYERS = (
    ("TIN_MESH", 8, "CONTINUOUS"),        # Gray - triangle wireframe
    ("CONTOUR_MAJOR", 1, "CONTINUOUS"),   # Red - index contours
    ("CONTOUR_MINOR", 3, "CONTINUOUS"),   # Green - intermediate contours
    ("CONTOUR_LABELS", 7, "CONTINUOUS"),
    ("SURVEY_POINTS", 5, "CONTINUOUS"),   # Blue - source points
)

DXF_VERSION = "R2013"
MAJOR_LINE_WEIGHT = 35          # 0.35 mm
MINOR_LINE_WEIGHT = 13          # 0.13 mm
LABEL_HEIGHT = 0.5              # Drawing units
POINT_MARKER_RADIUS = 0.15

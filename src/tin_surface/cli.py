"""Command-line interface for the TIN surface and contour tool."""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from tin_surface import __version__, config
from tin_surface.errors import TINError


def parse_args(args=None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="tin-surface",
        description="Build a TIN surface from LandXML survey points, extract contours, "
                    "and query elevation/slope",
    )
    parser.add_argument("input", type=Path,
                        help="Input LandXML file path")
    parser.add_argument("--surface-name", default="",
                        help="Name of surface to use (default: first)")
    parser.add_argument("--interval", type=float, default=None,
                        help="Contour interval (default: chosen from elevation range)")
    parser.add_argument("--min-elevation", type=float, default=None,
                        help="Lowest contour elevation (default: surface minimum)")
    parser.add_argument("--max-elevation", type=float, default=None,
                        help="Highest contour elevation (default: surface maximum)")
    parser.add_argument("--major-interval", type=int, default=config.DEFAULT_MAJOR_INTERVAL,
                        help="Every Nth contour is major (default: 5)")
    parser.add_argument("--dxf", type=Path, default=None,
                        help="Optional DXF output file path")
    parser.add_argument("--no-mesh", action="store_true",
                        help="Leave the triangle mesh out of the DXF")
    parser.add_argument("--points", action="store_true",
                        help="Draw survey point markers in the DXF")
    parser.add_argument("--at", nargs=2, type=float, action="append", default=[],
                        metavar=("X", "Y"),
                        help="Report elevation and slope at X Y (repeatable)")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    return parser.parse_args(args)


def setup_logging(verbose: bool = False) -> None:
    """Configure console logging; DEBUG when verbose, otherwise WARNING."""
    level = logging.DEBUG if verbose else logging.WARNING

    formatter = logging.Formatter(
        '%(asctime)s [%(levelname)s] %(name)s: %(message)s',
        datefmt='%H:%M:%S'
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)


def main(args=None) -> None:
    """Main entry point."""
    opts = parse_args(args)
    setup_logging(opts.verbose)

    # Validate input
    if not opts.input.exists():
        print(f"Error: Input file not found: {opts.input}", file=sys.stderr)
        sys.exit(1)

    print(f"TIN Surface v{__version__}")
    print(f"  Input:      {opts.input}")
    print()

    # ── Read Points ───────────────────────────────────────────────
    print("Reading LandXML...")
    from tin_surface.landxml.parser import LandXMLParser

    try:
        parser = LandXMLParser(opts.input)
        points = parser.parse_points(opts.surface_name)
    except (OSError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)
    print(f"  Points:     {len(points)} ({parser.unit_name})")

    # ── Build Surface ─────────────────────────────────────────────
    print("Building TIN surface...")
    from tin_surface.geometry.builder import build_surface

    try:
        surface = build_surface(points, name=opts.surface_name)
    except TINError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)

    stats = surface.statistics
    print(f"  Triangles:  {surface.num_triangles}")
    print(f"  Area:       {surface.planar_area:.1f}")
    print(f"  Elevation:  {stats.min_elevation:.3f} .. {stats.max_elevation:.3f} "
          f"(avg {stats.avg_elevation:.3f})")

    # ── Extract Contours ──────────────────────────────────────────
    print("Extracting contours...")
    from tin_surface.geometry.contours import extract_contours

    try:
        contour_set = extract_contours(
            surface,
            interval=opts.interval,
            min_elevation=opts.min_elevation,
            max_elevation=opts.max_elevation,
            major_interval=opts.major_interval,
        )
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)

    closed = sum(1 for c in contour_set.contours if c.is_closed)
    print(f"  Interval:   {contour_set.interval:g} (major every {contour_set.major_interval})")
    print(f"  Contours:   {contour_set.contour_count} "
          f"({len(contour_set.major_contours)} major, {closed} closed)")

    # ── Point Queries ─────────────────────────────────────────────
    if opts.at:
        from tin_surface.geometry.query import interpolate_elevation, slope_at

        print("Querying surface...")
        for x, y in opts.at:
            elev = interpolate_elevation(surface, x, y)
            if elev is None:
                print(f"  ({x:g}, {y:g}): outside surface")
                continue
            slope = slope_at(surface, x, y)
            if slope is None:
                print(f"  ({x:g}, {y:g}): z={elev:.3f}")
            else:
                print(f"  ({x:g}, {y:g}): z={elev:.3f} slope={slope.slope_degrees:.2f}deg "
                      f"({slope.slope_percent:.1f}%) aspect={slope.aspect_degrees:.1f}deg "
                      f"{slope.aspect_direction}")

    # ── Optional DXF Export ───────────────────────────────────────
    if opts.dxf:
        print("Generating DXF...")
        from tin_surface.dxf.exporter import export_dxf
        export_dxf(surface, contour_set, str(opts.dxf),
                   include_mesh=not opts.no_mesh, include_points=opts.points)
        print(f"  Written: {opts.dxf}")

    print("\nDone.")

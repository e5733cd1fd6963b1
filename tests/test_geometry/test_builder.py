"""Tests for TIN construction and the triangulation adapter."""
import math

import pytest

from tin_surface.errors import InsufficientPointsError, TriangulationError
from tin_surface.geometry.builder import build_surface
from tin_surface.geometry.triangulation import DelaunayTriangulator, flatten_xy
from tin_surface.model.point import SurveyPoint

HILL = [(0, 0, 0), (100, 0, 0), (100, 100, 0), (0, 100, 0), (50, 50, 20)]


class FixedTriangulator:
    """Returns a canned index list and records what it was given."""

    def __init__(self, indices):
        self.indices = indices
        self.coords = None

    def triangulate(self, coords):
        self.coords = list(coords)
        return self.indices


@pytest.fixture
def hill():
    return build_surface(HILL, name="Hill")


class TestBuildSurface:
    def test_counts(self, hill):
        assert hill.name == "Hill"
        assert hill.num_points == 5
        # Interior apex splits the square into 4 facets
        assert hill.num_triangles == 4

    def test_ids_dense(self, hill):
        assert [t.id for t in hill.triangles] == list(range(hill.num_triangles))

    def test_vertices_cached_from_indices(self, hill):
        for tri in hill.triangles:
            for vertex, idx in zip(tri.vertices, tri.indices):
                assert vertex == hill.points[idx]

    def test_bounds(self, hill):
        b = hill.bounds
        assert (b.min_x, b.max_x, b.min_y, b.max_y) == (0.0, 100.0, 0.0, 100.0)
        assert (b.min_z, b.max_z) == (0.0, 20.0)

    def test_statistics(self, hill):
        s = hill.statistics
        assert s.min_elevation == 0.0
        assert s.max_elevation == 20.0
        assert s.avg_elevation == pytest.approx(4.0)
        assert s.elevation_range == 20.0

    def test_invalid_points_dropped(self):
        surface = build_surface(HILL + [(10, 10, math.nan), ("x", 1, 1)])
        assert surface.num_points == 5

    def test_insufficient_points(self):
        with pytest.raises(InsufficientPointsError):
            build_surface([(0, 0, 0), (1, 1, math.nan), (1, 0, 1)])

    def test_vertices_array(self, hill):
        verts = hill.vertices
        assert verts.shape == (5, 3)
        assert verts[4].tolist() == [50.0, 50.0, 20.0]

    def test_planar_area(self, hill):
        assert hill.planar_area == pytest.approx(10000.0)

    def test_surface_is_immutable(self, hill):
        with pytest.raises(AttributeError):
            hill.name = "other"


class TestTriangulationAdapter:
    def test_flatten_xy_drops_elevation(self):
        pts = [SurveyPoint(1, 2, 3), SurveyPoint(4, 5, 6)]
        assert flatten_xy(pts) == [1, 2, 4, 5]

    def test_injected_triangulator(self):
        tri = FixedTriangulator([0, 1, 2, 0, 2, 3])
        surface = build_surface(
            [(0, 0, 1), (10, 0, 2), (10, 10, 3), (0, 10, 4)], triangulator=tri,
        )
        assert tri.coords == [0.0, 0.0, 10.0, 0.0, 10.0, 10.0, 0.0, 10.0]
        assert surface.num_triangles == 2
        # Order follows the triangulator output
        assert surface.triangles[0].indices == (0, 1, 2)
        assert surface.triangles[1].indices == (0, 2, 3)
        assert surface.triangles[1].v2 == SurveyPoint(0.0, 10.0, 4.0)

    def test_empty_triangulation(self):
        surface = build_surface(
            [(0, 0, 1), (10, 0, 2), (10, 10, 3)], triangulator=FixedTriangulator([]),
        )
        assert surface.num_triangles == 0
        assert surface.num_points == 3

    def test_malformed_length(self):
        with pytest.raises(TriangulationError):
            build_surface(HILL, triangulator=FixedTriangulator([0, 1, 2, 3]))

    def test_index_out_of_range(self):
        with pytest.raises(TriangulationError):
            build_surface(HILL, triangulator=FixedTriangulator([0, 1, 7]))

    def test_collinear_points_fail(self):
        with pytest.raises(TriangulationError):
            build_surface([(0, 0, 0), (1, 1, 1), (2, 2, 2), (3, 3, 3)])

    def test_delaunay_counter_clockwise(self):
        pts = [(0, 0), (3, 1), (5, 4), (1, 6), (-2, 3), (2, 2.5), (4, -1)]
        flat = [c for p in pts for c in p]
        indices = DelaunayTriangulator().triangulate(flat)
        assert len(indices) % 3 == 0 and indices
        for k in range(0, len(indices), 3):
            (x0, y0), (x1, y1), (x2, y2) = (pts[i] for i in indices[k:k + 3])
            signed = (x1 - x0) * (y2 - y0) - (x2 - x0) * (y1 - y0)
            assert signed > 0


class TestTriangle:
    def test_area_and_normal(self, hill):
        total = sum(t.area_2d() for t in hill.triangles)
        assert total == pytest.approx(10000.0)
        for tri in hill.triangles:
            nx, ny, nz = tri.plane_normal()
            assert math.sqrt(nx * nx + ny * ny + nz * nz) == pytest.approx(1.0)
            assert nz > 0

    def test_degenerate_normal(self):
        surface = build_surface(
            [(0, 0, 0), (1, 0, 0), (2, 0, 0), (0, 1, 0)],
            triangulator=FixedTriangulator([0, 1, 2]),
        )
        assert surface.triangles[0].plane_normal() is None
        assert surface.triangles[0].area_2d() == 0.0

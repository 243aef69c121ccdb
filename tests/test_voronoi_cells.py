"""Tests for Voronoi cell reconstruction."""

import math

import pytest
from py_sector.core.delaunay import SiteTriangulation, triangulate_sites
from py_sector.core.geometry import Point2D, polygon_area, signed_area
from py_sector.core.voronoi_cells import (
    build_voronoi_cell, cell_circumcenters, incident_cells, order_around
)


class TestBuildVoronoiCell:
    """Test cell construction from circumcenters."""

    def test_interior_site(self, hex_sites):
        """The center of a hexagon ring gets a regular hexagonal cell."""
        triangulation = triangulate_sites(hex_sites)
        cell = build_voronoi_cell(0, triangulation)

        assert cell is not None
        assert len(cell) == 6
        assert signed_area(cell) > 0
        circumradius = 100.0 / math.sqrt(3)
        for p in cell:
            assert math.hypot(p.x, p.y) == pytest.approx(circumradius)
        assert polygon_area(cell) == pytest.approx(1.5 * math.sqrt(3) * circumradius ** 2)

    def test_ring_sites_have_no_cell(self, hex_sites):
        """Hull sites touch only two triangles."""
        triangulation = triangulate_sites(hex_sites)
        for i in range(1, 7):
            assert build_voronoi_cell(i, triangulation) is None

    def test_square_of_four_sites(self):
        """Both triangles of a square share one circumcenter."""
        triangulation = SiteTriangulation(
            points=[(0, 0), (10, 0), (10, 10), (0, 10)],
            simplices=[[0, 1, 2], [0, 2, 3]],
        )
        assert cell_circumcenters(0, triangulation) == [Point2D(5.0, 5.0)]
        for i in range(4):
            assert build_voronoi_cell(i, triangulation) is None

    def test_degenerate_triangle_skipped(self):
        triangulation = SiteTriangulation(
            points=[(0, 0), (1, 0), (2, 0), (0, 5)],
            simplices=[[0, 1, 2], [0, 2, 3], [0, 1, 3]],
        )
        assert len(cell_circumcenters(0, triangulation)) == 2
        assert build_voronoi_cell(0, triangulation) is None


def test_incident_cells_is_copy():
    triangulation = SiteTriangulation(points=[(0, 0), (10, 0), (0, 10)], simplices=[[0, 1, 2]])
    cells = incident_cells(0, triangulation)
    cells.append(99)
    assert triangulation.site_triangles[0] == [0]


def test_order_around_counter_clockwise():
    points = [Point2D(0, 1), Point2D(-1, 0), Point2D(1, 0), Point2D(0, -1)]
    ordered = order_around(points, Point2D(0, 0))
    assert ordered == [Point2D(0, -1), Point2D(1, 0), Point2D(0, 1), Point2D(-1, 0)]
    assert signed_area(ordered) > 0

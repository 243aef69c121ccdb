"""Tests for planar geometry primitives."""

import pytest
from py_sector.core.geometry import (
    GEOMETRIC_EPSILON, Point2D, as_polygon, circumcenter, ensure_counter_clockwise,
    line_intersection, point_in_triangle, polygon_centroid, signed_area
)


SQUARE = as_polygon([(0, 0), (4, 0), (4, 4), (0, 4)])


class TestLineIntersection:
    """Test parametric line intersection."""

    def test_perpendicular_lines(self):
        """Axis-aligned lines meet at the expected point."""
        hit = line_intersection(Point2D(0, 1), Point2D(1, 0), Point2D(3, -5), Point2D(0, 1))
        assert hit == pytest.approx((3.0, 1.0))

    def test_diagonal_lines(self):
        hit = line_intersection(Point2D(0, 0), Point2D(1, 1), Point2D(0, 4), Point2D(1, -1))
        assert hit == pytest.approx((2.0, 2.0))

    def test_parallel_lines(self):
        """Parallel lines have no intersection."""
        assert line_intersection(Point2D(0, 0), Point2D(1, 0), Point2D(0, 1), Point2D(2, 0)) is None

    def test_coincident_lines(self):
        assert line_intersection(Point2D(0, 0), Point2D(1, 1), Point2D(2, 2), Point2D(1, 1)) is None

    def test_nearly_parallel_below_tolerance(self):
        """Determinant magnitude below the shared epsilon counts as parallel."""
        tiny = GEOMETRIC_EPSILON / 10
        assert line_intersection(Point2D(0, 0), Point2D(1, 0), Point2D(0, 1), Point2D(1, tiny)) is None


class TestSignedArea:
    """Test shoelace area and winding."""

    def test_ccw_positive(self):
        assert signed_area(SQUARE) == pytest.approx(16.0)

    def test_cw_negative(self):
        assert signed_area(list(reversed(SQUARE))) == pytest.approx(-16.0)

    def test_too_few_vertices(self):
        assert signed_area(as_polygon([(0, 0), (1, 1)])) == 0.0

    def test_ensure_counter_clockwise(self):
        cw = list(reversed(SQUARE))
        ccw = ensure_counter_clockwise(cw)
        assert signed_area(ccw) > 0
        assert ensure_counter_clockwise(SQUARE) == SQUARE

    def test_centroid(self):
        assert polygon_centroid(SQUARE) == pytest.approx((2.0, 2.0))

    def test_centroid_degenerate_falls_back_to_average(self):
        line = as_polygon([(0, 0), (1, 0), (2, 0)])
        assert polygon_centroid(line) == pytest.approx((1.0, 0.0))


class TestPointInTriangle:
    """Test edge-inclusive point-in-triangle."""

    A, B, C = Point2D(0, 0), Point2D(4, 0), Point2D(0, 4)

    def test_inside(self):
        assert point_in_triangle(Point2D(1, 1), self.A, self.B, self.C)

    def test_outside(self):
        assert not point_in_triangle(Point2D(3, 3), self.A, self.B, self.C)

    def test_on_edge_counts_as_inside(self):
        assert point_in_triangle(Point2D(2, 2), self.A, self.B, self.C)
        assert point_in_triangle(Point2D(2, 0), self.A, self.B, self.C)

    def test_either_winding(self):
        assert point_in_triangle(Point2D(1, 1), self.A, self.C, self.B)
        assert not point_in_triangle(Point2D(-1, 1), self.A, self.C, self.B)


class TestCircumcenter:
    """Test circumcenter computation."""

    def test_right_triangle(self):
        """Circumcenter of a right triangle is the hypotenuse midpoint."""
        center = circumcenter(Point2D(0, 0), Point2D(4, 0), Point2D(0, 4))
        assert center == pytest.approx((2.0, 2.0))

    def test_equidistant(self):
        a, b, c = Point2D(1, 2), Point2D(5, -1), Point2D(3, 7)
        center = circumcenter(a, b, c)
        radii = [((p.x - center.x) ** 2 + (p.y - center.y) ** 2) ** 0.5 for p in (a, b, c)]
        assert radii[0] == pytest.approx(radii[1])
        assert radii[0] == pytest.approx(radii[2])

    def test_collinear_points(self):
        """Collinear points have no circumcenter."""
        assert circumcenter(Point2D(0, 0), Point2D(1, 0), Point2D(2, 0)) is None

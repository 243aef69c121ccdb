"""Tests for plot validation."""

import pytest
from py_sector.core.geometry import Point2D, as_polygon
from py_sector.core.validation import (
    PlotThresholds, PlotViolation, find_plot_violation, interior_angle, validate_plot
)


SQUARE = as_polygon([(0, 0), (10, 0), (10, 10), (0, 10)])
L_SHAPE = as_polygon([(0, 0), (20, 0), (20, 10), (10, 10), (10, 20), (0, 20)])
SLIVER = as_polygon([(0, 0), (100, 0), (0, 10)])
NOTCHED = as_polygon([(0, 0), (40, 0), (40, 40), (22, 40), (20, 5), (18, 40), (0, 40)])

DEFAULTS = PlotThresholds()


class TestInteriorAngle:
    """Test winding-aware interior angles."""

    def test_right_angle(self):
        assert interior_angle(Point2D(0, 10), Point2D(0, 0), Point2D(10, 0), False) == pytest.approx(90.0)

    def test_right_turn_is_reflex_in_counter_clockwise_polygon(self):
        assert interior_angle(Point2D(10, 0), Point2D(0, 0), Point2D(0, 10), False) == pytest.approx(270.0)

    def test_reflex_counter_clockwise(self):
        angle = interior_angle(L_SHAPE[2], L_SHAPE[3], L_SHAPE[4], False)
        assert angle == pytest.approx(270.0)

    def test_reflex_clockwise(self):
        cw = list(reversed(L_SHAPE))
        # Reflex corner (10, 10) sits at index 2 after reversal
        angle = interior_angle(cw[1], cw[2], cw[3], True)
        assert angle == pytest.approx(270.0)


class TestFindPlotViolation:
    """Test each rejection rule in isolation."""

    def test_square_accepted(self):
        assert find_plot_violation(SQUARE, DEFAULTS) is None

    def test_reflex_within_range_accepted(self):
        assert find_plot_violation(L_SHAPE, DEFAULTS) is None
        assert find_plot_violation(list(reversed(L_SHAPE)), DEFAULTS) is None

    def test_too_few_vertices(self):
        assert find_plot_violation(as_polygon([(0, 0), (10, 0)]), DEFAULTS) == PlotViolation.TOO_FEW_VERTICES
        assert find_plot_violation(None, DEFAULTS) == PlotViolation.TOO_FEW_VERTICES

    def test_short_edge(self):
        small = as_polygon([(0, 0), (4, 0), (4, 4), (0, 4)])
        assert find_plot_violation(small, DEFAULTS) == PlotViolation.EDGE_TOO_SHORT

    def test_sharp_angle(self):
        """The far corner of a long sliver is under 6 degrees."""
        assert find_plot_violation(SLIVER, DEFAULTS) == PlotViolation.ANGLE_OUT_OF_RANGE

    def test_near_full_turn_angle(self):
        """A narrow notch gives a reflex angle close to 360 degrees."""
        assert find_plot_violation(NOTCHED, DEFAULTS) == PlotViolation.ANGLE_OUT_OF_RANGE

    def test_small_area(self):
        square = as_polygon([(0, 0), (5, 0), (5, 5), (0, 5)])
        assert find_plot_violation(square, DEFAULTS) is None
        strict = PlotThresholds(min_area=30.0)
        assert find_plot_violation(square, strict) == PlotViolation.AREA_TOO_SMALL


class TestValidatePlot:
    """Test the boolean validation entry point."""

    def test_defaults(self):
        assert validate_plot(SQUARE, 5.0, 15.0, 25.0)
        assert not validate_plot(SLIVER, 5.0, 15.0, 25.0)

    def test_zero_thresholds_accept_sliver(self):
        assert validate_plot(SLIVER, 0.0, 0.0, 0.0)

    @pytest.mark.parametrize("polygon", [SQUARE, L_SHAPE, SLIVER, NOTCHED])
    @pytest.mark.parametrize("strict,loose", [
        ((5.0, 15.0, 25.0), (1.0, 5.0, 1.0)),
        ((10.0, 30.0, 100.0), (5.0, 15.0, 25.0)),
        ((5.0, 5.0, 1.0), (0.0, 0.0, 0.0)),
    ])
    def test_loosening_thresholds_never_rejects(self, polygon, strict, loose):
        """Anything valid under strict thresholds stays valid under looser ones."""
        if validate_plot(polygon, *strict):
            assert validate_plot(polygon, *loose)

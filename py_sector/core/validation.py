"""
Geometric validation of plot polygons.

A plot is rejected when any edge is too short, any interior angle is too
sharp (or, symmetrically, too close to a full turn), or its area is too
small. There is no partial repair: one violation rejects the polygon.
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence

from .geometry import Point2D, cross_product, distance, signed_area


class PlotViolation(str, Enum):
    """Reason a polygon failed validation."""
    TOO_FEW_VERTICES = "too_few_vertices"
    EDGE_TOO_SHORT = "edge_too_short"
    ANGLE_OUT_OF_RANGE = "angle_out_of_range"
    AREA_TOO_SMALL = "area_too_small"


@dataclass(frozen=True)
class PlotThresholds:
    """Minimum geometric quality required of a plot."""
    min_edge_length: float = 5.0
    min_angle_degrees: float = 15.0
    min_area: float = 25.0


def interior_angle(prev_pt: Point2D, curr_pt: Point2D, next_pt: Point2D,
                   clockwise: bool) -> float:
    """
    Interior angle at curr_pt in degrees, in [0, 360).

    The unsigned angle between the two edge directions is mirrored to
    360 - angle at reflex vertices, as decided by the polygon winding.
    """
    ux, uy = prev_pt.x - curr_pt.x, prev_pt.y - curr_pt.y
    vx, vy = next_pt.x - curr_pt.x, next_pt.y - curr_pt.y

    angle = math.degrees(abs(math.atan2(ux * vy - uy * vx, ux * vx + uy * vy)))

    turn = cross_product(prev_pt, curr_pt, next_pt)
    reflex = turn > 0.0 if clockwise else turn < 0.0
    return 360.0 - angle if reflex else angle


def find_plot_violation(polygon: Sequence[Point2D],
                        thresholds: PlotThresholds) -> Optional[PlotViolation]:
    """
    Check a polygon against plot thresholds.

    Args:
        polygon: Ordered plot vertices, either winding
        thresholds: Minimum edge length, angle and area

    Returns:
        The first violation found, or None if the polygon is acceptable
    """
    if polygon is None or len(polygon) < 3:
        return PlotViolation.TOO_FEW_VERTICES

    n = len(polygon)
    for i in range(n):
        if distance(polygon[i], polygon[(i + 1) % n]) < thresholds.min_edge_length:
            return PlotViolation.EDGE_TOO_SHORT

    area = signed_area(polygon)
    clockwise = area < 0.0
    min_angle = thresholds.min_angle_degrees
    for i in range(n):
        angle = interior_angle(polygon[i - 1], polygon[i], polygon[(i + 1) % n], clockwise)
        if angle < min_angle or angle > 360.0 - min_angle:
            return PlotViolation.ANGLE_OUT_OF_RANGE

    if abs(area) < thresholds.min_area:
        return PlotViolation.AREA_TOO_SMALL

    return None


def validate_plot(polygon: Sequence[Point2D], min_edge_length: float,
                  min_angle_degrees: float, min_area: float) -> bool:
    """Return True if the polygon satisfies all three thresholds."""
    thresholds = PlotThresholds(min_edge_length, min_angle_degrees, min_area)
    return find_plot_violation(polygon, thresholds) is None

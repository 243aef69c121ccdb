"""
Sutherland-Hodgman clipping of polygons against the sector rectangle.
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence

from .geometry import GEOMETRIC_EPSILON, Point2D, Polygon2D, cross_product, line_intersection


@dataclass(frozen=True)
class ClipRect:
    """Axis-aligned clip window."""
    x_min: float
    y_min: float
    x_max: float
    y_max: float

    def __post_init__(self):
        if self.x_max <= self.x_min or self.y_max <= self.y_min:
            raise ValueError(f"Degenerate clip rectangle: {self}")

    @classmethod
    def from_center_size(cls, width: float, height: float,
                         center: Point2D = Point2D(0.0, 0.0)) -> "ClipRect":
        return cls(center.x - width / 2.0, center.y - height / 2.0,
                   center.x + width / 2.0, center.y + height / 2.0)

    @property
    def width(self) -> float:
        return self.x_max - self.x_min

    @property
    def height(self) -> float:
        return self.y_max - self.y_min

    def contains(self, point: Point2D) -> bool:
        return (self.x_min - GEOMETRIC_EPSILON <= point.x <= self.x_max + GEOMETRIC_EPSILON
                and self.y_min - GEOMETRIC_EPSILON <= point.y <= self.y_max + GEOMETRIC_EPSILON)

    def corners(self) -> List[Point2D]:
        """Corners in counter-clockwise order starting bottom-left."""
        return [
            Point2D(self.x_min, self.y_min),
            Point2D(self.x_max, self.y_min),
            Point2D(self.x_max, self.y_max),
            Point2D(self.x_min, self.y_max),
        ]


def _is_inside(edge_start: Point2D, edge_end: Point2D, p: Point2D) -> bool:
    # Left of (or on) the directed clip edge.
    return cross_product(edge_start, edge_end, p) >= -GEOMETRIC_EPSILON


def _edge_crossing(edge_start: Point2D, edge_end: Point2D,
                   s: Point2D, e: Point2D) -> Point2D:
    crossing = line_intersection(edge_start, edge_end - edge_start, s, e - s)
    if crossing is None:
        return s
    return crossing


def clip_against_edge(polygon: Sequence[Point2D],
                      edge_start: Point2D, edge_end: Point2D) -> Polygon2D:
    """
    Clip a polygon against the half-plane left of edge_start -> edge_end.

    Returns:
        The clipped vertex list (possibly empty)
    """
    output: Polygon2D = []
    if not polygon:
        return output

    s = polygon[-1]
    for e in polygon:
        s_inside = _is_inside(edge_start, edge_end, s)
        e_inside = _is_inside(edge_start, edge_end, e)

        if s_inside and e_inside:
            output.append(e)
        elif s_inside:
            output.append(_edge_crossing(edge_start, edge_end, s, e))
        elif e_inside:
            output.append(_edge_crossing(edge_start, edge_end, s, e))
            output.append(e)

        s = e

    return output


def clip_polygon(polygon: Sequence[Point2D], rect: ClipRect) -> Optional[Polygon2D]:
    """
    Intersect a polygon with a rectangular window.

    The four window edges (bottom, right, top, left) are applied in turn.

    Args:
        polygon: Subject polygon, either winding
        rect: Clip window

    Returns:
        The clipped polygon, or None if the intersection is empty or has
        fewer than 3 vertices
    """
    if polygon is None or len(polygon) < 3:
        return None

    clipped: Polygon2D = list(polygon)
    corners = rect.corners()

    for i in range(4):
        clipped = clip_against_edge(clipped, corners[i], corners[(i + 1) % 4])
        if len(clipped) < 3:
            return None

    return clipped

"""
Planar geometry primitives shared by every plot generation stage.

All functions are pure and operate on Point2D values or plain lists of
them (polygons, implicitly closed). Winding follows the usual right-handed
convention: a positive signed area means counter-clockwise.
"""

import math
from typing import List, NamedTuple, Optional, Sequence

# Shared tolerance for "parallel", "on edge" and "same point" decisions.
# Offset, clipping and ear tests must agree on it.
GEOMETRIC_EPSILON = 1e-5

# Collinearity threshold for circumcenter determinants.
HIGH_PRECISION_EPSILON = 1e-9

GEOMETRIC_EPSILON_SQR = GEOMETRIC_EPSILON * GEOMETRIC_EPSILON


class Point2D(NamedTuple):
    """A point (or direction vector) on the ground plane."""
    x: float
    y: float

    def __add__(self, other):
        return Point2D(self.x + other[0], self.y + other[1])

    def __sub__(self, other):
        return Point2D(self.x - other[0], self.y - other[1])

    def scaled(self, factor: float) -> "Point2D":
        return Point2D(self.x * factor, self.y * factor)

    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def normalized(self) -> "Point2D":
        length = self.length()
        if length < GEOMETRIC_EPSILON:
            return Point2D(0.0, 0.0)
        return Point2D(self.x / length, self.y / length)


Polygon2D = List[Point2D]


def as_polygon(points: Sequence[Sequence[float]]) -> Polygon2D:
    """Convert any sequence of coordinate pairs (tuples, arrays) to a polygon."""
    return [Point2D(float(p[0]), float(p[1])) for p in points]


def cross_product(o: Point2D, a: Point2D, b: Point2D) -> float:
    """
    Z component of (a - o) x (b - o).

    Positive when b lies to the left of the directed line o -> a,
    negative when it lies to the right, zero when collinear.
    """
    return (a.x - o.x) * (b.y - o.y) - (a.y - o.y) * (b.x - o.x)


def distance(a: Point2D, b: Point2D) -> float:
    return math.hypot(b.x - a.x, b.y - a.y)


def line_intersection(p1: Point2D, dir1: Point2D,
                      p2: Point2D, dir2: Point2D) -> Optional[Point2D]:
    """
    Intersect two parametric lines p1 + t*dir1 and p2 + u*dir2.

    Args:
        p1: Point on the first line
        dir1: Direction of the first line
        p2: Point on the second line
        dir2: Direction of the second line

    Returns:
        The intersection point, or None when the lines are parallel or
        coincident (determinant below GEOMETRIC_EPSILON)
    """
    determinant = dir1.x * dir2.y - dir1.y * dir2.x
    if abs(determinant) < GEOMETRIC_EPSILON:
        return None

    dx = p2.x - p1.x
    dy = p2.y - p1.y
    u = (dx * dir1.y - dy * dir1.x) / determinant

    return Point2D(p2.x + u * dir2.x, p2.y + u * dir2.y)


def signed_area(polygon: Sequence[Point2D]) -> float:
    """
    Compute signed area using the shoelace formula.

    Args:
        polygon: Ordered polygon vertices

    Returns:
        Signed area (positive = CCW, negative = CW, 0.0 for < 3 vertices)
    """
    n = len(polygon)
    if n < 3:
        return 0.0

    area = 0.0
    for i in range(n):
        j = (i + 1) % n
        area += polygon[i].x * polygon[j].y - polygon[j].x * polygon[i].y

    return area / 2.0


def polygon_area(polygon: Sequence[Point2D]) -> float:
    return abs(signed_area(polygon))


def is_clockwise(polygon: Sequence[Point2D]) -> bool:
    return signed_area(polygon) < 0.0


def ensure_counter_clockwise(polygon: Sequence[Point2D]) -> Polygon2D:
    """Return a CCW copy of the polygon, reversing it if needed."""
    if is_clockwise(polygon):
        return list(reversed(polygon))
    return list(polygon)


def polygon_centroid(polygon: Sequence[Point2D]) -> Point2D:
    """
    Area centroid of a polygon.

    Falls back to the vertex average for degenerate (zero area) input.
    """
    n = len(polygon)
    if n == 0:
        return Point2D(0.0, 0.0)

    area = 0.0
    cx = 0.0
    cy = 0.0
    for i in range(n):
        j = (i + 1) % n
        a = polygon[i].x * polygon[j].y - polygon[j].x * polygon[i].y
        area += a
        cx += (polygon[i].x + polygon[j].x) * a
        cy += (polygon[i].y + polygon[j].y) * a

    if abs(area) < 1e-10:
        return Point2D(sum(p.x for p in polygon) / n,
                       sum(p.y for p in polygon) / n)

    area *= 0.5
    return Point2D(cx / (6.0 * area), cy / (6.0 * area))


def point_in_triangle(pt: Point2D, a: Point2D, b: Point2D, c: Point2D) -> bool:
    """
    Test whether pt lies inside triangle abc, for either winding.

    A point on an edge (within GEOMETRIC_EPSILON) counts as inside, so ear
    candidates touching another vertex are rejected.
    """
    d1 = cross_product(pt, a, b)
    d2 = cross_product(pt, b, c)
    d3 = cross_product(pt, c, a)

    has_neg = d1 < -GEOMETRIC_EPSILON or d2 < -GEOMETRIC_EPSILON or d3 < -GEOMETRIC_EPSILON
    has_pos = d1 > GEOMETRIC_EPSILON or d2 > GEOMETRIC_EPSILON or d3 > GEOMETRIC_EPSILON

    return not (has_neg and has_pos)


def circumcenter(a: Point2D, b: Point2D, c: Point2D) -> Optional[Point2D]:
    """
    Circumcenter of triangle abc.

    Args:
        a, b, c: Triangle vertices

    Returns:
        Center of the circle through all three points, or None if the
        points are collinear
    """
    d = 2.0 * (a.x * (b.y - c.y) + b.x * (c.y - a.y) + c.x * (a.y - b.y))
    if abs(d) < HIGH_PRECISION_EPSILON:
        return None

    a_sq = a.x * a.x + a.y * a.y
    b_sq = b.x * b.x + b.y * b.y
    c_sq = c.x * c.x + c.y * c.y

    ux = (a_sq * (b.y - c.y) + b_sq * (c.y - a.y) + c_sq * (a.y - b.y)) / d
    uy = (a_sq * (c.x - b.x) + b_sq * (a.x - c.x) + c_sq * (b.x - a.x)) / d

    return Point2D(ux, uy)

"""
Polygon offsetting along edge normals.

Sign convention: a positive distance shrinks the polygon (edges move
inward), a negative distance grows it. The inward side of each edge is
derived from the polygon's winding, so either winding is accepted and the
result keeps the input winding and vertex count.

This is a basic offsetter: when the offset exceeds the local feature size
the polygon collapses or self-intersects, and the operation fails instead
of attempting a repair.
"""

from typing import List, Optional, Sequence

import structlog
from shapely.geometry import LinearRing

from .geometry import (
    GEOMETRIC_EPSILON,
    Point2D,
    Polygon2D,
    line_intersection,
    signed_area,
)

logger = structlog.get_logger()


def _inward_normal(direction: Point2D, clockwise: bool) -> Point2D:
    if clockwise:
        return Point2D(direction.y, -direction.x)
    return Point2D(-direction.y, direction.x)


def _is_simple_ring(polygon: Sequence[Point2D]) -> bool:
    return LinearRing([(p.x, p.y) for p in polygon]).is_simple


def offset_polygon(polygon: Sequence[Point2D], distance: float) -> Optional[Polygon2D]:
    """
    Translate every edge by distance along its inward normal.

    Each output vertex is the intersection of the two translated edge lines
    that meet at the corresponding input vertex.

    Args:
        polygon: Simple polygon, either winding
        distance: Offset distance; positive shrinks, negative grows

    Returns:
        Offset polygon with the same winding and vertex count, or None if
        the offset is undefined or collapses the polygon
    """
    if polygon is None or len(polygon) < 3:
        return None

    if abs(distance) < GEOMETRIC_EPSILON:
        return list(polygon)

    area = signed_area(polygon)
    if abs(area) < GEOMETRIC_EPSILON:
        logger.debug("Offset rejected: degenerate input area", area=area)
        return None

    clockwise = area < 0.0
    n = len(polygon)

    directions: List[Point2D] = []
    line_points: List[Point2D] = []
    for i in range(n):
        edge = polygon[(i + 1) % n] - polygon[i]
        if edge.length() < GEOMETRIC_EPSILON:
            logger.debug("Offset rejected: zero length edge", edge=i)
            return None
        direction = edge.normalized()
        directions.append(direction)
        line_points.append(polygon[i] + _inward_normal(direction, clockwise).scaled(distance))

    result: Polygon2D = []
    for i in range(n):
        prev = (i - 1) % n
        vertex = line_intersection(line_points[prev], directions[prev],
                                   line_points[i], directions[i])
        if vertex is None:
            logger.debug("Offset rejected: adjacent edges parallel", vertex=i)
            return None
        result.append(vertex)

    new_area = signed_area(result)
    if abs(new_area) < GEOMETRIC_EPSILON or (new_area < 0.0) != clockwise:
        logger.debug("Offset rejected: polygon inverted", area=area, new_area=new_area)
        return None

    if (distance > 0.0) != (abs(new_area) < abs(area)):
        logger.debug("Offset rejected: area moved the wrong way",
                     area=area, new_area=new_area, distance=distance)
        return None

    for i in range(n):
        new_edge = result[(i + 1) % n] - result[i]
        if new_edge.x * directions[i].x + new_edge.y * directions[i].y <= 0.0:
            logger.debug("Offset rejected: edge reversed", edge=i)
            return None

    if not _is_simple_ring(result):
        logger.debug("Offset rejected: self-intersecting result")
        return None

    return result

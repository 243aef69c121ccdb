"""Grid snapping of plot vertices."""

from typing import List, Sequence

import numpy as np

from .geometry import GEOMETRIC_EPSILON, GEOMETRIC_EPSILON_SQR, Point2D, Polygon2D, as_polygon


def snap_point(point: Point2D, snap_size: float) -> Point2D:
    if snap_size <= GEOMETRIC_EPSILON:
        return point
    return Point2D(round(point.x / snap_size) * snap_size,
                   round(point.y / snap_size) * snap_size)


def remove_consecutive_duplicates(polygon: Sequence[Point2D]) -> Polygon2D:
    """
    Drop vertices that coincide with their predecessor.

    The closing pair (last, first) is checked as well.
    """
    if len(polygon) < 2:
        return list(polygon)

    unique: List[Point2D] = [polygon[0]]
    for p in polygon[1:]:
        last = unique[-1]
        if (p.x - last.x) ** 2 + (p.y - last.y) ** 2 > GEOMETRIC_EPSILON_SQR:
            unique.append(p)

    if len(unique) > 2:
        first, last = unique[0], unique[-1]
        if (first.x - last.x) ** 2 + (first.y - last.y) ** 2 < GEOMETRIC_EPSILON_SQR:
            unique.pop()

    return unique


def snap_polygon(polygon: Sequence[Point2D], snap_size: float,
                 remove_duplicates: bool = True) -> Polygon2D:
    """
    Quantize polygon vertices to a square grid.

    Args:
        polygon: Polygon vertices
        snap_size: Grid cell size; values <= GEOMETRIC_EPSILON disable snapping
        remove_duplicates: Collapse vertices that snapped onto the same spot

    Returns:
        New vertex list; may have fewer than 3 vertices if snapping
        collapsed the polygon
    """
    if not polygon or snap_size <= GEOMETRIC_EPSILON:
        return list(polygon)

    coords = np.array([(p.x, p.y) for p in polygon], dtype=np.float64)
    snapped = as_polygon(np.round(coords / snap_size) * snap_size)

    if remove_duplicates:
        return remove_consecutive_duplicates(snapped)
    return snapped

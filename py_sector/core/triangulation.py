"""
Ear clipping triangulation for simple polygons.

Accepts polygons of either winding and always emits counter-clockwise
triangles, so mesh consumers never need to branch on the input order.
"""

from typing import List, Sequence, Tuple

import structlog

from .geometry import (
    GEOMETRIC_EPSILON,
    Point2D,
    cross_product,
    point_in_triangle,
    signed_area,
)

logger = structlog.get_logger()

TriangleIndexSet = List[Tuple[int, int, int]]

# Candidate inspections allowed per polygon, as a multiple of n**2.
ITERATION_BOUND_FACTOR = 2


class TriangulationError(Exception):
    """Raised when triangulation fails."""
    pass


class InvalidPolygonError(TriangulationError):
    """The input cannot be a polygon (fewer than 3 vertices)."""
    pass


class EarNotFoundError(TriangulationError):
    """A full scan of the remaining vertices found no ear."""
    pass


class TriangulationImpossibleError(TriangulationError):
    """The iteration bound was exceeded; the polygon is malformed."""
    pass


def _is_convex(prev_pt: Point2D, curr_pt: Point2D, next_pt: Point2D,
               clockwise: bool) -> bool:
    cross = cross_product(prev_pt, curr_pt, next_pt)
    if clockwise:
        return cross < -GEOMETRIC_EPSILON
    return cross > GEOMETRIC_EPSILON


def _is_ear(vertices: Sequence[Point2D], indices: List[int],
            prev_i: int, curr_i: int, next_i: int, clockwise: bool) -> bool:
    a = vertices[indices[prev_i]]
    b = vertices[indices[curr_i]]
    c = vertices[indices[next_i]]

    if not _is_convex(a, b, c, clockwise):
        return False

    for i, idx in enumerate(indices):
        if i in (prev_i, curr_i, next_i):
            continue
        if point_in_triangle(vertices[idx], a, b, c):
            return False

    return True


def _ccw_triangle(a: int, b: int, c: int, clockwise: bool) -> Tuple[int, int, int]:
    return (a, c, b) if clockwise else (a, b, c)


def triangulate_polygon(vertices: Sequence[Point2D]) -> TriangleIndexSet:
    """
    Triangulate a simple polygon using ear clipping.

    Args:
        vertices: Polygon vertices in either winding order

    Returns:
        List of (i, j, k) index triples into vertices, each triangle
        counter-clockwise; exactly len(vertices) - 2 of them

    Raises:
        InvalidPolygonError: Fewer than 3 vertices
        EarNotFoundError: A full scan found no ear
        TriangulationImpossibleError: Iteration bound exceeded
    """
    n = len(vertices)
    if n < 3:
        raise InvalidPolygonError(f"Polygon must have at least 3 vertices, got {n}")

    clockwise = signed_area(vertices) < 0.0
    indices = list(range(n))
    triangles: TriangleIndexSet = []

    max_iterations = ITERATION_BOUND_FACTOR * n * n
    iterations = 0
    cursor = 0

    while len(indices) > 3:
        remaining = len(indices)
        if cursor >= remaining:
            raise EarNotFoundError(
                f"Failed to find ear in polygon with {remaining} remaining vertices"
            )

        iterations += 1
        if iterations > max_iterations:
            raise TriangulationImpossibleError(
                f"Exceeded {max_iterations} iterations with {remaining} vertices remaining"
            )

        prev_i = (cursor - 1) % remaining
        next_i = (cursor + 1) % remaining

        if _is_ear(vertices, indices, prev_i, cursor, next_i, clockwise):
            triangles.append(_ccw_triangle(
                indices[prev_i], indices[cursor], indices[next_i], clockwise
            ))
            indices.pop(cursor)
            cursor = 0
        else:
            cursor += 1

    triangles.append(_ccw_triangle(indices[0], indices[1], indices[2], clockwise))

    logger.debug("Polygon triangulated", vertices=n, triangles=len(triangles),
                 iterations=iterations)
    return triangles


def triangle_area_sum(vertices: Sequence[Point2D], triangles: TriangleIndexSet) -> float:
    """Sum of the signed areas of the given triangles."""
    return sum(
        signed_area([vertices[i], vertices[j], vertices[k]])
        for i, j, k in triangles
    )

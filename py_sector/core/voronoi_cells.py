"""
Voronoi cell reconstruction from the Delaunay dual.

The Voronoi cell of a site is approximated by the circumcenters of the
Delaunay triangles incident to it, ordered by polar angle around the site.
Sites with fewer than 3 distinct circumcenters (typically on the convex
hull of the seeds) have no bounded cell and are skipped.
"""

import math
from typing import List, Optional, Sequence

import structlog

from .delaunay import SiteTriangulation
from .geometry import GEOMETRIC_EPSILON_SQR, Point2D, Polygon2D, circumcenter

logger = structlog.get_logger()


def incident_cells(site_index: int, triangulation: SiteTriangulation) -> List[int]:
    """Indices of triangles that have site_index as a corner."""
    return list(triangulation.site_triangles[site_index])


def order_around(points: Sequence[Point2D], center: Point2D) -> Polygon2D:
    """Sort points counter-clockwise by polar angle around center."""
    return sorted(points, key=lambda p: math.atan2(p.y - center.y, p.x - center.x))


def _append_unique(centers: List[Point2D], candidate: Point2D) -> None:
    for c in centers:
        if (c.x - candidate.x) ** 2 + (c.y - candidate.y) ** 2 < GEOMETRIC_EPSILON_SQR:
            return
    centers.append(candidate)


def cell_circumcenters(site_index: int, triangulation: SiteTriangulation) -> List[Point2D]:
    """
    Distinct circumcenters of the triangles around a site.

    Degenerate (collinear) triangles contribute nothing; cocircular
    neighbours that share a circumcenter contribute it once.
    """
    centers: List[Point2D] = []
    for t in incident_cells(site_index, triangulation):
        a, b, c = triangulation.triangle(t)
        center = circumcenter(a, b, c)
        if center is None:
            logger.debug("Skipping degenerate triangle", site=site_index, triangle=t)
            continue
        _append_unique(centers, center)
    return centers


def build_voronoi_cell(site_index: int,
                       triangulation: SiteTriangulation) -> Optional[Polygon2D]:
    """
    Reconstruct the Voronoi cell of a site.

    Args:
        site_index: Index of the site in the triangulation
        triangulation: Delaunay topology of all sites

    Returns:
        Counter-clockwise polygon of circumcenters, or None when fewer than
        3 distinct circumcenters exist
    """
    centers = cell_circumcenters(site_index, triangulation)
    if len(centers) < 3:
        logger.debug("Voronoi cell undefined", site=site_index, circumcenters=len(centers))
        return None

    return order_around(centers, triangulation.site(site_index))

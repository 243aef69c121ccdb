"""
Delaunay triangulation provider.

The plot kernel only needs vertex incidence: which sites are corners of
which triangles. SiteTriangulation holds exactly that, and
triangulate_sites() fills it from scipy.spatial.Delaunay. Any other
Delaunay implementation can be plugged in by building a SiteTriangulation
from its points and triangle index triples.
"""

from dataclasses import dataclass, field
from typing import List, Sequence

import numpy as np
import structlog
from scipy.spatial import Delaunay, QhullError

from .geometry import Point2D

logger = structlog.get_logger()


class TriangulationProviderError(Exception):
    """Raised when the point set cannot be triangulated."""
    pass


@dataclass
class SiteTriangulation:
    """Read-only Delaunay topology over a set of unique sites."""
    points: np.ndarray      # (n, 2) site coordinates
    simplices: np.ndarray   # (m, 3) site indices per triangle
    site_triangles: List[List[int]] = field(init=False, repr=False)

    def __post_init__(self):
        self.points = np.asarray(self.points, dtype=np.float64).reshape(-1, 2)
        self.simplices = np.asarray(self.simplices, dtype=np.int64).reshape(-1, 3)

        # Incidence lists, built once: site -> triangles touching it
        self.site_triangles = [[] for _ in range(len(self.points))]
        for t, simplex in enumerate(self.simplices):
            for site in simplex:
                self.site_triangles[site].append(t)

    @property
    def n_sites(self) -> int:
        return len(self.points)

    @property
    def n_triangles(self) -> int:
        return len(self.simplices)

    def site(self, index: int) -> Point2D:
        x, y = self.points[index]
        return Point2D(float(x), float(y))

    def triangle(self, index: int) -> List[Point2D]:
        return [self.site(int(v)) for v in self.simplices[index]]


def triangulate_sites(points: Sequence[Point2D]) -> SiteTriangulation:
    """
    Delaunay-triangulate a set of unique sites.

    Args:
        points: Unique site positions

    Returns:
        SiteTriangulation whose simplices index into points

    Raises:
        TriangulationProviderError: Fewer than 3 points, or a degenerate
            (e.g. fully collinear) point set
    """
    if len(points) < 3:
        raise TriangulationProviderError(
            f"Need at least 3 unique sites for a Delaunay triangulation, got {len(points)}"
        )

    coords = np.array([(p[0], p[1]) for p in points], dtype=np.float64)

    try:
        delaunay = Delaunay(coords)
    except (QhullError, ValueError) as e:
        raise TriangulationProviderError(f"Delaunay triangulation failed: {e}") from e

    logger.info("Delaunay triangulation built",
                sites=len(coords), triangles=len(delaunay.simplices))

    return SiteTriangulation(points=coords, simplices=delaunay.simplices)

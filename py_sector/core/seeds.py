"""
Seed (site) sampling for sector generation.

Seeds are drawn uniformly inside the sector rectangle shrunk by a padding
margin and de-duplicated, since duplicate sites break the Delaunay/Voronoi
duality. An optional Lloyd relaxation spreads them more evenly.
"""

from typing import List, Optional

import numpy as np
import structlog
from scipy.spatial import Voronoi

from .clipping import ClipRect, clip_polygon
from .geometry import Point2D, as_polygon, polygon_centroid

logger = structlog.get_logger()


def seed_bounds(width: float, height: float, padding: float) -> ClipRect:
    """
    Region seeds are sampled from: the origin-centered sector minus padding.

    Falls back to the full sector when the padding leaves no room.
    """
    half_w = width / 2.0
    half_h = height / 2.0

    min_x, max_x = -half_w + padding, half_w - padding
    min_y, max_y = -half_h + padding, half_h - padding

    if min_x >= max_x or min_y >= max_y:
        logger.warning("Seed padding too large for sector, using full sector",
                       width=width, height=height, padding=padding)
        min_x, max_x = -half_w, half_w
        min_y, max_y = -half_h, half_h

    return ClipRect(min_x, min_y, max_x, max_y)


def unique_points(points: List[Point2D]) -> List[Point2D]:
    """Remove exact duplicates, keeping first occurrences in order."""
    return list(dict.fromkeys(points))


def generate_seed_points(count: int, width: float, height: float, padding: float,
                         rng: np.random.Generator) -> List[Point2D]:
    """
    Draw unique seed points uniformly from the padded sector.

    Args:
        count: Number of points to draw (duplicates are dropped afterwards)
        width: Sector width
        height: Sector height
        padding: Margin kept free along each sector edge
        rng: Seeded random source

    Returns:
        Unique seed points
    """
    if count <= 0:
        return []

    bounds = seed_bounds(width, height, padding)
    xs = rng.uniform(bounds.x_min, bounds.x_max, count)
    ys = rng.uniform(bounds.y_min, bounds.y_max, count)

    points = unique_points(as_polygon(np.column_stack([xs, ys])))
    if len(points) < count:
        logger.debug("Dropped duplicate seeds", requested=count, unique=len(points))
    return points


def get_frame_points(bounds: ClipRect, spacing: float) -> np.ndarray:
    """
    Points on a frame one spacing outside the bounds.

    Added during relaxation so every seed gets a bounded Voronoi region.
    """
    x_min, y_min = bounds.x_min - spacing, bounds.y_min - spacing
    x_max, y_max = bounds.x_max + spacing, bounds.y_max + spacing

    number_x = max(int(np.ceil((x_max - x_min) / spacing)), 1)
    number_y = max(int(np.ceil((y_max - y_min) / spacing)), 1)

    points = []
    for x in np.linspace(x_min, x_max, number_x + 1):
        points.append([x, y_min])
        points.append([x, y_max])
    for y in np.linspace(y_min, y_max, number_y + 1)[1:-1]:
        points.append([x_min, y])
        points.append([x_max, y])

    return np.array(points)


def relax_seed_points(points: List[Point2D], bounds: ClipRect,
                      n_iterations: int = 1, spacing: Optional[float] = None) -> List[Point2D]:
    """
    Apply Lloyd's relaxation, moving each seed to the centroid of its
    Voronoi region clipped to the bounds.

    Args:
        points: Seed points
        bounds: Region the seeds must stay in
        n_iterations: Number of relaxation iterations
        spacing: Frame point spacing; defaults to the mean seed spacing

    Returns:
        Relaxed seed points (new list)
    """
    if n_iterations <= 0 or len(points) < 3:
        return list(points)

    logger.info("Starting Lloyd's relaxation", iterations=n_iterations, seeds=len(points))

    coords = np.array([(p.x, p.y) for p in points], dtype=np.float64)
    n_points = len(coords)
    if spacing is None:
        spacing = float(np.sqrt(bounds.width * bounds.height / n_points))
    frame = get_frame_points(bounds, spacing)

    for iteration in range(n_iterations):
        vor = Voronoi(np.vstack([coords, frame]))

        for i in range(n_points):
            region_idx = vor.point_region[i]
            region = vor.regions[region_idx]
            if -1 in region or len(region) < 3:
                continue

            cell = clip_polygon(as_polygon(vor.vertices[region]), bounds)
            if cell is None:
                continue

            centroid = polygon_centroid(cell)
            coords[i][0] = np.clip(centroid.x, bounds.x_min, bounds.x_max)
            coords[i][1] = np.clip(centroid.y, bounds.y_min, bounds.y_max)

        logger.debug(f"Relaxation iteration {iteration + 1} complete")

    return unique_points(as_polygon(coords))

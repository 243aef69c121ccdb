"""
Sector generation pipeline.

Drives seeds -> Delaunay (external) -> Voronoi cell -> clip -> snap ->
pavement offset -> validate -> building inset -> validate for every site.
Each site either yields an Accepted result carrying its pavement plot and
building footprint, or a Rejected result naming the stage that failed.
Sites are independent: a failure never affects other sites and never
aborts the sector.
"""

from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Union

import numpy as np
import structlog

from .clipping import ClipRect, clip_polygon
from .delaunay import SiteTriangulation, TriangulationProviderError, triangulate_sites
from .geometry import (
    GEOMETRIC_EPSILON,
    Point2D,
    Polygon2D,
    ensure_counter_clockwise,
)
from .offset import offset_polygon
from .seeds import generate_seed_points, relax_seed_points, seed_bounds
from .snapping import snap_polygon
from .validation import PlotThresholds, find_plot_violation
from .voronoi_cells import build_voronoi_cell
from ..utils.random import Seed, create_rng

logger = structlog.get_logger()


class SiteStage(str, Enum):
    """Pipeline stages a site passes through, in order."""
    SEEDED = "seeded"
    TRIANGULATED = "triangulated"
    CELL_BUILT = "cell_built"
    CLIPPED = "clipped"
    SNAPPED = "snapped"
    PAVEMENT_OFFSET = "pavement_offset"
    PAVEMENT_VALIDATED = "pavement_validated"
    FOOTPRINT_OFFSET = "footprint_offset"
    FOOTPRINT_VALIDATED = "footprint_validated"
    ACCEPTED = "accepted"


class PlotRole(str, Enum):
    PAVEMENT = "pavement"
    BUILDING = "building"


@dataclass(frozen=True)
class Plot:
    """A validated polygon handed to the mesh/placement consumer."""
    polygon: Polygon2D
    role: PlotRole
    site_index: int


@dataclass(frozen=True)
class Accepted:
    site_index: int
    pavement: Plot
    footprint: Plot


@dataclass(frozen=True)
class Rejected:
    site_index: int
    stage: SiteStage  # stage that could not be completed
    reason: str


SiteResult = Union[Accepted, Rejected]


@dataclass
class SectorConfig:
    """Numeric parameters of a sector generation run."""

    # Seeds
    seed_count: int = 50
    sector_width: float = 500.0
    sector_height: float = 500.0
    padding: float = 50.0
    relaxation_iterations: int = 0

    # Plots
    street_width: float = 8.0
    snap_size: float = 0.0
    building_inset: float = 0.5

    # Validation
    min_edge_length: float = 5.0
    min_angle_degrees: float = 15.0
    min_area: float = 25.0

    def __post_init__(self):
        if self.seed_count < 0:
            raise ValueError(f"seed_count must be >= 0, got {self.seed_count}")
        if self.sector_width <= 0 or self.sector_height <= 0:
            raise ValueError("Sector dimensions must be positive")
        for name in ("padding", "street_width", "snap_size", "building_inset",
                     "min_edge_length", "min_angle_degrees", "min_area",
                     "relaxation_iterations"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be >= 0, got {getattr(self, name)}")
        if self.min_angle_degrees > 180.0:
            raise ValueError("min_angle_degrees must be <= 180")

    @property
    def bounds(self) -> ClipRect:
        return ClipRect.from_center_size(self.sector_width, self.sector_height)

    @property
    def thresholds(self) -> PlotThresholds:
        return PlotThresholds(self.min_edge_length, self.min_angle_degrees, self.min_area)


@dataclass
class SectorResult:
    """Everything produced by one sector generation run."""
    config: SectorConfig
    seeds: List[Point2D]
    triangulation: Optional[SiteTriangulation] = None
    raw_cells: Dict[int, Polygon2D] = field(default_factory=dict)
    results: List[SiteResult] = field(default_factory=list)

    @property
    def accepted(self) -> List[Accepted]:
        return [r for r in self.results if isinstance(r, Accepted)]

    @property
    def rejected(self) -> List[Rejected]:
        return [r for r in self.results if isinstance(r, Rejected)]

    @property
    def pavement_plots(self) -> List[Plot]:
        return [r.pavement for r in self.accepted]

    @property
    def footprints(self) -> List[Plot]:
        return [r.footprint for r in self.accepted]

    def rejection_counts(self) -> Dict[str, int]:
        """Number of rejected sites per failing stage."""
        return dict(Counter(r.stage.value for r in self.rejected))


def process_site(site_index: int, triangulation: SiteTriangulation,
                 config: SectorConfig,
                 raw_cells: Optional[Dict[int, Polygon2D]] = None) -> SiteResult:
    """
    Run one site through the plot pipeline.

    Args:
        site_index: Site to process
        triangulation: Shared, read-only Delaunay topology
        config: Sector parameters
        raw_cells: Optional dict collecting the unclipped Voronoi cell

    Returns:
        Accepted with both plots, or Rejected at the first failing stage
    """
    cell = build_voronoi_cell(site_index, triangulation)
    if cell is None:
        return Rejected(site_index, SiteStage.CELL_BUILT, "fewer than 3 distinct circumcenters")
    if raw_cells is not None:
        raw_cells[site_index] = cell

    clipped = clip_polygon(cell, config.bounds)
    if clipped is None:
        return Rejected(site_index, SiteStage.CLIPPED, "cell outside sector bounds")

    # Snap the clipped cell only; offset results are never snapped.
    snapped = clipped
    if config.snap_size > GEOMETRIC_EPSILON:
        snapped = snap_polygon(clipped, config.snap_size)
        if len(snapped) < 3:
            return Rejected(site_index, SiteStage.SNAPPED, "snapping collapsed the cell")

    pavement = offset_polygon(snapped, config.street_width / 2.0)
    if pavement is None:
        return Rejected(site_index, SiteStage.PAVEMENT_OFFSET, "street offset collapsed the cell")

    violation = find_plot_violation(pavement, config.thresholds)
    if violation is not None:
        return Rejected(site_index, SiteStage.PAVEMENT_VALIDATED, violation.value)

    if config.building_inset > GEOMETRIC_EPSILON:
        footprint = offset_polygon(pavement, config.building_inset)
        if footprint is None:
            return Rejected(site_index, SiteStage.FOOTPRINT_OFFSET, "building inset collapsed the plot")
    else:
        footprint = list(pavement)

    violation = find_plot_violation(footprint, config.thresholds)
    if violation is not None:
        return Rejected(site_index, SiteStage.FOOTPRINT_VALIDATED, violation.value)

    return Accepted(
        site_index=site_index,
        pavement=Plot(ensure_counter_clockwise(pavement), PlotRole.PAVEMENT, site_index),
        footprint=Plot(ensure_counter_clockwise(footprint), PlotRole.BUILDING, site_index),
    )


def process_sites(seeds: List[Point2D], config: SectorConfig) -> SectorResult:
    """
    Triangulate given seeds and process every site.

    Seeds are assumed unique; fewer than 3 (or a degenerate set) produce
    a result with no triangulation and no site results.
    """
    result = SectorResult(config=config, seeds=list(seeds))

    try:
        result.triangulation = triangulate_sites(seeds)
    except TriangulationProviderError as e:
        logger.warning("Sector has no triangulation", seeds=len(seeds), error=str(e))
        return result

    for site_index in range(result.triangulation.n_sites):
        site_result = process_site(site_index, result.triangulation, config, result.raw_cells)
        if isinstance(site_result, Rejected):
            logger.debug("Site rejected", site=site_index,
                         stage=site_result.stage.value, reason=site_result.reason)
        result.results.append(site_result)

    return result


def generate_sector(config: SectorConfig, seed: Optional[Seed] = None,
                    rng: Optional[np.random.Generator] = None) -> SectorResult:
    """
    Generate all plots of a sector.

    Args:
        config: Sector parameters
        seed: Seed for a fresh random source (ignored when rng is given)
        rng: Random source to draw seed points from

    Returns:
        SectorResult with one SiteResult per unique seed
    """
    if rng is None:
        rng = create_rng(seed)

    logger.info("Generating sector", seed_count=config.seed_count,
                width=config.sector_width, height=config.sector_height, seed=seed)

    seeds = generate_seed_points(config.seed_count, config.sector_width,
                                 config.sector_height, config.padding, rng)
    if config.relaxation_iterations > 0:
        bounds = seed_bounds(config.sector_width, config.sector_height, config.padding)
        seeds = relax_seed_points(seeds, bounds, config.relaxation_iterations)

    result = process_sites(seeds, config)

    logger.info("Sector generated", seeds=len(result.seeds),
                raw_cells=len(result.raw_cells), accepted=len(result.accepted),
                rejected=result.rejection_counts())
    return result

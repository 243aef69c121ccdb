"""
Core plot generation functionality.
"""

from .geometry import Point2D, GEOMETRIC_EPSILON, HIGH_PRECISION_EPSILON
from .triangulation import (
    triangulate_polygon, TriangulationError, InvalidPolygonError,
    EarNotFoundError, TriangulationImpossibleError
)
from .clipping import ClipRect, clip_polygon
from .offset import offset_polygon
from .validation import PlotThresholds, PlotViolation, validate_plot, find_plot_violation
from .delaunay import SiteTriangulation, TriangulationProviderError, triangulate_sites
from .voronoi_cells import build_voronoi_cell
from .sector import (
    SectorConfig, SectorResult, SiteStage, PlotRole, Plot, Accepted, Rejected,
    generate_sector, process_site, process_sites
)
from .mesh import PlotMesh, build_plot_mesh

__all__ = ['Point2D', 'GEOMETRIC_EPSILON', 'HIGH_PRECISION_EPSILON',
           'triangulate_polygon', 'TriangulationError', 'InvalidPolygonError',
           'EarNotFoundError', 'TriangulationImpossibleError',
           'ClipRect', 'clip_polygon', 'offset_polygon',
           'PlotThresholds', 'PlotViolation', 'validate_plot', 'find_plot_violation',
           'SiteTriangulation', 'TriangulationProviderError', 'triangulate_sites',
           'build_voronoi_cell',
           'SectorConfig', 'SectorResult', 'SiteStage', 'PlotRole', 'Plot',
           'Accepted', 'Rejected', 'generate_sector', 'process_site', 'process_sites',
           'PlotMesh', 'build_plot_mesh']

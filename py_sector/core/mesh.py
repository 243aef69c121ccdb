"""Flat 2D meshes for accepted plots."""

from dataclasses import dataclass
from typing import List

import numpy as np

from .sector import Plot
from .triangulation import triangulate_polygon


@dataclass
class PlotMesh:
    """Vertex buffer plus CCW triangle indices for one plot."""
    vertices: np.ndarray   # (n, 2) plot vertices, in plot order
    triangles: np.ndarray  # (n - 2, 3) indices into vertices

    @property
    def area(self) -> float:
        a = self.vertices[self.triangles[:, 0]]
        b = self.vertices[self.triangles[:, 1]]
        c = self.vertices[self.triangles[:, 2]]
        cross = (b[:, 0] - a[:, 0]) * (c[:, 1] - a[:, 1]) - (b[:, 1] - a[:, 1]) * (c[:, 0] - a[:, 0])
        return float(np.sum(cross) / 2.0)


def build_plot_mesh(plot: Plot) -> PlotMesh:
    """
    Triangulate a plot polygon.

    Raises:
        TriangulationError: If the plot polygon cannot be ear-clipped
    """
    triangles = triangulate_polygon(plot.polygon)
    return PlotMesh(
        vertices=np.array([(p.x, p.y) for p in plot.polygon], dtype=np.float64),
        triangles=np.array(triangles, dtype=np.int64).reshape(-1, 3),
    )


def build_plot_meshes(plots: List[Plot]) -> List[PlotMesh]:
    return [build_plot_mesh(plot) for plot in plots]

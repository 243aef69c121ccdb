"""
Voronoi-based sector partitioning into validated building plots.
"""

__version__ = "0.1.0"

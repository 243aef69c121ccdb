"""Shared fixtures for plot generation tests."""

import math

import pytest
from py_sector.core.geometry import Point2D


def hexagon_sites(radius=100.0, center=(0.0, 0.0)):
    """A center site surrounded by a regular hexagon of sites.

    Only the center site gets a closed Voronoi cell: a regular hexagon
    with apothem radius / 2.
    """
    cx, cy = center
    sites = [Point2D(cx, cy)]
    for i in range(6):
        angle = math.pi * i / 3
        sites.append(Point2D(cx + radius * math.cos(angle), cy + radius * math.sin(angle)))
    return sites


@pytest.fixture
def hex_sites():
    return hexagon_sites()


@pytest.fixture
def make_hex_sites():
    return hexagon_sites

"""
GeoJSON export of generated sectors.

Accepted plots become Polygon features (via shapely) tagged with their
site index and role, so results can be inspected in any GIS viewer.
"""

from typing import Any, Dict, List

from shapely.geometry import Polygon, mapping

from .core.sector import Plot, SectorResult


def plot_to_feature(plot: Plot) -> Dict[str, Any]:
    geometry = Polygon([(p.x, p.y) for p in plot.polygon])
    return {
        "type": "Feature",
        "geometry": mapping(geometry),
        "properties": {
            "site_index": plot.site_index,
            "role": plot.role.value,
            "area": geometry.area,
            "vertex_count": len(plot.polygon),
        },
    }


def sector_to_geojson(result: SectorResult, include_pavement: bool = True) -> Dict[str, Any]:
    """
    Convert a sector result to a GeoJSON FeatureCollection.

    Args:
        result: Generated sector
        include_pavement: Also emit the pavement plot of each accepted site

    Returns:
        FeatureCollection dict with footprints (and optionally pavements)
    """
    features: List[Dict[str, Any]] = []
    for accepted in result.accepted:
        if include_pavement:
            features.append(plot_to_feature(accepted.pavement))
        features.append(plot_to_feature(accepted.footprint))

    return {"type": "FeatureCollection", "features": features}

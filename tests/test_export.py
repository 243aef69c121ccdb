"""Tests for GeoJSON export."""

import pytest
from py_sector.core.sector import SectorConfig, process_sites
from py_sector.export import plot_to_feature, sector_to_geojson


@pytest.fixture
def hex_sector(hex_sites):
    return process_sites(hex_sites, SectorConfig())


class TestSectorToGeojson:
    """Test FeatureCollection output."""

    def test_pavement_and_footprint(self, hex_sector):
        collection = sector_to_geojson(hex_sector)
        assert collection["type"] == "FeatureCollection"
        roles = [f["properties"]["role"] for f in collection["features"]]
        assert roles == ["pavement", "building"]

    def test_footprints_only(self, hex_sector):
        collection = sector_to_geojson(hex_sector, include_pavement=False)
        assert len(collection["features"]) == 1
        assert collection["features"][0]["properties"]["role"] == "building"

    def test_feature_geometry(self, hex_sector):
        footprint = hex_sector.footprints[0]
        feature = plot_to_feature(footprint)

        assert feature["geometry"]["type"] == "Polygon"
        ring = feature["geometry"]["coordinates"][0]
        # Closed ring: first vertex repeated at the end
        assert len(ring) == len(footprint.polygon) + 1
        assert ring[0] == ring[-1]
        assert feature["properties"]["site_index"] == 0
        assert feature["properties"]["vertex_count"] == 6
        assert feature["properties"]["area"] > 0

    def test_empty_sector(self):
        result = process_sites([], SectorConfig())
        assert sector_to_geojson(result) == {"type": "FeatureCollection", "features": []}

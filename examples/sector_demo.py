#!/usr/bin/env python3
"""
Demonstration of sector plot generation.

This script walks through the main stages:
1. Seed sampling (with and without Lloyd's relaxation)
2. Per-site pipeline results and rejection statistics
3. Plot meshes for accepted footprints
4. GeoJSON export and an optional matplotlib preview
"""

import json
import sys

from py_sector.core import SectorConfig, build_plot_mesh, generate_sector
from py_sector.export import sector_to_geojson


def main():
    config = SectorConfig(seed_count=80, sector_width=500, sector_height=500)

    print("=== Sector Plot Generation Demo ===\n")

    # 1. Generate a sector
    print("1. Generating sector...")
    sector = generate_sector(config, seed="demo_seed")
    print(f"   - Seeds: {len(sector.seeds)}")
    print(f"   - Raw Voronoi cells: {len(sector.raw_cells)}")
    print(f"   - Accepted plots: {len(sector.accepted)}")

    # 2. Rejection breakdown
    print("\n2. Rejections by stage:")
    for stage, count in sorted(sector.rejection_counts().items()):
        print(f"   - {stage}: {count}")

    # 3. Meshes
    print("\n3. Triangulating footprints...")
    meshes = [build_plot_mesh(plot) for plot in sector.footprints]
    total_triangles = sum(len(m.triangles) for m in meshes)
    total_area = sum(m.area for m in meshes)
    print(f"   - Triangles: {total_triangles}")
    print(f"   - Built-up area: {total_area:.1f}")

    # 4. Compare with relaxed seeds
    print("\n4. Comparing with Lloyd's relaxation...")
    relaxed = generate_sector(
        SectorConfig(seed_count=80, relaxation_iterations=2), seed="demo_seed"
    )
    print(f"   - Accepted without relaxation: {len(sector.accepted)}")
    print(f"   - Accepted with relaxation: {len(relaxed.accepted)}")

    # 5. Export
    collection = sector_to_geojson(sector)
    with open("sector_demo.geojson", "w") as f:
        json.dump(collection, f)
    print(f"\n5. Wrote {len(collection['features'])} features to sector_demo.geojson")

    if "--plot" in sys.argv:
        plot_sector(sector)

    print("\n=== Demo Complete ===")


def plot_sector(sector):
    import matplotlib.pyplot as plt

    fig, ax = plt.subplots(figsize=(10, 10))

    for cell in sector.raw_cells.values():
        xs = [p.x for p in cell] + [cell[0].x]
        ys = [p.y for p in cell] + [cell[0].y]
        ax.plot(xs, ys, color="lightgray", linewidth=0.5)

    for accepted in sector.accepted:
        for plot, color in ((accepted.pavement, "tab:gray"), (accepted.footprint, "tab:orange")):
            ax.fill([p.x for p in plot.polygon], [p.y for p in plot.polygon],
                    color=color, alpha=0.6)

    seeds_x = [p.x for p in sector.seeds]
    seeds_y = [p.y for p in sector.seeds]
    ax.scatter(seeds_x, seeds_y, s=4, color="black")

    bounds = sector.config.bounds
    ax.set_xlim(bounds.x_min, bounds.x_max)
    ax.set_ylim(bounds.y_min, bounds.y_max)
    ax.set_aspect("equal")
    ax.set_title(f"Sector plots ({len(sector.accepted)} accepted)")

    plt.savefig("sector_demo.png", dpi=150, bbox_inches="tight")
    print("   - Saved preview to sector_demo.png")


if __name__ == "__main__":
    main()

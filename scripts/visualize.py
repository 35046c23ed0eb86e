#!/usr/bin/env python3
"""
Matplotlib rendering of force-directed layouts.

Generates a comparison image of several sample graphs into ./build/

Usage:
    uv run python scripts/visualize.py
"""

from pathlib import Path

import matplotlib.pyplot as plt

from force_layout import (
    FruchtermanReingoldLayout,
    barabasi_albert_graph,
    cycle_graph,
    path_graph,
    positions_to_array,
    random_positions,
)

# Output directory
BUILD_DIR = Path(__file__).parent.parent / "build"


def visualize(positions, neighbors, title, ax):
    """Draw a completed layout on an axis."""
    xy = positions_to_array(positions)

    # Draw edges
    for i, targets in enumerate(neighbors):
        for j in targets:
            ax.plot(
                [xy[i, 0], xy[j, 0]],
                [xy[i, 1], xy[j, 1]],
                "gray",
                alpha=0.5,
                linewidth=1,
            )

    # Draw nodes
    ax.scatter(xy[:, 0], xy[:, 1], s=60, c="steelblue", zorder=5, edgecolors="white", linewidth=1)

    ax.set_title(title, fontsize=12, fontweight="bold")
    ax.set_xlim(-0.05, 1.05)
    ax.set_ylim(-0.05, 1.05)
    ax.set_aspect("equal")
    ax.axis("off")


def main():
    BUILD_DIR.mkdir(exist_ok=True)

    graphs = [
        ("Path (8)", path_graph(8)),
        ("Cycle (12)", cycle_graph(12)),
        ("Barabási-Albert (40, 1)", barabasi_albert_graph(40, 1, random_seed=7)),
        ("Barabási-Albert (30, 2)", barabasi_albert_graph(30, 2, random_seed=7)),
    ]

    fig, axes = plt.subplots(1, len(graphs), figsize=(5 * len(graphs), 5))
    for ax, (name, g) in zip(axes, graphs):
        neighbors = g.neighbors()
        positions = random_positions(g.number_of_nodes(), random_seed=42)
        result = FruchtermanReingoldLayout(positions=positions, neighbors=neighbors).run().result
        visualize(positions, neighbors, f"{name}\n{result.status.value}, {result.iterations} it", ax)

    plt.tight_layout()
    filepath = BUILD_DIR / "force_layouts.png"
    fig.savefig(filepath, dpi=150, bbox_inches="tight", facecolor="white")
    plt.close(fig)
    print(f"  Saved: {filepath}")


if __name__ == "__main__":
    main()

#!/usr/bin/env python3
"""
Lay out a handful of sample graphs and write them as SVG into ./build/

Usage:
    uv run python scripts/svglayout.py
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from force_layout import (
    Graph,
    barabasi_albert_graph,
    complete_graph,
    cycle_graph,
    layout_typical_2d,
    path_graph,
    random_positions,
)
from force_layout.export import SvgCanvas, write_svg

# Output directory
BUILD_DIR = Path(__file__).parent.parent / "build"


def draw_graph(g: Graph, filename: str, l: Optional[float] = None) -> None:  # noqa: E741
    """Randomly place, lay out and write one graph."""
    neighbors = g.neighbors()
    positions = random_positions(g.number_of_nodes(), random_seed=42)

    result = layout_typical_2d(l, positions, neighbors)

    filepath = write_svg(BUILD_DIR / filename, positions, neighbors, SvgCanvas.default_for_unit_layout())
    print(f"  Saved: {filepath} ({result.status.value} after {result.iterations} iterations)")


def connected_square() -> Graph:
    """4-cycle with both diagonals."""
    g = cycle_graph(4)
    g.add_edge((0, 2))
    g.add_edge((1, 3))
    return g


def main() -> None:
    logging.basicConfig(level=logging.DEBUG, format="%(name)s - %(levelname)s - %(message)s")
    BUILD_DIR.mkdir(exist_ok=True)

    print("Generating SVG layouts...")
    draw_graph(barabasi_albert_graph(50, 1, random_seed=1), "barabasi_albert_50_1.svg", 0.03)
    draw_graph(barabasi_albert_graph(20, 3, random_seed=2), "barabasi_albert_20_3.svg")
    draw_graph(path_graph(4), "line.svg")
    draw_graph(cycle_graph(3), "triad.svg")
    draw_graph(cycle_graph(4), "square.svg")
    draw_graph(connected_square(), "connected_square.svg")
    draw_graph(complete_graph(6), "complete_6.svg")
    draw_graph(cycle_graph(100), "circle_100.svg", 0.01)
    print("Done.")


if __name__ == "__main__":
    main()

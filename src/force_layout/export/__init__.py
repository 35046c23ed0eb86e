"""
Export functionality for force-directed layouts.

Example usage:
    from force_layout import layout_typical_2d, random_positions
    from force_layout.export import to_svg, write_svg

    neighbors = [[1], [2], [0]]
    positions = random_positions(3, random_seed=1)
    layout_typical_2d(None, positions, neighbors)

    svg_content = to_svg(positions, neighbors)
    write_svg("triangle.svg", positions, neighbors, directed=True)
"""

from .svg import SvgCanvas, to_svg, write_svg

__all__ = [
    "SvgCanvas",
    "to_svg",
    "write_svg",
]

"""
SVG export for force-directed layouts.

Draws the positions produced by the layout engine on a fixed canvas: edges
first (optionally with a direction marker at their midpoint), then nodes as
circles. Only the first two coordinates of each position are drawn.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Optional, Sequence, Union
from xml.sax.saxutils import escape

from ..validation import InvalidDimensionError, validate_neighbor_indices, validate_shape

if TYPE_CHECKING:
    from ..vector import Vector


@dataclass
class SvgCanvas:
    """
    Drawing parameters.

    A position (x, y) is drawn at
    ``(border + x * scalex + offsetx, border + y * scaley + offsety)``.
    """

    width: float = 1000.0
    height: float = 1000.0
    border: float = 40.0
    radius: float = 10.0
    scalex: float = 1000.0
    scaley: float = 1000.0
    offsetx: float = 0.0
    offsety: float = 0.0
    stroke_width: float = 1.0
    stroke_color: str = "black"
    fill_color: str = "red"

    @classmethod
    def default_for_unit_layout(cls) -> SvgCanvas:
        """Canvas for layouts whose coordinates all lie in [0, 1]."""
        return cls()

    def project(self, pos: Vector) -> tuple[float, float]:
        """Map a layout position to device coordinates."""
        return (
            self.border + pos[0] * self.scalex + self.offsetx,
            self.border + pos[1] * self.scaley + self.offsety,
        )


_ARROW_MARKER = (
    "  <defs>\n"
    '    <marker id="arrow" viewBox="0 0 10 10" refX="1" refY="5" '
    'markerUnits="strokeWidth" orient="auto" markerWidth="8" markerHeight="6">'
    '<polyline points="0,0 10,5 0,10 1,5" fill="darkblue"/></marker>\n'
    "  </defs>"
)


def to_svg(
    positions: Sequence[Vector],
    neighbors: Sequence[Sequence[int]],
    canvas: Optional[SvgCanvas] = None,
    *,
    directed: bool = False,
) -> str:
    """
    Render a layout to SVG.

    Args:
        positions: Final node positions
        neighbors: Adjacency used for the layout
        canvas: Drawing parameters (default: SvgCanvas.default_for_unit_layout())
        directed: Split each edge at its midpoint and mark its direction

    Returns:
        SVG document as a string

    Raises:
        ShapeMismatchError: If positions and neighbors differ in length
        InvalidNeighborError: If an adjacency entry is out of range
        InvalidDimensionError: If positions have fewer than two coordinates
    """
    dim = validate_shape(positions, neighbors)
    if dim == 1:
        raise InvalidDimensionError("SVG output needs at least two coordinates per position")
    validate_neighbor_indices(neighbors, strict=True)
    if canvas is None:
        canvas = SvgCanvas.default_for_unit_layout()

    view_w = canvas.width + 2 * canvas.border
    view_h = canvas.height + 2 * canvas.border

    svg_parts = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        f'<svg xmlns="http://www.w3.org/2000/svg" version="1.1" baseProfile="full" '
        f'width="100%" height="100%" viewBox="0 0 {view_w:g} {view_h:g}">',
        _ARROW_MARKER,
    ]

    # Edges group
    svg_parts.append('  <g class="edges">')
    for i, targets in enumerate(neighbors):
        for j in targets:
            edge_svg = _render_edge(positions[i], positions[j], canvas, directed)
            if edge_svg:
                svg_parts.append(edge_svg)
    svg_parts.append("  </g>")

    # Nodes group
    svg_parts.append('  <g class="nodes">')
    for pos in positions:
        svg_parts.append(_render_node(pos, canvas))
    svg_parts.append("  </g>")

    svg_parts.append("</svg>")

    return "\n".join(svg_parts)


def write_svg(
    path: Union[str, Path],
    positions: Sequence[Vector],
    neighbors: Sequence[Sequence[int]],
    canvas: Optional[SvgCanvas] = None,
    *,
    directed: bool = False,
) -> Path:
    """Render a layout with to_svg() and write it to ``path``."""
    path = Path(path)
    path.write_text(to_svg(positions, neighbors, canvas, directed=directed), encoding="utf-8")
    return path


def _render_edge(
    pos1: Vector,
    pos2: Vector,
    canvas: SvgCanvas,
    directed: bool,
) -> Optional[str]:
    """Render an edge, or None when it is shorter than one device pixel."""
    x1, y1 = canvas.project(pos1)
    x2, y2 = canvas.project(pos2)

    dx = x2 - x1
    dy = y2 - y1
    if math.hypot(dx, dy) < 1.0:
        return None

    mx = x1 + 0.5 * dx
    my = y1 + 0.5 * dy
    marker = ' marker-mid="url(#arrow)"' if directed else ""

    return (
        f'    <path d="M{x1:.2f} {y1:.2f} L{mx:.2f} {my:.2f} L{x2:.2f} {y2:.2f}" '
        f'stroke="{escape(canvas.stroke_color)}" stroke-width="{canvas.stroke_width:g}px"'
        f"{marker}/>"
    )


def _render_node(pos: Vector, canvas: SvgCanvas) -> str:
    """Render a node."""
    x, y = canvas.project(pos)
    return (
        f'    <circle cx="{x:.2f}" cy="{y:.2f}" r="{canvas.radius:g}" '
        f'stroke="{escape(canvas.stroke_color)}" stroke-width="{canvas.stroke_width:g}px" '
        f'fill="{escape(canvas.fill_color)}"/>'
    )


__all__ = [
    "SvgCanvas",
    "to_svg",
    "write_svg",
]

"""
Force-directed graph layout.

This module provides:
- forces: Pairwise repulsive and attractive forces
- FruchtermanReingoldLayout: Iterative driver with linear cooling
- layout / layout_typical_2d: Functional entry points
"""

from .forces import attractive_force, repulsive_force
from .fruchterman_reingold import (
    DEFAULT_EPSILON,
    DEFAULT_TEMPERATURE,
    FruchtermanReingoldLayout,
    accumulate_attraction,
    accumulate_repulsion,
    default_ideal_length,
    integrate_positions,
    iterate,
    layout,
    layout_typical_2d,
    linear_cooling,
    reset_forces,
)

__all__ = [
    "FruchtermanReingoldLayout",
    "DEFAULT_EPSILON",
    "DEFAULT_TEMPERATURE",
    "attractive_force",
    "repulsive_force",
    "accumulate_attraction",
    "accumulate_repulsion",
    "default_ideal_length",
    "integrate_positions",
    "iterate",
    "layout",
    "layout_typical_2d",
    "linear_cooling",
    "reset_forces",
]

"""
force-layout: Force-directed graph layout in Python.

Places graph nodes by simulating repulsion between all node pairs and spring
attraction along edges, with a cooling step size and an early stop once the
layout settles. Positions are supplied by the caller and updated in place.

Available modules:
- vector: Vector abstraction (P2d, VecN)
- force: Force model, passes and the Fruchterman-Reingold driver
- basic: Random initial placement
- generators: Adjacency construction and sample graphs
- export: SVG rendering
"""

import logging

__version__ = "0.1.0"

# Random initial placement
from .basic import random_positions

# Base class for iterative layouts
from .base import IterativeLayout

# Force-directed layout
from .force import (
    FruchtermanReingoldLayout,
    attractive_force,
    layout,
    layout_typical_2d,
    linear_cooling,
    repulsive_force,
)

# Graph sources
from .generators import (
    Graph,
    barabasi_albert_graph,
    build_neighbors,
    complete_graph,
    cycle_graph,
    path_graph,
)
from .types import Event, EventType, LayoutResult, LayoutStatus

# Validation utilities
from .validation import (
    InvalidBoundsError,
    InvalidDimensionError,
    InvalidLockCountError,
    InvalidNeighborError,
    LayoutWarning,
    ShapeMismatchError,
    ValidationError,
)
from .vector import P2d, VecN, Vector, positions_from_array, positions_to_array

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Version
    "__version__",
    # Vectors
    "Vector",
    "P2d",
    "VecN",
    "positions_to_array",
    "positions_from_array",
    # Shared types
    "EventType",
    "Event",
    "LayoutStatus",
    "LayoutResult",
    # Base classes
    "IterativeLayout",
    # Force-directed layout
    "FruchtermanReingoldLayout",
    "repulsive_force",
    "attractive_force",
    "linear_cooling",
    "layout",
    "layout_typical_2d",
    # Initial placement
    "random_positions",
    # Graph sources
    "Graph",
    "build_neighbors",
    "path_graph",
    "cycle_graph",
    "complete_graph",
    "barabasi_albert_graph",
    # Validation
    "ValidationError",
    "ShapeMismatchError",
    "InvalidDimensionError",
    "InvalidNeighborError",
    "InvalidBoundsError",
    "InvalidLockCountError",
    "LayoutWarning",
]

"""
Basic helpers around the layout engine.

- random_positions: Uniform random initial placement
"""

from .random import random_positions

__all__ = ["random_positions"]

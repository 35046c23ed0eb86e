"""
Random initial placement.

The layout engine never chooses starting positions; callers typically place
nodes independently and uniformly at random inside the bounding region and
hand the result to the engine.
"""

from __future__ import annotations

import random
from typing import Optional

from ..validation import InvalidDimensionError, ValidationError
from ..vector import P2d, VecN, Vector


def random_positions(
    n: int,
    dim: int = 2,
    *,
    low: float = 0.0,
    high: float = 1.0,
    random_seed: Optional[int] = None,
) -> list[Vector]:
    """
    Place ``n`` points uniformly at random in ``[low, high]^dim``.

    Args:
        n: Number of positions
        dim: Dimension of each position (P2d for 2, VecN otherwise)
        low: Lower bound on every axis
        high: Upper bound on every axis
        random_seed: Random seed for reproducible placements

    Returns:
        List of n positions

    Raises:
        ValidationError: If n < 0 or low > high
        InvalidDimensionError: If dim < 1
    """
    if n < 0:
        raise ValidationError(f"n must be >= 0, got {n}")
    if dim < 1:
        raise InvalidDimensionError(f"Vector dimension must be >= 1, got {dim}")
    if low > high:
        raise ValidationError(f"low must be <= high, got {low} > {high}")

    # Seed random number generator if specified
    rng = random.Random(random_seed) if random_seed is not None else random

    if dim == 2:
        return [P2d(rng.uniform(low, high), rng.uniform(low, high)) for _ in range(n)]
    return [VecN([rng.uniform(low, high) for _ in range(dim)]) for _ in range(n)]


__all__ = ["random_positions"]

"""
Pairwise forces of the Fruchterman-Reingold model.

Both forces point along ``p1 - p2``:

- repulsion: magnitude k_r / d (inverse-square scaling of the difference)
- attraction: magnitude d^2 / k_s (Hooke-like spring)

With k_r = l^2 and k_s = l the two balance at distance l for a single edge.
"""

from __future__ import annotations

import math

from ..types import V


def repulsive_force(p1: V, p2: V, k_r: float) -> V:
    """
    Repulsive force acting on ``p1`` due to ``p2``.

    Coincident points give the zero vector instead of dividing by zero.
    """
    force = p1.sub(p2)
    length_squared = force.length_squared()
    if length_squared > 0.0:
        return force.scaled(k_r / length_squared)
    return force


def attractive_force(p1: V, p2: V, k_s: float) -> V:
    """
    Spring force between ``p1`` and ``p2``.

    Points from ``p2`` to ``p1``; callers apply it negated to ``p1``.
    """
    force = p1.sub(p2)
    length = math.sqrt(force.length_squared())
    return force.scaled(length / k_s)


__all__ = ["repulsive_force", "attractive_force"]

"""
Input validation utilities for force-directed layouts.

Provides centralized validation functions for positions, adjacency, bounds
and simulation parameters. Raises descriptive exceptions on invalid input so
that configuration errors surface once at entry, never from inside the
iteration loop.
"""

from __future__ import annotations

import operator
import warnings
from typing import TYPE_CHECKING, Any, Optional, Sequence

if TYPE_CHECKING:
    from .vector import Vector


class ValidationError(ValueError):
    """Base exception for layout validation errors."""

    pass


class ShapeMismatchError(ValidationError):
    """Raised when positions, adjacency and bounds disagree in shape."""

    pass


class InvalidDimensionError(ValidationError):
    """Raised when a vector dimension is missing or not positive."""

    pass


class InvalidNeighborError(ValidationError):
    """Raised when an adjacency entry references an invalid node."""

    pass


class InvalidBoundsError(ValidationError):
    """Raised when the bounding region has min > max in some component."""

    pass


class InvalidLockCountError(ValidationError):
    """Raised when the locked-node count is outside [0, n]."""

    pass


class LayoutWarning(UserWarning):
    """Warning issued when the input is valid but probably not what was meant."""

    pass


def validate_shape(positions: Sequence[Vector], neighbors: Sequence[Sequence[int]]) -> int:
    """
    Validate that positions and adjacency describe the same node set.

    Args:
        positions: Sequence of position vectors
        neighbors: Adjacency, one sequence of target indices per node

    Returns:
        Common dimension of the positions (0 for an empty graph)

    Raises:
        ShapeMismatchError: If lengths differ, or dimensions or vector
            classes are mixed
        InvalidDimensionError: If a position has no coordinates
    """
    if len(neighbors) != len(positions):
        raise ShapeMismatchError(
            f"neighbors has {len(neighbors)} entries but there are {len(positions)} positions"
        )
    if not positions:
        return 0

    dim = positions[0].dim
    if dim < 1:
        raise InvalidDimensionError(f"Position dimension must be >= 1, got {dim}")
    kind = type(positions[0])
    for i, pos in enumerate(positions):
        if pos.dim != dim:
            raise ShapeMismatchError(f"Position {i} has dimension {pos.dim}, expected {dim}")
        if type(pos) is not kind:
            raise ShapeMismatchError(
                f"Position {i} is a {type(pos).__name__}, expected {kind.__name__}"
            )
    return dim


def validate_neighbor_indices(
    neighbors: Sequence[Sequence[int]],
    strict: bool = True,
) -> list[tuple[int, str]]:
    """
    Validate that every adjacency entry is a node index in [0, n).

    Args:
        neighbors: Adjacency lists
        strict: If True, raises on invalid. If False, returns list of issues.

    Returns:
        List of (node_index, issue_description) tuples

    Raises:
        InvalidNeighborError: If strict=True and invalid entries found
    """
    n = len(neighbors)
    issues: list[tuple[int, str]] = []

    for i, targets in enumerate(neighbors):
        for j in targets:
            try:
                idx = operator.index(j)
            except TypeError:
                issues.append((i, f"Node {i}: neighbor {j!r} is not an integer index"))
                continue
            if idx < 0 or idx >= n:
                issues.append((i, f"Node {i}: neighbor index {idx} out of bounds [0, {n})"))

    if strict and issues:
        msg = "Invalid neighbor indices:\n" + "\n".join(issue[1] for issue in issues)
        raise InvalidNeighborError(msg)

    return issues


def warn_bidirectional_edges(neighbors: Sequence[Sequence[int]]) -> int:
    """
    Warn when an edge is listed in both directions.

    Attraction is applied to both endpoints of every listed edge, so an edge
    listed as i -> j and j -> i pulls twice as hard.

    Returns:
        Number of edges listed in both directions
    """
    seen: set[tuple[int, int]] = set()
    for i, targets in enumerate(neighbors):
        for j in targets:
            if i != j:
                seen.add((i, j))

    duplicated = sum(1 for (i, j) in seen if i < j and (j, i) in seen)
    if duplicated:
        warnings.warn(
            f"Found {duplicated} edge(s) listed in both directions. "
            "Each listing applies attraction to both endpoints, "
            "so these edges are counted twice.",
            LayoutWarning,
            stacklevel=3,
        )
    return duplicated


def validate_bounds(
    min_pos: Vector,
    max_pos: Vector,
    dim: Optional[int] = None,
    kind: Optional[type] = None,
) -> None:
    """
    Validate the bounding region.

    Args:
        min_pos: Lower corner
        max_pos: Upper corner
        dim: Expected dimension (skipped when None)
        kind: Expected vector class of both corners (skipped when None)

    Raises:
        ShapeMismatchError: If the corners disagree in dimension or class
        InvalidBoundsError: If min > max in some component
    """
    if min_pos.dim != max_pos.dim:
        raise ShapeMismatchError(
            f"Bounds dimension mismatch: min has {min_pos.dim}, max has {max_pos.dim}"
        )
    if dim is not None and dim > 0 and min_pos.dim != dim:
        raise ShapeMismatchError(
            f"Bounds have dimension {min_pos.dim} but positions have dimension {dim}"
        )
    if type(min_pos) is not type(max_pos):
        raise ShapeMismatchError(
            f"Bounds class mismatch: min is a {type(min_pos).__name__}, "
            f"max is a {type(max_pos).__name__}"
        )
    if kind is not None and type(min_pos) is not kind:
        raise ShapeMismatchError(
            f"Bounds are {type(min_pos).__name__} but positions are {kind.__name__}"
        )
    for axis, (lo, hi) in enumerate(zip(min_pos, max_pos)):
        if lo > hi:
            raise InvalidBoundsError(f"Bounds min > max on axis {axis}: {lo} > {hi}")


def validate_locked_count(locked: int, node_count: int) -> int:
    """
    Validate the number of leading nodes excluded from integration.

    Raises:
        InvalidLockCountError: If locked is not in [0, node_count]
    """
    locked = int(locked)
    if locked < 0 or locked > node_count:
        raise InvalidLockCountError(
            f"locked must be in [0, {node_count}], got {locked}"
        )
    return locked


def validate_iterations(iterations: int) -> int:
    """
    Validate iteration count is positive.

    Raises:
        ValidationError: If iterations < 1
    """
    if iterations < 1:
        raise ValidationError(f"iterations must be >= 1, got {iterations}")
    return iterations


def validate_non_negative(name: str, value: Any) -> float:
    """
    Validate a non-negative parameter (epsilon, temperature, repulsion constant).

    Raises:
        ValidationError: If value < 0
    """
    value = float(value)
    if not value >= 0:
        raise ValidationError(f"{name} must be >= 0, got {value}")
    return value


def validate_positive(name: str, value: Any) -> float:
    """
    Validate a strictly positive parameter (ideal length, force constants).

    Raises:
        ValidationError: If value <= 0
    """
    value = float(value)
    if not value > 0:
        raise ValidationError(f"{name} must be positive, got {value}")
    return value


__all__ = [
    "ValidationError",
    "ShapeMismatchError",
    "InvalidDimensionError",
    "InvalidNeighborError",
    "InvalidBoundsError",
    "InvalidLockCountError",
    "LayoutWarning",
    "validate_shape",
    "validate_neighbor_indices",
    "warn_bidirectional_edges",
    "validate_bounds",
    "validate_locked_count",
    "validate_iterations",
    "validate_non_negative",
    "validate_positive",
]

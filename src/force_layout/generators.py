"""
Graph sources for the layout engine.

The engine consumes adjacency lists, ``neighbors[i]`` holding the targets of
edges leaving node i. This module builds them from edge lists and provides a
few standard graphs for demos and tests:

- Graph: minimal incremental graph (nodes are indices, edges are pairs)
- path_graph, cycle_graph, complete_graph: deterministic shapes
- barabasi_albert_graph: preferential attachment (scale-free) graph
"""

from __future__ import annotations

import random
from typing import Iterable, Optional

from .validation import InvalidNeighborError, ValidationError


def build_neighbors(n: int, edges: Iterable[tuple[int, int]]) -> list[list[int]]:
    """
    Build adjacency lists from an edge list.

    Each edge (src, dst) is inserted once, as ``neighbors[src].append(dst)``.

    Raises:
        InvalidNeighborError: If an edge references a node outside [0, n)
    """
    neighbors: list[list[int]] = [[] for _ in range(n)]
    for src, dst in edges:
        if not (0 <= src < n and 0 <= dst < n):
            raise InvalidNeighborError(f"Edge ({src}, {dst}) out of bounds [0, {n})")
        neighbors[src].append(dst)
    return neighbors


class Graph:
    """
    Minimal graph: nodes are consecutive indices, edges are directed pairs.

    Example:
        g = Graph()
        a = g.add_node()
        b = g.add_node()
        g.add_edge((a, b))
        neighbors = g.neighbors()   # [[1], []]
    """

    def __init__(self) -> None:
        self._node_count: int = 0
        self._edges: list[tuple[int, int]] = []

    @property
    def nodes(self) -> range:
        """Node indices."""
        return range(self._node_count)

    @property
    def edges(self) -> list[tuple[int, int]]:
        """Edges in insertion order."""
        return self._edges

    def number_of_nodes(self) -> int:
        return self._node_count

    def number_of_edges(self) -> int:
        return len(self._edges)

    def add_node(self) -> int:
        """Add a node and return its index."""
        self._node_count += 1
        return self._node_count - 1

    def add_nodes(self, count: int) -> range:
        """Add ``count`` nodes and return their indices."""
        start = self._node_count
        self._node_count += count
        return range(start, self._node_count)

    def add_edge(self, edge: tuple[int, int]) -> None:
        """
        Add a directed edge between existing nodes.

        Raises:
            InvalidNeighborError: If either endpoint does not exist
        """
        src, dst = edge
        if not (0 <= src < self._node_count and 0 <= dst < self._node_count):
            raise InvalidNeighborError(
                f"Edge ({src}, {dst}) out of bounds [0, {self._node_count})"
            )
        self._edges.append((src, dst))

    def neighbors(self) -> list[list[int]]:
        """Adjacency lists with one entry per edge."""
        return build_neighbors(self._node_count, self._edges)

    def __repr__(self) -> str:
        return f"Graph(nodes={self._node_count}, edges={len(self._edges)})"


def path_graph(n: int) -> Graph:
    """Chain 0 -> 1 -> ... -> n-1."""
    g = Graph()
    g.add_nodes(n)
    for i in range(n - 1):
        g.add_edge((i, i + 1))
    return g


def cycle_graph(n: int) -> Graph:
    """Ring 0 -> 1 -> ... -> n-1 -> 0."""
    g = Graph()
    g.add_nodes(n)
    if n < 2:
        return g
    if n == 2:
        g.add_edge((0, 1))
        return g
    for i in range(n):
        g.add_edge((i, (i + 1) % n))
    return g


def complete_graph(n: int) -> Graph:
    """Every pair i < j joined once, listed as i -> j."""
    g = Graph()
    g.add_nodes(n)
    for i in range(n):
        for j in range(i + 1, n):
            g.add_edge((i, j))
    return g


def barabasi_albert_graph(n: int, m: int, random_seed: Optional[int] = None) -> Graph:
    """
    Generate a Barabási-Albert preferential attachment graph.

    Starts from a complete graph on m+1 nodes; every further node attaches
    m edges to distinct existing nodes chosen proportionally to their degree.
    Edges point from the new node to its targets.

    Args:
        n: Number of nodes
        m: Number of edges to attach from each new node
        random_seed: Random seed for reproducibility

    Raises:
        ValidationError: If m < 1 or m >= n
    """
    if m < 1 or m >= n:
        raise ValidationError(f"m must be >= 1 and < n, got m={m}, n={n}")

    rng = random.Random(random_seed)
    g = complete_graph(m + 1)
    degrees = [m] * (m + 1)

    for new_node in range(m + 1, n):
        g.add_node()
        total_degree = sum(degrees)

        # Select m targets based on degree (preferential attachment)
        targets: set[int] = set()
        while len(targets) < m:
            r = rng.random() * total_degree
            cumulative = 0
            for candidate in range(new_node):
                cumulative += degrees[candidate]
                if cumulative > r:
                    targets.add(candidate)
                    break

        degrees.append(0)
        for target in sorted(targets):
            g.add_edge((new_node, target))
            degrees[new_node] += 1
            degrees[target] += 1

    return g


__all__ = [
    "Graph",
    "build_neighbors",
    "path_graph",
    "cycle_graph",
    "complete_graph",
    "barabasi_albert_graph",
]

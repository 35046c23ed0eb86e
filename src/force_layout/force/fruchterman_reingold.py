"""
Fruchterman-Reingold force-directed layout algorithm.

Based on the paper:
"Graph Drawing by Force-directed Placement" by Fruchterman and Reingold (1991)

The algorithm simulates a physical system where:
- All nodes repel each other (like electrical charges)
- Connected nodes attract each other (like springs)
- A "temperature" sets how far a node moves per iteration and cools over time

Every iteration resets the force accumulators, adds pairwise repulsion, adds
edge attraction, then moves each unlocked node by exactly the current step in
the direction of its net force and clips it into the bounding region. The run
stops once the total movement of an iteration falls below epsilon, or when the
iteration budget is spent.
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING, Any, MutableSequence, Optional, Sequence

if TYPE_CHECKING:
    from typing_extensions import Self

from ..base import DEFAULT_ITERATIONS, IterativeLayout
from ..types import (
    EventCallback,
    EventType,
    LayoutResult,
    LayoutStatus,
    StepFunction,
    V,
)
from ..validation import (
    validate_bounds,
    validate_iterations,
    validate_locked_count,
    validate_non_negative,
    validate_positive,
)
from ..vector import P2d, VecN, Vector, make_vector
from .forces import attractive_force, repulsive_force

logger = logging.getLogger(__name__)

DEFAULT_EPSILON = 0.01
DEFAULT_TEMPERATURE = 0.1


def linear_cooling(
    temperature: float = DEFAULT_TEMPERATURE,
    max_iter: int = DEFAULT_ITERATIONS,
) -> StepFunction:
    """
    Linear cooling schedule.

    Returns a function mapping an iteration number to a step size that falls
    from ``temperature`` at iteration 0 toward 0 at iteration ``max_iter``.
    """
    temperature = validate_non_negative("temperature", temperature)
    max_iter = validate_iterations(int(max_iter))
    dt = temperature / max_iter

    def step(iteration: int) -> float:
        return temperature - iteration * dt

    return step


def default_ideal_length(node_count: int) -> float:
    """Ideal edge length sqrt(1/n): n nodes roughly fill a unit area."""
    return math.sqrt(1.0 / max(1, node_count))


def _filled_like(proto: Optional[Vector], dim: int, value: float) -> Vector:
    if isinstance(proto, VecN):
        return VecN([value] * dim)
    return make_vector([value] * dim)


# -----------------------------------------------------------------------------
# Passes
# -----------------------------------------------------------------------------


def reset_forces(forces: Sequence[Vector]) -> None:
    """Reset all force accumulators to zero."""
    for force in forces:
        force.reset()


def accumulate_repulsion(positions: Sequence[V], forces: Sequence[V], k_r: float) -> None:
    """Add repulsion for every unordered node pair (i < j): +F to i, -F to j."""
    n = len(positions)
    for i in range(n - 1):
        pos_i = positions[i]
        force_i = forces[i]
        for j in range(i + 1, n):
            force = repulsive_force(pos_i, positions[j], k_r)
            force_i.add_scaled(1.0, force)
            forces[j].add_scaled(-1.0, force)


def accumulate_attraction(
    positions: Sequence[V],
    neighbors: Sequence[Sequence[int]],
    forces: Sequence[V],
    k_s: float,
) -> None:
    """
    Add spring attraction for every adjacency entry i -> j.

    The force is applied to both endpoints whichever direction is listed, so
    an edge listed in both directions is counted twice.
    """
    for i, targets in enumerate(neighbors):
        pos_i = positions[i]
        force_i = forces[i]
        for j in targets:
            force = attractive_force(pos_i, positions[j], k_s)
            force_i.add_scaled(-1.0, force)
            forces[j].add_scaled(1.0, force)


def integrate_positions(
    positions: MutableSequence[V],
    forces: Sequence[V],
    step: float,
    min_pos: V,
    max_pos: V,
    locked: int = 0,
) -> float:
    """
    Move every unlocked node by ``step`` along its net force.

    The displacement is direction-normalized: its length is ``step`` whatever
    the force magnitude. Nodes without net force keep their coordinates. Every
    integrated position is clipped into [min_pos, max_pos] and stored back as
    a new vector; the first ``locked`` slots are left untouched.

    Returns:
        Total movement: ``step`` summed over the nodes that had a net force.
    """
    moved = 0.0
    for i in range(locked, len(positions)):
        force = forces[i]
        new_pos = positions[i].copy()

        length = math.sqrt(force.length_squared())
        if length > 0.0:
            new_pos.add_scaled(step / length, force)
            moved += step

        new_pos.clip_within(min_pos, max_pos)
        positions[i] = new_pos
    return moved


def iterate(
    positions: MutableSequence[V],
    neighbors: Sequence[Sequence[int]],
    forces: Sequence[V],
    step: float,
    k_r: float,
    k_s: float,
    min_pos: V,
    max_pos: V,
    locked: int = 0,
) -> float:
    """
    Run one full iteration and return its total movement.

    Order: reset forces, repulsion, attraction, integration.
    """
    reset_forces(forces)
    accumulate_repulsion(positions, forces, k_r)
    accumulate_attraction(positions, neighbors, forces, k_s)
    return integrate_positions(positions, forces, step, min_pos, max_pos, locked)


# -----------------------------------------------------------------------------
# Layout driver
# -----------------------------------------------------------------------------


class FruchtermanReingoldLayout(IterativeLayout):
    """
    Fruchterman-Reingold force-directed graph layout.

    Positions are supplied by the caller and updated in place. The first
    ``locked`` nodes are anchors and never move.

    - All node pairs repel with magnitude k_r / d
    - Connected node pairs attract with magnitude d^2 / k_s
    - Each unlocked node moves by the current step along its net force

    Example:
        positions = [P2d(0.1, 0.2), P2d(0.9, 0.3), P2d(0.5, 0.8)]
        layout = FruchtermanReingoldLayout(
            positions=positions,
            neighbors=[[1], [2], [0]],
        )
        result = layout.run().result
        print(result.status, result.iterations)
    """

    def __init__(
        self,
        *,
        positions: Optional[MutableSequence[Vector]] = None,
        neighbors: Optional[Sequence[Sequence[int]]] = None,
        min_pos: Optional[Vector] = None,
        max_pos: Optional[Vector] = None,
        ideal_length: Optional[float] = None,
        k_r: Optional[float] = None,
        k_s: Optional[float] = None,
        locked: int = 0,
        iterations: int = DEFAULT_ITERATIONS,
        epsilon: float = DEFAULT_EPSILON,
        temperature: float = DEFAULT_TEMPERATURE,
        step_fn: Optional[StepFunction] = None,
        on_start: Optional[EventCallback] = None,
        on_tick: Optional[EventCallback] = None,
        on_end: Optional[EventCallback] = None,
    ) -> None:
        """
        Initialize Fruchterman-Reingold layout.

        Args:
            positions: Mutable sequence of starting positions, updated in place
            neighbors: neighbors[i] lists the targets of edges leaving node i
            min_pos: Lower corner of the bounding region. Defaults to the origin.
            max_pos: Upper corner of the bounding region. Defaults to all ones.
            ideal_length: Ideal edge length l. If None, sqrt(1/n).
            k_r: Repulsion constant. If None, l^2.
            k_s: Attraction constant. If None, l.
            locked: Number of leading nodes excluded from integration
            iterations: Maximum number of iterations (default 300)
            epsilon: Stop once an iteration moves less than this (default 0.01)
            temperature: Initial step of the linear cooling (default 0.1)
            step_fn: Cooling schedule override, iteration -> step size
            on_start: Callback for start event
            on_tick: Callback for tick event
            on_end: Callback for end event
        """
        super().__init__(
            positions=positions,
            neighbors=neighbors,
            iterations=iterations,
            on_start=on_start,
            on_tick=on_tick,
            on_end=on_end,
        )

        self._min_pos: Optional[Vector] = min_pos
        self._max_pos: Optional[Vector] = max_pos
        self._ideal_length: Optional[float] = (
            validate_positive("ideal_length", ideal_length) if ideal_length is not None else None
        )
        self._k_r: Optional[float] = validate_non_negative("k_r", k_r) if k_r is not None else None
        self._k_s: Optional[float] = validate_positive("k_s", k_s) if k_s is not None else None
        self._locked: int = int(locked)
        self._epsilon: float = validate_non_negative("epsilon", epsilon)
        self._temperature: float = validate_non_negative("temperature", temperature)
        self._step_fn: Optional[StepFunction] = step_fn

        # Resolved by _prepare()
        self._forces: Optional[list[Vector]] = None
        self._bounds: Optional[tuple[Vector, Vector]] = None
        self._constants: Optional[tuple[float, float]] = None
        self._schedule: Optional[StepFunction] = None

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def ideal_length(self) -> float:
        """Get ideal edge length l."""
        if self._ideal_length is not None:
            return self._ideal_length
        return default_ideal_length(len(self._positions))

    @ideal_length.setter
    def ideal_length(self, value: Optional[float]) -> None:
        """Set ideal edge length (None restores the sqrt(1/n) default)."""
        self._ideal_length = validate_positive("ideal_length", value) if value is not None else None

    @property
    def k_r(self) -> float:
        """Get repulsion constant."""
        if self._k_r is not None:
            return self._k_r
        length = self.ideal_length
        return length * length

    @k_r.setter
    def k_r(self, value: Optional[float]) -> None:
        self._k_r = validate_non_negative("k_r", value) if value is not None else None

    @property
    def k_s(self) -> float:
        """Get attraction constant."""
        if self._k_s is not None:
            return self._k_s
        return self.ideal_length

    @k_s.setter
    def k_s(self, value: Optional[float]) -> None:
        self._k_s = validate_positive("k_s", value) if value is not None else None

    @property
    def locked(self) -> int:
        """Get number of leading nodes that never move."""
        return self._locked

    @locked.setter
    def locked(self, value: int) -> None:
        self._locked = int(value)

    @property
    def epsilon(self) -> float:
        """Get convergence threshold on total movement per iteration."""
        return self._epsilon

    @epsilon.setter
    def epsilon(self, value: float) -> None:
        self._epsilon = validate_non_negative("epsilon", value)

    @property
    def temperature(self) -> float:
        """Get initial temperature of the linear cooling schedule."""
        return self._temperature

    @temperature.setter
    def temperature(self, value: float) -> None:
        self._temperature = validate_non_negative("temperature", value)

    @property
    def step_fn(self) -> StepFunction:
        """Get cooling schedule (linear from temperature unless overridden)."""
        if self._step_fn is not None:
            return self._step_fn
        return linear_cooling(self._temperature, self._iterations)

    @step_fn.setter
    def step_fn(self, value: Optional[StepFunction]) -> None:
        self._step_fn = value

    @property
    def bounds(self) -> tuple[Vector, Vector]:
        """Get bounding region (min_pos, max_pos)."""
        if self._bounds is not None:
            return self._bounds
        return self._resolve_bounds(self._dimension())

    @property
    def forces(self) -> Optional[list[Vector]]:
        """Force accumulators of the last iteration (None before the first)."""
        return self._forces

    # -------------------------------------------------------------------------
    # Layout Implementation
    # -------------------------------------------------------------------------

    def _dimension(self) -> int:
        if self._positions:
            return self._positions[0].dim
        if self._min_pos is not None:
            return self._min_pos.dim
        return 2

    def _resolve_bounds(self, dim: int) -> tuple[Vector, Vector]:
        """Fill in the unit box [0, 1]^dim for any corner that was not given.

        Default corners take the class of the positions so that they can be
        passed to ``clip_within``.
        """
        proto = self._positions[0] if self._positions else None
        min_pos = self._min_pos
        max_pos = self._max_pos
        if min_pos is None:
            min_pos = proto.zero() if proto is not None else make_vector([0.0] * dim)
        if max_pos is None:
            max_pos = _filled_like(proto, dim, 1.0)
        return min_pos, max_pos

    def _prepare(self) -> None:
        """Validate the configuration and resolve per-run state."""
        self.validate()
        n = len(self._positions)
        dim = self._dimension()

        min_pos, max_pos = self._resolve_bounds(dim)
        if n:
            validate_bounds(min_pos, max_pos, dim, type(self._positions[0]))
        else:
            validate_bounds(min_pos, max_pos)
        self._locked = validate_locked_count(self._locked, n)

        self._bounds = (min_pos, max_pos)
        self._constants = (self.k_r, self.k_s)
        self._schedule = self.step_fn
        self._forces = [pos.zero() for pos in self._positions]
        self._iteration = 0
        self._movement = 0.0

    def run(self, **kwargs: Any) -> Self:
        """
        Run the layout until convergence or the iteration budget is spent.

        Returns:
            self for chaining

        Raises:
            ValidationError: If positions, adjacency, bounds or the locked
                count are inconsistent. Raised before any position changes.
        """
        self._prepare()
        assert self._constants is not None
        k_r, k_s = self._constants

        logger.debug(
            "Fruchterman-Reingold start: n=%d edges=%d locked=%d k_r=%.6g k_s=%.6g "
            "max_iter=%d eps=%g",
            len(self._positions),
            sum(len(targets) for targets in self._neighbors),
            self._locked,
            k_r,
            k_s,
            self._iterations,
            self._epsilon,
        )

        self._status = LayoutStatus.running
        self.trigger({"type": EventType.start, "iteration": 0, "status": self._status})

        self.kick()

        logger.debug(
            "Fruchterman-Reingold %s after %d iteration(s), last movement %.6g",
            self._status.value,
            self._iteration,
            self._movement,
        )

        self.trigger(
            {
                "type": EventType.end,
                "iteration": self._iteration,
                "movement": self._movement,
                "status": self._status,
            }
        )
        return self

    def tick(self) -> bool:
        """
        Perform one iteration of the layout.

        Returns:
            True if the iteration moved less than epsilon (or not at all).
        """
        if self._forces is None:
            self._prepare()
            self._status = LayoutStatus.running
            self.trigger({"type": EventType.start, "iteration": 0, "status": self._status})

        assert self._forces is not None
        assert self._bounds is not None
        assert self._constants is not None
        assert self._schedule is not None

        k_r, k_s = self._constants
        min_pos, max_pos = self._bounds
        step = self._schedule(self._iteration)

        movement = iterate(
            self._positions,
            self._neighbors,
            self._forces,
            step,
            k_r,
            k_s,
            min_pos,
            max_pos,
            self._locked,
        )
        self._iteration += 1
        self._movement = movement

        self.trigger(
            {
                "type": EventType.tick,
                "iteration": self._iteration,
                "step": step,
                "movement": movement,
                "status": self._status,
            }
        )

        converged = movement == 0.0 or movement < self._epsilon
        if converged:
            self._status = LayoutStatus.converged
        return converged


# -----------------------------------------------------------------------------
# Functional entry points
# -----------------------------------------------------------------------------


def layout(
    positions: MutableSequence[V],
    neighbors: Sequence[Sequence[int]],
    step_fn: StepFunction,
    max_iter: int,
    converge_eps: float,
    k_r: float,
    k_s: float,
    min_pos: V,
    max_pos: V,
    locked: int = 0,
) -> LayoutResult:
    """
    Lay out ``positions`` in place with explicit constants and schedule.

    Args:
        positions: Starting positions, updated in place
        neighbors: neighbors[i] lists the targets of edges leaving node i
        step_fn: Cooling schedule, iteration -> step size
        max_iter: Maximum number of iterations
        converge_eps: Stop once an iteration moves less than this
        k_r: Repulsion constant
        k_s: Attraction constant
        min_pos: Lower corner of the bounding region
        max_pos: Upper corner of the bounding region
        locked: Number of leading nodes that never move

    Returns:
        LayoutResult with the terminal status
    """
    fr = FruchtermanReingoldLayout(
        positions=positions,
        neighbors=neighbors,
        min_pos=min_pos,
        max_pos=max_pos,
        k_r=k_r,
        k_s=k_s,
        locked=locked,
        iterations=max_iter,
        epsilon=converge_eps,
        step_fn=step_fn,
    )
    return fr.run().result


def layout_typical_2d(
    l: Optional[float],  # noqa: E741
    positions: MutableSequence[P2d],
    neighbors: Sequence[Sequence[int]],
    locked: int = 0,
) -> LayoutResult:
    """
    Lay out 2D positions in the unit square with the usual settings.

    300 iterations, epsilon 0.01, linear cooling from 0.1, k_r = l^2 and
    k_s = l, where l defaults to sqrt(1/n).
    """
    fr = FruchtermanReingoldLayout(
        positions=positions,  # type: ignore[arg-type]
        neighbors=neighbors,
        min_pos=P2d(0.0, 0.0),
        max_pos=P2d(1.0, 1.0),
        ideal_length=l,
        locked=locked,
        iterations=DEFAULT_ITERATIONS,
        epsilon=DEFAULT_EPSILON,
        temperature=DEFAULT_TEMPERATURE,
    )
    return fr.run().result


__all__ = [
    "FruchtermanReingoldLayout",
    "DEFAULT_EPSILON",
    "DEFAULT_TEMPERATURE",
    "linear_cooling",
    "default_ideal_length",
    "reset_forces",
    "accumulate_repulsion",
    "accumulate_attraction",
    "integrate_positions",
    "iterate",
    "layout",
    "layout_typical_2d",
]

"""
Base class for iterative layout algorithms.

IterativeLayout provides the shared infrastructure around a tick loop:

- Event system (start/tick/end events)
- Position and adjacency management via properties
- Entry validation
- Iteration budget, status tracking and cooperative stop
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, MutableSequence, Optional, Sequence

if TYPE_CHECKING:
    from typing_extensions import Self

from .types import Event, EventCallback, EventType, LayoutResult, LayoutStatus
from .validation import (
    validate_iterations,
    validate_neighbor_indices,
    validate_shape,
    warn_bidirectional_edges,
)
from .vector import Vector

DEFAULT_ITERATIONS = 300


class IterativeLayout(ABC):
    """
    Abstract base class for iterative layouts.

    The positions sequence is owned by the caller and is updated in place;
    the adjacency is only read.

    Example:
        layout = SomeLayout(
            positions=positions,
            neighbors=[[1], [2], [0]],
            iterations=300,
        )
        result = layout.run().result
    """

    def __init__(
        self,
        *,
        positions: Optional[MutableSequence[Vector]] = None,
        neighbors: Optional[Sequence[Sequence[int]]] = None,
        iterations: int = DEFAULT_ITERATIONS,
        on_start: Optional[EventCallback] = None,
        on_tick: Optional[EventCallback] = None,
        on_end: Optional[EventCallback] = None,
    ) -> None:
        """
        Initialize layout with configuration.

        Args:
            positions: Mutable sequence of starting positions, updated in place
            neighbors: neighbors[i] lists the targets of edges leaving node i
            iterations: Maximum number of iterations
            on_start: Callback for start event
            on_tick: Callback for tick event
            on_end: Callback for end event
        """
        self._positions: MutableSequence[Vector] = positions if positions is not None else []
        self._neighbors: Sequence[Sequence[int]] = (
            neighbors if neighbors is not None else [[] for _ in self._positions]
        )
        self._iterations: int = validate_iterations(int(iterations))
        self._events: dict[EventType, EventCallback] = {}

        self._status: LayoutStatus = LayoutStatus.idle
        self._iteration: int = 0
        self._movement: float = 0.0
        self._stop_requested: bool = False

        if on_start:
            self._events[EventType.start] = on_start
        if on_tick:
            self._events[EventType.tick] = on_tick
        if on_end:
            self._events[EventType.end] = on_end

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def positions(self) -> MutableSequence[Vector]:
        """Get the positions sequence (the caller's object, not a copy)."""
        return self._positions

    @positions.setter
    def positions(self, value: MutableSequence[Vector]) -> None:
        self._positions = value

    @property
    def neighbors(self) -> Sequence[Sequence[int]]:
        """Get the adjacency lists."""
        return self._neighbors

    @neighbors.setter
    def neighbors(self, value: Sequence[Sequence[int]]) -> None:
        self._neighbors = value

    @property
    def iterations(self) -> int:
        """Get maximum iterations."""
        return self._iterations

    @iterations.setter
    def iterations(self, value: int) -> None:
        """Set maximum iterations.

        Raises:
            ValidationError: If value < 1
        """
        self._iterations = validate_iterations(int(value))

    @property
    def status(self) -> LayoutStatus:
        """Current status of the run."""
        return self._status

    @property
    def iteration(self) -> int:
        """Number of iterations executed so far."""
        return self._iteration

    @property
    def movement(self) -> float:
        """Total movement of the last executed iteration."""
        return self._movement

    @property
    def result(self) -> LayoutResult:
        """Summary of the run so far."""
        return LayoutResult(self._status, self._iteration, self._movement)

    # -------------------------------------------------------------------------
    # Event System
    # -------------------------------------------------------------------------

    def on(self, event: EventType | str, callback: EventCallback) -> Self:
        """
        Subscribe to a layout event.

        Args:
            event: Event type (EventType enum or string name)
            callback: Function to call when event fires

        Returns:
            self (for chaining)
        """
        if isinstance(event, str):
            event = EventType[event]
        self._events[event] = callback
        return self

    def trigger(self, event: Event) -> None:
        """Trigger an event, calling the registered callback."""
        event_type = event.get("type")
        if event_type is not None and event_type in self._events:
            self._events[event_type](event)

    # -------------------------------------------------------------------------
    # Validation
    # -------------------------------------------------------------------------

    def validate(self) -> Self:
        """
        Validate positions against adjacency.

        Called automatically by run() but can be called early for fail-fast
        behavior.

        Returns:
            self (for chaining)

        Raises:
            ShapeMismatchError: If len(neighbors) != len(positions) or
                positions have mixed dimensions.
            InvalidNeighborError: If an adjacency entry is out of range.
        """
        validate_shape(self._positions, self._neighbors)
        validate_neighbor_indices(self._neighbors, strict=True)
        warn_bidirectional_edges(self._neighbors)
        return self

    # -------------------------------------------------------------------------
    # Lifecycle Methods
    # -------------------------------------------------------------------------

    @abstractmethod
    def run(self, **kwargs: Any) -> Self:
        """
        Run the layout algorithm.

        Returns:
            self (for chaining)
        """
        pass

    @abstractmethod
    def tick(self) -> bool:
        """
        Perform one iteration of the layout.

        Returns:
            True if converged, False if more iterations are needed.
        """
        pass

    def kick(self) -> LayoutStatus:
        """Run tick() repeatedly until convergence, stop() or max iterations."""
        self._status = LayoutStatus.running
        self._stop_requested = False

        while self._iteration < self._iterations:
            if self.tick():
                self._status = LayoutStatus.converged
                return self._status
            if self._stop_requested:
                self._status = LayoutStatus.stopped
                return self._status

        self._status = LayoutStatus.exhausted
        return self._status

    def stop(self) -> Self:
        """
        Request the loop to stop after the current iteration.

        Intended to be called from a tick callback.
        """
        self._stop_requested = True
        return self


__all__ = [
    "IterativeLayout",
    "DEFAULT_ITERATIONS",
]

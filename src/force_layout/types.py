"""
Common types for force-directed layouts.

This module provides:
- EventType: Layout lifecycle events
- Event: Event payload for callbacks
- LayoutStatus: State of a layout run
- LayoutResult: Summary returned when a run terminates
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Callable, Optional, Sequence, TypedDict, TypeVar

from .vector import Vector


class EventType(IntEnum):
    """
    Layout lifecycle events.

    - start: Layout iterations have begun
    - tick: Fired once per iteration
    - end: Layout has converged, exhausted its budget or been stopped
    """

    start = 0
    tick = 1
    end = 2


class LayoutStatus(Enum):
    """
    State of a layout run.

    idle -> running -> converged | exhausted | stopped
    """

    idle = "idle"
    running = "running"
    converged = "converged"
    exhausted = "exhausted"
    stopped = "stopped"

    @property
    def is_terminal(self) -> bool:
        return self in (LayoutStatus.converged, LayoutStatus.exhausted, LayoutStatus.stopped)


class Event(TypedDict, total=False):
    """Event payload passed to event listeners."""

    type: EventType
    iteration: int
    step: float
    movement: float
    status: LayoutStatus


@dataclass(frozen=True)
class LayoutResult:
    """
    Outcome of a layout run.

    Attributes:
        status: Terminal status (converged, exhausted or stopped)
        iterations: Number of iterations executed
        movement: Total movement of the last executed iteration
    """

    status: LayoutStatus
    iterations: int
    movement: float = 0.0

    @property
    def converged(self) -> bool:
        return self.status is LayoutStatus.converged


V = TypeVar("V", bound=Vector)

# Type aliases
Neighbors = Sequence[Sequence[int]]
StepFunction = Callable[[int], float]
EventCallback = Callable[[Optional[Event]], None]


__all__ = [
    "EventType",
    "Event",
    "LayoutStatus",
    "LayoutResult",
    "V",
    "Neighbors",
    "StepFunction",
    "EventCallback",
]

"""
Position vectors for force-directed layouts.

The layout engine only relies on a small capability set, captured by the
abstract :class:`Vector`:

- zero construction (``new()`` / ``zero()``)
- ``length_squared()``
- ``sub()`` and ``scaled()`` (value-returning)
- ``scale()``, ``add_scaled()``, ``reset()`` and ``clip_within()`` (in place)

Two implementations are provided:

- P2d: plain 2D point, the common case
- VecN: numpy-backed vector of any dimension
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Iterator, Sequence

import numpy as np

if TYPE_CHECKING:
    from typing_extensions import Self

from .validation import InvalidDimensionError, ShapeMismatchError


class Vector(ABC):
    """
    Abstract position/force vector.

    Value-returning operations (``sub``, ``scaled``) never touch ``self``;
    in-place operations (``scale``, ``add_scaled``, ``reset``,
    ``clip_within``) mutate ``self`` and return ``None``.
    """

    __slots__ = ()

    @classmethod
    @abstractmethod
    def new(cls, *args: Any) -> Self:
        """Create the zero vector."""
        pass

    @property
    @abstractmethod
    def dim(self) -> int:
        """Number of coordinates."""
        pass

    @abstractmethod
    def zero(self) -> Self:
        """Zero vector with the same type and dimension as this one."""
        pass

    @abstractmethod
    def copy(self) -> Self:
        pass

    @abstractmethod
    def length_squared(self) -> float:
        """Sum of squared coordinates."""
        pass

    @abstractmethod
    def sub(self, other: Self) -> Self:
        """Return ``self - other`` as a new vector."""
        pass

    @abstractmethod
    def scaled(self, factor: float) -> Self:
        """Return ``factor * self`` as a new vector."""
        pass

    @abstractmethod
    def scale(self, factor: float) -> None:
        """Multiply all coordinates by ``factor`` in place."""
        pass

    @abstractmethod
    def add_scaled(self, factor: float, other: Self) -> None:
        """In place ``self += factor * other``."""
        pass

    @abstractmethod
    def reset(self) -> None:
        """Set all coordinates to zero in place."""
        pass

    @abstractmethod
    def clip_within(self, min_pos: Self, max_pos: Self) -> None:
        """Clamp each coordinate into ``[min_pos[i], max_pos[i]]`` in place."""
        pass

    @abstractmethod
    def __iter__(self) -> Iterator[float]:
        pass

    def length(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.length_squared())

    def __len__(self) -> int:
        return self.dim

    def __getitem__(self, i: int) -> float:
        return tuple(self)[i]


class P2d(Vector):
    """
    Point in the plane.

    Example:
        p = P2d(0.25, 0.5)
        p.add_scaled(2.0, P2d(0.1, 0.0))   # p is now P2d(0.45, 0.5)
    """

    __slots__ = ("x", "y")

    def __init__(self, x: float = 0.0, y: float = 0.0) -> None:
        self.x: float = float(x)
        self.y: float = float(y)

    @classmethod
    def new(cls, *args: Any) -> P2d:
        return cls(0.0, 0.0)

    @property
    def dim(self) -> int:
        return 2

    def zero(self) -> P2d:
        return P2d(0.0, 0.0)

    def copy(self) -> P2d:
        return P2d(self.x, self.y)

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y

    def sub(self, other: P2d) -> P2d:
        return P2d(self.x - other.x, self.y - other.y)

    def scaled(self, factor: float) -> P2d:
        return P2d(self.x * factor, self.y * factor)

    def scale(self, factor: float) -> None:
        self.x *= factor
        self.y *= factor

    def add_scaled(self, factor: float, other: P2d) -> None:
        self.x += factor * other.x
        self.y += factor * other.y

    def reset(self) -> None:
        self.x = 0.0
        self.y = 0.0

    def clip_within(self, min_pos: P2d, max_pos: P2d) -> None:
        if self.x < min_pos.x:
            self.x = min_pos.x
        elif self.x > max_pos.x:
            self.x = max_pos.x

        if self.y < min_pos.y:
            self.y = min_pos.y
        elif self.y > max_pos.y:
            self.y = max_pos.y

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __getitem__(self, i: int) -> float:
        return (self.x, self.y)[i]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, P2d):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"P2d({self.x!r}, {self.y!r})"


class VecN(Vector):
    """
    Vector of arbitrary dimension backed by a numpy float64 array.

    Example:
        origin = VecN.new(3)
        corner = VecN([1.0, 1.0, 1.0])
    """

    __slots__ = ("_coords",)

    def __init__(self, coords: Sequence[float] | np.ndarray) -> None:
        arr = np.array(coords, dtype=np.float64).reshape(-1)
        if arr.size < 1:
            raise InvalidDimensionError(f"Vector dimension must be >= 1, got {arr.size}")
        self._coords: np.ndarray = arr

    @classmethod
    def new(cls, *args: Any) -> VecN:
        """Create the zero vector; ``VecN.new(dim)``."""
        if len(args) != 1:
            raise InvalidDimensionError("VecN.new() requires a dimension")
        dim = int(args[0])
        if dim < 1:
            raise InvalidDimensionError(f"Vector dimension must be >= 1, got {dim}")
        return cls(np.zeros(dim, dtype=np.float64))

    @property
    def dim(self) -> int:
        return int(self._coords.size)

    @property
    def coords(self) -> np.ndarray:
        """Read-only view of the coordinates."""
        view = self._coords.view()
        view.flags.writeable = False
        return view

    def zero(self) -> VecN:
        return VecN(np.zeros_like(self._coords))

    def copy(self) -> VecN:
        return VecN(self._coords.copy())

    def length_squared(self) -> float:
        return float(np.dot(self._coords, self._coords))

    def sub(self, other: VecN) -> VecN:
        return VecN(self._coords - other._coords)

    def scaled(self, factor: float) -> VecN:
        return VecN(self._coords * factor)

    def scale(self, factor: float) -> None:
        self._coords *= factor

    def add_scaled(self, factor: float, other: VecN) -> None:
        self._coords += factor * other._coords

    def reset(self) -> None:
        self._coords.fill(0.0)

    def clip_within(self, min_pos: VecN, max_pos: VecN) -> None:
        np.clip(self._coords, min_pos._coords, max_pos._coords, out=self._coords)

    def __iter__(self) -> Iterator[float]:
        return (float(c) for c in self._coords)

    def __getitem__(self, i: int) -> float:
        return float(self._coords[i])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, VecN):
            return NotImplemented
        return bool(np.array_equal(self._coords, other._coords))

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        inner = ", ".join(repr(float(c)) for c in self._coords)
        return f"VecN([{inner}])"


def make_vector(coords: Sequence[float]) -> Vector:
    """Build a ``P2d`` for two coordinates, a ``VecN`` otherwise."""
    if len(coords) == 2:
        return P2d(coords[0], coords[1])
    return VecN(coords)


def positions_to_array(positions: Sequence[Vector]) -> np.ndarray:
    """
    Stack positions into an ``(n, dim)`` float64 array.

    Raises:
        ShapeMismatchError: If positions have differing dimensions
    """
    if not positions:
        return np.zeros((0, 0), dtype=np.float64)
    dim = positions[0].dim
    arr = np.zeros((len(positions), dim), dtype=np.float64)
    for i, pos in enumerate(positions):
        if pos.dim != dim:
            raise ShapeMismatchError(
                f"Position {i} has dimension {pos.dim}, expected {dim}"
            )
        arr[i, :] = list(pos)
    return arr


def positions_from_array(array: np.ndarray) -> list[Vector]:
    """Convert an ``(n, dim)`` array back into a list of vectors."""
    arr = np.asarray(array, dtype=np.float64)
    if arr.ndim != 2:
        raise ShapeMismatchError(f"Expected a 2D array of positions, got {arr.ndim}D")
    return [make_vector(row.tolist()) for row in arr]


__all__ = [
    "Vector",
    "P2d",
    "VecN",
    "make_vector",
    "positions_to_array",
    "positions_from_array",
]

"""Index, vector and classification value types for the mesh."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Tuple

import numpy as np


class CellType(Enum):
    """Classification of a mesh cell."""

    FLUID = "fluid"
    OBSTACLE = "obstacle"
    # Outside the modelled domain: open air, unmeasured exterior.
    UNKNOWN = "unknown"


@dataclass(frozen=True, order=True)
class Indices:
    """Integer slot of a cell; values outside the mesh extents are legal."""

    east: int
    north: int
    up: int

    def shifted(self, east: int = 0, north: int = 0, up: int = 0) -> "Indices":
        return Indices(self.east + east, self.north + north, self.up + up)

    def as_tuple(self) -> Tuple[int, int, int]:
        return (self.east, self.north, self.up)


_AXES = ("east", "north", "up")


@dataclass(frozen=True)
class Vector:
    """Real vector in (east, north, up) components."""

    east: float
    north: float
    up: float

    ZERO: ClassVar["Vector"]

    @classmethod
    def create(cls, east: float, north: float, up: float) -> "Vector":
        return cls(float(east), float(north), float(up))

    @classmethod
    def from_array(cls, values) -> "Vector":
        arr = np.asarray(values, dtype=float).reshape(-1)
        if arr.shape != (3,):
            raise ValueError(f"Vector expects 3 components, got {arr.shape[0]}")
        return cls(float(arr[0]), float(arr[1]), float(arr[2]))

    def magnitude(self, axes: Tuple[str, str] = ("east", "north")) -> float:
        """Planar magnitude over two of the three axes."""

        first, second = axes
        if first not in _AXES or second not in _AXES or first == second:
            raise ValueError(f"magnitude expects two distinct axes of {_AXES}, got {axes}")
        return math.hypot(getattr(self, first), getattr(self, second))

    def norm(self) -> float:
        return float(np.linalg.norm(self.as_array()))

    def as_array(self) -> np.ndarray:
        return np.array([self.east, self.north, self.up])

    def __add__(self, other: "Vector") -> "Vector":
        return Vector(self.east + other.east, self.north + other.north, self.up + other.up)

    def __sub__(self, other: "Vector") -> "Vector":
        return Vector(self.east - other.east, self.north - other.north, self.up - other.up)

    def __mul__(self, factor: float) -> "Vector":
        return Vector(self.east * factor, self.north * factor, self.up * factor)

    __rmul__ = __mul__


Vector.ZERO = Vector(0.0, 0.0, 0.0)

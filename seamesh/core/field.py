"""Array snapshots of cell attributes over a block of indices."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Tuple

import numpy as np

from .indices import Indices
from .mesh import Mesh

SCALAR_ATTRIBUTES = ("pressure", "density", "viscosity")
VECTOR_ATTRIBUTES = ("position", "velocity")


@dataclass(frozen=True)
class Block:
    """Half-open index ranges ``[start, stop)`` along each axis."""

    east: Tuple[int, int]
    north: Tuple[int, int]
    up: Tuple[int, int]

    def __post_init__(self) -> None:
        for name in ("east", "north", "up"):
            start, stop = getattr(self, name)
            if stop < start:
                raise ValueError(f"Block {name} range [{start}, {stop}) is reversed")

    @classmethod
    def interior(cls, mesh: Mesh) -> "Block":
        east, north, up = mesh.shape
        return cls((0, east), (0, north), (0, up))

    @classmethod
    def layer(cls, up: int, east: Tuple[int, int], north: Tuple[int, int]) -> "Block":
        return cls(tuple(east), tuple(north), (up, up + 1))

    @property
    def shape(self) -> Tuple[int, int, int]:
        return tuple(stop - start for start, stop in (self.east, self.north, self.up))

    def __len__(self) -> int:
        ne, nn, nu = self.shape
        return ne * nn * nu

    def __iter__(self) -> Iterator[Indices]:
        for up in range(*self.up):
            for north in range(*self.north):
                for east in range(*self.east):
                    yield Indices(east, north, up)

    def offset(self, indices: Indices) -> Tuple[int, int, int]:
        return (indices.east - self.east[0], indices.north - self.north[0], indices.up - self.up[0])


class Field:
    """Base class for sampled fields, indexed ``[east, north, up]`` relative to the block."""

    def __init__(self, name: str, mesh: Mesh, block: Block, values: np.ndarray) -> None:
        self.name = name
        self.mesh = mesh
        self.block = block
        self.values = values

    def norm(self) -> float:
        return float(np.linalg.norm(self.values))

    def __array__(self, dtype=None, copy=None) -> np.ndarray:
        if dtype is None:
            return self.values
        return self.values.astype(dtype)

    def __getitem__(self, idx):
        return self.values[idx]


class ScalarField(Field):
    """Scalar attribute sampled over a block."""

    @classmethod
    def sample(cls, mesh: Mesh, attribute: str, block: Block) -> "ScalarField":
        if attribute not in SCALAR_ATTRIBUTES:
            raise KeyError(f"Unknown scalar attribute '{attribute}'")
        values = np.empty(block.shape, dtype=float)
        for indices in block:
            values[block.offset(indices)] = getattr(mesh.creator.apply(indices), attribute)
        return cls(attribute, mesh, block, values)

    def min(self) -> float:
        return float(self.values.min())

    def max(self) -> float:
        return float(self.values.max())


class VectorField(Field):
    """Vector attribute sampled over a block, last axis is (east, north, up)."""

    @classmethod
    def sample(cls, mesh: Mesh, attribute: str, block: Block) -> "VectorField":
        if attribute not in VECTOR_ATTRIBUTES:
            raise KeyError(f"Unknown vector attribute '{attribute}'")
        values = np.empty(block.shape + (3,), dtype=float)
        for indices in block:
            values[block.offset(indices)] = getattr(mesh.creator.apply(indices), attribute).as_array()
        return cls(attribute, mesh, block, values)

    @property
    def east(self) -> np.ndarray:
        return self.values[..., 0]

    @property
    def north(self) -> np.ndarray:
        return self.values[..., 1]

    @property
    def up(self) -> np.ndarray:
        return self.values[..., 2]

    def magnitude(self) -> np.ndarray:
        return np.linalg.norm(self.values, axis=-1)

    def horizontal_magnitude(self) -> np.ndarray:
        return np.hypot(self.east, self.north)

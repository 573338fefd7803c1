"""Rectilinear cell mesh with lazily evaluated cell attributes."""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterator, Optional, Tuple

from .creator import CellCreator, CellData
from .indices import CellType, Indices, Vector

logger = logging.getLogger(__name__)


class Cell:
    """View of one mesh slot; attributes are recomputed on every access."""

    __slots__ = ("indices", "mesh")

    def __init__(self, indices: Indices, mesh: "Mesh") -> None:
        self.indices = indices
        self.mesh = mesh

    def data(self) -> CellData:
        return self.mesh.creator.apply(self.indices)

    def type(self) -> CellType:
        return self.data().type

    def position(self) -> Vector:
        return self.data().position

    def pressure(self) -> float:
        return self.data().pressure

    def velocity(self) -> Vector:
        return self.data().velocity

    def density(self) -> float:
        return self.data().density

    def viscosity(self) -> float:
        return self.data().viscosity

    def _step(self, east: int = 0, north: int = 0, up: int = 0) -> "Cell":
        return Cell(self.indices.shifted(east, north, up), self.mesh)

    def up(self) -> "Cell":
        return self._step(up=1)

    def down(self) -> "Cell":
        return self._step(up=-1)

    def east(self) -> "Cell":
        return self._step(east=1)

    def west(self) -> "Cell":
        return self._step(east=-1)

    def north(self) -> "Cell":
        return self._step(north=1)

    def south(self) -> "Cell":
        return self._step(north=-1)

    def neighbours(self) -> Dict[str, "Cell"]:
        return {
            "east": self.east(),
            "west": self.west(),
            "north": self.north(),
            "south": self.south(),
            "up": self.up(),
            "down": self.down(),
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Cell):
            return NotImplemented
        return self.indices == other.indices and self.mesh is other.mesh

    def __hash__(self) -> int:
        return hash((self.indices, id(self.mesh)))

    def __repr__(self) -> str:
        i = self.indices
        return f"Cell(east={i.east}, north={i.north}, up={i.up})"


class Mesh:
    """Cubic cells of edge ``cell_size`` whose attributes come from ``creator``.

    Any integer triple is a valid query; slots outside the creator's extents
    are the boundary and exterior cells.
    """

    def __init__(self, cell_size: float, creator: CellCreator) -> None:
        if cell_size is None:
            raise ValueError("Mesh requires a cell size")
        if creator is None:
            raise ValueError("Mesh requires a cell creator")
        if not cell_size > 0.0:
            raise ValueError(f"Mesh cell size must be > 0, got {cell_size}")
        self.cell_size = float(cell_size)
        self.creator = creator
        logger.debug("Built mesh %s with cell size %g", creator.shape, self.cell_size)

    @property
    def shape(self) -> Tuple[int, int, int]:
        return self.creator.shape

    @property
    def ncells(self) -> int:
        east, north, up = self.shape
        return east * north * up

    def cell(self, east: int, north: int, up: int) -> Cell:
        return Cell(Indices(east, north, up), self)

    def cell_at(self, indices: Indices) -> Cell:
        return Cell(indices, self)

    def cells(self, block=None) -> Iterator[Cell]:
        """Iterate cells of ``block`` (default: the interior) east fastest, then north, then up."""

        if block is None:
            from .field import Block

            block = Block.interior(self)
        for indices in block:
            yield Cell(indices, self)

    @classmethod
    def from_dict(cls, config: Dict[str, Any]) -> "Mesh":
        mesh_cfg = config.get("mesh", {}) or {}
        cell_size = mesh_cfg.get("cellSize")
        if cell_size is None:
            raise ValueError("mesh.cellSize is required")
        try:
            cell_size = float(cell_size)
        except (TypeError, ValueError) as exc:
            raise ValueError(f"mesh.cellSize must be a number, got {cell_size!r}") from exc
        creator = CellCreator.from_dict(mesh_cfg, config.get("transport"), config.get("rules"))
        return cls(cell_size, creator)

    @staticmethod
    def builder() -> "MeshBuilder":
        return MeshBuilder()

    def __repr__(self) -> str:
        return f"Mesh(cell_size={self.cell_size}, creator={self.creator!r})"


class MeshBuilder:
    def __init__(self) -> None:
        self._cell_size: Optional[float] = None
        self._creator: Optional[CellCreator] = None

    def cell_size(self, value: float) -> "MeshBuilder":
        self._cell_size = value
        return self

    def creator(self, value: CellCreator) -> "MeshBuilder":
        self._creator = value
        return self

    def build(self) -> Mesh:
        return Mesh(self._cell_size, self._creator)

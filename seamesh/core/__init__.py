"""Core mesh data structures."""

from .creator import CellCreator, CellData
from .field import Block, ScalarField, VectorField
from .indices import CellType, Indices, Vector
from .mesh import Cell, Mesh
from .stats import Statistics

__all__ = [
    "Block",
    "Cell",
    "CellCreator",
    "CellData",
    "CellType",
    "Indices",
    "Mesh",
    "ScalarField",
    "Statistics",
    "Vector",
    "VectorField",
]

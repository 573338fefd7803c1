"""Lazily evaluated 3-D seawater cell mesh."""

from .core import Cell, CellCreator, CellData, CellType, Indices, Mesh, Statistics, Vector
from .run import Case

__all__ = [
    "Case",
    "Cell",
    "CellCreator",
    "CellData",
    "CellType",
    "Indices",
    "Mesh",
    "Statistics",
    "Vector",
]

"""Scans over mesh layers feeding running statistics."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Tuple

from ..core.field import Block
from ..core.mesh import Mesh
from ..core.stats import Statistics


@dataclass
class LayerSummary:
    up: int
    block: Block
    pressure: Statistics = field(default_factory=Statistics)
    speed: Statistics = field(default_factory=Statistics)

    def as_dict(self) -> Dict[str, float]:
        return {
            "p_min": self.pressure.min(),
            "p_max": self.pressure.max(),
            "p_mean": self.pressure.mean(),
            "speed_max": self.speed.max(),
        }


def scan_layer(
    mesh: Mesh,
    up: int,
    east: Tuple[int, int],
    north: Tuple[int, int],
) -> LayerSummary:
    """Accumulate pressure and east-north speed over one horizontal layer.

    ``east`` and ``north`` are half-open ranges and may extend past the mesh
    extents to include boundary cells.
    """

    block = Block.layer(up, east, north)
    summary = LayerSummary(up=up, block=block)
    for cell in mesh.cells(block):
        data = cell.data()
        summary.pressure.add(data.pressure)
        summary.speed.add(data.velocity.magnitude(("east", "north")))
    return summary


def default_layer_block(mesh: Mesh) -> Tuple[int, Tuple[int, int], Tuple[int, int]]:
    """Top fluid layer with a one-cell halo on the east and north sides."""

    east, north, up = mesh.shape
    return max(up - 1, 0), (0, east + 1), (0, north + 1)


def normalize(value: float, stats: Statistics) -> float:
    """Map ``value`` into [0, 1] against ``stats``; a flat range maps to 0."""

    low, high = stats.min(), stats.max()
    if high == low:
        return 0.0
    return (value - low) / (high - low)

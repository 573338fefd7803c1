"""Physics models."""

from .constants import (
    GRAVITY_M_PER_S2,
    SEA_LEVEL_PRESSURE_PASCALS,
    SEAWATER_MEAN_DENSITY_KG_PER_M3,
    SEAWATER_MEAN_VISCOSITY,
    pressure_at_depth,
)
from .transport import SeawaterTransport

__all__ = [
    "GRAVITY_M_PER_S2",
    "SEA_LEVEL_PRESSURE_PASCALS",
    "SEAWATER_MEAN_DENSITY_KG_PER_M3",
    "SEAWATER_MEAN_VISCOSITY",
    "SeawaterTransport",
    "pressure_at_depth",
]

"""Physical constants for seawater and the hydrostatic pressure law."""

from __future__ import annotations

SEA_LEVEL_PRESSURE_PASCALS = 101325.0
SEAWATER_MEAN_DENSITY_KG_PER_M3 = 1025.0
SEAWATER_MEAN_VISCOSITY = 0.00108
GRAVITY_M_PER_S2 = 9.80665


def pressure_at_depth(depth: float) -> float:
    """Absolute pressure in Pascals at ``depth`` metres below the surface."""

    return SEA_LEVEL_PRESSURE_PASCALS + SEAWATER_MEAN_DENSITY_KG_PER_M3 * GRAVITY_M_PER_S2 * depth

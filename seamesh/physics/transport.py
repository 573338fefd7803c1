"""Transport properties models."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional

from .constants import SEAWATER_MEAN_DENSITY_KG_PER_M3, SEAWATER_MEAN_VISCOSITY


@dataclass(frozen=True)
class SeawaterTransport:
    rho: float = SEAWATER_MEAN_DENSITY_KG_PER_M3
    mu: float = SEAWATER_MEAN_VISCOSITY

    def __post_init__(self) -> None:
        if not self.rho > 0.0:
            raise ValueError("density must be > 0")
        if not self.mu >= 0.0:
            raise ValueError("viscosity must be >= 0")

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, float]]) -> "SeawaterTransport":
        data = data or {}
        return cls(
            rho=float(data.get("density", SEAWATER_MEAN_DENSITY_KG_PER_M3)),
            mu=float(data.get("viscosity", SEAWATER_MEAN_VISCOSITY)),
        )

    def density(self) -> float:
        return self.rho

    def viscosity(self) -> float:
        return self.mu

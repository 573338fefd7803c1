"""Cell attribute computation from indices."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

from ..physics.constants import SEAWATER_MEAN_DENSITY_KG_PER_M3, SEAWATER_MEAN_VISCOSITY
from ..physics.transport import SeawaterTransport
from .indices import CellType, Indices, Vector
from .rules import (
    AttributeRule,
    FlooredBoxType,
    HydrostaticPressure,
    SurfaceRebasedPosition,
    ZeroVelocity,
    as_rule,
    rule_from_config,
)


@dataclass(frozen=True)
class CellData:
    """Attributes of one cell, evaluated eagerly."""

    type: CellType
    position: Vector
    pressure: float
    velocity: Vector
    density: float
    viscosity: float


def _checked_extent(name: str, size: Any) -> int:
    try:
        value = int(size)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"{name} size must be an integer >= 0, got {size!r}") from exc
    if value != size or value < 0:
        raise ValueError(f"{name} size must be an integer >= 0, got {size!r}")
    return value


class CellCreator:
    """Pure function from :class:`Indices` to :class:`CellData`.

    Each of position, velocity, type and pressure comes from its own rule.
    A rule passed in replaces the built-in one entirely; the built-ins are

    * position: ``(east, north, up - up_size + 1)``
    * velocity: zero everywhere
    * type: floored box (solid below, unknown beyond the other sides)
    * pressure: hydrostatic at ``depth = up_size - up - 1``

    Density and viscosity are constants of the creator.
    """

    def __init__(
        self,
        east_size: int,
        north_size: int,
        up_size: int,
        density: float = SEAWATER_MEAN_DENSITY_KG_PER_M3,
        viscosity: float = SEAWATER_MEAN_VISCOSITY,
        position_function: Optional[Callable[[Indices], Vector]] = None,
        velocity_function: Optional[Callable[[Indices], Vector]] = None,
        type_function: Optional[Callable[[Indices], CellType]] = None,
        pressure_function: Optional[Callable[[Indices], float]] = None,
    ) -> None:
        self.east_size = _checked_extent("east", east_size)
        self.north_size = _checked_extent("north", north_size)
        self.up_size = _checked_extent("up", up_size)
        self.transport = SeawaterTransport(rho=float(density), mu=float(viscosity))
        extents = (self.east_size, self.north_size, self.up_size)
        self.position_rule: AttributeRule[Vector] = (
            as_rule(position_function) if position_function is not None else SurfaceRebasedPosition(*extents)
        )
        self.velocity_rule: AttributeRule[Vector] = (
            as_rule(velocity_function) if velocity_function is not None else ZeroVelocity(*extents)
        )
        self.type_rule: AttributeRule[CellType] = (
            as_rule(type_function) if type_function is not None else FlooredBoxType(*extents)
        )
        self.pressure_rule: AttributeRule[float] = (
            as_rule(pressure_function) if pressure_function is not None else HydrostaticPressure(*extents)
        )

    @property
    def density(self) -> float:
        return self.transport.density()

    @property
    def viscosity(self) -> float:
        return self.transport.viscosity()

    @property
    def shape(self):
        return (self.east_size, self.north_size, self.up_size)

    def apply(self, indices: Indices) -> CellData:
        return CellData(
            type=self.type_rule.evaluate(indices),
            position=self.position_rule.evaluate(indices),
            pressure=float(self.pressure_rule.evaluate(indices)),
            velocity=self.velocity_rule.evaluate(indices),
            density=self.density,
            viscosity=self.viscosity,
        )

    __call__ = apply

    @classmethod
    def from_dict(cls, mesh_cfg: Dict[str, Any], transport_cfg=None, rules_cfg=None) -> "CellCreator":
        east = _checked_extent("east", mesh_cfg.get("east", 0))
        north = _checked_extent("north", mesh_cfg.get("north", 0))
        up = _checked_extent("up", mesh_cfg.get("up", 0))
        transport = SeawaterTransport.from_dict(transport_cfg)
        rules_cfg = rules_cfg or {}
        unknown = set(rules_cfg) - {"position", "velocity", "type", "pressure"}
        if unknown:
            raise ValueError(f"Unknown rule attributes {sorted(unknown)}")
        rules = {
            f"{name}_function": rule_from_config(entry, east, north, up)
            for name, entry in rules_cfg.items()
        }
        return cls(east, north, up, density=transport.rho, viscosity=transport.mu, **rules)

    @staticmethod
    def builder() -> "CellCreatorBuilder":
        return CellCreatorBuilder()

    def __repr__(self) -> str:
        return (
            f"CellCreator(east_size={self.east_size}, north_size={self.north_size}, "
            f"up_size={self.up_size}, density={self.density}, viscosity={self.viscosity})"
        )


class CellCreatorBuilder:
    def __init__(self) -> None:
        self._east_size = 0
        self._north_size = 0
        self._up_size = 0
        self._density = SEAWATER_MEAN_DENSITY_KG_PER_M3
        self._viscosity = SEAWATER_MEAN_VISCOSITY
        self._functions: Dict[str, Callable] = {}

    def east_size(self, value: int) -> "CellCreatorBuilder":
        self._east_size = value
        return self

    def north_size(self, value: int) -> "CellCreatorBuilder":
        self._north_size = value
        return self

    def up_size(self, value: int) -> "CellCreatorBuilder":
        self._up_size = value
        return self

    def density(self, value: float) -> "CellCreatorBuilder":
        self._density = value
        return self

    def viscosity(self, value: float) -> "CellCreatorBuilder":
        self._viscosity = value
        return self

    def position_function(self, func: Callable[[Indices], Vector]) -> "CellCreatorBuilder":
        self._functions["position_function"] = func
        return self

    def velocity_function(self, func: Callable[[Indices], Vector]) -> "CellCreatorBuilder":
        self._functions["velocity_function"] = func
        return self

    def type_function(self, func: Callable[[Indices], CellType]) -> "CellCreatorBuilder":
        self._functions["type_function"] = func
        return self

    def pressure_function(self, func: Callable[[Indices], float]) -> "CellCreatorBuilder":
        self._functions["pressure_function"] = func
        return self

    def build(self) -> CellCreator:
        return CellCreator(
            self._east_size,
            self._north_size,
            self._up_size,
            density=self._density,
            viscosity=self._viscosity,
            **self._functions,
        )

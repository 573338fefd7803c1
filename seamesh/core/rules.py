"""Attribute rules evaluated per cell index and their registry."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, Generic, Optional, Sequence, TypeVar

from ..physics.constants import pressure_at_depth
from ..utils.registry import Registry
from .indices import CellType, Indices, Vector

T = TypeVar("T")


rule_registry = Registry("rule")


def register_rule(name: str):
    return rule_registry.register(name)


def make_rule(name: str, *args, **kwargs) -> "AttributeRule":
    return rule_registry.create(name, *args, **kwargs)


class AttributeRule(ABC, Generic[T]):
    """Deterministic mapping from an index to one cell attribute.

    Rules must be total over all integer indices: out-of-extent slots are
    how boundary cells are observed, so ``evaluate`` must not raise for them.
    """

    @abstractmethod
    def evaluate(self, indices: Indices) -> T:
        """Return the attribute value for ``indices``."""

    def __call__(self, indices: Indices) -> T:
        return self.evaluate(indices)


class FunctionRule(AttributeRule[T]):
    """Adapts a plain callable into a rule."""

    def __init__(self, func: Callable[[Indices], T]) -> None:
        if not callable(func):
            raise ValueError(f"rule function must be callable, got {type(func).__name__}")
        self.func = func

    def evaluate(self, indices: Indices) -> T:
        return self.func(indices)


def as_rule(rule) -> AttributeRule:
    if isinstance(rule, AttributeRule):
        return rule
    return FunctionRule(rule)


@register_rule("surfaceRebased")
class SurfaceRebasedPosition(AttributeRule[Vector]):
    """East/north map to the index; the top layer sits at up = 0."""

    def __init__(self, east_size: int = 0, north_size: int = 0, up_size: int = 0) -> None:
        self.up_size = up_size

    def evaluate(self, indices: Indices) -> Vector:
        return Vector.create(indices.east, indices.north, indices.up - self.up_size + 1)


@register_rule("zero")
class ZeroVelocity(AttributeRule[Vector]):
    def __init__(self, east_size: int = 0, north_size: int = 0, up_size: int = 0) -> None:
        pass

    def evaluate(self, indices: Indices) -> Vector:
        return Vector.ZERO


@register_rule("uniform")
class UniformVelocity(AttributeRule[Vector]):
    def __init__(
        self,
        east_size: int = 0,
        north_size: int = 0,
        up_size: int = 0,
        value: Sequence[float] = (0.0, 0.0, 0.0),
    ) -> None:
        self.value = Vector.from_array(value)

    def evaluate(self, indices: Indices) -> Vector:
        return self.value


@register_rule("flooredBox")
class FlooredBoxType(AttributeRule[CellType]):
    """Solid floor below the box, open (unknown) on every other side."""

    def __init__(self, east_size: int, north_size: int, up_size: int) -> None:
        self.east_size = east_size
        self.north_size = north_size
        self.up_size = up_size

    def evaluate(self, indices: Indices) -> CellType:
        # The floor check comes first so it wins over the open sides.
        if indices.up < 0:
            return CellType.OBSTACLE
        if indices.up > self.up_size - 1:
            return CellType.UNKNOWN
        if indices.east < 0 or indices.east > self.east_size - 1:
            return CellType.UNKNOWN
        if indices.north < 0 or indices.north > self.north_size - 1:
            return CellType.UNKNOWN
        return CellType.FLUID


@register_rule("hydrostatic")
class HydrostaticPressure(AttributeRule[float]):
    """Pressure from depth below the top layer, ``depth = up_size - up - 1``."""

    def __init__(
        self,
        east_size: int = 0,
        north_size: int = 0,
        up_size: int = 0,
        law: Optional[Callable[[float], float]] = None,
    ) -> None:
        self.up_size = up_size
        self.law = law or pressure_at_depth

    def depth(self, indices: Indices) -> float:
        return float(self.up_size - indices.up - 1)

    def evaluate(self, indices: Indices) -> float:
        return float(self.law(self.depth(indices)))


def rule_from_config(entry: Any, east_size: int, north_size: int, up_size: int) -> AttributeRule:
    """Build a registered rule from a name or a ``{type: name, ...}`` mapping."""

    if isinstance(entry, str):
        return make_rule(entry, east_size, north_size, up_size)
    if isinstance(entry, dict):
        options: Dict[str, Any] = dict(entry)
        name = options.pop("type", None)
        if name is None:
            raise ValueError(f"rule configuration {entry!r} is missing 'type'")
        return make_rule(name, east_size, north_size, up_size, **options)
    raise ValueError(f"cannot build a rule from {entry!r}")

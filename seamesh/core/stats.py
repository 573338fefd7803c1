"""Running statistics over a stream of scalars."""

from __future__ import annotations

import math
from typing import Iterable

import numpy as np


class Statistics:
    """Online min/max/mean accumulator.

    ``min()``, ``max()`` and ``mean()`` raise ``ValueError`` until at least
    one value has been added. Not synchronised: use one accumulator per
    thread and :meth:`merge` them afterwards.
    """

    def __init__(self) -> None:
        self.count = 0
        self._min = math.inf
        self._max = -math.inf
        self._sum = 0.0

    def add(self, value: float) -> None:
        value = float(value)
        self.count += 1
        self._sum += value
        if value < self._min:
            self._min = value
        if value > self._max:
            self._max = value

    def add_all(self, values: Iterable[float]) -> None:
        arr = np.asarray(values if isinstance(values, np.ndarray) else list(values), dtype=float)
        if arr.size == 0:
            return
        self.count += int(arr.size)
        self._sum += float(arr.sum())
        self._min = min(self._min, float(arr.min()))
        self._max = max(self._max, float(arr.max()))

    def merge(self, other: "Statistics") -> "Statistics":
        merged = Statistics()
        merged.count = self.count + other.count
        merged._sum = self._sum + other._sum
        merged._min = min(self._min, other._min)
        merged._max = max(self._max, other._max)
        return merged

    def _require_values(self) -> None:
        if self.count == 0:
            raise ValueError("Statistics has no values")

    def min(self) -> float:
        self._require_values()
        return self._min

    def max(self) -> float:
        self._require_values()
        return self._max

    def mean(self) -> float:
        self._require_values()
        return self._sum / self.count

    def __len__(self) -> int:
        return self.count

    def __repr__(self) -> str:
        if self.count == 0:
            return "Statistics(empty)"
        return f"Statistics(count={self.count}, min={self._min:.6g}, max={self._max:.6g})"

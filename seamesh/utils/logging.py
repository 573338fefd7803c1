"""Logging helpers for mesh summaries."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List

logger = logging.getLogger("seamesh")


@dataclass
class SummaryLogger:
    name: str
    history: List[Dict[str, float]] = field(default_factory=list)

    def log(self, layer: int, values: Dict[str, float]) -> None:
        entry = {"layer": layer, **values}
        self.history.append(entry)
        pieces = [f"{self.name} layer {layer:3d}"]
        for key, value in values.items():
            pieces.append(f"{key} = {value:.6g}")
        logger.info(" | ".join(pieces))

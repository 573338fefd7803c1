"""Case management: a YAML-configured mesh and its layer summaries."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional

from ..core.mesh import Mesh
from ..utils.io import read_yaml_file
from ..utils.logging import SummaryLogger
from .scan import LayerSummary, default_layer_block, scan_layer


class Case:
    def __init__(self, config: Dict[str, Any], name: Optional[str] = None) -> None:
        self.config = config
        self.name = name or config.get("name", "case")
        self.mesh = Mesh.from_dict(config)
        self.scan = self._resolve_scan(config.get("scan"))
        self.logger = SummaryLogger(self.name)

    @classmethod
    def from_yaml(cls, path: str | Path) -> "Case":
        case_path = Path(path)
        config = read_yaml_file(case_path)
        return cls(config, name=config.get("name", case_path.stem))

    def _resolve_scan(self, cfg):
        up, east, north = default_layer_block(self.mesh)
        if not cfg:
            return (up, east, north)
        up = int(cfg.get("up", up))
        for key in ("east", "north"):
            rng = cfg.get(key)
            if rng is None:
                continue
            if not isinstance(rng, (list, tuple)) or len(rng) != 2:
                raise ValueError(f"scan.{key} must be [start, stop]")
            start, stop = int(rng[0]), int(rng[1])
            if stop <= start:
                raise ValueError(f"scan.{key} range [{start}, {stop}) is empty")
            if key == "east":
                east = (start, stop)
            else:
                north = (start, stop)
        return (up, east, north)

    def summarize(self) -> LayerSummary:
        up, east, north = self.scan
        summary = scan_layer(self.mesh, up, east, north)
        self.logger.log(up, summary.as_dict())
        return summary

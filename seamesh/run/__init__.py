"""Case setup and mesh scans."""

from .case import Case
from .scan import LayerSummary, normalize, scan_layer

__all__ = ["Case", "LayerSummary", "normalize", "scan_layer"]

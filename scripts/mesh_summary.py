"""Layer statistics for mesh cases.

Usage:
    python scripts/mesh_summary.py --case tests/cases/box.yaml

For each case the configured layer (by default the top fluid layer plus a
one-cell halo) is scanned; pressure and east-north speed extrema are printed
and, with ``--output``, written as JSON.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from seamesh import Case


def main() -> None:
    parser = argparse.ArgumentParser(description="Summarise mesh layers")
    parser.add_argument(
        "--case",
        action="append",
        type=Path,
        required=True,
        help="Path to a case YAML file (repeat for multiple cases)",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Optional JSON file for the aggregated summaries",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    summary: dict[str, dict[str, float]] = {}
    for path in args.case:
        case = Case.from_yaml(path)
        layer = case.summarize()
        values = layer.as_dict()
        print(f"\n=== {case.name} ({path}) layer up={layer.up} ===")
        for key, value in values.items():
            print(f"{key:>12}: {value:.6g}")
        summary[str(path)] = values

    if args.output is not None:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        args.output.write_text(json.dumps(summary, indent=2))
        print(f"\nWrote mesh summary to {args.output}")


if __name__ == "__main__":
    main()

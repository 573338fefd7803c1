import logging
import pathlib
import sys

import pytest

ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from seamesh import Case
from seamesh.core.creator import CellCreator
from seamesh.core.indices import Vector
from seamesh.core.mesh import Mesh
from seamesh.core.stats import Statistics
from seamesh.physics.constants import SEA_LEVEL_PRESSURE_PASCALS, pressure_at_depth
from seamesh.run.scan import normalize, scan_layer

CASES = pathlib.Path(__file__).parent / "cases"


def test_box_case_summary(caplog):
    case = Case.from_yaml(CASES / "box.yaml")
    assert case.name == "box"
    assert case.mesh.shape == (10, 10, 10)
    assert case.scan == (9, (0, 11), (0, 11))

    with caplog.at_level(logging.INFO, logger="seamesh"):
        summary = case.summarize()

    assert summary.pressure.count == 121
    assert summary.pressure.min() == pytest.approx(SEA_LEVEL_PRESSURE_PASCALS)
    assert summary.pressure.max() == pytest.approx(SEA_LEVEL_PRESSURE_PASCALS)
    assert summary.speed.max() == pytest.approx(0.5)
    assert case.logger.history[-1]["layer"] == 9
    assert "box layer   9" in caplog.text


def test_scan_config_override(tmp_path):
    path = tmp_path / "deep.yaml"
    path.write_text(
        "mesh: {cellSize: 2.0, east: 3, north: 2, up: 4}\n"
        "scan: {up: 0, east: [-1, 4], north: [0, 2]}\n",
        encoding="utf-8",
    )
    case = Case.from_yaml(path)
    assert case.name == "deep"
    summary = case.summarize()
    assert summary.pressure.count == 10
    assert summary.pressure.min() == pytest.approx(pressure_at_depth(3))
    assert summary.speed.max() == 0.0


@pytest.mark.parametrize(
    "scan",
    ["{east: 3}", "{east: [1, 1]}", "{north: [2, 0]}"],
)
def test_bad_scan_range(tmp_path, scan):
    path = tmp_path / "bad.yaml"
    path.write_text(f"mesh: {{cellSize: 1.0, east: 1, north: 1, up: 1}}\nscan: {scan}\n", encoding="utf-8")
    with pytest.raises(ValueError, match="scan"):
        Case.from_yaml(path)


def test_scan_layers_at_different_depths_and_normalize():
    creator = CellCreator.builder().east_size(4).north_size(4).up_size(5).build()
    mesh = Mesh.builder().cell_size(1.0).creator(creator).build()
    overall = Statistics()
    for up in range(5):
        overall = overall.merge(scan_layer(mesh, up, (0, 4), (0, 4)).pressure)
    assert overall.min() == pytest.approx(SEA_LEVEL_PRESSURE_PASCALS)
    assert overall.max() == pytest.approx(pressure_at_depth(4))
    assert normalize(mesh.cell(0, 0, 4).pressure(), overall) == pytest.approx(0.0)
    assert normalize(mesh.cell(0, 0, 0).pressure(), overall) == pytest.approx(1.0)
    assert normalize(mesh.cell(0, 0, 2).pressure(), overall) == pytest.approx(0.5)


def test_normalize_flat_range_and_velocity_rule():
    creator = (
        CellCreator.builder()
        .east_size(2)
        .north_size(2)
        .up_size(1)
        .velocity_function(lambda i: Vector.create(i.east, i.north, 100.0))
        .build()
    )
    mesh = Mesh.builder().cell_size(1.0).creator(creator).build()
    summary = scan_layer(mesh, 0, (0, 2), (0, 2))
    assert summary.speed.max() == pytest.approx(2 ** 0.5)
    assert normalize(summary.pressure.max(), summary.pressure) == 0.0

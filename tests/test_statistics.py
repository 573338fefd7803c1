import itertools
import pathlib
import sys

import numpy as np
import pytest

ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from seamesh.core.stats import Statistics


@pytest.mark.parametrize("order", sorted(set(itertools.permutations([3, 1, 4, 1, 5]))))
def test_min_max_independent_of_order(order):
    stats = Statistics()
    for value in order:
        stats.add(value)
    assert stats.min() == 1.0
    assert stats.max() == 5.0
    assert stats.mean() == pytest.approx(2.8)
    assert len(stats) == 5


def test_empty_statistics_raise():
    stats = Statistics()
    for query in (stats.min, stats.max, stats.mean):
        with pytest.raises(ValueError):
            query()


def test_add_all_matches_add():
    values = np.array([0.5, -2.0, 7.25, 3.0])
    bulk = Statistics()
    bulk.add_all(values)
    one_by_one = Statistics()
    for value in values:
        one_by_one.add(value)
    assert (bulk.min(), bulk.max(), bulk.count) == (one_by_one.min(), one_by_one.max(), 4)
    assert bulk.mean() == pytest.approx(one_by_one.mean())
    bulk.add_all([])
    assert bulk.count == 4


def test_merge_combines_accumulators():
    left, right = Statistics(), Statistics()
    left.add_all([1.0, 2.0])
    right.add_all([-1.0, 10.0])
    merged = left.merge(right)
    assert (merged.min(), merged.max(), merged.count) == (-1.0, 10.0, 4)
    assert left.merge(Statistics()).max() == 2.0

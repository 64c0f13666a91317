import pytest

from fzzlib.fuzzy.core.fuzzify import fuzzify, membership_table
from fzzlib.fuzzy.model.variable import LinguisticVariable


@pytest.fixture
def distance():
    var = LinguisticVariable("distance", 3)
    var.set_fcn(0, -0.5, 0.0, 0.5, "small")
    var.set_fcn(1, 0.0, 0.5, 1.0, "medium")
    var.set_fcn(2, 0.5, 1.0, 1.5, "big")
    return var


def test_two_adjacent_sets(distance):
    res = fuzzify(distance, 0.2)
    assert [r.set_index for r in res] == [0, 1]
    assert res[0].membership == pytest.approx(0.6)
    assert res[1].membership == pytest.approx(0.4)


@pytest.mark.parametrize("x", [0.01, 0.2, 0.25, 0.49, 0.6, 0.75, 0.99])
def test_contiguous_layout_sums_to_one(distance, x):
    res = fuzzify(distance, x)
    assert len(res) == 2
    assert sum(r.membership for r in res) == pytest.approx(1.0)


def test_top_activates_single_set(distance):
    # 0.5 is the right end of 'small' and the left end of 'big'
    res = fuzzify(distance, 0.5)
    assert len(res) == 1
    assert res[0].set_index == 1
    assert res[0].membership == 1.0


def test_outside_every_set(distance):
    assert fuzzify(distance, 2.0) == []
    assert fuzzify(distance, -0.5) == []


def test_undefined_slots_are_skipped():
    var = LinguisticVariable("speed", 3)
    var.set_fcn(2, 1.0, 2.0, 3.0, "fast")
    res = fuzzify(var, 1.5)
    assert len(res) == 1
    assert res[0].set_index == 2
    assert res[0].membership == pytest.approx(0.5)


def test_membership_table_lists_zeros(distance):
    table = membership_table(distance, 0.2)
    assert [name for name, _ in table] == ["small", "medium", "big"]
    assert table[2][1] == 0.0

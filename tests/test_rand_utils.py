import pytest

from vfcutils.rand_utils import rand_float, rand_int, seed


def test_rand_int_equal_bounds_returns_min():
    assert rand_int(3, 3) == 3


def test_rand_int_inverted_bounds_returns_min():
    assert rand_int(9, 2) == 9


@pytest.mark.parametrize("low,high", [(0, 5), (-10, 10), (100, 101)])
def test_rand_int_stays_in_range(low, high):
    seed()
    for _ in range(500):
        value = rand_int(low, high)
        assert low <= value <= high
        assert isinstance(value, int)


def test_rand_int_reaches_both_ends():
    seen = {rand_int(0, 1) for _ in range(500)}
    assert seen == {0, 1}


def test_rand_float_equal_bounds_returns_min():
    assert rand_float(1.5, 1.5) == 1.5


def test_rand_float_inverted_bounds_returns_min():
    assert rand_float(4.0, -1.0) == 4.0


@pytest.mark.parametrize("low,high", [(0.0, 1.0), (-2.5, 2.5), (10.0, 10.5)])
def test_rand_float_stays_in_range(low, high):
    for _ in range(500):
        value = rand_float(low, high)
        assert low <= value <= high
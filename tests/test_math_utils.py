import pytest

from vfcutils.math_utils import Vec2, clamp, clampf, maximum, minimum


@pytest.mark.parametrize(
    "number,low,high,expected",
    [(5.0, 0.0, 10.0, 5.0), (-1.0, 0.0, 10.0, 0.0), (11.5, 0.0, 10.0, 10.0)],
)
def test_clampf(number, low, high, expected):
    assert clampf(number, low, high) == expected


def test_clamp_returns_float_of_bound():
    result = clamp(50, 0, 20)
    assert result == 20
    assert isinstance(result, float)


def test_clamp_truncates_arguments():
    assert clamp(7.9, 0, 10) == 7.0


def test_clamp_within_range_is_identity():
    for value in range(-5, 6):
        assert clamp(value, -5, 5) == value


def test_maximum_and_minimum():
    assert maximum(1.0, 2.0) == 2.0
    assert maximum(3.0, -3.0) == 3.0
    assert minimum(1.0, 2.0) == 1.0
    assert minimum(3.0, -3.0) == -3.0


def test_maximum_minimum_cover_both_values():
    for a, b in [(1.0, 4.0), (-2.0, -7.0), (3.0, 3.0)]:
        assert {maximum(a, b), minimum(a, b)} == {a, b}
        assert minimum(a, b) <= maximum(a, b)


def test_vec2_add_sub_round_trip():
    a = Vec2(1.5, -2.0)
    b = Vec2(0.5, 4.0)
    assert (a + b) - b == a


def test_vec2_add_components():
    assert Vec2(1.0, 2.0) + Vec2(3.0, 4.0) == Vec2(4.0, 6.0)


def test_vec2_scale_by_two_equals_self_sum():
    a = Vec2(1.25, -3.5)
    assert a.scale(2) == a + a


def test_vec2_scale_by_zero_and_one():
    a = Vec2(7.0, -9.0)
    assert a.scale(0) == Vec2(0.0, 0.0)
    assert a.scale(1) == a


def test_vec2_is_immutable():
    a = Vec2(1.0, 1.0)
    with pytest.raises(AttributeError):
        a.x = 2.0  # type: ignore[misc]
    assert a.x == 1.0
    assert a == Vec2(1.0, 1.0)


def test_vec2_add_rejects_other_types():
    with pytest.raises(TypeError):
        Vec2(1.0, 1.0) + 3  # type: ignore[operator]
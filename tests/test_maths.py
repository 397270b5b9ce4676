import math

import pytest

from kepler.maths import Coordinate, EuclideanVector, clamp

EV = EuclideanVector

VECTOR1 = EV(4.4, 7.7)


def test_vector_is_equal_to_vector_with_same_values():
    assert VECTOR1 == EV(4.4, 7.7)


def test_vector_is_not_equal_to_vector_with_different_components():
    assert VECTOR1 != EV(4.5, 7.7)
    assert VECTOR1 != EV(4.4, 7.8)


def test_vector_is_comparable_to_its_length():
    assert EV(1.0, 0.0) == 1.0
    assert EV(1.0, 0.0) != 2.0
    assert EV(4.0, 3.0) == 5.0
    assert EV(4.0, 3.0) != 1.0


def test_length_comparison_is_exact():
    assert EV(0.1, 0.2) != 0.2236068


@pytest.mark.parametrize("v", [EV(4.0, 3.0), EV(-0.001, 7.0), EV(1e6, -2.5), EV(0.0, -3.0)])
def test_versor_has_unit_length(v):
    assert v.versor().magnitude() == pytest.approx(1.0)


def test_versor_keeps_direction():
    u = EV(3.0, -4.0).versor()
    assert u.dx == pytest.approx(0.6)
    assert u.dy == pytest.approx(-0.8)


def test_versor_of_zero_vector_fails():
    with pytest.raises(ZeroDivisionError):
        EV(0.0, 0.0).versor()


def test_between_points_from_start_to_end():
    a = Coordinate(1.0, 2.0)
    b = Coordinate(4.0, 6.0)
    v = EV.between(a, b)
    assert v == EV(3.0, 4.0)
    assert v.magnitude() == pytest.approx(math.dist((1.0, 2.0), (4.0, 6.0)))
    assert EV.between(a, b) == -EV.between(b, a)


def test_arithmetic():
    v = EV(1.0, -2.0)
    assert v + EV(0.5, 0.5) == EV(1.5, -1.5)
    assert v - EV(1.0, 1.0) == EV(0.0, -3.0)
    assert v * 2.0 == EV(2.0, -4.0)
    assert 2.0 * v == EV(2.0, -4.0)
    assert v / 2.0 == EV(0.5, -1.0)
    assert -v == EV(-1.0, 2.0)


def test_in_place_addition_rebinds():
    v = EV(1.0, 1.0)
    original = v
    v += EV(1.0, 0.0)
    assert v == EV(2.0, 1.0)
    assert original == EV(1.0, 1.0)


def test_coordinate_moves_by_vector():
    assert Coordinate(1.0, 1.0) + EV(2.0, -1.0) == Coordinate(3.0, 0.0)


def test_coordinate_difference_is_vector():
    assert Coordinate(5.0, 5.0) - Coordinate(2.0, 1.0) == EV(3.0, 4.0)


def test_towards_is_position_vector():
    assert EV.towards(Coordinate(-3.0, 8.0)) == EV(-3.0, 8.0)


def test_coordinate_from_tuple():
    assert Coordinate.from_tuple((3, 4)) == Coordinate(3.0, 4.0)


def test_vector_display_uses_four_decimals():
    assert str(EV(1.0, -2.123456)) == "(1.0000, -2.1235)"


def test_clamp():
    assert clamp(5, 0, 3) == 3
    assert clamp(-1, 0, 3) == 0
    assert clamp(2, 0, 3) == 2

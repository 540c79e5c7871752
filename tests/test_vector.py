import dataclasses
import math

import pytest

from orrery.vector import Vector2D


def test_add_then_subtract_round_trip():
    a = Vector2D(1.25, -3.5)
    b = Vector2D(-7.0, 2.75)
    assert (a + b) - b == a


def test_negation_cancels():
    a = Vector2D(4.0, -9.0)
    assert a + (-a) == Vector2D.zero()


def test_scalar_multiply_and_divide_round_trip():
    a = Vector2D(3.0, -6.0)
    result = (a * 2.5) / 2.5
    assert result.as_tuple() == pytest.approx(a.as_tuple())


def test_right_multiplication_matches_left():
    a = Vector2D(1.5, 2.0)
    assert 3 * a == a * 3


def test_divide_by_zero_leaves_vector_unchanged():
    a = Vector2D(5.0, -2.0)
    assert a / 0 == a


def test_normalized_rebuilds_original_with_magnitude():
    a = Vector2D(-3.0, 8.0)
    rebuilt = a.normalized() * a.magnitude()
    assert rebuilt.as_tuple() == pytest.approx(a.as_tuple())


def test_normalized_zero_vector_is_zero():
    assert Vector2D.zero().normalized() == Vector2D.zero()


def test_dot_with_self_is_magnitude_squared():
    a = Vector2D(2.5, -1.5)
    assert a.dot(a) == pytest.approx(a.magnitude_squared())
    assert a.magnitude() ** 2 == pytest.approx(a.magnitude_squared())


def test_cross_is_antisymmetric():
    a = Vector2D(1.0, 2.0)
    b = Vector2D(-4.0, 0.5)
    assert a.cross(b) == pytest.approx(-b.cross(a))


def test_angle_between_perpendicular():
    assert Vector2D(2.0, 0.0).angle_between(Vector2D(0.0, 5.0)) == pytest.approx(math.pi / 2)


def test_angle_between_zero_vector_is_zero():
    assert Vector2D(1.0, 1.0).angle_between(Vector2D.zero()) == 0


def test_angle_between_is_symmetric():
    a = Vector2D(1.0, 3.0)
    b = Vector2D(-2.0, 0.5)
    assert a.angle_between(b) == pytest.approx(b.angle_between(a))


def test_squared_distance_matches_difference():
    a = Vector2D(1.0, 2.0)
    b = Vector2D(4.0, -2.0)
    assert Vector2D.squared_distance(a, b) == pytest.approx((a - b).magnitude_squared())


def test_unpacking_and_as_tuple():
    x, y = Vector2D(7.5, -1.25)
    assert (x, y) == (7.5, -1.25)
    assert Vector2D(7.5, -1.25).as_tuple() == (7.5, -1.25)


def test_string_form():
    assert str(Vector2D(1.5, -2.0)) == "(1.5, -2)"


def test_vectors_are_immutable():
    a = Vector2D(1.0, 2.0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        a.x = 5.0  # type: ignore[misc]
    assert a.as_tuple() == (1.0, 2.0)
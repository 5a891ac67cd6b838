import math

import pytest

from rayforge.vector import Ray, Vector3


def test_default_is_zero():
    v = Vector3()
    assert (v.x, v.y, v.z) == (0.0, 0.0, 0.0)


def test_components():
    v = Vector3(1.0, 2.0, 3.0)
    assert (v.x, v.y, v.z) == (1.0, 2.0, 3.0)


def test_addition():
    assert Vector3(1, 2, 3) + Vector3(4, 5, 6) == Vector3(5, 7, 9)


def test_subtraction():
    assert Vector3(4, 5, 6) - Vector3(1, 2, 3) == Vector3(3, 3, 3)


def test_scalar_multiplication_both_sides():
    v = Vector3(1, 2, 3)
    assert v * 2.0 == Vector3(2, 4, 6)
    assert 2.0 * v == Vector3(2, 4, 6)


def test_division():
    assert Vector3(2, 4, 6) / 2.0 == Vector3(1, 2, 3)


def test_negation():
    assert -Vector3(1, 2, 3) == Vector3(-1, -2, -3)


def test_dot():
    assert Vector3(1, 2, 3).dot(Vector3(4, 5, 6)) == 32.0


def test_cross():
    assert Vector3(1, 0, 0).cross(Vector3(0, 1, 0)) == Vector3(0, 0, 1)


def test_length():
    assert Vector3(3, 4, 0).length() == 5.0


def test_normalized():
    n = Vector3(3, 4, 0).normalized()
    assert n.x == pytest.approx(0.6)
    assert n.y == pytest.approx(0.8)
    assert n.z == pytest.approx(0.0)
    assert n.length() == pytest.approx(1.0)


def test_normalized_zero_vector_stays_zero():
    assert Vector3().normalized() == Vector3(0, 0, 0)


def test_str():
    assert str(Vector3(1.0, 2.0, 3.0)) == "(1.0, 2.0, 3.0)"


def test_iteration():
    assert list(Vector3(1, 2, 3)) == [1, 2, 3]


def test_ray_keeps_unit_direction():
    ray = Ray(Vector3(1, 2, 3), Vector3(0, 1, 0))
    assert ray.origin == Vector3(1, 2, 3)
    assert ray.direction == Vector3(0, 1, 0)


def test_ray_normalizes_direction():
    ray = Ray(Vector3(), Vector3(3, 4, 0))
    assert ray.direction.x == pytest.approx(0.6, abs=0.01)
    assert ray.direction.y == pytest.approx(0.8, abs=0.01)
    assert ray.direction.z == pytest.approx(0.0, abs=0.01)
    assert math.isclose(ray.direction.length(), 1.0, abs_tol=0.01)


def test_ray_at():
    ray = Ray(Vector3(1, 2, 3), Vector3(1, 0, 0))
    assert ray.at(2.0) == Vector3(3, 2, 3)
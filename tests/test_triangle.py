import pytest

from rayforge.color import Color
from rayforge.material import Material
from rayforge.primitives.triangle import Triangle
from rayforge.vector import Ray, Vector3


@pytest.fixture
def triangle():
    return Triangle(
        Vector3(0.0, 0.0, 0.0),
        Vector3(2.0, 0.0, 0.0),
        Vector3(1.0, 2.0, 0.0),
        Material(color=Color(255, 0, 255)),
    )


def test_getters(triangle):
    center = triangle.center
    assert center.x == pytest.approx(1.0)
    assert center.y == pytest.approx(2.0 / 3.0)
    assert center.z == pytest.approx(0.0)
    assert triangle.color == Color(255, 0, 255)


def test_ray_hit(triangle):
    t = triangle.intersect(Ray(Vector3(1.0, 1.0, -1.0), Vector3(0.0, 0.0, 1.0)))
    assert t == pytest.approx(1.0)


def test_ray_miss_outside(triangle):
    assert triangle.intersect(Ray(Vector3(3.0, 1.0, -1.0), Vector3(0.0, 0.0, 1.0))) is None


def test_ray_miss_parallel(triangle):
    assert triangle.intersect(Ray(Vector3(1.0, 1.0, 1.0), Vector3(1.0, 0.0, 0.0))) is None


def test_ray_behind_misses(triangle):
    assert triangle.intersect(Ray(Vector3(1.0, 1.0, -1.0), Vector3(0.0, 0.0, -1.0))) is None


def test_normal(triangle):
    normal = triangle.normal_at(Vector3(0.0, 0.0, 0.0))
    assert tuple(normal) == pytest.approx((0.0, 0.0, 1.0))


def test_base_center_equals_center(triangle):
    assert tuple(triangle.base_center) == pytest.approx(tuple(triangle.center))
import pytest

from rayforge.color import Color
from rayforge.material import Material
from rayforge.primitives.plane import Plane
from rayforge.vector import Ray, Vector3


@pytest.fixture
def plane():
    return Plane(Vector3(0.0, 1.0, 0.0), 2.0, Material(color=Color(0, 255, 0)))


def test_getters(plane):
    assert tuple(plane.normal_at(Vector3(0.0, 0.0, 0.0))) == (0.0, 1.0, 0.0)
    assert plane.color.g == 255
    assert tuple(plane.center) == (0.0, 2.0, 0.0)


def test_ray_hit(plane):
    t = plane.intersect(Ray(Vector3(0.0, 5.0, 0.0), Vector3(0.0, -1.0, 0.0)))
    assert t == pytest.approx(3.0)


def test_ray_miss_parallel(plane):
    assert plane.intersect(Ray(Vector3(0.0, 5.0, 0.0), Vector3(1.0, 0.0, 0.0))) is None


def test_ray_miss_pointing_away(plane):
    assert plane.intersect(Ray(Vector3(0.0, 0.0, 0.0), Vector3(0.0, -1.0, 0.0))) is None


def test_normal_is_normalized():
    plane = Plane(Vector3(0.0, 3.0, 4.0), 1.0)
    assert plane.normal.length() == pytest.approx(1.0)


def test_hit_point_lies_on_plane(plane):
    ray = Ray(Vector3(1.0, 7.0, -2.0), Vector3(0.3, -1.0, 0.5))
    t = plane.intersect(ray)
    assert ray.at(t).dot(plane.normal) == pytest.approx(plane.distance)
from dataclasses import dataclass

from rayforge.camera import Camera
from rayforge.color import Color
from rayforge.material import Material
from rayforge.primitives.sphere import Sphere
from rayforge.scene import Scene
from rayforge.vector import Ray, Vector3


@dataclass
class _PointLight:
    position: Vector3
    intensity: float = 1.0

    def direction_from(self, point: Vector3) -> Vector3:
        return (self.position - point).normalized()


def test_default_ambient_is_zero():
    assert Scene().ambient_intensity == 0.0


def test_add_primitive_feeds_list_and_root():
    scene = Scene()
    sphere = Sphere(Vector3(0.0, 0.0, 5.0), 1.0, Material(color=Color(255, 0, 0)))
    scene.add_primitive(sphere)
    assert scene.primitives == [sphere]
    assert scene.root.primitive_at(0) is sphere
    ray = Ray(Vector3(), Vector3(0.0, 0.0, 1.0))
    assert scene.root.intersect(ray) == sphere.intersect(ray)


def test_add_light_keeps_order():
    scene = Scene()
    first = _PointLight(Vector3(0.0, 10.0, 0.0))
    second = _PointLight(Vector3(0.0, -10.0, 0.0), 0.5)
    scene.add_light(first)
    scene.add_light(second)
    assert scene.lights == [first, second]


def test_camera_is_replaceable():
    camera = Camera(position=Vector3(0.0, 1.0, -5.0))
    scene = Scene(camera=camera)
    assert scene.camera.position == Vector3(0.0, 1.0, -5.0)


def test_scenes_do_not_share_state():
    first = Scene()
    second = Scene()
    first.add_primitive(Sphere(Vector3(), 1.0))
    assert second.primitives == []
    assert len(second.root) == 0
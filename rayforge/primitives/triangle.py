"""Triangle primitive."""

from __future__ import annotations

from dataclasses import dataclass, field

from rayforge.color import Color
from rayforge.material import Material
from rayforge.vector import Ray, Vector3

_EPSILON = 1e-6
_THIRD = 0.33333333


@dataclass(eq=False)
class Triangle:
    """A triangle with vertices ``a``, ``b`` and ``c``."""

    a: Vector3
    b: Vector3
    c: Vector3
    material: Material = field(default_factory=Material)
    edge1: Vector3 = field(init=False, repr=False)
    edge2: Vector3 = field(init=False, repr=False)
    normal: Vector3 = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.edge1 = self.b - self.a
        self.edge2 = self.c - self.a
        self.normal = self.edge1.cross(self.edge2).normalized()

    @property
    def color(self) -> Color:
        return self.material.color

    @property
    def center(self) -> Vector3:
        """The centroid of the three vertices."""
        return Vector3(
            (self.a.x + self.b.x + self.c.x) * _THIRD,
            (self.a.y + self.b.y + self.c.y) * _THIRD,
            (self.a.z + self.b.z + self.c.z) * _THIRD,
        )

    @property
    def base_center(self) -> Vector3:
        return self.center

    def intersect(self, ray: Ray) -> float | None:
        """Distance to the triangle along the ray, or None."""
        direction = ray.direction
        h = direction.cross(self.edge2)
        det = self.edge1.dot(h)
        if abs(det) < _EPSILON:
            return None
        inv = 1.0 / det
        s = ray.origin - self.a
        u = inv * s.dot(h)
        if u < 0.0 or u > 1.0:
            return None
        q = s.cross(self.edge1)
        v = inv * direction.dot(q)
        if v < 0.0 or u + v > 1.0:
            return None
        t = inv * self.edge2.dot(q)
        return t if t > _EPSILON else None

    def normal_at(self, point: Vector3) -> Vector3:
        """The triangle's unit normal, the same everywhere."""
        return self.normal
"""Sphere primitive."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from rayforge.color import Color
from rayforge.material import Material
from rayforge.vector import Ray, Vector3

_MIN_DISTANCE = 0.001


@dataclass(eq=False)
class Sphere:
    """A sphere given by its centre and radius."""

    center: Vector3
    radius: float
    material: Material = field(default_factory=Material)

    @property
    def color(self) -> Color:
        return self.material.color

    def intersect(self, ray: Ray) -> float | None:
        """Distance to the nearest hit in front of the ray, or None."""
        oc = ray.origin - self.center
        a = ray.direction.dot(ray.direction)
        if a == 0:
            return None
        b = 2.0 * oc.dot(ray.direction)
        c = oc.dot(oc) - self.radius * self.radius
        discriminant = b * b - 4 * a * c
        if discriminant < 0:
            return None
        root = math.sqrt(discriminant)
        for t in ((-b - root) / (2.0 * a), (-b + root) / (2.0 * a)):
            if t > _MIN_DISTANCE:
                return t
        return None

    def normal_at(self, point: Vector3) -> Vector3:
        """Outward unit normal at a point on the surface."""
        return (point - self.center).normalized()
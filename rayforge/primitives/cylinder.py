"""Capped or infinite cylinder primitive."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from rayforge.color import Color
from rayforge.material import Material
from rayforge.primitives.rotation import (
    apply_inverse_rotation,
    rotate_x,
    rotate_y,
    rotate_z,
)
from rayforge.vector import Ray, Vector3

_EPSILON = 1e-6
_CAP_TOLERANCE = 1e-3


def _to_world(v: Vector3, rotation: Vector3) -> Vector3:
    return rotate_x(rotate_y(rotate_z(v, rotation.z), rotation.y), rotation.x)


@dataclass(eq=False)
class Cylinder:
    """A cylinder rising ``height`` along the local Y axis from its base
    centre; an infinite height removes the caps. ``rotation`` is in degrees."""

    base_center: Vector3
    radius: float
    height: float
    rotation: Vector3 = field(default_factory=Vector3)
    material: Material = field(default_factory=Material)

    @property
    def infinite(self) -> bool:
        return self.height == math.inf

    @property
    def color(self) -> Color:
        return self.material.color

    @property
    def center(self) -> Vector3:
        return self.base_center + Vector3(0, self.height * 0.5, 0)

    def intersect(self, ray: Ray) -> float | None:
        """Distance to the nearest hit on the side or caps, or None."""
        origin = apply_inverse_rotation(ray.origin - self.base_center, self.rotation)
        direction = apply_inverse_rotation(ray.direction, self.rotation)
        radius2 = self.radius * self.radius

        a = direction.x**2 + direction.z**2
        b = 2.0 * (origin.x * direction.x + origin.z * direction.z)
        c = origin.x**2 + origin.z**2 - radius2
        discriminant = b * b - 4 * a * c

        side = None
        if discriminant >= 0 and abs(a) > _EPSILON:
            root = math.sqrt(discriminant)
            for t in ((-b - root) / (2.0 * a), (-b + root) / (2.0 * a)):
                if t <= 0:
                    continue
                hit = origin + direction * t
                if self.infinite or 0 <= hit.y <= self.height:
                    side = t
                    break

        cap = None
        if not self.infinite and abs(direction.y) > _EPSILON:
            for y_cap in (0.0, self.height):
                t = (y_cap - origin.y) / direction.y
                p = origin + direction * t
                if p.x * p.x + p.z * p.z <= radius2 and t > 0:
                    if cap is None or t < cap:
                        cap = t

        if side is not None and (cap is None or side < cap):
            return side
        return cap

    def normal_at(self, point: Vector3) -> Vector3:
        """Unit normal at a point on the side or caps."""
        local = apply_inverse_rotation(point - self.base_center, self.rotation)
        if not self.infinite:
            if abs(local.y) < _CAP_TOLERANCE:
                return _to_world(Vector3(0, -1, 0), self.rotation)
            if abs(local.y - self.height) < _CAP_TOLERANCE:
                return _to_world(Vector3(0, 1, 0), self.rotation)
        return _to_world(Vector3(local.x, 0, local.z).normalized(), self.rotation)
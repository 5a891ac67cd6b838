"""Torus primitive, intersected by sphere tracing its distance field."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from rayforge.color import Color
from rayforge.material import Material
from rayforge.primitives.rotation import apply_inverse_rotation, apply_rotation
from rayforge.vector import Ray, Vector3

_MAX_DISTANCE = 1000.0
_HIT_DISTANCE = 1e-3
_MAX_STEPS = 256


@dataclass(eq=False)
class Torus:
    """A torus around the local Y axis, rotated by ``rotation`` degrees."""

    center: Vector3
    major_radius: float
    minor_radius: float
    rotation: Vector3 = field(default_factory=Vector3)
    material: Material = field(default_factory=Material)

    @property
    def color(self) -> Color:
        return self.material.color

    @property
    def base_center(self) -> Vector3:
        return self.center

    def _distance(self, p: Vector3) -> float:
        qx = math.hypot(p.x, p.z) - self.major_radius
        return math.hypot(qx, p.y) - self.minor_radius

    def intersect(self, ray: Ray) -> float | None:
        """Distance to the surface along the ray, or None."""
        origin = apply_inverse_rotation(ray.origin - self.center, self.rotation)
        direction = apply_inverse_rotation(ray.direction, self.rotation).normalized()
        total = 0.0
        for _ in range(_MAX_STEPS):
            dist = self._distance(origin + direction * total)
            if abs(dist) < _HIT_DISTANCE:
                return total
            total += dist
            if total > _MAX_DISTANCE:
                break
        return None

    def normal_at(self, point: Vector3) -> Vector3:
        """Outward unit normal at a point on the surface."""
        local = apply_inverse_rotation(point - self.center, self.rotation)
        radial = math.hypot(local.x, local.z)
        scale = (radial - self.major_radius) / radial if radial else 0.0
        normal = Vector3(local.x * scale, local.y, local.z * scale)
        return apply_rotation(normal.normalized(), self.rotation)
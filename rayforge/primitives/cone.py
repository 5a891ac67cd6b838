"""Cone primitive, finite with a base cap or infinite."""

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
class Cone:
    """A cone whose base disc sits at ``base_center`` and whose apex lies
    ``height`` along the local Y axis; a negative height points it down and
    an infinite height makes it unbounded. ``rotation`` is in degrees."""

    base_center: Vector3
    radius: float
    height: float
    rotation: Vector3 = field(default_factory=Vector3)
    material: Material = field(default_factory=Material)
    infinite: bool = field(init=False)
    axis: Vector3 = field(init=False, repr=False)
    apex: Vector3 = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.infinite = math.isinf(self.height)
        self.axis = Vector3(0, 1, 0) if self.height >= 0 else Vector3(0, -1, 0)
        self.height = abs(self.height)
        self.apex = (
            Vector3() if self.infinite else self.base_center + self.axis * self.height
        )

    @property
    def color(self) -> Color:
        return self.material.color

    @property
    def center(self) -> Vector3:
        return self.base_center + self.axis * (self.height / 2)

    def _tip_offset(self) -> Vector3:
        """Apex position relative to the base centre, as used for tracing."""
        if self.infinite:
            return self.axis
        return self.apex - self.base_center

    def intersect(self, ray: Ray) -> float | None:
        """Distance to the nearest hit on the body or base, or None."""
        origin = apply_inverse_rotation(ray.origin - self.base_center, self.rotation)
        direction = apply_inverse_rotation(ray.direction, self.rotation)
        co = origin - self._tip_offset()
        k = 1.0 if self.infinite else self.radius / self.height
        k2 = k * k

        a = direction.x**2 + direction.z**2 - k2 * direction.y**2
        b = 2 * (direction.x * co.x + direction.z * co.z - k2 * direction.y * co.y)
        c = co.x**2 + co.z**2 - k2 * co.y**2
        discriminant = b * b - 4 * a * c

        body = None
        if discriminant >= 0 and abs(a) > _EPSILON:
            root = math.sqrt(discriminant)
            for t in ((-b - root) / (2 * a), (-b + root) / (2 * a)):
                if t <= 0:
                    continue
                hit = origin + direction * t
                if not self.infinite and not 0 <= hit.y <= self.height:
                    continue
                body = t
                break

        cap = None
        if not self.infinite and abs(direction.y) > _EPSILON:
            t = -origin.y / direction.y
            if t > 0:
                p = origin + direction * t
                if p.x * p.x + p.z * p.z <= self.radius * self.radius:
                    cap = t

        if body is not None and (cap is None or body < cap):
            return body
        return cap

    def normal_at(self, point: Vector3) -> Vector3:
        """Unit normal at a point on the body or base."""
        local = apply_inverse_rotation(point - self.base_center, self.rotation)
        from_apex = local - self._tip_offset()
        r = math.hypot(from_apex.x, from_apex.z)
        slope = self.radius / self.height
        if not self.infinite and abs(local.y) < _CAP_TOLERANCE:
            normal = Vector3(0, -1, 0)
        else:
            normal = Vector3(from_apex.x, slope * r, from_apex.z).normalized()
        return _to_world(normal, self.rotation)
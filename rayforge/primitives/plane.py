"""Infinite plane primitive."""

from __future__ import annotations

from dataclasses import dataclass, field

from rayforge.color import Color
from rayforge.material import Material
from rayforge.vector import Ray, Vector3

_PARALLEL_EPSILON = 1e-6


@dataclass(eq=False)
class Plane:
    """The plane of points ``p`` with ``p . normal == distance``."""

    normal: Vector3
    distance: float
    material: Material = field(default_factory=Material)

    def __post_init__(self) -> None:
        self.normal = self.normal.normalized()

    @property
    def color(self) -> Color:
        return self.material.color

    @property
    def center(self) -> Vector3:
        """A point on the plane: the one closest to the origin."""
        return self.normal * self.distance

    def intersect(self, ray: Ray) -> float | None:
        """Distance to the plane along the ray, or None if parallel or behind."""
        denom = ray.direction.dot(self.normal)
        if abs(denom) < _PARALLEL_EPSILON:
            return None
        t = (self.distance - ray.origin.dot(self.normal)) / denom
        return t if t >= 0.0 else None

    def normal_at(self, point: Vector3) -> Vector3:
        """The plane's unit normal, the same everywhere."""
        return self.normal
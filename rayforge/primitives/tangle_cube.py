"""Tangle cube implicit surface, found by ray marching."""

from __future__ import annotations

from dataclasses import dataclass, field

from rayforge.color import Color
from rayforge.material import Material
from rayforge.vector import Ray, Vector3

_STEP_FACTOR = 0.1
_MIN_STEP = 0.001
_MAX_STEPS = 1000
_HIT_THRESHOLD = 0.001
_MAX_DISTANCE = 1000.0


@dataclass(eq=False)
class TangleCube:
    """The surface ``x^4 - 5x^2 + y^4 - 5y^2 + z^4 - 5z^2 + 11.8 = 0``.

    Coordinates are taken relative to ``center`` and divided by ``size``.
    """

    center: Vector3
    size: float
    material: Material = field(default_factory=Material)

    @property
    def color(self) -> Color:
        return self.material.color

    @property
    def base_center(self) -> Vector3:
        return self.center

    def _local(self, point: Vector3) -> Vector3:
        return (point - self.center) / self.size

    def equation(self, point: Vector3) -> float:
        """Value of the implicit function at ``point``; zero on the surface."""
        x, y, z = self._local(point)
        return x**4 - 5 * x * x + y**4 - 5 * y * y + z**4 - 5 * z * z + 11.8

    def gradient(self, point: Vector3) -> Vector3:
        """Normalized gradient of the implicit function at ``point``."""
        x, y, z = self._local(point)
        return Vector3(
            4 * x**3 - 10 * x, 4 * y**3 - 10 * y, 4 * z**3 - 10 * z
        ).normalized()

    def intersect(self, ray: Ray) -> float | None:
        """Distance to the surface along the ray, or None."""
        t = 0.0
        for _ in range(_MAX_STEPS):
            value = abs(self.equation(ray.at(t)))
            if value < _HIT_THRESHOLD:
                return t
            if t > _MAX_DISTANCE:
                return None
            t += max(value * _STEP_FACTOR, _MIN_STEP)
        return None

    def normal_at(self, point: Vector3) -> Vector3:
        return self.gradient(point)
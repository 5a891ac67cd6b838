"""Groups of primitives that are intersected as one."""

from __future__ import annotations

import math
from typing import Iterator, Protocol

from rayforge.color import Color
from rayforge.material import Material
from rayforge.vector import Ray, Vector3

_MIN_DISTANCE = 0.001


class Primitive(Protocol):
    """What the renderer needs from any shape in a scene."""

    @property
    def material(self) -> Material: ...

    @property
    def color(self) -> Color: ...

    @property
    def center(self) -> Vector3: ...

    def intersect(self, ray: Ray) -> float | None: ...

    def normal_at(self, point: Vector3) -> Vector3: ...


class CompositePrimitive:
    """A set of primitives; the nearest hit decides normal, colour and material.

    The primitive hit by the last call to :meth:`intersect` is remembered and
    answers later queries for normal, colour and material.
    """

    def __init__(self, material: Material | None = None) -> None:
        self._material = material if material is not None else Material()
        self._primitives: list[Primitive] = []
        self._last_hit: Primitive | None = None

    def __len__(self) -> int:
        return len(self._primitives)

    def __iter__(self) -> Iterator[Primitive]:
        return iter(self._primitives)

    def add(self, primitive: Primitive) -> None:
        """Add a primitive unless it is this composite or already present."""
        if primitive is self:
            return
        if any(existing is primitive for existing in self._primitives):
            return
        self._primitives.append(primitive)

    def intersect(self, ray: Ray) -> float | None:
        """Distance to the nearest hit among the members, or None."""
        self._last_hit = None
        closest = math.inf
        for primitive in self._primitives:
            if primitive is self:
                continue
            t = primitive.intersect(ray)
            if t is not None and _MIN_DISTANCE < t < closest:
                closest = t
                self._last_hit = primitive
        return closest if self._last_hit is not None else None

    def normal_at(self, point: Vector3) -> Vector3:
        """Normal of the last primitive hit, or straight up if none was."""
        if self._last_hit is not None:
            return self._last_hit.normal_at(point)
        return Vector3(0, 1, 0)

    @property
    def color(self) -> Color:
        if self._last_hit is not None:
            return self._last_hit.color
        return self._material.color

    @property
    def material(self) -> Material:
        if self._last_hit is not None:
            return self._last_hit.material
        return self._material

    @property
    def center(self) -> Vector3:
        """Mean of the members' centres; the origin when empty."""
        if not self._primitives:
            return Vector3()
        total = Vector3()
        for primitive in self._primitives:
            total = total + primitive.center
        return total * (1.0 / len(self._primitives))

    def primitive_at(self, index: int) -> Primitive | None:
        """Member at ``index``, or None when out of range."""
        if 0 <= index < len(self._primitives):
            return self._primitives[index]
        return None
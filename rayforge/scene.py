"""A scene: camera, primitives and lights."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol

from rayforge.camera import Camera
from rayforge.primitives.composite import CompositePrimitive, Primitive
from rayforge.vector import Vector3


class Light(Protocol):
    """A light source as seen by the renderer."""

    @property
    def intensity(self) -> float: ...

    def direction_from(self, point: Vector3) -> Vector3: ...


@dataclass
class Scene:
    """Everything to render; primitives are also gathered in ``root``."""

    camera: Camera = field(default_factory=Camera)
    ambient_intensity: float = 0.0
    primitives: list[Primitive] = field(default_factory=list)
    lights: list[Light] = field(default_factory=list)
    root: CompositePrimitive = field(default_factory=CompositePrimitive)

    def add_primitive(self, primitive: Primitive) -> None:
        """Add a primitive to the scene and to its root composite."""
        self.primitives.append(primitive)
        self.root.add(primitive)

    def add_light(self, light: Light) -> None:
        """Add a light source."""
        self.lights.append(light)
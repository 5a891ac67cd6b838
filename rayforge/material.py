"""Surface materials."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto

from rayforge.color import Color


class MaterialType(Enum):
    """Kinds of surface a material can describe."""

    FLAT_COLOR = auto()
    LAMBERTIAN = auto()
    METAL = auto()
    DIELECTRIC = auto()
    EMISSIVE = auto()


@dataclass
class Material:
    """How a surface interacts with light; defaults to white lambertian."""

    type: MaterialType = MaterialType.LAMBERTIAN
    color: Color = field(default_factory=lambda: Color(255, 255, 255))
    roughness: float = 0.5
    metalness: float = 0.0
    reflectivity: float = 0.0
    transparency: float = 0.0
    refractive_index: float = 1.0
    emissive_intensity: float = 0.0
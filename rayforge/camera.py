"""Camera placement and image resolution."""

from __future__ import annotations

from dataclasses import dataclass, field

from rayforge.vector import Vector3


@dataclass
class Camera:
    """Where the scene is seen from: position, rotation in degrees
    (pitch, yaw, roll), field of view in degrees and resolution in pixels."""

    position: Vector3 = field(default_factory=Vector3)
    rotation: Vector3 = field(default_factory=Vector3)
    field_of_view: float = 90.0
    width: int = 800
    height: int = 600

    def set_resolution(self, width: int, height: int) -> None:
        """Set the image size in pixels."""
        self.width = width
        self.height = height
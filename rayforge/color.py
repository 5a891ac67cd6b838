"""RGB colours with 8-bit channels."""

from __future__ import annotations

from dataclasses import dataclass


def _clamp(value: int) -> int:
    return max(0, min(255, value))


@dataclass(frozen=True)
class Color:
    """An RGB colour; arithmetic results are clamped to [0, 255]."""

    r: int = 0
    g: int = 0
    b: int = 0

    def clamped(self) -> Color:
        """Copy of this colour with every channel clamped to [0, 255]."""
        return Color(_clamp(self.r), _clamp(self.g), _clamp(self.b))

    def __add__(self, other: Color) -> Color:
        return Color(self.r + other.r, self.g + other.g, self.b + other.b).clamped()

    def __sub__(self, other: Color) -> Color:
        return Color(self.r - other.r, self.g - other.g, self.b - other.b).clamped()

    def __mul__(self, other: Color | float) -> Color:
        if isinstance(other, Color):
            return Color(
                int((self.r / 255.0) * (other.r / 255.0) * 255.0),
                int((self.g / 255.0) * (other.g / 255.0) * 255.0),
                int((self.b / 255.0) * (other.b / 255.0) * 255.0),
            ).clamped()
        if isinstance(other, (int, float)):
            return Color(
                int(self.r * other), int(self.g * other), int(self.b * other)
            ).clamped()
        return NotImplemented

    def __str__(self) -> str:
        return f"({self.r}, {self.g}, {self.b})"
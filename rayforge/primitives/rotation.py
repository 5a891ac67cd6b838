"""Rotations of vectors about the coordinate axes, angles in degrees."""

from __future__ import annotations

import math

from rayforge.vector import Vector3


def rotate_x(v: Vector3, degrees: float) -> Vector3:
    """Rotate ``v`` about the X axis."""
    rad = math.radians(degrees)
    cos, sin = math.cos(rad), math.sin(rad)
    return Vector3(v.x, v.y * cos - v.z * sin, v.y * sin + v.z * cos)


def rotate_y(v: Vector3, degrees: float) -> Vector3:
    """Rotate ``v`` about the Y axis."""
    rad = math.radians(degrees)
    cos, sin = math.cos(rad), math.sin(rad)
    return Vector3(v.x * cos + v.z * sin, v.y, -v.x * sin + v.z * cos)


def rotate_z(v: Vector3, degrees: float) -> Vector3:
    """Rotate ``v`` about the Z axis."""
    rad = math.radians(degrees)
    cos, sin = math.cos(rad), math.sin(rad)
    return Vector3(v.x * cos - v.y * sin, v.x * sin + v.y * cos, v.z)


def apply_rotation(v: Vector3, rotation: Vector3) -> Vector3:
    """Rotate about X, then Y, then Z by the components of ``rotation``."""
    return rotate_z(rotate_y(rotate_x(v, rotation.x), rotation.y), rotation.z)


def apply_inverse_rotation(v: Vector3, rotation: Vector3) -> Vector3:
    """Undo :func:`apply_rotation` for the same ``rotation``."""
    return rotate_x(rotate_y(rotate_z(v, -rotation.z), -rotation.y), -rotation.x)
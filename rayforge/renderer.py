"""Recursive ray tracing of a scene into an image.

Lights are shaded by duck typing. A light whose ``is_ambient`` attribute is
true supplies the ambient strength. If no light does, the scene's
``ambient_intensity`` is used. Lights whose ``is_composite`` attribute is
true are skipped when computing direct lighting.
"""

from __future__ import annotations

import math

from rayforge.color import Color
from rayforge.material import Material, MaterialType
from rayforge.primitives.rotation import rotate_x, rotate_y, rotate_z
from rayforge.scene import Light, Scene
from rayforge.vector import Ray, Vector3

EPSILON = 0.001
MAX_DEPTH = 3

_DIFFUSE_FACTOR = 0.7
_SPECULAR_FACTOR = 0.1
_METAL_SPECULAR_FACTOR = 0.2
_SHININESS = 64.0


def _is_ambient(light: Light) -> bool:
    return bool(getattr(light, "is_ambient", False))


def _is_composite(light: Light) -> bool:
    return bool(getattr(light, "is_composite", False))


def _power(base: float, exponent: float) -> float:
    if base > 0.0:
        return base**exponent
    if exponent > 0.0:
        return 0.0
    return 1.0 if exponent == 0.0 else math.inf


def _channel(value: float) -> int:
    return int(min(max(value, 0.0), 255.0))


class Renderer:
    """Turns a scene into a ``height`` x ``width`` grid of colours."""

    def __init__(self, scene: Scene, width: int, height: int) -> None:
        self.scene = scene
        self.width = width
        self.height = height
        self.image: list[list[Color]] = [
            [Color(0, 0, 0) for _ in range(width)] for _ in range(height)
        ]

    def render(self) -> list[list[Color]]:
        """Trace one primary ray per pixel and return the image."""
        origin = self.scene.camera.position
        for y, row in enumerate(self.image):
            for x in range(len(row)):
                row[x] = self.trace(Ray(origin, self.ray_direction(x, y)), 1)
        return self.image

    def ray_direction(self, x: int, y: int) -> Vector3:
        """World-space unit direction of the primary ray through pixel (x, y)."""
        camera = self.scene.camera
        aspect = self.width / self.height
        fov_scale = math.tan(math.radians(camera.field_of_view * 0.5))
        px = (2.0 * (x + 0.5) / self.width - 1.0) * aspect * fov_scale
        py = (1.0 - 2.0 * (y + 0.5) / self.height) * fov_scale
        direction = Vector3(px, py, 1.0).normalized()
        rot = camera.rotation
        direction = rotate_x(direction, rot.x)
        direction = rotate_y(direction, rot.y)
        direction = rotate_z(direction, rot.z)
        return direction.normalized()

    def trace(self, ray: Ray, depth: int) -> Color:
        """Colour seen along ``ray``; black once ``depth`` exceeds the limit."""
        if depth > MAX_DEPTH:
            return Color(0, 0, 0)

        root = self.scene.root
        t = root.intersect(ray)
        if t is not None:
            point = ray.at(t)
            normal = root.normal_at(point)
            material = root.material
            reflection = self._reflection(point, normal, ray, depth)
            return self._shade(point, normal, material.color, reflection, material)

        closest = math.inf
        hit = None
        for primitive in self.scene.primitives:
            candidate = primitive.intersect(ray)
            if candidate is not None and EPSILON < candidate < closest:
                closest = candidate
                hit = primitive
        if hit is not None:
            point = ray.at(closest)
            normal = hit.normal_at(point)
            material = hit.material
            reflection = self._reflection(point, normal, ray, depth)
            return self._shade(point, normal, material.color, reflection, material)

        sky = 0.5 * (ray.direction.y + 1.0)
        return Color(int(255 * (1 - sky)), int(255 * sky), 255)

    def set_pixel(self, x: int, y: int, color: Color) -> None:
        """Store ``color`` at (x, y); coordinates outside the image are ignored."""
        if 0 <= x < self.width and 0 <= y < self.height:
            self.image[y][x] = color

    def _reflection(
        self, point: Vector3, normal: Vector3, ray: Ray, depth: int
    ) -> Color:
        d = ray.direction
        reflected = d - normal * (2.0 * d.dot(normal))
        return self.trace(Ray(point + normal * EPSILON, reflected), depth + 1)

    def _ambient_strength(self) -> float:
        for light in self.scene.lights:
            if _is_ambient(light):
                return light.intensity
        return self.scene.ambient_intensity

    def _in_shadow(self, shadow_ray: Ray) -> bool:
        t = self.scene.root.intersect(shadow_ray)
        return t is not None and t > EPSILON

    def _shade(
        self,
        point: Vector3,
        normal: Vector3,
        base: Color,
        reflection: Color,
        material: Material,
    ) -> Color:
        ambient = self._ambient_strength()
        r = base.r * ambient
        g = base.g * ambient
        b = base.b * ambient
        view_dir = (self.scene.camera.position - point).normalized()
        is_metal = material.type is MaterialType.METAL

        for light in self.scene.lights:
            if _is_ambient(light) or _is_composite(light):
                continue
            light_dir = light.direction_from(point).normalized()
            if self._in_shadow(Ray(point + normal * EPSILON, light_dir)):
                continue

            intensity = light.intensity
            diffuse = max(0.0, normal.dot(light_dir)) * _DIFFUSE_FACTOR * intensity
            halfway = (light_dir + view_dir).normalized()
            shininess = _SHININESS
            specular_factor = _SPECULAR_FACTOR
            if is_metal:
                shininess = 128.0 - material.roughness * 120.0
                specular_factor = _METAL_SPECULAR_FACTOR
            specular = _power(max(0.0, normal.dot(halfway)), shininess) * intensity
            highlight = 255.0 * specular * specular_factor

            r += base.r * diffuse + highlight
            g += base.g * diffuse + highlight
            b += base.b * diffuse + highlight

        reflectivity = material.reflectivity
        if is_metal:
            reflectivity = 0.8 - material.roughness * 0.6
        keep = 1.0 - reflectivity
        r = r * keep + reflection.r * reflectivity
        g = g * keep + reflection.g * reflectivity
        b = b * keep + reflection.b * reflectivity

        if material.type is MaterialType.EMISSIVE and material.emissive_intensity > 0:
            emission = material.emissive_intensity
            r += base.r * emission
            g += base.g * emission
            b += base.b * emission

        return Color(_channel(r), _channel(g), _channel(b))
# rayforge

rayforge is a compact ray tracer written in pure Python with no third-party
dependencies. It traces a scene of geometric primitives into a grid of RGB
colours, which can then be saved in the plain-text PPM (`P3`) format.

## What is in it

- `rayforge.vector`: `Vector3`, an immutable vector with `+`, `-`, negation,
  scalar `*` and `/`, `length()`, `dot()`, `cross()` and `normalized()`. It
  also has `Ray`, whose direction is normalized on construction, and
  `Ray.at(t)`.
- `rayforge.color`: `Color`, an RGB triple. `+`, `-` and `*` (by a number or
  by another colour, treated as values in 0–1) clamp each channel to 0–255.
  `clamped()` returns a clamped copy.
- `rayforge.material`: `Material` (type, colour, roughness, metalness,
  reflectivity, transparency, refractive index, emissive intensity) and
  `MaterialType` (`FLAT_COLOR`, `LAMBERTIAN`, `METAL`, `DIELECTRIC`,
  `EMISSIVE`). The default is a white lambertian material.
- `rayforge.primitives`:
  - `sphere.Sphere`, `plane.Plane` and `triangle.Triangle`;
  - `cone.Cone` and `cylinder.Cylinder`, which may be finite or infinite
    (`height=math.inf`) and take a rotation in degrees;
  - `torus.Torus`, intersected by sphere tracing its distance field;
  - `tangle_cube.TangleCube`, an implicit quartic surface found by marching
    along the ray;
  - `composite.CompositePrimitive`, which groups primitives and returns the
    nearest hit among them, and the `Primitive` protocol;
  - `rotation`: `rotate_x`, `rotate_y`, `rotate_z`, `apply_rotation` and
    `apply_inverse_rotation`.
- `rayforge.camera`: `Camera` with position, rotation (pitch, yaw, roll in
  degrees), field of view and resolution.
- `rayforge.scene`: `Scene`, holding a camera, primitives, lights and an
  ambient intensity, and the `Light` protocol.
- `rayforge.renderer`: `Renderer`, with recursive reflections, hard shadows and
  Blinn-Phong shading.
- `rayforge.polynomial`: `solve_quadratic` and `solve_cubic`, which return the
  real roots as a tuple.
- `rayforge.ppm`: `format_ppm` builds the text of a `P3` file and `write_ppm`
  writes it to a path.

Every primitive's `intersect(ray)` returns the distance along the ray to the
nearest hit, or `None` when the ray misses. `normal_at(point)` gives the unit
normal there.

## Lights

The package has no light classes of its own. Any object with an `intensity`
attribute and a `direction_from(point)` method can be added with
`Scene.add_light`. The returned direction points from the surface toward the
light and need not be normalized. An object whose `is_ambient` attribute is
true provides the ambient strength. When no such light exists, the scene's
`ambient_intensity` is used. Objects whose `is_composite` attribute is true are
skipped for direct lighting.

## Usage

```python
from rayforge.vector import Vector3
from rayforge.color import Color
from rayforge.material import Material
from rayforge.primitives.sphere import Sphere
from rayforge.scene import Scene
from rayforge.renderer import Renderer
from rayforge.ppm import write_ppm


class PointLight:
    def __init__(self, position, intensity):
        self.position = position
        self.intensity = intensity

    def direction_from(self, point):
        return self.position - point


scene = Scene(ambient_intensity=0.1)
scene.camera.set_resolution(320, 240)
scene.add_primitive(Sphere(Vector3(0, 0, 5), 1.0, Material(color=Color(200, 40, 40))))
scene.add_light(PointLight(Vector3(5, 5, 0), 1.0))

renderer = Renderer(scene, scene.camera.width, scene.camera.height)
image = renderer.render()
write_ppm("output.ppm", image)
```

The camera looks down the positive Z axis before its rotation is applied.
Rotations are applied about X, then Y, then Z. A ray that hits nothing takes a
sky gradient colour. Reflections stop after a fixed recursion depth, and every
channel of the result is clamped to 0–255. `write_ppm` raises `OSError` if the
file cannot be written.

## What it does not do

- It has no command-line program and does not read scene description files.
  Scenes are built in Python.
- It does not load meshes from model files. Triangles are created one by one.
- It has no window or interactive preview. The only output is the colour grid
  and PPM text.
- It provides no ready-made point, directional or ambient light types. See
  *Lights* above.
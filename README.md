# olio

A small ray tracer. It reads a scene in the simple line-based raytra
format (camera, spheres, triangles, Phong materials, ambient and point
lights), shades every hit with the Blinn-Phong model and writes the
result to an image file.

## Installing

```
pip install .
```

## Rendering a scene

```
olio-rtbasic --input_scene scene.txt --output render.png
```

The short forms `-s` and `-o` do the same; both options are required.
The image height is the pixel height given on the camera line of the
scene; the width is the height times the viewport's aspect ratio,
rounded. The written image is gamma corrected with a gamma of 2 and saved
as 8-bit RGB in whatever format Pillow picks from the file extension.

The command returns 0 on success and 1 when the scene cannot be parsed,
the image size is not positive, or the image cannot be written. A
progress bar is shown while rendering.

## Scene format

Each line starts with a one-letter command. Lines that are empty or start
with `/` are ignored, and so are unknown commands.

| Line | Meaning |
| --- | --- |
| `c x y z vx vy vz d iw ih pw ph` | camera at `(x, y, z)` looking along `(vx, vy, vz)`, focal length `d`, viewport `iw`×`ih`, image `pw`×`ph` pixels |
| `m dr dg db sr sg sb r` | Phong material: diffuse, specular and shininess; it applies to the surfaces that follow. The ambient coefficients are the diffuse ones, each raised to at least 0.01. Any further numbers on the line are ignored. |
| `s x y z r` | sphere |
| `t ax ay az bx by bz cx cy cz` | triangle |
| `l a r g b` | ambient light |
| `l p x y z r g b` | point light |

A scene needs exactly one camera and at most one ambient light, every
surface has to come after a material, and lights must be ambient (`a`)
or point (`p`). Anything else raises `olio.parser.SceneParseError`.
If the viewport and image aspect ratios differ, a warning is logged and
the viewport's ratio is used.

## Using it from Python

```python
from olio.parser import parse_file
from olio.raytracer import RayTracer

parsed = parse_file("scene.txt")
tracer = RayTracer(image_height=parsed.image_size[1], show_progress=False)
image = tracer.render(parsed.scene, parsed.lights, parsed.camera)
tracer.write_image("render.png", 2.0)
```

`parse_file` and `parse_lines` return a `ParsedScene` with `scene`
(a `SurfaceList`), `camera`, `image_size` as `(width, height)` and
`lights`. `RayTracer.render` returns the image as a float NumPy array of
shape `(height, width, 3)`, row 0 at the top, and keeps it in
`rendered_image`. `olio.raytracer.gamma_correct` and
`olio.raytracer.to_uint8` are the conversions `write_image` uses.

The building blocks live in their own modules: `olio.camera.Camera`,
`olio.sphere.Sphere`, `olio.triangle.Triangle` (with
`olio.triangle.ray_triangle_hit`), `olio.surface_list.SurfaceList`,
`olio.material.PhongMaterial`, `olio.ray.Ray` and `olio.ray.HitRecord`,
and `Light`, `PointLight` and `AmbientLight` in `olio.light`. A surface's
`hit(ray, tmin, tmax)` returns a `HitRecord` or `None`.

## What it does not do

- Only primary rays are traced: there are no shadows, reflections or
  refraction. The mirror coefficients of `PhongMaterial` are stored but
  never used.
- Directional lights are not supported.
- There is no HDR output: an output name ending in `.exr` is refused.

## Running the tests

```
pip install .[test]
pytest
```
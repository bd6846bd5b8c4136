"""Reader for the plain-text raytra scene format."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional, Tuple

import numpy as np

from olio.camera import Camera
from olio.light import AmbientLight, Light, PointLight
from olio.material import PhongMaterial
from olio.sphere import Sphere
from olio.surface import Surface
from olio.surface_list import SurfaceList
from olio.triangle import Triangle
from olio.types import EPSILON, RAD_TO_DEG, normalize, vec3

logger = logging.getLogger(__name__)

_MIN_AMBIENT = 0.01
_MAX_VIEWPORT_ASPECT = 20000
_APPROX_PRECISION = 1e-12


class SceneParseError(ValueError):
    """Raised when a scene description cannot be read."""


@dataclass
class ParsedScene:
    """Everything a scene file describes."""

    scene: SurfaceList
    camera: Camera
    image_size: Tuple[int, int]
    lights: List[Light] = field(default_factory=list)


def _numbers(tokens: List[str], count: int, what: str) -> List[float]:
    if len(tokens) < count:
        raise SceneParseError(f"{what} needs {count} numbers, got {len(tokens)}")
    try:
        return [float(token) for token in tokens[:count]]
    except ValueError as exc:
        raise SceneParseError(f"{what} has a value that is not a number") from exc


def _divide(numerator: float, denominator: float) -> float:
    if denominator == 0:
        if numerator == 0:
            return math.nan
        return math.copysign(math.inf, numerator)
    return numerator / denominator


def _is_approx(a: np.ndarray, b: np.ndarray) -> bool:
    limit = _APPROX_PRECISION * min(np.linalg.norm(a), np.linalg.norm(b))
    return float(np.linalg.norm(a - b)) <= limit


class _SceneBuilder:
    def __init__(self) -> None:
        self.surfaces: List[Surface] = []
        self.lights: List[Light] = []
        self.camera: Optional[Camera] = None
        self.image_size: Tuple[int, int] = (0, 0)
        self.camera_count = 0
        self.ambient_light_count = 0
        self.material: Optional[PhongMaterial] = None

    def feed(self, raw_line: str) -> None:
        line = raw_line.strip()
        if not line or line[0] == "/":
            return
        command, rest = line[0], line[1:].strip()
        handler = {
            "l": self._light,
            "m": self._material,
            "s": self._sphere,
            "c": self._camera,
            "t": self._triangle,
        }.get(command)
        if handler is not None:
            handler(rest)

    def _light(self, rest: str) -> None:
        light_type, tokens = rest[:1], rest[1:].split()
        if light_type == "a":
            r, g, b = _numbers(tokens, 3, "ambient light")
            self.lights.append(AmbientLight(vec3(r, g, b)))
            self.ambient_light_count += 1
        elif light_type == "p":
            x, y, z, r, g, b = _numbers(tokens, 6, "point light")
            self.lights.append(PointLight(vec3(x, y, z), vec3(r, g, b)))
        else:
            raise SceneParseError(
                "light sources must be either ambient or point "
                "(directional lights are not supported)"
            )

    def _material(self, rest: str) -> None:
        dr, dg, db, sr, sg, sb, shininess = _numbers(rest.split(), 7, "material")
        ambient = vec3(max(dr, _MIN_AMBIENT), max(dg, _MIN_AMBIENT), max(db, _MIN_AMBIENT))
        self.material = PhongMaterial(ambient, vec3(dr, dg, db), vec3(sr, sg, sb), shininess)

    def _attach(self, surface: Surface, kind: str) -> None:
        if self.material is None:
            raise SceneParseError(f"{kind} appears before any material")
        surface.material = self.material
        self.surfaces.append(surface)

    def _sphere(self, rest: str) -> None:
        x, y, z, r = _numbers(rest.split(), 4, "sphere")
        self._attach(Sphere(vec3(x, y, z), r), "sphere")

    def _triangle(self, rest: str) -> None:
        values = _numbers(rest.split(), 9, "triangle")
        points = [vec3(*values[k:k + 3]) for k in (0, 3, 6)]
        self._attach(Triangle(points), "triangle")

    def _camera(self, rest: str) -> None:
        (x, y, z, vx, vy, vz, focal_length, viewport_width, viewport_height,
         pixels_width, pixels_height) = _numbers(rest.split(), 11, "camera")
        eye = vec3(x, y, z)
        view_vec = normalize(vec3(vx, vy, vz))
        target = eye + view_vec
        up = vec3(0, 1, 0)
        if _is_approx(view_vec, up):
            up = vec3(0, 0, 1)
        fovy = 2 * math.atan2(viewport_height * 0.5, focal_length) * RAD_TO_DEG

        viewport_aspect = _divide(viewport_width, viewport_height)
        if not math.isfinite(viewport_aspect) or viewport_aspect <= 0:
            raise SceneParseError(f"camera has bad viewport aspect ratio: {viewport_aspect}")
        if viewport_aspect > _MAX_VIEWPORT_ASPECT:
            logger.warning("camera has very large viewport aspect ratio: %s", viewport_aspect)
        image_aspect = _divide(pixels_width, pixels_height)
        if not abs(viewport_aspect - image_aspect) <= EPSILON:
            logger.warning(
                "camera viewport aspect ratio %s differs from output image aspect "
                "ratio %s; image width will follow the viewport",
                viewport_aspect,
                image_aspect,
            )

        self.camera = Camera(eye, target, up, fovy, viewport_aspect)
        self.image_size = (int(pixels_width), int(pixels_height))
        self.camera_count += 1

    def finish(self) -> ParsedScene:
        if self.camera_count != 1 or self.camera is None:
            raise SceneParseError("scene must contain exactly one camera")
        if self.ambient_light_count > 1:
            raise SceneParseError("scene can contain at most one ambient light")
        return ParsedScene(
            scene=SurfaceList(self.surfaces),
            camera=self.camera,
            image_size=self.image_size,
            lights=self.lights,
        )


def parse_lines(lines: Iterable[str]) -> ParsedScene:
    """Build a scene from the lines of a scene description."""
    builder = _SceneBuilder()
    for line in lines:
        builder.feed(line)
    return builder.finish()


def parse_file(filename) -> ParsedScene:
    """Read and parse a scene file."""
    path = Path(filename).absolute()
    if not path.exists():
        raise SceneParseError(f"file {filename} does not exist")
    try:
        with path.open("r", encoding="utf-8") as handle:
            return parse_lines(handle)
    except OSError as exc:
        raise SceneParseError(f"could not open file {filename} for reading") from exc
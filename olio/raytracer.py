"""Ray tracer that renders a scene into an image."""

from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import Optional, Sequence

import numpy as np
from PIL import Image
from tqdm import tqdm

from olio.camera import Camera
from olio.light import Light
from olio.material import PhongMaterial
from olio.ray import Ray
from olio.surface import Surface
from olio.types import EPSILON, INFINITY, Vec3, vec3

logger = logging.getLogger(__name__)


def gamma_correct(image: np.ndarray, gamma: float) -> np.ndarray:
    """Raise every channel value to the power 1 / gamma."""
    return np.power(np.asarray(image, dtype=float), 1.0 / gamma)


def to_uint8(image: np.ndarray) -> np.ndarray:
    """Convert a float image in [0, 1] to 8-bit, rounding and clamping."""
    scaled = np.asarray(image, dtype=float) * 255 + 0.5
    return np.clip(scaled, 0, 255).astype(np.uint8)


class RayTracer:
    """Renders scenes by sending one primary ray through each pixel."""

    def __init__(self, image_height: int = 180, show_progress: bool = True) -> None:
        self.image_height = int(image_height)
        self.show_progress = show_progress
        self.rendered_image: Optional[np.ndarray] = None

    def ray_color(self, ray: Ray, scene: Surface, lights: Sequence[Light]) -> Vec3:
        """Colour seen along ``ray``; black when nothing Phong-shaded is hit."""
        record = scene.hit(ray, EPSILON, INFINITY)
        if record is None:
            return vec3(0, 0, 0)
        material = getattr(record.surface, "material", None)
        if not isinstance(material, PhongMaterial):
            return vec3(0, 0, 0)
        view_vec = -ray.direction
        color = vec3(0, 0, 0)
        for light in lights:
            color = color + light.illuminate(record, view_vec)
        return color

    def render(self, scene: Surface, lights: Sequence[Light], camera: Camera) -> np.ndarray:
        """Render ``scene`` as seen by ``camera`` into an RGB float image (row 0 on top)."""
        if scene is None or camera is None:
            raise ValueError("a scene and a camera are required")
        height = self.image_height
        width = int(camera.aspect * height + 0.5)
        if height <= 0 or width <= 0:
            raise ValueError("invalid image dimensions")

        start = time.perf_counter()
        image = np.zeros((height, width, 3), dtype=float)
        xscale = 1.0 / width
        yscale = 1.0 / height
        logger.info("Rendering...")
        with tqdm(total=width * height, disable=not self.show_progress) as progress:
            for y in range(height):
                for x in range(width):
                    ray = camera.get_ray((x + 0.5) * xscale, (y + 0.5) * yscale)
                    image[height - y - 1, x] = self.ray_color(ray, scene, lights)
                    progress.update(1)
        self.rendered_image = image
        logger.info("Total render time: %s", time.perf_counter() - start)
        return image

    def write_image(self, image_name, gamma: float = 1.0) -> None:
        """Write the rendered image to ``image_name`` after gamma correction."""
        if self.rendered_image is None:
            raise RuntimeError("nothing has been rendered")
        if Path(image_name).suffix.lower() == ".exr":
            raise ValueError("EXR output is not supported")
        image = self.rendered_image if gamma == 1 else gamma_correct(self.rendered_image, gamma)
        Image.fromarray(to_uint8(image), "RGB").save(image_name)
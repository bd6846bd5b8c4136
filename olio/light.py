"""Light sources that shade hit points."""

from __future__ import annotations

import logging

import numpy as np

from olio.material import PhongMaterial
from olio.node import Node
from olio.ray import HitRecord
from olio.types import Vec3, normalize, vec3

logger = logging.getLogger(__name__)


def _phong_material(hit_record: HitRecord):
    surface = hit_record.surface
    material = getattr(surface, "material", None) if surface is not None else None
    if material is None:
        logger.error("surface has no material")
        return None
    if not isinstance(material, PhongMaterial):
        logger.error("surface material is not a Phong material")
        return None
    return material


class Light(Node):
    """Base light; contributes no radiance."""

    default_name = "Light"

    def illuminate(self, hit_record: HitRecord, view_vec) -> Vec3:
        """Radiance leaving the hit point towards ``view_vec``."""
        return vec3(0, 0, 0)


class PointLight(Light):
    """Point light with inverse-square falloff."""

    default_name = "PointLight"

    def __init__(self, position=None, intensity=None, name: str = "") -> None:
        super().__init__(name)
        self.position = vec3(0, 0, 0) if position is None else np.asarray(position, dtype=float)
        self.intensity = vec3(0, 0, 0) if intensity is None else np.asarray(intensity, dtype=float)

    def illuminate(self, hit_record: HitRecord, view_vec) -> Vec3:
        """Blinn-Phong shading of the hit point by this light."""
        to_light = self.position - hit_record.point
        r = float(np.linalg.norm(to_light))
        light_vec = to_light / r
        cosine = max(0.0, float(np.dot(hit_record.normal, light_vec)))
        irradiance = cosine * self.intensity / (r * r)
        material = _phong_material(hit_record)
        if material is None:
            return vec3(0, 0, 0)
        reflectance = material.evaluate(hit_record, light_vec, normalize(view_vec))
        return reflectance * irradiance


class AmbientLight(Light):
    """Uniform ambient light."""

    default_name = "AmbientLight"

    def __init__(self, ambient=None, name: str = "") -> None:
        super().__init__(name)
        self.ambient = vec3(0, 0, 0) if ambient is None else np.asarray(ambient, dtype=float)

    def illuminate(self, hit_record: HitRecord, view_vec) -> Vec3:
        """Material ambient coefficients scaled by the ambient intensity."""
        material = _phong_material(hit_record)
        if material is None:
            return vec3(0, 0, 0)
        return material.ambient * self.ambient
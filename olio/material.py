"""Surface materials."""

from __future__ import annotations

import numpy as np

from olio.node import Node
from olio.ray import HitRecord
from olio.types import Vec3, normalize, vec3


def _as_vec(value) -> Vec3:
    if value is None:
        return vec3(0, 0, 0)
    return np.asarray(value, dtype=float)


class Material(Node):
    """Base class for materials."""

    default_name = "Material"


class PhongMaterial(Material):
    """Blinn-Phong material with ambient, diffuse, specular and mirror terms."""

    default_name = "PhongMaterial"

    def __init__(
        self,
        ambient=None,
        diffuse=None,
        specular=None,
        shininess: float = 1.0,
        mirror=None,
        name: str = "",
    ) -> None:
        super().__init__(name)
        self.ambient = _as_vec(ambient)
        self.diffuse = _as_vec(diffuse)
        self.specular = _as_vec(specular)
        self.shininess = float(shininess)
        self.mirror = _as_vec(mirror)

    def evaluate(self, hit_record: HitRecord, light_vec, view_vec) -> Vec3:
        """Reflectance at a hit point for the given light and view directions."""
        n = normalize(hit_record.normal)
        v = normalize(view_vec)
        h = normalize(v + np.asarray(light_vec, dtype=float))
        highlight = max(0.0, float(np.dot(n, h))) ** self.shininess
        return self.specular * highlight + self.diffuse
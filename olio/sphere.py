"""Sphere surface."""

from __future__ import annotations

import math
from typing import Optional

import numpy as np

from olio.ray import HitRecord, Ray
from olio.surface import Surface
from olio.types import normalize, vec3


class Sphere(Surface):
    """A sphere given by its center and radius."""

    default_name = "Sphere"

    def __init__(self, center=None, radius: float = 0.0, name: str = "") -> None:
        super().__init__(name)
        self.center = vec3(0, 0, 0) if center is None else np.asarray(center, dtype=float)
        self.radius = float(radius)

    def hit(self, ray: Ray, tmin: float, tmax: float) -> Optional[HitRecord]:
        """Nearest intersection of ``ray`` with the sphere in [tmin, tmax], if any."""
        p0 = ray.origin - self.center
        v = ray.direction
        a = float(np.dot(v, v))
        b = 2.0 * float(np.dot(p0, v))
        c = float(np.dot(p0, p0)) - self.radius * self.radius

        a2 = 2.0 * a
        discriminant = b * b - 2.0 * a2 * c
        if discriminant < 0:
            return None
        s = math.sqrt(discriminant)
        t = (-b - s) / a2
        if t < tmin:
            t = (-b + s) / a2
        if t < tmin or t > tmax:
            return None

        point = ray.at(t)
        record = HitRecord(ray_t=t, point=point, surface=self)
        record.set_face_normal(ray, normalize(point - self.center))
        return record
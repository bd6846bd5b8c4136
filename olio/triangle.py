"""Triangle surface and ray-triangle intersection."""

from __future__ import annotations

import logging
from typing import Iterable, Optional, Tuple

import numpy as np

from olio.ray import HitRecord, Ray
from olio.surface import Surface
from olio.types import EPSILON, Vec3, normalize, vec3

logger = logging.getLogger(__name__)


def ray_triangle_hit(
    p0, p1, p2, ray: Ray, tmin: float, tmax: float
) -> Optional[Tuple[float, np.ndarray]]:
    """Intersect ``ray`` with triangle (p0, p1, p2).

    Returns ``(ray_t, uv)`` where ``uv`` holds (beta, gamma), so the
    barycentric coordinates are (1 - beta - gamma, beta, gamma), or
    ``None`` when there is no hit with ``ray_t`` in [tmin, tmax].
    """
    p0 = np.asarray(p0, dtype=float)
    p1 = np.asarray(p1, dtype=float)
    p2 = np.asarray(p2, dtype=float)
    a, b, c = p0 - p1
    d, e, f = p0 - p2
    g, h, i = ray.direction
    j, k, l = p0 - ray.origin

    ei_minus_hf = e * i - h * f
    gf_minus_di = g * f - d * i
    dh_minus_eg = d * h - e * g
    ak_minus_jb = a * k - j * b
    jc_minus_al = j * c - a * l
    bl_minus_kc = b * l - k * c

    m = a * ei_minus_hf + b * gf_minus_di + c * dh_minus_eg
    if abs(m) < EPSILON:
        return None

    ray_t = -(f * ak_minus_jb + e * jc_minus_al + d * bl_minus_kc) / m
    if ray_t < tmin or ray_t > tmax:
        return None

    gamma = (i * ak_minus_jb + h * jc_minus_al + g * bl_minus_kc) / m
    if gamma < 0 or gamma > 1:
        return None

    beta = (j * ei_minus_hf + k * gf_minus_di + l * dh_minus_eg) / m
    if beta < 0 or beta > 1 - gamma:
        return None

    return float(ray_t), np.array([beta, gamma], dtype=float)


class Triangle(Surface):
    """A triangle defined by three points, with a precomputed face normal."""

    default_name = "Triangle"

    def __init__(self, points: Iterable = (), name: str = "") -> None:
        super().__init__(name)
        self.points: list[Vec3] = [np.asarray(p, dtype=float) for p in points]
        self.normal: Vec3 = vec3(0, 0, 0)
        self._compute_normal()

    def _compute_normal(self) -> bool:
        self.normal = vec3(0, 0, 0)
        if len(self.points) < 3:
            return False
        p0, p1, p2 = self.points[:3]
        self.normal = normalize(np.cross(p1 - p0, p2 - p0))
        return True

    @property
    def is_complete(self) -> bool:
        """Whether the triangle holds exactly three points."""
        return len(self.points) == 3

    def set_points(self, points: Iterable) -> None:
        """Set the triangle's points; only the first three are used."""
        points = [np.asarray(p, dtype=float) for p in points]
        if len(points) < 3:
            raise ValueError("a triangle needs at least three points")
        if len(points) > 3:
            logger.warning("more than three points given; using the first three")
        self.points = points[:3]
        self._compute_normal()

    def hit(self, ray: Ray, tmin: float, tmax: float) -> Optional[HitRecord]:
        """Intersection of ``ray`` with the triangle in [tmin, tmax], if any."""
        if len(self.points) < 3:
            return None
        result = ray_triangle_hit(*self.points[:3], ray, tmin, tmax)
        if result is None:
            return None
        ray_t, _ = result
        record = HitRecord(ray_t=ray_t, point=ray.at(ray_t), surface=self)
        record.set_face_normal(ray, self.normal)
        return record
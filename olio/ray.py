"""Rays and the records of their intersections with surfaces."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import numpy as np

from olio.types import Vec3, vec3


def _zero() -> Vec3:
    return vec3(0, 0, 0)


@dataclass
class Ray:
    """A ray with an origin and a (not necessarily unit) direction."""

    origin: Vec3 = field(default_factory=_zero)
    direction: Vec3 = field(default_factory=_zero)

    def __post_init__(self) -> None:
        self.origin = np.asarray(self.origin, dtype=float)
        self.direction = np.asarray(self.direction, dtype=float)

    def at(self, t: float) -> Vec3:
        """Point along the ray at fractional distance ``t``."""
        return self.origin + t * self.direction


@dataclass
class HitRecord:
    """Information about where a ray hit a surface."""

    ray_t: float = 0.0
    point: Vec3 = field(default_factory=_zero)
    normal: Vec3 = field(default_factory=_zero)
    front_face: bool = True
    surface: Any = None

    def __post_init__(self) -> None:
        self.point = np.asarray(self.point, dtype=float)
        self.normal = np.asarray(self.normal, dtype=float)

    def set_face_normal(self, ray: Ray, face_normal) -> None:
        """Store the normal oriented against the ray and record which side was hit."""
        face_normal = np.asarray(face_normal, dtype=float)
        self.front_face = bool(np.dot(ray.direction, face_normal) < 0)
        self.normal = face_normal if self.front_face else -face_normal
"""A group of surfaces hit as one."""

from __future__ import annotations

from typing import Iterable, Optional

from olio.ray import HitRecord, Ray
from olio.surface import Surface


class SurfaceList(Surface):
    """A collection of surfaces; a ray hit returns the closest one."""

    default_name = "SurfaceList"

    def __init__(self, surfaces: Iterable[Surface] = (), name: str = "") -> None:
        super().__init__(name)
        self.surfaces = list(surfaces)

    def hit(self, ray: Ray, tmin: float, tmax: float) -> Optional[HitRecord]:
        """Closest hit among all surfaces within [tmin, tmax], if any."""
        closest = None
        for surface in self.surfaces:
            record = surface.hit(ray, tmin, tmax)
            if record is not None:
                closest = record
                tmax = record.ray_t
        return closest
"""Base class for objects that rays can hit."""

from __future__ import annotations

from typing import Optional

from olio.node import Node
from olio.ray import HitRecord, Ray


class Surface(Node):
    """A surface with an optional material; the base surface is never hit."""

    default_name = "Surface"

    def __init__(self, name: str = "") -> None:
        super().__init__(name)
        self.material = None

    def hit(self, ray: Ray, tmin: float, tmax: float) -> Optional[HitRecord]:
        """Return a hit record if ``ray`` meets the surface within [tmin, tmax]."""
        return None
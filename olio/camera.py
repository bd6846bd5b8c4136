"""Perspective camera that generates primary rays through a viewport."""

from __future__ import annotations

import math

import numpy as np

from olio.node import Node
from olio.ray import Ray
from olio.types import DEG_TO_RAD, Vec3, normalize, vec3


class Camera(Node):
    """A pinhole camera with focal length 1 described by look-at parameters."""

    default_name = "Camera"

    def __init__(
        self,
        eye=None,
        target=None,
        up=None,
        fovy: float = 60.0,
        aspect: float = 1.77778,
        name: str = "",
    ) -> None:
        super().__init__(name)
        self.eye: Vec3 = vec3(0, 0, 0)
        self.target: Vec3 = vec3(0, 0, 0)
        self.up: Vec3 = vec3(0, 1, 0)
        self.camera_xform: np.ndarray = np.identity(4)
        self._fovy = float(fovy)
        self._aspect = float(aspect)
        self.cop: Vec3 = vec3(0, 0, 0)
        self.lower_left_corner: Vec3 = vec3(-1.0264, -0.5774, -1.0)
        self.horizontal: Vec3 = vec3(2.0528, 0.0, 0.0)
        self.vertical: Vec3 = vec3(0.0, 1.1547, 0.0)
        if eye is not None and target is not None and up is not None:
            self.look_at(eye, target, up, True)

    @property
    def fovy(self) -> float:
        """Vertical field of view in degrees."""
        return self._fovy

    @fovy.setter
    def fovy(self, value: float) -> None:
        self._fovy = float(value)
        self.update_viewport()

    @property
    def aspect(self) -> float:
        """Viewport aspect ratio (width / height)."""
        return self._aspect

    @aspect.setter
    def aspect(self, value: float) -> None:
        self._aspect = float(value)
        self.update_viewport()

    def look_at(self, eye, target, up, update_viewport: bool = True) -> None:
        """Orient the camera at ``eye`` looking towards ``target``."""
        self.eye = np.asarray(eye, dtype=float).copy()
        self.target = np.asarray(target, dtype=float).copy()
        self.up = np.asarray(up, dtype=float).copy()
        w = normalize(self.eye - self.target)
        u = normalize(np.cross(self.up, w))
        v = np.cross(w, u)
        xform = np.identity(4)
        xform[:3, 0] = u
        xform[:3, 1] = v
        xform[:3, 2] = w
        xform[:3, 3] = self.eye
        self.camera_xform = xform
        if update_viewport:
            self.update_viewport()

    def update_viewport(self) -> None:
        """Recompute viewport corner and axes from the transform, fovy and aspect."""
        height = 2.0 * math.tan(self._fovy * DEG_TO_RAD * 0.5)
        u = self.camera_xform[:3, 0]
        v = self.camera_xform[:3, 1]
        w = self.camera_xform[:3, 2]
        self.cop = self.camera_xform[:3, 3].copy()
        self.vertical = height * v
        self.horizontal = height * self._aspect * u
        self.lower_left_corner = self.cop - w - 0.5 * (self.horizontal + self.vertical)

    def get_ray(self, s: float, t: float) -> Ray:
        """Ray through viewport point (s, t), both in [0, 1]."""
        target = self.lower_left_corner + s * self.horizontal + t * self.vertical
        return Ray(self.cop.copy(), target - self.cop)
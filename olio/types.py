"""Numeric constants and small vector helpers shared by the renderer."""

from __future__ import annotations

import sys

import numpy as np

EPSILON = 1e-8
EPSILON2 = 1e-14
PI = 3.14159265359
TWO_PI = 6.28318530718
PI_SQUARED = 9.86960440108935861906
DEG_TO_RAD = 0.017453292519944
RAD_TO_DEG = 57.29577951307855
INFINITY = sys.float_info.max

Vec3 = np.ndarray


def clamp(value, low, high):
    """Limit ``value`` to the closed range [low, high]."""
    if value > high:
        return high
    if value < low:
        return low
    return value


def vec3(x, y, z) -> Vec3:
    """Build a three-component float vector."""
    return np.array([x, y, z], dtype=float)


def normalize(vector) -> Vec3:
    """Return ``vector`` scaled to unit length; a zero vector is returned unchanged."""
    arr = np.asarray(vector, dtype=float)
    norm = float(np.linalg.norm(arr))
    if norm > 0.0:
        return arr / norm
    return arr.copy()
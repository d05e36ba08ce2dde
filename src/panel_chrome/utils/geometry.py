"""Geometry helpers shared by the path model and the Qt bridge.

Angles are in degrees and measured in a y-down frame: 0° points along +x,
90° points along +y (downwards on screen), so a positive sweep turns
visually clockwise.
"""

import math
from typing import Tuple

import numpy as np


def unit_vector(angle_deg: float) -> Tuple[float, float]:
    """Return ``(cos, sin)`` of ``angle_deg`` with quarter turns made exact."""
    theta = math.radians(angle_deg)
    return _snap_unit(math.cos(theta)), _snap_unit(math.sin(theta))


def point_on_circle(
    cx: float, cy: float, radius: float, angle_deg: float
) -> Tuple[float, float]:
    """Return the point at ``angle_deg`` on the circle around ``(cx, cy)``."""
    c, s = unit_vector(angle_deg)
    return cx + radius * c, cy + radius * s


def arc_points(
    cx: float,
    cy: float,
    radius: float,
    start_deg: float,
    sweep_deg: float,
    steps: int = 8,
) -> np.ndarray:
    """Sample an arc into ``steps + 1`` points, endpoints included."""
    steps = max(1, int(steps))
    angles = np.radians(np.linspace(start_deg, start_deg + sweep_deg, steps + 1))
    pts = np.empty((steps + 1, 2), dtype=np.float64)
    pts[:, 0] = cx + radius * np.cos(angles)
    pts[:, 1] = cy + radius * np.sin(angles)
    pts[0] = point_on_circle(cx, cy, radius, start_deg)
    pts[-1] = point_on_circle(cx, cy, radius, start_deg + sweep_deg)
    return pts


def _snap_unit(value: float, eps: float = 1e-12) -> float:
    for exact in (-1.0, 0.0, 1.0):
        if abs(value - exact) < eps:
            return exact
    return value


__all__ = ["unit_vector", "point_on_circle", "arc_points"]

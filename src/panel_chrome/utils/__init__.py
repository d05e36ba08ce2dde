"""Geometry and Qt helpers."""

from .geometry import arc_points, point_on_circle, unit_vector

__all__ = ["arc_points", "point_on_circle", "unit_vector"]

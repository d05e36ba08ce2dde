"""Clip shape with rounded corners on the left hand side only.

The right hand corners stay square so a side panel can sit flush against an
adjoining element while its outward facing corners are rounded.
"""

from __future__ import annotations

from dataclasses import dataclass

from .models import DEFAULT_CORNER_RADIUS, Path, PathBuilder, Rect


def rounded_left_path(rect: Rect, corner_radius: float = DEFAULT_CORNER_RADIUS) -> Path:
    """Outline ``rect`` with its two left hand corners replaced by quarter arcs.

    The contour starts in the top right corner and runs clockwise. The radius
    is not checked against the rectangle; a radius above half the height
    yields overlapping arcs.
    """
    r = float(corner_radius)
    min_x_corner = rect.min_x + r
    min_y_corner = rect.min_y + r
    max_y_corner = rect.max_y - r

    builder = PathBuilder()
    builder.move_to(rect.max_x, rect.min_y)
    builder.line_to(rect.max_x, rect.max_y)
    builder.line_to(min_x_corner, rect.max_y)

    # Bottom left: from straight down (90°) round to straight left (180°)
    builder.arc((min_x_corner, max_y_corner), r, 90.0, 90.0)

    builder.line_to(rect.min_x, min_y_corner)

    # Top left: from straight left (180°) round to straight up (270°)
    builder.arc((min_x_corner, min_y_corner), r, 180.0, 90.0)

    builder.line_to(rect.max_x, rect.min_y)
    return builder.close().build()


@dataclass(frozen=True)
class RoundedLeftShape:
    """Shape value producing :func:`rounded_left_path` for any rectangle."""

    corner_radius: float = DEFAULT_CORNER_RADIUS

    def path_in(self, rect: Rect) -> Path:
        return rounded_left_path(rect, self.corner_radius)


__all__ = ["rounded_left_path", "RoundedLeftShape"]

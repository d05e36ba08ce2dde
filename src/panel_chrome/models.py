"""Dataclasses describing rectangles, paths, orientations and configuration."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
import logging
import os
from typing import List, Mapping, Optional, Tuple, Union

import numpy as np

from .utils.geometry import arc_points, point_on_circle

logger = logging.getLogger(__name__)

DEFAULT_CORNER_RADIUS = 5.0


# --------------------------------- Geometry -----------------------------------


@dataclass(frozen=True)
class Point:
    """A position in widget coordinates."""

    x: float
    y: float

    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle given by origin and size (y grows downwards)."""

    x: float
    y: float
    width: float
    height: float

    @staticmethod
    def from_edges(min_x: float, min_y: float, max_x: float, max_y: float) -> "Rect":
        return Rect(min_x, min_y, max_x - min_x, max_y - min_y)

    @property
    def min_x(self) -> float:
        return self.x

    @property
    def min_y(self) -> float:
        return self.y

    @property
    def max_x(self) -> float:
        return self.x + self.width

    @property
    def max_y(self) -> float:
        return self.y + self.height


@dataclass(frozen=True)
class MoveTo:
    """Starts the contour at ``point`` without drawing."""

    point: Point


@dataclass(frozen=True)
class LineTo:
    """Straight edge from the current point to ``point``."""

    point: Point


@dataclass(frozen=True)
class ArcTo:
    """Circular arc; angles in degrees, positive sweep is visually clockwise."""

    center: Point
    radius: float
    start_angle: float
    sweep_angle: float

    @property
    def end_angle(self) -> float:
        return self.start_angle + self.sweep_angle

    @property
    def start_point(self) -> Point:
        return Point(
            *point_on_circle(
                self.center.x, self.center.y, self.radius, self.start_angle
            )
        )

    @property
    def end_point(self) -> Point:
        return Point(
            *point_on_circle(self.center.x, self.center.y, self.radius, self.end_angle)
        )


Segment = Union[MoveTo, LineTo, ArcTo]


def _segment_end(segment: Segment) -> Point:
    if isinstance(segment, ArcTo):
        return segment.end_point
    return segment.point


@dataclass(frozen=True)
class Path:
    """A single contour made of move, line and arc segments."""

    segments: Tuple[Segment, ...] = ()
    closed: bool = False

    @property
    def start_point(self) -> Optional[Point]:
        if not self.segments:
            return None
        first = self.segments[0]
        return first.start_point if isinstance(first, ArcTo) else first.point

    @property
    def current_point(self) -> Optional[Point]:
        if not self.segments:
            return None
        return _segment_end(self.segments[-1])

    @property
    def is_closed(self) -> bool:
        """True when the contour is closed and ends where it started."""
        return self.closed and self.start_point == self.current_point

    @property
    def line_count(self) -> int:
        return sum(1 for s in self.segments if isinstance(s, LineTo))

    @property
    def arc_count(self) -> int:
        return sum(1 for s in self.segments if isinstance(s, ArcTo))

    def vertices(self) -> List[Point]:
        """Segment endpoints in drawing order (arcs contribute their end point)."""
        return [_segment_end(s) for s in self.segments]

    def flatten(self, arc_steps: int = 8) -> np.ndarray:
        """Return the contour as an ``(N, 2)`` polygon, arcs sampled."""
        pts: List[Tuple[float, float]] = []
        for seg in self.segments:
            if isinstance(seg, ArcTo):
                sampled = arc_points(
                    seg.center.x,
                    seg.center.y,
                    seg.radius,
                    seg.start_angle,
                    seg.sweep_angle,
                    arc_steps,
                )
                pts.extend((float(x), float(y)) for x, y in sampled)
            else:
                pts.append(seg.point.as_tuple())
        if not pts:
            return np.zeros((0, 2), dtype=np.float64)
        return np.asarray(pts, dtype=np.float64)


class PathBuilder:
    """Accumulates segments and produces an immutable :class:`Path`."""

    def __init__(self) -> None:
        self._segments: List[Segment] = []
        self._closed = False

    def move_to(self, x: float, y: float) -> "PathBuilder":
        self._segments.append(MoveTo(Point(x, y)))
        return self

    def line_to(self, x: float, y: float) -> "PathBuilder":
        self._segments.append(LineTo(Point(x, y)))
        return self

    def arc(
        self,
        center: Tuple[float, float],
        radius: float,
        start_angle: float,
        sweep_angle: float,
    ) -> "PathBuilder":
        self._segments.append(
            ArcTo(Point(*center), float(radius), float(start_angle), float(sweep_angle))
        )
        return self

    def close(self) -> "PathBuilder":
        self._closed = True
        return self

    def build(self) -> Path:
        return Path(tuple(self._segments), self._closed)


# -------------------------------- Orientation ---------------------------------


class Orientation(Enum):
    """Physical device orientation as reported by the platform."""

    UNKNOWN = "unknown"
    PORTRAIT = "portrait"
    PORTRAIT_UPSIDE_DOWN = "portrait-upside-down"
    LANDSCAPE_LEFT = "landscape-left"
    LANDSCAPE_RIGHT = "landscape-right"
    FACE_UP = "face-up"
    FACE_DOWN = "face-down"


# ------------------------------- Configuration --------------------------------


@dataclass
class ChromeConfig:
    """Runtime configuration, overridable through ``PANEL_CHROME_*`` variables."""

    corner_radius: float = DEFAULT_CORNER_RADIUS
    orientation_enabled: Optional[bool] = None  # None: follow the platform
    log_level: str = "INFO"

    @staticmethod
    def from_env(environ: Optional[Mapping[str, str]] = None) -> "ChromeConfig":
        env: Mapping[str, str] = os.environ if environ is None else environ
        cfg = ChromeConfig()

        raw_radius = env.get("PANEL_CHROME_CORNER_RADIUS")
        if raw_radius is not None:
            try:
                cfg.corner_radius = max(0.0, float(raw_radius))
            except ValueError:
                logger.warning(
                    "Ignoring PANEL_CHROME_CORNER_RADIUS=%r, using %s",
                    raw_radius,
                    cfg.corner_radius,
                )

        raw_orientation = env.get("PANEL_CHROME_ORIENTATION")
        if raw_orientation is not None:
            value = raw_orientation.strip().lower()
            if value in ("1", "true", "on", "yes"):
                cfg.orientation_enabled = True
            elif value in ("0", "false", "off", "no"):
                cfg.orientation_enabled = False
            elif value not in ("", "auto"):
                logger.warning("Ignoring PANEL_CHROME_ORIENTATION=%r", raw_orientation)

        raw_level = env.get("PANEL_CHROME_LOG_LEVEL")
        if raw_level is not None:
            level = raw_level.strip().upper()
            if level in {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}:
                cfg.log_level = level
            else:
                logger.warning("Ignoring PANEL_CHROME_LOG_LEVEL=%r", raw_level)

        return cfg


__all__ = [
    "DEFAULT_CORNER_RADIUS",
    "Point",
    "Rect",
    "MoveTo",
    "LineTo",
    "ArcTo",
    "Segment",
    "Path",
    "PathBuilder",
    "Orientation",
    "ChromeConfig",
]

"""Qt helper utilities."""

from typing import Dict, Union

from PySide6 import QtCore, QtGui

from ..models import ArcTo, LineTo, MoveTo, Orientation, Path, Rect

_SO = QtCore.Qt.ScreenOrientation

_QT_ORIENTATIONS: Dict[QtCore.Qt.ScreenOrientation, Orientation] = {
    _SO.PortraitOrientation: Orientation.PORTRAIT,
    _SO.InvertedPortraitOrientation: Orientation.PORTRAIT_UPSIDE_DOWN,
    _SO.LandscapeOrientation: Orientation.LANDSCAPE_LEFT,
    _SO.InvertedLandscapeOrientation: Orientation.LANDSCAPE_RIGHT,
}


def rect_from_qt(rect: Union[QtCore.QRect, QtCore.QRectF]) -> Rect:
    """Convert a :class:`~PySide6.QtCore.QRect` or ``QRectF`` into a :class:`Rect`."""
    r = rect.toRectF() if isinstance(rect, QtCore.QRect) else rect
    return Rect(float(r.x()), float(r.y()), float(r.width()), float(r.height()))


def to_painter_path(path: Path) -> QtGui.QPainterPath:
    """Replay ``path`` into a :class:`~PySide6.QtGui.QPainterPath`."""
    qpath = QtGui.QPainterPath()
    for seg in path.segments:
        if isinstance(seg, MoveTo):
            qpath.moveTo(seg.point.x, seg.point.y)
        elif isinstance(seg, LineTo):
            qpath.lineTo(seg.point.x, seg.point.y)
        elif isinstance(seg, ArcTo):
            r = seg.radius
            bounds = QtCore.QRectF(seg.center.x - r, seg.center.y - r, 2 * r, 2 * r)
            # Qt measures angles counter-clockwise on screen
            qpath.arcTo(bounds, -seg.start_angle, -seg.sweep_angle)
    if path.closed:
        qpath.closeSubpath()
    return qpath


def to_region(path: Path) -> QtGui.QRegion:
    """Rasterise ``path`` into a :class:`~PySide6.QtGui.QRegion` usable as a mask."""
    qpath = to_painter_path(path)
    return QtGui.QRegion(qpath.toFillPolygon().toPolygon())


def orientation_from_qt(value: QtCore.Qt.ScreenOrientation) -> Orientation:
    """Map a Qt screen orientation onto :class:`Orientation`."""
    return _QT_ORIENTATIONS.get(value, Orientation.UNKNOWN)


__all__ = ["rect_from_qt", "to_painter_path", "to_region", "orientation_from_qt"]

from PySide6 import QtCore
import pytest

from panel_chrome.models import Rect
from panel_chrome.shapes import rounded_left_path
from panel_chrome.utils.qt import rect_from_qt, to_painter_path, to_region


def test_rect_from_qt_accepts_int_and_float_rects() -> None:
    assert rect_from_qt(QtCore.QRect(1, 2, 30, 40)) == Rect(1, 2, 30, 40)
    assert rect_from_qt(QtCore.QRectF(0.5, 1.5, 10.0, 4.0)) == Rect(0.5, 1.5, 10, 4)


def test_painter_path_outline_matches_rect() -> None:
    qpath = to_painter_path(rounded_left_path(Rect(0, 0, 100, 50), 10))
    bounds = qpath.boundingRect()

    assert bounds.left() == pytest.approx(0.0)
    assert bounds.top() == pytest.approx(0.0)
    assert bounds.right() == pytest.approx(100.0)
    assert bounds.bottom() == pytest.approx(50.0)

    assert qpath.contains(QtCore.QPointF(99.5, 0.5))
    assert qpath.contains(QtCore.QPointF(99.5, 49.5))
    assert qpath.contains(QtCore.QPointF(50.0, 25.0))
    assert not qpath.contains(QtCore.QPointF(1.0, 1.0))
    assert not qpath.contains(QtCore.QPointF(1.0, 49.0))


def test_painter_path_starts_top_right_and_is_closed() -> None:
    qpath = to_painter_path(rounded_left_path(Rect(0, 0, 100, 50), 5))
    first = qpath.elementAt(0)
    last = qpath.elementAt(qpath.elementCount() - 1)

    assert (first.x, first.y) == (100.0, 0.0)
    assert (last.x, last.y) == pytest.approx((100.0, 0.0))


def test_zero_radius_region_is_full_rectangle(qapp) -> None:
    region = to_region(rounded_left_path(Rect(0, 0, 40, 20), 0))
    assert not region.isEmpty()
    assert region.contains(QtCore.QPoint(0, 0))
    assert region.contains(QtCore.QPoint(39, 19))

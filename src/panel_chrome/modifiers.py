"""Chainable widget decorations.

Each function takes a widget, attaches its behaviour through an event filter
parented to that widget and returns the widget unchanged so calls compose::

    on_rotate(rounded_corners_on_the_left(panel, 8), handle_rotation)
"""

from __future__ import annotations

import logging
from typing import Optional, TypeVar

from PySide6 import QtCore, QtWidgets

from .models import DEFAULT_CORNER_RADIUS
from .orientation import (
    AnyOrientationRelay,
    OrientationCallback,
    Subscription,
    relay_for_platform,
)
from .shapes import RoundedLeftShape
from .utils.qt import rect_from_qt, to_region

logger = logging.getLogger(__name__)

W = TypeVar("W", bound=QtWidgets.QWidget)

_CLIP_ATTR = "_panel_chrome_left_clip"


# ------------------------------ Rounded clipping ------------------------------


class _RoundedLeftClip(QtCore.QObject):
    """Keeps the parent widget's mask in sync with its size."""

    def __init__(self, widget: QtWidgets.QWidget, corner_radius: float) -> None:
        super().__init__(widget)
        self._shape = RoundedLeftShape(float(corner_radius))
        widget.installEventFilter(self)

    @property
    def corner_radius(self) -> float:
        return self._shape.corner_radius

    def set_corner_radius(self, corner_radius: float) -> None:
        self._shape = RoundedLeftShape(float(corner_radius))
        self.apply()

    def apply(self) -> None:
        widget = self.parent()
        if not isinstance(widget, QtWidgets.QWidget):
            return
        rect = widget.rect()
        if rect.isEmpty():
            return
        widget.setMask(to_region(self._shape.path_in(rect_from_qt(rect))))

    def eventFilter(self, obj: QtCore.QObject, event: QtCore.QEvent) -> bool:
        if obj is self.parent() and event.type() in (
            QtCore.QEvent.Type.Resize,
            QtCore.QEvent.Type.Show,
        ):
            self.apply()
        return False


def rounded_corners_on_the_left(
    widget: W, corner_radius: float = DEFAULT_CORNER_RADIUS
) -> W:
    """Clip ``widget`` so that only its left hand corners are rounded.

    Calling it again on the same widget updates the radius.
    """
    clip = getattr(widget, _CLIP_ATTR, None)
    if isinstance(clip, _RoundedLeftClip):
        clip.set_corner_radius(corner_radius)
        return widget

    clip = _RoundedLeftClip(widget, corner_radius)
    setattr(widget, _CLIP_ATTR, clip)
    logger.debug(
        "Left corner clip installed on %s (radius %s)",
        widget.objectName() or type(widget).__name__,
        corner_radius,
    )
    clip.apply()
    return widget


# ------------------------------ Rotation events -------------------------------


class _RotationBinding:
    """Owns the subscription for one widget; attached while the widget is shown."""

    def __init__(
        self, relay: AnyOrientationRelay, perform: OrientationCallback
    ) -> None:
        self._relay = relay
        self._perform = perform
        self._subscription: Optional[Subscription] = None

    @property
    def attached(self) -> bool:
        return self._subscription is not None and self._subscription.active

    def attach(self) -> None:
        if self.attached:
            return
        self._subscription = self._relay.attach(self._perform)

    def release(self) -> None:
        subscription, self._subscription = self._subscription, None
        if subscription is not None:
            subscription.release()


class _RotationObserver(QtCore.QObject):
    def __init__(self, widget: QtWidgets.QWidget, binding: _RotationBinding) -> None:
        super().__init__(widget)
        self.binding = binding
        widget.installEventFilter(self)

    def eventFilter(self, obj: QtCore.QObject, event: QtCore.QEvent) -> bool:
        if obj is self.parent():
            if event.type() == QtCore.QEvent.Type.Show:
                self.binding.attach()
            elif event.type() == QtCore.QEvent.Type.Hide:
                self.binding.release()
        return False


def on_rotate(
    widget: W,
    perform: OrientationCallback,
    *,
    relay: Optional[AnyOrientationRelay] = None,
) -> W:
    """Call ``perform`` with the new orientation every time the device rotates.

    The callback is registered while ``widget`` is shown and released when it
    is hidden or destroyed. Without ``relay`` the platform default is used.
    Repeated calls stack: every callback is kept.
    """
    if relay is None:
        relay = relay_for_platform()

    binding = _RotationBinding(relay, perform)
    _RotationObserver(widget, binding)
    # The observer is a child and may be gone before destroyed() fires
    widget.destroyed.connect(lambda *_: binding.release())

    if widget.isVisible():
        binding.attach()
    return widget


__all__ = ["rounded_corners_on_the_left", "on_rotate"]

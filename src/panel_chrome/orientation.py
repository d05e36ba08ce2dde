"""Relay device orientation changes to a callback.

Only mobile platforms report physical rotation; everywhere else
:func:`relay_for_platform` hands out a relay whose subscriptions never fire.
"""

from __future__ import annotations

import logging
import sys
from typing import Any, Callable, Optional, Union

from PySide6 import QtCore, QtGui

from .models import Orientation
from .utils.qt import orientation_from_qt

logger = logging.getLogger(__name__)

HAS_DEVICE_ORIENTATION: bool = sys.platform in ("android", "ios")

OrientationCallback = Callable[[Orientation], None]
DeviceAccessor = Callable[[], Orientation]


class Subscription:
    """Handle for one callback registration; :meth:`release` runs at most once."""

    def __init__(self, release: Optional[Callable[[], None]] = None) -> None:
        self._release = release

    @property
    def active(self) -> bool:
        return self._release is not None

    def release(self) -> None:
        release, self._release = self._release, None
        if release is not None:
            release()


class OrientationRelay:
    """Forward every orientation notification to a callback.

    ``notification`` is the signal announcing a change; its payload is
    ignored and ``device`` is queried for the current orientation instead.
    """

    def __init__(
        self, notification: QtCore.SignalInstance, device: DeviceAccessor
    ) -> None:
        self._notification = notification
        self._device = device

    def attach(self, callback: OrientationCallback) -> Subscription:
        def on_notification(*_payload: Any) -> None:
            if not subscription.active:
                return
            callback(self._device())

        def disconnect() -> None:
            try:
                self._notification.disconnect(on_notification)
            except (RuntimeError, TypeError) as exc:
                # Sender already destroyed or slot already gone
                logger.debug("Orientation slot disconnect skipped: %s", exc)

        subscription = Subscription(disconnect)
        self._notification.connect(on_notification)
        logger.debug("Orientation relay attached")
        return subscription


class NullOrientationRelay:
    """Relay for platforms without orientation notifications."""

    def attach(self, callback: OrientationCallback) -> Subscription:
        return Subscription()


AnyOrientationRelay = Union[OrientationRelay, NullOrientationRelay]


class ScreenOrientationDevice:
    """Current orientation of a :class:`~PySide6.QtGui.QScreen`."""

    def __init__(self, screen: QtGui.QScreen) -> None:
        self._screen = screen

    @property
    def notification(self) -> QtCore.SignalInstance:
        return self._screen.orientationChanged

    def __call__(self) -> Orientation:
        return orientation_from_qt(self._screen.orientation())


def relay_for_platform(
    screen: Optional[QtGui.QScreen] = None, *, enabled: Optional[bool] = None
) -> AnyOrientationRelay:
    """Build the relay matching the platform's orientation capability.

    ``enabled`` overrides :data:`HAS_DEVICE_ORIENTATION`, e.g. from
    :class:`~panel_chrome.models.ChromeConfig`.
    """
    if enabled is None:
        enabled = HAS_DEVICE_ORIENTATION
    if not enabled:
        logger.debug("Device orientation unavailable on %s", sys.platform)
        return NullOrientationRelay()

    if screen is None:
        screen = QtGui.QGuiApplication.primaryScreen()
    if screen is None:
        logger.warning("No screen available, orientation changes will not be reported")
        return NullOrientationRelay()

    device = ScreenOrientationDevice(screen)
    return OrientationRelay(device.notification, device)


__all__ = [
    "HAS_DEVICE_ORIENTATION",
    "Subscription",
    "OrientationRelay",
    "NullOrientationRelay",
    "ScreenOrientationDevice",
    "relay_for_platform",
]

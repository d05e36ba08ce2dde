"""Shared fixtures: an offscreen QApplication and a controllable device."""

import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PySide6 import QtCore, QtWidgets  # noqa: E402
import pytest  # noqa: E402

from panel_chrome.models import Orientation  # noqa: E402


class FakeDevice(QtCore.QObject):
    """Stands in for the platform: a change signal plus the current state."""

    orientationDidChange = QtCore.Signal(object)

    def __init__(self) -> None:
        super().__init__()
        self.orientation = Orientation.UNKNOWN

    def __call__(self) -> Orientation:
        return self.orientation

    def rotate(self, value: Orientation, payload: object = None) -> None:
        self.orientation = value
        self.orientationDidChange.emit(payload)


@pytest.fixture(scope="session")
def qapp():
    app = QtWidgets.QApplication.instance() or QtWidgets.QApplication([])
    yield app


@pytest.fixture
def device() -> FakeDevice:
    return FakeDevice()

from PySide6 import QtCore

from panel_chrome.app import MainController
from panel_chrome.models import ChromeConfig, Orientation


def test_controller_clips_panel_and_follows_radius_spin(qapp) -> None:
    ctrl = MainController(qapp, ChromeConfig())
    ctrl.show()
    qapp.processEvents()
    panel = ctrl.window.panel

    assert not panel.mask().isEmpty()
    assert not panel.mask().contains(QtCore.QPoint(0, 0))
    assert panel.mask().contains(QtCore.QPoint(panel.width() // 2, panel.height() // 2))

    ctrl.window.radius_spin.setValue(0)
    qapp.processEvents()

    assert ctrl.cfg.corner_radius == 0
    assert panel.mask().contains(QtCore.QPoint(0, 0))

    ctrl.window.close()


def test_controller_reports_rotation_in_label(qapp) -> None:
    ctrl = MainController(qapp, ChromeConfig(orientation_enabled=False))
    label = ctrl.window.orientation_label
    assert label.text() == "Orientation: not reported on this platform"

    ctrl._on_rotate(Orientation.PORTRAIT)
    assert label.text() == "Orientation: portrait"
    ctrl.window.close()

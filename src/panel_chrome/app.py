"""Qt demo application showing the panel_chrome widget decorations."""

from __future__ import annotations

import logging
import sys

from PySide6 import QtCore, QtWidgets

from . import __version__ as APP_VERSION
from .logging_config import setup_logging
from .models import ChromeConfig, Orientation
from .modifiers import on_rotate, rounded_corners_on_the_left
from .orientation import HAS_DEVICE_ORIENTATION, relay_for_platform

logger = logging.getLogger(__name__)


# ------------------------------- Demo Window ----------------------------------


class DemoWindow(QtWidgets.QWidget):
    """Content area with a side panel docked flush against its right edge."""

    def __init__(self, cfg: ChromeConfig) -> None:
        super().__init__(None)
        self.setWindowTitle(f"panel_chrome {APP_VERSION}")
        self.resize(640, 400)

        self.content = QtWidgets.QLabel("Content")
        self.content.setAlignment(QtCore.Qt.AlignmentFlag.AlignCenter)

        self.panel = QtWidgets.QFrame()
        self.panel.setObjectName("sidePanel")
        self.panel.setFixedWidth(200)
        self.panel.setStyleSheet("#sidePanel { background: #3a3f4b; color: white; }")

        self.radius_spin = QtWidgets.QSpinBox()
        self.radius_spin.setRange(0, 60)
        self.radius_spin.setValue(int(round(cfg.corner_radius)))
        self.radius_spin.setPrefix("Corner radius: ")

        self.orientation_label = QtWidgets.QLabel(
            self._orientation_text(None, cfg.orientation_enabled)
        )
        self.orientation_label.setWordWrap(True)

        panel_layout = QtWidgets.QVBoxLayout(self.panel)
        panel_layout.addWidget(self.radius_spin)
        panel_layout.addWidget(self.orientation_label)
        panel_layout.addStretch(1)

        layout = QtWidgets.QHBoxLayout(self)
        layout.setContentsMargins(12, 12, 0, 12)
        layout.setSpacing(0)
        layout.addWidget(self.content, 1)
        layout.addWidget(self.panel)

    @staticmethod
    def _orientation_text(value: Orientation | None, enabled: bool | None) -> str:
        if value is not None:
            return f"Orientation: {value.value}"
        supported = HAS_DEVICE_ORIENTATION if enabled is None else enabled
        if not supported:
            return "Orientation: not reported on this platform"
        return "Orientation: waiting for rotation"

    def show_orientation(self, value: Orientation) -> None:
        self.orientation_label.setText(self._orientation_text(value, True))


# ---------------------------- Main Controller ---------------------------------


class MainController(QtCore.QObject):
    def __init__(self, app: QtWidgets.QApplication, cfg: ChromeConfig) -> None:
        super().__init__(None)
        self.app = app
        self.cfg = cfg
        self.window = DemoWindow(cfg)

        relay = relay_for_platform(enabled=cfg.orientation_enabled)
        on_rotate(
            rounded_corners_on_the_left(self.window.panel, cfg.corner_radius),
            self._on_rotate,
            relay=relay,
        )
        self.window.radius_spin.valueChanged.connect(self._on_radius_changed)

    def _on_radius_changed(self, value: int) -> None:
        self.cfg.corner_radius = float(value)
        rounded_corners_on_the_left(self.window.panel, self.cfg.corner_radius)

    def _on_rotate(self, value: Orientation) -> None:
        logger.info("Device rotated: %s", value.value)
        self.window.show_orientation(value)

    def show(self) -> None:
        self.window.show()


# ---------------------------------- Main --------------------------------------


def main() -> None:
    cfg = ChromeConfig.from_env()
    setup_logging(cfg.log_level)

    app = QtWidgets.QApplication(sys.argv)
    app.setApplicationName("panel_chrome")
    app.setApplicationVersion(APP_VERSION)

    ctrl = MainController(app, cfg)
    ctrl.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()

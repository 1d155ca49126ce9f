"""Single-file fan controller launcher.

Run this from the project root with:

    python gui.py

It opens a window holding one fan dial, a status line that follows the
dial through the global `dispatch` object, and a lock switch that claims
clicks before the dial sees them.

Environment:
    FAN_DIAL_COLOR_LOW / _MEDIUM / _HIGH   Dial colors (see metadata.py)
    FAN_DIAL_LOG_LEVEL                     Logging level (default: INFO)
"""
from __future__ import annotations
import logging
import os
import sys
from PyQt6.QtWidgets import (
    QApplication, QMainWindow, QWidget, QVBoxLayout, QGroupBox, QLabel, QCheckBox
)
from PyQt6.QtCore import Qt

from metadata import DEFAULT_APP_COLORS, load_dial_colors
from dispatcher import dispatch
from widgets.dial import DialView

logger = logging.getLogger(__name__)


class FanControllerWindow(QMainWindow):
    def __init__(self, colors=None):
        super().__init__()
        self.setWindowTitle("Fan Controller")
        central = QWidget()
        self.setCentralWidget(central)
        root_layout = QVBoxLayout(central)
        root_layout.setContentsMargins(6, 6, 6, 6)
        root_layout.setSpacing(8)

        if colors is None:
            colors = load_dial_colors(defaults=DEFAULT_APP_COLORS)

        # Dial
        dial_box = QGroupBox("Fan Control")
        d_layout = QVBoxLayout(dial_box)
        self.chk_lock = QCheckBox("Lock dial")
        self.dial = DialView(colors=colors, upstream_handler=self.chk_lock.isChecked)
        d_layout.addWidget(self.dial, 1)
        d_layout.addWidget(self.chk_lock)
        root_layout.addWidget(dial_box, 1)

        # Status line
        self.status_label = QLabel()
        self.status_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._show_speed(self.dial.fanSpeed().name)
        root_layout.addWidget(self.status_label)

        # Connections: forward dial signals to the dispatcher, then to the UI
        self.dial.fanSpeedChanged.connect(dispatch.fanSpeedChanged)
        self.dial.descriptionChanged.connect(dispatch.descriptionChanged)
        dispatch.fanSpeedChanged.connect(self._show_speed)
        dispatch.descriptionChanged.connect(self._show_description)
        self._show_description(self.dial.currentDescription())

    def _show_speed(self, name: str):
        self.status_label.setText(f"Fan speed: {name.lower()}")

    def _show_description(self, text: str):
        self.dial.setToolTip(f"Fan speed: {text}")

    def closeEvent(self, event):
        for signal, slot in ((dispatch.fanSpeedChanged, self._show_speed),
                             (dispatch.descriptionChanged, self._show_description)):
            try:
                signal.disconnect(slot)
            except TypeError:
                pass  # Already disconnected
        super().closeEvent(event)


def resolve_log_level(name) -> int:
    """Numeric logging level for a level name, INFO if the name is unknown."""
    level = logging.getLevelName((name or "INFO").strip().upper())
    if not isinstance(level, int):
        return logging.INFO
    return level


def main(argv=None):
    argv = argv or sys.argv
    logging.basicConfig(
        level=resolve_log_level(os.getenv("FAN_DIAL_LOG_LEVEL")),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app = QApplication(argv)

    win = FanControllerWindow()
    win.resize(480, 560)
    win.show()
    logger.info("Fan controller started")
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())

"""
Manual demo for `DialView`.
Run this from the project root or add the project root to `PYTHONPATH`.

Shows three dials side by side: traffic-light colors, a single configured
color, and no colors at all (active speeds render transparent). A timer
advances the first dial every second; the others respond to clicks and
Space/Return.

Usage:
    python -m tests.manual_dial_demo
"""
import logging
import sys
from PyQt6.QtCore import QTimer
from PyQt6.QtWidgets import QApplication, QWidget, QHBoxLayout

from metadata import DialColors
from widgets.dial import DialView


def main():
    logging.basicConfig(level=logging.DEBUG)
    app = QApplication(sys.argv)

    window = QWidget()
    window.setWindowTitle("DialView Test")
    layout = QHBoxLayout(window)

    auto_dial = DialView(colors=DialColors(low="#ff0000", medium="#ffeb3b", high="#00c853"))
    single_dial = DialView(colors=DialColors(high="#1e90ff"))
    bare_dial = DialView(colors=DialColors())

    layout.addWidget(auto_dial)
    layout.addWidget(single_dial)
    layout.addWidget(bare_dial)

    for dial in (auto_dial, single_dial, bare_dial):
        dial.fanSpeedChanged.connect(lambda name: print(f"speed: {name}"))

    timer = QTimer()
    timer.timeout.connect(auto_dial.activate)
    timer.start(1000)  # Advance every second

    window.resize(1200, 450)
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()

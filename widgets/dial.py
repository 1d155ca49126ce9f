"""
DialView Widget - Click-to-Cycle Fan Speed Dial
================================================

A custom PyQt6 widget that shows a circular dial for a fan with four
discrete speeds. Every click (or Space/Return while focused) advances the
dial one step: OFF → LOW → MEDIUM → HIGH → OFF.

Features:
    • Colored disc showing the current speed (gray when OFF)
    • Black indicator dot pointing at the selected position
    • Speed labels ("off", "1", "2", "3") arranged around the disc
    • Three configurable colors for LOW, MEDIUM and HIGH
    • Accessible description kept in sync with the selected speed
    • Qt signals for every speed change

Rendering Model:
    State changes never paint directly. activate() mutates the speed,
    recomputes the narrated description and calls update(); Qt then
    delivers paintEvent(), which reads the state and issues draw calls
    through a PainterSurface. renderDial() can be driven with any object
    offering the same drawing methods.

Usage Examples:
    Basic usage:
        dial = DialView(colors=DialColors(low="red", medium="yellow", high="green"))
        dial.fanSpeedChanged.connect(lambda name: print(name))

    Colors from the environment (FAN_DIAL_COLOR_LOW, ...):
        dial = DialView()

    Host-side click handling:
        # Returning True marks the click as handled; the dial keeps its speed
        dial = DialView(upstream_handler=lambda: locked)

    Qt Designer promotion:
        Base class: QWidget
        Promoted class: DialView
        Header file: widgets.dial

Author: Dyumna137
Date: 2025-11-06
Version: 1.0
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Callable, Optional, Tuple

from PyQt6.QtWidgets import QWidget
from PyQt6.QtGui import QPainter, QColor, QFont, QFontMetricsF
from PyQt6.QtCore import QPointF, QSize, Qt, pyqtSignal

from metadata import (
    ACTION_CHANGE,
    ACTION_RESET,
    MAX_SPEED,
    SPEEDS,
    DialColors,
    FanSpeed,
    load_dial_colors,
    lookup,
)
from .geometry import (
    compute_radius,
    indicator_dot_radius,
    indicator_ring_radius,
    label_ring_radius,
    position_for_index,
)

logger = logging.getLogger(__name__)

# ============================================================================
# === COLOR AND FONT CONSTANTS ===
# ============================================================================

_COLOR_OFF = QColor("#888888")          # Neutral gray, not configurable
_COLOR_INDICATOR = QColor("#000000")    # Indicator dot
_COLOR_LABEL = QColor("#000000")        # Speed labels
_COLOR_UNSET = QColor(0, 0, 0, 0)       # Fully transparent

LABEL_FONT_SIZE = 55                    # Pixels
LABEL_FONT_WEIGHT = QFont.Weight.Bold


def _resolve_color(value: Optional[str]) -> QColor:
    """Turn a configured color string into a QColor, transparent if unusable."""
    if not value:
        return QColor(_COLOR_UNSET)

    color = QColor(value)
    if not color.isValid():
        logger.warning("Ignoring invalid dial color %r, using transparent", value)
        return QColor(_COLOR_UNSET)
    return color


@dataclass(frozen=True)
class AccessibilityDescriptor:
    """
    What assistive technology should announce for the dial.

    Attributes:
        description (str): Display text of the current speed, e.g. "2"
        action_label (str): Label of the click action; "reset" when the
                           next click wraps back to OFF, "change" otherwise
    """

    description: str
    action_label: str


class PainterSurface:
    """
    Drawing surface handed to DialView.renderDial().

    Wraps a QPainter so the dial only needs two primitives: filled circles
    and centered text. The painter must already be active.

    Attributes:
        width (float): Surface width in pixels
        height (float): Surface height in pixels
    """

    def __init__(self, painter: QPainter, width: float, height: float):
        self._painter = painter
        self.width = width
        self.height = height

    def draw_filled_circle(self, cx: float, cy: float, r: float, color: QColor):
        self._painter.setPen(Qt.PenStyle.NoPen)
        self._painter.setBrush(color)
        self._painter.drawEllipse(QPointF(cx, cy), r, r)

    def draw_centered_text(self, text: str, x: float, y: float, color: QColor,
                           font_size: int, font_weight: QFont.Weight):
        """Draw text horizontally centered on x, with its baseline at y."""
        font = QFont(self._painter.font())
        font.setPixelSize(font_size)
        font.setWeight(font_weight)

        advance = QFontMetricsF(font).horizontalAdvance(text)

        self._painter.setFont(font)
        self._painter.setPen(color)
        self._painter.drawText(QPointF(x - advance / 2.0, y), text)


class DialView(QWidget):
    """
    Fan speed dial that advances one speed per activation.

    The widget owns all of its state: the selected speed, the disc radius
    (derived from the widget size) and the three speed colors. None of it
    can be set from outside; the speed only changes through activate() and
    the radius only through resizeDial().

    Attributes:
        _speed (FanSpeed): Currently selected speed (starts at OFF)
        _radius (float): Disc radius, 0.0 until the first resize
        _colors (dict): FanSpeed → QColor for LOW, MEDIUM and HIGH
        _description (str): Narrated text for the current speed

    Signals:
        fanSpeedChanged (str): New FanSpeed name after each activation
        descriptionChanged (str): New narrated description after each activation
    """

    fanSpeedChanged = pyqtSignal(str)
    descriptionChanged = pyqtSignal(str)

    def __init__(
        self,
        parent=None,
        colors: Optional[DialColors] = None,
        upstream_handler: Optional[Callable[[], bool]] = None,
    ):
        """
        Initialize DialView widget.

        Args:
            parent: Parent widget (default: None)
            colors: Colors for LOW, MEDIUM and HIGH. When None they are read
                   from the FAN_DIAL_COLOR_* environment variables; anything
                   missing renders fully transparent.
            upstream_handler: Optional host click handler, called first on
                   every activation. If it returns True the click counts as
                   handled and the dial does not advance.
        """
        super().__init__(parent)

        if colors is None:
            colors = load_dial_colors()

        # === Initialize state ===
        self._speed = FanSpeed.OFF
        self._radius = 0.0
        self._colors = {
            speed: _resolve_color(colors.for_speed(speed))
            for speed in (FanSpeed.LOW, FanSpeed.MEDIUM, FanSpeed.HIGH)
        }
        self._upstream_handler = upstream_handler
        self._description = ""

        # === Clickable and focusable ===
        self.setFocusPolicy(Qt.FocusPolicy.StrongFocus)
        self.setCursor(Qt.CursorShape.PointingHandCursor)
        self.setAccessibleName("Fan speed")

        self._update_content_description()

    # ========================================================================
    # === State Accessors ===
    # ========================================================================

    def fanSpeed(self) -> FanSpeed:
        return self._speed

    def radius(self) -> float:
        return self._radius

    def colors(self) -> Tuple[QColor, QColor, QColor]:
        """Copies of the (LOW, MEDIUM, HIGH) colors."""
        return tuple(QColor(self._colors[s]) for s in (FanSpeed.LOW, FanSpeed.MEDIUM, FanSpeed.HIGH))

    def currentDescription(self) -> str:
        """Display text of the current speed, as narrated to screen readers."""
        return self._description

    def accessibilityDescriptor(self) -> AccessibilityDescriptor:
        """
        Current description and click-action label.

        The action label tells assistive technology what a click will do:
        at HIGH it resets the fan, everywhere else it changes the speed.

        Example:
            >>> dial.accessibilityDescriptor()
            AccessibilityDescriptor(description='off', action_label='change')
        """
        action = ACTION_RESET if self._speed is MAX_SPEED else ACTION_CHANGE
        return AccessibilityDescriptor(self._description, lookup(action))

    def fillColor(self) -> QColor:
        """Disc color for the current speed."""
        return QColor(self._colors.get(self._speed, _COLOR_OFF))

    # ========================================================================
    # === State Mutation ===
    # ========================================================================

    def resizeDial(self, width: float, height: float):
        """
        Recompute the disc radius for new widget bounds.

        Called from resizeEvent(); hosts driving the dial without Qt
        layouts must call it before the first paint.

        Args:
            width: New width in pixels
            height: New height in pixels
        """
        self._radius = compute_radius(width, height)
        logger.debug("Dial resized to %sx%s, radius %.1f", width, height, self._radius)

    def activate(self) -> bool:
        """
        Advance the dial by one speed.

        The upstream handler (if any) runs first. When it reports the click
        as handled, the dial returns immediately without changing state.

        Sequence:
            1. Advance to the next speed (HIGH wraps to OFF)
            2. Recompute the narrated description
            3. Emit fanSpeedChanged and descriptionChanged
            4. Schedule exactly one repaint

        Returns:
            True, always; the activation is consumed either way.
        """
        if self._dispatch_upstream():
            logger.debug("Activation handled upstream, staying at %s", self._speed.name)
            return True

        previous = self._speed
        self._speed = self._speed.next()
        self._update_content_description()
        logger.debug("Fan speed %s -> %s", previous.name, self._speed.name)

        self.fanSpeedChanged.emit(self._speed.name)
        self.descriptionChanged.emit(self._description)

        self.update()  # Schedule repaint
        return True

    def _dispatch_upstream(self) -> bool:
        if self._upstream_handler is None:
            return False
        return bool(self._upstream_handler())

    def _update_content_description(self):
        self._description = lookup(self._speed.label)
        self.setAccessibleDescription(self._description)

    # ========================================================================
    # === Rendering ===
    # ========================================================================

    def renderDial(self, surface):
        """
        Draw the dial onto a surface.

        Reads state only. Draw order:
            1. Disc at the surface center, colored for the current speed
            2. Indicator dot on the inner ring at the current position
            3. One label per speed on the outer ring, in OFF..HIGH order

        Args:
            surface: PainterSurface, or any object with width, height,
                    draw_filled_circle() and draw_centered_text()
        """
        cx = surface.width / 2.0
        cy = surface.height / 2.0

        surface.draw_filled_circle(cx, cy, self._radius, self.fillColor())

        x, y = position_for_index(self._speed.ordinal, indicator_ring_radius(self._radius), cx, cy)
        surface.draw_filled_circle(x, y, indicator_dot_radius(self._radius), _COLOR_INDICATOR)

        label_radius = label_ring_radius(self._radius)
        for speed in SPEEDS:
            x, y = position_for_index(speed.ordinal, label_radius, cx, cy)
            surface.draw_centered_text(
                lookup(speed.label), x, y, _COLOR_LABEL, LABEL_FONT_SIZE, LABEL_FONT_WEIGHT
            )

    # ========================================================================
    # === Qt Event Handlers ===
    # ========================================================================

    def sizeHint(self) -> QSize:
        return QSize(400, 400)

    def minimumSizeHint(self) -> QSize:
        return QSize(120, 120)

    def resizeEvent(self, event):
        self.resizeDial(event.size().width(), event.size().height())
        super().resizeEvent(event)

    def paintEvent(self, event):
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        painter.setRenderHint(QPainter.RenderHint.TextAntialiasing)
        try:
            self.renderDial(PainterSurface(painter, self.width(), self.height()))
        finally:
            painter.end()

    def mousePressEvent(self, event):
        # Accept the press so the matching release is delivered here
        if event.button() == Qt.MouseButton.LeftButton:
            event.accept()
        else:
            super().mousePressEvent(event)

    def mouseReleaseEvent(self, event):
        if (event.button() == Qt.MouseButton.LeftButton
                and self.rect().contains(event.position().toPoint())):
            self.activate()
            event.accept()
        else:
            super().mouseReleaseEvent(event)

    def keyPressEvent(self, event):
        # Holding the key is still one activation
        if event.isAutoRepeat():
            super().keyPressEvent(event)
        elif event.key() in (Qt.Key.Key_Space, Qt.Key.Key_Return, Qt.Key.Key_Enter):
            self.activate()
            event.accept()
        else:
            super().keyPressEvent(event)

"""
Fan Dial Controller - Custom Widgets Package
============================================

This package contains the custom PyQt6 widget for the fan dial and the
geometry helpers it draws with.

Custom Widget Classes:
    DialView (widgets.dial)
        • Purpose: Click-to-cycle fan speed selector
        • States: off (gray), 1, 2, 3 (configurable colors)
        • Use case: Embedding a fan control in a larger window

Supporting Modules:
    geometry (widgets.geometry)
        • Disc radius from widget bounds
        • Polar placement of labels and the indicator dot

Import Patterns:
    Package-level import (recommended):
        >>> from widgets import DialView
        >>> dial = DialView()

    Individual module import:
        >>> from widgets.dial import DialView, PainterSurface
        >>> from widgets.geometry import compute_radius, position_for_index

Qt Designer Integration:
    1. Add a QWidget to the form
    2. Right-click → "Promote to..."
    3. Base class: QWidget, Promoted class: DialView, Header file: widgets.dial

    Example .ui snippet:
        <customwidgets>
          <customwidget>
            <class>DialView</class>
            <extends>QWidget</extends>
            <header>widgets.dial</header>
          </customwidget>
        </customwidgets>

Dependencies:
    Required:
        • PyQt6 >= 6.0.0
        • Python >= 3.9

Testing:
    Manual demo:
        python -m tests.manual_dial_demo

Author: Dyumna137
Version: 1.0.0
License: MIT
"""

# ============================================================================
# === WIDGET IMPORTS ===
# ============================================================================

from .dial import DialView, PainterSurface, AccessibilityDescriptor   # Fan dial
from .geometry import compute_radius, position_for_index               # Layout math

# ============================================================================
# === PACKAGE METADATA ===
# ============================================================================

__all__ = [
    'DialView',
    'PainterSurface',
    'AccessibilityDescriptor',
    'compute_radius',
    'position_for_index',
]

__version__ = '1.0.0'
__author__ = 'Dyumna137'
__license__ = 'MIT'

# ============================================================================
# === WIDGET REGISTRY (For Dynamic Access) ===
# ============================================================================

# Dictionary mapping widget names to classes
WIDGET_REGISTRY = {
    'DialView': DialView,
}

# Widget base classes (for Qt Designer promotion)
WIDGET_BASE_CLASSES = {
    'DialView': 'QWidget',
}

# Widget header files (for Qt Designer promotion)
WIDGET_HEADERS = {
    'DialView': 'widgets.dial',
}

# ============================================================================
# === CONVENIENCE FUNCTIONS ===
# ============================================================================

def get_widget_class(name: str):
    """
    Get widget class by name.

    Returns:
        Widget class or None if not found

    Example:
        >>> cls = get_widget_class('DialView')
        >>> dial = cls()
    """
    return WIDGET_REGISTRY.get(name)


def list_widgets():
    """List all available widget names."""
    return list(WIDGET_REGISTRY.keys())


def get_widget_info(name: str) -> dict:
    """
    Get widget information for Qt Designer promotion.

    Returns:
        Dict with base_class and header keys, or None if not found

    Example:
        >>> get_widget_info('DialView')
        {'base_class': 'QWidget', 'header': 'widgets.dial'}
    """
    if name in WIDGET_REGISTRY:
        return {
            'base_class': WIDGET_BASE_CLASSES[name],
            'header': WIDGET_HEADERS[name],
        }
    return None

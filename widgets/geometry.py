"""
Dial Geometry - Polar Layout for the Fan Dial
==============================================

Stateless coordinate math used by DialView to place its indicator dot and
speed labels around the dial circle.

Layout:
    Positions are evenly spaced 45° apart, starting at 202.5° (9π/8). With
    y growing downward, position 0 sits just above the left edge and the
    sequence runs clockwise over the top of the dial. Only the first four
    of the eight possible slots are used, one per fan speed.

    Two rings are derived from the dial radius:
        • indicator ring: radius - 35  (dot sits inside the disc)
        • label ring:     radius + 30  (text sits just outside the disc)

Functions:
    compute_radius(width, height) -> float
    position_for_index(ordinal, ring_radius, center_x, center_y) -> (x, y)
    indicator_ring_radius(radius) -> float
    label_ring_radius(radius) -> float
    indicator_dot_radius(radius) -> float

Example:
    >>> r = compute_radius(300, 300)
    >>> r
    120.0
    >>> x, y = position_for_index(0, label_ring_radius(r), 150, 150)

Author: Dyumna137
Date: 2025-11-06
Version: 1.0
"""

from __future__ import annotations
import math
from typing import Tuple

# ============================================================================
# === LAYOUT CONSTANTS ===
# ============================================================================

START_ANGLE = math.pi * (9 / 8.0)   # 202.5°, position 0
ANGLE_STEP = math.pi / 4            # 45° between positions
POSITION_COUNT = 4                  # One slot per fan speed

RADIUS_SCALE = 0.8                  # Disc fills 80% of the shorter side
RADIUS_OFFSET_INDICATOR = -35       # Indicator ring, relative to disc radius
RADIUS_OFFSET_LABEL = 30            # Label ring, relative to disc radius
INDICATOR_DIVISOR = 12              # Indicator dot radius = disc radius / 12


def compute_radius(width: float, height: float) -> float:
    """
    Disc radius for a widget of the given size.

    Args:
        width: Widget width in pixels (non-negative)
        height: Widget height in pixels (non-negative)

    Returns:
        0.8 * min(width, height) / 2, so a 200x100 widget gives 40.0
        and a zero-size widget gives 0.0.
    """
    return RADIUS_SCALE * min(width, height) / 2.0


def position_for_index(
    ordinal: int,
    ring_radius: float,
    center_x: float,
    center_y: float,
) -> Tuple[float, float]:
    """
    Screen coordinate of a dial position on a ring.

    Args:
        ordinal: Dial position 0-3 (FanSpeed.ordinal)
        ring_radius: Distance from the center (indicator or label ring)
        center_x: X coordinate of the dial center
        center_y: Y coordinate of the dial center

    Returns:
        (x, y) tuple of floats

    Raises:
        ValueError: If ordinal is outside 0-3
    """
    if not 0 <= ordinal < POSITION_COUNT:
        raise ValueError(f"ordinal must be in 0..{POSITION_COUNT - 1}, got {ordinal}")

    angle = START_ANGLE + ordinal * ANGLE_STEP
    x = center_x + ring_radius * math.cos(angle)
    y = center_y + ring_radius * math.sin(angle)
    return x, y


def indicator_ring_radius(radius: float) -> float:
    return radius + RADIUS_OFFSET_INDICATOR


def label_ring_radius(radius: float) -> float:
    return radius + RADIUS_OFFSET_LABEL


def indicator_dot_radius(radius: float) -> float:
    return radius / INDICATOR_DIVISOR

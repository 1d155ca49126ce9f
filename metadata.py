"""
Fan Dial Controller - Metadata Definitions
===========================================

This module defines the static metadata used by the fan dial widget: the
ordered set of fan speeds, the string resources that turn opaque label ids
into display text, and the color configuration for the three active speeds.
It is the single source of truth for everything the dial looks up rather
than computes.

Key Concepts:
    • FanSpeed: Closed, cyclic enumeration OFF → LOW → MEDIUM → HIGH → OFF
    • STRINGS: Resource table mapping label ids to display text
    • DialColors: Immutable color configuration (LOW, MEDIUM, HIGH)

Architecture:
    The speed cycle lives in one successor table (_NEXT_SPEED) instead of
    being spread over conditionals at call sites. Label ids are opaque keys;
    only lookup() knows the text behind them.

Usage:
    Cycle through speeds:
        from metadata import FanSpeed
        speed = FanSpeed.OFF
        speed = speed.next()          # FanSpeed.LOW

    Resolve a label:
        from metadata import lookup
        lookup(FanSpeed.LOW.label)    # "1"

    Load colors from the environment:
        from metadata import load_dial_colors
        colors = load_dial_colors()   # reads FAN_DIAL_COLOR_* variables

Configuration (environment variables):
    FAN_DIAL_COLOR_LOW      Color for LOW (e.g. "#ff0000", "red")
    FAN_DIAL_COLOR_MEDIUM   Color for MEDIUM
    FAN_DIAL_COLOR_HIGH     Color for HIGH
    An unset variable leaves the color unconfigured; the widget then
    renders that speed fully transparent.

Author: Dyumna137
Date: 2025-11-06
Version: 2.0
"""

from __future__ import annotations
import os
from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Optional


# ============================================================================
# === STRING RESOURCES ===
# ============================================================================

# Label id → display text. Ids are opaque to the widget.
STRINGS: dict[str, str] = {
    "fan_off": "off",
    "fan_low": "1",
    "fan_medium": "2",
    "fan_high": "3",

    # Accessibility action labels
    "change": "change",
    "reset": "reset",
}

# Ids of the accessibility action ("advance" vs "back to off")
ACTION_CHANGE = "change"
ACTION_RESET = "reset"


def lookup(string_id: str) -> str:
    """
    Resolve a string resource id to its display text.

    Args:
        string_id: Resource id such as "fan_low" or "reset"

    Returns:
        Display text for the id

    Raises:
        KeyError: If the id is not defined in STRINGS. All ids used by the
                 widget are checked at import time, so this only fires for
                 a programming error.

    Example:
        >>> lookup("fan_medium")
        '2'
    """
    return STRINGS[string_id]


# ============================================================================
# === FAN SPEED ENUMERATION ===
# ============================================================================

class FanSpeed(Enum):
    """
    Selectable fan speeds, in dial order.

    Each member carries the id of its label resource. Definition order is
    significant: the ordinal (0-3) decides where on the dial a speed sits.

    Members:
        OFF:    ordinal 0, label "fan_off"
        LOW:    ordinal 1, label "fan_low"
        MEDIUM: ordinal 2, label "fan_medium"
        HIGH:   ordinal 3, label "fan_high"

    Example:
        >>> FanSpeed.HIGH.next()
        <FanSpeed.OFF: 'fan_off'>
        >>> FanSpeed.MEDIUM.ordinal
        2
    """

    OFF = "fan_off"
    LOW = "fan_low"
    MEDIUM = "fan_medium"
    HIGH = "fan_high"

    @property
    def label(self) -> str:
        """Opaque label id, resolved with lookup()."""
        return self.value

    @property
    def ordinal(self) -> int:
        """Position of this speed in definition order (0-3)."""
        return _ORDINALS[self]

    def next(self) -> FanSpeed:
        """Return the speed that follows this one; HIGH wraps to OFF."""
        return _NEXT_SPEED[self]


# Speeds in ordinal order (also the label drawing order)
SPEEDS: tuple[FanSpeed, ...] = tuple(FanSpeed)

_ORDINALS: dict[FanSpeed, int] = {speed: i for i, speed in enumerate(SPEEDS)}

_NEXT_SPEED: dict[FanSpeed, FanSpeed] = {
    FanSpeed.OFF: FanSpeed.LOW,
    FanSpeed.LOW: FanSpeed.MEDIUM,
    FanSpeed.MEDIUM: FanSpeed.HIGH,
    FanSpeed.HIGH: FanSpeed.OFF,
}

# Last speed of the cycle; activating it resets the fan
MAX_SPEED = FanSpeed.HIGH


# ============================================================================
# === COLOR CONFIGURATION ===
# ============================================================================

@dataclass(frozen=True)
class DialColors:
    """
    Disc colors for the three active speeds.

    OFF is not configurable; it always renders gray. Values are color
    strings understood by QColor ("#RRGGBB", "#AARRGGBB", SVG color names).
    An empty string means "not configured" and renders fully transparent.

    The frozen=True parameter makes instances immutable, matching the rule
    that dial colors are fixed once the widget is constructed.

    Attributes:
        low (str): Color for FanSpeed.LOW
        medium (str): Color for FanSpeed.MEDIUM
        high (str): Color for FanSpeed.HIGH

    Examples:
        Traffic-light style dial:
            DialColors(low="red", medium="yellow", high="green")

        Only HIGH configured (LOW and MEDIUM transparent):
            DialColors(high="#00c853")
    """

    low: str = ""
    medium: str = ""
    high: str = ""

    def for_speed(self, speed: FanSpeed) -> Optional[str]:
        """
        Configured color string for a speed.

        Returns:
            The color string, or None for FanSpeed.OFF (fixed gray).
        """
        if speed is FanSpeed.LOW:
            return self.low
        if speed is FanSpeed.MEDIUM:
            return self.medium
        if speed is FanSpeed.HIGH:
            return self.high
        return None


# Environment variable names, one per configurable speed
ENV_COLOR_LOW = "FAN_DIAL_COLOR_LOW"
ENV_COLOR_MEDIUM = "FAN_DIAL_COLOR_MEDIUM"
ENV_COLOR_HIGH = "FAN_DIAL_COLOR_HIGH"

# Colors used by the demo application when nothing is configured
DEFAULT_APP_COLORS = DialColors(low="#ff0000", medium="#ffeb3b", high="#00c853")


def load_dial_colors(
    env: Optional[Mapping[str, str]] = None,
    defaults: Optional[DialColors] = None,
) -> DialColors:
    """
    Build a DialColors from FAN_DIAL_COLOR_* environment variables.

    Args:
        env: Mapping to read from (default: os.environ)
        defaults: Values for unset variables (default: all unconfigured)

    Returns:
        DialColors with environment values taking precedence over defaults

    Example:
        >>> load_dial_colors({"FAN_DIAL_COLOR_LOW": "red"})
        DialColors(low='red', medium='', high='')
    """
    if env is None:
        env = os.environ
    if defaults is None:
        defaults = DialColors()

    return DialColors(
        low=env.get(ENV_COLOR_LOW, "").strip() or defaults.low,
        medium=env.get(ENV_COLOR_MEDIUM, "").strip() or defaults.medium,
        high=env.get(ENV_COLOR_HIGH, "").strip() or defaults.high,
    )


# ============================================================================
# === MODULE VALIDATION (Run at import time) ===
# ============================================================================

def _validate_metadata():
    """
    Validate metadata for consistency.

    Checks:
        • Exactly four speeds, each with a distinct label id
        • Every label id and action id has a string resource
        • The successor table is a single cycle covering every speed

    Raises:
        ValueError: If validation fails
    """
    if len(SPEEDS) != 4:
        raise ValueError(f"Expected 4 fan speeds, found {len(SPEEDS)}")

    for string_id in [s.label for s in SPEEDS] + [ACTION_CHANGE, ACTION_RESET]:
        if not STRINGS.get(string_id):
            raise ValueError(f"Missing string resource: {string_id!r}")

    # Walking the cycle from OFF must visit every speed once and come back
    seen = []
    speed = FanSpeed.OFF
    for _ in SPEEDS:
        seen.append(speed)
        speed = _NEXT_SPEED[speed]
    if speed is not FanSpeed.OFF or list(seen) != list(SPEEDS):
        raise ValueError(f"Fan speed cycle is broken: {seen}")


# Run validation at import time
_validate_metadata()


# ============================================================================
# === MODULE TESTING ===
# ============================================================================

if __name__ == "__main__":
    """
    Print metadata definitions.

    Usage:
        python metadata.py
    """
    print("=" * 60)
    print("Fan Dial Metadata")
    print("=" * 60)

    for speed in SPEEDS:
        print(f"  {speed.ordinal} | {speed.name:7} | {lookup(speed.label):4} | next: {speed.next().name}")

    print(f"\nColors from environment: {load_dial_colors()}")
    print("\n✓ Metadata validated successfully!")

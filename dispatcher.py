"""
Fan Dial Controller - Event Dispatcher
======================================

This module provides a global event dispatcher using Qt's signal/slot mechanism
for decoupled communication b/w the fan dial and the rest of the application.

Architecture Pattern: Observer/Publish-Subscribe
    • Publishers: DialView signals, forwarded here by the host window
    • Dispatcher: Central event hub (this module)
    • Subscribers: Status labels, fan drivers, narration, logging

Signal Flow Example:
    User clicks dial → DialView.activate() → DialView.fanSpeedChanged("LOW")
                 ↓  (forwarded by the host window)
    dispatch.fanSpeedChanged("LOW"), dispatch.descriptionChanged("1")
                 ↓
    ├→ MainWindow status label
    └→ Any fan driver listening for speed names

Usage Examples:
    Connecting to signals:
        from dispatcher import dispatch

        dispatch.fanSpeedChanged.connect(lambda name: print(f"Fan: {name}"))
        dispatch.descriptionChanged.connect(status_label.setText)

    Disconnect:
        dispatch.fanSpeedChanged.disconnect(handler)

Thread Safety:
    The dial only emits from the GUI thread. Qt signals remain safe to
    connect from other threads with the default AutoConnection.

Author: Dyumna137
Date: 2025-11-06
Version: 2.0
"""

from __future__ import annotations
from PyQt6.QtCore import QObject, pyqtSignal
from typing import Dict


class Dispatcher(QObject):
    """
    Global event dispatcher for the fan dial.

    Signals:
        fanSpeedChanged (str):
            Emitted after a dial advanced to a new speed.
            Payload: FanSpeed member name, e.g. "OFF", "LOW", "MEDIUM", "HIGH"

        descriptionChanged (str):
            Emitted after a dial's narrated description changed.
            Payload: Display text of the new speed's label, e.g. "1"

    Usage Pattern:
        # Singleton pattern: One global dispatcher instance
        from dispatcher import dispatch
        dispatch.fanSpeedChanged.connect(my_handler)
    """

    # ========================================================================
    # === SIGNAL DEFINITIONS ===
    # ========================================================================

    # Speed change signal
    # Type: str - FanSpeed member name
    fanSpeedChanged = pyqtSignal(str)

    # Narrated description change signal
    # Type: str - display text of the current speed label
    descriptionChanged = pyqtSignal(str)

    def __init__(self) -> None:
        """
        Initialize the Dispatcher.

        Note:
            In practice, you should use the global 'dispatch' instance
            rather than creating new Dispatcher instances.
        """
        super().__init__()

    # ========================================================================
    # === UTILITY METHODS ===
    # ========================================================================

    def get_signal_info(self) -> Dict[str, int]:
        """
        Get information about signal connection counts.

        Returns:
            Dictionary mapping signal names to connection counts

        Example:
            >>> dispatch.get_signal_info()
            {'fanSpeedChanged': 1, 'descriptionChanged': 0}
        """
        return {
            'fanSpeedChanged': self.receivers(self.fanSpeedChanged),
            'descriptionChanged': self.receivers(self.descriptionChanged),
        }

    def disconnect_all(self):
        """
        Disconnect all slots from all signals.

        Typically only used during testing or application shutdown.
        """
        try:
            self.fanSpeedChanged.disconnect()
        except TypeError:
            pass  # No connections to disconnect
        try:
            self.descriptionChanged.disconnect()
        except TypeError:
            pass


# ============================================================================
# === GLOBAL DISPATCHER INSTANCE ===
# ============================================================================

# Single shared dispatcher; import this rather than creating a new Dispatcher
dispatch = Dispatcher()

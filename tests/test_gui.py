# Required before importing PyQt6, otherwise tests need a display
import os
os.environ["QT_QPA_PLATFORM"] = "offscreen"

import logging
import unittest

from PyQt6.QtGui import QColor
from PyQt6.QtWidgets import QApplication

from dispatcher import Dispatcher, dispatch
from gui import FanControllerWindow, resolve_log_level
from metadata import DialColors, FanSpeed
import widgets


class TestFanControllerWindow(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.app = QApplication.instance() or QApplication([])

    def setUp(self):
        self.window = FanControllerWindow(colors=DialColors(low="red", medium="yellow", high="green"))

    def tearDown(self):
        self.window.close()
        self.window.deleteLater()

    def test_initial_status(self):
        self.assertEqual(self.window.status_label.text(), "Fan speed: off")

    def test_dial_uses_given_colors(self):
        self.assertEqual(self.window.dial.colors()[0], QColor("red"))

    def test_status_follows_dial(self):
        self.window.dial.activate()
        self.assertEqual(self.window.status_label.text(), "Fan speed: low")
        self.window.dial.activate()
        self.assertEqual(self.window.status_label.text(), "Fan speed: medium")

    def test_dial_forwards_to_dispatcher(self):
        speeds, descriptions = [], []
        dispatch.fanSpeedChanged.connect(speeds.append)
        dispatch.descriptionChanged.connect(descriptions.append)
        try:
            self.window.dial.activate()
        finally:
            dispatch.fanSpeedChanged.disconnect(speeds.append)
            dispatch.descriptionChanged.disconnect(descriptions.append)

        self.assertEqual(speeds, ["LOW"])
        self.assertEqual(descriptions, ["1"])

    def test_lock_claims_clicks(self):
        self.window.chk_lock.setChecked(True)
        self.assertTrue(self.window.dial.activate())
        self.assertIs(self.window.dial.fanSpeed(), FanSpeed.OFF)
        self.assertEqual(self.window.status_label.text(), "Fan speed: off")

        self.window.chk_lock.setChecked(False)
        self.window.dial.activate()
        self.assertIs(self.window.dial.fanSpeed(), FanSpeed.LOW)


    def test_tooltip_follows_description(self):
        self.assertEqual(self.window.dial.toolTip(), "Fan speed: off")
        self.window.dial.activate()
        self.assertEqual(self.window.dial.toolTip(), "Fan speed: 1")


class TestLogLevel(unittest.TestCase):
    def test_known_names(self):
        self.assertEqual(resolve_log_level("debug"), logging.DEBUG)
        self.assertEqual(resolve_log_level(" WARNING "), logging.WARNING)

    def test_unknown_name_falls_back_to_info(self):
        self.assertEqual(resolve_log_level("verbose"), logging.INFO)

    def test_unset_is_info(self):
        self.assertEqual(resolve_log_level(None), logging.INFO)
        self.assertEqual(resolve_log_level(""), logging.INFO)

class TestDispatcher(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.app = QApplication.instance() or QApplication([])

    def setUp(self):
        self.dispatcher = Dispatcher()

    def test_signal_info_counts_connections(self):
        self.assertEqual(self.dispatcher.get_signal_info(), {'fanSpeedChanged': 0, 'descriptionChanged': 0})

        self.dispatcher.fanSpeedChanged.connect(lambda name: None)
        self.assertEqual(self.dispatcher.get_signal_info()['fanSpeedChanged'], 1)

    def test_disconnect_all(self):
        received = []
        self.dispatcher.fanSpeedChanged.connect(received.append)
        self.dispatcher.descriptionChanged.connect(received.append)

        self.dispatcher.disconnect_all()
        self.dispatcher.fanSpeedChanged.emit("LOW")
        self.dispatcher.descriptionChanged.emit("1")

        self.assertEqual(received, [])

    def test_disconnect_all_without_connections(self):
        self.dispatcher.disconnect_all()


class TestWidgetRegistry(unittest.TestCase):
    def test_list_widgets(self):
        self.assertEqual(widgets.list_widgets(), ['DialView'])

    def test_get_widget_class(self):
        self.assertIs(widgets.get_widget_class('DialView'), widgets.DialView)
        self.assertIsNone(widgets.get_widget_class('StatusLED'))

    def test_get_widget_info(self):
        self.assertEqual(
            widgets.get_widget_info('DialView'),
            {'base_class': 'QWidget', 'header': 'widgets.dial'}
        )
        self.assertIsNone(widgets.get_widget_info('Unknown'))


if __name__ == "__main__":
    unittest.main()

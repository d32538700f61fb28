from __future__ import annotations

import logging

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QMouseEvent
from PyQt6.QtWidgets import QWidget

LOGGER = logging.getLogger(__name__)


class WindowDragController:
    """
    Moves a frameless window when its custom title bar is pressed.

    Hands the gesture to the window manager (``QWindow.startSystemMove``), so moving
    behaves exactly like dragging a native title bar. Keeps no state between presses.
    """

    def __init__(self, window: QWidget) -> None:
        self._window = window

    def handle_press(self, event: QMouseEvent) -> bool:
        if event.button() != Qt.MouseButton.LeftButton:
            return False
        requested = self.request_window_drag()
        if requested:
            event.accept()
        return requested

    def request_window_drag(self) -> bool:
        grabber = QWidget.mouseGrabber()
        if grabber is not None:
            grabber.releaseMouse()

        handle = self._window.windowHandle()
        if handle is None:
            LOGGER.debug("No native window handle yet; drag ignored")
            return False
        started = bool(handle.startSystemMove())
        if not started:
            LOGGER.debug("Platform refused interactive move")
        return started

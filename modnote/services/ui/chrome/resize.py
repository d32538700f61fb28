from __future__ import annotations

import logging

from PyQt6 import sip
from PyQt6.QtCore import QEvent, QObject, Qt
from PyQt6.QtWidgets import QWidget

from modnote.utils.constants import RESIZE_MARGIN

LOGGER = logging.getLogger(__name__)

_NO_EDGES = Qt.Edge(0)
_WATCHED = (
    QEvent.Type.MouseMove,
    QEvent.Type.MouseButtonPress,
    QEvent.Type.Leave,
)


def hit_test(x: int, y: int, width: int, height: int, margin: int = RESIZE_MARGIN) -> Qt.Edge:
    """Which window edges the point (x, y) grabs; empty flags outside the border band."""
    edges = _NO_EDGES
    if margin <= 0:
        return edges
    if x < margin:
        edges |= Qt.Edge.LeftEdge
    elif x >= width - margin:
        edges |= Qt.Edge.RightEdge
    if y < margin:
        edges |= Qt.Edge.TopEdge
    elif y >= height - margin:
        edges |= Qt.Edge.BottomEdge
    return edges


def cursor_for_edges(edges: Qt.Edge) -> Qt.CursorShape | None:
    left = bool(edges & Qt.Edge.LeftEdge)
    right = bool(edges & Qt.Edge.RightEdge)
    top = bool(edges & Qt.Edge.TopEdge)
    bottom = bool(edges & Qt.Edge.BottomEdge)
    if (left and top) or (right and bottom):
        return Qt.CursorShape.SizeFDiagCursor
    if (right and top) or (left and bottom):
        return Qt.CursorShape.SizeBDiagCursor
    if left or right:
        return Qt.CursorShape.SizeHorCursor
    if top or bottom:
        return Qt.CursorShape.SizeVerCursor
    return None


class EdgeResizeFilter(QObject):
    """
    Edge / corner resize for a frameless window.

    Installed on the widget that owns the window border band (the frame container).
    Hovering the band sets a resize cursor; a left press hands the gesture to the
    window manager via ``QWindow.startSystemResize``.

    The window is looked up from the watched widget on each event, so the filter holds
    no reference that could outlive it during teardown.
    """

    def __init__(self, parent: QObject | None = None, margin: int = RESIZE_MARGIN) -> None:
        super().__init__(parent)
        self._margin = margin

    def eventFilter(self, obj, ev):  # type: ignore[override]
        t = ev.type()
        if t not in _WATCHED or not isinstance(obj, QWidget) or sip.isdeleted(obj):
            return False
        if t == QEvent.Type.Leave:
            obj.unsetCursor()
            return False

        window = obj.window()
        if window is None or sip.isdeleted(window) or window.isMaximized():
            return False
        if t == QEvent.Type.MouseMove:
            if ev.buttons() == Qt.MouseButton.NoButton:
                cursor = cursor_for_edges(self._edges_at(obj, window, ev))
                if cursor is None:
                    obj.unsetCursor()
                else:
                    obj.setCursor(cursor)
        elif ev.button() == Qt.MouseButton.LeftButton:
            edges = self._edges_at(obj, window, ev)
            if edges != _NO_EDGES:
                return self._start_resize(window, edges)
        return False

    def _edges_at(self, obj: QWidget, window: QWidget, ev) -> Qt.Edge:
        pos = obj.mapTo(window, ev.position().toPoint())
        return hit_test(pos.x(), pos.y(), window.width(), window.height(), self._margin)

    @staticmethod
    def _start_resize(window: QWidget, edges: Qt.Edge) -> bool:
        handle = window.windowHandle()
        if handle is None:
            return False
        started = bool(handle.startSystemResize(edges))
        if not started:
            LOGGER.debug("Platform refused interactive resize")
        return started

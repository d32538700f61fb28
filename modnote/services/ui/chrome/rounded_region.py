from __future__ import annotations

import logging

from PyQt6.QtCore import QRectF
from PyQt6.QtGui import QPainterPath, QRegion
from PyQt6.QtWidgets import QWidget

from modnote.domain.models import ChromeState

LOGGER = logging.getLogger(__name__)

# Corner arcs in drawing order, as (corner, start angle measured clockwise from 3 o'clock).
# Each arc sweeps 90 degrees clockwise.
_CORNER_ARCS = (
    ("top_left", 180),
    ("top_right", 270),
    ("bottom_right", 0),
    ("bottom_left", 90),
)
_SWEEP = 90


def _qt_angle(clockwise_degrees: int) -> int:
    # Qt measures angles counter-clockwise; a clockwise sweep is a negative span.
    return (360 - clockwise_degrees) % 360


def rounded_path(width: int, height: int, radius: int) -> QPainterPath:
    """Closed outline of a ``width`` x ``height`` rectangle with ``radius`` rounded corners."""
    path = QPainterPath()
    d = float(min(radius * 2, width, height))
    boxes = {
        "top_left": QRectF(0, 0, d, d),
        "top_right": QRectF(width - d, 0, d, d),
        "bottom_right": QRectF(width - d, height - d, d, d),
        "bottom_left": QRectF(0, height - d, d, d),
    }
    for i, (corner, start) in enumerate(_CORNER_ARCS):
        box = boxes[corner]
        if i == 0:
            path.arcMoveTo(box, _qt_angle(start))
        path.arcTo(box, _qt_angle(start), -_SWEEP)
    path.closeSubpath()
    return path


def rounded_region(width: int, height: int, radius: int) -> QRegion:
    if radius <= 0:
        return QRegion(0, 0, width, height)
    polygon = rounded_path(width, height, radius).toFillPolygon().toPolygon()
    return QRegion(polygon)


def apply_chrome_region(window: QWidget, chrome: ChromeState) -> None:
    """
    Clip ``window`` to rounded corners at its current size.

    A maximized window is never rounded: any previous mask is cleared so it fills the screen.
    Must be re-run after every size or window-state change; an old mask is stale.
    """
    if not chrome.rounded:
        window.clearMask()
        LOGGER.debug("Cleared window mask (%s)", chrome.window_state.name)
        return
    window.setMask(rounded_region(window.width(), window.height(), chrome.corner_radius))

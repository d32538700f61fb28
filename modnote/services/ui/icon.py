from __future__ import annotations

from PyQt6.QtGui import QColor, QIcon, QPainter, QPen, QPixmap

from modnote.services.ui.theme import Theme

ICON_SIZE = 32


def build_app_icon(theme: Theme) -> QIcon:
    """A small document glyph: sheet with a folded top-left corner and three text lines."""
    pm = QPixmap(ICON_SIZE, ICON_SIZE)
    pm.fill(QColor(theme.background))

    painter = QPainter(pm)
    try:
        pen = QPen(QColor(theme.text))
        pen.setWidth(2)
        painter.setPen(pen)
        painter.setBrush(QColor(theme.menu_bar))
        painter.drawRect(4, 4, 20, 24)
        # folded corner
        painter.drawLine(4, 12, 12, 12)
        painter.drawLine(12, 4, 12, 12)
        for i in range(3):
            y = 18 + i * 4
            painter.drawLine(8, y, 20, y)
    finally:
        painter.end()

    return QIcon(pm)

from __future__ import annotations

from PyQt6.QtCore import QByteArray, QSettings

from modnote.domain.interfaces import ISettingsService
from modnote.utils.constants import SETTINGS_FONT_SIZE, SETTINGS_GEOMETRY


class SettingsService(ISettingsService):
    """Persist small UI bits like window geometry and the editor font size."""

    def __init__(self, qsettings: QSettings) -> None:
        self._s = qsettings

    def get_geometry(self) -> bytes | None:
        v = self._s.value(SETTINGS_GEOMETRY)
        return bytes(v) if isinstance(v, QByteArray) else None

    def set_geometry(self, blob: bytes) -> None:
        self._s.setValue(SETTINGS_GEOMETRY, QByteArray(blob))

    def get_font_size(self) -> float | None:
        v = self._s.value(SETTINGS_FONT_SIZE)
        if v is None:
            return None
        try:
            return float(v)
        except (TypeError, ValueError):
            return None

    def set_font_size(self, size: float) -> None:
        self._s.setValue(SETTINGS_FONT_SIZE, float(size))

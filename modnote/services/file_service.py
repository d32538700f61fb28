from __future__ import annotations

import logging
from pathlib import Path

from PyQt6.QtCore import QIODevice, QSaveFile

from modnote.domain.interfaces import IFileService
from modnote.domain.models import IoResult
from modnote.utils.constants import TEXT_ENCODING

LOGGER = logging.getLogger(__name__)

CRLF = "\r\n"
LF = "\n"


class FileService(IFileService):
    """UTF-8 whole-file reads and atomic writes; errors are reported, not raised."""

    def read_text(self, path: Path) -> IoResult:
        try:
            with path.open("r", encoding=TEXT_ENCODING, newline="") as fh:
                raw = fh.read()
        except (OSError, UnicodeError) as e:
            LOGGER.warning("Read failed for %s: %s", path, e)
            return IoResult.failure(str(e))
        newline = CRLF if CRLF in raw else LF
        return IoResult.success(raw.replace(CRLF, LF), newline=newline)

    def write_text(self, path: Path, text: str, newline: str = LF) -> IoResult:
        if newline != LF:
            text = text.replace(LF, newline)
        try:
            self._write_atomic(path, text)
        except (OSError, UnicodeError) as e:
            LOGGER.warning("Write failed for %s: %s", path, e)
            return IoResult.failure(str(e))
        return IoResult.success()

    def _write_atomic(self, path: Path, text: str) -> None:
        sf = QSaveFile(str(path))
        if not sf.open(QIODevice.OpenModeFlag.WriteOnly):
            raise OSError(f"Cannot open for write: {path}")
        sf.write(text.encode(TEXT_ENCODING))
        if not sf.commit():
            raise OSError(f"Commit failed for: {path}")

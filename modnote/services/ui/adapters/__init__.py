from __future__ import annotations

from .interaction import DialogInteraction
from .qt_dialogs import QtFileDialogService
from .qt_messages import QtMessageService

__all__ = [
    "DialogInteraction",
    "QtFileDialogService",
    "QtMessageService",
]

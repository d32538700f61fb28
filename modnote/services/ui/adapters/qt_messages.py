from __future__ import annotations

from typing import Any

from PyQt6.QtWidgets import QMessageBox

from modnote.domain.models import GateChoice
from modnote.services.ui.ports.messages import IMessageService

_BUTTON_TO_CHOICE = {
    QMessageBox.StandardButton.Save: GateChoice.SAVE,
    QMessageBox.StandardButton.Discard: GateChoice.DISCARD,
    QMessageBox.StandardButton.Cancel: GateChoice.CANCEL,
}


class QtMessageService(IMessageService):
    """Qt-backed implementation for message dialogs."""

    def error(self, parent: Any | None, title: str, text: str) -> None:
        QMessageBox.critical(parent, title, text)

    def ask_unsaved(self, parent: Any | None, title: str, text: str) -> GateChoice:
        resp = QMessageBox.warning(
            parent,
            title,
            text,
            QMessageBox.StandardButton.Save
            | QMessageBox.StandardButton.Discard
            | QMessageBox.StandardButton.Cancel,
            QMessageBox.StandardButton.Save,
        )
        return _BUTTON_TO_CHOICE.get(resp, GateChoice.CANCEL)

from __future__ import annotations

from pathlib import Path
from typing import Any

from modnote.domain.interfaces import IConfirmationPrompt, IErrorReporter, IPathChooser
from modnote.domain.models import GateChoice
from modnote.services.ui.ports.dialogs import IFileDialogService
from modnote.services.ui.ports.messages import IMessageService
from modnote.utils.constants import APP_NAME, FILE_FILTER


class DialogInteraction(IPathChooser, IConfirmationPrompt, IErrorReporter):
    """
    Binds the dialog and message ports to a parent window so the document
    state machine can ask questions without knowing about widgets.
    """

    def __init__(
        self,
        dialogs: IFileDialogService,
        messages: IMessageService,
        parent: Any | None = None,
    ) -> None:
        self.dialogs = dialogs
        self.messages = messages
        self.parent = parent

    def choose_open_path(self) -> Path | None:
        return self.dialogs.get_open_file(self.parent, "Open", None, FILE_FILTER)

    def choose_save_path(self, suggested: Path | None = None) -> Path | None:
        start = str(suggested) if suggested else None
        return self.dialogs.get_save_file(self.parent, "Save As", start, FILE_FILTER)

    def ask(self, message: str) -> GateChoice:
        return self.messages.ask_unsaved(self.parent, APP_NAME, message)

    def report_error(self, title: str, message: str) -> None:
        self.messages.error(self.parent, title, message)

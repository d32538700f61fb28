from __future__ import annotations

import logging
from pathlib import Path

from .interfaces import IConfirmationPrompt, IErrorReporter, IFileService, IPathChooser
from .models import Document, GateChoice

LOGGER = logging.getLogger(__name__)

CONTINUE_PROMPT = "There are unsaved changes. Do you want to save before continuing?"
CLOSE_PROMPT = "There are unsaved changes. Do you want to save before closing?"

OPEN_ERROR_TITLE = "Open Error"
SAVE_ERROR_TITLE = "Save Error"


class DocumentStateMachine:
    """
    Owns the open Document and the New/Open/Save/Save-As/Close transitions.

    Clean vs. dirty is never stored; it is re-derived from the document on demand.
    Every destructive transition (new, open, close) first passes the unsaved-changes gate:

      - clean document        -> proceed, no prompt
      - SAVE                  -> save() once; still dirty afterwards means veto
      - DISCARD               -> proceed without saving
      - CANCEL                -> veto

    All operations return True when they took effect and False on veto, cancel or failure.
    """

    def __init__(
        self,
        files: IFileService,
        chooser: IPathChooser,
        prompt: IConfirmationPrompt,
        errors: IErrorReporter,
    ) -> None:
        self.files = files
        self.chooser = chooser
        self.prompt = prompt
        self.errors = errors
        self._doc = Document.pristine()

    # ---------- state ----------

    @property
    def document(self) -> Document:
        return self._doc

    @property
    def is_dirty(self) -> bool:
        return self._doc.is_dirty

    def set_text(self, text: str) -> None:
        self._doc.text = text

    # ---------- transitions ----------

    def new(self) -> bool:
        if not self._gate(CONTINUE_PROMPT):
            return False
        self._doc = Document.pristine()
        LOGGER.info("Started a new document")
        return True

    def open(self, path: Path | None = None) -> bool:
        if not self._gate(CONTINUE_PROMPT):
            return False

        if path is None:
            path = self.chooser.choose_open_path()
            if path is None:
                LOGGER.debug("Open cancelled by user")
                return False

        result = self.files.read_text(path)
        if not result.ok:
            self.errors.report_error(OPEN_ERROR_TITLE, f"Failed to open file:\n{result.error}")
            return False

        content = result.value or ""
        self._doc = Document(path=path, saved_text=content, text=content, newline=result.newline)
        LOGGER.info("Opened %s", path)
        return True

    def save(self) -> bool:
        if self._doc.path is None:
            return self.save_as()
        return self._write_to(self._doc.path)

    def save_as(self) -> bool:
        path = self.chooser.choose_save_path(self._doc.path)
        if path is None:
            LOGGER.debug("Save As cancelled by user")
            return False
        return self._write_to(path)

    def confirm_close(self) -> bool:
        """True when the window may close; False is a veto."""
        return self._gate(CLOSE_PROMPT)

    # ---------- internals ----------

    def _write_to(self, path: Path) -> bool:
        text = self._doc.text
        result = self.files.write_text(path, text, self._doc.newline)
        if not result.ok:
            self.errors.report_error(SAVE_ERROR_TITLE, f"Failed to save file:\n{result.error}")
            return False
        self._doc.path = path
        self._doc.saved_text = text
        LOGGER.info("Saved %s", path)
        return True

    def _gate(self, message: str) -> bool:
        if not self._doc.is_dirty:
            return True

        choice = self.prompt.ask(message)
        LOGGER.debug("Unsaved-changes gate answered %s", choice.name)

        if choice is GateChoice.CANCEL:
            return False
        if choice is GateChoice.SAVE:
            self.save()
            # A failed or cancelled save must never count as success.
            return not self._doc.is_dirty
        return True

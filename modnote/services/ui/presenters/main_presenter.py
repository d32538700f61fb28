from __future__ import annotations

import logging
from pathlib import Path
from typing import Protocol, runtime_checkable

from modnote.domain.document_state import DocumentStateMachine
from modnote.domain.interfaces import IFileService, ISettingsService
from modnote.domain.models import DEFAULT_CORNER_RADIUS, CaretPosition, ChromeState, WindowState
from modnote.domain.zoom import zoom_font_size
from modnote.services.ui.adapters.interaction import DialogInteraction
from modnote.services.ui.ports.dialogs import IFileDialogService
from modnote.services.ui.ports.messages import IMessageService
from modnote.utils.constants import APP_NAME, STATUS_TEMPLATE

LOGGER = logging.getLogger(__name__)


@runtime_checkable
class IMainView(Protocol):
    """Very small surface for a passive view (implemented by the Qt MainWindow)."""

    # editor
    def get_editor_text(self) -> str: ...
    def set_editor_text(self, text: str) -> None: ...
    def caret_position(self) -> CaretPosition: ...
    def font_point_size(self) -> float: ...
    def set_font_point_size(self, size: float) -> None: ...

    # window chrome
    def set_title(self, title: str) -> None: ...
    def set_status(self, text: str) -> None: ...
    def show_window_state(self, state: WindowState) -> None: ...
    def set_maximized_glyph(self, maximized: bool) -> None: ...
    def apply_chrome(self, chrome: ChromeState) -> None: ...


class MainPresenter:
    """
    Coordinates the document state machine and the window chrome for one main window.

    The view reports user input through the on_* / *_document methods; the presenter
    decides what happens and pushes derived state (title, status line, clip region) back.
    """

    def __init__(
        self,
        view: IMainView,
        files: IFileService,
        dialogs: IFileDialogService,
        messages: IMessageService,
        settings: ISettingsService | None = None,
        *,
        corner_radius: int = DEFAULT_CORNER_RADIUS,
    ) -> None:
        self.view = view
        self.settings = settings
        interaction = DialogInteraction(dialogs, messages, parent=view)
        self.doc = DocumentStateMachine(files, interaction, interaction, interaction)
        self.chrome = ChromeState(corner_radius=corner_radius)

    def start(self, start_path: Path | None = None) -> None:
        self._refresh()
        self.view.apply_chrome(self.chrome)
        if start_path is not None:
            self.open_document(start_path)

    # ---------- document lifecycle ----------

    def new_document(self) -> bool:
        if not self.doc.new():
            return False
        self._load_into_view()
        return True

    def open_document(self, path: Path | None = None) -> bool:
        if not self.doc.open(path):
            return False
        self._load_into_view()
        return True

    def save_document(self) -> bool:
        ok = self.doc.save()
        self._refresh_title()
        return ok

    def save_document_as(self) -> bool:
        ok = self.doc.save_as()
        self._refresh_title()
        return ok

    def confirm_close(self) -> bool:
        ok = self.doc.confirm_close()
        # A Save-As inside the gate may have named the file.
        self._refresh_title()
        return ok

    def window_title(self) -> str:
        name = self.doc.document.display_name
        return f"{APP_NAME} - {name}" if name else APP_NAME

    # ---------- editor events ----------

    def on_text_changed(self) -> None:
        self.doc.set_text(self.view.get_editor_text())
        self._refresh_status()

    def on_caret_moved(self) -> None:
        self._refresh_status()

    def on_wheel_with_modifier(self, notches: int) -> None:
        size = zoom_font_size(self.view.font_point_size(), notches)
        if size is None:
            return
        self.view.set_font_point_size(size)
        if self.settings is not None:
            self.settings.set_font_size(size)

    # ---------- window chrome ----------

    def toggle_maximize(self) -> None:
        target = WindowState.NORMAL if self.chrome.is_maximized else WindowState.MAXIMIZED
        self.chrome.window_state = target
        self.view.show_window_state(target)
        self.view.apply_chrome(self.chrome)
        LOGGER.debug("Window state -> %s", target.name)

    def minimize(self) -> None:
        self.view.show_window_state(WindowState.MINIMIZED)

    def on_window_state_changed(self, state: WindowState) -> None:
        """Sync with changes that did not come from the title bar buttons."""
        self.chrome.window_state = state
        if state is not WindowState.MINIMIZED:
            self.view.set_maximized_glyph(state is WindowState.MAXIMIZED)
        self.view.apply_chrome(self.chrome)

    def on_resized(self) -> None:
        self.view.apply_chrome(self.chrome)

    # ---------- helpers ----------

    def _load_into_view(self) -> None:
        self.view.set_editor_text(self.doc.document.text)
        self._refresh()

    def _refresh(self) -> None:
        self._refresh_title()
        self._refresh_status()

    def _refresh_title(self) -> None:
        self.view.set_title(self.window_title())

    def _refresh_status(self) -> None:
        pos = self.view.caret_position()
        self.view.set_status(STATUS_TEMPLATE.format(line=pos.line, column=pos.column))

from __future__ import annotations

import logging
from pathlib import Path

from PyQt6 import sip
from PyQt6.QtCore import QByteArray, QEvent, QEventLoop, Qt
from PyQt6.QtGui import QCloseEvent, QMouseEvent, QResizeEvent
from PyQt6.QtWidgets import QApplication, QMainWindow, QVBoxLayout, QWidget

from modnote.domain.interfaces import ISettingsService
from modnote.domain.models import CaretPosition, ChromeState, WindowState
from modnote.services.ui.chrome import EdgeResizeFilter, WindowDragController, apply_chrome_region
from modnote.services.ui.icon import build_app_icon
from modnote.services.ui.presenters.main_presenter import MainPresenter
from modnote.services.ui.widget_factory import WidgetFactory
from modnote.utils.constants import (
    APP_NAME,
    GLYPH_MAXIMIZE,
    GLYPH_RESTORE,
    INITIAL_HEIGHT,
    INITIAL_WIDTH,
    MIN_HEIGHT,
    MIN_WIDTH,
    RESIZE_MARGIN,
)

LOGGER = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """
    Borderless editor window.

    Passive view for MainPresenter (IMainView) and the receiver of every control callback
    (IEditorHooks). Document decisions go to the presenter; native editing goes to the
    text surface; moving/resizing goes to the chrome helpers.
    """

    def __init__(
        self,
        factory: WidgetFactory,
        settings: ISettingsService,
        *,
        font_size: float | None = None,
        resize_margin: int = RESIZE_MARGIN,
        app_title: str = APP_NAME,
    ) -> None:
        super().__init__()
        self.setWindowFlags(Qt.WindowType.Window | Qt.WindowType.FramelessWindowHint)
        self.setWindowTitle(app_title)
        self.setWindowIcon(build_app_icon(factory.theme))
        self.setStyleSheet(factory.theme.stylesheet())
        self.setMinimumSize(MIN_WIDTH, MIN_HEIGHT)
        self.resize(INITIAL_WIDTH, INITIAL_HEIGHT)

        self.settings = settings
        self._presenter: MainPresenter | None = None
        self._resize_margin = resize_margin
        self._drag = WindowDragController(self)

        # Frame container: its margins form the border band used for edge resizing.
        self.container = QWidget(self)
        self.container.setObjectName("FrameContainer")
        self.container.setMouseTracking(True)
        self._frame_layout = QVBoxLayout(self.container)
        self._frame_layout.setSpacing(0)
        self._set_frame_margin(resize_margin)

        self.title_bar = factory.build_title_bar(self.container, self)
        self.menu_bar = factory.build_menu_bar(self.container, self)
        self.editor = factory.build_text_surface(self.container, self, font_size)
        self.status_bar, self.status_label = factory.build_status_bar(self.container)

        self._frame_layout.addWidget(self.title_bar)
        self._frame_layout.addWidget(self.menu_bar)
        self._frame_layout.addWidget(self.editor, 1)
        self._frame_layout.addWidget(self.status_bar)
        self.setCentralWidget(self.container)
        self.title_bar.set_title(app_title)

        self._resizer = EdgeResizeFilter(self.container, margin=resize_margin)
        self.container.installEventFilter(self._resizer)

        geo = self.settings.get_geometry()
        if isinstance(geo, (bytes, bytearray)):
            self.restoreGeometry(QByteArray(geo))
        else:
            self._center_on_screen()

        self.editor.setFocus()

    def attach_presenter(self, presenter: MainPresenter) -> None:
        self._presenter = presenter

    @property
    def presenter(self) -> MainPresenter:
        if self._presenter is None:
            raise RuntimeError("MainWindow has no presenter attached")
        return self._presenter

    def open_path(self, path: Path) -> bool:
        return self.presenter.open_document(path)

    # ---------- IMainView ----------

    def get_editor_text(self) -> str:
        return self.editor.toPlainText()

    def set_editor_text(self, text: str) -> None:
        # Programmatic loads are not user edits; the presenter refreshes afterwards.
        self.editor.blockSignals(True)
        try:
            self.editor.setPlainText(text)
        finally:
            self.editor.blockSignals(False)

    def caret_position(self) -> CaretPosition:
        c = self.editor.textCursor()
        return CaretPosition(line=c.blockNumber() + 1, column=c.positionInBlock() + 1)

    def font_point_size(self) -> float:
        return self.editor.font().pointSizeF()

    def set_font_point_size(self, size: float) -> None:
        f = self.editor.font()
        f.setPointSizeF(size)
        self.editor.setFont(f)

    def set_title(self, title: str) -> None:
        self.setWindowTitle(title)
        self.title_bar.set_title(title)

    def set_status(self, text: str) -> None:
        self.status_label.setText(text)

    def show_window_state(self, state: WindowState) -> None:
        if state is WindowState.MINIMIZED:
            self.showMinimized()
            return
        # State change and glyph swap land in the same frame.
        self.setUpdatesEnabled(False)
        try:
            if state is WindowState.MAXIMIZED:
                self.showMaximized()
            else:
                self.showNormal()
            self.set_maximized_glyph(state is WindowState.MAXIMIZED)
        finally:
            self.setUpdatesEnabled(True)
        QApplication.processEvents(QEventLoop.ProcessEventsFlag.ExcludeUserInputEvents)

    def set_maximized_glyph(self, maximized: bool) -> None:
        if maximized:
            self.title_bar.set_max_glyph(GLYPH_RESTORE, "Restore")
        else:
            self.title_bar.set_max_glyph(GLYPH_MAXIMIZE, "Maximize")

    def apply_chrome(self, chrome: ChromeState) -> None:
        self._set_frame_margin(0 if chrome.is_maximized else self._resize_margin)
        apply_chrome_region(self, chrome)

    # ---------- IEditorHooks ----------

    def on_new(self) -> None:
        self.presenter.new_document()

    def on_open(self) -> None:
        self.presenter.open_document()

    def on_save(self) -> None:
        self.presenter.save_document()

    def on_save_as(self) -> None:
        self.presenter.save_document_as()

    def on_exit(self) -> None:
        self.close()

    def on_undo(self) -> None:
        self.editor.undo()

    def on_cut(self) -> None:
        self.editor.cut()

    def on_copy(self) -> None:
        self.editor.copy()

    def on_paste(self) -> None:
        self.editor.paste()

    def on_select_all(self) -> None:
        self.editor.selectAll()

    def on_close(self) -> None:
        self.close()

    def on_maximize(self) -> None:
        self.presenter.toggle_maximize()

    def on_minimize(self) -> None:
        self.presenter.minimize()

    def on_title_bar_press(self, event: QMouseEvent) -> None:
        self._drag.handle_press(event)

    def on_title_bar_double_click(self, event: QMouseEvent) -> None:
        self.presenter.toggle_maximize()

    def on_text_changed(self) -> None:
        if self._alive():
            self.presenter.on_text_changed()

    def on_caret_moved(self) -> None:
        if self._alive():
            self.presenter.on_caret_moved()

    def on_wheel_with_modifier(self, notches: int) -> None:
        self.presenter.on_wheel_with_modifier(notches)

    # ---------- Qt events ----------

    def resizeEvent(self, event: QResizeEvent) -> None:  # type: ignore[override]
        super().resizeEvent(event)
        if self._presenter is not None:
            self._presenter.on_resized()

    def changeEvent(self, event: QEvent) -> None:  # type: ignore[override]
        super().changeEvent(event)
        if event.type() == QEvent.Type.WindowStateChange and self._presenter is not None:
            self._presenter.on_window_state_changed(self._current_state())

    def closeEvent(self, event: QCloseEvent) -> None:  # type: ignore[override]
        if self._presenter is not None and not self._presenter.confirm_close():
            LOGGER.debug("Close vetoed")
            event.ignore()
            return
        self.settings.set_geometry(bytes(self.saveGeometry()))
        self.settings.set_font_size(self.font_point_size())
        # Widgets torn down after this point must not reach the resize filter.
        self.container.removeEventFilter(self._resizer)
        super().closeEvent(event)

    # ---------- helpers ----------

    def _alive(self) -> bool:
        # Editor signals can still fire while child widgets are torn down.
        return self._presenter is not None and not sip.isdeleted(self)

    def _current_state(self) -> WindowState:
        if self.isMinimized():
            return WindowState.MINIMIZED
        if self.isMaximized():
            return WindowState.MAXIMIZED
        return WindowState.NORMAL

    def _set_frame_margin(self, margin: int) -> None:
        self._frame_layout.setContentsMargins(margin, margin, margin, margin)

    def _center_on_screen(self) -> None:
        screen = self.screen() or QApplication.primaryScreen()
        if screen is None:
            return
        frame = self.frameGeometry()
        frame.moveCenter(screen.availableGeometry().center())
        self.move(frame.topLeft())

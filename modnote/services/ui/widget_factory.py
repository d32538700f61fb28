from __future__ import annotations

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QAction, QFont, QKeySequence, QMouseEvent, QWheelEvent
from PyQt6.QtWidgets import (
    QFrame,
    QHBoxLayout,
    QLabel,
    QMenuBar,
    QPlainTextEdit,
    QPushButton,
    QStatusBar,
    QWidget,
)

from modnote.services.ui.ports.hooks import IEditorHooks
from modnote.services.ui.theme import Fonts, Theme
from modnote.utils.constants import (
    GLYPH_CLOSE,
    GLYPH_MAXIMIZE,
    GLYPH_MINIMIZE,
    STATUS_BAR_HEIGHT,
    STATUS_TEMPLATE,
    TITLE_BAR_HEIGHT,
    TITLE_BUTTON_SIZE,
)

_WHEEL_STEP = 120  # one notch, in eighths of a degree


class TitleBar(QWidget):
    """Hand-drawn title bar: caption on the left, minimize / maximize / close on the right."""

    def __init__(self, hooks: IEditorHooks, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._hooks = hooks
        self.setObjectName("TitleBar")
        self.setAttribute(Qt.WidgetAttribute.WA_StyledBackground, True)
        self.setFixedHeight(TITLE_BAR_HEIGHT)

        lay = QHBoxLayout(self)
        lay.setContentsMargins(0, 0, 0, 0)
        lay.setSpacing(0)

        self.title_label = QLabel(self)
        self.title_label.setObjectName("TitleLabel")
        # Presses on the caption must reach the bar so it can start a drag.
        self.title_label.setAttribute(Qt.WidgetAttribute.WA_TransparentForMouseEvents, True)
        lay.addWidget(self.title_label, 1)

        self.min_btn = self._button(GLYPH_MINIMIZE, "Minimize", "TitleButton")
        self.max_btn = self._button(GLYPH_MAXIMIZE, "Maximize", "TitleButton")
        self.close_btn = self._button(GLYPH_CLOSE, "Close", "CloseButton")
        for btn in (self.min_btn, self.max_btn, self.close_btn):
            lay.addWidget(btn)

        self.min_btn.clicked.connect(lambda: hooks.on_minimize())
        self.max_btn.clicked.connect(lambda: hooks.on_maximize())
        self.close_btn.clicked.connect(lambda: hooks.on_close())

    def _button(self, glyph: str, tip: str, name: str) -> QPushButton:
        btn = QPushButton(glyph, self)
        btn.setObjectName(name)
        btn.setToolTip(tip)
        btn.setFixedSize(TITLE_BUTTON_SIZE, TITLE_BAR_HEIGHT)
        btn.setFocusPolicy(Qt.FocusPolicy.NoFocus)
        btn.setCursor(Qt.CursorShape.PointingHandCursor)
        return btn

    def set_title(self, title: str) -> None:
        self.title_label.setText(title)

    def set_max_glyph(self, glyph: str, tip: str) -> None:
        self.max_btn.setText(glyph)
        self.max_btn.setToolTip(tip)

    def mousePressEvent(self, e: QMouseEvent) -> None:  # type: ignore[override]
        self._hooks.on_title_bar_press(e)

    def mouseDoubleClickEvent(self, e: QMouseEvent) -> None:  # type: ignore[override]
        if e.button() == Qt.MouseButton.LeftButton:
            self._hooks.on_title_bar_double_click(e)
            e.accept()
            return
        super().mouseDoubleClickEvent(e)


class TextSurface(QPlainTextEdit):
    """Plain-text editing area. Ctrl+wheel is reported as notches instead of scrolling."""

    wheelWithModifier = pyqtSignal(int)

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._wheel_remainder = 0

    def wheelEvent(self, e: QWheelEvent) -> None:  # type: ignore[override]
        if e.modifiers() & Qt.KeyboardModifier.ControlModifier:
            notches = self._take_notches(e.angleDelta().y())
            if notches:
                self.wheelWithModifier.emit(notches)
            e.accept()
            return
        super().wheelEvent(e)

    def _take_notches(self, delta: int) -> int:
        """Whole notches in delta plus any carried remainder; high-resolution wheels send fractions."""
        if delta == 0:
            return 0
        if self._wheel_remainder and (delta > 0) != (self._wheel_remainder > 0):
            # Direction changed: drop the partial step.
            self._wheel_remainder = 0
        total = self._wheel_remainder + delta
        notches = int(total / _WHEEL_STEP)
        self._wheel_remainder = total - notches * _WHEEL_STEP
        return notches


class WidgetFactory:
    """Builds the themed controls and binds them to IEditorHooks. Holds no editor logic."""

    def __init__(self, theme: Theme, fonts: Fonts | None = None) -> None:
        self.theme = theme
        self.fonts = fonts or Fonts()

    def ui_font(self, size: float) -> QFont:
        f = QFont(self.fonts.ui_family)
        f.setPointSizeF(size)
        return f

    def text_font(self, size: float | None = None) -> QFont:
        f = QFont(self.fonts.text_family)
        f.setStyleHint(QFont.StyleHint.Monospace)
        f.setPointSizeF(size if size is not None else self.fonts.text_size)
        return f

    def build_title_bar(self, parent: QWidget, hooks: IEditorHooks) -> TitleBar:
        bar = TitleBar(hooks, parent)
        bar.title_label.setFont(self.ui_font(self.fonts.title_size))
        for btn in (bar.min_btn, bar.max_btn, bar.close_btn):
            btn.setFont(self.ui_font(self.fonts.title_size))
        return bar

    def build_menu_bar(self, parent: QWidget, hooks: IEditorHooks) -> QMenuBar:
        bar = QMenuBar(parent)
        bar.setNativeMenuBar(False)
        bar.setFont(self.ui_font(self.fonts.menu_size))

        filem = bar.addMenu("&File")
        filem.addAction(self._action(parent, "New", QKeySequence.StandardKey.New, hooks.on_new))
        filem.addAction(self._action(parent, "Open…", QKeySequence.StandardKey.Open, hooks.on_open))
        filem.addAction(self._action(parent, "Save", QKeySequence.StandardKey.Save, hooks.on_save))
        filem.addAction(
            self._action(parent, "Save As…", QKeySequence("Ctrl+Shift+S"), hooks.on_save_as)
        )
        filem.addSeparator()
        filem.addAction(self._action(parent, "Exit", QKeySequence("Ctrl+Q"), hooks.on_exit))

        editm = bar.addMenu("&Edit")
        editm.addAction(self._action(parent, "Undo", QKeySequence.StandardKey.Undo, hooks.on_undo))
        editm.addSeparator()
        editm.addAction(self._action(parent, "Cut", QKeySequence.StandardKey.Cut, hooks.on_cut))
        editm.addAction(self._action(parent, "Copy", QKeySequence.StandardKey.Copy, hooks.on_copy))
        editm.addAction(
            self._action(parent, "Paste", QKeySequence.StandardKey.Paste, hooks.on_paste)
        )
        editm.addSeparator()
        editm.addAction(
            self._action(parent, "Select All", QKeySequence.StandardKey.SelectAll, hooks.on_select_all)
        )
        for m in (filem, editm):
            m.setFont(self.ui_font(self.fonts.menu_size))
        return bar

    def build_text_surface(
        self, parent: QWidget, hooks: IEditorHooks, font_size: float | None = None
    ) -> TextSurface:
        edit = TextSurface(parent)
        edit.setFrameShape(QFrame.Shape.NoFrame)
        edit.setFont(self.text_font(font_size))
        edit.setTabChangesFocus(False)
        edit.setLineWrapMode(QPlainTextEdit.LineWrapMode.NoWrap)
        edit.setHorizontalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAsNeeded)
        edit.setVerticalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAsNeeded)
        edit.textChanged.connect(lambda: hooks.on_text_changed())
        edit.cursorPositionChanged.connect(lambda: hooks.on_caret_moved())
        edit.wheelWithModifier.connect(lambda n: hooks.on_wheel_with_modifier(n))
        return edit

    def build_status_bar(self, parent: QWidget) -> tuple[QStatusBar, QLabel]:
        bar = QStatusBar(parent)
        bar.setSizeGripEnabled(False)
        bar.setFixedHeight(STATUS_BAR_HEIGHT)
        label = QLabel(STATUS_TEMPLATE.format(line=1, column=1), bar)
        label.setAlignment(Qt.AlignmentFlag.AlignLeft | Qt.AlignmentFlag.AlignVCenter)
        bar.addWidget(label, 1)
        return bar, label

    # ---------- helpers ----------

    @staticmethod
    def _action(parent: QWidget, text: str, shortcut, slot) -> QAction:
        act = QAction(text, parent)
        act.setShortcut(shortcut)
        act.triggered.connect(lambda _checked=False: slot())
        return act

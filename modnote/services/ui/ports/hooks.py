from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class IEditorHooks(Protocol):
    """
    Named callbacks the widget factory binds its controls to.

    The factory only knows these names; whoever implements them decides what they do.
    """

    # File menu
    def on_new(self) -> None: ...
    def on_open(self) -> None: ...
    def on_save(self) -> None: ...
    def on_save_as(self) -> None: ...
    def on_exit(self) -> None: ...

    # Edit menu
    def on_undo(self) -> None: ...
    def on_cut(self) -> None: ...
    def on_copy(self) -> None: ...
    def on_paste(self) -> None: ...
    def on_select_all(self) -> None: ...

    # Title bar
    def on_close(self) -> None: ...
    def on_maximize(self) -> None: ...
    def on_minimize(self) -> None: ...
    def on_title_bar_press(self, event: Any) -> None: ...
    def on_title_bar_double_click(self, event: Any) -> None: ...

    # Text surface
    def on_text_changed(self) -> None: ...
    def on_caret_moved(self) -> None: ...
    def on_wheel_with_modifier(self, notches: int) -> None: ...

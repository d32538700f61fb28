from __future__ import annotations

from PyQt6.QtCore import Qt

from modnote.services.ui.chrome.drag import WindowDragController


class FakeHandle:
    def __init__(self, result: bool = True) -> None:
        self.result = result
        self.moves = 0

    def startSystemMove(self) -> bool:
        self.moves += 1
        return self.result


class FakeWindow:
    def __init__(self, handle: FakeHandle | None) -> None:
        self._handle = handle

    def windowHandle(self):
        return self._handle


class FakeEvent:
    def __init__(self, button=Qt.MouseButton.LeftButton) -> None:
        self._button = button
        self.accepted = False

    def button(self):
        return self._button

    def accept(self) -> None:
        self.accepted = True


def test_left_press_starts_system_move(qapp):
    handle = FakeHandle()
    ctl = WindowDragController(FakeWindow(handle))  # type: ignore[arg-type]
    ev = FakeEvent()

    assert ctl.handle_press(ev) is True  # type: ignore[arg-type]
    assert handle.moves == 1
    assert ev.accepted is True


def test_other_buttons_do_not_drag(qapp):
    handle = FakeHandle()
    ctl = WindowDragController(FakeWindow(handle))  # type: ignore[arg-type]
    ev = FakeEvent(Qt.MouseButton.RightButton)

    assert ctl.handle_press(ev) is False  # type: ignore[arg-type]
    assert handle.moves == 0
    assert ev.accepted is False


def test_no_native_handle_is_a_no_op(qapp):
    ctl = WindowDragController(FakeWindow(None))  # type: ignore[arg-type]
    assert ctl.request_window_drag() is False


def test_refused_move_leaves_event_unaccepted(qapp):
    handle = FakeHandle(result=False)
    ctl = WindowDragController(FakeWindow(handle))  # type: ignore[arg-type]
    ev = FakeEvent()

    assert ctl.handle_press(ev) is False  # type: ignore[arg-type]
    assert handle.moves == 1
    assert ev.accepted is False


def test_each_press_is_independent(qapp):
    handle = FakeHandle()
    ctl = WindowDragController(FakeWindow(handle))  # type: ignore[arg-type]
    for _ in range(3):
        ctl.handle_press(FakeEvent())  # type: ignore[arg-type]
    assert handle.moves == 3

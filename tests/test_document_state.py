from __future__ import annotations

from pathlib import Path

import pytest

from modnote.domain.document_state import (
    CLOSE_PROMPT,
    CONTINUE_PROMPT,
    OPEN_ERROR_TITLE,
    SAVE_ERROR_TITLE,
    DocumentStateMachine,
)
from modnote.domain.models import GateChoice, IoResult

# ------------------------------
# Fakes
# ------------------------------


class FakeFiles:
    """In-memory file store; paths listed in `fail_*` report an error instead."""

    def __init__(self) -> None:
        self.data: dict[Path, str] = {}
        self.fail_read: set[Path] = set()
        self.fail_write: set[Path] = set()
        self.writes: list[tuple[Path, str]] = []
        self.newlines: list[str] = []
        self.crlf: set[Path] = set()

    def read_text(self, path: Path) -> IoResult:
        if path in self.fail_read or path not in self.data:
            return IoResult.failure(f"cannot read {path.name}")
        newline = "\r\n" if path in self.crlf else "\n"
        return IoResult.success(self.data[path], newline=newline)

    def write_text(self, path: Path, text: str, newline: str = "\n") -> IoResult:
        self.writes.append((path, text))
        self.newlines.append(newline)
        if path in self.fail_write:
            return IoResult.failure("disk full")
        self.data[path] = text
        return IoResult.success()


class FakeUser:
    """Scripted answers for the chooser, the gate prompt and the error reporter."""

    def __init__(self) -> None:
        self.open_answers: list[Path | None] = []
        self.save_answers: list[Path | None] = []
        self.gate_answers: list[GateChoice] = []
        self.prompts: list[str] = []
        self.suggested: list[Path | None] = []
        self.errors: list[tuple[str, str]] = []
        self.open_calls = 0

    def choose_open_path(self) -> Path | None:
        self.open_calls += 1
        return self.open_answers.pop(0) if self.open_answers else None

    def choose_save_path(self, suggested: Path | None = None) -> Path | None:
        self.suggested.append(suggested)
        return self.save_answers.pop(0) if self.save_answers else None

    def ask(self, message: str) -> GateChoice:
        self.prompts.append(message)
        return self.gate_answers.pop(0)

    def report_error(self, title: str, message: str) -> None:
        self.errors.append((title, message))


@pytest.fixture()
def files() -> FakeFiles:
    return FakeFiles()


@pytest.fixture()
def user() -> FakeUser:
    return FakeUser()


@pytest.fixture()
def sm(files: FakeFiles, user: FakeUser) -> DocumentStateMachine:
    return DocumentStateMachine(files, user, user, user)


def _open(sm: DocumentStateMachine, files: FakeFiles, path: Path, text: str) -> None:
    files.data[path] = text
    assert sm.open(path) is True


# ------------------------------
# New
# ------------------------------


def test_starts_pristine(sm: DocumentStateMachine):
    assert sm.document.path is None
    assert sm.document.text == ""
    assert sm.is_dirty is False


def test_new_on_clean_document_does_not_prompt(sm, user):
    assert sm.new() is True
    assert user.prompts == []


def test_new_discard_resets_document(sm, files, user):
    _open(sm, files, Path("a.txt"), "abc")
    sm.set_text("changed")
    user.gate_answers = [GateChoice.DISCARD]

    assert sm.new() is True
    assert user.prompts == [CONTINUE_PROMPT]
    assert sm.document.path is None
    assert sm.document.text == ""
    assert sm.is_dirty is False
    assert files.writes == []


def test_new_cancel_keeps_everything(sm, files, user):
    _open(sm, files, Path("a.txt"), "abc")
    sm.set_text("changed")
    user.gate_answers = [GateChoice.CANCEL]

    assert sm.new() is False
    assert sm.document.path == Path("a.txt")
    assert sm.document.text == "changed"
    assert sm.is_dirty is True


def test_new_save_writes_then_resets(sm, files, user):
    _open(sm, files, Path("a.txt"), "abc")
    sm.set_text("changed")
    user.gate_answers = [GateChoice.SAVE]

    assert sm.new() is True
    assert files.data[Path("a.txt")] == "changed"
    assert sm.document.path is None


# ------------------------------
# Open
# ------------------------------


def test_open_cancelled_chooser_changes_nothing(sm, files, user):
    assert sm.open() is False
    assert user.open_calls == 1
    assert sm.document.path is None


def test_open_via_chooser_loads_clean_document(sm, files, user):
    p = Path("notes.txt")
    files.data[p] = "line1\nline2"
    user.open_answers = [p]

    assert sm.open() is True
    assert sm.document.path == p
    assert sm.document.text == "line1\nline2"
    assert sm.document.saved_text == "line1\nline2"
    assert sm.is_dirty is False


def test_open_with_path_skips_chooser(sm, files, user):
    _open(sm, files, Path("b.txt"), "x")
    assert user.open_calls == 0


def test_open_failure_reports_and_keeps_document(sm, files, user):
    _open(sm, files, Path("a.txt"), "abc")
    bad = Path("locked.txt")
    files.fail_read.add(bad)

    assert sm.open(bad) is False
    assert user.errors and user.errors[0][0] == OPEN_ERROR_TITLE
    assert "locked.txt" in user.errors[0][1]
    assert sm.document.path == Path("a.txt")
    assert sm.document.text == "abc"


def test_open_cancel_gate_never_asks_for_path(sm, files, user):
    _open(sm, files, Path("a.txt"), "abc")
    sm.set_text("unsaved")
    user.gate_answers = [GateChoice.CANCEL]

    assert sm.open() is False
    assert user.open_calls == 0
    assert sm.document.path == Path("a.txt")
    assert sm.document.saved_text == "abc"
    assert sm.document.text == "unsaved"


# ------------------------------
# Save / Save As
# ------------------------------


def test_save_untitled_delegates_to_save_as(sm, files, user):
    sm.set_text("hello")
    user.save_answers = [Path("new.txt")]

    assert sm.save() is True
    assert user.suggested == [None]
    assert files.data[Path("new.txt")] == "hello"
    assert sm.document.path == Path("new.txt")
    assert sm.is_dirty is False


def test_save_with_path_writes_silently(sm, files, user):
    _open(sm, files, Path("a.txt"), "abc")
    sm.set_text("abcd")

    assert sm.save() is True
    assert user.suggested == []
    assert files.data[Path("a.txt")] == "abcd"
    assert sm.is_dirty is False


def test_save_as_suggests_current_path(sm, files, user):
    _open(sm, files, Path("a.txt"), "abc")
    user.save_answers = [Path("b.txt")]

    assert sm.save_as() is True
    assert user.suggested == [Path("a.txt")]
    assert sm.document.path == Path("b.txt")


def test_save_as_cancelled_changes_nothing(sm, files, user):
    sm.set_text("draft")
    assert sm.save_as() is False
    assert files.writes == []
    assert sm.document.path is None
    assert sm.is_dirty is True


def test_save_failure_reports_and_stays_dirty(sm, files, user):
    _open(sm, files, Path("a.txt"), "abc")
    sm.set_text("abcd")
    files.fail_write.add(Path("a.txt"))

    assert sm.save() is False
    assert user.errors[0][0] == SAVE_ERROR_TITLE
    assert "disk full" in user.errors[0][1]
    assert sm.is_dirty is True
    assert sm.document.saved_text == "abc"


def test_failed_save_as_keeps_previous_path(sm, files, user):
    _open(sm, files, Path("a.txt"), "abc")
    files.fail_write.add(Path("readonly.txt"))
    user.save_answers = [Path("readonly.txt")]

    assert sm.save_as() is False
    assert sm.document.path == Path("a.txt")


# ------------------------------
# Close gate
# ------------------------------


def test_close_clean_proceeds_without_prompt(sm, user):
    assert sm.confirm_close() is True
    assert user.prompts == []


def test_close_uses_close_prompt(sm, user):
    sm.set_text("x")
    user.gate_answers = [GateChoice.DISCARD]
    assert sm.confirm_close() is True
    assert user.prompts == [CLOSE_PROMPT]


def test_close_cancel_vetoes(sm, user):
    sm.set_text("x")
    user.gate_answers = [GateChoice.CANCEL]
    assert sm.confirm_close() is False


def test_close_save_but_save_as_cancelled_vetoes(sm, files, user):
    sm.set_text("x")
    user.gate_answers = [GateChoice.SAVE]
    user.save_answers = [None]

    assert sm.confirm_close() is False
    assert files.writes == []
    # The gate asks once; it does not loop.
    assert user.prompts == [CLOSE_PROMPT]


def test_close_save_failure_vetoes(sm, files, user):
    _open(sm, files, Path("a.txt"), "abc")
    sm.set_text("abcd")
    files.fail_write.add(Path("a.txt"))
    user.gate_answers = [GateChoice.SAVE]

    assert sm.confirm_close() is False
    assert len(user.errors) == 1


def test_close_save_success_proceeds(sm, files, user):
    sm.set_text("x")
    user.gate_answers = [GateChoice.SAVE]
    user.save_answers = [Path("out.txt")]

    assert sm.confirm_close() is True
    assert files.data[Path("out.txt")] == "x"
    assert sm.document.path == Path("out.txt")


def test_save_twice_without_edits_stays_clean(sm, files, user):
    sm.set_text("abc")
    user.save_answers = [Path("a.txt")]
    assert sm.save() is True
    assert sm.save() is True
    assert sm.is_dirty is False
    assert files.writes == [(Path("a.txt"), "abc"), (Path("a.txt"), "abc")]
    # Only the first save needed a path
    assert user.suggested == [None]


def test_edit_then_revert_is_clean(sm, files):
    _open(sm, files, Path("a.txt"), "c1")
    sm.set_text("c2")
    assert sm.is_dirty is True
    sm.set_text("c1")
    assert sm.is_dirty is False


# ------------------------------
# Gate: SAVE that does not complete vetoes New and Open
# ------------------------------


def _assert_unchanged(sm: DocumentStateMachine, path: Path | None, saved: str | None, text: str):
    assert sm.document.path == path
    assert sm.document.saved_text == saved
    assert sm.document.text == text


def test_new_save_with_failing_write_vetoes(sm, files, user):
    _open(sm, files, Path("a.txt"), "abc")
    sm.set_text("edited")
    files.fail_write.add(Path("a.txt"))
    user.gate_answers = [GateChoice.SAVE]

    assert sm.new() is False
    assert [t for t, _ in user.errors] == [SAVE_ERROR_TITLE]
    _assert_unchanged(sm, Path("a.txt"), "abc", "edited")


def test_new_save_with_cancelled_save_as_vetoes(sm, files, user):
    sm.set_text("draft")
    user.gate_answers = [GateChoice.SAVE]
    user.save_answers = [None]

    assert sm.new() is False
    assert files.writes == []
    _assert_unchanged(sm, None, None, "draft")


def test_open_save_with_failing_write_never_reads_target(sm, files, user, monkeypatch):
    _open(sm, files, Path("a.txt"), "abc")
    sm.set_text("edited")
    files.fail_write.add(Path("a.txt"))
    files.data[Path("other.txt")] = "other"
    user.gate_answers = [GateChoice.SAVE]

    reads: list[Path] = []
    real_read = files.read_text
    monkeypatch.setattr(files, "read_text", lambda p: reads.append(p) or real_read(p))

    assert sm.open(Path("other.txt")) is False
    assert reads == []
    _assert_unchanged(sm, Path("a.txt"), "abc", "edited")


def test_open_save_with_cancelled_save_as_never_reads_target(sm, files, user, monkeypatch):
    sm.set_text("draft")
    files.data[Path("other.txt")] = "other"
    user.gate_answers = [GateChoice.SAVE]
    user.save_answers = [None]

    reads: list[Path] = []
    monkeypatch.setattr(files, "read_text", lambda p: reads.append(p))

    assert sm.open(Path("other.txt")) is False
    assert reads == []
    assert files.writes == []
    _assert_unchanged(sm, None, None, "draft")


def test_line_ending_of_opened_file_is_kept_on_save(sm, files, user):
    p = Path("dos.txt")
    files.crlf.add(p)
    _open(sm, files, p, "a\nb")
    assert sm.document.newline == "\r\n"

    sm.set_text("a\nb\nc")
    assert sm.save() is True
    assert files.newlines == ["\r\n"]


def test_new_document_saves_with_lf(sm, files, user):
    sm.set_text("x")
    user.save_answers = [Path("n.txt")]
    assert sm.save() is True
    assert files.newlines == ["\n"]

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from pathlib import Path

DEFAULT_CORNER_RADIUS = 8


@dataclass
class Document:
    """The open file: where it lives, what was last saved, what is in the editor."""

    path: Path | None = None
    saved_text: str | None = None
    text: str = ""
    # Line ending found on disk; the editor always works with "\n".
    newline: str = "\n"

    @classmethod
    def pristine(cls) -> Document:
        return cls(path=None, saved_text=None, text="")

    @property
    def is_dirty(self) -> bool:
        # Never cached: always derived from the two strings.
        saved = self.saved_text if self.saved_text is not None else ""
        return self.text != saved

    @property
    def display_name(self) -> str | None:
        return self.path.name if self.path else None


class WindowState(Enum):
    NORMAL = auto()
    MAXIMIZED = auto()
    MINIMIZED = auto()


@dataclass
class ChromeState:
    window_state: WindowState = WindowState.NORMAL
    corner_radius: int = DEFAULT_CORNER_RADIUS

    @property
    def is_maximized(self) -> bool:
        return self.window_state is WindowState.MAXIMIZED

    @property
    def rounded(self) -> bool:
        """Rounded corners are only ever drawn on a normal (restored) window."""
        return self.window_state is WindowState.NORMAL and self.corner_radius > 0


@dataclass(frozen=True)
class CaretPosition:
    line: int = 1
    column: int = 1


@dataclass(frozen=True)
class IoResult:
    """Outcome of a file read/write. Failures carry a message fit for the user."""

    ok: bool
    value: str | None = None
    error: str | None = None
    newline: str = "\n"

    @classmethod
    def success(cls, value: str | None = None, newline: str = "\n") -> IoResult:
        return cls(ok=True, value=value, newline=newline)

    @classmethod
    def failure(cls, message: str) -> IoResult:
        return cls(ok=False, error=message)


class GateChoice(Enum):
    """Answer to the unsaved-changes question."""

    SAVE = auto()
    DISCARD = auto()
    CANCEL = auto()

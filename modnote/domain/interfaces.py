from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Protocol

from .models import GateChoice, IoResult


class IFileService(Protocol):
    """
    Read/write whole text files as UTF-8. Failures come back as IoResult, never raised.

    Text crosses this boundary with "\n" line breaks; the file's own line ending is reported
    by read_text and passed back to write_text.
    """

    def read_text(self, path: Path) -> IoResult: ...
    def write_text(self, path: Path, text: str, newline: str = "\n") -> IoResult: ...


class IPathChooser(Protocol):
    """Ask the user for a file location; None means the user cancelled."""

    def choose_open_path(self) -> Path | None: ...
    def choose_save_path(self, suggested: Path | None = None) -> Path | None: ...


class IConfirmationPrompt(Protocol):
    def ask(self, message: str) -> GateChoice: ...


class IErrorReporter(Protocol):
    def report_error(self, title: str, message: str) -> None: ...


class ISettingsService(Protocol):
    """Persist and retrieve lightweight UI state."""

    def get_geometry(self) -> bytes | None: ...
    def set_geometry(self, blob: bytes) -> None: ...
    def get_font_size(self) -> float | None: ...
    def set_font_size(self, size: float) -> None: ...


class IConfigService(Protocol):
    """Read-only application configuration."""

    def get(self, section: str, key: str, default: str | None = None) -> str | None: ...
    def get_int(self, section: str, key: str, default: int | None = None) -> int | None: ...
    def get_bool(self, section: str, key: str, default: bool | None = None) -> bool | None: ...
    def as_dict(self) -> Mapping[str, Mapping[str, str]]: ...

"""Domain layer: interfaces, simple models (dataclasses) and the document state machine."""

from .document_state import CLOSE_PROMPT, CONTINUE_PROMPT, DocumentStateMachine
from .interfaces import (
    IConfigService,
    IConfirmationPrompt,
    IErrorReporter,
    IFileService,
    IPathChooser,
    ISettingsService,
)
from .models import CaretPosition, ChromeState, Document, GateChoice, IoResult, WindowState
from .zoom import MAX_FONT_SIZE, MIN_FONT_SIZE, zoom_font_size

__all__ = [
    "CLOSE_PROMPT",
    "CONTINUE_PROMPT",
    "DocumentStateMachine",
    "IConfigService",
    "IConfirmationPrompt",
    "IErrorReporter",
    "IFileService",
    "IPathChooser",
    "ISettingsService",
    "CaretPosition",
    "ChromeState",
    "Document",
    "GateChoice",
    "IoResult",
    "WindowState",
    "MAX_FONT_SIZE",
    "MIN_FONT_SIZE",
    "zoom_font_size",
]

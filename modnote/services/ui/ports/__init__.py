from __future__ import annotations

from .dialogs import IFileDialogService
from .hooks import IEditorHooks
from .messages import IMessageService

__all__ = [
    "IEditorHooks",
    "IFileDialogService",
    "IMessageService",
]

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from modnote.domain.models import GateChoice


@runtime_checkable
class IMessageService(Protocol):
    """
    Abstract UI port for showing messages. Decouples business logic from Qt widgets.
    """

    def error(self, parent: Any | None, title: str, text: str) -> None: ...

    def ask_unsaved(self, parent: Any | None, title: str, text: str) -> GateChoice:
        """
        Ask whether to save pending changes. Blocks until answered.
        Dismissing the dialog counts as CANCEL.
        """
        ...

"""The state of a single-value text prompt."""

from __future__ import annotations

from dataclasses import dataclass, replace

from termwidgets.prompt import FocusState, PromptState
from termwidgets.status import Status


@dataclass
class TextState(PromptState):
    """Prompt state holding a text value; the ``with_*`` methods return updated copies."""

    def with_status(self, status: Status) -> TextState:
        return replace(self, status=status)

    def with_focus(self, focus: FocusState) -> TextState:
        return replace(self, focus_state=focus)

    def with_value(self, value: str) -> TextState:
        return replace(self, value=str(value))

    def is_finished(self) -> bool:
        return self.status.is_finished()
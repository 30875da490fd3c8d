"""A prompt widget showing a status symbol, a message and a text input."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from itertools import islice

from termwidgets.buffer import Buffer, Frame
from termwidgets.geometry import Position, Rect
from termwidgets.prompt import PromptState
from termwidgets.text import Line, Span, wrap_line
from termwidgets.widgets import Block, Paragraph


class TextRenderStyle(Enum):
    """How the value of a text prompt is shown."""

    DEFAULT = "default"
    PASSWORD = "password"
    INVISIBLE = "invisible"

    def render(self, state: PromptState) -> str:
        if self is TextRenderStyle.PASSWORD:
            return "*" * len(state.value)
        if self is TextRenderStyle.INVISIBLE:
            return ""
        return state.value


@dataclass(frozen=True)
class TextPrompt:
    """A message followed by a text input, wrapped character by character."""

    message: str = ""
    block: Block | None = None
    render_style: TextRenderStyle = TextRenderStyle.DEFAULT

    def with_block(self, block: Block) -> TextPrompt:
        return replace(self, block=block)

    def with_render_style(self, render_style: TextRenderStyle) -> TextPrompt:
        return replace(self, render_style=render_style)

    def render(self, area: Rect, buf: Buffer, state: PromptState) -> None:
        """Draw the prompt and record the cursor cell in ``state.cursor``."""
        if self.block is not None:
            inner = self.block.inner(area)
            self.block.render(area, buf)
            area = inner
        if area.is_empty():
            raise ValueError("prompt area is empty")

        width = area.width
        value = self.render_style.render(state)
        line = Line(
            (
                state.status.symbol(),
                Span(" "),
                Span(self.message).bold(),
                Span(" › ").cyan().dim(),
                Span.raw(value),
            )
        )
        prompt_length = line.width() - len(value)
        lines = list(islice(wrap_line(line, width), area.height))

        # Keep the cursor inside the area.
        position = min(state.position + prompt_length, area.area() - 1)
        row, column = divmod(position, width)
        state.cursor = Position(area.x + column, area.y + row)
        Paragraph(lines).render(area, buf)

    def draw(self, frame: Frame, area: Rect, state: PromptState) -> None:
        """Render into ``frame`` and place the terminal cursor there when focused."""
        frame.render_stateful_widget(self, area, state)
        if state.is_focused():
            frame.set_cursor_position(state.cursor)
"""A grid of styled cells and a frame to draw widgets into."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable

from wcwidth import wcwidth

from termwidgets.geometry import Position, Rect
from termwidgets.style import Color, Modifier, Style
from termwidgets.text import Line, Span, _display_width


@dataclass
class Cell:
    """One terminal cell: a symbol and its colours and modifiers."""

    symbol: str = " "
    fg: Color = Color.RESET
    bg: Color = Color.RESET
    modifier: Modifier = Modifier(0)

    def set_symbol(self, symbol: str) -> Cell:
        self.symbol = symbol
        return self

    def set_style(self, style: Style) -> Cell:
        if style.fg is not None:
            self.fg = style.fg
        if style.bg is not None:
            self.bg = style.bg
        self.modifier = (self.modifier | style.added) & ~style.removed
        return self

    def reset(self) -> None:
        self.symbol = " "
        self.fg = Color.RESET
        self.bg = Color.RESET
        self.modifier = Modifier(0)


@dataclass(repr=False)
class Buffer:
    """Cells covering ``area``, stored row by row."""

    area: Rect
    content: list[Cell] = field(default_factory=list)

    @classmethod
    def empty(cls, area: Rect) -> Buffer:
        return cls(area, [Cell() for _ in range(area.area())])

    @classmethod
    def with_lines(cls, lines: Iterable[Line | str]) -> Buffer:
        """A buffer at the origin sized to fit the given lines."""
        parsed = [line if isinstance(line, Line) else Line.from_spans(line) for line in lines]
        width = max((line.width() for line in parsed), default=0)
        buf = cls.empty(Rect(0, 0, width, len(parsed)))
        for y, line in enumerate(parsed):
            buf.set_line(0, y, line, width)
        return buf

    def _index(self, key: Any) -> int:
        if isinstance(key, Rect):
            x, y = key.x, key.y
        else:
            x, y = key
        area = self.area
        if not (area.left() <= x < area.right() and area.top() <= y < area.bottom()):
            raise IndexError(f"position ({x}, {y}) is outside the buffer area {area}")
        return (y - area.y) * area.width + (x - area.x)

    def __getitem__(self, key: Any) -> Cell:
        return self.content[self._index(key)]

    def __setitem__(self, key: Any, cell: Cell) -> None:
        self.content[self._index(key)] = cell

    def _set_stringn(self, x: int, y: int, string: str, max_width: int, style: Style) -> Position:
        remaining = min(max_width, max(self.area.right() - x, 0))
        previous: Position | None = None
        for char in string:
            width = wcwidth(char)
            if width < 0:
                continue
            if width == 0:
                if previous is not None:
                    self[previous].symbol += char
                continue
            if width > remaining:
                break
            self[(x, y)].set_symbol(char).set_style(style)
            previous = Position(x, y)
            for offset in range(1, width):
                self[(x + offset, y)].reset()
            x += width
            remaining -= width
        return Position(x, y)

    def set_string(self, x: int, y: int, string: str, style: Style | None = None) -> Position:
        """Write ``string`` from (x, y), clipped at the right edge; returns the next position."""
        return self._set_stringn(x, y, string, self.area.right(), style or Style())

    def set_span(self, x: int, y: int, span: Span, max_width: int) -> Position:
        return self._set_stringn(x, y, span.content, max_width, span.style)

    def set_line(self, x: int, y: int, line: Line, max_width: int) -> Position:
        remaining = max_width
        for span in line.spans:
            if remaining <= 0:
                break
            end = self.set_span(x, y, span, remaining)
            remaining -= max(end.x - x, 0)
            x = end.x
        return Position(x, y)

    def set_style(self, area: Rect, style: Style) -> None:
        """Apply ``style`` to every cell of ``area`` that lies within the buffer."""
        for position in area.intersection(self.area).positions():
            self[position].set_style(style)

    def text_lines(self) -> list[str]:
        """The symbols of each row, skipping cells hidden by wide characters."""
        lines = []
        for row in self.area.rows():
            parts = []
            hidden = 0
            for position in row.positions():
                if hidden:
                    hidden -= 1
                    continue
                symbol = self[position].symbol
                parts.append(symbol)
                hidden = max(_display_width(symbol) - 1, 0)
            lines.append("".join(parts))
        return lines

    def __repr__(self) -> str:
        return f"Buffer(area={self.area!r}, lines={self.text_lines()!r})"


@dataclass
class Frame:
    """A drawing surface for one screen update, with an optional cursor position."""

    buffer: Buffer
    cursor_position: Position | None = None

    def render_widget(self, widget: Any, area: Rect) -> None:
        widget.render(area, self.buffer)

    def render_stateful_widget(self, widget: Any, area: Rect, state: Any) -> None:
        widget.render(area, self.buffer, state)

    def set_cursor_position(self, position: Position | tuple[int, int]) -> None:
        self.cursor_position = Position(*position)
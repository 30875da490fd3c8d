"""Basic widgets: bordered blocks, paragraphs and scrollbars."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum, IntFlag
from typing import Iterable, Union

from termwidgets.buffer import Buffer
from termwidgets.geometry import Rect
from termwidgets.style import Style
from termwidgets.text import Line, Span, _display_width

TextLike = Union[str, Span, Line, Iterable[Union[Line, Span, str]]]


class Borders(IntFlag):
    """Which sides of a block carry a border."""

    NONE = 0
    TOP = 1
    RIGHT = 2
    BOTTOM = 4
    LEFT = 8
    ALL = 15


def _as_line(value: Line | Span | str) -> Line:
    if isinstance(value, Line):
        return value
    if isinstance(value, Span):
        return Line((value,))
    return Line.from_spans(value)


@dataclass(frozen=True)
class Block:
    """A frame drawn around an area, with an optional title on its top row."""

    borders: Borders = Borders.NONE
    title: Line | str | None = None
    style: Style = field(default_factory=Style)

    def inner(self, area: Rect) -> Rect:
        """The part of ``area`` left inside the borders and title."""
        x, y, width, height = area.x, area.y, area.width, area.height
        if self.borders & Borders.LEFT:
            x = min(x + 1, area.right())
            width = max(width - 1, 0)
        if self.borders & Borders.TOP or self.title is not None:
            y = min(y + 1, area.bottom())
            height = max(height - 1, 0)
        if self.borders & Borders.RIGHT:
            width = max(width - 1, 0)
        if self.borders & Borders.BOTTOM:
            height = max(height - 1, 0)
        return Rect(x, y, width, height)

    def render(self, area: Rect, buf: Buffer) -> None:
        if area.is_empty():
            return
        buf.set_style(area, self.style)
        self._render_borders(area, buf)
        self._render_title(area, buf)

    def _render_borders(self, area: Rect, buf: Buffer) -> None:
        left, right = area.left(), area.right() - 1
        top, bottom = area.top(), area.bottom() - 1
        borders = self.borders
        if borders & Borders.LEFT:
            for y in range(top, bottom + 1):
                buf[(left, y)].set_symbol("│")
        if borders & Borders.TOP:
            for x in range(left, right + 1):
                buf[(x, top)].set_symbol("─")
        if borders & Borders.RIGHT:
            for y in range(top, bottom + 1):
                buf[(right, y)].set_symbol("│")
        if borders & Borders.BOTTOM:
            for x in range(left, right + 1):
                buf[(x, bottom)].set_symbol("─")
        corners = (
            (Borders.TOP | Borders.LEFT, (left, top), "┌"),
            (Borders.TOP | Borders.RIGHT, (right, top), "┐"),
            (Borders.BOTTOM | Borders.LEFT, (left, bottom), "└"),
            (Borders.BOTTOM | Borders.RIGHT, (right, bottom), "┘"),
        )
        for sides, position, symbol in corners:
            if borders & sides == sides:
                buf[position].set_symbol(symbol)

    def _render_title(self, area: Rect, buf: Buffer) -> None:
        if self.title is None:
            return
        left_border = 1 if self.borders & Borders.LEFT else 0
        right_border = 1 if self.borders & Borders.RIGHT else 0
        width = max(area.width - left_border - right_border, 0)
        if width:
            buf.set_line(area.x + left_border, area.top(), _as_line(self.title), width)


@dataclass
class Paragraph:
    """Lines of text drawn top to bottom, clipped to the area; no wrapping."""

    text: TextLike = ""
    block: Block | None = None
    style: Style = field(default_factory=Style)

    def _lines(self) -> list[Line]:
        if isinstance(self.text, str):
            return [Line.from_spans(part) for part in self.text.split("\n")]
        if isinstance(self.text, (Line, Span)):
            return [_as_line(self.text)]
        return [_as_line(item) for item in self.text]

    def render(self, area: Rect, buf: Buffer) -> None:
        buf.set_style(area, self.style)
        if self.block is not None:
            self.block.render(area, buf)
            area = self.block.inner(area)
        if area.is_empty():
            return
        for y, line in zip(range(area.top(), area.bottom()), self._lines()):
            buf.set_line(area.x, y, line, area.width)


class ScrollbarOrientation(Enum):
    """Which edge of its area a scrollbar is drawn on."""

    VERTICAL_RIGHT = "vertical_right"
    VERTICAL_LEFT = "vertical_left"
    HORIZONTAL_BOTTOM = "horizontal_bottom"
    HORIZONTAL_TOP = "horizontal_top"

    def is_vertical(self) -> bool:
        return self in (ScrollbarOrientation.VERTICAL_RIGHT, ScrollbarOrientation.VERTICAL_LEFT)


@dataclass
class ScrollbarState:
    """How much content there is and where the view into it starts."""

    content_length: int = 0
    position: int = 0
    viewport_content_length: int = 0


_VERTICAL_SYMBOLS = ("█", "║", "▲", "▼")
_HORIZONTAL_SYMBOLS = ("█", "═", "◄", "►")


def _round_half_away(value: float) -> int:
    return math.floor(value + 0.5)


@dataclass(frozen=True)
class Scrollbar:
    """A track with a thumb showing the visible part of some content.

    Symbols left as ``None`` take the defaults for the orientation.
    """

    orientation: ScrollbarOrientation = ScrollbarOrientation.VERTICAL_RIGHT
    thumb_symbol: str | None = None
    track_symbol: str | None = None
    begin_symbol: str | None = None
    end_symbol: str | None = None
    show_arrows: bool = True
    style: Style = field(default_factory=Style)

    def _symbols(self) -> tuple[str, str, str | None, str | None]:
        thumb, track, begin, end = (
            _VERTICAL_SYMBOLS if self.orientation.is_vertical() else _HORIZONTAL_SYMBOLS
        )
        thumb = self.thumb_symbol if self.thumb_symbol is not None else thumb
        track = self.track_symbol if self.track_symbol is not None else track
        if not self.show_arrows:
            return thumb, track, None, None
        begin = self.begin_symbol if self.begin_symbol is not None else begin
        end = self.end_symbol if self.end_symbol is not None else end
        return thumb, track, begin, end

    def _track_length(self, area: Rect, begin: str | None, end: str | None) -> int:
        arrows = (_display_width(begin) if begin else 0) + (_display_width(end) if end else 0)
        length = area.height if self.orientation.is_vertical() else area.width
        return max(length - arrows, 0)

    def _viewport_length(self, area: Rect, state: ScrollbarState) -> int:
        if state.viewport_content_length:
            return state.viewport_content_length
        return area.height if self.orientation.is_vertical() else area.width

    def _part_lengths(
        self, track_length: int, area: Rect, state: ScrollbarState
    ) -> tuple[int, int, int]:
        viewport = float(self._viewport_length(area, state))
        max_position = float(max(state.content_length - 1, 0))
        start = min(max(float(state.position), 0.0), max_position)
        max_viewport_position = max_position + viewport
        end = start + viewport
        thumb_start = _round_half_away(start * track_length / max_viewport_position)
        thumb_end = _round_half_away(end * track_length / max_viewport_position)
        thumb_start = min(max(thumb_start, 0), track_length - 1)
        thumb_end = min(max(thumb_end, 0), track_length)
        thumb_length = max(thumb_end - thumb_start, 1)
        track_end = max(track_length - (thumb_start + thumb_length), 0)
        return thumb_start, thumb_length, track_end

    def _bar_area(self, area: Rect) -> Rect:
        if area.is_empty():
            raise ValueError("Scrollbar area is empty")
        match self.orientation:
            case ScrollbarOrientation.VERTICAL_LEFT:
                return Rect(area.left(), area.y, 1, area.height)
            case ScrollbarOrientation.VERTICAL_RIGHT:
                return Rect(area.right() - 1, area.y, 1, area.height)
            case ScrollbarOrientation.HORIZONTAL_TOP:
                return Rect(area.x, area.top(), area.width, 1)
            case _:
                return Rect(area.x, area.bottom() - 1, area.width, 1)

    def render(self, area: Rect, buf: Buffer, state: ScrollbarState) -> None:
        thumb, track, begin, end = self._symbols()
        track_length = self._track_length(area, begin, end)
        if state.content_length == 0 or track_length == 0:
            return
        start_len, thumb_len, end_len = self._part_lengths(track_length, area, state)
        parts = (
            ([begin] if begin else [])
            + [track] * start_len
            + [thumb] * thumb_len
            + [track] * end_len
            + ([end] if end else [])
        )
        bar = self._bar_area(area)
        positions = (
            (x, y) for x in range(bar.left(), bar.right()) for y in range(bar.top(), bar.bottom())
        )
        for (x, y), symbol in zip(positions, parts):
            buf.set_string(x, y, symbol, self.style)
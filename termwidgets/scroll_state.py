"""Scroll offset and page bookkeeping for a scroll view."""

from __future__ import annotations

from dataclasses import dataclass

from termwidgets.geometry import Position, Size

_U16_MAX = 0xFFFF


def _clamp(value: int) -> int:
    return min(max(value, 0), _U16_MAX)


@dataclass
class ScrollViewState:
    """The offset into a scroll view, plus sizes learned on the last render."""

    offset: Position = Position(0, 0)
    size: Size | None = None
    page_size: Size | None = None

    @classmethod
    def with_offset(cls, offset: Position | tuple[int, int]) -> ScrollViewState:
        return cls(offset=Position(*offset))

    def _move(self, dx: int = 0, dy: int = 0) -> None:
        self.offset = Position(_clamp(self.offset.x + dx), _clamp(self.offset.y + dy))

    def scroll_up(self) -> None:
        self._move(dy=-1)

    def scroll_down(self) -> None:
        self._move(dy=1)

    def scroll_page_down(self) -> None:
        """Move down a page, leaving one row of overlap."""
        page = self.page_size.height if self.page_size is not None else 1
        self.offset = self.offset._replace(y=_clamp(_clamp(self.offset.y + page) - 1))

    def scroll_page_up(self) -> None:
        """Move up a page, leaving one row of overlap."""
        page = self.page_size.height if self.page_size is not None else 1
        self.offset = self.offset._replace(y=_clamp(_clamp(self.offset.y + 1) - page))

    def scroll_left(self) -> None:
        self._move(dx=-1)

    def scroll_right(self) -> None:
        self._move(dx=1)

    def scroll_to_top(self) -> None:
        self.offset = Position(0, 0)

    def scroll_to_bottom(self) -> None:
        # Rendering clamps the offset, so an unknown size may use the largest value.
        bottom = _clamp(self.size.height - 1) if self.size is not None else _U16_MAX
        self.offset = self.offset._replace(y=bottom)
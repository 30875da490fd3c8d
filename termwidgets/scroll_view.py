"""A widget that shows a scrollable window onto a larger buffer."""

from __future__ import annotations

from dataclasses import replace
from enum import Enum
from typing import Any

from termwidgets.buffer import Buffer
from termwidgets.geometry import Position, Rect, Size
from termwidgets.scroll_state import ScrollViewState
from termwidgets.widgets import Scrollbar, ScrollbarOrientation, ScrollbarState


class ScrollbarVisibility(Enum):
    """When a scrollbar is drawn."""

    AUTOMATIC = "automatic"
    ALWAYS = "always"
    NEVER = "never"


def _visible_scrollbars(
    horizontal: ScrollbarVisibility,
    vertical: ScrollbarVisibility,
    horizontal_space: int,
    vertical_space: int,
) -> tuple[bool, bool]:
    """Whether to draw the (horizontal, vertical) scrollbars.

    A space is the area's extent minus the content's: negative means the content does not fit.
    """
    v = ScrollbarVisibility
    match (horizontal, vertical):
        case (v.ALWAYS, v.ALWAYS):
            return True, True
        case (v.NEVER, v.NEVER):
            return False, False
        case (v.ALWAYS, v.NEVER):
            return True, False
        case (v.NEVER, v.ALWAYS):
            return False, True
        case (v.AUTOMATIC, v.NEVER):
            return horizontal_space < 0, False
        case (v.NEVER, v.AUTOMATIC):
            return False, vertical_space < 0
        # An exact fit still needs a bar when the other bar steals a line.
        case (v.ALWAYS, v.AUTOMATIC):
            return True, vertical_space <= 0
        case (v.AUTOMATIC, v.ALWAYS):
            return horizontal_space <= 0, True
    if horizontal_space >= 0 and vertical_space >= 0:
        return False, False
    if horizontal_space < 0 and vertical_space < 0:
        return True, True
    if horizontal_space > 0 and vertical_space < 0:
        return False, True
    if horizontal_space < 0 and vertical_space > 0:
        return True, False
    # One fits exactly and the other does not; the other's bar makes the first overflow.
    return True, True


class ScrollView:
    """Content drawn into its own buffer of ``size``, shown through a scrollable window.

    The content buffer always starts at (0, 0).
    """

    def __init__(self, size: Size | tuple[int, int]) -> None:
        self.size = Size(*size)
        self.buf = Buffer.empty(Rect.from_size(self.size))
        self._vertical_visibility = ScrollbarVisibility.AUTOMATIC
        self._horizontal_visibility = ScrollbarVisibility.AUTOMATIC

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ScrollView):
            return NotImplemented
        return (
            self.size,
            self.buf,
            self._vertical_visibility,
            self._horizontal_visibility,
        ) == (
            other.size,
            other.buf,
            other._vertical_visibility,
            other._horizontal_visibility,
        )

    def __repr__(self) -> str:
        return (
            f"ScrollView(size={self.size!r}, vertical={self._vertical_visibility.name}, "
            f"horizontal={self._horizontal_visibility.name})"
        )

    def area(self) -> Rect:
        """The content area that can be scrolled."""
        return self.buf.area

    def vertical_scrollbar_visibility(self, visibility: ScrollbarVisibility) -> ScrollView:
        self._vertical_visibility = visibility
        return self

    def horizontal_scrollbar_visibility(self, visibility: ScrollbarVisibility) -> ScrollView:
        self._horizontal_visibility = visibility
        return self

    def scrollbars_visibility(self, visibility: ScrollbarVisibility) -> ScrollView:
        self._vertical_visibility = visibility
        self._horizontal_visibility = visibility
        return self

    def render_widget(self, widget: Any, area: Rect) -> None:
        """Draw ``widget`` into the content buffer at ``area``."""
        widget.render(area, self.buf)

    def render(self, area: Rect, buf: Buffer, state: ScrollViewState) -> None:
        """Draw the visible part of the content, and any scrollbars, into ``buf`` at ``area``."""
        x, y = state.offset
        max_x = max(self.buf.area.width - max(area.width - 1, 0), 0)
        max_y = max(self.buf.area.height - max(area.height - 1, 0), 0)
        state.offset = Position(min(x, max_x), min(y, max_y))
        state.size = self.size
        state.page_size = area.as_size()
        visible = self._render_scrollbars(area, buf, state).intersection(self.buf.area)
        self._render_visible_area(area, buf, visible)

    def _render_scrollbars(self, area: Rect, buf: Buffer, state: ScrollViewState) -> Rect:
        """Draw the needed scrollbars; return the remaining area in content coordinates."""
        horizontal_space = area.width - self.size.width
        vertical_space = area.height - self.size.height
        if horizontal_space > 0:
            state.offset = state.offset._replace(x=0)
        if vertical_space > 0:
            state.offset = state.offset._replace(y=0)

        show_horizontal, show_vertical = _visible_scrollbars(
            self._horizontal_visibility,
            self._vertical_visibility,
            horizontal_space,
            vertical_space,
        )
        new_width, new_height = area.width, area.height
        if show_horizontal:
            width = max(area.width - int(show_vertical), 0)
            self._render_horizontal_scrollbar(replace(area, width=width), buf, state)
            new_height = max(area.height - 1, 0)
        if show_vertical:
            height = max(area.height - int(show_horizontal), 0)
            self._render_vertical_scrollbar(replace(area, height=height), buf, state)
            new_width = max(area.width - 1, 0)
        return Rect(state.offset.x, state.offset.y, new_width, new_height)

    def _render_vertical_scrollbar(
        self, area: Rect, buf: Buffer, state: ScrollViewState
    ) -> None:
        content = max(self.size.height - area.height, 0)
        bar_state = ScrollbarState(content_length=content, position=state.offset.y)
        Scrollbar(ScrollbarOrientation.VERTICAL_RIGHT).render(area, buf, bar_state)

    def _render_horizontal_scrollbar(
        self, area: Rect, buf: Buffer, state: ScrollViewState
    ) -> None:
        content = max(self.size.width - area.width, 0)
        bar_state = ScrollbarState(content_length=content, position=state.offset.x)
        Scrollbar(ScrollbarOrientation.HORIZONTAL_BOTTOM).render(area, buf, bar_state)

    def _render_visible_area(self, area: Rect, buf: Buffer, visible: Rect) -> None:
        for src_row, dst_row in zip(visible.rows(), area.rows()):
            for src, dst in zip(src_row.columns(), dst_row.columns()):
                buf[dst] = replace(self.buf[src])
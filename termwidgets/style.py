"""Colours, text modifiers and styles for terminal cells."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum, IntFlag


class Color(Enum):
    """Named terminal colours."""

    RESET = "reset"
    BLACK = "black"
    RED = "red"
    GREEN = "green"
    YELLOW = "yellow"
    BLUE = "blue"
    MAGENTA = "magenta"
    CYAN = "cyan"
    GRAY = "gray"
    DARK_GRAY = "dark_gray"
    LIGHT_RED = "light_red"
    LIGHT_GREEN = "light_green"
    LIGHT_YELLOW = "light_yellow"
    LIGHT_BLUE = "light_blue"
    LIGHT_MAGENTA = "light_magenta"
    LIGHT_CYAN = "light_cyan"
    WHITE = "white"


class Modifier(IntFlag):
    """Text attributes that can be combined."""

    BOLD = 1
    DIM = 2
    ITALIC = 4
    UNDERLINED = 8
    SLOW_BLINK = 16
    RAPID_BLINK = 32
    REVERSED = 64
    HIDDEN = 128
    CROSSED_OUT = 256


@dataclass(frozen=True)
class Style:
    """A style change: colours to set and modifiers to add or remove.

    ``None`` colours leave whatever is underneath untouched.
    """

    fg: Color | None = None
    bg: Color | None = None
    added: Modifier = Modifier(0)
    removed: Modifier = Modifier(0)

    def patch(self, other: Style) -> Style:
        """Apply ``other`` on top of this style."""
        return Style(
            fg=other.fg if other.fg is not None else self.fg,
            bg=other.bg if other.bg is not None else self.bg,
            added=(self.added & ~other.removed) | other.added,
            removed=(self.removed & ~other.added) | other.removed,
        )

    def fg_color(self, color: Color) -> Style:
        return replace(self, fg=color)

    def bg_color(self, color: Color) -> Style:
        return replace(self, bg=color)

    def add_modifier(self, modifier: Modifier) -> Style:
        return replace(self, added=self.added | modifier, removed=self.removed & ~modifier)
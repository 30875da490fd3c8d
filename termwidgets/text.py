"""Styled spans and lines of text, with character-based wrapping."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Iterator

from wcwidth import wcwidth

from termwidgets.style import Color, Modifier, Style


def _display_width(text: str) -> int:
    """Terminal column width of ``text``; control characters count as zero."""
    return sum(w for w in map(wcwidth, text) if w > 0)


@dataclass(frozen=True)
class Span:
    """A piece of text with a single style."""

    content: str = ""
    style: Style = field(default_factory=Style)

    @classmethod
    def raw(cls, content: str) -> Span:
        return cls(str(content))

    def width(self) -> int:
        return _display_width(self.content)

    def styled(self, style: Style) -> Span:
        """A copy with ``style`` patched onto the current style."""
        return replace(self, style=self.style.patch(style))

    def cyan(self) -> Span:
        return self.styled(Style(fg=Color.CYAN))

    def red(self) -> Span:
        return self.styled(Style(fg=Color.RED))

    def green(self) -> Span:
        return self.styled(Style(fg=Color.GREEN))

    def bold(self) -> Span:
        return self.styled(Style(added=Modifier.BOLD))

    def dim(self) -> Span:
        return self.styled(Style(added=Modifier.DIM))

    def split_at(self, mid: int) -> tuple[Span, Span]:
        """Split the content at character index ``mid``, keeping the style on both halves."""
        return (
            Span(self.content[:mid], self.style),
            Span(self.content[mid:], self.style),
        )


@dataclass(frozen=True)
class Line:
    """A sequence of spans shown on one row."""

    spans: tuple[Span, ...] = ()
    alignment: str | None = None

    @classmethod
    def from_spans(cls, *args: Span | str) -> Line:
        """Build a line from spans; plain strings become unstyled spans."""
        return cls(tuple(arg if isinstance(arg, Span) else Span.raw(arg) for arg in args))

    def width(self) -> int:
        return sum(span.width() for span in self.spans)

    def split_at(self, mid: int) -> tuple[Line, Line]:
        """Split into two lines so that the first holds ``mid`` columns."""
        first: list[Span] = []
        second: list[Span] = []
        first_width = 0
        for span in self.spans:
            span_width = span.width()
            if first_width + span_width <= mid:
                first.append(span)
                first_width += span_width
            elif first_width < mid:
                head, tail = span.split_at(mid - first_width)
                first.append(head)
                first_width += head.width()
                second.append(tail)
            else:
                second.append(span)
        return Line(tuple(first), self.alignment), Line(tuple(second), self.alignment)


def wrap_line(line: Line, width: int) -> Iterator[Line]:
    """Wrap ``line`` into lines of at most ``width`` columns, character by character.

    With ``width`` of zero and a non-empty line the generator never ends; take only
    as many lines as there is room for.
    """
    while line.width() > 0:
        if line.width() > width:
            first, line = line.split_at(width)
            yield first
        else:
            yield line
            return
"""Positions, sizes and rectangles on a terminal cell grid."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, NamedTuple


class Position(NamedTuple):
    """A column/row coordinate."""

    x: int = 0
    y: int = 0


class Size(NamedTuple):
    """A width and height in cells."""

    width: int = 0
    height: int = 0


@dataclass(frozen=True)
class Rect:
    """A rectangular area of cells."""

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0

    @classmethod
    def from_size(cls, size: Size) -> Rect:
        """A rectangle at the origin with the given size."""
        return cls(0, 0, size.width, size.height)

    def area(self) -> int:
        return self.width * self.height

    def is_empty(self) -> bool:
        return self.width == 0 or self.height == 0

    def left(self) -> int:
        return self.x

    def right(self) -> int:
        return self.x + self.width

    def top(self) -> int:
        return self.y

    def bottom(self) -> int:
        return self.y + self.height

    def intersection(self, other: Rect) -> Rect:
        """The overlapping area of two rectangles (empty if they do not overlap)."""
        x1 = max(self.x, other.x)
        y1 = max(self.y, other.y)
        x2 = min(self.right(), other.right())
        y2 = min(self.bottom(), other.bottom())
        return Rect(x1, y1, max(x2 - x1, 0), max(y2 - y1, 0))

    def rows(self) -> Iterator[Rect]:
        """Each row of the rectangle as a rectangle of height one."""
        for y in range(self.top(), self.bottom()):
            yield Rect(self.x, y, self.width, 1)

    def columns(self) -> Iterator[Rect]:
        """Each column of the rectangle as a rectangle of width one."""
        for x in range(self.left(), self.right()):
            yield Rect(x, self.y, 1, self.height)

    def positions(self) -> Iterator[Position]:
        """Every cell position, row by row."""
        for y in range(self.top(), self.bottom()):
            for x in range(self.left(), self.right()):
                yield Position(x, y)

    def as_size(self) -> Size:
        return Size(self.width, self.height)
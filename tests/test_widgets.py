import pytest

from termwidgets.buffer import Buffer
from termwidgets.geometry import Rect
from termwidgets.style import Color
from termwidgets.text import Line, Span
from termwidgets.widgets import (
    Block,
    Borders,
    Paragraph,
    Scrollbar,
    ScrollbarOrientation,
    ScrollbarState,
)


def test_borders_all_renders_every_side():
    all_buf = Buffer.empty(Rect(0, 0, 5, 4))
    Block(Borders.ALL).render(all_buf.area, all_buf)
    sides_buf = Buffer.empty(Rect(0, 0, 5, 4))
    sides = Borders.TOP | Borders.RIGHT | Borders.BOTTOM | Borders.LEFT
    Block(sides).render(sides_buf.area, sides_buf)
    assert all_buf == sides_buf
    assert all_buf.text_lines() == ["┌───┐", "│   │", "│   │", "└───┘"]


def test_block_inner_without_borders_is_area():
    area = Rect(2, 3, 10, 5)
    assert Block().inner(area) == area


def test_block_inner_all_borders():
    area = Rect(2, 3, 10, 5)
    assert Block(Borders.ALL).inner(area) == Rect(
        area.x + 1, area.y + 1, area.width - 2, area.height - 2
    )


def test_block_inner_title_takes_top_row():
    area = Rect(2, 3, 10, 5)
    assert Block(title="T").inner(area) == Rect(area.x, area.y + 1, area.width, area.height - 1)


def test_block_inner_of_tiny_area_is_empty():
    inner = Block(Borders.ALL).inner(Rect(0, 0, 1, 1))
    assert inner.is_empty()
    assert inner.width >= 0 and inner.height >= 0


def test_block_render_with_title():
    buf = Buffer.empty(Rect(0, 0, 15, 3))
    Block(Borders.ALL, title="Title").render(buf.area, buf)
    lines = buf.text_lines()
    assert lines[0] == "┌Title────────┐"
    assert lines[2] == "└─────────────┘"
    assert lines[1][0] == "│" and lines[1][-1] == "│"


def test_block_render_right_and_bottom():
    buf = Buffer.empty(Rect(0, 0, 4, 3))
    Block(Borders.RIGHT | Borders.BOTTOM).render(buf.area, buf)
    assert buf.text_lines() == ["   │", "   │", "───┘"]


def test_paragraph_clips_to_width():
    text = "hello"
    buf = Buffer.empty(Rect(0, 0, 3, 1))
    Paragraph(text).render(buf.area, buf)
    assert buf.text_lines() == [text[:3]]


def test_paragraph_clips_to_height():
    buf = Buffer.empty(Rect(0, 0, 1, 2))
    Paragraph("a\nb\nc").render(buf.area, buf)
    assert buf.text_lines() == ["a", "b"]


def test_paragraph_accepts_lines():
    lines = [Line.from_spans("ab"), "cd"]
    buf = Buffer.empty(Rect(0, 0, 2, 2))
    Paragraph(lines).render(buf.area, buf)
    assert buf.text_lines() == ["ab", "cd"]


def test_paragraph_keeps_span_style():
    buf = Buffer.empty(Rect(0, 0, 1, 1))
    Paragraph(Line.from_spans(Span("x").red())).render(buf.area, buf)
    assert buf[(0, 0)].symbol == "x"
    assert buf[(0, 0)].fg == Color.RED


def test_paragraph_inside_block():
    buf = Buffer.empty(Rect(0, 0, 5, 3))
    Paragraph("hi", block=Block(Borders.ALL)).render(buf.area, buf)
    assert buf.text_lines()[1] == "│hi │"


def test_orientation_is_vertical():
    assert ScrollbarOrientation.VERTICAL_RIGHT.is_vertical()
    assert ScrollbarOrientation.VERTICAL_LEFT.is_vertical()
    assert not ScrollbarOrientation.HORIZONTAL_BOTTOM.is_vertical()
    assert not ScrollbarOrientation.HORIZONTAL_TOP.is_vertical()


def test_horizontal_scrollbar_at_start():
    buf = Buffer.empty(Rect(0, 0, 5, 1))
    Scrollbar(ScrollbarOrientation.HORIZONTAL_BOTTOM).render(
        buf.area, buf, ScrollbarState(content_length=5, position=0)
    )
    assert buf.text_lines() == ["◄██═►"]


def test_vertical_scrollbar_at_start():
    buf = Buffer.empty(Rect(0, 0, 1, 5))
    Scrollbar(ScrollbarOrientation.VERTICAL_RIGHT).render(
        buf.area, buf, ScrollbarState(content_length=5, position=0)
    )
    assert buf.text_lines() == ["▲", "█", "█", "║", "▼"]


def test_scrollbar_full_thumb_for_small_content():
    buf = Buffer.empty(Rect(0, 0, 9, 1))
    Scrollbar(ScrollbarOrientation.HORIZONTAL_BOTTOM).render(
        buf.area, buf, ScrollbarState(content_length=1)
    )
    assert buf.text_lines() == ["◄███████►"]


def test_scrollbar_without_content_draws_nothing():
    buf = Buffer.empty(Rect(0, 0, 5, 1))
    Scrollbar(ScrollbarOrientation.HORIZONTAL_BOTTOM).render(buf.area, buf, ScrollbarState())
    assert buf == Buffer.empty(Rect(0, 0, 5, 1))


def test_scrollbar_empty_area_raises():
    buf = Buffer.empty(Rect(0, 0, 10, 10))
    with pytest.raises(ValueError, match="Scrollbar area is empty"):
        Scrollbar(ScrollbarOrientation.VERTICAL_RIGHT).render(
            Rect(0, 0, 0, 10), buf, ScrollbarState(content_length=3)
        )


@pytest.mark.parametrize("position", range(10))
def test_scrollbar_thumb_always_visible(position):
    buf = Buffer.empty(Rect(0, 0, 8, 1))
    Scrollbar(ScrollbarOrientation.HORIZONTAL_TOP).render(
        buf.area, buf, ScrollbarState(content_length=10, position=position)
    )
    line = buf.text_lines()[0]
    assert line[0] == "◄" and line[-1] == "►"
    assert "█" in line
    assert set(line[1:-1]) <= {"█", "═"}


def test_scrollbar_thumb_reaches_end_at_last_position():
    buf = Buffer.empty(Rect(0, 0, 8, 1))
    Scrollbar(ScrollbarOrientation.HORIZONTAL_TOP).render(
        buf.area, buf, ScrollbarState(content_length=10, position=9)
    )
    assert buf.text_lines()[0][-2] == "█"


def test_scrollbar_custom_symbols_without_arrows():
    buf = Buffer.empty(Rect(0, 0, 6, 1))
    Scrollbar(
        ScrollbarOrientation.HORIZONTAL_BOTTOM,
        thumb_symbol="#",
        track_symbol="-",
        show_arrows=False,
    ).render(buf.area, buf, ScrollbarState(content_length=6, position=0))
    line = buf.text_lines()[0]
    assert line[0] == "#"
    assert set(line) <= {"#", "-"}
    assert len(line) == 6
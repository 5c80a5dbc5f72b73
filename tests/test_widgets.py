"""Tests for leaf widgets: content, clipping and small regions."""

import pytest
from rich.style import Style

from termdash.app.widgets import Breadcrumb, ListView, Modal, Paragraph, Rule, StatusBar, TabBar, Table, fit
from termdash.core.buffer import CellBuffer
from termdash.core.geometry import Region


def _paint(widget, width=20, height=5, region=None):
    buf = CellBuffer(width, height)
    widget.paint(region or buf.region, buf)
    return buf


def test_fit_truncates_with_ellipsis():
    assert fit("hello", 10) == "hello"
    assert fit("hello world", 6) == "hello…"
    assert fit("hello", 1) == "h"
    assert fit("hello", 0) == ""


def test_paragraph_scroll_keeps_last_page_full():
    p = Paragraph(tuple(f"line {i}" for i in range(10)), offset=100)
    buf = _paint(p, height=3)
    assert [buf.row_text(y).rstrip() for y in range(3)] == ["line 7", "line 8", "line 9"]


def test_list_view_keeps_selection_visible():
    view = ListView(tuple(f"row {i}" for i in range(10)), selected=7, highlight=Style(reverse=True))
    buf = _paint(view, height=3)
    assert buf.row_text(2).startswith("row 7")
    assert buf.get(0, 2).style == Style(reverse=True)


def test_list_view_empty_text():
    buf = _paint(ListView((), empty_text="Nothing here"))
    assert "Nothing here" in buf.row_text(0)


def test_tab_bar_shows_all_labels():
    buf = _paint(TabBar(("Feed", "Stats", "Settings"), active=1), width=40, height=1)
    text = buf.row_text(0)
    assert "Feed" in text and "Stats" in text and "Settings" in text


def test_table_aligns_columns():
    table = Table(("name", "n"), (("alpha", "1"), ("b", "22")))
    buf = _paint(table, width=20, height=3)
    assert buf.row_text(0).startswith("name   n")
    assert buf.row_text(1).startswith("alpha  1")
    assert buf.row_text(2).startswith("b      22")


def test_status_bar_left_and_right():
    buf = _paint(StatusBar("ready", "refresh in 5s"), width=40, height=1)
    text = buf.row_text(0)
    assert text.startswith(" ready")
    assert text.rstrip().endswith("refresh in 5s")


def test_modal_is_centered_and_bordered():
    buf = _paint(Modal("Keys", ("a", "b")), width=30, height=10)
    rows = buf.to_text().splitlines()
    top = next(y for y, row in enumerate(rows) if "╭" in row)
    assert "Keys" in rows[top]
    assert "╰" in rows[top + 3]


def test_breadcrumb_joins_the_trail():
    buf = _paint(Breadcrumb(("Feed", "Entry e1"), hint="(esc)"), width=30, height=1)
    assert buf.row_text(0).rstrip() == " Feed ▸ Entry e1  (esc)"


def test_breadcrumb_clips_at_the_right_edge():
    buf = _paint(Breadcrumb(("Feed", "Entry e1", "Entry e2")), width=12, height=1)
    assert buf.row_text(0) == " Feed ▸ Entr"


@pytest.mark.parametrize("widget", [
    Paragraph(("x" * 100,) * 5),
    Rule(),
    TabBar(("Feed", "Stats", "Settings"), active=0),
    ListView(tuple("r" * 50 for _ in range(20)), selected=19),
    Table(("a", "b"), (("1" * 30, "2" * 30),)),
    StatusBar("x" * 60, "y" * 60),
    Modal("title", ("z" * 80,) * 30),
    Breadcrumb(("Feed", "Entry " + "e" * 40), hint="(esc)"),
])
@pytest.mark.parametrize("region", [Region(5, 2, 10, 3), Region(0, 0, 1, 1), Region(3, 3, 0, 0)])
def test_widgets_stay_inside_their_region(widget, region):
    buf = CellBuffer(20, 8)
    widget.paint(region, buf)
    for y in range(buf.height):
        for x in range(buf.width):
            if not region.contains(x, y):
                assert buf.get(x, y).symbol == " ", (type(widget).__name__, x, y)

"""Tests for the dashboard views, rendered into a buffer."""

from dataclasses import replace

from termdash.app.action import EntriesLoaded, RefreshData, ToggleHelp
from termdash.app.components.root import build_view
from termdash.app.components.tabs import feed_row, status_rows, summarize
from termdash.app.model import Entry
from termdash.app.reducer import reduce
from termdash.app.state import AppState
from termdash.app.types import Tab
from termdash.core.buffer import CellBuffer
from termdash.core.element import Overlay, trees_equal
from termdash.core.renderer import Renderer
from termdash.io.settings import Config
from tests.harness.builders import make_detail, make_entries, make_state, with_panel


def _screen(state, width=80, height=24) -> str:
    buf = CellBuffer(width, height)
    Renderer().render(build_view(state), buf.region, buf)
    return buf.to_text()


def test_build_is_pure():
    state = make_state(entries=make_entries(4), feed_selected=1)
    assert trees_equal(build_view(state), build_view(state))
    assert len(state.components) == 0


def test_layout_has_tab_bar_content_and_status():
    lines = _screen(make_state(entries=make_entries(3))).splitlines()
    assert "Feed" in lines[0] and "Settings" in lines[0]
    assert "Entries (3)" in lines[1]
    assert "Press ? for help" in lines[-1]


def test_feed_lists_entries():
    text = _screen(make_state(entries=make_entries(3)))
    for i in range(3):
        assert f"Entry {i}" in text


def test_empty_feed_says_so():
    assert "Nothing loaded yet" in _screen(AppState())
    state, _ = reduce(AppState(), RefreshData())
    assert "Loading" in _screen(state)


def test_load_error_shows_in_header_and_status():
    state, _ = reduce(AppState(), RefreshData())
    state, _ = reduce(state, EntriesLoaded(1, error="network failure"))
    lines = _screen(state).splitlines()
    assert "network failure" in lines[1]
    assert "network failure" in lines[-1]


def test_help_is_an_overlay():
    state, _ = reduce(AppState(), ToggleHelp())
    assert isinstance(build_view(state), Overlay)
    assert "Keys" in _screen(state)
    assert not isinstance(build_view(AppState()), Overlay)


def test_detail_panel_replaces_tab_content():
    state = with_panel(make_state(entries=make_entries(2), details={"e1": make_detail("e1")}), "e1")
    text = _screen(state)
    assert "Entry e1" in text
    assert "note 0" in text


def test_detail_panel_while_loading():
    state = with_panel(make_state(entries=make_entries(2)), "e1")
    assert "No detail for e1" in _screen(state)


def test_settings_tab_shows_values():
    state = make_state(tab=Tab.SETTINGS, config=Config(refresh_interval=45, compact_list=True))
    text = _screen(state)
    assert "< 45 >" in text
    assert "[x]" in text


def test_stats_tab_summarizes():
    entries = make_entries(4) + (Entry(id="s", title="Stale one", status="stale"),)
    text = _screen(make_state(entries=entries, tab=Tab.STATS))
    assert "Entries: 5" in text
    assert "stale" in text


def test_feed_row_markers():
    stale = Entry(id="x", title="Old", status="stale", value=None)
    assert feed_row(stale, Config()).startswith("!")
    assert feed_row(stale, Config(show_stale=False)).startswith(" ")
    assert feed_row(stale, Config(compact_list=True)) == "! Old"


def test_summaries():
    assert summarize(()) == ("Entries: 0", "Values: none")
    rows = status_rows(make_entries(2) + (Entry(id="z", title="z", status="warn"),))
    assert rows[0] == ("ok", "2", "67%")
    assert rows[1] == ("warn", "1", "33%")


def test_tiny_terminal_does_not_raise():
    state = replace(make_state(entries=make_entries(3)), navigation=replace(AppState().navigation, help_open=True))
    assert _screen(state, width=3, height=2)


def test_detail_header_is_a_breadcrumb_of_the_panel_stack():
    details = {"e0": make_detail("e0"), "e1": make_detail("e1")}
    state = with_panel(with_panel(make_state(entries=make_entries(2), details=details), "e0"), "e1")
    lines = _screen(state).splitlines()
    assert lines[1].startswith(" Feed ▸ Entry e0 ▸ Entry e1")
    assert "(esc to close)" in lines[1]
    assert set(lines[2]) == {"─"}

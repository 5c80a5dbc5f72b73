"""Textual host tests: keys in, frames out."""

import pytest

from termdash.app.action import Tick
from termdash.app.provider import FixtureProvider
from termdash.app.state import ENTRIES_KEY
from termdash.app.types import EntryPanel, Tab
from termdash.tui.host import BufferView
from tests.harness.app_runner import run_app, settle

pytestmark = pytest.mark.textual


async def test_initial_load_fills_the_feed():
    async with run_app(provider=FixtureProvider(count=5)) as (pilot, app):
        await settle(pilot, app)
        state = app.runtime.state
        assert len(state.data.entries) == 5
        assert not state.data.is_loading(ENTRIES_KEY)
        assert "Entries (5)" in app.buffer.to_text()


async def test_buffer_tracks_terminal_size():
    async with run_app(size=(60, 20)) as (pilot, app):
        await pilot.pause()
        assert (app.buffer.width, app.buffer.height) == (60, 20)
        assert app.runtime.state.system.width == 60


async def test_keys_navigate_and_open_an_entry():
    async with run_app(provider=FixtureProvider(count=5)) as (pilot, app):
        await settle(pilot, app)
        await pilot.press("down", "j", "j", "enter")
        await settle(pilot, app)
        nav = app.runtime.state.navigation
        assert nav.top_panel == EntryPanel("e001")
        assert "e001" in app.runtime.state.data.details
        await pilot.press("escape")
        await pilot.pause()
        assert app.runtime.state.navigation.panels == ()


async def test_tab_keys():
    async with run_app(refresh_on_start=False) as (pilot, app):
        await pilot.press("right")
        await pilot.pause()
        assert app.runtime.state.navigation.tab is Tab.STATS
        await pilot.press("3")
        await pilot.pause()
        assert app.runtime.state.navigation.tab is Tab.SETTINGS


async def test_help_overlay_toggles():
    async with run_app(refresh_on_start=False) as (pilot, app):
        await pilot.press("question_mark")
        await pilot.pause()
        assert app.runtime.state.navigation.help_open
        assert "Keys" in app.buffer.to_text()
        await pilot.press("escape")
        await pilot.pause()
        assert not app.runtime.state.navigation.help_open


async def test_settings_change_is_saved():
    async with run_app(refresh_on_start=False) as (pilot, app):
        await pilot.press("3", "enter", "down", "space")
        await settle(pilot, app)
        assert app.runtime.state.system.config.show_stale is False
        assert app.saved_configs[-1].show_stale is False
        assert app.runtime.state.system.status == "Settings saved"


async def test_unchanged_frame_writes_nothing():
    async with run_app(refresh_on_start=False) as (pilot, app):
        await pilot.pause()
        app.runtime.dispatch(Tick(0.0))
        app.pump()
        await settle(pilot, app)
        app._dirty = True
        app.pump()
        assert app.last_stats.writes == 0


async def test_render_line_serves_buffer_rows():
    async with run_app(refresh_on_start=False) as (pilot, app):
        await pilot.pause()
        view = app.query_one(BufferView)
        assert view.render_line(0).text == app.buffer.row_text(0)


async def test_quit_key_exits():
    async with run_app(refresh_on_start=False) as (pilot, app):
        await pilot.press("q")
        assert app.runtime.state.system.should_quit


async def test_first_tick_after_startup_does_not_refetch():
    now = [5000.0]
    async with run_app(provider=FixtureProvider(count=3), clock=lambda: now[0]) as (pilot, app):
        await settle(pilot, app)
        assert app.runtime.state.system.last_refresh == 5000.0
        now[0] += 1.0
        app.tick()
        await settle(pilot, app)
        data = app.runtime.state.data
        assert data.next_request_id == 2
        assert not data.is_loading(ENTRIES_KEY)

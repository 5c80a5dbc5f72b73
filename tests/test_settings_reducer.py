"""Tests for Settings tab edits."""

from dataclasses import replace

from termdash.app.action import AdjustSetting, ConfigSaved, ToggleSetting
from termdash.app.effects import SaveConfig
from termdash.app.reducer import reduce
from termdash.app.state import AppState
from termdash.core.effect import NONE, Async
from termdash.io.settings import Config
from tests.harness.builders import make_state


def test_toggle_flips_and_saves():
    state, effect = reduce(AppState(), ToggleSetting("compact_list"))
    assert state.system.config.compact_list is True
    assert effect == Async(SaveConfig(state.system.config))


def test_adjust_steps_and_clamps():
    state = make_state(config=Config(refresh_interval=10))
    state, effect = reduce(state, AdjustSetting("refresh_interval", -1))
    assert state.system.config.refresh_interval == 5
    assert effect == Async(SaveConfig(state.system.config))
    same, effect = reduce(state, AdjustSetting("refresh_interval", -1))
    assert same == state
    assert effect == NONE


def test_adjust_upper_bound():
    state = make_state(config=Config(refresh_interval=3598))
    state, _ = reduce(state, AdjustSetting("refresh_interval", 10))
    assert state.system.config.refresh_interval == 3600


def test_wrong_kind_or_unknown_key_is_ignored():
    state = AppState()
    assert reduce(state, ToggleSetting("refresh_interval")) == (state, NONE)
    assert reduce(state, AdjustSetting("show_stale", 1)) == (state, NONE)
    assert reduce(state, ToggleSetting("nope")) == (state, NONE)


def test_config_saved_reports_in_status():
    state, _ = reduce(AppState(), ConfigSaved(path="/x/settings.json"))
    assert "/x/settings.json" in state.system.status
    assert not state.system.status_is_error
    state, _ = reduce(state, ConfigSaved(error="read-only file system"))
    assert state.system.status_is_error
    assert "read-only" in state.system.status


def test_toggle_preserves_other_sections():
    state = make_state()
    state = replace(state, ui=replace(state.ui, settings_selected=2))
    new_state, _ = reduce(state, ToggleSetting("show_stale"))
    assert new_state.ui is state.ui
    assert new_state.navigation is state.navigation
    assert new_state.data is state.data

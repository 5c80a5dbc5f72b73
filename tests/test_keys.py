"""Tests for key -> action mapping per input mode.

Verifies that MODE_KEYMAP routes keys per mode and that the mode follows
navigation state.
"""

import pytest

from termdash.app.action import (
    ActivateSelection,
    AdjustSetting,
    EnterContentFocus,
    NavigateTab,
    NavigateTabLeft,
    NavigateTabRight,
    NavigateUp,
    Quit,
    RefreshData,
    SelectNext,
    SelectPrevious,
    ToggleHelp,
)
from termdash.app.keys import MODE_KEYMAP, InputMode, input_mode, key_to_action
from termdash.app.reducer import reduce
from termdash.app.state import AppState
from termdash.app.types import EntryPanel, Tab
from tests.harness.builders import make_state


class TestInputMode:
    def test_modes_follow_navigation(self):
        assert input_mode(AppState()) is InputMode.TAB_BAR
        assert input_mode(make_state(focused=True)) is InputMode.CONTENT
        assert input_mode(make_state(panels=(EntryPanel("e0"),))) is InputMode.PANEL
        state, _ = reduce(make_state(panels=(EntryPanel("e0"),)), ToggleHelp())
        assert input_mode(state) is InputMode.HELP

    def test_every_mode_has_a_keymap(self):
        assert set(MODE_KEYMAP) == set(InputMode)


class TestTabBarKeys:
    @pytest.mark.parametrize("key,expected", [
        ("left", NavigateTabLeft()),
        ("right", NavigateTabRight()),
        ("down", EnterContentFocus()),
        ("enter", EnterContentFocus()),
        ("2", NavigateTab(Tab.STATS)),
        ("r", RefreshData()),
        ("q", Quit()),
        ("question_mark", ToggleHelp()),
        ("?", ToggleHelp()),
    ])
    def test_bindings(self, key, expected):
        assert key_to_action(key, AppState()) == expected

    def test_unbound_key(self):
        assert key_to_action("z", AppState()) is None


class TestContentKeys:
    def test_movement(self):
        state = make_state(focused=True)
        assert key_to_action("j", state) == SelectNext()
        assert key_to_action("up", state) == SelectPrevious()
        assert key_to_action("enter", state) == ActivateSelection()
        assert key_to_action("escape", state) == NavigateUp()

    def test_left_right_adjust_int_setting(self):
        state = make_state(tab=Tab.SETTINGS, focused=True)
        assert key_to_action("right", state) == AdjustSetting("refresh_interval", 1)
        assert key_to_action("left", state) == AdjustSetting("refresh_interval", -1)

    def test_left_right_do_nothing_elsewhere(self):
        assert key_to_action("right", make_state(focused=True)) is None


class TestHelpKeys:
    @pytest.fixture
    def help_state(self):
        state, _ = reduce(AppState(), ToggleHelp())
        return state

    def test_help_swallows_other_keys(self, help_state):
        for key in ("j", "down", "enter", "1", "r", "tab"):
            assert key_to_action(key, help_state) is None

    def test_help_can_close_or_quit(self, help_state):
        assert key_to_action("?", help_state) == ToggleHelp()
        assert key_to_action("escape", help_state) == NavigateUp()
        assert key_to_action("q", help_state) == Quit()

"""Tabs, focus, the help overlay, and backing out of nested views."""

from dataclasses import replace

from termdash.app.action import (
    EnterContentFocus,
    ExitContentFocus,
    NavigateTab,
    NavigateTabLeft,
    NavigateTabRight,
    NavigateUp,
    ToggleHelp,
)
from termdash.app.reducers import SubReducer
from termdash.app.state import AppState, NavigationState
from termdash.app.types import Tab
from termdash.core.effect import NONE


def _switch(state: AppState, tab: Tab):
    if tab == state.navigation.tab:
        return state, NONE
    # Switching tabs drops any open documents and hands focus back to the tab bar.
    navigation = replace(state.navigation, tab=tab, panels=(), content_focused=False)
    return replace(state, navigation=navigation), NONE


def _navigate_tab(state: AppState, action: NavigateTab):
    if not isinstance(action.tab, Tab):
        return state, NONE
    return _switch(state, action.tab)


def _tab_left(state: AppState, action):
    return _switch(state, state.navigation.tab.previous())


def _tab_right(state: AppState, action):
    return _switch(state, state.navigation.tab.next())


def _set_focus(state: AppState, focused: bool):
    if state.navigation.content_focused == focused:
        return state, NONE
    return replace(state, navigation=replace(state.navigation, content_focused=focused)), NONE


def _navigate_up(state: AppState, action):
    nav: NavigationState = state.navigation
    if nav.help_open:
        nav = replace(nav, help_open=False)
    elif nav.panels:
        nav = replace(nav, panels=nav.panels[:-1])
    elif nav.content_focused:
        nav = replace(nav, content_focused=False)
    else:
        return state, NONE
    return replace(state, navigation=nav), NONE


def _toggle_help(state: AppState, action):
    navigation = replace(state.navigation, help_open=not state.navigation.help_open)
    return replace(state, navigation=navigation), NONE


HANDLERS = {
    NavigateTab: _navigate_tab,
    NavigateTabLeft: _tab_left,
    NavigateTabRight: _tab_right,
    EnterContentFocus: lambda state, action: _set_focus(state, True),
    ExitContentFocus: lambda state, action: _set_focus(state, False),
    NavigateUp: _navigate_up,
    ToggleHelp: _toggle_help,
}

reducer = SubReducer("navigation", HANDLERS)

"""Key -> Action mapping, per input mode.

Key names are Textual's (event.key). Printable keys that Textual may report
by description are listed under both names, e.g. "?" and "question_mark".
This module only translates; it never touches State beyond reading it.
"""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum, auto

from termdash.app.action import (
    Action,
    ActivateSelection,
    AdjustSetting,
    EnterContentFocus,
    NavigateTab,
    NavigateTabLeft,
    NavigateTabRight,
    NavigateUp,
    Quit,
    RefreshData,
    SelectFirst,
    SelectLast,
    SelectNext,
    SelectPrevious,
    ToggleHelp,
)
from termdash.app.state import AppState, clamp_index
from termdash.app.types import SETTING_ROWS, SettingKind, Tab


class InputMode(Enum):
    """Input modes derived from navigation state."""

    HELP = auto()
    TAB_BAR = auto()
    CONTENT = auto()
    PANEL = auto()


def input_mode(state: AppState) -> InputMode:
    nav = state.navigation
    if nav.help_open:
        return InputMode.HELP
    if nav.panels:
        return InputMode.PANEL
    if nav.content_focused:
        return InputMode.CONTENT
    return InputMode.TAB_BAR


def _adjust_selected(delta: int) -> Callable[[AppState], Action | None]:
    def binding(state: AppState) -> Action | None:
        if state.navigation.tab is not Tab.SETTINGS:
            return None
        index = clamp_index(state.ui.settings_selected, len(SETTING_ROWS))
        if index is None or SETTING_ROWS[index].kind is not SettingKind.INT:
            return None
        return AdjustSetting(SETTING_ROWS[index].key, delta)

    return binding


Binding = Action | Callable[[AppState], Action | None]

_GLOBAL: dict[str, Binding] = {
    "q": Quit(),
    "?": ToggleHelp(),
    "question_mark": ToggleHelp(),
    "r": RefreshData(),
    "1": NavigateTab(Tab.FEED),
    "2": NavigateTab(Tab.STATS),
    "3": NavigateTab(Tab.SETTINGS),
    "tab": NavigateTabRight(),
    "shift+tab": NavigateTabLeft(),
}

_MOVEMENT: dict[str, Binding] = {
    "down": SelectNext(),
    "j": SelectNext(),
    "up": SelectPrevious(),
    "k": SelectPrevious(),
    "home": SelectFirst(),
    "g": SelectFirst(),
    "end": SelectLast(),
    "G": SelectLast(),
    "escape": NavigateUp(),
    "backspace": NavigateUp(),
}

# [LAW:one-source-of-truth] Key->action mapping per mode.
MODE_KEYMAP: dict[InputMode, dict[str, Binding]] = {
    InputMode.HELP: {
        "q": Quit(),
        "?": ToggleHelp(),
        "question_mark": ToggleHelp(),
        "escape": NavigateUp(),
    },
    InputMode.TAB_BAR: {
        **_GLOBAL,
        "left": NavigateTabLeft(),
        "h": NavigateTabLeft(),
        "right": NavigateTabRight(),
        "l": NavigateTabRight(),
        "down": EnterContentFocus(),
        "enter": EnterContentFocus(),
    },
    InputMode.CONTENT: {
        **_GLOBAL,
        **_MOVEMENT,
        "enter": ActivateSelection(),
        "space": ActivateSelection(),
        "left": _adjust_selected(-1),
        "h": _adjust_selected(-1),
        "right": _adjust_selected(1),
        "l": _adjust_selected(1),
    },
    InputMode.PANEL: {
        **_GLOBAL,
        **_MOVEMENT,
        "pageup": SelectFirst(),
        "pagedown": SelectLast(),
    },
}

HELP_LINES: tuple[str, ...] = (
    "1 2 3 / tab     switch tab",
    "←/→ h/l         move between tabs",
    "enter / ↓       focus content",
    "↑/↓ j/k         move selection / scroll",
    "g/G home/end    first / last",
    "enter / space   open entry, toggle setting",
    "←/→ on setting  adjust value",
    "esc             back",
    "r               refresh now",
    "?               toggle this help",
    "q               quit",
)


def key_to_action(key: str, state: AppState) -> Action | None:
    """Translate a key press into an Action, or None if the key is unbound here."""
    binding = MODE_KEYMAP[input_mode(state)].get(key)
    if binding is None:
        return None
    if callable(binding):
        return binding(state)
    return binding

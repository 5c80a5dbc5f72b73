"""Moving and activating the selection in whatever the user is looking at.

Targets, by what is on screen:
    EntryPanel on top -> detail scroll, delegated via ComponentMessage
    Feed tab          -> UiState.feed_selected over data.entries
    Settings tab      -> UiState.settings_selected over SETTING_ROWS
    Stats tab         -> nothing to select

Indexes are always clamped to the collection; an empty collection leaves
the selection at None.
"""

from dataclasses import replace

from termdash.app.action import (
    ActivateSelection,
    ComponentMessage,
    PushPanel,
    SelectFirst,
    SelectIndex,
    SelectLast,
    SelectNext,
    SelectPrevious,
    ToggleSetting,
)
from termdash.app.components.detail_panel import DETAIL_PATH, ScrollBy, ScrollTo, scroll_limit
from termdash.app.reducers import SubReducer
from termdash.app.state import AppState, clamp_index
from termdash.app.types import SETTING_ROWS, EntryPanel, SettingKind, Tab
from termdash.core.effect import NONE, Dispatch

_FIELDS = {
    Tab.FEED: "feed_selected",
    Tab.SETTINGS: "settings_selected",
}


def _collection_length(state: AppState, tab: Tab) -> int:
    if tab is Tab.FEED:
        return len(state.data.entries)
    if tab is Tab.SETTINGS:
        return len(SETTING_ROWS)
    return 0


def _target_index(current: int | None, action, length: int) -> int | None:
    if isinstance(action, SelectNext):
        wanted = 0 if current is None else current + 1
    elif isinstance(action, SelectPrevious):
        wanted = length - 1 if current is None else current - 1
    elif isinstance(action, SelectFirst):
        wanted = 0
    elif isinstance(action, SelectLast):
        wanted = length - 1
    else:
        wanted = action.index
    return clamp_index(wanted, length)


def _scroll_message(state: AppState, panel: EntryPanel, action):
    limit = scroll_limit(state, panel)
    if isinstance(action, SelectNext):
        return ScrollBy(1, limit)
    if isinstance(action, SelectPrevious):
        return ScrollBy(-1, limit)
    if isinstance(action, SelectFirst):
        return ScrollTo(0, limit)
    if isinstance(action, SelectLast):
        return ScrollTo(limit, limit)
    return ScrollTo(action.index, limit)


def _move(state: AppState, action):
    panel = state.navigation.top_panel
    if isinstance(panel, EntryPanel):
        return state, Dispatch(ComponentMessage(DETAIL_PATH, _scroll_message(state, panel, action)))

    field_name = _FIELDS.get(state.navigation.tab)
    if field_name is None:
        return state, NONE
    current = getattr(state.ui, field_name)
    index = _target_index(current, action, _collection_length(state, state.navigation.tab))
    if index == current:
        return state, NONE
    return replace(state, ui=replace(state.ui, **{field_name: index})), NONE


def _activate(state: AppState, action: ActivateSelection):
    if state.navigation.top_panel is not None:
        return state, NONE
    tab = state.navigation.tab
    if tab is Tab.FEED:
        index = clamp_index(state.ui.feed_selected, len(state.data.entries))
        if index is None:
            return state, NONE
        return state, Dispatch(PushPanel(EntryPanel(state.data.entries[index].id)))
    if tab is Tab.SETTINGS:
        index = clamp_index(state.ui.settings_selected, len(SETTING_ROWS))
        if index is None or SETTING_ROWS[index].kind is not SettingKind.BOOL:
            return state, NONE
        return state, Dispatch(ToggleSetting(SETTING_ROWS[index].key))
    return state, NONE


HANDLERS = {
    SelectNext: _move,
    SelectPrevious: _move,
    SelectIndex: _move,
    SelectFirst: _move,
    SelectLast: _move,
    ActivateSelection: _activate,
}

reducer = SubReducer("selection", HANDLERS)
